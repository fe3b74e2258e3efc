# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Lightweight input validation for dense multivector tensors.

All checks use ``assert`` so they are free under ``python -O``.
Set ``VALIDATE = False`` to disable even without the -O flag.
"""

import torch

VALIDATE = True


def check_multivector(x: torch.Tensor, algebra, name: str = "x") -> None:
    """Assert *x* looks like a multivector for *algebra*.

    Checks ``x.ndim >= 1`` and ``x.shape[-1] == algebra.dim``.
    """
    if not VALIDATE:
        return
    assert x.ndim >= 1, (
        f"{name}: expected ndim >= 1, got shape {tuple(x.shape)}"
    )
    assert x.shape[-1] == algebra.dim, (
        f"{name}: last dim should be {algebra.dim} (algebra dim), "
        f"got {x.shape[-1]} (shape {tuple(x.shape)})"
    )


def check_grade_pure(x: torch.Tensor, algebra, grade: int, name: str = "x",
                     atol: float = 1e-12) -> None:
    """Assert every non-negligible component of *x* has grade *grade*."""
    if not VALIDATE:
        return
    check_multivector(x, algebra, name)
    if not 0 <= grade <= algebra.n:
        stray = x.abs().max().item() if x.numel() else 0.0
    else:
        off = x[..., ~algebra.grade_masks[grade]]
        stray = off.abs().max().item() if off.numel() else 0.0
    assert stray <= atol, (
        f"{name}: expected pure grade {grade}, found off-grade component "
        f"of magnitude {stray:.3e}"
    )
