# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

import torch

from core.errors import IndexOutOfRangeError


def _reorder_sign(a: int, b: int) -> int:
    """Sign from moving the basis vectors of blade ``b`` past those of ``a``."""
    a >>= 1
    swaps = 0
    while a:
        swaps += bin(a & b).count('1')
        a >>= 1
    return -1 if swaps & 1 else 1


class CliffordAlgebra:
    """Dense Clifford algebra kernel over bitmask-indexed basis blades.

    Basis vector ``e_i`` (1-based) is bit ``i - 1`` of the blade index, so in
    Cl(3,0) the eight components are ordered
    ``1, e1, e2, e1e2, e3, e1e3, e2e3, e1e2e3``.

    Tables are computed once per ``(p, q, device, dtype)`` and shared.

    Attributes:
        p (int): Positive signature dimensions.
        q (int): Negative signature dimensions.
        n (int): Total dimensions (p + q).
        dim (int): Total basis elements (2^n).
        device (str): Computation device.
        dtype (torch.dtype): Coefficient dtype.
    """
    _CACHED_TABLES = {}

    def __init__(self, p: int = 3, q: int = 0, device='cpu', dtype=torch.float64):
        """Initialize the algebra and cache the Cayley table.

        Args:
            p (int, optional): Positive dimensions (+1). Defaults to 3.
            q (int, optional): Negative dimensions (-1). Defaults to 0.
            device (str, optional): Computation device. Defaults to 'cpu'.
            dtype (torch.dtype, optional): Coefficient dtype. Defaults to float64.
        """
        assert p >= 0, f"p must be non-negative, got {p}"
        assert q >= 0, f"q must be non-negative, got {q}"
        assert p + q <= 8, f"p + q must be <= 8, got {p + q}"

        self.p, self.q = p, q
        self.n = p + q
        self.dim = 2 ** self.n
        self.device = device
        self.dtype = dtype

        cache_key = (p, q, str(device), dtype)
        if cache_key not in CliffordAlgebra._CACHED_TABLES:
            CliffordAlgebra._CACHED_TABLES[cache_key] = self._generate_cayley_table()

        (
            self.cayley_indices,
            self.gp_signs,
            self.grade_masks,
            self.rev_signs,
        ) = CliffordAlgebra._CACHED_TABLES[cache_key]

    @property
    def num_grades(self) -> int:
        """Counts the number of grades (n + 1)."""
        return self.n + 1

    def _generate_cayley_table(self):
        """Precompute the Cayley table, grade masks, and reversion signs."""
        indices = torch.arange(self.dim, device=self.device)

        # Result index = A XOR B
        cayley_indices = indices.unsqueeze(0) ^ indices.unsqueeze(1)

        # Bits p..n-1 square to -1
        q_mask = ((1 << self.n) - 1) ^ ((1 << self.p) - 1)
        signs = torch.empty(self.dim, self.dim, dtype=self.dtype, device=self.device)
        for a in range(self.dim):
            for b in range(self.dim):
                metric = -1 if bin(a & b & q_mask).count('1') & 1 else 1
                signs[a, b] = _reorder_sign(a, b) * metric

        # gp_signs[i, k] = sign of e_i * e_(i ^ k), aligned with B[..., cayley[i, k]]
        gp_signs = torch.gather(signs, 1, cayley_indices)

        grade_masks = [
            torch.tensor([bin(i).count('1') == k for i in range(self.dim)],
                         dtype=torch.bool, device=self.device)
            for k in range(self.n + 1)
        ]

        # Reversion: blade of grade k picks up (-1)^(k(k-1)/2)
        rev_signs = torch.tensor(
            [(-1) ** (k * (k - 1) // 2) for k in (bin(i).count('1') for i in range(self.dim))],
            dtype=self.dtype, device=self.device,
        )
        return cayley_indices, gp_signs, grade_masks, rev_signs

    # ------------------------------------------------------------------
    # Blade indexing
    # ------------------------------------------------------------------

    def blade_index(self, indices) -> int:
        """Bitmask of the basis blade with 1-based ``indices``.

        Raises:
            IndexOutOfRangeError: If an index lies outside ``1..n``.
        """
        mask = 0
        for i in indices:
            if not 1 <= i <= self.n:
                raise IndexOutOfRangeError(
                    f"Basis index {i} outside 1..{self.n} for Cl({self.p},{self.q})"
                )
            mask |= 1 << (i - 1)
        return mask

    def blade_indices(self, mask: int) -> tuple:
        """Ascending 1-based basis indices of the blade at bitmask ``mask``."""
        return tuple(bit + 1 for bit in range(self.n) if mask & (1 << bit))

    def blade_grade(self, mask: int) -> int:
        return bin(mask).count('1')

    def zeros(self, *batch_shape) -> torch.Tensor:
        return torch.zeros(*batch_shape, self.dim, dtype=self.dtype, device=self.device)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def geometric_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the Geometric Product.

        Args:
            A (torch.Tensor): Left operand [..., Dim].
            B (torch.Tensor): Right operand [..., Dim].

        Returns:
            torch.Tensor: The product AB [..., Dim].
        """
        from core.validation import check_multivector
        check_multivector(A, self, "geometric_product(A)")
        check_multivector(B, self, "geometric_product(B)")

        # result[..., k] = sum_i A[..., i] * B[..., i ^ k] * sign(e_i, e_(i^k))
        B_gathered = B[..., self.cayley_indices]  # [..., D, D]
        A_col = A.unsqueeze(-1)
        terms = A_col * B_gathered * self.gp_signs
        # A zero coefficient is an absent blade: 0 * inf contributes 0, not nan
        absent = (A_col == 0) | (B_gathered == 0)
        terms = torch.where(absent, torch.zeros_like(terms), terms)
        return terms.sum(dim=-2)

    def grade_projection(self, mv: torch.Tensor, grade: int) -> torch.Tensor:
        """Isolates a specific grade.

        Grades outside ``0..n`` project to zero.

        Args:
            mv (torch.Tensor): Multivector.
            grade (int): Target grade.

        Returns:
            torch.Tensor: Projected multivector.
        """
        if not 0 <= grade <= self.n:
            return torch.zeros_like(mv)
        mask = self.grade_masks[grade]
        result = torch.zeros_like(mv)
        result[..., mask] = mv[..., mask]
        return result

    def reverse(self, mv: torch.Tensor) -> torch.Tensor:
        """Computes the reversion.

        Args:
            mv (torch.Tensor): Input multivector.

        Returns:
            torch.Tensor: Reversed multivector.
        """
        return mv * self.rev_signs.to(dtype=mv.dtype)

    def _graded_product(self, A: torch.Tensor, B: torch.Tensor, select) -> torch.Tensor:
        """Sum over grade pairs (r, s) of ``<A_r B_s>_select(r, s)``."""
        result = torch.zeros_like(A)
        for r in range(self.num_grades):
            A_r = self.grade_projection(A, r)
            if not torch.any(A_r != 0):
                continue
            for s in range(self.num_grades):
                B_s = self.grade_projection(B, s)
                if not torch.any(B_s != 0):
                    continue
                prod = self.geometric_product(A_r, B_s)
                result = result + self.grade_projection(prod, select(r, s))
        return result

    def wedge(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the outer product: A ^ B = sum <A_r B_s>_(r+s).

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: Outer product A ^ B [..., dim].
        """
        return self._graded_product(A, B, lambda r, s: r + s)

    def inner_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the inner product: A . B = sum <A_r B_s>_|r-s|.

        Scalars are included, so ``s . B = s B``.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: Inner product [..., dim].
        """
        return self._graded_product(A, B, lambda r, s: abs(r - s))


_DEFAULT = None


def default_algebra() -> CliffordAlgebra:
    """Shared Cl(3,0) float64 CPU algebra used by the term products."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = CliffordAlgebra(p=3, q=0, device='cpu', dtype=torch.float64)
    return _DEFAULT
