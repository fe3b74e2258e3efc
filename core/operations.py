# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Pattern-dispatched operations on :class:`~core.term.GATerm`.

Every function here is written once per variant through
:func:`~core.term.match_term`; none of them mutate their inputs.
"""

import math
from typing import Any, Callable

from core.errors import GradeMismatchError
from core.term import (
    BladeTerm,
    BivectorTerm,
    GATerm,
    MultivectorTerm,
    ScalarTerm,
    TrivectorTerm,
    VectorTerm,
    match_term,
    merge_entries,
)


def _keyed(components, arity):
    return [(tuple(c[:arity]), c[arity]) for c in components]


def add(lhs: GATerm, rhs: GATerm) -> GATerm:
    """Sum two terms of the same grade, merging coefficients by basis key.

    The lhs list is copied; each rhs entry is summed into the entry with the
    same key or appended. The result never holds more entries than
    ``len(lhs) + len(rhs)``.

    Args:
        lhs: Left operand.
        rhs: Right operand.

    Returns:
        New term of the shared variant.

    Raises:
        GradeMismatchError: If the variants differ. Nothing is merged.
    """
    if lhs.grade is not rhs.grade:
        raise GradeMismatchError(lhs.grade, rhs.grade, op="add")

    def fixed(variant, arity):
        def handler(components):
            merged = merge_entries(_keyed(rhs.components, arity),
                                   into=_keyed(components, arity))
            return variant(tuple(k + (c,) for k, c in merged))
        return handler

    def blades(lhs_blades):
        merged = merge_entries(((b.indices, b.coefficient) for b in rhs.blades),
                               into=[(b.indices, b.coefficient) for b in lhs_blades])
        return MultivectorTerm(tuple(BladeTerm(k, c) for k, c in merged))

    return match_term(
        lhs,
        lambda value: ScalarTerm(value + rhs.value),
        fixed(VectorTerm, 1),
        fixed(BivectorTerm, 2),
        fixed(TrivectorTerm, 3),
        blades,
    )


def scalar_multiply(s, term: GATerm) -> GATerm:
    """Multiply every coefficient by ``s``. Keys and variant are unchanged."""
    return term_map(term, lambda c: c * s)


def norm(term: GATerm) -> float:
    """Euclidean norm ``sqrt(sum(c**2))``; for a scalar this is ``abs(v)``."""
    if isinstance(term, ScalarTerm):
        return abs(term.value)
    return math.sqrt(term_fold(term, 0.0, lambda acc, c: acc + c * c))


def format_coefficient(c) -> str:
    """Integral floats print without a trailing ``.0`` (``2.0 -> '2'``)."""
    if isinstance(c, float) and math.isfinite(c) and c.is_integer():
        return str(int(c))
    return str(c)


def _blade_label(indices) -> str:
    if not indices:
        return "1"
    return "".join(f"e{i}" for i in indices)


def to_string(term: GATerm) -> str:
    """Human-readable rendering, e.g. ``Vector(e1:2, e2:3)``."""
    def listing(name, arity):
        def handler(components):
            parts = ", ".join(
                f"{_blade_label(k)}:{format_coefficient(c)}"
                for k, c in _keyed(components, arity)
            )
            return f"{name}({parts})"
        return handler

    return match_term(
        term,
        lambda value: f"Scalar({format_coefficient(value)})",
        listing("Vector", 1),
        listing("Bivector", 2),
        listing("Trivector", 3),
        lambda blades: "Multivector({})".format(", ".join(
            f"{_blade_label(b.indices)}:{format_coefficient(b.coefficient)}"
            for b in blades
        )),
    )


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

def term_map(term: GATerm, fn: Callable[[Any], Any]) -> GATerm:
    """Apply ``fn`` to every coefficient, keeping keys and variant."""
    def fixed(variant):
        return lambda comps: variant(tuple(c[:-1] + (fn(c[-1]),) for c in comps))

    return match_term(
        term,
        lambda value: ScalarTerm(fn(value)),
        fixed(VectorTerm),
        fixed(BivectorTerm),
        fixed(TrivectorTerm),
        lambda blades: MultivectorTerm(
            tuple(BladeTerm(b.indices, fn(b.coefficient)) for b in blades)
        ),
    )


def term_filter(term: GATerm, predicate: Callable[[Any], bool]) -> GATerm:
    """Keep the entries whose coefficient satisfies ``predicate``.

    A scalar has nothing to drop and is returned unchanged.
    """
    def fixed(variant):
        return lambda comps: variant(tuple(c for c in comps if predicate(c[-1])))

    return match_term(
        term,
        lambda value: term,
        fixed(VectorTerm),
        fixed(BivectorTerm),
        fixed(TrivectorTerm),
        lambda blades: MultivectorTerm(
            tuple(b for b in blades if predicate(b.coefficient))
        ),
    )


def term_fold(term: GATerm, initial, fn: Callable[[Any, Any], Any]):
    """Left fold of ``fn(acc, coeff)`` over the coefficients in order."""
    acc = initial
    for c in term.coefficients():
        acc = fn(acc, c)
    return acc
