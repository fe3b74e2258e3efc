# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Products of sparse terms, evaluated on the dense Cl(3,0) kernel.

A term is scattered into an 8-component tensor, multiplied with
:class:`~core.algebra.CliffordAlgebra`, and gathered back. The variant of the
result is the one named by the grade tables in :mod:`core.grade` whenever
that table pins a single homogeneous grade; otherwise the result is a
:class:`~core.term.MultivectorTerm`.

Only indices ``1..3`` exist in the dense algebra; anything else raises
:class:`~core.errors.IndexOutOfRangeError`.
"""

from typing import Optional

import torch

from core.algebra import CliffordAlgebra, default_algebra
from core.grade import (
    Grade,
    GradeLike,
    as_grade,
    geometric_product_grades,
    inner_product_grade,
    outer_product_grade,
)
from core.term import (
    BladeTerm,
    BivectorTerm,
    GATerm,
    MultivectorTerm,
    ScalarTerm,
    TrivectorTerm,
    VectorTerm,
)
from core.validation import check_grade_pure

VARIANT_BY_GRADE = {
    Grade.SCALAR: ScalarTerm,
    Grade.VECTOR: VectorTerm,
    Grade.BIVECTOR: BivectorTerm,
    Grade.TRIVECTOR: TrivectorTerm,
    Grade.MULTIVECTOR: MultivectorTerm,
}


def to_dense(term: GATerm, algebra: Optional[CliffordAlgebra] = None) -> torch.Tensor:
    """Scatter a term into a dense coefficient tensor of shape ``[dim]``."""
    algebra = algebra or default_algebra()
    mv = algebra.zeros()
    for key, coeff in term.entries():
        mv[algebra.blade_index(key)] += float(coeff)
    return mv


def from_dense(mv: torch.Tensor,
               grade: GradeLike = Grade.MULTIVECTOR,
               algebra: Optional[CliffordAlgebra] = None,
               atol: float = 0.0) -> GATerm:
    """Gather a dense tensor back into a term of the variant for ``grade``.

    Components with ``|c| <= atol`` are dropped; ``nan`` and ``inf`` are kept.
    Entries are ordered by grade, then by ascending basis indices.

    Args:
        mv (torch.Tensor): Dense coefficients ``[dim]``.
        grade: Variant to build. A homogeneous grade keeps only that grade's
            components; ``Grade.MULTIVECTOR`` keeps everything.
        algebra: Algebra the tensor belongs to.
        atol (float): Magnitude at or below which a component counts as zero.

    Returns:
        GATerm: The sparse term.
    """
    algebra = algebra or default_algebra()
    g = grade if isinstance(grade, Grade) else as_grade(grade)
    if g is Grade.SCALAR:
        return ScalarTerm(mv[0].item())

    order = sorted(range(algebra.dim),
                   key=lambda m: (algebra.blade_grade(m), algebra.blade_indices(m)))
    entries = []
    for mask in order:
        if g.is_homogeneous and algebra.blade_grade(mask) != g.rank:
            continue
        c = mv[mask].item()
        if not abs(c) <= atol:
            entries.append((algebra.blade_indices(mask), c))

    if g is Grade.MULTIVECTOR:
        return MultivectorTerm(tuple(BladeTerm(k, c) for k, c in entries))
    return VARIANT_BY_GRADE[g](tuple(k + (c,) for k, c in entries))


def _result_grade(grades) -> Grade:
    if len(grades) == 1:
        (g,) = grades
        return g
    return Grade.MULTIVECTOR


def _finish(mv: torch.Tensor, g: Grade, algebra: CliffordAlgebra, op: str) -> GATerm:
    if g.is_homogeneous:
        check_grade_pure(mv, algebra, g.rank, name=op)
    return from_dense(mv, g, algebra)


def geometric_product(lhs: GATerm, rhs: GATerm,
                      algebra: Optional[CliffordAlgebra] = None) -> GATerm:
    """Geometric product ``lhs * rhs``.

    Homogeneous only when the grade table allows a single grade (a scalar
    factor, or vector times trivector and similar); otherwise a multivector.
    """
    algebra = algebra or default_algebra()
    mv = algebra.geometric_product(to_dense(lhs, algebra), to_dense(rhs, algebra))
    g = _result_grade(geometric_product_grades(lhs.grade, rhs.grade))
    return _finish(mv, g, algebra, "geometric_product")


def outer_product(lhs: GATerm, rhs: GATerm,
                  algebra: Optional[CliffordAlgebra] = None) -> GATerm:
    """Outer (wedge) product ``lhs ^ rhs``, of grade ``g1 + g2``."""
    algebra = algebra or default_algebra()
    mv = algebra.wedge(to_dense(lhs, algebra), to_dense(rhs, algebra))
    g = outer_product_grade(lhs.grade, rhs.grade)
    return _finish(mv, g, algebra, "outer_product")


def inner_product(lhs: GATerm, rhs: GATerm,
                  algebra: Optional[CliffordAlgebra] = None) -> GATerm:
    """Inner product ``lhs | rhs``, of grade ``|g1 - g2|``."""
    algebra = algebra or default_algebra()
    mv = algebra.inner_product(to_dense(lhs, algebra), to_dense(rhs, algebra))
    g = inner_product_grade(lhs.grade, rhs.grade)
    return _finish(mv, g, algebra, "inner_product")


def reverse(term: GATerm, algebra: Optional[CliffordAlgebra] = None) -> GATerm:
    """Reversion ``~term``; bivectors and trivectors change sign."""
    algebra = algebra or default_algebra()
    return from_dense(algebra.reverse(to_dense(term, algebra)), term.grade, algebra)


def grade_projection(term: GATerm, grade: GradeLike,
                     algebra: Optional[CliffordAlgebra] = None) -> GATerm:
    """The grade-``grade`` part of ``term`` as a term of that variant."""
    algebra = algebra or default_algebra()
    g = as_grade(grade)
    mv = to_dense(term, algebra)
    if g.is_homogeneous:
        mv = algebra.grade_projection(mv, g.rank)
    return from_dense(mv, g, algebra)
