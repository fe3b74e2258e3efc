# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Grade tags and grade arithmetic.

A grade is the rank of a geometric-algebra element in the 3-D algebra
Cl(3,0): scalar (0), vector (1), bivector (2), trivector (3). Anything that
cannot be pinned to a single one of those is tagged
:attr:`Grade.MULTIVECTOR`.

The rule functions below decide which operations are legal and which grade(s)
their result may carry. They are pure and total over ``{0, 1, 2, 3}``.
"""

from enum import Enum
from typing import FrozenSet, Optional, Union

MAX_GRADE = 3


class Grade(Enum):
    """Grade label of a geometric-algebra element."""

    SCALAR = 0
    VECTOR = 1
    BIVECTOR = 2
    TRIVECTOR = 3
    MULTIVECTOR = "multivector"

    @classmethod
    def from_arity(cls, arity: int) -> "Grade":
        """Grade of a blade with ``arity`` basis indices."""
        if 0 <= arity <= MAX_GRADE:
            return cls(arity)
        return cls.MULTIVECTOR

    @property
    def rank(self) -> Optional[int]:
        """Integer grade, or ``None`` for a general multivector."""
        if self is Grade.MULTIVECTOR:
            return None
        return self.value

    @property
    def is_homogeneous(self) -> bool:
        return self is not Grade.MULTIVECTOR

    def __str__(self) -> str:
        return self.name.lower()


GradeLike = Union[Grade, int]


def as_grade(g: GradeLike) -> Grade:
    """Coerce an int 0..3 or a :class:`Grade` into a :class:`Grade`.

    Raises:
        ValueError: If ``g`` is an int outside ``0..3``.
        TypeError: If ``g`` is neither an int nor a Grade.
    """
    if isinstance(g, Grade):
        return g
    if isinstance(g, bool) or not isinstance(g, int):
        raise TypeError(f"Expected Grade or int, got {type(g).__name__}")
    if not 0 <= g <= MAX_GRADE:
        raise ValueError(f"Grade must be in 0..{MAX_GRADE}, got {g}")
    return Grade(g)


def outer_product_grade(g1: GradeLike, g2: GradeLike) -> Grade:
    """Result grade of the outer (wedge) product: ``g1 + g2``.

    Sums above 3 have no homogeneous home in Cl(3,0) and map to
    :attr:`Grade.MULTIVECTOR`.
    """
    g1, g2 = as_grade(g1), as_grade(g2)
    if not (g1.is_homogeneous and g2.is_homogeneous):
        return Grade.MULTIVECTOR
    return Grade.from_arity(g1.rank + g2.rank)


def inner_product_grade(g1: GradeLike, g2: GradeLike) -> Grade:
    """Result grade of the inner product: ``|g1 - g2|``."""
    g1, g2 = as_grade(g1), as_grade(g2)
    if not (g1.is_homogeneous and g2.is_homogeneous):
        return Grade.MULTIVECTOR
    return Grade.from_arity(abs(g1.rank - g2.rank))


# Grades that can appear in the geometric product of two homogeneous
# elements of Cl(3,0). Products with a scalar are handled separately.
_GEOMETRIC_PRODUCT_TABLE = {
    (1, 1): (0, 2),
    (1, 2): (1, 3),
    (1, 3): (2,),
    (2, 1): (1, 3),
    (2, 2): (0, 2),
    (2, 3): (1,),
    (3, 1): (2,),
    (3, 2): (1,),
    (3, 3): (0, 2),
}


def geometric_product_grades(g1: GradeLike, g2: GradeLike) -> FrozenSet[Grade]:
    """Set of grades that may appear in the geometric product ``g1 * g2``."""
    g1, g2 = as_grade(g1), as_grade(g2)
    if not (g1.is_homogeneous and g2.is_homogeneous):
        return frozenset({Grade.MULTIVECTOR})
    if g1 is Grade.SCALAR:
        return frozenset({g2})
    if g2 is Grade.SCALAR:
        return frozenset({g1})
    ranks = _GEOMETRIC_PRODUCT_TABLE.get((g1.rank, g2.rank))
    if ranks is None:
        return frozenset({Grade.MULTIVECTOR})
    return frozenset(Grade(r) for r in ranks)


def can_add(g1: GradeLike, g2: GradeLike) -> bool:
    """Addition is legal only between identical grades."""
    return as_grade(g1) is as_grade(g2)
