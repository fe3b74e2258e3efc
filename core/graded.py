# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Grade-tagged value wrappers.

:class:`GradeIndexed` carries an arbitrary payload (a number, a tensor, a
:class:`~core.term.GATerm`) together with a grade fixed by its subclass::

    v = VectorValue(vector([(1, 2.0)]))
    w = VectorValue(vector([(2, 1.0)]))
    v + w                     # VectorValue
    v + BivectorValue(...)    # GradeMismatchError

The tag check is a class comparison made before the payloads are touched.
"""

from dataclasses import dataclass
from numbers import Number
from typing import Any

from core.errors import GradeMismatchError
from core.grade import (
    Grade,
    GradeLike,
    as_grade,
    can_add,
    inner_product_grade,
    outer_product_grade,
)
from core.term import GATerm


class GradeIndexed:
    """Payload tagged with the grade of its class."""

    __slots__ = ("_value",)
    GRADE: Grade = Grade.MULTIVECTOR

    def __init__(self, value: Any):
        if isinstance(value, GATerm) and value.grade is not self.GRADE:
            raise GradeMismatchError(value.grade, self.GRADE, op="wrap")
        self._value = value

    @property
    def value(self):
        return self._value

    @property
    def grade(self) -> Grade:
        return self.GRADE

    def __add__(self, other):
        if not isinstance(other, GradeIndexed):
            return NotImplemented
        return safe_add(self, other)

    def __mul__(self, s):
        if isinstance(s, Number):
            return safe_scalar_multiply(s, self)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, GradeIndexed):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class ScalarValue(GradeIndexed):
    __slots__ = ()
    GRADE = Grade.SCALAR


class VectorValue(GradeIndexed):
    __slots__ = ()
    GRADE = Grade.VECTOR


class BivectorValue(GradeIndexed):
    __slots__ = ()
    GRADE = Grade.BIVECTOR


class TrivectorValue(GradeIndexed):
    __slots__ = ()
    GRADE = Grade.TRIVECTOR


class MultivectorValue(GradeIndexed):
    __slots__ = ()
    GRADE = Grade.MULTIVECTOR


GRADED_CLASSES = {
    cls.GRADE: cls
    for cls in (ScalarValue, VectorValue, BivectorValue, TrivectorValue, MultivectorValue)
}


def graded_class(g: GradeLike) -> type:
    """The :class:`GradeIndexed` subclass tagged with grade ``g``."""
    return GRADED_CLASSES[g if isinstance(g, Grade) else as_grade(g)]


def graded(term: GATerm) -> GradeIndexed:
    """Wrap a term in the graded class matching its variant."""
    return graded_class(term.grade)(term)


# ---------------------------------------------------------------------------
# Safe operations
# ---------------------------------------------------------------------------

def safe_add(lhs: GradeIndexed, rhs: GradeIndexed) -> GradeIndexed:
    """Add two values of identical grade class.

    Raises:
        GradeMismatchError: If the classes differ.
    """
    if type(lhs) is not type(rhs):
        raise GradeMismatchError(lhs.GRADE, rhs.GRADE, op="add")
    return type(lhs)(lhs.value + rhs.value)


def safe_scalar_multiply(s, operand: GradeIndexed) -> GradeIndexed:
    """Scale the payload; the grade class is preserved."""
    return type(operand)(operand.value * s)


def _term_payloads(lhs: GradeIndexed, rhs: GradeIndexed, op: str):
    if not (isinstance(lhs.value, GATerm) and isinstance(rhs.value, GATerm)):
        raise TypeError(f"{op} needs GATerm payloads, got "
                        f"{type(lhs.value).__name__} and {type(rhs.value).__name__}")
    return lhs.value, rhs.value


def safe_outer_product(lhs: GradeIndexed, rhs: GradeIndexed) -> GradeIndexed:
    """Outer product of two term payloads, tagged ``outer_product_grade(g1, g2)``."""
    from core.products import outer_product
    a, b = _term_payloads(lhs, rhs, "outer_product")
    return graded_class(outer_product_grade(lhs.GRADE, rhs.GRADE))(outer_product(a, b))


def safe_inner_product(lhs: GradeIndexed, rhs: GradeIndexed) -> GradeIndexed:
    """Inner product of two term payloads, tagged ``inner_product_grade(g1, g2)``."""
    from core.products import inner_product
    a, b = _term_payloads(lhs, rhs, "inner_product")
    return graded_class(inner_product_grade(lhs.GRADE, rhs.GRADE))(inner_product(a, b))


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, init=False)
class OperationMatrix:
    """Legality and result grade of each binary operation for a grade pair."""

    lhs: Grade
    rhs: Grade

    def __init__(self, g1: GradeLike, g2: GradeLike):
        object.__setattr__(self, "lhs", as_grade(g1))
        object.__setattr__(self, "rhs", as_grade(g2))

    @classmethod
    def of(cls, a: GradeIndexed, b: GradeIndexed) -> "OperationMatrix":
        return cls(a.GRADE, b.GRADE)

    @property
    def can_add(self) -> bool:
        return can_add(self.lhs, self.rhs)

    @property
    def can_geometric_product(self) -> bool:
        return True

    @property
    def can_outer_product(self) -> bool:
        return True

    @property
    def can_inner_product(self) -> bool:
        return True

    @property
    def outer_product_result(self) -> Grade:
        return outer_product_grade(self.lhs, self.rhs)

    @property
    def inner_product_result(self) -> Grade:
        return inner_product_grade(self.lhs, self.rhs)


class TypeInspector:
    """Predicates over graded values and :class:`GradeIndexed` subclasses."""

    @staticmethod
    def _grade(x) -> Grade:
        if isinstance(x, type) and issubclass(x, GradeIndexed):
            return x.GRADE
        return x.grade

    @staticmethod
    def is_grade_indexed(x) -> bool:
        if isinstance(x, type):
            return issubclass(x, GradeIndexed)
        return isinstance(x, GradeIndexed)

    @classmethod
    def grade(cls, x) -> Grade:
        return cls._grade(x)

    @classmethod
    def is_scalar(cls, x) -> bool:
        return cls._grade(x) is Grade.SCALAR

    @classmethod
    def is_vector(cls, x) -> bool:
        return cls._grade(x) is Grade.VECTOR

    @classmethod
    def is_bivector(cls, x) -> bool:
        return cls._grade(x) is Grade.BIVECTOR

    @classmethod
    def is_trivector(cls, x) -> bool:
        return cls._grade(x) is Grade.TRIVECTOR

    @classmethod
    def is_multivector(cls, x) -> bool:
        return cls._grade(x) is Grade.MULTIVECTOR
