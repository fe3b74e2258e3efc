# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Dimension-tagged quantities.

A :class:`Quantity` pairs a payload (a float or a ``numpy`` array, always in
SI base units) with a :class:`~units.dimension.Dimension`. Additive operations
and ordering comparisons require equal dimensions; products and quotients
combine them. Division by a zero payload follows IEEE semantics (``inf`` /
``nan``) rather than raising.
"""

from numbers import Number

import numpy as np

from core.errors import DimensionMismatchError
from units.dimension import DIMENSIONLESS, Dimension

_SCALARS = (Number, np.ndarray)


class Quantity:
    """Immutable value with an SI dimension.

    Attributes:
        value: Payload in SI base units.
        dimension (Dimension): Exponent vector.
    """

    __slots__ = ("_value", "_dimension")

    def __init__(self, value, dimension: Dimension = DIMENSIONLESS):
        if not isinstance(dimension, Dimension):
            raise TypeError(f"dimension must be a Dimension, got {type(dimension).__name__}")
        self._value = value
        self._dimension = dimension

    @property
    def value(self):
        return self._value

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    def mass_dim(self) -> int:
        return self._dimension.mass

    def length_dim(self) -> int:
        return self._dimension.length

    def time_dim(self) -> int:
        return self._dimension.time

    def is_dimensionless(self) -> bool:
        return self._dimension.is_dimensionless()

    def _with_value(self, value) -> "Quantity":
        """New instance of the same dimension. Subclasses keep their own type."""
        return Quantity(value, self._dimension)

    def _coerce(self, other, op: str) -> "Quantity":
        """Bare numbers count as dimensionless quantities."""
        if isinstance(other, Quantity):
            q = other
        elif isinstance(other, _SCALARS):
            q = Quantity(other)
        else:
            return None
        if q._dimension != self._dimension:
            raise DimensionMismatchError(self._dimension, q._dimension, op=op)
        return q

    def to(self, unit) -> float:
        """Express the value as a multiple of ``unit``.

        Args:
            unit: A unit constructor such as :func:`units.si.centimeters`, or a
                :class:`Quantity` giving one unit.

        Raises:
            DimensionMismatchError: If ``unit`` has a different dimension.
        """
        u = unit if isinstance(unit, Quantity) else unit(1.0)
        if u._dimension != self._dimension:
            raise DimensionMismatchError(self._dimension, u._dimension, op="to")
        return self._value / u._value

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        q = self._coerce(other, "+")
        if q is None:
            return NotImplemented
        return self._with_value(self._value + q._value)

    def __radd__(self, other):
        q = self._coerce(other, "+")
        if q is None:
            return NotImplemented
        return self._with_value(q._value + self._value)

    def __sub__(self, other):
        q = self._coerce(other, "-")
        if q is None:
            return NotImplemented
        return self._with_value(self._value - q._value)

    def __rsub__(self, other):
        q = self._coerce(other, "-")
        if q is None:
            return NotImplemented
        return self._with_value(q._value - self._value)

    def __neg__(self):
        return self._with_value(-self._value)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._with_value(abs(self._value))

    def __mul__(self, other):
        if isinstance(other, Quantity):
            return Quantity(self._value * other._value, self._dimension * other._dimension)
        if isinstance(other, _SCALARS):
            return self._with_value(self._value * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _SCALARS):
            return self._with_value(other * self._value)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            return Quantity(_ieee_divide(self._value, other._value),
                            self._dimension / other._dimension)
        if isinstance(other, _SCALARS):
            return self._with_value(_ieee_divide(self._value, other))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, _SCALARS):
            return Quantity(_ieee_divide(other, self._value), self._dimension.inverse())
        return NotImplemented

    def __pow__(self, p: int):
        return Quantity(self._value ** p, self._dimension ** p)

    def __float__(self) -> float:
        if not self.is_dimensionless():
            raise DimensionMismatchError(self._dimension, DIMENSIONLESS, op="float")
        return float(self._value)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._dimension == other._dimension and self._value == other._value

    def __hash__(self):
        return hash((self._value, self._dimension))

    def _compare(self, other, op: str):
        q = self._coerce(other, op)
        if q is None:
            return None
        return q._value

    def __lt__(self, other):
        v = self._compare(other, "<")
        return NotImplemented if v is None else self._value < v

    def __le__(self, other):
        v = self._compare(other, "<=")
        return NotImplemented if v is None else self._value <= v

    def __gt__(self, other):
        v = self._compare(other, ">")
        return NotImplemented if v is None else self._value > v

    def __ge__(self, other):
        v = self._compare(other, ">=")
        return NotImplemented if v is None else self._value >= v

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r}, {self._dimension})"

    def __str__(self):
        if self.is_dimensionless():
            return f"{self._value}"
        return f"{self._value} {self._dimension}"


def _ieee_divide(a, b):
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(a, b)


# ---------------------------------------------------------------------------
# Math functions
# ---------------------------------------------------------------------------

def _dimensionless_value(q, op: str):
    if isinstance(q, Quantity):
        if not q.is_dimensionless():
            raise DimensionMismatchError(q.dimension, DIMENSIONLESS, op=op)
        return q.value
    return q


def sin(angle):
    """Sine of an :class:`~units.angle.Angle` or dimensionless quantity."""
    return np.sin(_dimensionless_value(angle, "sin"))


def cos(angle):
    return np.cos(_dimensionless_value(angle, "cos"))


def tan(angle):
    return np.tan(_dimensionless_value(angle, "tan"))


def sqrt(q: Quantity) -> Quantity:
    """Square root; every dimension exponent must be even.

    Raises:
        DimensionMismatchError: If an exponent is odd.
    """
    try:
        dim = q.dimension.root(2)
    except ValueError:
        raise DimensionMismatchError(q.dimension, "even exponents", op="sqrt") from None
    with np.errstate(invalid="ignore"):
        return Quantity(np.sqrt(q.value), dim)


def qabs(q: Quantity) -> Quantity:
    """Absolute value; the dimension is kept."""
    return abs(q)
