# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Angles in the tau convention (one full turn = tau = 2 pi radians)."""

import math

import numpy as np

from units.dimension import DIMENSIONLESS
from units.quantity import Quantity

TAU = 2.0 * math.pi


class Angle(Quantity):
    """Dimensionless quantity stored in radians.

    Same-dimension arithmetic (``+``, ``-``, negation, scaling by a number)
    returns an :class:`Angle`; products with other quantities fall back to a
    plain :class:`Quantity`.
    """

    __slots__ = ()

    def __init__(self, radians=0.0):
        super().__init__(radians, DIMENSIONLESS)

    def _with_value(self, value) -> "Angle":
        return Angle(value)

    @classmethod
    def from_radians(cls, radians) -> "Angle":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees) -> "Angle":
        return cls(degrees * TAU / 360.0)

    @classmethod
    def from_turns(cls, turns) -> "Angle":
        return cls(turns * TAU)

    @classmethod
    def zero(cls) -> "Angle":
        return cls(0.0)

    @classmethod
    def quarter_turn(cls) -> "Angle":
        return cls(TAU / 4.0)

    @classmethod
    def half_turn(cls) -> "Angle":
        return cls(TAU / 2.0)

    @classmethod
    def full_turn(cls) -> "Angle":
        return cls(TAU)

    @property
    def radians(self):
        return self.value

    @property
    def degrees(self):
        return self.value * 360.0 / TAU

    @property
    def turns(self):
        return self.value / TAU

    def normalized(self) -> "Angle":
        """Equivalent angle in ``[0, tau)``, elementwise for array payloads.

        ``nan`` and ``inf`` normalise to ``nan``.
        """
        with np.errstate(invalid="ignore"):
            r = np.fmod(self.value, TAU)
            r = np.where(r < 0.0, r + TAU, r)
            # fmod of a tiny negative can round up to exactly tau
            r = np.where(r >= TAU, 0.0, r)
        return Angle(float(r) if r.ndim == 0 else r)

    def sin(self):
        return np.sin(self.value)

    def cos(self):
        return np.cos(self.value)

    def tan(self):
        return np.tan(self.value)

    def __repr__(self):
        return f"Angle({self.value!r})"
