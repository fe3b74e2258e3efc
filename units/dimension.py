# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""SI dimension vectors.

A :class:`Dimension` is an immutable 7-tuple of integer exponents over the
base quantities (mass, length, time, current, temperature, amount,
luminosity). Multiplying quantities adds exponents, dividing subtracts them.
"""

from dataclasses import dataclass, fields
from typing import Tuple

_SYMBOLS = ("kg", "m", "s", "A", "K", "mol", "cd")


@dataclass(frozen=True)
class Dimension:
    """Exponent vector ``M^a L^b T^c I^d Th^e N^f J^g``."""

    mass: int = 0
    length: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminosity: int = 0

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __iter__(self):
        return iter(self.as_tuple())

    def __mul__(self, other: "Dimension") -> "Dimension":
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a + b for a, b in zip(self, other)))

    def __truediv__(self, other: "Dimension") -> "Dimension":
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a - b for a, b in zip(self, other)))

    def __pow__(self, p: int) -> "Dimension":
        if isinstance(p, bool) or not isinstance(p, int):
            raise TypeError(f"Dimension exponent must be an int, got {type(p).__name__}")
        return Dimension(*(a * p for a in self))

    def inverse(self) -> "Dimension":
        return self ** -1

    def root(self, n: int) -> "Dimension":
        """Exponents divided by ``n``; every exponent must divide evenly."""
        if any(a % n for a in self):
            raise ValueError(f"Cannot take root {n} of dimension {self}")
        return Dimension(*(a // n for a in self))

    def is_dimensionless(self) -> bool:
        return not any(self.as_tuple())

    def __str__(self) -> str:
        parts = []
        for sym, e in zip(_SYMBOLS, self):
            if e == 1:
                parts.append(sym)
            elif e:
                parts.append(f"{sym}^{e}")
        return "·".join(parts) if parts else "1"


DIMENSIONLESS = Dimension()
MASS = Dimension(mass=1)
LENGTH = Dimension(length=1)
TIME = Dimension(time=1)
CURRENT = Dimension(current=1)
TEMPERATURE = Dimension(temperature=1)
AMOUNT = Dimension(amount=1)
LUMINOSITY = Dimension(luminosity=1)

VELOCITY = LENGTH / TIME
ACCELERATION = VELOCITY / TIME
FORCE = MASS * ACCELERATION
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
AREA = LENGTH ** 2
VOLUME = LENGTH ** 3
PRESSURE = FORCE / AREA
TORQUE = ENERGY
ANGULAR_VELOCITY = DIMENSIONLESS / TIME
DENSITY = MASS / VOLUME
