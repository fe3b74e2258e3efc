# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Dimension-tagged physical quantities.

Provides the SI dimension vector, checked quantity arithmetic, named unit
constructors, tau-convention angles and marine formulas.
"""

from .dimension import (
    Dimension,
    DIMENSIONLESS,
    MASS,
    LENGTH,
    TIME,
    CURRENT,
    TEMPERATURE,
    AMOUNT,
    LUMINOSITY,
    VELOCITY,
    ACCELERATION,
    FORCE,
    ENERGY,
    POWER,
    PRESSURE,
    TORQUE,
    ANGULAR_VELOCITY,
    DENSITY,
    AREA,
    VOLUME,
)
from .quantity import Quantity, sin, cos, tan, sqrt, qabs
from .angle import Angle, TAU
from . import si, marine

__all__ = [
    "Dimension",
    "DIMENSIONLESS",
    "MASS",
    "LENGTH",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOSITY",
    "VELOCITY",
    "ACCELERATION",
    "FORCE",
    "ENERGY",
    "POWER",
    "PRESSURE",
    "TORQUE",
    "ANGULAR_VELOCITY",
    "DENSITY",
    "AREA",
    "VOLUME",
    "Quantity",
    "sin",
    "cos",
    "tan",
    "sqrt",
    "qabs",
    "Angle",
    "TAU",
    "si",
    "marine",
]
