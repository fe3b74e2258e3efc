# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Marine constants and hydrostatic formulas at standard conditions."""

from units.dimension import ACCELERATION, DENSITY, LENGTH, PRESSURE, VOLUME
from units.quantity import Quantity
from units.si import expect_dimension

SEAWATER_DENSITY = 1025.0       # kg/m^3
STANDARD_GRAVITY = 9.81         # m/s^2
ATMOSPHERIC_PRESSURE = 101325.0  # Pa


def water_density() -> Quantity:
    return Quantity(SEAWATER_DENSITY, DENSITY)


def gravity() -> Quantity:
    return Quantity(STANDARD_GRAVITY, ACCELERATION)


def atmospheric_pressure() -> Quantity:
    return Quantity(ATMOSPHERIC_PRESSURE, PRESSURE)


def buoyancy_force(volume: Quantity) -> Quantity:
    """Archimedes force ``rho * g * V`` on a submerged volume."""
    expect_dimension(volume, VOLUME, "buoyancy_force")
    return water_density() * gravity() * volume


def pressure_at_depth(depth: Quantity) -> Quantity:
    """Absolute pressure ``p_atm + rho * g * h``."""
    expect_dimension(depth, LENGTH, "pressure_at_depth")
    return atmospheric_pressure() + water_density() * gravity() * depth
