# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Named unit constructors.

Each constructor scales its argument into SI base units and tags it with the
matching dimension, e.g. ``kilometers(1.5).value == 1500.0``. Angle units
return :class:`~units.angle.Angle` instances.
"""

from core.errors import DimensionMismatchError
from units.angle import TAU, Angle
from units.dimension import (
    ACCELERATION,
    ANGULAR_VELOCITY,
    AREA,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    POWER,
    PRESSURE,
    TIME,
    VELOCITY,
    VOLUME,
    Dimension,
)
from units.quantity import Quantity

KNOT_IN_MPS = 0.514444


def _unit(name: str, dimension: Dimension, factor: float = 1.0):
    def construct(value) -> Quantity:
        return Quantity(value * factor, dimension)
    construct.__name__ = construct.__qualname__ = name
    construct.__doc__ = f"{name}(value) -> Quantity in {dimension} (x{factor:g})."
    return construct


# Length
meters = _unit("meters", LENGTH)
centimeters = _unit("centimeters", LENGTH, 0.01)
millimeters = _unit("millimeters", LENGTH, 0.001)
kilometers = _unit("kilometers", LENGTH, 1000.0)

# Time
seconds = _unit("seconds", TIME)
milliseconds = _unit("milliseconds", TIME, 0.001)
minutes = _unit("minutes", TIME, 60.0)
hours = _unit("hours", TIME, 3600.0)

# Mass
kilograms = _unit("kilograms", MASS)
grams = _unit("grams", MASS, 0.001)
tons = _unit("tons", MASS, 1000.0)

# Velocity / acceleration
meters_per_second = _unit("meters_per_second", VELOCITY)
kilometers_per_hour = _unit("kilometers_per_hour", VELOCITY, 1.0 / 3.6)
knots = _unit("knots", VELOCITY, KNOT_IN_MPS)
meters_per_second_squared = _unit("meters_per_second_squared", ACCELERATION)

# Force / energy / power / pressure
newtons = _unit("newtons", FORCE)
kilonewtons = _unit("kilonewtons", FORCE, 1000.0)
joules = _unit("joules", ENERGY)
kilojoules = _unit("kilojoules", ENERGY, 1000.0)
watt_hours = _unit("watt_hours", ENERGY, 3600.0)
kilowatt_hours = _unit("kilowatt_hours", ENERGY, 3.6e6)
watts = _unit("watts", POWER)
kilowatts = _unit("kilowatts", POWER, 1000.0)
horsepower = _unit("horsepower", POWER, 745.7)
pascals = _unit("pascals", PRESSURE)

# Geometry
square_meters = _unit("square_meters", AREA)
cubic_meters = _unit("cubic_meters", VOLUME)

# Angular velocity
radians_per_second = _unit("radians_per_second", ANGULAR_VELOCITY)
rpm = _unit("rpm", ANGULAR_VELOCITY, TAU / 60.0)


def radians(value) -> Angle:
    return Angle.from_radians(value)


def degrees(value) -> Angle:
    return Angle.from_degrees(value)


def turns(value) -> Angle:
    return Angle.from_turns(value)


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def expect_dimension(q: Quantity, dimension: Dimension, op: str) -> None:
    if not isinstance(q, Quantity):
        raise TypeError(f"{op}: expected a Quantity, got {type(q).__name__}")
    if q.dimension != dimension:
        raise DimensionMismatchError(q.dimension, dimension, op=op)


def degrees_to_radians(deg) -> Angle:
    return Angle.from_degrees(deg)


def radians_to_degrees(angle: Quantity) -> float:
    """Degrees of an :class:`Angle` or dimensionless quantity."""
    expect_dimension(angle, DIMENSIONLESS, "radians_to_degrees")
    return angle.value * 360.0 / TAU


def knots_to_mps(kn) -> Quantity:
    return knots(kn)


def mps_to_knots(speed: Quantity) -> float:
    expect_dimension(speed, VELOCITY, "mps_to_knots")
    return speed.value / KNOT_IN_MPS


def velocity(distance: Quantity, duration: Quantity) -> Quantity:
    """Distance over duration.

    Raises:
        DimensionMismatchError: If the inputs are not a length and a time.
    """
    expect_dimension(distance, LENGTH, "velocity")
    expect_dimension(duration, TIME, "velocity")
    return distance / duration
