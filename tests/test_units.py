# Tests for named unit constructors and conversions in units/si.py

import math

import pytest

from core.errors import DimensionMismatchError
from units import si
from units.angle import TAU, Angle
from units.dimension import (
    ANGULAR_VELOCITY,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    POWER,
    TIME,
    VELOCITY,
)
from units.quantity import Quantity


@pytest.mark.parametrize("unit,arg,value,dim", [
    (si.kilometers, 1.5, 1500.0, LENGTH),
    (si.centimeters, 250.0, 2.5, LENGTH),
    (si.millimeters, 3.0, 0.003, LENGTH),
    (si.minutes, 2.0, 120.0, TIME),
    (si.hours, 1.0, 3600.0, TIME),
    (si.grams, 500.0, 0.5, MASS),
    (si.tons, 2.0, 2000.0, MASS),
    (si.kilometers_per_hour, 36.0, 10.0, VELOCITY),
    (si.kilonewtons, 1.0, 1000.0, FORCE),
    (si.kilowatt_hours, 1.0, 3.6e6, ENERGY),
    (si.horsepower, 1.0, 745.7, POWER),
])
def test_constructor_scales_to_si(unit, arg, value, dim):
    q = unit(arg)
    assert q.value == pytest.approx(value)
    assert q.dimension == dim


def test_constructor_names():
    assert si.meters.__name__ == "meters"
    assert "Quantity" in si.knots.__doc__


def test_rpm():
    w = si.rpm(60.0)
    assert w.dimension == ANGULAR_VELOCITY
    assert w.value == pytest.approx(TAU)


def test_round_trip_through_centimeters():
    d = si.meters(1.234)
    cm = d.to(si.centimeters)
    assert si.centimeters(cm).to(si.meters) == pytest.approx(1.234)


def test_angle_units():
    assert isinstance(si.degrees(180.0), Angle)
    assert si.degrees(180.0).radians == pytest.approx(math.pi)
    assert si.turns(0.25).radians == pytest.approx(TAU / 4)
    assert si.radians(1.0).radians == 1.0


class TestConversions:
    def test_degrees_to_radians(self):
        assert si.degrees_to_radians(90.0).radians == pytest.approx(TAU / 4)

    def test_radians_to_degrees(self):
        assert si.radians_to_degrees(Angle(TAU / 2)) == pytest.approx(180.0)
        assert si.radians_to_degrees(Quantity(TAU)) == pytest.approx(360.0)

    def test_radians_to_degrees_rejects_length(self):
        with pytest.raises(DimensionMismatchError):
            si.radians_to_degrees(si.meters(1.0))

    def test_knots(self):
        v = si.knots_to_mps(10.0)
        assert v.dimension == VELOCITY
        assert v.value == pytest.approx(5.14444)
        assert si.mps_to_knots(v) == pytest.approx(10.0)

    def test_mps_to_knots_requires_velocity(self):
        with pytest.raises(DimensionMismatchError):
            si.mps_to_knots(si.seconds(1.0))

    def test_expect_dimension_rejects_plain_numbers(self):
        with pytest.raises(TypeError):
            si.mps_to_knots(5.0)


class TestVelocity:
    def test_distance_over_time(self):
        v = si.velocity(si.kilometers(1.0), si.minutes(1.0))
        assert v.dimension == VELOCITY
        assert v.value == pytest.approx(1000.0 / 60.0)

    def test_swapped_arguments(self):
        with pytest.raises(DimensionMismatchError):
            si.velocity(si.seconds(1.0), si.meters(1.0))

    def test_zero_duration_is_inf(self):
        assert math.isinf(si.velocity(si.meters(1.0), si.seconds(0.0)).value)
