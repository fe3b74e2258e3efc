# Tests for tau-convention angles

import math

import numpy as np
import pytest

from units.angle import TAU, Angle
from units.dimension import LENGTH
from units.quantity import Quantity
from units.si import meters


class TestConstruction:
    def test_tau(self):
        assert TAU == pytest.approx(6.283185307179586)

    def test_from_degrees(self):
        a = Angle.from_degrees(90.0)
        assert a.radians == pytest.approx(TAU / 4)
        assert a.degrees == pytest.approx(90.0)
        assert a.turns == pytest.approx(0.25)

    def test_named_turns(self):
        assert Angle.zero().radians == 0.0
        assert Angle.quarter_turn().degrees == pytest.approx(90.0)
        assert Angle.half_turn().radians == pytest.approx(math.pi)
        assert Angle.full_turn().turns == pytest.approx(1.0)

    def test_from_turns(self):
        assert Angle.from_turns(0.5).degrees == pytest.approx(180.0)

    def test_dimensionless(self):
        assert Angle(1.0).is_dimensionless()
        assert Angle(1.0) == Quantity(1.0)


class TestNormalized:
    @pytest.mark.parametrize("deg,expected", [
        (0.0, 0.0),
        (90.0, 90.0),
        (-90.0, 270.0),
        (450.0, 90.0),
        (-450.0, 270.0),
    ])
    def test_range(self, deg, expected):
        a = Angle.from_degrees(deg).normalized()
        assert 0.0 <= a.radians < TAU
        assert a.degrees == pytest.approx(expected, abs=1e-9)

    def test_full_turn_wraps_to_zero(self):
        assert Angle.full_turn().normalized().radians == 0.0

    def test_tiny_negative_stays_in_range(self):
        assert Angle(-1e-18).normalized().radians < TAU

    def test_returns_plain_float(self):
        assert type(Angle(7.0).normalized().radians) is float

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_is_nan(self, value):
        assert math.isnan(Angle(value).normalized().radians)

    def test_array_payload(self):
        a = Angle(np.array([-1.0, 7.0, 0.5, -TAU]))
        r = a.normalized().radians
        np.testing.assert_allclose(r, [TAU - 1.0, 7.0 - TAU, 0.5, 0.0], atol=1e-12)
        assert isinstance(a.normalized(), Angle)


class TestArithmetic:
    def test_same_dimension_keeps_angle(self):
        a = Angle.quarter_turn() + Angle.quarter_turn()
        assert isinstance(a, Angle)
        assert a.radians == pytest.approx(math.pi)
        assert isinstance(-a, Angle)
        assert isinstance(a * 2, Angle)
        assert isinstance(2 * a, Angle)
        assert isinstance(a - Angle.zero(), Angle)

    def test_product_with_length_is_quantity(self):
        arc = Angle.half_turn() * meters(2.0)
        assert type(arc) is Quantity
        assert arc.dimension == LENGTH
        assert arc.value == pytest.approx(TAU)

    def test_repr(self):
        assert repr(Angle(1.5)) == "Angle(1.5)"


class TestTrig:
    def test_quarter_turn(self):
        a = Angle.quarter_turn()
        assert a.sin() == pytest.approx(1.0)
        assert a.cos() == pytest.approx(0.0, abs=1e-12)

    def test_eighth_turn_tan(self):
        assert Angle.from_turns(0.125).tan() == pytest.approx(1.0)
