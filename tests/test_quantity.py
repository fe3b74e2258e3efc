# Tests for dimension vectors and checked quantity arithmetic

import math

import numpy as np
import pytest

from core.errors import DimensionMismatchError
from units import quantity as q
from units.dimension import (
    ACCELERATION,
    AREA,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    PRESSURE,
    TIME,
    VELOCITY,
    VOLUME,
    Dimension,
)
from units.quantity import Quantity
from units.si import kilograms, meters, meters_per_second, seconds


class TestDimension:
    def test_products(self):
        assert LENGTH * LENGTH == AREA
        assert LENGTH / TIME == VELOCITY
        assert MASS * ACCELERATION == FORCE

    def test_named_exponents(self):
        assert FORCE.as_tuple() == (1, 1, -2, 0, 0, 0, 0)
        assert ENERGY.as_tuple() == (1, 2, -2, 0, 0, 0, 0)
        assert PRESSURE.as_tuple() == (1, -1, -2, 0, 0, 0, 0)

    def test_power_and_root(self):
        assert LENGTH ** 3 == VOLUME
        assert AREA.root(2) == LENGTH
        with pytest.raises(ValueError):
            VOLUME.root(2)

    def test_str(self):
        assert str(DIMENSIONLESS) == "1"
        assert str(VELOCITY) == "m·s^-1"

    def test_immutable(self):
        with pytest.raises(AttributeError):
            LENGTH.length = 2


class TestQuantityArithmetic:
    def test_value_and_accessors(self):
        d = meters(2.5)
        assert d.value == 2.5
        assert d.length_dim() == 1
        assert d.mass_dim() == 0
        assert d.time_dim() == 0
        assert not d.is_dimensionless()

    def test_add_same_dimension(self):
        assert (meters(1.0) + meters(2.0)) == meters(3.0)
        assert (seconds(5.0) - seconds(2.0)) == seconds(3.0)

    def test_add_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            meters(1.0) + seconds(1.0)
        with pytest.raises(DimensionMismatchError):
            meters(1.0) - kilograms(1.0)

    def test_mismatch_is_type_error(self):
        with pytest.raises(TypeError):
            meters(1.0) + 1.0

    def test_dimensionless_with_number(self):
        assert (Quantity(2.0) + 1.0) == Quantity(3.0)
        assert (1.0 - Quantity(2.0)) == Quantity(-1.0)

    def test_velocity_from_division(self):
        v = meters(100.0) / seconds(10.0)
        assert v.value == 10.0
        assert v.dimension == VELOCITY

    def test_mul_div_closure(self):
        a = Quantity(3.0, Dimension(1, 2, -1, 0, 0, 0, 0))
        b = Quantity(2.0, Dimension(0, 1, 1, 1, 0, 0, 0))
        assert (a * b).dimension.as_tuple() == (1, 3, 0, 1, 0, 0, 0)
        assert (a / b).dimension.as_tuple() == (1, 1, -2, -1, 0, 0, 0)

    def test_scalar_scaling_keeps_dimension(self):
        assert (meters(2.0) * 3).dimension == LENGTH
        assert (3 * meters(2.0)).value == 6.0
        assert (meters(6.0) / 2).dimension == LENGTH

    def test_number_over_quantity_inverts(self):
        f = 1.0 / seconds(0.5)
        assert f.value == 2.0
        assert f.dimension == TIME.inverse()

    def test_negation_and_abs(self):
        d = -meters(2.0)
        assert d == meters(-2.0)
        assert abs(d) == meters(2.0)
        assert q.qabs(d).dimension == LENGTH

    def test_power(self):
        assert (meters(3.0) ** 2) == Quantity(9.0, AREA)

    def test_new_instance(self):
        a = meters(1.0)
        b = a + meters(0.0)
        assert b is not a


class TestDivisionByZero:
    def test_positive_over_zero_is_inf(self):
        v = meters(1.0) / seconds(0.0)
        assert math.isinf(v.value)
        assert v.dimension == VELOCITY

    def test_zero_over_zero_is_nan(self):
        assert math.isnan((meters(0.0) / meters(0.0)).value)

    def test_number_over_zero_quantity(self):
        assert math.isinf((1.0 / seconds(0.0)).value)

    def test_nan_flows_through(self):
        assert math.isnan((meters(float("nan")) + meters(1.0)).value)


class TestComparison:
    def test_ordering(self):
        assert meters(1.0) < meters(2.0)
        assert meters(2.0) >= meters(2.0)
        assert seconds(3.0) > seconds(1.0)

    def test_ordering_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            meters(1.0) < seconds(2.0)

    def test_equality_across_dimensions_is_false(self):
        assert meters(1.0) != seconds(1.0)


class TestConversion:
    def test_to_unit(self):
        from units.si import centimeters, kilometers
        assert meters(2.5).to(centimeters) == pytest.approx(250.0)
        assert kilometers(1.5).to(meters) == pytest.approx(1500.0)

    def test_to_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            meters(1.0).to(seconds)

    def test_float_only_dimensionless(self):
        assert float(Quantity(2.0)) == 2.0
        with pytest.raises(DimensionMismatchError):
            float(meters(1.0))


class TestMathFunctions:
    def test_trig_dimensionless(self):
        assert q.sin(Quantity(0.0)) == 0.0
        assert q.cos(Quantity(0.0)) == 1.0
        assert q.tan(Quantity(0.0)) == 0.0

    def test_trig_rejects_length(self):
        with pytest.raises(DimensionMismatchError):
            q.sin(meters(1.0))

    def test_sqrt(self):
        r = q.sqrt(Quantity(16.0, AREA))
        assert r.value == 4.0
        assert r.dimension == LENGTH

    def test_sqrt_odd_exponent(self):
        with pytest.raises(DimensionMismatchError):
            q.sqrt(meters(4.0))

    def test_array_payload(self):
        d = meters(np.array([1.0, 2.0])) * 2
        np.testing.assert_allclose(d.value, [2.0, 4.0])
        assert d.dimension == LENGTH
        speeds = d / seconds(np.array([1.0, 0.0]))
        assert speeds.value[0] == 2.0
        assert np.isinf(speeds.value[1])

    def test_velocity_unit(self):
        assert meters_per_second(3.0).dimension == VELOCITY
