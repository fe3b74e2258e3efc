# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Named operations a JSON test case can drive.

Each entry takes the decoded ``inputs`` mapping of a test case and returns a
JSON-ready ``dict``. :func:`execute` is the default executor used by
:class:`~harness.runner.ExecutionContext`: it maps an
:class:`~core.errors.AlgebraError` to ``{"error": "<Kind>"}`` so a suite can
assert that an operation is rejected.
"""

from typing import Callable, Dict

from core import operations, products
from core.grade import (
    can_add,
    geometric_product_grades,
    inner_product_grade,
    outer_product_grade,
)
from core.errors import AlgebraError
from harness.codec import (
    decode_grade,
    decode_quantity,
    decode_term,
    encode_grade,
    encode_quantity,
    encode_term,
    encode_value,
)
from log import get_logger
from units import marine, si
from units.angle import Angle

logger = get_logger(__name__)

OPERATIONS: Dict[str, Callable[[dict], dict]] = {}


def register(name: str):
    """Decorator adding ``fn`` to :data:`OPERATIONS` under ``name``."""
    def wrap(fn):
        if name in OPERATIONS:
            raise ValueError(f"Operation '{name}' registered twice")
        OPERATIONS[name] = fn
        return fn
    return wrap


def error_kind(exc: AlgebraError) -> str:
    """``GradeMismatchError`` -> ``"GradeMismatch"``."""
    name = type(exc).__name__
    return name[:-len("Error")] if name.endswith("Error") else name


def execute(case) -> dict:
    """Run ``case.operation`` on ``case.inputs``.

    Raises:
        KeyError: If the operation is not registered.
    """
    if case.operation not in OPERATIONS:
        raise KeyError(f"Unknown operation: {case.operation}. Available: {sorted(OPERATIONS)}")
    try:
        return OPERATIONS[case.operation](case.inputs)
    except AlgebraError as exc:
        logger.debug("%s rejected: %s", case.test_name, exc)
        return {"error": error_kind(exc)}


# ---------------------------------------------------------------------------
# Grade rules
# ---------------------------------------------------------------------------

@register("grade.outer_product_grade")
def _outer_grade(inputs):
    g = outer_product_grade(decode_grade(inputs["g1"]), decode_grade(inputs["g2"]))
    return {"grade": encode_grade(g)}


@register("grade.inner_product_grade")
def _inner_grade(inputs):
    g = inner_product_grade(decode_grade(inputs["g1"]), decode_grade(inputs["g2"]))
    return {"grade": encode_grade(g)}


@register("grade.geometric_product_grades")
def _geometric_grades(inputs):
    gs = geometric_product_grades(decode_grade(inputs["g1"]), decode_grade(inputs["g2"]))
    return {"grades": encode_value(gs)}


@register("grade.can_add")
def _can_add(inputs):
    return {"result": can_add(decode_grade(inputs["g1"]), decode_grade(inputs["g2"]))}


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------

@register("term.grade")
def _term_grade(inputs):
    return {"grade": encode_grade(decode_term(inputs["term"]).grade)}


@register("term.add")
def _term_add(inputs):
    return {"result": encode_term(operations.add(decode_term(inputs["lhs"]),
                                                 decode_term(inputs["rhs"])))}


@register("term.scalar_multiply")
def _term_scale(inputs):
    return {"result": encode_term(operations.scalar_multiply(inputs["scalar"],
                                                             decode_term(inputs["term"])))}


@register("term.norm")
def _term_norm(inputs):
    return {"norm": operations.norm(decode_term(inputs["term"]))}


@register("term.to_string")
def _term_string(inputs):
    return {"string": operations.to_string(decode_term(inputs["term"]))}


def _binary_product(fn):
    def run(inputs):
        return {"result": encode_term(fn(decode_term(inputs["lhs"]), decode_term(inputs["rhs"])))}
    return run


register("term.geometric_product")(_binary_product(products.geometric_product))
register("term.outer_product")(_binary_product(products.outer_product))
register("term.inner_product")(_binary_product(products.inner_product))


@register("term.reverse")
def _term_reverse(inputs):
    return {"result": encode_term(products.reverse(decode_term(inputs["term"])))}


@register("term.grade_projection")
def _term_project(inputs):
    term = decode_term(inputs["term"])
    return {"result": encode_term(products.grade_projection(term, decode_grade(inputs["grade"])))}


# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------

_ARITHMETIC = {
    "quantity.add": lambda a, b: a + b,
    "quantity.subtract": lambda a, b: a - b,
    "quantity.multiply": lambda a, b: a * b,
    "quantity.divide": lambda a, b: a / b,
}


def _quantity_binary(fn):
    def run(inputs):
        return {"result": encode_quantity(fn(decode_quantity(inputs["lhs"]),
                                             decode_quantity(inputs["rhs"])))}
    return run


for _name, _fn in _ARITHMETIC.items():
    register(_name)(_quantity_binary(_fn))


@register("quantity.compare")
def _quantity_compare(inputs):
    a, b = decode_quantity(inputs["lhs"]), decode_quantity(inputs["rhs"])
    return {"less": bool(a < b), "equal": bool(a == b)}


@register("quantity.convert")
def _quantity_convert(inputs):
    q = decode_quantity(inputs["quantity"])
    unit = getattr(si, inputs["unit"])
    return {"value": q.to(unit)}


@register("unit.construct")
def _unit_construct(inputs):
    return {"result": encode_quantity(decode_quantity(inputs))}


@register("unit.velocity")
def _unit_velocity(inputs):
    v = si.velocity(decode_quantity(inputs["distance"]), decode_quantity(inputs["duration"]))
    return {"result": encode_quantity(v)}


@register("convert.degrees_to_radians")
def _deg_to_rad(inputs):
    return {"radians": si.degrees_to_radians(inputs["degrees"]).radians}


@register("convert.radians_to_degrees")
def _rad_to_deg(inputs):
    return {"degrees": si.radians_to_degrees(Angle(inputs["radians"]))}


@register("convert.knots_to_mps")
def _knots_to_mps(inputs):
    return {"mps": si.knots_to_mps(inputs["knots"]).value}


@register("convert.mps_to_knots")
def _mps_to_knots(inputs):
    return {"knots": si.mps_to_knots(si.meters_per_second(inputs["mps"]))}


# ---------------------------------------------------------------------------
# Angles and marine formulas
# ---------------------------------------------------------------------------

@register("angle.from_degrees")
def _angle_from_degrees(inputs):
    return {"result": encode_quantity(Angle.from_degrees(inputs["degrees"]))}


@register("angle.normalized")
def _angle_normalized(inputs):
    return {"result": encode_quantity(Angle(inputs["radians"]).normalized())}


@register("marine.buoyancy_force")
def _buoyancy(inputs):
    return {"result": encode_quantity(marine.buoyancy_force(decode_quantity(inputs["volume"])))}


@register("marine.pressure_at_depth")
def _pressure(inputs):
    return {"result": encode_quantity(marine.pressure_at_depth(decode_quantity(inputs["depth"])))}
