# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""JSON <-> domain value conversion for test specifications.

Input shapes::

    {"scalar": 3.0}
    {"vector": [[1, 2.0], [2, 3.0]]}
    {"bivector": [[1, 2, 1.5]]}
    {"trivector": [[1, 2, 3, 4.0]]}
    {"multivector": [[[1, 2], 3.0], [[], 1.0]]}

    {"value": 2.5, "unit": "kilometers"}
    {"value": 9.81, "dimension": [0, 1, -2, 0, 0, 0, 0]}

Grades are ints ``0..3`` or the string ``"multivector"``.
"""

import numbers

from core.grade import Grade, as_grade
from core.term import (
    GATerm,
    bivector,
    multivector,
    scalar,
    trivector,
    vector,
)
from units import si
from units.angle import Angle
from units.dimension import Dimension
from units.quantity import Quantity

_TERM_FACTORIES = {
    "scalar": scalar,
    "vector": lambda comps: vector(tuple(c) for c in comps),
    "bivector": lambda comps: bivector(tuple(c) for c in comps),
    "trivector": lambda comps: trivector(tuple(c) for c in comps),
    "multivector": lambda blades: multivector((tuple(k), c) for k, c in blades),
}


def decode_grade(raw) -> Grade:
    if isinstance(raw, str):
        return Grade[raw.upper()]
    return as_grade(raw)


def encode_grade(g: Grade):
    return g.rank if g.is_homogeneous else str(g)


def decode_term(raw: dict) -> GATerm:
    """Build a term from a one-key mapping naming its variant."""
    if not isinstance(raw, dict) or len(raw) != 1:
        raise ValueError(f"Term must be a one-key object, got {raw!r}")
    (kind, payload), = raw.items()
    if kind not in _TERM_FACTORIES:
        raise ValueError(f"Unknown term kind '{kind}'. Available: {list(_TERM_FACTORIES)}")
    return _TERM_FACTORIES[kind](payload)


def _label(key) -> str:
    return "".join(f"e{i}" for i in key) or "1"


def encode_term(term: GATerm) -> dict:
    """``{"grade": ..., "coefficients": {"e1": 2.0, ...}, "string": ...}``."""
    from core.operations import to_string
    return {
        "grade": encode_grade(term.grade),
        "coefficients": {_label(k): _plain(c) for k, c in term.entries()},
        "string": to_string(term),
    }


def decode_quantity(raw) -> Quantity:
    """Quantity from ``{"value", "unit"}`` or ``{"value", "dimension"}``; bare numbers are dimensionless."""
    if isinstance(raw, numbers.Number):
        return Quantity(raw)
    value = raw["value"]
    if "unit" in raw:
        unit = getattr(si, raw["unit"], None)
        if not callable(unit):
            raise ValueError(f"Unknown unit '{raw['unit']}'")
        return unit(value)
    return Quantity(value, Dimension(*raw.get("dimension", ())))


def encode_quantity(q: Quantity) -> dict:
    out = {"value": _plain(q.value), "dimension": list(q.dimension.as_tuple())}
    if isinstance(q, Angle):
        out.update(radians=_plain(q.radians), degrees=_plain(q.degrees), turns=_plain(q.turns))
    return out


def _plain(x):
    """numpy / torch scalars to plain Python numbers for JSON."""
    if hasattr(x, "item"):
        return x.item()
    return x


def encode_value(x):
    """Best-effort JSON encoding of an operation result."""
    if isinstance(x, GATerm):
        return encode_term(x)
    if isinstance(x, Quantity):
        return encode_quantity(x)
    if isinstance(x, Grade):
        return encode_grade(x)
    if isinstance(x, (frozenset, set)):
        return sorted((encode_value(v) for v in x), key=str)
    if isinstance(x, (list, tuple)):
        return [encode_value(v) for v in x]
    if isinstance(x, dict):
        return {k: encode_value(v) for k, v in x.items()}
    return _plain(x)
