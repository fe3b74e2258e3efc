# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Sparse geometric-algebra terms.

A :class:`GATerm` is a closed sum type over five shapes, each a sparse list of
coefficients keyed by basis-index tuples:

    ScalarTerm       value
    VectorTerm       ((i, c), ...)
    BivectorTerm     ((i, j, c), ...)
    TrivectorTerm    ((i, j, k, c), ...)
    MultivectorTerm  (BladeTerm, ...)

Terms are immutable. Construction canonicalises every blade (indices sorted
ascending, coefficient negated once per transposition, so ``e2e1 = -e1e2``)
and merges duplicate keys by addition, so keys are unique within a term.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from numbers import Number
from typing import Any, Callable, Dict, Iterable, Iterator, List, Sequence, Tuple

from core.errors import IndexOutOfRangeError
from core.grade import Grade, GradeLike, as_grade

Index = int
Key = Tuple[Index, ...]


def canonical_blade(indices: Iterable[Index]) -> Tuple[Key, int]:
    """Sort blade indices ascending and report the permutation sign.

    Args:
        indices: Basis-vector indices of one blade, in any order.

    Returns:
        Tuple ``(sorted_indices, sign)`` with ``sign`` in ``{+1, -1}``.

    Raises:
        IndexOutOfRangeError: On a negative, non-integer or repeated index.
    """
    idx = list(indices)
    for i in idx:
        if isinstance(i, bool) or not isinstance(i, int):
            raise IndexOutOfRangeError(f"Basis index must be an int, got {i!r}")
        if i < 0:
            raise IndexOutOfRangeError(f"Basis index must be non-negative, got {i}")
    if len(set(idx)) != len(idx):
        raise IndexOutOfRangeError(f"Repeated basis index in blade {tuple(idx)}")

    # Bubble sort so each swap flips the sign once
    sign = 1
    for end in range(len(idx) - 1, 0, -1):
        for k in range(end):
            if idx[k] > idx[k + 1]:
                idx[k], idx[k + 1] = idx[k + 1], idx[k]
                sign = -sign
    return tuple(idx), sign


def _signed(coeff, sign: int):
    return coeff if sign > 0 else -coeff


def merge_entries(entries: Iterable[Tuple[Key, Any]],
                  into: List[Tuple[Key, Any]] = None) -> List[Tuple[Key, Any]]:
    """Merge ``(key, coeff)`` entries by key.

    Starts from ``into`` (copied), sums the coefficient of every entry whose
    key is already present, and appends the rest in order of first appearance.
    """
    result = list(into) if into is not None else []
    position = {key: n for n, (key, _) in enumerate(result)}
    for key, coeff in entries:
        n = position.get(key)
        if n is None:
            position[key] = len(result)
            result.append((key, coeff))
        else:
            result[n] = (key, result[n][1] + coeff)
    return result


@dataclass(frozen=True)
class BladeTerm:
    """One basis blade with its coefficient.

    Attributes:
        indices: Canonical (ascending, unique) basis indices.
        coefficient: Coefficient of the blade.
    """

    indices: Key
    coefficient: Any

    def __post_init__(self):
        key, sign = canonical_blade(self.indices)
        object.__setattr__(self, "indices", key)
        object.__setattr__(self, "coefficient", _signed(self.coefficient, sign))

    @property
    def grade(self) -> Grade:
        return Grade.from_arity(len(self.indices))


class GATerm(ABC):
    """Base of the five term variants.

    Subclasses fix :attr:`GRADE`; the grade of a term is its variant and is
    never stored per instance.
    """

    GRADE: Grade

    @property
    def grade(self) -> Grade:
        return self.GRADE

    def has_grade(self, g: GradeLike) -> bool:
        return self.GRADE is as_grade(g)

    @abstractmethod
    def entries(self) -> Iterator[Tuple[Key, Any]]:
        """Yield ``(key, coeff)`` pairs; a scalar yields the empty key once."""

    def to_dict(self) -> Dict[Key, Any]:
        """Coefficients keyed by basis-index tuple (order-insensitive view)."""
        return dict(self.entries())

    def coefficients(self) -> List[Any]:
        return [c for _, c in self.entries()]

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())

    def __eq__(self, other):
        if not isinstance(other, GATerm):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((type(self).__name__, frozenset(self.to_dict().items())))

    # Operator sugar. Imports are local because the operation modules
    # import this one.

    def __add__(self, other):
        if not isinstance(other, GATerm):
            return NotImplemented
        from core.operations import add
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, GATerm):
            return NotImplemented
        from core.operations import add
        return add(self, -other)

    def __neg__(self):
        from core.operations import scalar_multiply
        return scalar_multiply(-1, self)

    def __mul__(self, other):
        """Geometric product with a term, scalar multiplication with a number."""
        if isinstance(other, GATerm):
            from core.products import geometric_product
            return geometric_product(self, other)
        if isinstance(other, Number):
            from core.operations import scalar_multiply
            return scalar_multiply(other, self)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            from core.operations import scalar_multiply
            return scalar_multiply(other, self)
        return NotImplemented

    def __xor__(self, other):
        """Outer product (A ^ B)."""
        if not isinstance(other, GATerm):
            return NotImplemented
        from core.products import outer_product
        return outer_product(self, other)

    def __or__(self, other):
        """Inner product (A | B)."""
        if not isinstance(other, GATerm):
            return NotImplemented
        from core.products import inner_product
        return inner_product(self, other)

    def __invert__(self):
        """Reversion (~A)."""
        from core.products import reverse
        return reverse(self)

    def norm(self):
        from core.operations import norm
        return norm(self)

    def __str__(self) -> str:
        from core.operations import to_string
        return to_string(self)


@dataclass(frozen=True, eq=False)
class ScalarTerm(GATerm):
    """Grade-0 term holding a single coefficient."""

    value: Any
    GRADE = Grade.SCALAR

    def entries(self):
        yield (), self.value


def _freeze_fixed_arity(components: Iterable[Sequence], arity: int) -> tuple:
    """Canonicalise and merge ``(i_1, ..., i_arity, coeff)`` tuples."""
    keyed = []
    for comp in components:
        comp = tuple(comp)
        if len(comp) != arity + 1:
            raise ValueError(
                f"Expected {arity} indices and a coefficient, got {comp!r}"
            )
        key, sign = canonical_blade(comp[:arity])
        keyed.append((key, _signed(comp[arity], sign)))
    return tuple(key + (coeff,) for key, coeff in merge_entries(keyed))


@dataclass(frozen=True, eq=False)
class VectorTerm(GATerm):
    """Grade-1 term: ``((index, coeff), ...)``."""

    components: Tuple[Tuple[Index, Any], ...] = ()
    GRADE = Grade.VECTOR

    def __post_init__(self):
        object.__setattr__(self, "components", _freeze_fixed_arity(self.components, 1))

    def entries(self):
        for i, c in self.components:
            yield (i,), c


@dataclass(frozen=True, eq=False)
class BivectorTerm(GATerm):
    """Grade-2 term: ``((i, j, coeff), ...)`` with ``i < j`` after construction."""

    components: Tuple[Tuple[Index, Index, Any], ...] = ()
    GRADE = Grade.BIVECTOR

    def __post_init__(self):
        object.__setattr__(self, "components", _freeze_fixed_arity(self.components, 2))

    def entries(self):
        for i, j, c in self.components:
            yield (i, j), c


@dataclass(frozen=True, eq=False)
class TrivectorTerm(GATerm):
    """Grade-3 term: ``((i, j, k, coeff), ...)`` with ``i < j < k`` after construction."""

    components: Tuple[Tuple[Index, Index, Index, Any], ...] = ()
    GRADE = Grade.TRIVECTOR

    def __post_init__(self):
        object.__setattr__(self, "components", _freeze_fixed_arity(self.components, 3))

    def entries(self):
        for i, j, k, c in self.components:
            yield (i, j, k), c


@dataclass(frozen=True, eq=False)
class MultivectorTerm(GATerm):
    """General term: blades of any arity, possibly mixed."""

    blades: Tuple[BladeTerm, ...] = field(default=())
    GRADE = Grade.MULTIVECTOR

    def __post_init__(self):
        blades = []
        for b in self.blades:
            if not isinstance(b, BladeTerm):
                indices, coeff = b
                b = BladeTerm(tuple(indices), coeff)
            blades.append((b.indices, b.coefficient))
        merged = tuple(BladeTerm(k, c) for k, c in merge_entries(blades))
        object.__setattr__(self, "blades", merged)

    def entries(self):
        for b in self.blades:
            yield b.indices, b.coefficient

    def grades(self) -> frozenset:
        """Grades actually present among the blades."""
        return frozenset(b.grade for b in self.blades)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def scalar(value) -> ScalarTerm:
    return ScalarTerm(value)


def vector(components: Iterable[Tuple[Index, Any]]) -> VectorTerm:
    return VectorTerm(tuple(components))


def bivector(components: Iterable[Tuple[Index, Index, Any]]) -> BivectorTerm:
    return BivectorTerm(tuple(components))


def trivector(components: Iterable[Tuple[Index, Index, Index, Any]]) -> TrivectorTerm:
    return TrivectorTerm(tuple(components))


def multivector(blades: Iterable) -> MultivectorTerm:
    """Build a general term from :class:`BladeTerm` or ``(indices, coeff)`` items."""
    return MultivectorTerm(tuple(blades))


def from_entries(variant: type, entries: Iterable[Tuple[Key, Any]]) -> GATerm:
    """Rebuild a term of ``variant`` from ``(key, coeff)`` pairs."""
    entries = list(entries)
    if variant is ScalarTerm:
        return ScalarTerm(sum(c for _, c in entries) if entries else 0.0)
    if variant is MultivectorTerm:
        return MultivectorTerm(tuple(BladeTerm(k, c) for k, c in entries))
    return variant(tuple(k + (c,) for k, c in entries))


# ---------------------------------------------------------------------------
# Queries and dispatch
# ---------------------------------------------------------------------------

def grade(term: GATerm) -> Grade:
    return term.grade


def has_grade(term: GATerm, g: GradeLike) -> bool:
    return term.has_grade(g)


def match_term(term: GATerm,
               on_scalar: Callable,
               on_vector: Callable,
               on_bivector: Callable,
               on_trivector: Callable,
               on_multivector: Callable):
    """Dispatch on the variant of ``term``.

    Each handler receives the variant's payload: the value for a scalar, the
    component tuple for vector / bivector / trivector, the blade tuple for a
    multivector.

    Raises:
        TypeError: If ``term`` is not one of the five variants.
    """
    if isinstance(term, ScalarTerm):
        return on_scalar(term.value)
    if isinstance(term, VectorTerm):
        return on_vector(term.components)
    if isinstance(term, BivectorTerm):
        return on_bivector(term.components)
    if isinstance(term, TrivectorTerm):
        return on_trivector(term.components)
    if isinstance(term, MultivectorTerm):
        return on_multivector(term.blades)
    raise TypeError(f"Not a GATerm: {type(term).__name__}")


class TermVisitor(ABC):
    """Visitor over the five term variants."""

    @abstractmethod
    def visit_scalar(self, value): ...

    @abstractmethod
    def visit_vector(self, components): ...

    @abstractmethod
    def visit_bivector(self, components): ...

    @abstractmethod
    def visit_trivector(self, components): ...

    @abstractmethod
    def visit_multivector(self, blades): ...


def visit_term(term: GATerm, visitor: TermVisitor):
    return match_term(
        term,
        visitor.visit_scalar,
        visitor.visit_vector,
        visitor.visit_bivector,
        visitor.visit_trivector,
        visitor.visit_multivector,
    )
