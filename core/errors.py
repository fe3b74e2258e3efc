# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Typed errors raised when a value's tag forbids an operation.

Each error also derives from the closest builtin so callers catching
``TypeError`` / ``IndexError`` keep working.
"""


class AlgebraError(Exception):
    """Base class for all tag-compatibility errors."""


class GradeMismatchError(AlgebraError, TypeError):
    """Two operands of different grade were combined additively.

    Attributes:
        lhs: Grade of the left operand.
        rhs: Grade of the right operand.
    """

    def __init__(self, lhs, rhs, op: str = "add"):
        self.lhs = lhs
        self.rhs = rhs
        self.op = op
        super().__init__(
            f"Grade mismatch in '{op}': cannot combine {lhs} with {rhs}"
        )


class DimensionMismatchError(AlgebraError, TypeError):
    """Two quantities of different physical dimension were combined or compared.

    Attributes:
        lhs: Dimension of the left operand (or the received dimension).
        rhs: Dimension of the right operand (or the expected dimension).
    """

    def __init__(self, lhs, rhs, op: str = "+"):
        self.lhs = lhs
        self.rhs = rhs
        self.op = op
        super().__init__(
            f"Dimension mismatch in '{op}': {lhs} vs {rhs}"
        )


class IndexOutOfRangeError(AlgebraError, IndexError):
    """A basis-index tuple is malformed (repeated, negative, or outside the algebra)."""
