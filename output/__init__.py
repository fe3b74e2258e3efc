# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Canonical, precision-controlled text output."""

from .canonical import CanonicalOutput, OutputConfig

__all__ = ["CanonicalOutput", "OutputConfig"]
