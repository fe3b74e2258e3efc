# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""JSON-driven test harness over the public operations."""

from .suite import TestCase, TestCategory, TestSuite, SuiteStatistics, DEFAULT_TOLERANCE
from .runner import (
    ExecutionContext,
    ExecutionStats,
    TestResult,
    compare_outputs,
    json_report,
    suite_info,
    text_report,
)
from .registry import OPERATIONS, execute, register

__all__ = [
    "TestCase",
    "TestCategory",
    "TestSuite",
    "SuiteStatistics",
    "DEFAULT_TOLERANCE",
    "ExecutionContext",
    "ExecutionStats",
    "TestResult",
    "compare_outputs",
    "json_report",
    "suite_info",
    "text_report",
    "OPERATIONS",
    "execute",
    "register",
]
