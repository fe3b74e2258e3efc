# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Execution of JSON test cases and result reporting."""

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Iterable, List, Optional

import numpy as np
from tqdm import tqdm

from harness.suite import TestCase, TestCategory, TestSuite
from log import get_logger

logger = get_logger(__name__)

Executor = Callable[[TestCase], Any]


def compare_outputs(actual, expected, tolerance: float) -> bool:
    """Structural comparison with numeric tolerance.

    Numbers match within ``tolerance``; dicts match on every expected key
    (extra actual keys are ignored); lists match elementwise with equal
    length; anything else must be equal.
    """
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(actual) is type(expected) and actual == expected
    if isinstance(expected, (int, float)) and isinstance(actual, (int, float)):
        if np.isnan(expected) or np.isnan(actual):
            return bool(np.isnan(expected) and np.isnan(actual))
        if np.isinf(expected) or np.isinf(actual):
            return actual == expected
        return bool(np.abs(actual - expected) <= tolerance)
    if isinstance(expected, dict):
        if not isinstance(actual, dict):
            return False
        return all(k in actual and compare_outputs(actual[k], v, tolerance)
                   for k, v in expected.items())
    if isinstance(expected, list):
        if not isinstance(actual, list) or len(actual) != len(expected):
            return False
        return all(compare_outputs(a, e, tolerance) for a, e in zip(actual, expected))
    return actual == expected


@dataclass
class TestResult:
    """Outcome of one test case."""

    __test__ = False

    test_name: str
    passed: bool
    error_message: str = ""
    execution_time_ms: float = 0.0
    actual_outputs: Any = None
    expected_outputs: Any = None
    tolerance: float = 0.0

    def failure_details(self) -> str:
        if self.passed:
            return "Test passed"
        return (
            f"Test failed: {self.error_message}\n"
            f"Expected: {json.dumps(self.expected_outputs, indent=2, default=str)}\n"
            f"Actual: {json.dumps(self.actual_outputs, indent=2, default=str)}\n"
            f"Tolerance: {self.tolerance}"
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ExecutionStats:
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    total_execution_time_ms: float = 0.0
    average_execution_time_ms: float = 0.0

    def record(self, result: TestResult) -> None:
        self.total_tests += 1
        if result.passed:
            self.passed_tests += 1
        else:
            self.failed_tests += 1
        self.total_execution_time_ms += result.execution_time_ms
        self.average_execution_time_ms = self.total_execution_time_ms / self.total_tests


class ExecutionContext:
    """Runs test cases through an executor and accumulates statistics.

    Args:
        executor: Callable mapping a :class:`TestCase` to its actual outputs.
            Defaults to :func:`harness.registry.execute`.
        verbose (bool): Log each result and the failure details.
        progress (bool): Show a tqdm progress bar over each batch of cases.
    """

    def __init__(self, executor: Optional[Executor] = None, verbose: bool = False,
                 progress: bool = False):
        if executor is None:
            from harness.registry import execute
            executor = execute
        self.executor = executor
        self.verbose = verbose
        self.progress = progress
        self.stats = ExecutionStats()

    def set_executor(self, executor: Executor) -> None:
        self.executor = executor

    def run_case(self, case: TestCase) -> TestResult:
        result = TestResult(
            test_name=case.test_name,
            passed=False,
            expected_outputs=case.expected_outputs,
            tolerance=case.tolerance,
        )
        start = time.perf_counter()
        try:
            result.actual_outputs = self.executor(case)
        except Exception as exc:
            # The harness reports the failure and carries on with the next case
            result.error_message = f"{type(exc).__name__}: {exc}"
        else:
            result.passed = compare_outputs(result.actual_outputs, case.expected_outputs,
                                            case.tolerance)
            if not result.passed:
                result.error_message = "output mismatch"
        result.execution_time_ms = (time.perf_counter() - start) * 1000.0

        self.stats.record(result)
        if self.verbose:
            logger.info("Test: %s - %s (%.2fms)", result.test_name,
                        "PASSED" if result.passed else "FAILED", result.execution_time_ms)
            if not result.passed:
                logger.info("%s", result.failure_details())
        return result

    def run_cases(self, cases: Iterable[TestCase], desc: str = "tests") -> List[TestResult]:
        cases = list(cases)
        it = tqdm(cases, desc=desc, leave=False) if self.progress else cases
        return [self.run_case(c) for c in it]

    def run_category(self, category: TestCategory) -> List[TestResult]:
        if self.verbose:
            logger.info("Executing category: %s", category.name)
        return self.run_cases(category.test_cases, desc=category.name)

    def run_suite(self, suite: TestSuite) -> List[TestResult]:
        if self.verbose:
            logger.info("Executing test suite: %s (version %s)", suite.test_suite_name,
                        suite.version)
        results = []
        for category in suite.test_categories.values():
            results.extend(self.run_category(category))
        if self.verbose:
            logger.info("Passed %d / %d, average %.2fms", self.stats.passed_tests,
                        self.stats.total_tests, self.stats.average_execution_time_ms)
        return results


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def _summary(results: List[TestResult]) -> dict:
    passed = sum(r.passed for r in results)
    total = len(results)
    total_time = sum(r.execution_time_ms for r in results)
    return {
        "passed": passed,
        "failed": total - passed,
        "total": total,
        "total_time_ms": total_time,
        "average_time_ms": total_time / total if total else 0.0,
    }


def suite_info(suite: TestSuite) -> str:
    stats = suite.statistics()
    lines = [
        "=== Test Suite Information ===",
        f"Name: {suite.test_suite_name}",
        f"Version: {suite.version}",
        f"Description: {suite.description}",
        f"Total Categories: {stats.total_categories}",
        f"Total Test Cases: {stats.total_test_cases}",
        "",
        "Categories:",
    ]
    lines += [f"  {name}: {n} tests" for name, n in stats.tests_per_category.items()]
    if stats.tests_per_tag:
        lines += ["", "Tags:"]
        lines += [f"  {tag}: {n} tests" for tag, n in sorted(stats.tests_per_tag.items())]
    lines.append("==============================")
    return "\n".join(lines)


def text_report(results: List[TestResult], show_stats: bool = False) -> str:
    lines = ["=== Test Results ==="]
    for r in results:
        line = f"[{'PASS' if r.passed else 'FAIL'}] {r.test_name}"
        if show_stats:
            line += f" ({r.execution_time_ms:.2f}ms)"
        lines.append(line)
        if not r.passed:
            lines.append(f"  Error: {r.error_message}")
    s = _summary(results)
    lines += [
        "",
        "Summary:",
        f"  Passed: {s['passed']}",
        f"  Failed: {s['failed']}",
        f"  Total: {s['total']}",
        f"  Total Time: {s['total_time_ms']:.2f}ms",
    ]
    if s["total"]:
        lines.append(f"  Average Time: {s['average_time_ms']:.2f}ms")
    lines.append("===================")
    return "\n".join(lines)


def json_report(results: List[TestResult]) -> str:
    return json.dumps(
        {"test_results": [r.to_dict() for r in results], "summary": _summary(results)},
        indent=2,
        default=str,
    )
