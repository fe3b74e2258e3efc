# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Structured test specifications loaded from JSON.

A suite file looks like::

    {
      "test_suite": "core",
      "version": "1.0",
      "description": "...",
      "test_categories": {
        "term_addition": [
          {
            "test_name": "vector_merge",
            "description": "...",
            "category": "term_addition",
            "operation": "term.add",
            "inputs": {...},
            "expected_outputs": {...},
            "tolerance": 1e-10,
            "tags": ["basic"],
            "dependencies": []
          }
        ]
      }
    }
"""

import json
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_TOLERANCE = 1e-10


@dataclass
class TestCase:
    """One operation invocation with its expected outputs."""

    __test__ = False  # not a pytest class

    test_name: str
    description: str
    category: str
    operation: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    expected_outputs: Any = None
    tolerance: float = DEFAULT_TOLERANCE
    dependencies: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, raw: dict, category: str = "") -> "TestCase":
        tolerance = raw.get("tolerance")
        return cls(
            test_name=str(raw.get("test_name", "")),
            description=str(raw.get("description", "")),
            category=str(raw.get("category", category)),
            operation=str(raw.get("operation", "")),
            inputs=raw.get("inputs") or {},
            expected_outputs=raw.get("expected_outputs"),
            tolerance=DEFAULT_TOLERANCE if tolerance is None else float(tolerance),
            dependencies=[d for d in raw.get("dependencies", []) if isinstance(d, str)],
            tags=[t for t in raw.get("tags", []) if isinstance(t, str)],
        )

    def is_valid(self) -> bool:
        return all((self.test_name, self.description, self.category, self.operation))


@dataclass
class TestCategory:
    """Named group of test cases."""

    __test__ = False

    name: str
    test_cases: List[TestCase] = field(default_factory=list)

    def add_test_case(self, case: TestCase) -> None:
        self.test_cases.append(case)

    def by_tag(self, tag: str) -> List[TestCase]:
        return [c for c in self.test_cases if tag in c.tags]

    def by_name(self, pattern: str) -> List[TestCase]:
        """Cases whose name matches the regex ``pattern``; an invalid regex matches nothing."""
        try:
            regex = re.compile(pattern)
        except re.error:
            return []
        return [c for c in self.test_cases if regex.search(c.test_name)]


@dataclass
class SuiteStatistics:
    total_test_cases: int
    total_categories: int
    tests_per_category: Dict[str, int]
    tests_per_tag: Dict[str, int]


@dataclass
class TestSuite:
    """Categories of test cases plus suite metadata."""

    __test__ = False

    test_suite_name: str
    version: str
    description: str = ""
    test_categories: Dict[str, TestCategory] = field(default_factory=dict)

    @classmethod
    def from_json(cls, raw: dict) -> "TestSuite":
        if not isinstance(raw, dict):
            raise ValueError(f"Suite must be a JSON object, got {type(raw).__name__}")
        categories = {}
        for name, cases in (raw.get("test_categories") or {}).items():
            if not isinstance(cases, list):
                raise ValueError(f"Category '{name}' must be a list of test cases")
            categories[name] = TestCategory(
                name, [TestCase.from_json(c, category=name) for c in cases]
            )
        return cls(
            test_suite_name=str(raw.get("test_suite", "")),
            version=str(raw.get("version", "")),
            description=str(raw.get("description", "")),
            test_categories=categories,
        )

    @classmethod
    def load_string(cls, text: str) -> "TestSuite":
        return cls.from_json(json.loads(text))

    @classmethod
    def load_file(cls, path) -> "TestSuite":
        return cls.load_string(Path(path).read_text(encoding="utf-8"))

    def all_test_cases(self) -> List[TestCase]:
        return [c for cat in self.test_categories.values() for c in cat.test_cases]

    def get_category(self, name: str) -> Optional[TestCategory]:
        return self.test_categories.get(name)

    def by_tag(self, tag: str) -> List[TestCase]:
        return [c for cat in self.test_categories.values() for c in cat.by_tag(tag)]

    def is_valid(self) -> bool:
        if not self.test_suite_name or not self.version:
            return False
        return all(c.is_valid() for c in self.all_test_cases())

    def statistics(self) -> SuiteStatistics:
        tags = Counter(t for c in self.all_test_cases() for t in c.tags)
        per_category = {name: len(cat.test_cases) for name, cat in self.test_categories.items()}
        return SuiteStatistics(
            total_test_cases=sum(per_category.values()),
            total_categories=len(self.test_categories),
            tests_per_category=per_category,
            tests_per_tag=dict(tags),
        )
