# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Gradeshape CLI entry point. Runs a JSON test suite.

    python main.py suite=path/to/suite.json category=term_addition verbose=true

Exit status is 0 iff every selected test passes.
"""

import sys
from pathlib import Path

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig

from harness import ExecutionContext, TestSuite, json_report, suite_info, text_report
from log import get_logger
from output import CanonicalOutput, OutputConfig

logger = get_logger(__name__)


def run(cfg: DictConfig, stream=None) -> int:
    """Load, filter, execute and report.

    Args:
        cfg (DictConfig): Runner options (see ``conf/config.yaml``).
        stream: Where reports are written. Defaults to ``sys.stdout``.

    Returns:
        int: Process exit code.
    """
    stream = stream or sys.stdout
    path = Path(to_absolute_path(cfg.suite)) if _in_hydra() else Path(cfg.suite)
    if not path.exists():
        logger.error("Test file %s does not exist", path)
        return 1

    logger.info("Loading test suite from: %s", path)
    suite = TestSuite.load_file(path)
    if not suite.is_valid():
        logger.error("Invalid test suite: %s", path)
        return 1

    if cfg.stats:
        print(suite_info(suite), file=stream)

    context = ExecutionContext(verbose=cfg.verbose, progress=cfg.get("progress", False))
    if cfg.category:
        category = suite.get_category(cfg.category)
        if category is None:
            logger.error("Category '%s' not found. Available: %s",
                         cfg.category, list(suite.test_categories))
            return 1
        cases = category.by_tag(cfg.tag) if cfg.tag else category.test_cases
        results = context.run_cases(cases, desc=category.name)
    elif cfg.tag:
        results = context.run_cases(suite.by_tag(cfg.tag), desc=cfg.tag)
    else:
        results = context.run_suite(suite)

    if cfg.format == "json":
        print(json_report(results), file=stream)
    elif cfg.format == "text":
        print(text_report(results, show_stats=cfg.stats), file=stream)
    else:
        raise ValueError(f"Unknown format: {cfg.format}. Available: ['text', 'json']")

    failed = sum(not r.passed for r in results)
    if cfg.format == "text":
        out = CanonicalOutput(OutputConfig.from_cfg(cfg.get("output")), stream=stream)
        if failed:
            out.print_error(f"{failed} of {len(results)} tests failed")
        else:
            out.print_success(f"All {len(results)} tests passed")
    return 1 if failed else 0


def _in_hydra() -> bool:
    from hydra.core.hydra_config import HydraConfig
    return HydraConfig.initialized()


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Runs the configured suite and exits with its status.

    Args:
        cfg (DictConfig): The plan.
    """
    sys.exit(run(cfg))


if __name__ == "__main__":
    main()
