# Tests for the gradeshape logging setup

import io
import logging

from log import ROOT, TqdmHandler, get_logger


def test_hierarchy():
    logger = get_logger("harness.runner")
    assert logger.name == "gradeshape.harness.runner"
    assert logger.parent is logging.getLogger(ROOT)


def test_configured_once():
    get_logger("a")
    get_logger("b")
    handlers = [h for h in logging.getLogger(ROOT).handlers if isinstance(h, TqdmHandler)]
    assert len(handlers) == 1


def test_handler_writes_through_tqdm():
    buf = io.StringIO()
    handler = TqdmHandler(stream=buf)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    record = logging.LogRecord("gradeshape.t", logging.WARNING, __file__, 1,
                               "suite %s", ("x",), None)
    handler.emit(record)
    assert buf.getvalue() == "WARNING suite x\n"


def test_color_wraps_level_name():
    handler = TqdmHandler(use_color=True)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    record = logging.LogRecord("gradeshape.t", logging.ERROR, __file__, 1, "boom", (), None)
    text = handler.format(record)
    assert text.startswith("\033[31mERROR\033[0m")
    assert record.levelname == "ERROR"
