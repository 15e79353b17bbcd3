from __future__ import annotations

import logging

from rich.logging import RichHandler

from pipeline import create
from pipeline.utils.logging import setup_logging


def test_setup_logging_installs_rich_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(level="debug", rich_tracebacks=False)
        assert root.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_finalize_logs_wrapper_count(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pipeline.composer"):
        create().append(str.upper, str.strip).finalize(" core ")
    assert "Composing 2 wrapper(s)" in caplog.text
