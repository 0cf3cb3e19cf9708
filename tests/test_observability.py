from __future__ import annotations

import logging

from luxplan.core.observability import HANDLER_NAME, setup_logging


def test_setup_logging_adds_one_named_handler() -> None:
    logger = logging.getLogger("luxplan")
    setup_logging("DEBUG")
    setup_logging("INFO")
    named = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert logger.level == logging.INFO
    setup_logging("WARNING")
