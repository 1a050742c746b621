from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

from llmplatform.core.settings import Settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Marks the handler installed here so repeated calls don't stack handlers.
_HANDLER_NAME = "llmplatform-stdout"


def setup_logging(settings: Settings) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())

    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.set_name(_HANDLER_NAME)

    if settings.log_json:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(LOG_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    log_handler.setFormatter(formatter)
    root_logger.addHandler(log_handler)
