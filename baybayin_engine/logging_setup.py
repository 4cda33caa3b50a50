import logging
import sys
from typing import Optional

import structlog

from baybayin_engine.config import load_config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging on stderr and route structlog through it."""
    level = (level or load_config().log_level).upper()

    _logger = logging.getLogger()
    _logger.setLevel(level)
    # Replace only the handler installed by a previous call
    for handler in list(_logger.handlers):
        if getattr(handler, "_baybayin_console", False):
            _logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._baybayin_console = True
    _logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event", "logger"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
