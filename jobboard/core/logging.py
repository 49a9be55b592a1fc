"""
Logging setup - every module gets its logger from get_logger().
Level comes from LOG_LEVEL; DEBUG=true forces debug output.
"""

import logging
import sys
from functools import lru_cache

from jobboard.core.config import get_settings


@lru_cache()
def _setup_root() -> logging.Logger:
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Leave handlers installed by uvicorn or pytest alone
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    _setup_root()
    return logging.getLogger(name)
