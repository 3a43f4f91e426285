"""Runtime infrastructure for tillroll.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Category rule loading via load_category_rule_layers()

The FastAPI app lives in tillroll.runtime.receipt_server and is imported
lazily by the CLI so the parser works without the server stack.

Usage:
    from tillroll.runtime import get_logger, get_paths

    logger = get_logger(__name__)
    paths = get_paths()
    print(paths.root, paths.merchant_category_rules)
"""

from tillroll.runtime.category_rules import load_category_rule_layers
from tillroll.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from tillroll.runtime.paths import ProjectPaths, get_paths, reset_paths

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_category_rule_layers",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
