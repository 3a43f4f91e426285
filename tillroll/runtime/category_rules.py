"""Runtime loader for receipt spending-category rules."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from tillroll.receipt.merchant_categories import CategoryRuleLayers, build_category_rule_layers
from tillroll.runtime.logging import get_logger
from tillroll.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_category_rule_layers(config_paths: tuple[str, ...] | None = None) -> CategoryRuleLayers:
    """
    Load category rules from TOML files into in-memory layers.

    Args:
        config_paths: Files to load, lowest priority first. If None, uses the
            packaged defaults followed by the project's
            config/merchant_categories.toml.
    """
    if config_paths is None:
        p = get_paths()
        rule_files = [p.default_merchant_category_rules]
        if p.merchant_category_rules.resolve() != p.default_merchant_category_rules.resolve():
            rule_files.append(p.merchant_category_rules)
    else:
        rule_files = [Path(path) for path in config_paths]

    configs = tuple(_load_toml(path) for path in rule_files)
    layers = build_category_rule_layers(configs)
    logger.debug("Loaded %d category rules from %d files", len(layers.rules), len(rule_files))
    return layers
