"""Spending category guessing for parsed receipts.

Maps "<merchant> <item name>" text to a category id such as "market" or
"food" using keyword rules. Rules are data: the packaged defaults live in
tillroll/receipt/rules/default_merchant_categories.toml and projects can
layer their own file on top (see tillroll.runtime.category_rules).

Matching is case-insensitive and Turkish-aware (İ/ı fold to I/i).
Keywords of 3 characters or fewer must match a whole word, so "bim"
does not fire inside "BIMBO".
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from tillroll.domain.receipt import ParsedReceipt

DEFAULT_CATEGORY = "other"

# Keywords at most this long are matched as whole words only
SHORT_KEYWORD_LENGTH = 3

# (keywords, category, priority)
RuleEntry = tuple[tuple[str, ...], str, int]


@dataclass(frozen=True)
class CategoryRuleLayers:
    """In-memory category rules, highest priority first."""

    rules: tuple[RuleEntry, ...]
    default_category: str = DEFAULT_CATEGORY


def _normalize_text(text: str) -> str:
    # str.upper() leaves "İ" alone and maps "ı" to "I"; fold both first
    return text.replace("İ", "I").replace("ı", "i").upper()


def _normalize_keywords(raw: Any) -> tuple[str, ...]:
    """Normalize keywords value from TOML into a tuple of non-empty strings."""
    if isinstance(raw, str):
        value = raw.strip()
        return (value,) if value else tuple()
    if isinstance(raw, list):
        return tuple(str(v).strip() for v in raw if str(v).strip())
    return tuple()


def build_category_rule_layers(configs: Sequence[Mapping[str, Any]] | None = None) -> CategoryRuleLayers:
    """
    Merge rule configs into one ordered rule set.

    Later configs get a higher layer priority, so a project file listed after
    the packaged defaults overrides them. Within a layer, an explicit
    ``priority`` on a rule breaks ties, then file order.
    """
    rules: list[RuleEntry] = []
    default_category = DEFAULT_CATEGORY
    for idx, config in enumerate(configs or (), start=1):
        layer_priority = idx * 100
        configured_default = str(config.get("default_category", "")).strip()
        if configured_default:
            default_category = configured_default

        for rule in config.get("rules", []):
            if not isinstance(rule, Mapping):
                continue
            keywords = _normalize_keywords(rule.get("keywords"))
            if not keywords:
                continue
            category = str(rule.get("category") or "").strip()
            if not category:
                continue
            priority = int(rule.get("priority", 0)) + layer_priority
            rules.append((keywords, category, priority))

    # sorted() is stable, so equal priorities keep file order
    ordered = sorted(rules, key=lambda entry: entry[2], reverse=True)
    return CategoryRuleLayers(rules=tuple(ordered), default_category=default_category)


@lru_cache(maxsize=256)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    normalized = _normalize_text(keyword)
    if len(normalized) <= SHORT_KEYWORD_LENGTH:
        return re.compile(r"\b" + re.escape(normalized) + r"\b")
    return re.compile(re.escape(normalized))


def guess_category(text: str, rule_layers: CategoryRuleLayers) -> str:
    """Return the category of the first matching rule, or the default category."""
    normalized = _normalize_text(text)
    if not normalized.strip():
        return rule_layers.default_category
    for keywords, category, _priority in rule_layers.rules:
        if any(_keyword_pattern(keyword).search(normalized) for keyword in keywords):
            return category
    return rule_layers.default_category


def guess_item_categories(receipt: ParsedReceipt, rule_layers: CategoryRuleLayers) -> list[str]:
    """Guess a category per item from the merchant name plus the item name."""
    merchant = receipt.merchant_name or ""
    return [guess_category(f"{merchant} {item.name}", rule_layers) for item in receipt.items]
