# -*- coding: utf-8 -*-
"""
Intent vocabulary loading.

Shorthand category words and command keywords are kept in
`smartcapital/data/intent_rules.yaml`. They are loaded once into an immutable
`IntentVocabulary` and validated against the category / intent enums, so an
unknown label fails at load time instead of silently never matching.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml

from smartcapital import config
from smartcapital.shared.categories import ExpenseCategory, IncomeCategory, IntentType

logger = logging.getLogger(__name__)

_DEFAULT_RULES_PATH = Path(__file__).resolve().parents[1] / "data" / "intent_rules.yaml"

# 關鍵字只能對應到無欄位的指令意圖
_KEYWORD_INTENTS = frozenset(
    {
        IntentType.HELP,
        IntentType.PORTFOLIO,
        IntentType.ACCOUNT_LIST,
        IntentType.TOTAL_ASSETS,
        IntentType.WEBSITE,
        IntentType.LEDGER,
    }
)


@dataclass(frozen=True)
class KeywordSet:
    intent: IntentType
    words: tuple[str, ...]


@dataclass(frozen=True)
class IntentVocabulary:
    expense_shorthand: tuple[ExpenseCategory, ...]
    income_shorthand: tuple[IncomeCategory, ...]
    keywords: tuple[KeywordSet, ...]

    def ascii_keywords(self) -> tuple[str, ...]:
        """英文字母組成的關鍵字（可能與股票代碼撞名）"""
        return tuple(
            word
            for keyword_set in self.keywords
            for word in keyword_set.words
            if word.isascii() and word.isalpha()
        )


def _resolve_rules_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    if config.INTENT_RULES_PATH:
        return Path(config.INTENT_RULES_PATH)
    return _DEFAULT_RULES_PATH


def _parse_categories(raw: object, enum_cls: type, section: str) -> tuple:
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"intent rules: shorthand.{section} must be a non-empty list")
    categories = []
    for label in raw:
        try:
            categories.append(enum_cls(str(label)))
        except ValueError:
            raise ValueError(f"intent rules: unknown {section} category '{label}'")
    return tuple(categories)


def _parse_keywords(raw: object) -> tuple[KeywordSet, ...]:
    if not isinstance(raw, list):
        raise ValueError("intent rules: keywords must be a list")
    keyword_sets = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError(f"intent rules: invalid keyword entry {item!r}")
        try:
            intent = IntentType(str(item.get("intent")))
        except ValueError:
            raise ValueError(f"intent rules: unknown keyword intent '{item.get('intent')}'")
        if intent not in _KEYWORD_INTENTS:
            raise ValueError(f"intent rules: {intent.value} cannot be triggered by keywords")
        words = tuple(str(word) for word in item.get("words") or [] if str(word).strip())
        if not words:
            raise ValueError(f"intent rules: {intent.value} has no keywords")
        keyword_sets.append(KeywordSet(intent=intent, words=words))
    return tuple(keyword_sets)


def parse_vocabulary(data: dict) -> IntentVocabulary:
    """將 YAML 內容轉為 IntentVocabulary（格式錯誤時拋 ValueError）"""
    if not isinstance(data, dict):
        raise ValueError("intent rules: top level must be a mapping")
    shorthand = data.get("shorthand") or {}
    if not isinstance(shorthand, dict):
        raise ValueError("intent rules: shorthand must be a mapping")
    return IntentVocabulary(
        expense_shorthand=_parse_categories(shorthand.get("expense"), ExpenseCategory, "expense"),
        income_shorthand=_parse_categories(shorthand.get("income"), IncomeCategory, "income"),
        keywords=_parse_keywords(data.get("keywords") or []),
    )


@lru_cache(maxsize=4)
def load_vocabulary(path: Optional[Path] = None) -> IntentVocabulary:
    """Load and validate the intent vocabulary YAML (cached per path)."""
    rules_path = _resolve_rules_path(path)
    logger.debug("Loading intent vocabulary from %s", rules_path)
    with open(rules_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return parse_vocabulary(data)
