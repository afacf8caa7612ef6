# -*- coding: utf-8 -*-
"""
Intent Classifier

將一行聊天訊息分類為單一 Intent。純函式、無副作用、不會拋例外：
任何無法辨識的輸入都回傳 UnknownIntent。
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from smartcapital.parser.rules import Rule, RuleContext, build_rules
from smartcapital.parser.types import Intent, UnknownIntent
from smartcapital.shared.intent_vocabulary import IntentVocabulary, load_vocabulary
from smartcapital.shared.symbol_resolver import DefaultSymbolResolver, SymbolResolver

logger = logging.getLogger(__name__)


class IntentClassifier:
    """
    Ordered rule cascade over trimmed input.

    Args:
        symbols: 股票代碼判斷與正規化能力（預設只做格式檢查）
        vocabulary: 分類與指令詞彙（預設讀取 intent_rules.yaml）
    """

    def __init__(
        self,
        symbols: Optional[SymbolResolver] = None,
        vocabulary: Optional[IntentVocabulary] = None,
    ):
        self.vocabulary = vocabulary or load_vocabulary()
        self.symbols = symbols or DefaultSymbolResolver(self.vocabulary.ascii_keywords())
        self.rules: tuple[Rule, ...] = build_rules(self.vocabulary)
        self._context = RuleContext.build(self.symbols, self.vocabulary)

    def explain(self, text: Optional[str]) -> tuple[Optional[str], Intent]:
        """回傳 (符合的規則名稱, Intent)；沒有規則符合時名稱為 None"""
        trimmed = (text or "").strip()
        if not trimmed:
            return None, UnknownIntent()

        for rule in self.rules:
            intent = rule.match(trimmed, self._context)
            if intent is not None:
                logger.debug("Rule %s matched %r -> %s", rule.name, trimmed, intent.type.value)
                return rule.name, intent

        logger.debug("No rule matched %r", trimmed)
        return None, UnknownIntent()

    def classify(self, text: Optional[str]) -> Intent:
        return self.explain(text)[1]


@lru_cache(maxsize=1)
def get_default_classifier() -> IntentClassifier:
    return IntentClassifier()


def classify(text: Optional[str]) -> Intent:
    """
    解析使用者訊息，判斷意圖。

    Usage:
        from smartcapital.parser import classify
        intent = classify("買 2330")  # BuyActionIntent(symbol='2330.TW')
    """
    return get_default_classifier().classify(text)
