# -*- coding: utf-8 -*-
"""
Intent Rules (ordered cascade)

每條規則是一個 (name, match) 組合：match 接收已 trim 的訊息，
符合時回傳 Intent，不符合回傳 None。規則依序比對，第一個符合者勝出，
沒有評分也沒有回溯，因此規則順序就是整個設計。

順序：
  1. signed_amount     -120 / 100 / 100 星巴克      -> EXPENSE / INCOME
  2. plus_amount       +5000 / +100 牛肉麵            -> INCOME
  3. bare_symbol       TSLA                            -> STOCK_QUERY
  4. query_command     股票 2330 / 查詢 TSLA           -> STOCK_QUERY
  5. buy_command       買 2330 / 買入 TSLA             -> BUY_ACTION
  6. sell_command      賣 2330 / 賣出 AAPL             -> SELL_ACTION
  7. expense_category  飲食 120                        -> EXPENSE_CATEGORY
  8. income_category   薪資 50000                      -> INCOME_CATEGORY
  9. quantity          0.125                           -> QUANTITY_INPUT
 10. keyword:*         說明 / 帳戶 / 資產 / ...        -> 指令意圖

純數字一律先被規則 1 當成記帳金額（記帳優先於股票代碼），
數字股票代碼只能透過 4~6 的明確指令查詢或交易。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional

from smartcapital.parser.types import (
    INTENT_CLASSES,
    BuyActionIntent,
    ExpenseCategory,
    ExpenseCategoryIntent,
    ExpenseIntent,
    IncomeCategory,
    IncomeCategoryIntent,
    IncomeIntent,
    Intent,
    QuantityInputIntent,
    SellActionIntent,
    StockQueryIntent,
)
from smartcapital.shared.intent_vocabulary import IntentVocabulary, KeywordSet
from smartcapital.shared.symbol_resolver import SymbolResolver

logger = logging.getLogger(__name__)

# 只接受半形數字；\s 保留 Unicode 語意，全形空白也能當分隔
_AMOUNT = r"[0-9]+(?:\.[0-9]{1,2})?"
_QUANTITY = r"[0-9]+(?:\.[0-9]{1,4})?"
_NOTE = r"(?:\s+(?P<note>.+))?"

_SIGNED_AMOUNT_PATTERN = re.compile(rf"(?P<sign>-?)(?P<amount>{_AMOUNT}){_NOTE}", re.DOTALL)
_PLUS_AMOUNT_PATTERN = re.compile(rf"\+(?P<amount>{_AMOUNT}){_NOTE}", re.DOTALL)
_QUERY_PATTERN = re.compile(r"(?:股票查詢|查詢|股票|股)\s+(?P<symbol>[A-Za-z0-9]+)")
_BUY_PATTERN = re.compile(r"買入?\s+(?P<symbol>[A-Za-z0-9]+)")
_SELL_PATTERN = re.compile(r"賣出?\s+(?P<symbol>[A-Za-z0-9]+)")
_QUANTITY_PATTERN = re.compile(_QUANTITY)


def _category_pattern(labels: tuple[str, ...]) -> re.Pattern[str]:
    # 長字詞優先，避免前綴相同的分類被短字詞搶先
    alternatives = "|".join(re.escape(label) for label in sorted(labels, key=len, reverse=True))
    return re.compile(rf"(?P<category>{alternatives})\s+(?P<amount>{_AMOUNT}){_NOTE}", re.DOTALL)


@dataclass(frozen=True)
class RuleContext:
    """規則比對時需要的外部能力與預先編譯的 pattern"""

    symbols: SymbolResolver
    vocabulary: IntentVocabulary
    expense_pattern: re.Pattern[str]
    income_pattern: re.Pattern[str]

    @classmethod
    def build(cls, symbols: SymbolResolver, vocabulary: IntentVocabulary) -> "RuleContext":
        return cls(
            symbols=symbols,
            vocabulary=vocabulary,
            expense_pattern=_category_pattern(tuple(c.value for c in vocabulary.expense_shorthand)),
            income_pattern=_category_pattern(tuple(c.value for c in vocabulary.income_shorthand)),
        )


@dataclass(frozen=True)
class Rule:
    name: str
    match: Callable[[str, RuleContext], Optional[Intent]]


def _positive(raw: str) -> Optional[Decimal]:
    value = Decimal(raw)
    return value if value > 0 else None


def _note(match: re.Match) -> Optional[str]:
    return match.group("note") or None


def match_signed_amount(text: str, ctx: RuleContext) -> Optional[Intent]:
    match = _SIGNED_AMOUNT_PATTERN.fullmatch(text)
    if not match:
        return None
    amount = _positive(match.group("amount"))
    if amount is None:
        # 0 不是記帳金額，交給後續規則
        return None
    if match.group("sign"):
        return ExpenseIntent(amount=amount, note=_note(match))
    return IncomeIntent(amount=amount, note=_note(match))


def match_plus_amount(text: str, ctx: RuleContext) -> Optional[Intent]:
    match = _PLUS_AMOUNT_PATTERN.fullmatch(text)
    if not match:
        return None
    amount = _positive(match.group("amount"))
    if amount is None:
        return None
    return IncomeIntent(amount=amount, note=_note(match))


def match_bare_symbol(text: str, ctx: RuleContext) -> Optional[Intent]:
    # 先擋非 ASCII：「ß」.upper() 會變成「SS」
    if not text.isascii():
        return None
    token = text.upper()
    try:
        if not ctx.symbols.is_valid_symbol(token):
            return None
        symbol = ctx.symbols.normalize(token)
    except Exception:
        # 外部注入的判斷函式出錯時視為不符合，解析本身不得失敗
        logger.warning("Symbol resolver failed for %r; skipping symbol rule", token, exc_info=True)
        return None
    return StockQueryIntent(symbol=symbol)


def _symbol_command(pattern: re.Pattern[str], intent_cls: type) -> Callable[[str, RuleContext], Optional[Intent]]:
    def _match(text: str, ctx: RuleContext) -> Optional[Intent]:
        match = pattern.fullmatch(text)
        if not match:
            return None
        try:
            symbol = ctx.symbols.normalize(match.group("symbol").upper())
        except Exception:
            logger.warning("Symbol normalization failed for %r", match.group("symbol"), exc_info=True)
            return None
        return intent_cls(symbol=symbol)

    return _match


def match_expense_category(text: str, ctx: RuleContext) -> Optional[Intent]:
    match = ctx.expense_pattern.fullmatch(text)
    if not match:
        return None
    amount = _positive(match.group("amount"))
    if amount is None:
        return None
    return ExpenseCategoryIntent(
        category=ExpenseCategory(match.group("category")),
        amount=amount,
        note=_note(match),
    )


def match_income_category(text: str, ctx: RuleContext) -> Optional[Intent]:
    match = ctx.income_pattern.fullmatch(text)
    if not match:
        return None
    amount = _positive(match.group("amount"))
    if amount is None:
        return None
    return IncomeCategoryIntent(
        category=IncomeCategory(match.group("category")),
        amount=amount,
        note=_note(match),
    )


def match_quantity(text: str, ctx: RuleContext) -> Optional[Intent]:
    # NOTE: signed_amount 已吃掉整數與兩位小數，實際上只有 3~4 位小數會走到這裡。
    # 兩步式交易流程是否依賴此行為尚未確認，維持現有順序，不要自行調整。
    if not _QUANTITY_PATTERN.fullmatch(text):
        return None
    quantity = _positive(text)
    if quantity is None:
        return None
    return QuantityInputIntent(quantity=quantity)


def keyword_rule(keyword_set: KeywordSet) -> Rule:
    """建立指令關鍵字規則（子字串比對、不分大小寫）"""
    words = tuple(word.casefold() for word in keyword_set.words)
    intent_cls = INTENT_CLASSES[keyword_set.intent]

    def _match(text: str, ctx: RuleContext) -> Optional[Intent]:
        folded = text.casefold()
        if any(word in folded for word in words):
            return intent_cls()
        return None

    return Rule(name=f"keyword:{keyword_set.intent.value.lower()}", match=_match)


CORE_RULES: tuple[Rule, ...] = (
    Rule("signed_amount", match_signed_amount),
    Rule("plus_amount", match_plus_amount),
    Rule("bare_symbol", match_bare_symbol),
    Rule("query_command", _symbol_command(_QUERY_PATTERN, StockQueryIntent)),
    Rule("buy_command", _symbol_command(_BUY_PATTERN, BuyActionIntent)),
    Rule("sell_command", _symbol_command(_SELL_PATTERN, SellActionIntent)),
    Rule("expense_category", match_expense_category),
    Rule("income_category", match_income_category),
    Rule("quantity", match_quantity),
)


def build_rules(vocabulary: IntentVocabulary) -> tuple[Rule, ...]:
    """完整規則串：核心規則 + 依設定順序的指令關鍵字規則"""
    return CORE_RULES + tuple(keyword_rule(keyword_set) for keyword_set in vocabulary.keywords)
