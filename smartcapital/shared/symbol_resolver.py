# -*- coding: utf-8 -*-
"""
Stock symbol recognition and Taiwan-code normalization.

The intent parser only needs to know *that* a token looks like a tradable
symbol; quote lookup and listing data live elsewhere. Anything implementing
`SymbolResolver` can be injected into the classifier.
"""

from __future__ import annotations

import re
from typing import Iterable, Protocol

_SYMBOL_PATTERN = re.compile(r"[A-Z0-9]{1,5}")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
# 上市股票 4 碼（2330）；ETF 以 0 開頭 4 或 5 碼（0050, 00878）
_TW_STOCK_PATTERN = re.compile(r"[0-9]{4}")
_TW_ETF_PATTERN = re.compile(r"0[0-9]{3,4}")


class SymbolResolver(Protocol):
    def is_valid_symbol(self, token: str) -> bool:
        ...

    def normalize(self, token: str) -> str:
        ...


def is_taiwan_code(token: str) -> bool:
    return bool(_TW_STOCK_PATTERN.fullmatch(token) or _TW_ETF_PATTERN.fullmatch(token))


def normalize_taiwan_symbol(token: str) -> str:
    """
    自動轉換台股代碼格式

    2330 -> 2330.TW, 00878 -> 00878.TW, AAPL -> AAPL, 2330.TW -> 2330.TW
    """
    clean = token.strip().upper()
    if "." in clean:
        return clean
    if is_taiwan_code(clean):
        return f"{clean}.TW"
    return clean


class DefaultSymbolResolver:
    """
    Format-only symbol check.

    Accepts 1-5 letters/digits (TSLA, QQQ, BTC, 2330). Pure-digit tokens must
    be Taiwan codes. Tokens that are also command keywords (HELP, ...) are
    rejected so the bare-symbol rule does not swallow chat commands.
    """

    def __init__(self, reserved_words: Iterable[str] = ()):
        self._reserved = frozenset(word.upper() for word in reserved_words)

    def is_valid_symbol(self, token: str) -> bool:
        candidate = token.strip().upper()
        if not _SYMBOL_PATTERN.fullmatch(candidate):
            return False
        if candidate in self._reserved:
            return False
        if _DIGITS_PATTERN.fullmatch(candidate):
            return is_taiwan_code(candidate)
        return True

    def normalize(self, token: str) -> str:
        return normalize_taiwan_symbol(token)
