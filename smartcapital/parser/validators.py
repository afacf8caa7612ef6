# -*- coding: utf-8 -*-
"""
Quantity / Amount Validators

呼叫端抽取出股數或金額之後，用這兩個函式做上下限檢查。
只做邊界檢查，不處理幣別格式或語系；結果以 ValidationResult 回傳，不拋例外。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]

# 上限（等於上限仍視為有效）
MAX_QUANTITY = 1_000_000
MAX_AMOUNT = 10_000_000


@dataclass(frozen=True)
class ValidationResult:
    """驗證結果；error 只在 valid 為 False 時有值"""

    valid: bool
    error: Optional[str] = None


def _is_nan(value: Number) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def _validate(value: Number, *, ceiling: Number, label: str) -> ValidationResult:
    # NaN 與任何數比較都不成立，需先擋下
    if _is_nan(value) or value <= 0:
        return ValidationResult(valid=False, error=f"{label}必須大於 0")
    if value > ceiling:
        return ValidationResult(valid=False, error=f"{label}過大，請確認輸入")
    return ValidationResult(valid=True)


def validate_quantity(quantity: Number) -> ValidationResult:
    """驗證股數輸入（允許小數股）"""
    return _validate(quantity, ceiling=MAX_QUANTITY, label="數量")


def validate_amount(amount: Number) -> ValidationResult:
    """驗證金額輸入（允許小數）"""
    return _validate(amount, ceiling=MAX_AMOUNT, label="金額")
