# -*- coding: utf-8 -*-
"""
Rule-based category suggestion for two-step bookkeeping.

"-120" / "+5000" 這類純金額記帳沒有分類，回覆時依時間與金額給一個建議分類，
使用者仍可從分類選單改選。只用時間與金額規則，不查歷史紀錄。
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union
from zoneinfo import ZoneInfo

from smartcapital.shared.categories import ExpenseCategory, IncomeCategory

Number = Union[int, float, Decimal]

_TAIPEI_TZ = ZoneInfo("Asia/Taipei")

# 早餐、午餐、晚餐時段（含頭尾小時）
_MEAL_HOURS = ((6, 9), (11, 14), (17, 20))


def _now(timestamp: Optional[datetime]) -> datetime:
    if timestamp is None:
        return datetime.now(_TAIPEI_TZ)
    if timestamp.tzinfo is not None:
        return timestamp.astimezone(_TAIPEI_TZ)
    return timestamp


def _in_hours(hour: int, start: int, end: int) -> bool:
    return start <= hour <= end


def predict_expense_category(amount: Number, timestamp: Optional[datetime] = None) -> ExpenseCategory:
    """
    預測支出分類

    規則依序：
    1. 用餐時段 + 500 元以下 -> 飲食
    2. 金額區間：>10000 居住、5000~10000 購物、2000~5000 週末娛樂/平日購物、
       500~2000 通勤時段交通/其他娛樂、500 以下午餐時段或 200 以下飲食/其他交通
    """
    now = _now(timestamp)
    hour = now.hour
    value = Decimal(str(amount))

    if any(_in_hours(hour, start, end) for start, end in _MEAL_HOURS) and value < 500:
        return ExpenseCategory.FOOD

    if value > 10000:
        return ExpenseCategory.HOUSING
    if value > 5000:
        return ExpenseCategory.SHOPPING
    if value > 2000:
        # weekday(): 週一為 0，週六 5、週日 6
        if now.weekday() >= 5:
            return ExpenseCategory.ENTERTAINMENT
        return ExpenseCategory.SHOPPING
    if value > 500:
        if _in_hours(hour, 7, 9) or _in_hours(hour, 17, 19):
            return ExpenseCategory.TRANSPORT
        return ExpenseCategory.ENTERTAINMENT
    if _in_hours(hour, 11, 14) or value < 200:
        return ExpenseCategory.FOOD
    return ExpenseCategory.TRANSPORT


def predict_income_category(amount: Number, timestamp: Optional[datetime] = None) -> IncomeCategory:
    """預測收入分類（月初大額視為薪資）"""
    now = _now(timestamp)
    early_month = 1 <= now.day <= 10
    value = Decimal(str(amount))

    if early_month and value > 30000:
        return IncomeCategory.SALARY
    if value > 50000:
        return IncomeCategory.SALARY
    if value > 10000:
        return IncomeCategory.SALARY if early_month else IncomeCategory.BONUS
    if value > 1000:
        return IncomeCategory.SIDE_JOB
    return IncomeCategory.DIVIDEND
