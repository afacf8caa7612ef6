# -*- coding: utf-8 -*-
"""
LINE reply message formatters.

每種 IntentType 對應一個回覆格式函式；新增意圖時必須在 _FORMATTERS 補上，
否則 format_reply 會拋 KeyError（測試會檢查所有 IntentType 都有對應）。
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from smartcapital import config
from smartcapital.parser.types import (
    ExpenseCategory,
    IncomeCategory,
    Intent,
    IntentType,
)
from smartcapital.parser.validators import validate_amount, validate_quantity
from smartcapital.shared.category_predictor import predict_expense_category, predict_income_category


def get_help_message() -> str:
    """生成使用說明"""
    return """📖 SmartCapital 使用說明

【生活記帳】
• 支出：輸入 "-120" 或 "-120 計程車"
• 收入：輸入 "+5000" 或 "100 星巴克"
• 一步記帳：輸入 "飲食 120"、"薪資 50000"
→ 純金額會跳出分類選單供您選擇

【投資助理】
• 查詢股價：輸入 "TSLA" 或 "股票 2330"
• 買入/賣出：輸入 "買 2330"、"賣出 AAPL"

【其他功能】
• 查看帳戶：輸入 "帳戶"
• 查看總資產：輸入 "資產"
• 查看持倉：輸入 "持倉"
• 查看說明：輸入 "說明" 或 "help"

🚀 開始記帳與投資吧！"""


def format_amount(value: Decimal) -> str:
    return f"{value:,}"


def _note_line(note: Optional[str]) -> str:
    return f"\n📝 備註：{note}" if note else ""


def _category_menu(categories) -> str:
    return "、".join(category.value for category in categories)


def _format_expense(intent, now: Optional[datetime]) -> str:
    validation = validate_amount(intent.amount)
    if not validation.valid:
        return f"⚠️ {validation.error}"
    suggested = predict_expense_category(intent.amount, now)
    return (
        f"💸 支出 {format_amount(intent.amount)} 元{_note_line(intent.note)}\n"
        f"📂 建議分類：{suggested.value}\n\n"
        f"請選擇分類：{_category_menu(ExpenseCategory)}"
    )


def _format_income(intent, now: Optional[datetime]) -> str:
    validation = validate_amount(intent.amount)
    if not validation.valid:
        return f"⚠️ {validation.error}"
    suggested = predict_income_category(intent.amount, now)
    return (
        f"💰 收入 {format_amount(intent.amount)} 元{_note_line(intent.note)}\n"
        f"📂 建議分類：{suggested.value}\n\n"
        f"請選擇分類：{_category_menu(IncomeCategory)}"
    )


def _format_expense_category(intent, now: Optional[datetime]) -> str:
    validation = validate_amount(intent.amount)
    if not validation.valid:
        return f"⚠️ {validation.error}"
    return (
        f"✅ 記帳成功！\n\n"
        f"📂 分類：{intent.category.value}\n"
        f"💸 支出：{format_amount(intent.amount)} 元{_note_line(intent.note)}"
    )


def _format_income_category(intent, now: Optional[datetime]) -> str:
    validation = validate_amount(intent.amount)
    if not validation.valid:
        return f"⚠️ {validation.error}"
    return (
        f"✅ 記帳成功！\n\n"
        f"📂 分類：{intent.category.value}\n"
        f"💰 收入：{format_amount(intent.amount)} 元{_note_line(intent.note)}"
    )


def _format_quantity(intent, now: Optional[datetime]) -> str:
    validation = validate_quantity(intent.quantity)
    if not validation.valid:
        return f"⚠️ {validation.error}"
    return f"🔢 數量：{format_amount(intent.quantity)} 股\n請先輸入「買 代號」或「賣 代號」開始交易"


def _format_unknown(intent, now: Optional[datetime]) -> str:
    return (
        "💡 試試這些指令：\n\n"
        "📝 記帳：「-120」「飲食 120」「薪資 50000」\n"
        "📊 投資：「TSLA」「買 2330」\n"
        "📈 查詢：「帳戶」「資產」「持倉」\n\n"
        "輸入「說明」查看完整指南"
    )


_FORMATTERS: dict[IntentType, Callable[[Intent, Optional[datetime]], str]] = {
    IntentType.EXPENSE: _format_expense,
    IntentType.INCOME: _format_income,
    IntentType.STOCK_QUERY: lambda intent, now: f"📈 查詢 {intent.symbol} 行情中...",
    IntentType.BUY_ACTION: lambda intent, now: f"🛒 買入 {intent.symbol}\n請輸入要買入的股數（例如：10）",
    IntentType.SELL_ACTION: lambda intent, now: f"📤 賣出 {intent.symbol}\n請輸入要賣出的股數（例如：5）",
    IntentType.EXPENSE_CATEGORY: _format_expense_category,
    IntentType.INCOME_CATEGORY: _format_income_category,
    IntentType.QUANTITY_INPUT: _format_quantity,
    IntentType.HELP: lambda intent, now: get_help_message(),
    IntentType.PORTFOLIO: lambda intent, now: "📊 查詢持倉中...",
    IntentType.ACCOUNT_LIST: lambda intent, now: "💳 查詢帳戶中...",
    IntentType.TOTAL_ASSETS: lambda intent, now: "💎 計算總資產中...",
    IntentType.WEBSITE: lambda intent, now: f"📊 SmartCapital Web\n\n{config.WEBSITE_URL}",
    IntentType.LEDGER: lambda intent, now: f"📝 SmartCapital 記帳\n\n快速記錄你的每一筆收支\n{config.WEBSITE_URL}/ledger",
    IntentType.UNKNOWN: _format_unknown,
}


def format_reply(intent: Intent, now: Optional[datetime] = None) -> str:
    """
    Format the reply text for a classified intent.

    Args:
        intent: classify() 的結果
        now: 建議分類使用的時間（預設為台北時間現在）
    """
    return _FORMATTERS[intent.type](intent, now)


def registered_intent_types() -> frozenset[IntentType]:
    return frozenset(_FORMATTERS)
