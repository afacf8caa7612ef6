# -*- coding: utf-8 -*-
"""
Intent Types for the chat intent parser

定義聊天訊息解析後的意圖 (Intent)。每個意圖是一個不可變的 dataclass，
只攜帶該意圖需要的欄位；金額與數量一律為正的 Decimal，正負號由意圖類型表示。
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Optional, Union

from smartcapital.shared.categories import ExpenseCategory, IncomeCategory, IntentType


def _amount_str(value: Decimal) -> str:
    return format(value, "f")


@dataclass(frozen=True)
class ExpenseIntent:
    type: ClassVar[IntentType] = IntentType.EXPENSE

    amount: Decimal
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {"type": self.type.value, "amount": _amount_str(self.amount), "note": self.note}


@dataclass(frozen=True)
class IncomeIntent:
    type: ClassVar[IntentType] = IntentType.INCOME

    amount: Decimal
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {"type": self.type.value, "amount": _amount_str(self.amount), "note": self.note}


@dataclass(frozen=True)
class StockQueryIntent:
    type: ClassVar[IntentType] = IntentType.STOCK_QUERY

    symbol: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "symbol": self.symbol}


@dataclass(frozen=True)
class BuyActionIntent:
    type: ClassVar[IntentType] = IntentType.BUY_ACTION

    symbol: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "symbol": self.symbol}


@dataclass(frozen=True)
class SellActionIntent:
    type: ClassVar[IntentType] = IntentType.SELL_ACTION

    symbol: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "symbol": self.symbol}


@dataclass(frozen=True)
class ExpenseCategoryIntent:
    type: ClassVar[IntentType] = IntentType.EXPENSE_CATEGORY

    category: ExpenseCategory
    amount: Decimal
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "category": self.category.value,
            "amount": _amount_str(self.amount),
            "note": self.note,
        }


@dataclass(frozen=True)
class IncomeCategoryIntent:
    type: ClassVar[IntentType] = IntentType.INCOME_CATEGORY

    category: IncomeCategory
    amount: Decimal
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "category": self.category.value,
            "amount": _amount_str(self.amount),
            "note": self.note,
        }


@dataclass(frozen=True)
class QuantityInputIntent:
    type: ClassVar[IntentType] = IntentType.QUANTITY_INPUT

    quantity: Decimal

    def to_dict(self) -> dict:
        return {"type": self.type.value, "quantity": _amount_str(self.quantity)}


@dataclass(frozen=True)
class _CommandIntent:
    """無欄位的指令意圖共用基底"""

    type: ClassVar[IntentType]

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class HelpIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.HELP


@dataclass(frozen=True)
class PortfolioIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.PORTFOLIO


@dataclass(frozen=True)
class AccountListIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.ACCOUNT_LIST


@dataclass(frozen=True)
class TotalAssetsIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.TOTAL_ASSETS


@dataclass(frozen=True)
class WebsiteIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.WEBSITE


@dataclass(frozen=True)
class LedgerIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.LEDGER


@dataclass(frozen=True)
class UnknownIntent(_CommandIntent):
    type: ClassVar[IntentType] = IntentType.UNKNOWN


Intent = Union[
    ExpenseIntent,
    IncomeIntent,
    StockQueryIntent,
    BuyActionIntent,
    SellActionIntent,
    ExpenseCategoryIntent,
    IncomeCategoryIntent,
    QuantityInputIntent,
    HelpIntent,
    PortfolioIntent,
    AccountListIntent,
    TotalAssetsIntent,
    WebsiteIntent,
    LedgerIntent,
    UnknownIntent,
]

# IntentType -> 意圖類別；新增意圖時必須同步更新（測試會檢查）
INTENT_CLASSES: dict[IntentType, type] = {
    cls.type: cls
    for cls in (
        ExpenseIntent,
        IncomeIntent,
        StockQueryIntent,
        BuyActionIntent,
        SellActionIntent,
        ExpenseCategoryIntent,
        IncomeCategoryIntent,
        QuantityInputIntent,
        HelpIntent,
        PortfolioIntent,
        AccountListIntent,
        TotalAssetsIntent,
        WebsiteIntent,
        LedgerIntent,
        UnknownIntent,
    )
}
