# -*- coding: utf-8 -*-
"""
Chat Intent Parser

將 LINE 聊天訊息解析為結構化意圖（記帳、股票查詢、買賣、指令）。
解析只決定「接下來要做什麼」，不會動到任何資料。

主要入口：
- classify(text: str) -> Intent
- validate_amount(amount) / validate_quantity(quantity) -> ValidationResult

Usage:
    from smartcapital.parser import classify
    intent = classify("-120 計程車")
"""

from smartcapital.parser.classifier import IntentClassifier, classify, get_default_classifier
from smartcapital.parser.types import (
    INTENT_CLASSES,
    AccountListIntent,
    BuyActionIntent,
    ExpenseCategory,
    ExpenseCategoryIntent,
    ExpenseIntent,
    HelpIntent,
    IncomeCategory,
    IncomeCategoryIntent,
    IncomeIntent,
    Intent,
    IntentType,
    LedgerIntent,
    PortfolioIntent,
    QuantityInputIntent,
    SellActionIntent,
    StockQueryIntent,
    TotalAssetsIntent,
    UnknownIntent,
    WebsiteIntent,
)
from smartcapital.parser.validators import ValidationResult, validate_amount, validate_quantity


# Export
__all__ = [
    "classify",
    "get_default_classifier",
    "IntentClassifier",
    "Intent",
    "IntentType",
    "INTENT_CLASSES",
    "ExpenseCategory",
    "IncomeCategory",
    "ExpenseIntent",
    "IncomeIntent",
    "StockQueryIntent",
    "BuyActionIntent",
    "SellActionIntent",
    "ExpenseCategoryIntent",
    "IncomeCategoryIntent",
    "QuantityInputIntent",
    "HelpIntent",
    "PortfolioIntent",
    "AccountListIntent",
    "TotalAssetsIntent",
    "WebsiteIntent",
    "LedgerIntent",
    "UnknownIntent",
    "ValidationResult",
    "validate_amount",
    "validate_quantity",
]
