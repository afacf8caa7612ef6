# -*- coding: utf-8 -*-
"""
Intent and category enums

意圖類型與收支分類。放在 parser 套件之外，詞彙設定載入時不需要先載入解析器。
"""

from enum import Enum


class IntentType(Enum):
    """意圖類型 Enum"""

    EXPENSE = "EXPENSE"                     # 支出（兩步式記帳）
    INCOME = "INCOME"                       # 收入（兩步式記帳）
    STOCK_QUERY = "STOCK_QUERY"             # 查詢股價
    BUY_ACTION = "BUY_ACTION"               # 買入流程
    SELL_ACTION = "SELL_ACTION"             # 賣出流程
    EXPENSE_CATEGORY = "EXPENSE_CATEGORY"   # 一步式分類支出
    INCOME_CATEGORY = "INCOME_CATEGORY"     # 一步式分類收入
    QUANTITY_INPUT = "QUANTITY_INPUT"       # 股數輸入
    HELP = "HELP"
    PORTFOLIO = "PORTFOLIO"
    ACCOUNT_LIST = "ACCOUNT_LIST"
    TOTAL_ASSETS = "TOTAL_ASSETS"
    WEBSITE = "WEBSITE"
    LEDGER = "LEDGER"
    UNKNOWN = "UNKNOWN"


class ExpenseCategory(Enum):
    """支出分類（完整清單，亦用於 UI 分類選單與儲存值）"""

    FOOD = "飲食"
    TRANSPORT = "交通"
    HOUSING = "居住"
    ENTERTAINMENT = "娛樂"
    SHOPPING = "購物"
    MEDICAL = "醫療"
    INVESTMENT = "投資"
    OTHER = "其他"


class IncomeCategory(Enum):
    """收入分類"""

    SALARY = "薪資"
    BONUS = "獎金"
    DIVIDEND = "股息"
    INVESTMENT_GAIN = "投資獲利"
    SIDE_JOB = "兼職"
    OTHER = "其他"
