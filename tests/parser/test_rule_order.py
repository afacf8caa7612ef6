# -*- coding: utf-8 -*-
"""
Rule precedence tests with injected symbol resolvers.
"""

from decimal import Decimal

from smartcapital.parser import (
    BuyActionIntent,
    ExpenseIntent,
    HelpIntent,
    IncomeIntent,
    IntentClassifier,
    QuantityInputIntent,
    StockQueryIntent,
    UnknownIntent,
)
from smartcapital.shared.intent_vocabulary import load_vocabulary, parse_vocabulary
from smartcapital.shared.symbol_resolver import normalize_taiwan_symbol


class ListedSymbols:
    """只認得固定清單的 resolver"""

    def __init__(self, *symbols):
        self.symbols = set(symbols)
        self.calls = []

    def is_valid_symbol(self, token):
        self.calls.append(token)
        return token in self.symbols

    def normalize(self, token):
        return normalize_taiwan_symbol(token)


class BrokenSymbols:
    def is_valid_symbol(self, token):
        raise RuntimeError("listing service unavailable")

    def normalize(self, token):
        return normalize_taiwan_symbol(token)


def test_rule_order_is_fixed():
    classifier = IntentClassifier(symbols=ListedSymbols())
    assert [rule.name for rule in classifier.rules] == [
        "signed_amount",
        "plus_amount",
        "bare_symbol",
        "query_command",
        "buy_command",
        "sell_command",
        "expense_category",
        "income_category",
        "quantity",
        "keyword:help",
        "keyword:account_list",
        "keyword:total_assets",
        "keyword:portfolio",
        "keyword:website",
        "keyword:ledger",
    ]


def test_bare_number_wins_over_listed_symbol():
    """即使 2330 是已知代碼，純數字仍是記帳"""
    symbols = ListedSymbols("2330")
    classifier = IntentClassifier(symbols=symbols)

    assert classifier.classify("2330") == IncomeIntent(amount=Decimal("2330"))
    assert symbols.calls == []


def test_listed_numeric_symbol_reached_when_not_an_amount():
    symbols = ListedSymbols("2330")
    classifier = IntentClassifier(symbols=symbols)

    assert classifier.classify("股票 2330") == StockQueryIntent(symbol="2330.TW")


def test_symbol_rule_runs_before_keywords():
    classifier = IntentClassifier(symbols=ListedSymbols("HELP"))
    assert classifier.classify("help") == StockQueryIntent(symbol="HELP")


def test_unlisted_alphabetic_token_is_unknown():
    classifier = IntentClassifier(symbols=ListedSymbols("TSLA"))
    assert classifier.classify("ZZZZ") == UnknownIntent()
    assert classifier.classify("TSLA") == StockQueryIntent(symbol="TSLA")


def test_non_ascii_input_never_reaches_resolver():
    """「ß」.upper() == "SS"，即使 SS 是已知代碼也不可命中"""
    symbols = ListedSymbols("SS", "FFI")
    classifier = IntentClassifier(symbols=symbols)

    assert classifier.classify("ß") == UnknownIntent()
    assert classifier.classify("ﬃ") == UnknownIntent()
    assert symbols.calls == []


def test_default_resolver_does_not_swallow_commands():
    classifier = IntentClassifier()
    assert classifier.classify("help") == HelpIntent()


def test_broken_resolver_does_not_break_classification():
    classifier = IntentClassifier(symbols=BrokenSymbols())

    assert classifier.classify("TSLA") == UnknownIntent()
    assert classifier.classify("-120") == ExpenseIntent(amount=Decimal("120"))
    assert classifier.classify("買入 TSLA") == BuyActionIntent(symbol="TSLA")
    assert classifier.classify("說明") == HelpIntent()


def test_explain_reports_matching_rule():
    classifier = IntentClassifier(symbols=ListedSymbols())

    assert classifier.explain("0.125") == ("quantity", QuantityInputIntent(quantity=Decimal("0.125")))
    assert classifier.explain("+5000") == ("plus_amount", IncomeIntent(amount=Decimal("5000")))
    assert classifier.explain("帳戶")[0] == "keyword:account_list"
    assert classifier.explain("隨便") == (None, UnknownIntent())
    assert classifier.explain("") == (None, UnknownIntent())


def test_injected_vocabulary_replaces_keywords():
    base = load_vocabulary()
    vocabulary = parse_vocabulary(
        {
            "shorthand": {
                "expense": [c.value for c in base.expense_shorthand],
                "income": [c.value for c in base.income_shorthand],
            },
            "keywords": [{"intent": "HELP", "words": ["求救"]}],
        }
    )
    classifier = IntentClassifier(symbols=ListedSymbols(), vocabulary=vocabulary)

    assert classifier.classify("求救") == HelpIntent()
    assert classifier.classify("說明") == UnknownIntent()
    assert classifier.rules[-1].name == "keyword:help"


def test_injected_vocabulary_can_widen_expense_shorthand():
    vocabulary = parse_vocabulary(
        {
            "shorthand": {"expense": ["投資"], "income": ["薪資"]},
            "keywords": [],
        }
    )
    classifier = IntentClassifier(symbols=ListedSymbols(), vocabulary=vocabulary)

    result = classifier.classify("投資 1000")
    assert result.category.value == "投資"
    assert classifier.classify("飲食 100") == UnknownIntent()
