# -*- coding: utf-8 -*-
"""
Property tests for the classifier: totality, idempotence, bare-number precedence.
"""

from decimal import Decimal

from hypothesis import assume, given, strategies as st

from smartcapital.parser import (
    INTENT_CLASSES,
    IntentClassifier,
    IntentType,
    StockQueryIntent,
    classify,
)
from smartcapital.shared.symbol_resolver import normalize_taiwan_symbol

_INTENT_CLASS_SET = tuple(INTENT_CLASSES.values())

_BARE_NUMBER = st.from_regex(r"-?[0-9]{1,9}(\.[0-9]{1,2})?", fullmatch=True)


class AcceptEverything:
    def is_valid_symbol(self, token):
        return True

    def normalize(self, token):
        return normalize_taiwan_symbol(token)


@given(st.text())
def test_classify_is_total(text):
    result = classify(text)
    assert isinstance(result, _INTENT_CLASS_SET)


@given(st.text())
def test_classify_is_idempotent(text):
    assert classify(text) == classify(text)


@given(st.text(alphabet="0123456789.+- 　飲食薪資買賣股票說明資產abcXYZ", max_size=20))
def test_classify_total_on_dense_alphabet(text):
    first = classify(text)
    assert isinstance(first, _INTENT_CLASS_SET)
    assert first == classify(text)


@given(_BARE_NUMBER)
def test_bare_number_is_bookkeeping(text):
    assume(Decimal(text) != 0)
    result = classify(text)
    expected = IntentType.EXPENSE if text.startswith("-") else IntentType.INCOME
    assert result.type is expected
    assert result.amount == abs(Decimal(text))
    assert result.amount > 0


@given(_BARE_NUMBER)
def test_bare_number_never_stock_query_even_if_symbol(text):
    assume(Decimal(text) != 0)
    classifier = IntentClassifier(symbols=AcceptEverything())
    assert not isinstance(classifier.classify(text), StockQueryIntent)


@given(st.integers(min_value=1, max_value=10**12), st.text(min_size=1).map(str.strip).filter(bool))
def test_note_is_preserved(amount, note):
    assume(not note[0].isspace())
    result = classify(f"-{amount} {note}")
    assert result.type is IntentType.EXPENSE
    assert result.amount == amount
    assert result.note == note


@given(st.text())
def test_extracted_amounts_are_positive(text):
    result = classify(text)
    for field in ("amount", "quantity"):
        value = getattr(result, field, None)
        if value is not None:
            assert value > 0
