import pytest

from smartcapital import config
from smartcapital.parser.types import ExpenseCategory, IncomeCategory, IntentType
from smartcapital.shared.intent_vocabulary import load_vocabulary, parse_vocabulary


def _minimal(**overrides) -> dict:
    data = {
        "shorthand": {"expense": ["飲食"], "income": ["薪資"]},
        "keywords": [{"intent": "HELP", "words": ["說明"]}],
    }
    data.update(overrides)
    return data


def test_packaged_vocabulary_shorthand_excludes_investment() -> None:
    vocabulary = load_vocabulary()
    assert ExpenseCategory.INVESTMENT not in vocabulary.expense_shorthand
    assert set(vocabulary.expense_shorthand) == set(ExpenseCategory) - {ExpenseCategory.INVESTMENT}
    assert set(vocabulary.income_shorthand) == set(IncomeCategory)


def test_packaged_vocabulary_keyword_order() -> None:
    vocabulary = load_vocabulary()
    assert [k.intent for k in vocabulary.keywords] == [
        IntentType.HELP,
        IntentType.ACCOUNT_LIST,
        IntentType.TOTAL_ASSETS,
        IntentType.PORTFOLIO,
        IntentType.WEBSITE,
        IntentType.LEDGER,
    ]


def test_packaged_keyword_sets_are_disjoint() -> None:
    vocabulary = load_vocabulary()
    words = [word for keyword_set in vocabulary.keywords for word in keyword_set.words]
    assert len(words) == len(set(words))


def test_ascii_keywords() -> None:
    assert set(load_vocabulary().ascii_keywords()) == {"help", "portfolio", "website"}


def test_unknown_category_rejected() -> None:
    with pytest.raises(ValueError, match="unknown expense category"):
        parse_vocabulary(_minimal(shorthand={"expense": ["午餐"], "income": ["薪資"]}))


def test_empty_shorthand_rejected() -> None:
    with pytest.raises(ValueError, match="shorthand.income"):
        parse_vocabulary(_minimal(shorthand={"expense": ["飲食"], "income": []}))


def test_payload_intent_cannot_be_keyword() -> None:
    with pytest.raises(ValueError, match="cannot be triggered by keywords"):
        parse_vocabulary(_minimal(keywords=[{"intent": "EXPENSE", "words": ["花"]}]))


def test_unknown_keyword_intent_rejected() -> None:
    with pytest.raises(ValueError, match="unknown keyword intent"):
        parse_vocabulary(_minimal(keywords=[{"intent": "DANCE", "words": ["跳舞"]}]))


def test_keyword_set_without_words_rejected() -> None:
    with pytest.raises(ValueError, match="has no keywords"):
        parse_vocabulary(_minimal(keywords=[{"intent": "HELP", "words": []}]))


def test_rules_path_override(tmp_path, monkeypatch, fresh_vocabulary_cache) -> None:
    rules_file = tmp_path / "rules.yaml"
    rules_file.write_text(
        "shorthand:\n"
        "  expense: [交通]\n"
        "  income: [獎金]\n"
        "keywords:\n"
        "  - intent: LEDGER\n"
        "    words: [帳本]\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(config, "INTENT_RULES_PATH", str(rules_file))

    vocabulary = load_vocabulary()

    assert vocabulary.expense_shorthand == (ExpenseCategory.TRANSPORT,)
    assert vocabulary.income_shorthand == (IncomeCategory.BONUS,)
    assert vocabulary.keywords[0].intent is IntentType.LEDGER
    assert vocabulary.keywords[0].words == ("帳本",)
