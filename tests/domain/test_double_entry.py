"""Tests for the double-entry balance helpers."""

from decimal import Decimal

from src.domain.errors import UnbalancedLineItems
from src.domain.models import GeneralLedgerJournalEntryLineItem, Polarity
from src.domain.services.double_entry import (
    filter_amounts_by_polarity,
    sum_amounts,
    validate_double_entry_balance,
)


def _line(amount: str, polarity: Polarity) -> GeneralLedgerJournalEntryLineItem:
    return GeneralLedgerJournalEntryLineItem(
        general_ledger_account_id=f"gl-{polarity.value.lower()}",
        amount=Decimal(amount),
        polarity=polarity,
    )


def test_sum_amounts_is_exact() -> None:
    """Decimal sums should not accumulate float error."""
    assert sum_amounts([Decimal("0.1")] * 3) == Decimal("0.3")
    assert sum_amounts([]) == Decimal("0")


def test_filter_amounts_by_polarity() -> None:
    """Only amounts on the requested side are returned."""
    items = [
        _line("5", Polarity.DEBIT),
        _line("7", Polarity.CREDIT),
        _line("2", Polarity.DEBIT),
    ]

    assert filter_amounts_by_polarity(items, Polarity.DEBIT) == [
        Decimal("5"),
        Decimal("2"),
    ]
    assert filter_amounts_by_polarity(items, Polarity.CREDIT) == [Decimal("7")]


def test_balanced_items_pass() -> None:
    """Equal debit and credit totals should succeed."""
    items = [_line("12.50", Polarity.DEBIT), _line("12.5", Polarity.CREDIT)]

    result = validate_double_entry_balance(items)

    assert result.is_success
    assert result.value == items


def test_unbalanced_items_fail_with_totals() -> None:
    """Mismatched totals should report both sides."""
    result = validate_double_entry_balance(
        [_line("10", Polarity.DEBIT), _line("9.99", Polarity.CREDIT)]
    )

    assert isinstance(result.error, UnbalancedLineItems)
    assert result.error.debit_total == Decimal("10")
    assert result.error.credit_total == Decimal("9.99")
    assert result.error.code == "UNBALANCED_LINE_ITEMS"


def test_empty_items_are_trivially_balanced() -> None:
    """No postings means zero on both sides."""
    assert validate_double_entry_balance([]).is_success
