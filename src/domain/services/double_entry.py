"""Double-entry balance helpers shared by journal entry factories."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from src.domain.errors import UnbalancedLineItems
from src.domain.models import Fail, Ok, Polarity, Result


class PostingLike(Protocol):
    """Anything carrying an amount on a debit or credit side."""

    amount: Decimal
    polarity: Polarity


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Return the exact sum of monetary amounts.

    Args:
        amounts: Decimal amounts to add.

    Returns:
        Decimal: Sum of the amounts, zero when empty.
    """
    return sum(amounts, Decimal("0"))


def filter_amounts_by_polarity(
    items: Iterable[PostingLike],
    polarity: Polarity,
) -> list[Decimal]:
    """Return the amounts of items posted on the given side.

    Args:
        items: Entries or line items.
        polarity: Side to keep.

    Returns:
        list[Decimal]: Amounts of the matching items, in input order.
    """
    return [item.amount for item in items if item.polarity == polarity]


def validate_double_entry_balance(items: Iterable[PostingLike]) -> Result:
    """Check that total debits equal total credits.

    Args:
        items: Entries or line items to check.

    Returns:
        Result: ``Ok`` with the items as a list, or ``Fail`` carrying
        ``UnbalancedLineItems``.
    """
    items = list(items)
    debit_total = sum_amounts(filter_amounts_by_polarity(items, Polarity.DEBIT))
    credit_total = sum_amounts(
        filter_amounts_by_polarity(items, Polarity.CREDIT)
    )
    if debit_total != credit_total:
        return Fail(UnbalancedLineItems(debit_total, credit_total))
    return Ok(items)


__all__ = [
    "PostingLike",
    "sum_amounts",
    "filter_amounts_by_polarity",
    "validate_double_entry_balance",
]
