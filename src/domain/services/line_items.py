"""Aggregation of project entries into general-ledger line items."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEFAULT_DESCRIPTION_SEPARATOR
from src.domain.models import (
    Entry,
    GeneralLedgerJournalEntryLineItem,
    Polarity,
    ProjectJournalEntry,
)

_POLARITY_ORDER = (Polarity.DEBIT, Polarity.CREDIT)


def flatten_entries(
    project_journal_entries: Iterable[ProjectJournalEntry],
) -> list[Entry]:
    """Return every entry of every project journal entry, in input order."""
    return [
        entry
        for project_journal_entry in project_journal_entries
        for entry in project_journal_entry.entries
    ]


def aggregate_line_items(
    project_journal_entries: Iterable[ProjectJournalEntry],
    separator: str = DEFAULT_DESCRIPTION_SEPARATOR,
) -> tuple[GeneralLedgerJournalEntryLineItem, ...]:
    """Merge entries into one line item per general-ledger account and side.

    Entries are grouped by the business account their project account maps
    to. Amounts in a group are summed exactly and the description lists the
    contributing project-account names once each, in first-seen order.

    Args:
        project_journal_entries: Entries sharing one source transaction.
        separator: Separator used to join description names.

    Returns:
        tuple[GeneralLedgerJournalEntryLineItem, ...]: Debit line items
        followed by credit line items, accounts in first-seen order.
    """
    totals: dict[tuple[str, Polarity], Decimal] = {}
    names: dict[tuple[str, Polarity], dict[str, None]] = {}

    for entry in flatten_entries(project_journal_entries):
        key = (str(entry.account.business_account.id), entry.polarity)
        totals[key] = totals.get(key, Decimal("0")) + entry.amount
        names.setdefault(key, {}).setdefault(entry.account.name)

    return tuple(
        GeneralLedgerJournalEntryLineItem(
            general_ledger_account_id=account_id,
            amount=amount,
            polarity=polarity,
            description=separator.join(names[(account_id, polarity)]),
        )
        for side in _POLARITY_ORDER
        for (account_id, polarity), amount in totals.items()
        if polarity == side
    )


__all__ = ["flatten_entries", "aggregate_line_items"]
