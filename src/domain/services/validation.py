"""Domain guards for general-ledger journal entry construction."""

from collections.abc import Sequence

from src.domain.errors import (
    InconsistentSourceTransaction,
    SourceAmountMismatch,
)
from src.domain.models import (
    Fail,
    GeneralLedgerJournalEntry,
    Ok,
    Polarity,
    ProjectJournalEntry,
    Result,
)
from src.domain.services.double_entry import (
    filter_amounts_by_polarity,
    sum_amounts,
)


def ensure_single_source_transaction(
    project_journal_entries: Sequence[ProjectJournalEntry],
) -> Result:
    """Check that every entry references the same source transaction.

    Args:
        project_journal_entries: Entries to consolidate.

    Returns:
        Result: ``Ok`` with the unchanged entries when exactly one source
        transaction id is referenced, otherwise ``Fail`` carrying
        ``InconsistentSourceTransaction``. Empty input fails.
    """
    source_transaction_ids = {
        str(entry.source_transaction.id) for entry in project_journal_entries
    }
    if len(source_transaction_ids) == 1:
        return Ok(project_journal_entries)
    return Fail(InconsistentSourceTransaction(source_transaction_ids))


def ensure_matches_source_transaction(
    general_ledger_journal_entry: GeneralLedgerJournalEntry,
) -> Result:
    """Check that the debit total equals the source transaction amount.

    The external ledger matches postings to the source transaction by total
    amount, so a mismatch is rejected before the entry is exposed. An entry
    without debit line items never matches, whatever the source amount.

    Args:
        general_ledger_journal_entry: Candidate consolidated entry.

    Returns:
        Result: ``Ok`` with the unchanged entry, or ``Fail`` carrying
        ``SourceAmountMismatch``.
    """
    expected = general_ledger_journal_entry.source_transaction.amount
    debit_amounts = filter_amounts_by_polarity(
        general_ledger_journal_entry.line_items,
        Polarity.DEBIT,
    )
    actual = sum_amounts(debit_amounts)
    if debit_amounts and expected == actual:
        return Ok(general_ledger_journal_entry)
    return Fail(SourceAmountMismatch(expected=expected, actual=actual))


__all__ = [
    "ensure_single_source_transaction",
    "ensure_matches_source_transaction",
]
