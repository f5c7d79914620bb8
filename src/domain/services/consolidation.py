"""Construction of general-ledger journal entries from project entries."""

from collections.abc import Iterable
from uuid import uuid4

from src.domain.constants import DEFAULT_DESCRIPTION_SEPARATOR
from src.domain.models import (
    ConstructionState,
    GeneralLedgerJournalEntry,
    ProjectJournalEntry,
    Result,
)
from src.domain.services.double_entry import validate_double_entry_balance
from src.domain.services.line_items import aggregate_line_items
from src.domain.services.validation import (
    ensure_matches_source_transaction,
    ensure_single_source_transaction,
)


def create_general_ledger_journal_entry(
    project_journal_entries: Iterable[ProjectJournalEntry],
    id: str | None = None,
    description_separator: str = DEFAULT_DESCRIPTION_SEPARATOR,
) -> Result:
    """Consolidate project journal entries into one general-ledger entry.

    Guards run in a fixed order and the first failure is returned
    unchanged: single source transaction, aggregation, double-entry
    balance, then source amount match. No entry is returned unless every
    guard passed.

    Args:
        project_journal_entries: Entries derived from one source transaction.
        id: Optional identifier for the consolidated entry.
        description_separator: Separator used in line-item descriptions.

    Returns:
        Result: ``Ok`` with the ``GeneralLedgerJournalEntry``, or ``Fail``
        carrying the first ``ValidationError`` encountered.
    """
    snapshot = tuple(project_journal_entries)

    consistency = ensure_single_source_transaction(snapshot)
    if consistency.is_failure:
        return consistency

    line_items = aggregate_line_items(snapshot, separator=description_separator)

    balance = validate_double_entry_balance(line_items)
    if balance.is_failure:
        return balance

    candidate = GeneralLedgerJournalEntry(
        source_transaction=snapshot[0].source_transaction,
        line_items=line_items,
        project_journal_entries=snapshot,
        id=id or uuid4().hex,
    )
    return ensure_matches_source_transaction(candidate)


def construction_state(outcome: Result) -> ConstructionState:
    """Return the terminal construction state of an outcome."""
    if outcome.is_success:
        return ConstructionState.VALID
    return ConstructionState.REJECTED


__all__ = ["create_general_ledger_journal_entry", "construction_state"]
