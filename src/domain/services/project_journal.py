"""Factory for validated project journal entries."""

from collections.abc import Iterable

from src.domain.errors import InvalidProjectJournalEntry
from src.domain.models import (
    Entry,
    Fail,
    Ok,
    Project,
    ProjectJournalEntry,
    ProjectJournalEntryStatus,
    Result,
    SourceTransaction,
)
from src.domain.services.double_entry import validate_double_entry_balance


def create_project_journal_entry(
    project: Project,
    entries: Iterable[Entry],
    source_transaction: SourceTransaction,
    status: ProjectJournalEntryStatus = ProjectJournalEntryStatus.READY_TO_POST,
    id: str | None = None,
) -> Result:
    """Validate entries and build a project journal entry.

    Args:
        project: Project owning the entries.
        entries: Debit and credit entries.
        source_transaction: External transaction the entries derive from.
        status: Workflow status of the entry.
        id: Optional identifier; a random one is generated when omitted.

    Returns:
        Result: ``Ok`` with the entry, or ``Fail`` carrying
        ``InvalidProjectJournalEntry`` or ``UnbalancedLineItems``.
    """
    entries = tuple(entries)
    if not entries:
        return Fail(InvalidProjectJournalEntry("it has no entries"))
    for entry in entries:
        if entry.amount <= 0:
            return Fail(
                InvalidProjectJournalEntry(
                    f"entry amount must be positive, got {entry.amount} "
                    f"on account '{entry.account.name}'"
                )
            )

    balance = validate_double_entry_balance(entries)
    if balance.is_failure:
        return balance

    fields = {
        "project": project,
        "entries": entries,
        "source_transaction": source_transaction,
        "status": status,
    }
    if id is not None:
        fields["id"] = id
    return Ok(ProjectJournalEntry(**fields))


__all__ = ["create_project_journal_entry"]
