"""Domain models package."""

from .general_ledger import (
    ConstructionState,
    GeneralLedgerJournalEntry,
    GeneralLedgerJournalEntryLineItem,
)
from .journal import (
    BusinessAccount,
    Entry,
    Polarity,
    Project,
    ProjectAccount,
    ProjectJournalEntry,
    ProjectJournalEntryStatus,
    SourceTransaction,
)
from .result import Fail, Ok, Result

__all__ = [
    "BusinessAccount",
    "ConstructionState",
    "Entry",
    "Fail",
    "GeneralLedgerJournalEntry",
    "GeneralLedgerJournalEntryLineItem",
    "Ok",
    "Polarity",
    "Project",
    "ProjectAccount",
    "ProjectJournalEntry",
    "ProjectJournalEntryStatus",
    "Result",
    "SourceTransaction",
]
