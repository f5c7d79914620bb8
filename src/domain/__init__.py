"""Domain package for general-ledger consolidation rules and models."""

from .constants import DEFAULT_DESCRIPTION_SEPARATOR
from .errors import (
    InconsistentSourceTransaction,
    InvalidProjectJournalEntry,
    SourceAmountMismatch,
    UnbalancedLineItems,
    ValidationError,
)
from .models import (
    BusinessAccount,
    ConstructionState,
    Entry,
    Fail,
    GeneralLedgerJournalEntry,
    GeneralLedgerJournalEntryLineItem,
    Ok,
    Polarity,
    Project,
    ProjectAccount,
    ProjectJournalEntry,
    ProjectJournalEntryStatus,
    Result,
    SourceTransaction,
)
from .services import (
    aggregate_line_items,
    construction_state,
    create_general_ledger_journal_entry,
    create_project_journal_entry,
    ensure_matches_source_transaction,
    ensure_single_source_transaction,
    validate_double_entry_balance,
)

__all__ = [
    "BusinessAccount",
    "ConstructionState",
    "DEFAULT_DESCRIPTION_SEPARATOR",
    "Entry",
    "Fail",
    "GeneralLedgerJournalEntry",
    "GeneralLedgerJournalEntryLineItem",
    "InconsistentSourceTransaction",
    "InvalidProjectJournalEntry",
    "Ok",
    "Polarity",
    "Project",
    "ProjectAccount",
    "ProjectJournalEntry",
    "ProjectJournalEntryStatus",
    "Result",
    "SourceAmountMismatch",
    "SourceTransaction",
    "UnbalancedLineItems",
    "ValidationError",
    "aggregate_line_items",
    "construction_state",
    "create_general_ledger_journal_entry",
    "create_project_journal_entry",
    "ensure_matches_source_transaction",
    "ensure_single_source_transaction",
    "validate_double_entry_balance",
]
