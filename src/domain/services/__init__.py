"""Domain services package."""

from .consolidation import (
    construction_state,
    create_general_ledger_journal_entry,
)
from .double_entry import (
    filter_amounts_by_polarity,
    sum_amounts,
    validate_double_entry_balance,
)
from .line_items import aggregate_line_items, flatten_entries
from .project_journal import create_project_journal_entry
from .validation import (
    ensure_matches_source_transaction,
    ensure_single_source_transaction,
)

__all__ = [
    "aggregate_line_items",
    "construction_state",
    "create_general_ledger_journal_entry",
    "create_project_journal_entry",
    "ensure_matches_source_transaction",
    "ensure_single_source_transaction",
    "filter_amounts_by_polarity",
    "flatten_entries",
    "sum_amounts",
    "validate_double_entry_balance",
]
