"""Domain models for the consolidated general-ledger journal entry."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.domain.models.journal import (
    Polarity,
    ProjectJournalEntry,
    SourceTransaction,
)


class ConstructionState(str, Enum):
    """Stages of general-ledger journal entry construction.

    Only ``VALID`` and ``REJECTED`` are ever observed by callers.
    """

    PENDING = "PENDING"
    AGGREGATED = "AGGREGATED"
    VALID = "VALID"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class GeneralLedgerJournalEntryLineItem:
    """Merged posting to one general-ledger account on one side.

    Attributes:
        general_ledger_account_id: Business account receiving the posting.
        amount: Sum of the contributing project entries.
        polarity: Debit or credit side.
        description: Comma-joined names of the contributing project accounts.
    """

    general_ledger_account_id: str
    amount: Decimal
    polarity: Polarity
    description: str = ""


@dataclass(frozen=True)
class GeneralLedgerJournalEntry:
    """Journal entry expressed in general-ledger accounts.

    Instances are built by ``create_general_ledger_journal_entry``, which
    only returns entries that passed every construction guard.

    Attributes:
        source_transaction: Transaction shared by every input entry.
        line_items: Merged line items, debits first.
        project_journal_entries: Inputs the entry was consolidated from.
        id: Identifier of the consolidated entry.
    """

    source_transaction: SourceTransaction
    line_items: tuple[GeneralLedgerJournalEntryLineItem, ...]
    project_journal_entries: tuple[ProjectJournalEntry, ...]
    id: str

    @property
    def total_debits(self) -> Decimal:
        """Return the sum of debit line items."""
        return self._total(Polarity.DEBIT)

    @property
    def total_credits(self) -> Decimal:
        """Return the sum of credit line items."""
        return self._total(Polarity.CREDIT)

    def line_item_for(
        self,
        general_ledger_account_id: str,
        polarity: Polarity,
    ) -> GeneralLedgerJournalEntryLineItem | None:
        """Return the line item for an account and side, if any."""
        for line_item in self.line_items:
            if (
                line_item.general_ledger_account_id == general_ledger_account_id
                and line_item.polarity == polarity
            ):
                return line_item
        return None

    def _total(self, polarity: Polarity) -> Decimal:
        return sum(
            (
                line_item.amount
                for line_item in self.line_items
                if line_item.polarity == polarity
            ),
            Decimal("0"),
        )


__all__ = [
    "ConstructionState",
    "GeneralLedgerJournalEntryLineItem",
    "GeneralLedgerJournalEntry",
]
