"""Domain models for project-level journal entries."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from uuid import uuid4


class Polarity(str, Enum):
    """Side of a double-entry posting."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class ProjectJournalEntryStatus(str, Enum):
    """Lifecycle status of a project journal entry."""

    DRAFT = "DRAFT"
    READY_TO_POST = "READY_TO_POST"
    POSTED = "POSTED"


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class SourceTransaction:
    """External financial event the journal entries reconcile against.

    Attributes:
        id: Identifier of the transaction in the external system.
        amount: Absolute amount of the transaction.
        description: Optional free-form memo from the external system.
    """

    id: str
    amount: Decimal
    description: str | None = None


@dataclass(frozen=True)
class BusinessAccount:
    """General-ledger account in the consolidated chart of accounts."""

    id: str
    name: str


@dataclass(frozen=True)
class Project:
    """Project the journal entries are scoped to."""

    id: str
    name: str


@dataclass(frozen=True)
class ProjectAccount:
    """Project-level account mapped to exactly one business account."""

    id: str
    name: str
    business_account: BusinessAccount


@dataclass(frozen=True)
class Entry:
    """Single debit or credit posted to a project account."""

    amount: Decimal
    polarity: Polarity
    account: ProjectAccount

    @classmethod
    def debit(cls, amount: Decimal, account: ProjectAccount) -> "Entry":
        """Return a debit entry for the account."""
        return cls(amount=amount, polarity=Polarity.DEBIT, account=account)

    @classmethod
    def credit(cls, amount: Decimal, account: ProjectAccount) -> "Entry":
        """Return a credit entry for the account."""
        return cls(amount=amount, polarity=Polarity.CREDIT, account=account)


@dataclass(frozen=True)
class ProjectJournalEntry:
    """Balanced set of entries for one project and one source transaction.

    Instances built directly are trusted as already validated. Use
    ``create_project_journal_entry`` to run the entry-level checks first.

    Attributes:
        project: Project owning the entries.
        entries: Debit and credit entries, in posting order.
        source_transaction: External transaction the entries derive from.
        status: Workflow status reported by the upstream system.
        id: Identifier of the project journal entry.
    """

    project: Project
    entries: tuple[Entry, ...]
    source_transaction: SourceTransaction
    status: ProjectJournalEntryStatus = ProjectJournalEntryStatus.READY_TO_POST
    id: str = field(default_factory=_new_id)


__all__ = [
    "Polarity",
    "ProjectJournalEntryStatus",
    "SourceTransaction",
    "BusinessAccount",
    "Project",
    "ProjectAccount",
    "Entry",
    "ProjectJournalEntry",
]
