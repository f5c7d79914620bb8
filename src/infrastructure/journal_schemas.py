"""Pydantic schemas for JSON journal entry documents."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.models import Polarity, ProjectJournalEntryStatus
from src.utils.decimal_utils import coerce_decimal


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class SourceTransactionSchema(_Schema):
    """External source transaction row."""

    id: str
    amount: Decimal = Field(gt=0)
    description: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        return coerce_decimal(value)


class BusinessAccountSchema(_Schema):
    """General-ledger account row."""

    id: str
    name: str = ""


class ProjectAccountSchema(_Schema):
    """Project account row and its general-ledger mapping."""

    id: str
    name: str = ""
    business_account_id: str


class AccountsSchema(_Schema):
    """Chart of business and project accounts."""

    business: list[BusinessAccountSchema] = Field(default_factory=list)
    project: list[ProjectAccountSchema] = Field(default_factory=list)


class ProjectSchema(_Schema):
    """Project owning a journal entry."""

    id: str = ""
    name: str = ""


class EntrySchema(_Schema):
    """Single debit or credit line."""

    polarity: Polarity
    amount: Decimal = Field(gt=0)
    account_id: str

    @field_validator("polarity", mode="before")
    @classmethod
    def _normalize_polarity(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        return coerce_decimal(value)


class ProjectJournalEntrySchema(_Schema):
    """Project journal entry referencing accounts and a source transaction."""

    id: str | None = None
    project: ProjectSchema = Field(default_factory=ProjectSchema)
    status: ProjectJournalEntryStatus = ProjectJournalEntryStatus.READY_TO_POST
    source_transaction_id: str
    entries: list[EntrySchema] = Field(default_factory=list)


class JournalEntriesDocument(_Schema):
    """Top-level JSON document consumed by the journal entries source."""

    source_transactions: list[SourceTransactionSchema] = Field(
        default_factory=list
    )
    accounts: AccountsSchema = Field(default_factory=AccountsSchema)
    project_journal_entries: list[ProjectJournalEntrySchema] = Field(
        default_factory=list
    )


__all__ = [
    "SourceTransactionSchema",
    "BusinessAccountSchema",
    "ProjectAccountSchema",
    "AccountsSchema",
    "ProjectSchema",
    "EntrySchema",
    "ProjectJournalEntrySchema",
    "JournalEntriesDocument",
]
