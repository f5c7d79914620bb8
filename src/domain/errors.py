"""Validation errors for general-ledger journal entry consolidation.

Errors are returned inside ``Fail`` outcomes rather than raised:

- source transaction consistency
- double-entry balance
- source amount matching
- project journal entry construction
"""

from collections.abc import Iterable
from decimal import Decimal


class ValidationError(Exception):
    """Base class for every consolidation validation failure."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


class InconsistentSourceTransaction(ValidationError):
    """Project journal entries do not share exactly one source transaction."""

    def __init__(self, source_transaction_ids: Iterable[str] = ()):
        self.source_transaction_ids = tuple(sorted(source_transaction_ids))
        found = ", ".join(self.source_transaction_ids) or "none"
        message = (
            "The provided project journal entries do not share the same "
            f"source transaction (found: {found})."
        )
        super().__init__(message, code="INCONSISTENT_SOURCE_TRANSACTION")


class UnbalancedLineItems(ValidationError):
    """Aggregated debits and credits do not balance."""

    def __init__(self, debit_total: Decimal, credit_total: Decimal):
        self.debit_total = debit_total
        self.credit_total = credit_total
        message = (
            "Line items are not balanced: "
            f"debits={debit_total}, credits={credit_total}."
        )
        super().__init__(message, code="UNBALANCED_LINE_ITEMS")


class SourceAmountMismatch(ValidationError):
    """The debit total differs from the source transaction amount."""

    def __init__(self, expected: Decimal, actual: Decimal):
        self.expected = expected
        self.actual = actual
        message = (
            "The total amount of line items does not match the source "
            f"transaction (expected={expected}, actual={actual}); the "
            "general-ledger journal entry would not reconcile against it."
        )
        super().__init__(message, code="SOURCE_AMOUNT_MISMATCH")


class InvalidProjectJournalEntry(ValidationError):
    """A project journal entry failed its own construction checks."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Invalid project journal entry: {reason}",
            code="INVALID_PROJECT_JOURNAL_ENTRY",
        )


__all__ = [
    "ValidationError",
    "InconsistentSourceTransaction",
    "UnbalancedLineItems",
    "SourceAmountMismatch",
    "InvalidProjectJournalEntry",
]
