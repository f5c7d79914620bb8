"""Application use cases package."""

from .consolidate_journal_entries import (
    ConsolidateJournalEntriesUseCase,
    ConsolidationResult,
)

__all__ = [
    "ConsolidateJournalEntriesUseCase",
    "ConsolidationResult",
]
