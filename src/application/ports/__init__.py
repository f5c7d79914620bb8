"""Application ports package."""

from .journal_entries import ProjectJournalEntriesSourcePort

__all__ = ["ProjectJournalEntriesSourcePort"]
