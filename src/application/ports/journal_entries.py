"""Ports for reading project journal entries to consolidate.

Infrastructure adapters provide concrete sources (files, databases, external
APIs) that satisfy these protocols.
"""

from typing import Protocol

from src.domain.models import ProjectJournalEntry


class ProjectJournalEntriesSourcePort(Protocol):
    """Port exposing read access to project journal entries.

    Application use cases depend on this protocol instead of a concrete
    storage format.
    """

    def fetch_project_journal_entries(self) -> list[ProjectJournalEntry]:
        """Return the project journal entries to consolidate.

        Returns:
            list[ProjectJournalEntry]: Entries in source order.
        """


__all__ = ["ProjectJournalEntriesSourcePort"]
