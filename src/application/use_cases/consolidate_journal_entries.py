"""Use case for consolidating project journal entries into the general ledger.

This module wires the domain construction guards to a journal-entry source:

* reads project journal entries through a source port;
* builds a general-ledger journal entry from them;
* logs the outcome and returns it without raising on validation failures.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.application.ports.journal_entries import (
    ProjectJournalEntriesSourcePort,
)
from src.domain.constants import DEFAULT_DESCRIPTION_SEPARATOR
from src.domain.models import (
    ConstructionState,
    ProjectJournalEntry,
    Result,
)
from src.domain.services.consolidation import (
    construction_state,
    create_general_ledger_journal_entry,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ConsolidationResult:
    """Result of a consolidation run.

    Attributes:
        outcome: ``Ok`` with the general-ledger entry or ``Fail`` with the
            first validation error.
        input_count: Number of project journal entries consolidated.
    """

    outcome: Result
    input_count: int

    @property
    def state(self) -> ConstructionState:
        """Return VALID or REJECTED."""
        return construction_state(self.outcome)


class ConsolidateJournalEntriesUseCase:
    """Consolidate project journal entries into one general-ledger entry.

    The use case depends on ProjectJournalEntriesSourcePort to stay decoupled
    from where the entries are stored.
    """

    def __init__(
        self,
        source: ProjectJournalEntriesSourcePort | None = None,
        logger=None,
        description_separator: str = DEFAULT_DESCRIPTION_SEPARATOR,
    ) -> None:
        """Initialize the use case.

        Args:
            source: Optional port providing the entries for ``execute``.
            logger: Optional logger compatible with logging.Logger-like API.
            description_separator: Separator used in line-item descriptions.
        """
        self._source = source
        self._logger = logger or get_app_logger()
        self._description_separator = description_separator

    def execute(self) -> ConsolidationResult:
        """Fetch entries from the source port and consolidate them.

        Returns:
            ConsolidationResult: Outcome and number of input entries.
        """
        if self._source is None:
            raise RuntimeError(
                "A project journal entries source is required to execute."
            )
        entries = self._source.fetch_project_journal_entries()
        self._logger.info(
            f"Fetched {len(entries)} project journal entries to consolidate"
        )
        return self.consolidate(entries)

    def consolidate(
        self,
        project_journal_entries: Iterable[ProjectJournalEntry],
    ) -> ConsolidationResult:
        """Consolidate entries already held by the caller.

        Args:
            project_journal_entries: Entries derived from one source
                transaction.

        Returns:
            ConsolidationResult: Outcome and number of input entries.
        """
        snapshot = list(project_journal_entries)
        outcome = create_general_ledger_journal_entry(
            snapshot,
            description_separator=self._description_separator,
        )
        result = ConsolidationResult(outcome=outcome, input_count=len(snapshot))

        if outcome.is_failure:
            self._logger.warning(
                f"General-ledger journal entry rejected "
                f"[{outcome.error.code}]: {outcome.error.message}"
            )
            return result

        entry = outcome.value
        self._logger.info(
            f"General-ledger journal entry {entry.id} built for source "
            f"transaction {entry.source_transaction.id}: "
            f"{len(entry.line_items)} line items, debits={entry.total_debits}"
        )
        return result


__all__ = ["ConsolidateJournalEntriesUseCase", "ConsolidationResult"]
