"""Composition root for wiring infrastructure adapters."""

from src.application.ports.journal_entries import (
    ProjectJournalEntriesSourcePort,
)
from src.application.use_cases.consolidate_journal_entries import (
    ConsolidateJournalEntriesUseCase,
)
from src.infrastructure.json_journal_source import (
    JsonProjectJournalEntriesSource,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ConsolidationSettings


def build_journal_entries_source(
    settings: ConsolidationSettings | None = None,
) -> ProjectJournalEntriesSourcePort:
    """Return the configured project journal entries source."""
    resolved = settings or ConsolidationSettings.from_env()
    if resolved.entries_file is None:
        raise RuntimeError(
            "Consolidation requires a JOURNAL_ENTRIES_FILE value."
        )
    return JsonProjectJournalEntriesSource(
        resolved.entries_file,
        logger=get_app_logger(),
    )


def build_consolidation_use_case(
    settings: ConsolidationSettings | None = None,
    source: ProjectJournalEntriesSourcePort | None = None,
) -> ConsolidateJournalEntriesUseCase:
    """Return the consolidation use case wired to its source."""
    resolved = settings or ConsolidationSettings.from_env()
    return ConsolidateJournalEntriesUseCase(
        source=source or build_journal_entries_source(resolved),
        logger=get_app_logger(),
        description_separator=resolved.description_separator,
    )


__all__ = [
    "build_journal_entries_source",
    "build_consolidation_use_case",
]
