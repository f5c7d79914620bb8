"""CLI adapter to consolidate project journal entries into the general ledger.

This module wires the ConsolidateJournalEntriesUseCase to the JSON journal
source configured through environment variables and prints the resulting
line items or the validation failure.
"""

from src.domain.models import GeneralLedgerJournalEntry
from src.infrastructure.container import build_consolidation_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ConsolidationSettings


def _print_entry(entry: GeneralLedgerJournalEntry) -> None:
    """Print the line items and totals of a consolidated entry.

    Args:
        entry: Successfully constructed general-ledger journal entry.
    """
    print(
        f"General-ledger journal entry {entry.id} "
        f"(source transaction {entry.source_transaction.id}, "
        f"amount={entry.source_transaction.amount})"
    )
    for line_item in entry.line_items:
        print(
            f"{line_item.polarity.value:<6} "
            f"{line_item.general_ledger_account_id}  "
            f"{line_item.amount}  {line_item.description}"
        )
    print(f"Totals: debits={entry.total_debits}, credits={entry.total_credits}")


def main() -> int:
    """Run the consolidation use case and print its outcome."""
    logger = get_app_logger()
    settings = ConsolidationSettings.from_env()
    if settings.entries_file is None:
        logger.warning(
            "JOURNAL_ENTRIES_FILE is required to consolidate journal entries."
        )
        return 1

    try:
        use_case = build_consolidation_use_case(settings)
        result = use_case.execute()
    except (OSError, ValueError, RuntimeError) as exc:
        logger.error(str(exc))
        return 1

    if result.outcome.is_failure:
        error = result.outcome.error
        print(f"Rejected [{error.code}]: {error.message}")
        return 1

    _print_entry(result.outcome.value)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
