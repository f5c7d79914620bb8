"""JSON-backed source of project journal entries.

Expected document shape::

    {
      "source_transactions": [{"id": "...", "amount": "10000.00"}],
      "accounts": {
        "business": [{"id": "...", "name": "..."}],
        "project": [{"id": "...", "name": "...", "business_account_id": "..."}]
      },
      "project_journal_entries": [
        {
          "id": "...",
          "project": {"id": "...", "name": "..."},
          "status": "READY_TO_POST",
          "source_transaction_id": "...",
          "entries": [
            {"polarity": "DEBIT", "amount": "3500", "account_id": "..."}
          ]
        }
      ]
    }
"""

from pathlib import Path

from src.application.ports.journal_entries import (
    ProjectJournalEntriesSourcePort,
)
from src.domain.models import (
    BusinessAccount,
    Entry,
    Project,
    ProjectAccount,
    ProjectJournalEntry,
    SourceTransaction,
)
from src.domain.services.project_journal import create_project_journal_entry
from src.infrastructure.journal_schemas import (
    AccountsSchema,
    JournalEntriesDocument,
    ProjectJournalEntrySchema,
)
from src.infrastructure.logging.logger import get_app_logger


class JsonProjectJournalEntriesSource(ProjectJournalEntriesSourcePort):
    """Read project journal entries from a JSON document."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Path to the JSON document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def fetch_project_journal_entries(self) -> list[ProjectJournalEntry]:
        """Parse the document into project journal entries.

        Returns:
            list[ProjectJournalEntry]: Entries in document order.

        Raises:
            ValueError: If the document is malformed, references unknown
                accounts or source transactions, or holds an entry that is
                empty, unbalanced or has a non-positive amount.
        """
        document = JournalEntriesDocument.model_validate_json(
            self._path.read_text(encoding="utf-8")
        )
        source_transactions = {
            row.id: SourceTransaction(
                id=row.id,
                amount=row.amount,
                description=row.description,
            )
            for row in document.source_transactions
        }
        project_accounts = self._build_project_accounts(document.accounts)

        entries = [
            self._build_project_journal_entry(
                row,
                source_transactions,
                project_accounts,
            )
            for row in document.project_journal_entries
        ]
        self._logger.info(
            f"Loaded {len(entries)} project journal entries from {self._path}"
        )
        return entries

    @staticmethod
    def _build_project_accounts(
        accounts: AccountsSchema,
    ) -> dict[str, ProjectAccount]:
        business_accounts = {
            row.id: BusinessAccount(id=row.id, name=row.name)
            for row in accounts.business
        }
        project_accounts = {}
        for row in accounts.project:
            business_account = business_accounts.get(row.business_account_id)
            if business_account is None:
                raise ValueError(
                    f"Project account {row.id} maps to unknown business "
                    f"account {row.business_account_id}"
                )
            project_accounts[row.id] = ProjectAccount(
                id=row.id,
                name=row.name,
                business_account=business_account,
            )
        return project_accounts

    @staticmethod
    def _build_project_journal_entry(
        row: ProjectJournalEntrySchema,
        source_transactions: dict[str, SourceTransaction],
        project_accounts: dict[str, ProjectAccount],
    ) -> ProjectJournalEntry:
        source_transaction = source_transactions.get(row.source_transaction_id)
        if source_transaction is None:
            raise ValueError(
                f"Unknown source transaction {row.source_transaction_id}"
            )

        entries = []
        for entry in row.entries:
            account = project_accounts.get(entry.account_id)
            if account is None:
                raise ValueError(f"Unknown project account {entry.account_id}")
            entries.append(
                Entry(
                    amount=entry.amount,
                    polarity=entry.polarity,
                    account=account,
                )
            )

        result = create_project_journal_entry(
            project=Project(id=row.project.id, name=row.project.name),
            entries=entries,
            source_transaction=source_transaction,
            status=row.status,
            id=row.id or None,
        )
        if result.is_failure:
            raise ValueError(
                f"Project journal entry {row.id or '<unnamed>'} is invalid: "
                f"{result.error.message}"
            )
        return result.value


__all__ = ["JsonProjectJournalEntriesSource"]
