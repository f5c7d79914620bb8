"""Tests for the ConsolidateJournalEntriesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.consolidate_journal_entries import (
    ConsolidateJournalEntriesUseCase,
)
from src.domain.errors import SourceAmountMismatch
from src.domain.models import (
    BusinessAccount,
    ConstructionState,
    Entry,
    Polarity,
    Project,
    ProjectAccount,
    ProjectJournalEntry,
    SourceTransaction,
)


def _entries(source_amount: str) -> list[ProjectJournalEntry]:
    transaction = SourceTransaction(id="tx-1", amount=Decimal(source_amount))
    materials = BusinessAccount(id="gl-materials", name="Materials")
    checking = BusinessAccount(id="gl-checking", name="Checking")
    concrete = ProjectAccount(
        id="pa-concrete",
        name="Concrete",
        business_account=materials,
    )
    rebar = ProjectAccount(id="pa-rebar", name="Rebar", business_account=materials)
    cash = ProjectAccount(id="pa-cash", name="Cash", business_account=checking)
    project = Project(id="project-1", name="Warehouse")
    return [
        ProjectJournalEntry(
            project=project,
            entries=(
                Entry.debit(Decimal("120.00"), concrete),
                Entry.credit(Decimal("120.00"), cash),
            ),
            source_transaction=transaction,
        ),
        ProjectJournalEntry(
            project=project,
            entries=(
                Entry.debit(Decimal("80.00"), rebar),
                Entry.credit(Decimal("80.00"), cash),
            ),
            source_transaction=transaction,
        ),
    ]


class _FakeSource:
    def __init__(self, entries: list[ProjectJournalEntry]) -> None:
        self._entries = entries
        self.calls = 0

    def fetch_project_journal_entries(self) -> list[ProjectJournalEntry]:
        self.calls += 1
        return list(self._entries)


def test_execute_consolidates_entries_from_source() -> None:
    """Use case should fetch entries and return a valid consolidated entry."""
    source = _FakeSource(_entries("200.00"))
    logger = MagicMock()
    use_case = ConsolidateJournalEntriesUseCase(source=source, logger=logger)

    result = use_case.execute()

    assert source.calls == 1
    assert result.input_count == 2
    assert result.state is ConstructionState.VALID
    entry = result.outcome.value
    materials = entry.line_item_for("gl-materials", Polarity.DEBIT)
    assert materials.amount == Decimal("200.00")
    assert set(materials.description.split(", ")) == {"Concrete", "Rebar"}
    assert logger.info.call_count == 2
    logger.warning.assert_not_called()


def test_consolidate_logs_rejection_without_raising() -> None:
    """Validation failures should be returned and logged as warnings."""
    logger = MagicMock()
    use_case = ConsolidateJournalEntriesUseCase(logger=logger)

    result = use_case.consolidate(_entries("250.00"))

    assert result.state is ConstructionState.REJECTED
    assert isinstance(result.outcome.error, SourceAmountMismatch)
    logger.warning.assert_called_once()
    assert "SOURCE_AMOUNT_MISMATCH" in logger.warning.call_args.args[0]


def test_consolidate_uses_configured_separator() -> None:
    """The description separator should be forwarded to the domain."""
    use_case = ConsolidateJournalEntriesUseCase(
        logger=MagicMock(),
        description_separator=" / ",
    )

    entry = use_case.consolidate(_entries("200.00")).outcome.value

    description = entry.line_item_for("gl-materials", Polarity.DEBIT).description
    assert set(description.split(" / ")) == {"Concrete", "Rebar"}


def test_execute_requires_a_source() -> None:
    """Executing without a source port is a wiring error."""
    use_case = ConsolidateJournalEntriesUseCase(logger=MagicMock())

    with pytest.raises(RuntimeError):
        use_case.execute()
