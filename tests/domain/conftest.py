"""Shared journal entry fixtures for domain tests.

Amounts follow a construction purchase of $10,000 split across two
projects: lumber and framing labor for Project A, lumber for Project B.
"""

from decimal import Decimal

import pytest

from src.domain.models import (
    BusinessAccount,
    Entry,
    Project,
    ProjectAccount,
    ProjectJournalEntry,
    SourceTransaction,
)


@pytest.fixture
def source_transaction() -> SourceTransaction:
    return SourceTransaction(id="source-transaction-1", amount=Decimal("10000"))


@pytest.fixture
def cogs() -> BusinessAccount:
    return BusinessAccount(
        id="gl-cogs",
        name="Construction Materials Costs (COGS)",
    )


@pytest.fixture
def subcontractor_expense() -> BusinessAccount:
    return BusinessAccount(id="gl-subs-expense", name="Subcontractor Expense")


@pytest.fixture
def checking() -> BusinessAccount:
    return BusinessAccount(id="gl-cash", name="Checking")


@pytest.fixture
def lumber(cogs) -> ProjectAccount:
    return ProjectAccount(id="pa-lumber", name="Lumber", business_account=cogs)


@pytest.fixture
def framing_labor(subcontractor_expense) -> ProjectAccount:
    return ProjectAccount(
        id="pa-framing",
        name="Framing Labor",
        business_account=subcontractor_expense,
    )


@pytest.fixture
def cash(checking) -> ProjectAccount:
    return ProjectAccount(id="pa-cash", name="Cash", business_account=checking)


@pytest.fixture
def project_a() -> Project:
    return Project(id="project-a", name="Project A")


@pytest.fixture
def project_b() -> Project:
    return Project(id="project-b", name="Project B")


@pytest.fixture
def lumber_entry_a(project_a, lumber, cash, source_transaction):
    return ProjectJournalEntry(
        project=project_a,
        entries=(
            Entry.debit(Decimal("3500"), lumber),
            Entry.credit(Decimal("3500"), cash),
        ),
        source_transaction=source_transaction,
        id="pje-1",
    )


@pytest.fixture
def framing_entry_a(project_a, framing_labor, cash, source_transaction):
    return ProjectJournalEntry(
        project=project_a,
        entries=(
            Entry.debit(Decimal("3000"), framing_labor),
            Entry.credit(Decimal("3000"), cash),
        ),
        source_transaction=source_transaction,
        id="pje-2",
    )


@pytest.fixture
def lumber_entry_b(project_b, lumber, cash, source_transaction):
    return ProjectJournalEntry(
        project=project_b,
        entries=(
            Entry.debit(Decimal("3500"), lumber),
            Entry.credit(Decimal("3500"), cash),
        ),
        source_transaction=source_transaction,
        id="pje-3",
    )


@pytest.fixture
def purchase_entries(lumber_entry_a, framing_entry_a, lumber_entry_b):
    return [lumber_entry_a, framing_entry_a, lumber_entry_b]
