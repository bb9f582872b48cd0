from pathlib import Path

import pytest
import pytest_asyncio

from expense_tracker.core.db import DatabaseSessionManager
from expense_tracker.modules.expenses.repository import ExpenseRepository
from expense_tracker.modules.expenses.schema import ExpenseSchema
from expense_tracker.modules.expenses.state import ExpenseStateHolder
from expense_tracker.modules.expenses.store import ExpenseStore


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    """A fresh SQLite file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'expenses.db'}"


@pytest_asyncio.fixture
async def sessions(db_url: str):
    manager = DatabaseSessionManager(db_url)
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def store(sessions: DatabaseSessionManager) -> ExpenseStore:
    return ExpenseStore(sessions)


@pytest.fixture
def repository(store: ExpenseStore) -> ExpenseRepository:
    return ExpenseRepository(store)


@pytest_asyncio.fixture
async def state(repository: ExpenseRepository) -> ExpenseStateHolder:
    holder = ExpenseStateHolder(repository)
    await holder.ready()
    return holder


class InMemoryRepository:
    """Stands in for ExpenseRepository without touching a database."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.get_all_calls = 0

    async def insert(self, expense: ExpenseSchema) -> None:
        next_id = max((row.id for row in self.rows), default=0) + 1
        self.rows.append(expense.model_copy(update={"id": next_id}))

    async def get_all(self) -> list[ExpenseSchema]:
        self.get_all_calls += 1
        return list(self.rows)


@pytest.fixture
def memory_repository() -> InMemoryRepository:
    return InMemoryRepository()
