from expense_tracker.modules.expenses.schema import ExpenseSchema
from expense_tracker.modules.expenses.store import ExpenseStore


class ExpenseRepository:
    """Keeps callers away from the storage layer; every call goes straight to the store."""

    def __init__(self, store: ExpenseStore):
        self._store = store

    async def insert(self, expense: ExpenseSchema) -> None:
        await self._store.insert(expense.title, expense.amount)

    async def get_all(self) -> list[ExpenseSchema]:
        return await self._store.fetch_all()
