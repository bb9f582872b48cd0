import asyncio
import logging
from typing import Callable, List

from expense_tracker.modules.expenses.repository import ExpenseRepository
from expense_tracker.modules.expenses.schema import ExpenseSchema
from expense_tracker.modules.expenses.utils import parse_amount

logger = logging.getLogger(__name__)

ExpensesSubscriber = Callable[[List[ExpenseSchema]], None]


class ExpenseStateHolder:
    """
    Holds the list of expenses shown to the user.

    The list is never patched in place: every mutation is followed by a full
    re-read from the repository, and the result replaces the previous
    snapshot. When reloads overlap, the one that finishes last wins.

    Must be constructed while an event loop is running; the first load is
    scheduled immediately and can be awaited with ``ready()``.
    """

    def __init__(self, repository: ExpenseRepository, strict_amounts: bool = False):
        self.logger = logger
        self._repository = repository
        self._strict_amounts = strict_amounts
        self._expenses: List[ExpenseSchema] = []
        self._subscribers: List[ExpensesSubscriber] = []
        self._initial_load = asyncio.get_running_loop().create_task(self.load())

    @property
    def expenses(self) -> List[ExpenseSchema]:
        return list(self._expenses)

    def subscribe(self, callback: ExpensesSubscriber) -> Callable[[], None]:
        """
        Register a callback that receives each new snapshot.

        Returns a function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def ready(self) -> None:
        """Wait for the load scheduled at construction time."""
        await self._initial_load

    async def load(self) -> None:
        expenses = await self._repository.get_all()
        self._expenses = list(expenses)
        self.logger.debug(f"Published snapshot of {len(self._expenses)} expenses")

        for callback in list(self._subscribers):
            callback(self.expenses)

    async def add(self, title: str, amount_text: str) -> None:
        amount = parse_amount(amount_text, strict=self._strict_amounts)
        await self._repository.insert(ExpenseSchema(id=0, title=title, amount=amount))
        await self.load()
