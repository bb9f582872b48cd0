from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
import logging

from expense_tracker.core.db import DatabaseSessionManager
from expense_tracker.core.exceptions import DatabaseError
from expense_tracker.modules.expenses.models import Expense
from expense_tracker.modules.expenses.schema import ExpenseSchema

logger = logging.getLogger(__name__)


class ExpenseStore:
    """
    Single-table record store for expenses.

    Rows are only ever appended and read back in full; there is no update,
    delete or filtered query.
    """

    def __init__(self, sessions: DatabaseSessionManager):
        self.logger = logger
        self._sessions = sessions

    async def insert(self, title: str, amount: float) -> None:
        """Append one row; the id is assigned by the database."""
        self.logger.info(f"Inserting expense with title: {title!r}")

        try:
            async with self._sessions.session() as db:
                db.add(Expense(title=title, amount=amount))
                await db.commit()
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expense insert: {str(e)}")
            raise DatabaseError(f"insert expense: {str(e)}") from e

        return None

    async def fetch_all(self) -> list[ExpenseSchema]:
        """Return every stored row, in no particular order."""
        try:
            async with self._sessions.session() as db:
                result = await db.execute(select(Expense))
                expenses = result.scalars().all()
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expense fetch: {str(e)}")
            raise DatabaseError(f"fetch expenses: {str(e)}") from e

        self.logger.debug(f"Fetched {len(expenses)} expenses")
        return [ExpenseSchema.model_validate(expense) for expense in expenses]
