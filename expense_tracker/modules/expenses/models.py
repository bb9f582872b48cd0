from sqlalchemy import String, Float
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.core.db.base import Base


class Expense(Base):
    __tablename__ = "expenses"
    # AUTOINCREMENT keeps SQLite from handing out an id twice
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        primary_key=True, autoincrement=True, index=True
    )

    title: Mapped[str] = mapped_column(String, nullable=False)

    amount: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, title='{self.title}', amount={self.amount})>"
