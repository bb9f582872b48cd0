# Export base classes only to avoid circular imports
# Models should be imported from their respective modules, not from here

from expense_tracker.core.db.base import Base
from expense_tracker.core.db.engine import DatabaseSessionManager

__all__ = ["Base", "DatabaseSessionManager"]
