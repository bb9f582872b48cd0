"""
Request-level access to objects built once in the application lifespan.
"""

from typing import Annotated
from fastapi import Depends, Request

from expense_tracker.modules.expenses.state import ExpenseStateHolder


def get_expense_state(request: Request) -> ExpenseStateHolder:
    """Expense state holder - SINGLETON, created during startup"""
    return request.app.state.expense_state


ExpenseStateDep = Annotated[ExpenseStateHolder, Depends(get_expense_state)]
