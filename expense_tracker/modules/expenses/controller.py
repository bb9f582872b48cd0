from fastapi import APIRouter
from typing import List

from expense_tracker.core.dependencies import ExpenseStateDep
from expense_tracker.modules.expenses.dto import CreateExpenseModel
from expense_tracker.modules.expenses.schema import ExpenseSchema

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("/")
async def get_all_expenses(state: ExpenseStateDep) -> List[ExpenseSchema]:
    """API endpoint to fetch the current list of expenses"""
    return state.expenses


@router.post("/")
async def create_expense(
    expense_data: CreateExpenseModel,
    state: ExpenseStateDep,
) -> List[ExpenseSchema]:
    """API endpoint to add an expense; responds with the refreshed list"""
    await state.add(expense_data.title, str(expense_data.amount))
    return state.expenses
