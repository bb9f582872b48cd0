from typing import Union

from pydantic import BaseModel, Field


class CreateExpenseModel(BaseModel):
    title: str = Field("", description="Label for the expense")
    amount: Union[str, float] = Field(
        "",
        description="Amount as typed by the user, or a number; parsed when the expense is added",
    )
