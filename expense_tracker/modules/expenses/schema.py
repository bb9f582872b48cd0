from pydantic import BaseModel, Field


class ExpenseSchema(BaseModel):
    id: int = Field(0, description="Store-assigned identity; 0 until inserted")
    title: str = Field(..., description="User-supplied label")
    amount: float = Field(..., description="Amount spent")

    class Config:
        from_attributes = True
        frozen = True
