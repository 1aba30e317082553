from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

from ebank.models.enums import OperationType

class AccountOperation(SQLModel, table=True):
    __tablename__ = "account_operation"

    id: Optional[int] = Field(default=None, primary_key=True)
    operation_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    amount: float
    type: OperationType
    description: Optional[str] = None
    bank_account_id: str = Field(foreign_key="bank_account.id", index=True)
