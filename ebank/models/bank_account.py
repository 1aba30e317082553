# ebank/models/bank_account.py

from sqlmodel import Relationship, SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

from ebank.models.customer import Customer
from ebank.models.enums import AccountStatus, AccountType

class BankAccount(SQLModel, table=True):
    """Current and saving accounts share this table, told apart by ``type``."""
    __tablename__ = "bank_account"

    id: str = Field(primary_key=True, max_length=36)
    type: AccountType = Field(index=True)
    balance: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: AccountStatus = Field(default=AccountStatus.created)
    customer_id: int = Field(foreign_key="customer.id", index=True)

    # Only set on current accounts
    overdraft: Optional[float] = None
    # Only set on saving accounts
    interest_rate: Optional[float] = None

    # One way only: customers never embed their accounts
    customer: Optional[Customer] = Relationship()
