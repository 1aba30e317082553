# ebank/schemas/bank_account.py

from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from pydantic import Field

from ebank.models.enums import AccountStatus
from ebank.schemas.customer import CamelModel, CustomerDTO

class CurrentBankAccountDTO(CamelModel):
    type: Literal["CurrentAccount"] = "CurrentAccount"
    id: str
    balance: float
    created_at: datetime
    status: AccountStatus
    customer: Optional[CustomerDTO] = None
    overdraft: float

class SavingBankAccountDTO(CamelModel):
    type: Literal["SavingAccount"] = "SavingAccount"
    id: str
    balance: float
    created_at: datetime
    status: AccountStatus
    customer: Optional[CustomerDTO] = None
    interest_rate: float

BankAccountDTO = Annotated[
    Union[CurrentBankAccountDTO, SavingBankAccountDTO],
    Field(discriminator="type"),
]

class CurrentAccountCreate(CamelModel):
    initial_balance: float
    overdraft: float
    customer_id: int

class SavingAccountCreate(CamelModel):
    initial_balance: float
    interest_rate: float
    customer_id: int
