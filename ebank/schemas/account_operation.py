from datetime import datetime
from typing import List, Optional

from ebank.models.enums import OperationType
from ebank.schemas.customer import CamelModel

class AccountOperationDTO(CamelModel):
    id: int
    operation_date: datetime
    amount: float
    type: OperationType
    description: Optional[str] = None

class AccountHistoryDTO(CamelModel):
    account_id: str
    balance: float
    current_page: int
    total_pages: int
    page_size: int
    operations: List[AccountOperationDTO] = []

class DebitDTO(CamelModel):
    account_id: str
    amount: float
    description: Optional[str] = None

class CreditDTO(DebitDTO):
    pass

class TransferRequestDTO(CamelModel):
    account_source: str
    account_destination: str
    amount: float
