from fastapi import APIRouter, Depends, Query
from typing import List

from ebank.api.deps import get_bank_account_service
from ebank.core.config import DEFAULT_PAGE_SIZE
from ebank.schemas.account_operation import (
    AccountHistoryDTO,
    AccountOperationDTO,
    CreditDTO,
    DebitDTO,
    TransferRequestDTO,
)
from ebank.schemas.bank_account import (
    BankAccountDTO,
    CurrentAccountCreate,
    CurrentBankAccountDTO,
    SavingAccountCreate,
    SavingBankAccountDTO,
)
from ebank.services.bank_account import BankAccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=List[BankAccountDTO])
@router.get("/", response_model=List[BankAccountDTO], include_in_schema=False)
def list_accounts(service: BankAccountService = Depends(get_bank_account_service)):
    return service.list_bank_accounts()


@router.get("/{account_id}", response_model=BankAccountDTO)
def get_bank_account(account_id: str, service: BankAccountService = Depends(get_bank_account_service)):
    return service.get_bank_account(account_id)


@router.post("/current", response_model=CurrentBankAccountDTO)
def save_current_account(data: CurrentAccountCreate, service: BankAccountService = Depends(get_bank_account_service)):
    return service.save_current_account(data.initial_balance, data.overdraft, data.customer_id)


@router.post("/saving", response_model=SavingBankAccountDTO)
def save_saving_account(data: SavingAccountCreate, service: BankAccountService = Depends(get_bank_account_service)):
    return service.save_saving_account(data.initial_balance, data.interest_rate, data.customer_id)


@router.get("/{account_id}/operations", response_model=List[AccountOperationDTO])
def get_history(account_id: str, service: BankAccountService = Depends(get_bank_account_service)):
    return service.account_history(account_id)


@router.get("/{account_id}/pageOperations", response_model=AccountHistoryDTO)
def get_account_history(
    account_id: str,
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    service: BankAccountService = Depends(get_bank_account_service),
):
    return service.get_account_history(account_id, page, size)


@router.post("/debit", response_model=AccountOperationDTO)
def debit(data: DebitDTO, service: BankAccountService = Depends(get_bank_account_service)):
    return service.debit(data.account_id, data.amount, data.description)


@router.post("/credit", response_model=AccountOperationDTO)
def credit(data: CreditDTO, service: BankAccountService = Depends(get_bank_account_service)):
    return service.credit(data.account_id, data.amount, data.description)


@router.post("/transfer")
def transfer(data: TransferRequestDTO, service: BankAccountService = Depends(get_bank_account_service)):
    service.transfer(data.account_source, data.account_destination, data.amount)
    return {"message": "Transfer completed"}
