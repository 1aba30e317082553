from fastapi import APIRouter, Depends, Query
from typing import List

from ebank.api.deps import get_bank_account_service
from ebank.schemas.bank_account import BankAccountDTO
from ebank.schemas.customer import CustomerCreate, CustomerDTO
from ebank.services.bank_account import BankAccountService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerDTO])
@router.get("/", response_model=List[CustomerDTO], include_in_schema=False)
def list_customers(service: BankAccountService = Depends(get_bank_account_service)):
    return service.list_customers()


@router.get("/search", response_model=List[CustomerDTO])
def search_customers(
    keyword: str = Query("", description="Part of the customer's name"),
    service: BankAccountService = Depends(get_bank_account_service),
):
    return service.search_customers(keyword)


@router.get("/{customer_id}", response_model=CustomerDTO)
def get_customer(customer_id: int, service: BankAccountService = Depends(get_bank_account_service)):
    return service.get_customer(customer_id)


@router.get("/{customer_id}/accounts", response_model=List[BankAccountDTO])
def get_customer_accounts(customer_id: int, service: BankAccountService = Depends(get_bank_account_service)):
    return service.customer_accounts(customer_id)


@router.post("", response_model=CustomerDTO)
@router.post("/", response_model=CustomerDTO, include_in_schema=False)
def save_customer(customer_data: CustomerCreate, service: BankAccountService = Depends(get_bank_account_service)):
    return service.save_customer(customer_data.name, customer_data.email)


@router.put("/{customer_id}", response_model=CustomerDTO)
def update_customer(
    customer_id: int,
    customer_data: CustomerCreate,
    service: BankAccountService = Depends(get_bank_account_service),
):
    return service.update_customer(customer_id, customer_data.name, customer_data.email)


@router.delete("/{customer_id}")
def delete_customer(customer_id: int, service: BankAccountService = Depends(get_bank_account_service)):
    service.delete_customer(customer_id)
    return {"message": f"Customer {customer_id} deleted"}
