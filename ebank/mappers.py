from typing import Optional

from ebank.models.account_operation import AccountOperation
from ebank.models.bank_account import BankAccount
from ebank.models.customer import Customer
from ebank.models.enums import AccountType
from ebank.schemas.account_operation import AccountOperationDTO
from ebank.schemas.bank_account import CurrentBankAccountDTO, SavingBankAccountDTO
from ebank.schemas.customer import CustomerDTO


def from_customer(c: Customer) -> CustomerDTO:
    return CustomerDTO(id=c.id, name=c.name, email=c.email)


def to_customer(dto: CustomerDTO) -> Customer:
    return Customer(id=dto.id, name=dto.name, email=dto.email)


def _owner(a: BankAccount) -> Optional[CustomerDTO]:
    # a detached account may come without its customer loaded
    return from_customer(a.customer) if a.customer is not None else None


def from_current_account(a: BankAccount) -> CurrentBankAccountDTO:
    return CurrentBankAccountDTO(
        id=a.id,
        balance=a.balance,
        created_at=a.created_at,
        status=a.status,
        customer=_owner(a),
        overdraft=a.overdraft if a.overdraft is not None else 0.0,
    )


def from_saving_account(a: BankAccount) -> SavingBankAccountDTO:
    return SavingBankAccountDTO(
        id=a.id,
        balance=a.balance,
        created_at=a.created_at,
        status=a.status,
        customer=_owner(a),
        interest_rate=a.interest_rate if a.interest_rate is not None else 0.0,
    )


def from_bank_account(a: BankAccount):
    """Map either account variant, dispatching on its type tag."""
    if a.type == AccountType.current:
        return from_current_account(a)
    if a.type == AccountType.saving:
        return from_saving_account(a)
    raise ValueError(f"Unknown account type {a.type!r}")


def from_account_operation(op: AccountOperation) -> AccountOperationDTO:
    return AccountOperationDTO(
        id=op.id,
        operation_date=op.operation_date,
        amount=op.amount,
        type=op.type,
        description=op.description,
    )
