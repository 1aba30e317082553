from datetime import datetime

import pytest

from ebank import mappers
from ebank.models.account_operation import AccountOperation
from ebank.models.bank_account import BankAccount
from ebank.models.customer import Customer
from ebank.models.enums import AccountStatus, AccountType, OperationType
from ebank.schemas.customer import CustomerDTO


def _account(**fields):
    return BankAccount(
        id="acc-1",
        balance=150.0,
        created_at=datetime(2024, 5, 1),
        status=AccountStatus.activated,
        customer_id=1,
        **fields,
    )


def test_customer_round_trip():
    dto = mappers.from_customer(Customer(id=3, name="Gus", email="gus@example.com"))
    assert dto == CustomerDTO(id=3, name="Gus", email="gus@example.com")
    assert mappers.to_customer(dto).name == "Gus"


def test_current_account_dto():
    account = _account(type=AccountType.current, overdraft=400.0)
    account.customer = Customer(id=1, name="Hal", email="hal@example.com")

    dto = mappers.from_bank_account(account)
    assert dto.type == "CurrentAccount"
    assert dto.overdraft == 400.0
    assert dto.customer.name == "Hal"

    body = dto.model_dump(by_alias=True)
    assert body["createdAt"] == datetime(2024, 5, 1)
    assert body["type"] == "CurrentAccount"


def test_saving_account_dto_without_customer():
    dto = mappers.from_bank_account(_account(type=AccountType.saving, interest_rate=4.0))
    assert dto.type == "SavingAccount"
    assert dto.interest_rate == 4.0
    assert dto.customer is None
    assert "interestRate" in dto.model_dump(by_alias=True)


def test_unknown_account_type():
    account = _account(type=AccountType.current)
    account.type = "XX"
    with pytest.raises(ValueError):
        mappers.from_bank_account(account)


def test_operation_dto():
    op = AccountOperation(id=9, operation_date=datetime(2024, 5, 2), amount=20.0,
                          type=OperationType.debit, description="fee", bank_account_id="acc-1")
    dto = mappers.from_account_operation(op)
    assert dto.id == 9
    assert dto.type == OperationType.debit
    assert dto.model_dump(by_alias=True)["operationDate"] == datetime(2024, 5, 2)
