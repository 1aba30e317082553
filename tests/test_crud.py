"""
Tests for the storage layer queries
"""

from datetime import datetime, timedelta, timezone

from ebank import crud
from ebank.models.account_operation import AccountOperation
from ebank.models.bank_account import BankAccount
from ebank.models.customer import Customer
from ebank.models.enums import AccountType, OperationType


def _account(session, account_id="acc-1"):
    customer = crud.save(session, Customer(name="Carol", email="carol@example.com"))
    return crud.save(session, BankAccount(id=account_id, type=AccountType.current, balance=0, customer_id=customer.id))


def test_save_assigns_keys(session):
    customer = crud.save(session, Customer(name="Dan", email="dan@example.com"))
    assert customer.id is not None
    assert crud.get_customer(session, customer.id) is customer


def test_page_operations_orders_newest_first(session):
    account = _account(session)
    base = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    # inserted out of date order on purpose
    for offset in (3, 0, 4, 1, 2):
        crud.save(session, AccountOperation(
            operation_date=base + timedelta(days=offset),
            amount=offset,
            type=OperationType.credit,
            bank_account_id=account.id,
        ))

    operations, total_pages = crud.page_operations(session, account.id, 0, 2)
    assert total_pages == 3
    assert [op.amount for op in operations] == [4, 3]
    assert operations[0].operation_date == base + timedelta(days=4)

    operations, _ = crud.page_operations(session, account.id, 2, 2)
    assert [op.amount for op in operations] == [0]


def test_page_operations_only_reads_one_account(session):
    account = _account(session)
    other = crud.save(session, BankAccount(id="acc-2", type=AccountType.saving, balance=0,
                                           customer_id=account.customer_id, interest_rate=1.0))
    crud.save(session, AccountOperation(amount=1, type=OperationType.debit, bank_account_id=other.id))

    operations, total_pages = crud.page_operations(session, account.id, 0, 5)
    assert operations == []
    assert total_pages == 0
    assert len(crud.list_operations(session, other.id)) == 1


def test_accounts_for_customer(session):
    account = _account(session)
    assert crud.customer_has_accounts(session, account.customer_id)
    assert [a.id for a in crud.list_accounts_for_customer(session, account.customer_id)] == ["acc-1"]

    lonely = crud.save(session, Customer(name="Eve", email="eve@example.com"))
    assert not crud.customer_has_accounts(session, lonely.id)


def test_delete(session):
    customer = crud.save(session, Customer(name="Fay", email="fay@example.com"))
    crud.delete(session, customer)
    assert crud.get_customer(session, customer.id) is None
