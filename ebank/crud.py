# ebank/crud.py
import math
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import Session, select

from ebank.models.account_operation import AccountOperation
from ebank.models.bank_account import BankAccount
from ebank.models.customer import Customer


def get_customer(session: Session, customer_id: int) -> Optional[Customer]:
    return session.get(Customer, customer_id)

def list_customers(session: Session) -> List[Customer]:
    return session.exec(select(Customer).order_by(Customer.id)).all()

def search_customers(session: Session, keyword: str) -> List[Customer]:
    q = select(Customer).where(Customer.name.ilike(f"%{keyword}%")).order_by(Customer.id)
    return session.exec(q).all()

def get_account(session: Session, account_id: str, for_update: bool = False) -> Optional[BankAccount]:
    if for_update:
        # re-read the row and lock it where the backend supports SELECT ... FOR UPDATE
        return session.get(BankAccount, account_id, populate_existing=True, with_for_update=True)
    return session.get(BankAccount, account_id)

def list_accounts(session: Session) -> List[BankAccount]:
    return session.exec(select(BankAccount).order_by(BankAccount.created_at)).all()

def list_accounts_for_customer(session: Session, customer_id: int) -> List[BankAccount]:
    q = select(BankAccount).where(BankAccount.customer_id == customer_id).order_by(BankAccount.created_at)
    return session.exec(q).all()

def customer_has_accounts(session: Session, customer_id: int) -> bool:
    return session.exec(
        select(BankAccount.id).where(BankAccount.customer_id == customer_id).limit(1)
    ).first() is not None

def list_operations(session: Session, account_id: str) -> List[AccountOperation]:
    q = select(AccountOperation).where(AccountOperation.bank_account_id == account_id)
    return session.exec(q).all()

def page_operations(session: Session, account_id: str, page: int, size: int) -> Tuple[List[AccountOperation], int]:
    """
    One page of an account's operations, newest first, plus the total page count.

    ``page`` is zero based. ``total_pages`` is ``ceil(count / size)``, so an
    account without operations has zero pages.
    """
    total = session.exec(
        select(func.count()).select_from(AccountOperation).where(AccountOperation.bank_account_id == account_id)
    ).one()

    q = (
        select(AccountOperation)
        .where(AccountOperation.bank_account_id == account_id)
        .order_by(AccountOperation.operation_date.desc(), AccountOperation.id.desc())
        .offset(page * size)
        .limit(size)
    )
    operations = session.exec(q).all()
    return operations, math.ceil((total or 0) / size)

def save(session: Session, entity):
    # flush so generated keys are available before the caller commits
    session.add(entity)
    session.flush()
    return entity

def delete(session: Session, entity) -> None:
    session.delete(entity)
    session.flush()
