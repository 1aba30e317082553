"""
Banking service: customers, accounts and the operations that move money.

Every public method is one unit of work on the session it was built with:
it either commits everything it staged or rolls all of it back.
"""

import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, List
from uuid import uuid4

from sqlmodel import Session

from ebank import crud, mappers
from ebank.core.logging_config import get_logger
from ebank.exceptions import (
    AccountNotFound,
    CustomerHasAccounts,
    CustomerNotFound,
    InsufficientBalance,
    InvalidPagination,
)
from ebank.models.account_operation import AccountOperation
from ebank.models.bank_account import BankAccount
from ebank.models.customer import Customer
from ebank.models.enums import AccountStatus, AccountType, OperationType
from ebank.schemas.account_operation import AccountHistoryDTO, AccountOperationDTO
from ebank.schemas.bank_account import CurrentBankAccountDTO, SavingBankAccountDTO
from ebank.schemas.customer import CustomerDTO

logger = get_logger("services.bank_account")


class _AccountLock:
    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


# Entries only live while some caller holds or waits on them
_account_locks: Dict[str, _AccountLock] = {}
_account_locks_guard = threading.Lock()


def _checkout(account_id: str) -> threading.Lock:
    with _account_locks_guard:
        entry = _account_locks.get(account_id)
        if entry is None:
            entry = _account_locks[account_id] = _AccountLock()
        entry.holders += 1
        return entry.lock


def _checkin(account_id: str) -> None:
    with _account_locks_guard:
        entry = _account_locks[account_id]
        entry.holders -= 1
        if entry.holders == 0:
            del _account_locks[account_id]


@contextmanager
def account_locks(*account_ids: str):
    """Hold the in-process locks of the given accounts, taken in sorted id order."""
    ids = sorted(set(account_ids))
    acquired = []
    try:
        for account_id in ids:
            lock = _checkout(account_id)
            acquired.append((account_id, lock))
            lock.acquire()
        yield
    finally:
        for account_id, lock in reversed(acquired):
            lock.release()
            _checkin(account_id)


class BankAccountService:
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _unit_of_work(self):
        try:
            yield
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    # ---- customers ----

    def _customer(self, customer_id: int) -> Customer:
        customer = crud.get_customer(self.session, customer_id)
        if customer is None:
            logger.warning("Customer %s not found", customer_id)
            raise CustomerNotFound(customer_id)
        return customer

    def save_customer(self, name: str, email: str) -> CustomerDTO:
        logger.info("Saving new customer name=%s", name)
        with self._unit_of_work():
            customer = crud.save(self.session, Customer(name=name, email=email))
        return mappers.from_customer(customer)

    def update_customer(self, customer_id: int, name: str, email: str) -> CustomerDTO:
        with self._unit_of_work():
            customer = self._customer(customer_id)
            customer.name = name
            customer.email = email
            crud.save(self.session, customer)
        logger.info("Updated customer %s", customer_id)
        return mappers.from_customer(customer)

    def delete_customer(self, customer_id: int) -> None:
        with self._unit_of_work():
            customer = self._customer(customer_id)
            if crud.customer_has_accounts(self.session, customer_id):
                logger.warning("Refusing to delete customer %s: accounts still open", customer_id)
                raise CustomerHasAccounts(customer_id)
            crud.delete(self.session, customer)
        logger.info("Deleted customer %s", customer_id)

    def get_customer(self, customer_id: int) -> CustomerDTO:
        return mappers.from_customer(self._customer(customer_id))

    def list_customers(self) -> List[CustomerDTO]:
        return [mappers.from_customer(c) for c in crud.list_customers(self.session)]

    def search_customers(self, keyword: str) -> List[CustomerDTO]:
        return [mappers.from_customer(c) for c in crud.search_customers(self.session, keyword)]

    # ---- accounts ----

    def _account(self, account_id: str, for_update: bool = False) -> BankAccount:
        account = crud.get_account(self.session, account_id, for_update=for_update)
        if account is None:
            logger.warning("Bank account %s not found", account_id)
            raise AccountNotFound(account_id)
        return account

    def _open_account(self, customer_id: int, **fields) -> BankAccount:
        with self._unit_of_work():
            customer = self._customer(customer_id)
            account = BankAccount(
                id=str(uuid4()),
                created_at=datetime.now(timezone.utc),
                status=AccountStatus.created,
                customer_id=customer.id,
                **fields,
            )
            crud.save(self.session, account)
        logger.info("Opened %s account %s for customer %s", account.type.name, account.id, customer_id)
        return account

    def save_current_account(self, initial_balance: float, overdraft: float, customer_id: int) -> CurrentBankAccountDTO:
        account = self._open_account(
            customer_id, type=AccountType.current, balance=initial_balance, overdraft=overdraft
        )
        return mappers.from_current_account(account)

    def save_saving_account(self, initial_balance: float, interest_rate: float, customer_id: int) -> SavingBankAccountDTO:
        account = self._open_account(
            customer_id, type=AccountType.saving, balance=initial_balance, interest_rate=interest_rate
        )
        return mappers.from_saving_account(account)

    def get_bank_account(self, account_id: str):
        return mappers.from_bank_account(self._account(account_id))

    def list_bank_accounts(self) -> list:
        return [mappers.from_bank_account(a) for a in crud.list_accounts(self.session)]

    def customer_accounts(self, customer_id: int) -> list:
        self._customer(customer_id)
        return [mappers.from_bank_account(a) for a in crud.list_accounts_for_customer(self.session, customer_id)]

    # ---- operations ----

    def _append_operation(self, account: BankAccount, op_type: OperationType, amount: float, description) -> AccountOperation:
        operation = AccountOperation(
            operation_date=datetime.now(timezone.utc),
            amount=amount,
            type=op_type,
            description=description,
            bank_account_id=account.id,
        )
        return crud.save(self.session, operation)

    def _debit(self, account_id: str, amount: float, description) -> AccountOperation:
        account = self._account(account_id, for_update=True)
        # Overdraft is not consulted: the balance alone must cover the amount
        if account.balance < amount:
            logger.warning("Debit of %s refused on %s: balance %s", amount, account_id, account.balance)
            raise InsufficientBalance(account_id, account.balance, amount)
        operation = self._append_operation(account, OperationType.debit, amount, description)
        account.balance -= amount
        crud.save(self.session, account)
        return operation

    def _credit(self, account_id: str, amount: float, description) -> AccountOperation:
        account = self._account(account_id, for_update=True)
        operation = self._append_operation(account, OperationType.credit, amount, description)
        account.balance += amount
        crud.save(self.session, account)
        return operation

    def debit(self, account_id: str, amount: float, description=None) -> AccountOperationDTO:
        with account_locks(account_id), self._unit_of_work():
            operation = self._debit(account_id, amount, description)
        logger.info("Debited %s from %s", amount, account_id)
        return mappers.from_account_operation(operation)

    def credit(self, account_id: str, amount: float, description=None) -> AccountOperationDTO:
        with account_locks(account_id), self._unit_of_work():
            operation = self._credit(account_id, amount, description)
        logger.info("Credited %s to %s", amount, account_id)
        return mappers.from_account_operation(operation)

    def transfer(self, source_id: str, destination_id: str, amount: float) -> None:
        """
        Move ``amount`` from source to destination.

        Both legs commit together. If the credit fails (for instance the
        destination does not exist) the debit is rolled back as well.
        """
        with account_locks(source_id, destination_id), self._unit_of_work():
            # Row locks in the same sorted order as the in-process ones
            for account_id in sorted({source_id, destination_id}):
                crud.get_account(self.session, account_id, for_update=True)
            self._debit(source_id, amount, f"Transfer to {destination_id}")
            self._credit(destination_id, amount, f"Transfer from {source_id}")
        logger.info("Transferred %s from %s to %s", amount, source_id, destination_id)

    def account_history(self, account_id: str) -> List[AccountOperationDTO]:
        return [mappers.from_account_operation(op) for op in crud.list_operations(self.session, account_id)]

    def get_account_history(self, account_id: str, page: int, size: int) -> AccountHistoryDTO:
        if page < 0 or size < 1:
            raise InvalidPagination(page, size)
        account = self._account(account_id)
        operations, total_pages = crud.page_operations(self.session, account_id, page, size)
        return AccountHistoryDTO(
            account_id=account.id,
            balance=account.balance,
            current_page=page,
            total_pages=total_pages,
            page_size=size,
            operations=[mappers.from_account_operation(op) for op in operations],
        )
