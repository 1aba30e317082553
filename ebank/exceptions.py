"""
Errors raised by the banking service.

Each carries the HTTP status the API answers with; handlers in
``ebank.main`` turn them into ``{"detail": ...}`` responses.
"""


class BankingError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerNotFound(BankingError):
    status_code = 404

    def __init__(self, customer_id):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class AccountNotFound(BankingError):
    status_code = 404

    def __init__(self, account_id):
        super().__init__(f"Bank account {account_id} not found")
        self.account_id = account_id


class InsufficientBalance(BankingError):
    status_code = 400

    def __init__(self, account_id, balance: float, amount: float):
        super().__init__(f"Insufficient balance on account {account_id}: {balance} < {amount}")
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


class CustomerHasAccounts(BankingError):
    status_code = 409

    def __init__(self, customer_id):
        super().__init__(f"Customer {customer_id} still owns bank accounts")
        self.customer_id = customer_id


class InvalidPagination(BankingError):
    status_code = 400

    def __init__(self, page: int, size: int):
        super().__init__(f"Invalid page request: page={page} size={size} (page >= 0, size >= 1)")
        self.page = page
        self.size = size
