from enum import Enum

class AccountStatus(str, Enum):
    created = "CREATED"
    activated = "ACTIVATED"
    suspended = "SUSPENDED"

class AccountType(str, Enum):
    # bank_account.type discriminator
    current = "CA"
    saving = "SA"

class OperationType(str, Enum):
    debit = "DEBIT"
    credit = "CREDIT"
