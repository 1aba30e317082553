"""
Demo data for a fresh database: three customers, one current and one saving
account each, and a few credits and debits per account.

Run with: python -m ebank.scripts.seed
"""
import random

from sqlmodel import Session
from ebank.core.logging_config import get_logger, setup_logging
from ebank.database import create_db_and_tables, engine
from ebank.exceptions import InsufficientBalance
from ebank.services.bank_account import BankAccountService

CUSTOMERS = ["Hassan", "Imane", "Mohamed"]

logger = get_logger("scripts.seed")

def seed(session: Session, operations_per_account: int = 5, rng: random.Random = None):
    rng = rng or random.Random()
    service = BankAccountService(session)

    for name in CUSTOMERS:
        customer = service.save_customer(name, f"{name.lower()}@gmail.com")
        service.save_current_account(rng.random() * 90000, 9000, customer.id)
        service.save_saving_account(rng.random() * 120000, 5.5, customer.id)

    for account in service.list_bank_accounts():
        for _ in range(operations_per_account):
            service.credit(account.id, 10000 + rng.random() * 120000, "Credit")
            try:
                service.debit(account.id, 1000 + rng.random() * 9000, "Debit")
            except InsufficientBalance:
                logger.warning("Skipped seed debit on %s", account.id)

    logger.info("Seeded %d customers", len(CUSTOMERS))

if __name__ == "__main__":
    setup_logging()
    create_db_and_tables()
    with Session(engine) as session:
        seed(session)
    print("Seed completed.")
