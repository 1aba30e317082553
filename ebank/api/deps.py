from fastapi import Depends
from sqlmodel import Session

from ebank.database import get_session
from ebank.services.bank_account import BankAccountService


def get_bank_account_service(session: Session = Depends(get_session)) -> BankAccountService:
    """
    Service bound to the request's DB session.
    """
    return BankAccountService(session)
