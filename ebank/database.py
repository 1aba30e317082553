from sqlmodel import SQLModel, Session, create_engine

from ebank.core.config import DATABASE_URL, SQL_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)  # SQL_ECHO=true prints every query

def create_db_and_tables(bind=None):
    from ebank.models import customer, bank_account, account_operation  # register tables on the metadata
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
