import os
from dotenv import load_dotenv

load_dotenv()  # load .env before reading settings

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ebank.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Empty LOG_DIR keeps logging on the console only
LOG_DIR = os.getenv("LOG_DIR", "logs")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8085"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "5"))
