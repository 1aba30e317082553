from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from ebank.core.config import CORS_ORIGINS, DATABASE_URL
from ebank.core.logging_config import get_logger, setup_logging
from ebank.database import create_db_and_tables
from ebank.exceptions import BankingError
from ebank.api import accounts, customers
from fastapi.middleware.cors import CORSMiddleware

# Configure logging before creating the app
setup_logging()
logger = get_logger("ebank")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("E-bank starting up, database=%s", DATABASE_URL)
    create_db_and_tables()
    yield
    logger.info("E-bank shutting down")

app = FastAPI(title="E-Bank API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(
        "HTTP %s %s from %s -> %s",
        request.method,
        request.url.path,
        request.client.host if request.client else "?",
        response.status_code,
    )
    return response


@app.exception_handler(BankingError)
async def banking_error_handler(request: Request, exc: BankingError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(customers.router)
app.include_router(accounts.router)

@app.get("/")
def root():
    return {"message": "E-bank backend"}

@app.get("/health")
def health():
    return {"status": "healthy"}
