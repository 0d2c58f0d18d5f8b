"""
Accounts API — FastAPI application entry-point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts_api import __version__
from accounts_api.config import settings
from accounts_api.database import Base, engine, ensure_sqlite_directory
from accounts_api.errors import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure the SQLite file directory + tables exist
    ensure_sqlite_directory(engine.url)
    # Import models so Base.metadata knows about them
    import accounts_api.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", engine.url.render_as_string(hide_password=True))

    yield

    engine.dispose()
    logger.info("Shutting down, connection pool drained")


app = FastAPI(
    title="Accounts API",
    description="Chart of accounts, ledger transactions, cheques and daily reports",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    return {"service": "Accounts API is running...", "version": __version__}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API routers ─────────────────────────────────────────────────
from accounts_api.routers.accounts import router as accounts_router  # noqa: E402
from accounts_api.routers.transactions import router as transactions_router  # noqa: E402
from accounts_api.routers.cheques import router as cheques_router  # noqa: E402
from accounts_api.routers.daily_receivables import router as receivables_router  # noqa: E402
from accounts_api.routers.daily_reports import router as daily_reports_router  # noqa: E402

app.include_router(accounts_router, tags=["Accounts"])
app.include_router(transactions_router, tags=["Transactions"])
app.include_router(cheques_router, tags=["Cheques"])
app.include_router(receivables_router, tags=["Daily Receivables"])
app.include_router(daily_reports_router, prefix="/daily-reports", tags=["Daily Reports"])
app.include_router(daily_reports_router, prefix="/daily-report", include_in_schema=False)
