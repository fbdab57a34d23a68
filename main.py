# main.py
# Role: Application entry point for the bakery ledger.
#       Configures logging, creates database tables, seeds demo rows,
#       registers error handlers and all route modules.

"""
Main FastAPI app for the bakery ledger.

Here we only:
- create the FastAPI app
- create DB tables (and seed demo data when empty)
- map store / validation errors to JSON error responses
- include route modules

Run with:
    uvicorn main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from config import LOG_LEVEL, SEED_DEMO_DATA
from db import Base, engine, SessionLocal
from bakery.deps import error_response
from bakery.routes_root import router as root_router
from bakery.routes_transactions import router as transactions_router
from bakery.routes_summary import router as summary_router
from bakery.services.transaction_store import StoreError, TransactionNotFound, seed_if_empty

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# App & DB setup
# -------------------------------------------------------------------

# Create database tables (only if they don't exist yet).
Base.metadata.create_all(bind=engine)

if SEED_DEMO_DATA:
    with SessionLocal() as _db:
        seed_if_empty(_db)

# FastAPI application instance
app = FastAPI(title="Bakery Ledger")


# -------------------------------------------------------------------
# Error handlers
# -------------------------------------------------------------------

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "; ".join(parts) or "Invalid request"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(message, status_code=400)


@app.exception_handler(TransactionNotFound)
async def not_found_handler(request: Request, exc: TransactionNotFound):
    return error_response(str(exc), status_code=404)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    # Storage faults keep the historical 400 status
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(str(exc), status_code=400)


# -------------------------------------------------------------------
# Include routers
# -------------------------------------------------------------------

# Root / health
app.include_router(root_router)

# Transactions CRUD
app.include_router(transactions_router)

# Dashboard aggregates and category suggestions
app.include_router(summary_router)
