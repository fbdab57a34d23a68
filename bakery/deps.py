# bakery/deps.py
# Role: Shared application-level dependencies.
#       Provides the standard SQLAlchemy database session dependency and
#       the JSON envelope helpers every route answers with.

"""
Shared dependencies for the bakery ledger API.
"""

from typing import Any, Generator

from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import SessionLocal

# -------------------------------------------------------------------
# Database dependency
# -------------------------------------------------------------------

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed.

    Typical usage in routes:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# -------------------------------------------------------------------
# Response envelopes
# -------------------------------------------------------------------

def success(data: Any = None, message: str = "success") -> dict:
    body = {"message": message}
    if data is not None:
        body["data"] = data
    return body


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)
