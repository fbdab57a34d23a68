# bakery/routes_summary.py
"""
Dashboard data: month totals, daily rollup, category balances and growth
versus yesterday, computed from the full transaction list.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from models import SUGGESTED_CATEGORIES
from bakery.deps import get_db, success, error_response
from bakery.schemas import TransactionOut
from bakery.services import transaction_store as store
from bakery.services.aggregation import build_summary
from bakery.services.month_helpers import current_month

router = APIRouter()


@router.get("/summary")
def summary(
    month: str | None = Query(None),
    type: str = Query("all"),
    db: Session = Depends(get_db),
):
    today = date.today()
    month = month or current_month(today)

    rows = [TransactionOut.model_validate(tx) for tx in store.list_all(db)]
    try:
        data = build_summary(rows, month, type, today)
    except ValueError as e:
        return error_response(str(e))

    return success(jsonable_encoder(data))


@router.get("/categories")
def categories():
    """Suggested categories per type for the entry form."""
    return success(SUGGESTED_CATEGORIES)
