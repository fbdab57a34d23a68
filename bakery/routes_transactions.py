# routes_transactions.py
"""
JSON routes for the transaction list and single-row mutations.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from bakery.deps import get_db, success
from bakery.schemas import TransactionIn, TransactionOut
from bakery.services import transaction_store as store

logger = logging.getLogger(__name__)

router = APIRouter()


def _out(tx) -> dict:
    return jsonable_encoder(TransactionOut.model_validate(tx))


@router.get("/transactions")
def list_transactions(db: Session = Depends(get_db)):
    """All transactions, ordered by date desc, id desc."""
    return success([_out(tx) for tx in store.list_all(db)])


@router.get("/transactions/{tx_id}")
def get_transaction(tx_id: int, db: Session = Depends(get_db)):
    return success(_out(store.get(db, tx_id)))


@router.post("/transactions")
def create_transaction(payload: TransactionIn, db: Session = Depends(get_db)):
    tx = store.create(db, payload.model_dump())
    return success(_out(tx))


@router.put("/transactions/{tx_id}")
def update_transaction(tx_id: int, payload: TransactionIn, db: Session = Depends(get_db)):
    """Full replace: every field in the body overwrites the stored row."""
    tx = store.update(db, tx_id, payload.model_dump())
    return success(_out(tx))


@router.delete("/transactions/{tx_id}")
def delete_transaction(tx_id: int, db: Session = Depends(get_db)):
    store.delete(db, tx_id)
    return success(message="deleted")
