# bakery/services/transaction_store.py
"""
Transaction Store: the only code that reads or writes the transactions table.

Each public function is one independent unit of work on the given session:
it commits on success, rolls back and raises StoreError on any storage
fault. Update and delete report unknown ids as TransactionNotFound rather
than silently succeeding.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Transaction, INCOME, EXPENSE

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("date", "description", "amount", "type", "category")

# Rows inserted into an empty table on startup
DEMO_ROWS = [
    ("Morning Sourdough Sales", 450.00, INCOME, "Counter Sales"),
    ("Flour (50kg)", 120.00, EXPENSE, "Ingredients"),
    ("Butter & Eggs", 85.50, EXPENSE, "Ingredients"),
]


class StoreError(Exception):
    """Storage-layer failure (engine error, constraint violation, ...)."""


class TransactionNotFound(StoreError):
    def __init__(self, tx_id: int):
        super().__init__(f"Transaction {tx_id} not found")
        self.tx_id = tx_id


def _fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    # All five fields are required; a missing one is a caller bug
    return {name: fields[name] for name in MUTABLE_FIELDS}


def _fail(db: Session, action: str, exc: SQLAlchemyError) -> StoreError:
    db.rollback()
    message = str(getattr(exc, "orig", None) or exc)
    logger.warning("[store] %s failed: %s", action, message)
    return StoreError(message)


# ---- Reads ----

def list_all(db: Session) -> List[Transaction]:
    """All transactions, newest date first, then highest id first."""
    try:
        return (
            db.query(Transaction)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise _fail(db, "list", e) from e


def get(db: Session, tx_id: int) -> Transaction:
    try:
        tx = db.get(Transaction, tx_id)
    except SQLAlchemyError as e:
        raise _fail(db, f"get #{tx_id}", e) from e
    if tx is None:
        raise TransactionNotFound(tx_id)
    return tx


# ---- Writes ----

def create(db: Session, fields: Dict[str, Any]) -> Transaction:
    tx = Transaction(**_fields(fields))
    try:
        db.add(tx)
        db.commit()
        db.refresh(tx)
    except SQLAlchemyError as e:
        raise _fail(db, "create", e) from e

    logger.info("[store] created #%s %s %s %s", tx.id, tx.date, tx.type, tx.amount)
    return tx


def update(db: Session, tx_id: int, fields: Dict[str, Any]) -> Transaction:
    """Replace every mutable field of transaction `tx_id`."""
    values = _fields(fields)
    try:
        changed = (
            db.query(Transaction)
            .filter(Transaction.id == tx_id)
            .update(values, synchronize_session=False)
        )
        if changed == 0:
            db.rollback()
            raise TransactionNotFound(tx_id)
        db.commit()
        tx = db.get(Transaction, tx_id, populate_existing=True)
    except SQLAlchemyError as e:
        raise _fail(db, f"update #{tx_id}", e) from e

    # Removed between the commit and the re-read
    if tx is None:
        raise TransactionNotFound(tx_id)

    logger.info("[store] updated #%s", tx_id)
    return tx


def delete(db: Session, tx_id: int) -> None:
    try:
        removed = (
            db.query(Transaction)
            .filter(Transaction.id == tx_id)
            .delete(synchronize_session=False)
        )
        if removed == 0:
            db.rollback()
            raise TransactionNotFound(tx_id)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, f"delete #{tx_id}", e) from e

    logger.info("[store] deleted #%s", tx_id)


def seed_if_empty(db: Session, today: date | None = None) -> int:
    """
    Insert the demo rows (dated `today`) when the table has no rows.
    Returns the number of rows inserted.
    """
    today = today or date.today()
    try:
        if db.query(Transaction.id).first() is not None:
            return 0
        db.add_all(
            Transaction(date=today, description=desc, amount=amount, type=kind, category=cat)
            for desc, amount, kind, cat in DEMO_ROWS
        )
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, "seed", e) from e

    logger.info("[store] seeded %d demo transactions", len(DEMO_ROWS))
    return len(DEMO_ROWS)
