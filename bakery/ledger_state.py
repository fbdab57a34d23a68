# bakery/ledger_state.py
"""
Client-side session state for a ledger front end.

LedgerState is the explicit state object a presentation layer threads
through its render/update cycle: the local copy of all transactions, the
selected month and type filter, and the row being edited. The `submit`,
`remove` and `refresh` helpers run one LedgerClient call and merge the
response into the state only when it succeeded; a failed call leaves the
state untouched and the returned Result carries the error to show.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from bakery.client import LedgerClient, Result
from bakery.schemas import TransactionIn, TransactionOut
from bakery.services.aggregation import TYPE_FILTERS, build_summary
from bakery.services.month_helpers import current_month, parse_month


@dataclass
class LedgerState:
    transactions: List[TransactionOut] = field(default_factory=list)
    filter_month: str = field(default_factory=current_month)
    type_filter: str = "all"
    editing_id: Optional[int] = None

    # ---- Filters / edit target ----

    def set_month(self, month: str) -> None:
        parse_month(month)
        self.filter_month = month

    def set_type_filter(self, kind: str) -> None:
        if kind not in TYPE_FILTERS:
            raise ValueError(f"type filter must be one of {', '.join(TYPE_FILTERS)}, got {kind!r}")
        self.type_filter = kind

    def begin_edit(self, tx_id: int) -> TransactionOut:
        """Mark `tx_id` as the edit target and return its current values."""
        for tx in self.transactions:
            if tx.id == tx_id:
                self.editing_id = tx_id
                return tx
        raise KeyError(tx_id)

    def cancel_edit(self) -> None:
        self.editing_id = None

    # ---- Merging successful responses ----

    def replace_all(self, transactions: List[TransactionOut]) -> None:
        self.transactions = list(transactions)

    def apply_created(self, tx: TransactionOut) -> None:
        self.transactions = [tx, *self.transactions]

    def apply_updated(self, tx: TransactionOut) -> None:
        self.transactions = [tx if t.id == tx.id else t for t in self.transactions]

    def apply_deleted(self, tx_id: int) -> None:
        self.transactions = [t for t in self.transactions if t.id != tx_id]
        if self.editing_id == tx_id:
            self.editing_id = None

    # ---- Derived view ----

    def summary(self, today: date | None = None) -> Dict[str, Any]:
        return build_summary(
            self.transactions,
            self.filter_month,
            self.type_filter,
            today or date.today(),
        )


# -------------------------------------------------------------------
# Request helpers: call, then merge on success only
# -------------------------------------------------------------------

def refresh(state: LedgerState, client: LedgerClient) -> Result:
    result = client.list_transactions()
    if result.ok:
        state.replace_all(result.data)
    return result


def submit(state: LedgerState, client: LedgerClient, tx: TransactionIn) -> Result:
    """Create a new entry, or update the one being edited."""
    if state.editing_id is not None:
        result = client.update_transaction(state.editing_id, tx)
        if result.ok:
            state.apply_updated(result.data)
            state.editing_id = None
        return result

    result = client.create_transaction(tx)
    if result.ok:
        state.apply_created(result.data)
    return result


def remove(state: LedgerState, client: LedgerClient, tx_id: int) -> Result:
    result = client.delete_transaction(tx_id)
    if result.ok:
        state.apply_deleted(tx_id)
    return result
