# bakery/client.py
"""
HTTP client for the transactions API.

Every call returns a Result instead of raising: `ok` tells the caller which
branch to take, `data` holds the parsed payload on success and `error` a
human-readable message on failure. Network errors, non-2xx responses and
unexpected envelopes all become failed results.

The client wraps any `httpx.Client`, so tests can hand it FastAPI's
TestClient and production code a client with a base_url.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from bakery.schemas import TransactionIn, TransactionOut

logger = logging.getLogger(__name__)


@dataclass
class Result:
    ok: bool
    data: Any = None
    error: Optional[str] = None
    status_code: Optional[int] = None


class LedgerClient:
    def __init__(self, http: httpx.Client):
        self.http = http

    def _request(self, method: str, path: str, expect: str = "success", **kwargs) -> Result:
        try:
            resp = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %r", method, path, e)
            return Result(ok=False, error=str(e) or e.__class__.__name__)

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            logger.warning("%s %s -> %s %s", method, path, resp.status_code, message)
            return Result(
                ok=False,
                error=message or f"Server error ({resp.status_code})",
                status_code=resp.status_code,
            )

        if not isinstance(body, dict) or body.get("message") != expect:
            return Result(ok=False, error="Unknown error", status_code=resp.status_code)

        return Result(ok=True, data=body.get("data"), status_code=resp.status_code)

    def _parse(self, result: Result, many: bool = False) -> Result:
        if not result.ok:
            return result
        try:
            if many:
                result.data = [TransactionOut.model_validate(row) for row in result.data or []]
            else:
                result.data = TransactionOut.model_validate(result.data)
        except (ValidationError, TypeError) as e:
            logger.warning("Malformed transaction payload: %s", e)
            return Result(ok=False, error="Malformed response", status_code=result.status_code)
        return result

    # ---- Transactions ----

    def list_transactions(self) -> Result:
        return self._parse(self._request("GET", "/transactions"), many=True)

    def create_transaction(self, tx: TransactionIn) -> Result:
        return self._parse(self._request("POST", "/transactions", json=tx.model_dump(mode="json")))

    def update_transaction(self, tx_id: int, tx: TransactionIn) -> Result:
        return self._parse(self._request("PUT", f"/transactions/{tx_id}", json=tx.model_dump(mode="json")))

    def delete_transaction(self, tx_id: int) -> Result:
        return self._request("DELETE", f"/transactions/{tx_id}", expect="deleted")

    # ---- Read-only helpers ----

    def summary(self, month: str, kind: str = "all") -> Result:
        return self._request("GET", "/summary", params={"month": month, "type": kind})

    def categories(self) -> Result:
        return self._request("GET", "/categories")
