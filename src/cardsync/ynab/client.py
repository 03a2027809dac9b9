#!/usr/bin/env python3
"""
YNAB API Client

Minimal async client for the three YNAB transaction endpoints cardsync needs:
list transactions since a date, create a transaction and update one. Requests
are authenticated with a personal access token and scoped to one budget.

Calls are meant to be awaited one at a time so that writes reach YNAB in a
deterministic order.
"""

import logging
from typing import Any

import httpx

from ..core.config import DEFAULT_YNAB_BASE_URL
from ..core.dates import FinancialDate
from .models import YnabTransaction

logger = logging.getLogger(__name__)


class YnabApiError(Exception):
    """
    Raised when a YNAB request fails.

    Covers both transport failures (status_code is None) and non-2xx
    responses, in which case detail carries YNAB's error description.
    """

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _error_detail(response: httpx.Response) -> str:
    """Pull the human-readable part out of a YNAB error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        parts = [str(error[key]) for key in ("name", "detail") if error.get(key)]
        if parts:
            return ": ".join(parts)
    return response.text.strip()


def _transaction_from(data: dict[str, Any], method: str) -> YnabTransaction:
    transaction = data.get("transaction")
    if not isinstance(transaction, dict):
        raise YnabApiError(f"YNAB response to {method} has no transaction")
    return YnabTransaction.from_dict(transaction)


class YnabClient:
    """
    Async client bound to one YNAB budget.

    Use as an async context manager:

        async with YnabClient(token, budget_id) as client:
            transactions = await client.list_transactions(since, account_id)
    """

    def __init__(
        self,
        token: str,
        budget_id: str,
        base_url: str = DEFAULT_YNAB_BASE_URL,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            token: YNAB personal access token
            budget_id: Budget the transactions belong to
            base_url: API root
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.budget_id = budget_id
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "YnabClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def _transactions_path(self) -> str:
        return f"/budgets/{self.budget_id}/transactions"

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise YnabApiError(f"YNAB request failed: {method} {path}: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            raise YnabApiError(
                f"YNAB returned {response.status_code} for {method} {path}: {detail}",
                status_code=response.status_code,
                detail=detail,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise YnabApiError(
                f"YNAB returned invalid JSON for {method} {path}", status_code=response.status_code
            ) from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise YnabApiError(
                f"YNAB response for {method} {path} has no data object", status_code=response.status_code
            )
        return data

    async def list_transactions(
        self, since_date: FinancialDate, account_id: str | None = None
    ) -> list[YnabTransaction]:
        """
        List budget transactions on or after a date.

        Args:
            since_date: Earliest transaction date to include
            account_id: If given, keep only this account's transactions

        Returns:
            Transactions in the order YNAB returned them

        Raises:
            YnabApiError: If the request fails
        """
        data = await self._request(
            "GET", self._transactions_path, params={"since_date": since_date.to_ynab_format()}
        )
        transactions = [YnabTransaction.from_dict(tx) for tx in data.get("transactions", [])]
        transactions = [tx for tx in transactions if not tx.deleted]

        if account_id is not None:
            transactions = [tx for tx in transactions if tx.account_id == account_id]

        logger.info("Fetched %d YNAB transactions since %s", len(transactions), since_date)
        return transactions

    async def create_transaction(self, payload: dict[str, Any]) -> YnabTransaction | None:
        """
        Create a single transaction.

        Returns:
            The created transaction, or None if YNAB skipped it because its
            import_id already exists on the account

        Raises:
            YnabApiError: If the request fails
        """
        try:
            data = await self._request("POST", self._transactions_path, json={"transaction": payload})
        except YnabApiError as e:
            # 409 Conflict: import_id already exists on the account
            if e.status_code == 409 and payload.get("import_id"):
                logger.warning("YNAB rejected duplicate import id %s", payload["import_id"])
                return None
            raise

        if data.get("duplicate_import_ids") and not data.get("transaction"):
            logger.warning("YNAB skipped duplicate import id %s", payload.get("import_id"))
            return None

        return _transaction_from(data, "POST")

    async def update_transaction(self, transaction_id: str, payload: dict[str, Any]) -> YnabTransaction:
        """
        Update fields of an existing transaction.

        Raises:
            YnabApiError: If the request fails
        """
        data = await self._request(
            "PUT", f"{self._transactions_path}/{transaction_id}", json={"transaction": payload}
        )
        return _transaction_from(data, "PUT")
