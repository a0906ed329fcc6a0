"""Upstream data source HTTP client for fetching a user's financial snapshot"""

import httpx
from typing import Any, Dict
from pydantic import ValidationError

from awareness_engine.api.v1.schemas import SnapshotSchema
from awareness_engine.domain.models import FinancialSnapshot
from awareness_engine.domain.exceptions import SnapshotSourceError
from awareness_engine.config import settings


def parse_snapshot(data: Dict[str, Any]) -> FinancialSnapshot:
    """Validate the data source's JSON payload and build a FinancialSnapshot"""
    return SnapshotSchema.model_validate(data).to_domain()


class SnapshotClient:
    """Client for the upstream store holding accounts, transactions, subscriptions and debts"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.snapshot_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_snapshot(self, user_id: str) -> FinancialSnapshot:
        """
        Fetch the current financial snapshot for a user.

        Raises:
            SnapshotSourceError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/users/{user_id}/snapshot")
                response.raise_for_status()
                return parse_snapshot(response.json())

            except httpx.TimeoutException as e:
                raise SnapshotSourceError(f"Data source timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise SnapshotSourceError(f"Data source error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise SnapshotSourceError(f"Data source unreachable: {e}") from e
            except (ValidationError, ValueError) as e:
                raise SnapshotSourceError(f"Invalid snapshot data from data source: {e}") from e
