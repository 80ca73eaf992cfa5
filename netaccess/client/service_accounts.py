"""Service account lookups."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.identity import ServiceAccount


class ServiceAccountsAPI(EntityAPI):
    """Read-only; service keys reference these accounts by id."""

    entity = "service account"
    entity_plural = "service accounts"

    async def list(self, name: str = "") -> list[ServiceAccount]:
        """List service accounts, optionally only those with this exact name."""
        if name:
            return await self._fetch_all(
                queries.READ_SERVICE_ACCOUNTS_BY_NAME,
                {"name": name},
                field="serviceAccounts",
                model=ServiceAccount,
            )
        return await self._fetch_all(queries.READ_SERVICE_ACCOUNTS, field="serviceAccounts", model=ServiceAccount)
