"""Security policy lookups."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.network import SecurityPolicy


class SecurityPoliciesAPI(EntityAPI):
    entity = "security policy"
    entity_plural = "security policies"

    async def list(self) -> list[SecurityPolicy]:
        return await self._fetch_all(queries.READ_SECURITY_POLICIES, field="securityPolicies", model=SecurityPolicy)
