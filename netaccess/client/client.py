"""Client facade over the GraphQL API."""

from __future__ import annotations

from types import TracebackType

import httpx

from netaccess.client.connectors import ConnectorsAPI
from netaccess.client.groups import GroupsAPI
from netaccess.client.remote_networks import RemoteNetworksAPI
from netaccess.client.resources import ResourcesAPI
from netaccess.client.security_policies import SecurityPoliciesAPI
from netaccess.client.service_accounts import ServiceAccountsAPI
from netaccess.client.service_keys import ServiceKeysAPI
from netaccess.client.transport import GraphQLTransport
from netaccess.client.users import UsersAPI
from netaccess.config import Settings, get_settings


class NetAccessClient:
    """Typed access to every entity family over one GraphQL endpoint.

    The client holds no state besides the HTTP connection pool, so one
    instance can serve concurrent tasks working on different entities.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = GraphQLTransport(
            url=self._settings.graphql_server_url,
            api_token=self._settings.api_token,
            http_client=http_client,
        )
        self.connectors = ConnectorsAPI(self._transport)
        self.remote_networks = RemoteNetworksAPI(self._transport)
        self.resources = ResourcesAPI(self._transport)
        self.groups = GroupsAPI(self._transport)
        self.users = UsersAPI(self._transport)
        self.service_accounts = ServiceAccountsAPI(self._transport)
        self.service_keys = ServiceKeysAPI(self._transport)
        self.security_policies = SecurityPoliciesAPI(self._transport)

    @property
    def graphql_server_url(self) -> str:
        return self._transport.url

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        await self._transport.aclose()

    async def __aenter__(self) -> "NetAccessClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
