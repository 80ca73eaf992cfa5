"""Single-request GraphQL transport over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from netaccess import __version__
from netaccess.client.errors import TransportError

logger = logging.getLogger(__name__)


class GraphQLTransport:
    """POSTs one GraphQL document per call and returns the raw response body.

    HTTP status codes are not inspected: GraphQL reports failures inside the
    body, which is left to the decoder.
    """

    def __init__(
        self,
        *,
        url: str,
        api_token: str,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._headers = {
            "X-API-KEY": api_token,
            "User-Agent": f"netaccess-provider/{__version__}",
        }
        self._client = http_client or httpx.AsyncClient()
        self._owns_client = http_client is None

    @property
    def url(self) -> str:
        return self._url

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> bytes:
        payload = {"query": query, "variables": variables or {}}
        try:
            response = await self._client.post(self._url, json=payload, headers=self._headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f'Post "{self._url}": {exc}') from exc

        logger.debug("GraphQL response %s (%d bytes)", response.status_code, len(response.content))
        return response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
