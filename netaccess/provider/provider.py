"""Provider registry: resource types, data sources and client configuration."""

from __future__ import annotations

import logging

import httpx

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ValidationError
from netaccess.config import Settings, get_settings
from netaccess.provider import datasources, resources
from netaccess.provider.diagnostics import Diagnostics
from netaccess.provider.resource_data import InMemoryResourceData
from netaccess.provider.schema import DataSourceSchema, ResourceSchema

logger = logging.getLogger(__name__)

RESOURCES: dict[str, ResourceSchema] = {
    "netaccess_connector": resources.CONNECTOR,
    "netaccess_group": resources.GROUP,
    "netaccess_remote_network": resources.REMOTE_NETWORK,
    "netaccess_resource": resources.RESOURCE,
    "netaccess_service_account_key": resources.SERVICE_KEY,
    "netaccess_user": resources.USER,
}

DATA_SOURCES: dict[str, DataSourceSchema] = {
    "netaccess_connectors": datasources.CONNECTORS,
    "netaccess_groups": datasources.GROUPS,
    "netaccess_remote_networks": datasources.REMOTE_NETWORKS,
    "netaccess_resources": datasources.RESOURCES,
    "netaccess_security_policies": datasources.SECURITY_POLICIES,
    "netaccess_services": datasources.SERVICES,
    "netaccess_users": datasources.USERS,
}


def configure(
    settings: Settings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> NetAccessClient:
    """Build the client handed to every lifecycle callback."""
    settings = settings or get_settings()
    if not settings.api_token:
        raise ValidationError("failed to configure provider: api token is empty")
    if not settings.endpoint and not settings.network:
        raise ValidationError("failed to configure provider: network is empty")

    logger.debug("Configured provider for %s", settings.graphql_server_url)
    return NetAccessClient(settings, http_client=http_client)


def resource_schema(type_name: str) -> ResourceSchema:
    try:
        return RESOURCES[type_name]
    except KeyError:
        raise ValidationError(f"unknown resource type {type_name}") from None


async def import_resource(
    client: NetAccessClient,
    type_name: str,
    resource_id: str,
) -> tuple[InMemoryResourceData, Diagnostics]:
    """Adopt an existing entity by id: passthrough import followed by a read."""
    schema = resource_schema(type_name)
    if not schema.importable:
        raise ValidationError(f"resource type {type_name} does not support import")
    data = InMemoryResourceData(resource_id=resource_id)
    diagnostics = await schema.read(client, data)
    return data, diagnostics
