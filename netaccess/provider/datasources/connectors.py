"""Connectors data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import connector_to_terraform, to_terraform_list
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema


async def connectors_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        connectors = await client.connectors.list()
    except ClientError as exc:
        return from_error(exc)

    data.set("connectors", to_terraform_list(connectors, connector_to_terraform))
    data.set_id("all-connectors")
    return []


CONNECTORS = DataSourceSchema(
    description="Connectors provide connectivity to Remote Networks.",
    read=connectors_read,
    attributes={
        "connectors": Attribute(
            "list",
            "List of Connectors",
            computed=True,
            elem={
                "id": Attribute("string", "The ID of the Connector", computed=True),
                "name": Attribute("string", "The Name of the Connector", computed=True),
                "remote_network_id": Attribute(
                    "string", "The ID of the Remote Network attached to the Connector", computed=True
                ),
                "status_updates_enabled": Attribute(
                    "bool", "Determines whether status notifications are enabled for the Connector", computed=True
                ),
            },
        ),
    },
)
