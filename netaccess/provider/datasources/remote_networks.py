"""Remote networks data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import remote_network_to_terraform, to_terraform_list
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema


async def remote_networks_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        networks = await client.remote_networks.list()
    except ClientError as exc:
        return from_error(exc)

    data.set("remote_networks", to_terraform_list(networks, remote_network_to_terraform))
    data.set_id("all-remote-networks")
    return []


REMOTE_NETWORKS = DataSourceSchema(
    description="Remote Networks are the logical containers that group Resources together.",
    read=remote_networks_read,
    attributes={
        "remote_networks": Attribute(
            "list",
            "List of Remote Networks",
            computed=True,
            elem={
                "id": Attribute("string", "The ID of the Remote Network", computed=True),
                "name": Attribute("string", "The name of the Remote Network", computed=True),
                "location": Attribute("string", "The location of the Remote Network", computed=True),
            },
        ),
    },
)
