"""Resources-by-name data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import resource_to_terraform, to_terraform_list
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema
from netaccess.provider.resources.resource import PORT_RULE


async def resources_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    name = data.get("name") or ""
    try:
        resources = await client.resources.read_by_name(name)
    except ClientError as exc:
        return from_error(exc)

    data.set("resources", to_terraform_list(resources, resource_to_terraform))
    data.set_id(f"query resources by name: {name}")
    return []


RESOURCES = DataSourceSchema(
    description="Resources represent servers on the private network that clients can connect to.",
    read=resources_read,
    attributes={
        "name": Attribute("string", "The name of the Resource", required=True),
        "resources": Attribute(
            "list",
            "List of Resources",
            computed=True,
            elem={
                "id": Attribute("string", "The id of the Resource", computed=True),
                "name": Attribute("string", "The name of the Resource", computed=True),
                "address": Attribute("string", "The Resource's IP/CIDR or FQDN/DNS zone", computed=True),
                "remote_network_id": Attribute("string", "Remote Network ID where the Resource lives", computed=True),
                "protocols": Attribute(
                    "map",
                    "Protocol and port restrictions of the Resource",
                    computed=True,
                    elem={
                        "allow_icmp": Attribute("bool", "Whether to allow ICMP (ping) traffic", computed=True),
                        "tcp": Attribute("map", "TCP port policy", computed=True, elem=PORT_RULE),
                        "udp": Attribute("map", "UDP port policy", computed=True, elem=PORT_RULE),
                    },
                ),
            },
        ),
    },
)
