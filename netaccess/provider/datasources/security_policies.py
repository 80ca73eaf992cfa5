"""Security policies data source."""

from __future__ import annotations

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError
from netaccess.provider.converters import security_policy_to_terraform, to_terraform_list
from netaccess.provider.diagnostics import Diagnostics, from_error
from netaccess.provider.resource_data import ResourceData
from netaccess.provider.schema import Attribute, DataSourceSchema


async def security_policies_read(client: NetAccessClient, data: ResourceData) -> Diagnostics:
    try:
        policies = await client.security_policies.list()
    except ClientError as exc:
        return from_error(exc)

    data.set("security_policies", to_terraform_list(policies, security_policy_to_terraform))
    data.set_id("all-security-policies")
    return []


SECURITY_POLICIES = DataSourceSchema(
    description="Security Policies are defined in the Admin Console and applied to Resources.",
    read=security_policies_read,
    attributes={
        "security_policies": Attribute(
            "list",
            "List of Security Policies",
            computed=True,
            elem={
                "id": Attribute("string", "The ID of the Security Policy", computed=True),
                "name": Attribute("string", "The name of the Security Policy", computed=True),
            },
        ),
    },
)
