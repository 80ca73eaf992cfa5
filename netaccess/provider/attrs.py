"""Attribute names exposed to the host framework."""

from typing import Literal, get_args

AttributeName = Literal[
    "id",
    "name",
    # connectors / remote networks
    "remote_network_id",
    "status_updates_enabled",
    "location",
    # resources
    "address",
    "group_ids",
    "protocols",
    "allow_icmp",
    "tcp",
    "udp",
    "policy",
    "ports",
    # groups / users
    "type",
    "is_active",
    "email",
    "first_name",
    "last_name",
    "send_invite",
    "role",
    # service keys
    "service_account_id",
    "token",
    "expiration_time",
    # data sources
    "connectors",
    "groups",
    "remote_networks",
    "resources",
    "users",
    "services",
    "security_policies",
    "resource_ids",
    "key_ids",
]

ATTRIBUTE_NAMES: frozenset[str] = frozenset(get_args(AttributeName))


def doc_list(values: tuple[str, ...]) -> str:
    """Render ``("A", "B", "C")`` as ``A, B or C`` for attribute descriptions."""
    quoted = [f"`{value}`" for value in values]
    if len(quoted) <= 1:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"
