"""Conversion of domain entities to and from host attribute values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from netaccess.schemas.identity import ServiceAccount, User
from netaccess.schemas.network import (
    Connector,
    Group,
    PortRange,
    ProtocolRule,
    Protocols,
    RemoteNetwork,
    Resource,
    SecurityPolicy,
)

EntityT = TypeVar("EntityT")


# ------------------------------------------------------------------
# Ports and protocols
# ------------------------------------------------------------------

def parse_port_range(value: str) -> PortRange:
    """Parse ``"80"`` or ``"100-200"``."""
    text = value.strip()
    start_text, separator, end_text = text.partition("-")
    if not separator:
        end_text = start_text
    if not start_text.isdigit() or not end_text.isdigit():
        raise ValueError(f"invalid port range {value!r}")
    return PortRange(start=int(start_text), end=int(end_text))


def protocol_rule_to_terraform(rule: ProtocolRule) -> dict[str, Any]:
    return {"policy": rule.policy, "ports": [str(port) for port in rule.ports]}


def protocol_rule_from_terraform(value: dict[str, Any] | None) -> ProtocolRule:
    if not value:
        return ProtocolRule()
    ports = [parse_port_range(str(port)) for port in value.get("ports") or []]
    return ProtocolRule(policy=value.get("policy") or "ALLOW_ALL", ports=ports)


def protocols_to_terraform(protocols: Protocols | None) -> dict[str, Any] | None:
    if protocols is None:
        return None
    return {
        "allow_icmp": protocols.allow_icmp,
        "tcp": protocol_rule_to_terraform(protocols.tcp),
        "udp": protocol_rule_to_terraform(protocols.udp),
    }


def protocols_from_terraform(value: dict[str, Any] | None) -> Protocols | None:
    if value is None:
        return None
    allow_icmp = value.get("allow_icmp")
    return Protocols(
        allow_icmp=True if allow_icmp is None else allow_icmp,
        tcp=protocol_rule_from_terraform(value.get("tcp")),
        udp=protocol_rule_from_terraform(value.get("udp")),
    )


# ------------------------------------------------------------------
# Entities
# ------------------------------------------------------------------

def connector_to_terraform(connector: Connector) -> dict[str, Any]:
    return {
        "id": connector.id,
        "name": connector.name,
        "remote_network_id": connector.remote_network_id,
        "status_updates_enabled": connector.status_updates_enabled,
    }


def remote_network_to_terraform(network: RemoteNetwork) -> dict[str, Any]:
    return {"id": network.id, "name": network.name, "location": network.location}


def group_to_terraform(group: Group) -> dict[str, Any]:
    return {"id": group.id, "name": group.name, "type": group.type, "is_active": group.is_active}


def resource_to_terraform(resource: Resource) -> dict[str, Any]:
    return {
        "id": resource.id,
        "name": resource.name,
        "address": resource.address,
        "remote_network_id": resource.remote_network_id,
        "protocols": protocols_to_terraform(resource.protocols),
    }


def user_to_terraform(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "role": user.role,
        "type": user.type,
        "is_active": user.is_active,
    }


def service_account_to_terraform(account: ServiceAccount) -> dict[str, Any]:
    return {
        "id": account.id,
        "name": account.name,
        "resource_ids": list(account.resource_ids),
        "key_ids": list(account.key_ids),
    }


def security_policy_to_terraform(policy: SecurityPolicy) -> dict[str, Any]:
    return {"id": policy.id, "name": policy.name}


def to_terraform_list(items: Iterable[EntityT], convert: Callable[[EntityT], dict[str, Any]]) -> list[dict[str, Any]]:
    return [convert(item) for item in items]
