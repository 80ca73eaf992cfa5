"""Pydantic schemas."""

from netaccess.schemas.graphql import Connection, Edge, Envelope, StatusEnvelope
from netaccess.schemas.identity import (
    ServiceAccount,
    ServiceKey,
    ServiceKeyStatus,
    User,
    UserRole,
    UserState,
    UserType,
    UserUpdate,
)
from netaccess.schemas.network import (
    Connector,
    Group,
    Location,
    Policy,
    PortRange,
    ProtocolRule,
    Protocols,
    RemoteNetwork,
    Resource,
    SecurityPolicy,
)

__all__ = [
    "Connection",
    "Connector",
    "Edge",
    "Envelope",
    "Group",
    "Location",
    "Policy",
    "PortRange",
    "ProtocolRule",
    "Protocols",
    "RemoteNetwork",
    "Resource",
    "SecurityPolicy",
    "ServiceAccount",
    "ServiceKey",
    "ServiceKeyStatus",
    "StatusEnvelope",
    "User",
    "UserRole",
    "UserState",
    "UserType",
    "UserUpdate",
]
