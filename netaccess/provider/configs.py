"""Typed per-resource configuration read from host state.

Each config is populated field by field from ``ResourceData`` and validated
here, so lifecycle code never handles loosely typed attribute values.
Emptiness of identifiers is left to the client, which reports it with
operation-specific messages.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaValidationError

from netaccess.client.errors import ValidationError
from netaccess.provider.converters import protocols_from_terraform
from netaccess.provider.resource_data import ResourceData
from netaccess.schemas.identity import DEFAULT_USER_ROLE, ServiceKey, User, UserRole, UserType, UserUpdate
from netaccess.schemas.network import Location, Protocols, Resource

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def _validated(model: type[ConfigT], label: str, values: dict[str, Any]) -> ConfigT:
    present = {key: value for key, value in values.items() if value is not None}
    try:
        return model.model_validate(present)
    except SchemaValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"invalid {label} configuration: {location}: {first['msg']}") from exc


class ConnectorConfig(BaseModel):
    model_config = ConfigDict(strict=True)

    remote_network_id: str = ""
    name: str = ""

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "ConnectorConfig":
        return _validated(
            cls,
            "connector",
            {
                "remote_network_id": data.get("remote_network_id"),
                "name": data.get("name"),
            },
        )


class RemoteNetworkConfig(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = ""
    location: Location = "OTHER"

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "RemoteNetworkConfig":
        return _validated(
            cls,
            "remote network",
            {
                "name": data.get("name"),
                "location": data.get("location"),
            },
        )


class GroupConfig(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = ""

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "GroupConfig":
        return _validated(cls, "group", {"name": data.get("name")})


class NetworkResourceConfig(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = ""
    address: str = ""
    remote_network_id: str = ""
    group_ids: list[str] = Field(default_factory=list)
    protocols: Protocols | None = None

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "NetworkResourceConfig":
        try:
            protocols = protocols_from_terraform(data.get("protocols"))
        except ValueError as exc:
            raise ValidationError(f"invalid resource configuration: protocols: {exc}") from exc
        return _validated(
            cls,
            "resource",
            {
                "name": data.get("name"),
                "address": data.get("address"),
                "remote_network_id": data.get("remote_network_id"),
                "group_ids": data.get("group_ids"),
                "protocols": protocols,
            },
        )

    def to_resource(self, resource_id: str = "") -> Resource:
        return Resource(
            id=resource_id,
            name=self.name,
            address=self.address,
            remote_network_id=self.remote_network_id,
            group_ids=list(self.group_ids),
            protocols=self.protocols,
        )


class ServiceKeyConfig(BaseModel):
    model_config = ConfigDict(strict=True)

    service_account_id: str = ""
    name: str = ""
    expiration_time: int = Field(default=0, ge=0, le=365)

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "ServiceKeyConfig":
        return _validated(
            cls,
            "service key",
            {
                "service_account_id": data.get("service_account_id"),
                "name": data.get("name"),
                "expiration_time": data.get("expiration_time"),
            },
        )

    def to_service_key(self, key_id: str = "") -> ServiceKey:
        return ServiceKey(
            id=key_id,
            service=self.service_account_id,
            name=self.name,
            expiration_time=self.expiration_time,
        )


class UserConfig(BaseModel):
    model_config = ConfigDict(strict=True)

    email: str = ""
    first_name: str = ""
    last_name: str = ""
    send_invite: bool = True
    is_active: bool = True
    role: UserRole = DEFAULT_USER_ROLE
    type: UserType | None = None

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "UserConfig":
        return _validated(
            cls,
            "user",
            {
                "email": data.get("email"),
                "first_name": data.get("first_name"),
                "last_name": data.get("last_name"),
                "send_invite": data.get("send_invite"),
                "is_active": data.get("is_active"),
                # an empty role means "not configured"
                "role": data.get("role") or None,
                "type": data.get("type") or None,
            },
        )

    def to_user(self, user_id: str = "") -> User:
        values: dict[str, Any] = {
            "id": user_id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "send_invite": self.send_invite,
            "role": self.role,
            "state": "ACTIVE" if self.is_active else "DISABLED",
        }
        if self.type is not None:
            values["type"] = self.type
        return User(**values)


def user_update_from_resource_data(data: ResourceData) -> UserUpdate:
    """Only attributes the host reports as changed end up in the update."""
    config = UserConfig.from_resource_data(data)
    update = UserUpdate(id=data.id)
    if data.has_change("first_name"):
        update.first_name = config.first_name
    if data.has_change("last_name"):
        update.last_name = config.last_name
    if data.has_change("role"):
        update.role = config.role
    if data.has_change("is_active"):
        update.is_active = config.is_active
    return update
