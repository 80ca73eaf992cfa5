"""Network-side entities: connectors, remote networks, resources, groups, security policies."""

from typing import Any, Literal  # noqa: I001

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, model_validator

from netaccess.schemas.graphql import edge_ids


Policy = Literal["RESTRICTED", "ALLOW_ALL", "DENY_ALL"]
Location = Literal["AWS", "AZURE", "GOOGLE_CLOUD", "ON_PREMISE", "OTHER"]
GroupType = Literal["MANUAL", "SYNCED", "SYSTEM"]

MIN_PORT = 1
MAX_PORT = 65535


# ------------------------------------------------------------------
# Connectors
# ------------------------------------------------------------------

class Connector(BaseModel):
    """Connector providing connectivity to a remote network."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Connector identifier")
    name: str = Field(default="", description="Server-assigned connector name")
    remote_network_id: str = Field(
        default="",
        validation_alias=AliasChoices(AliasPath("remoteNetwork", "id"), "remote_network_id"),
        description="Remote network the connector belongs to",
    )
    status_updates_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices("hasStatusNotificationsEnabled", "status_updates_enabled"),
        description="Whether status notifications are enabled",
    )


# ------------------------------------------------------------------
# Remote networks
# ------------------------------------------------------------------

class RemoteNetwork(BaseModel):
    """Logical container grouping resources together."""

    id: str = Field(default="", description="Remote network identifier")
    name: str = Field(..., description="Remote network name")
    location: Location = Field(default="OTHER", description="Where the network is hosted")


# ------------------------------------------------------------------
# Resources
# ------------------------------------------------------------------

class PortRange(BaseModel):
    """Inclusive port range; a single port has ``start == end``."""

    start: int = Field(..., ge=MIN_PORT, le=MAX_PORT)
    end: int = Field(..., ge=MIN_PORT, le=MAX_PORT)

    @model_validator(mode="after")
    def _ordered(self) -> "PortRange":
        if self.start > self.end:
            raise ValueError(f"port range start {self.start} is greater than end {self.end}")
        return self

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


class ProtocolRule(BaseModel):
    """Port policy for one transport protocol."""

    policy: Policy = Field(default="ALLOW_ALL", description="Port policy")
    ports: list[PortRange] = Field(default_factory=list, description="Allowed ranges when RESTRICTED")

    @model_validator(mode="after")
    def _ports_match_policy(self) -> "ProtocolRule":
        if self.policy != "RESTRICTED" and self.ports:
            raise ValueError(f"ports can only be listed with the RESTRICTED policy, got {self.policy}")
        return self


class Protocols(BaseModel):
    """Protocol restrictions applied to a resource."""

    model_config = ConfigDict(populate_by_name=True)

    allow_icmp: bool = Field(default=True, alias="allowIcmp", description="Whether ICMP is allowed")
    tcp: ProtocolRule = Field(default_factory=ProtocolRule)
    udp: ProtocolRule = Field(default_factory=ProtocolRule)


class Resource(BaseModel):
    """Private-network destination reachable through connectors."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="Resource identifier")
    name: str = Field(..., description="Resource name")
    address: str = Field(
        default="",
        validation_alias=AliasChoices(AliasPath("address", "value"), "address"),
        description="IP, CIDR, FQDN or DNS zone",
    )
    remote_network_id: str = Field(
        default="",
        validation_alias=AliasChoices(AliasPath("remoteNetwork", "id"), "remote_network_id"),
        description="Remote network where the resource lives",
    )
    group_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("groups", "group_ids"),
        description="Groups granted access to the resource",
    )
    protocols: Protocols | None = Field(default=None, description="Protocol restrictions")

    @model_validator(mode="before")
    @classmethod
    def _flatten_groups(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        if isinstance(value.get("groups"), dict):
            value = {**value, "groups": edge_ids(value["groups"])}
        return value

    def to_variables(self) -> dict[str, Any]:
        variables: dict[str, Any] = {
            "name": self.name,
            "address": self.address,
            "remoteNetworkId": self.remote_network_id,
            "groupIds": self.group_ids,
        }
        if self.id:
            variables["id"] = self.id
        if self.protocols is not None:
            variables["protocols"] = self.protocols.model_dump(by_alias=True, mode="json")
        return variables


# ------------------------------------------------------------------
# Groups
# ------------------------------------------------------------------

class Group(BaseModel):
    """Set of users granted access to resources."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="Group identifier")
    name: str = Field(..., description="Group name")
    type: GroupType = Field(default="MANUAL", description="How the group is managed")
    is_active: bool = Field(default=True, alias="isActive", description="Whether the group is active")


# ------------------------------------------------------------------
# Security policies
# ------------------------------------------------------------------

class SecurityPolicy(BaseModel):
    """Authentication requirements applied to resources; read-only."""

    id: str = Field(..., description="Security policy identifier")
    name: str = Field(default="", description="Security policy name")
