"""Identity-side entities: users, service accounts and service keys."""

from typing import Any, Literal  # noqa: I001

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, model_validator

from netaccess.schemas.graphql import edge_ids


UserRole = Literal["ADMIN", "DEVOPS", "SUPPORT", "MEMBER"]
UserType = Literal["MANUAL", "SYNCED"]
UserState = Literal["ACTIVE", "PENDING", "DISABLED"]
ServiceKeyStatus = Literal["ACTIVE", "REVOKED", "EXPIRED"]

USER_TYPE_MANUAL: UserType = "MANUAL"
DEFAULT_USER_ROLE: UserRole = "MEMBER"


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------

class User(BaseModel):
    """Account in the access control service."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="User identifier")
    email: str = Field(default="", description="Email address, immutable after creation")
    first_name: str = Field(default="", alias="firstName", description="First name")
    last_name: str = Field(default="", alias="lastName", description="Last name")
    send_invite: bool = Field(default=True, description="Send an invitation email on creation")
    role: UserRole = Field(default=DEFAULT_USER_ROLE, description="Admin console role")
    type: UserType | None = Field(default=None, description="How the user is provisioned, unknown until read")
    state: UserState = Field(default="ACTIVE", description="Account state")

    @property
    def is_active(self) -> bool:
        return self.state != "DISABLED"

    def to_create_variables(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role,
            "shouldSendInvite": self.send_invite,
        }


class UserUpdate(BaseModel):
    """Partial update of a user; unset fields keep their server-side value."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None

    def to_variables(self) -> dict[str, Any]:
        variables: dict[str, Any] = {"id": self.id}
        if self.first_name is not None:
            variables["firstName"] = self.first_name
        if self.last_name is not None:
            variables["lastName"] = self.last_name
        if self.role is not None:
            variables["role"] = self.role
        if self.is_active is not None:
            variables["state"] = "ACTIVE" if self.is_active else "DISABLED"
        return variables


# ------------------------------------------------------------------
# Service keys
# ------------------------------------------------------------------

class ServiceKey(BaseModel):
    """Key authorizing a service account; the token is only known at creation."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="Service key identifier")
    name: str = Field(default="", description="Service key name")
    service: str = Field(
        default="",
        validation_alias=AliasChoices(AliasPath("serviceAccount", "id"), "service"),
        description="Owning service account identifier",
    )
    token: str = Field(default="", description="Secret token, returned once by create")
    status: ServiceKeyStatus = Field(default="ACTIVE", description="Key status")
    expiration_time: int = Field(default=0, ge=0, description="Lifetime in days, 0 for no expiry")

    @property
    def is_active(self) -> bool:
        return self.status == "ACTIVE"


# ------------------------------------------------------------------
# Service accounts
# ------------------------------------------------------------------

class ServiceAccount(BaseModel):
    """Non-human identity owning service keys and granted resources."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Service account identifier")
    name: str = Field(default="", description="Service account name")
    resource_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("resources", "resource_ids"),
        description="Resources the account may access",
    )
    key_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("keys", "key_ids"),
        description="Keys issued for the account",
    )

    @model_validator(mode="before")
    @classmethod
    def _flatten_edges(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        for key in ("resources", "keys"):
            if isinstance(value.get(key), dict):
                value = {**value, key: edge_ids(value[key])}
        return value
