"""Attribute schema and lifecycle callback declarations."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from netaccess.provider.diagnostics import Diagnostics
from netaccess.provider.resource_data import ResourceData

if TYPE_CHECKING:
    from netaccess.client.client import NetAccessClient

AttributeType = Literal["string", "bool", "int", "list", "map"]
LifecycleCallback = Callable[["NetAccessClient", ResourceData], Awaitable[Diagnostics]]


@dataclass(frozen=True)
class Attribute:
    type: AttributeType
    description: str
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    allowed: tuple[str, ...] = ()
    elem: dict[str, "Attribute"] | None = None


@dataclass(frozen=True)
class ResourceSchema:
    """Managed resource: attribute schema plus CRUD callbacks."""

    description: str
    attributes: dict[str, Attribute]
    create: LifecycleCallback
    read: LifecycleCallback
    delete: LifecycleCallback
    update: LifecycleCallback | None = None
    importable: bool = True

    def force_new_attributes(self) -> list[str]:
        return [name for name, attribute in self.attributes.items() if attribute.force_new]


@dataclass(frozen=True)
class DataSourceSchema:
    """Read-only view over remote entities."""

    description: str
    read: LifecycleCallback
    attributes: dict[str, Attribute] = field(default_factory=dict)
