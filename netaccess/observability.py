"""Structured logging helpers for resource lifecycle events."""

from __future__ import annotations

import logging


def lifecycle_log_fields(
    *,
    component: str,
    operation: str,
    resource_type: str | None = None,
    resource_id: str | None = None,
    **details: object,
) -> dict[str, object]:
    fields: dict[str, object] = {
        "component": component,
        "operation": operation,
    }
    if resource_type is not None:
        fields["resourceType"] = resource_type
    if resource_id is not None:
        fields["resourceId"] = resource_id
    for key, value in details.items():
        if value is None:
            continue
        fields[key] = value
    return fields


def log_lifecycle_event(
    logger: logging.Logger,
    *,
    level: int,
    message: str,
    component: str,
    operation: str,
    resource_type: str | None = None,
    resource_id: str | None = None,
    **details: object,
) -> None:
    logger.log(
        level,
        message,
        extra=lifecycle_log_fields(
            component=component,
            operation=operation,
            resource_type=resource_type,
            resource_id=resource_id,
            **details,
        ),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
