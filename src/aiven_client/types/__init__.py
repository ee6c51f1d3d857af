"""Pydantic models for Aiven API request and response bodies.

One module per resource family. Response models derive from
:class:`~aiven_client.types.base.ApiModel`, request bodies from
:class:`~aiven_client.types.base.ApiPayload`.
"""

from . import (
    account,
    billing,
    billing_group,
    cloud,
    elasticsearch,
    integrations,
    kafka,
    key_management,
    mysql,
    payment,
    postgres,
    project,
    service,
    ticket,
    user,
)
from .base import ApiModel, ApiPayload, Message

__all__ = [
    "ApiModel",
    "ApiPayload",
    "Message",
    "account",
    "billing",
    "billing_group",
    "cloud",
    "elasticsearch",
    "integrations",
    "kafka",
    "key_management",
    "mysql",
    "payment",
    "postgres",
    "project",
    "service",
    "ticket",
    "user",
]
