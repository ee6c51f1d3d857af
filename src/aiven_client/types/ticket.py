"""Support ticket models."""

from typing import Any

from .base import ApiModel, ApiPayload


class Ticket(ApiModel):
    create_time: str | None = None
    deeplink: str | None = None
    description: str | None = None
    followers: list[dict[str, Any]] | None = None
    project_name: str | None = None
    service_name: str | None = None
    severity: str | None = None
    state: str | None = None
    submitter: dict[str, Any] | None = None
    ticket_id: str | None = None
    title: str | None = None
    update_time: str | None = None


class TicketResponse(ApiModel):
    ticket: Ticket | None = None


class TicketList(ApiModel):
    tickets: list[Ticket] = []


class CreateTicketPayload(ApiPayload):
    description: str | None = None
    service_name: str | None = None
    severity: str | None = None
    title: str | None = None
