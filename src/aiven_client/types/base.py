"""Base classes for Aiven API data models.

Response models accept and keep fields they do not declare, so new fields
added by the API never break deserialization and a parsed object dumps
back to the JSON it came from. Request payloads only serialize the fields
the caller actually set.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Response data returned by the Aiven API.

    Every declared field is optional on the subclasses; the API omits
    fields freely depending on service type and account features.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump the fields received from the API, using their wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ApiPayload(BaseModel):
    """Request body sent to the Aiven API.

    Build a payload with keyword arguments for the fields you want to send.
    Fields left out are omitted from the JSON body so the API applies its
    own defaults; a field explicitly set to ``None`` is sent as ``null``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        """Serialize the explicitly set fields into a JSON-ready dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Message(ApiModel):
    """Plain acknowledgement returned by many write endpoints."""

    message: str | None = None
