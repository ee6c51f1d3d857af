"""Project key management models."""

from .base import ApiModel


class Certificate(ApiModel):
    """PEM encoded CA certificate of a project."""

    certificate: str | None = None
