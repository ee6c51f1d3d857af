"""Aiven API client.

Asynchronous, typed client for the Aiven cloud REST API built on httpx and
pydantic.

Exports:
    AivenClient: Root client with one factory method per resource family.
    ClientConfig: Connection settings, loadable from JSON via load_config.
    AivenError: Base class of every error raised by an API call.
"""

__version__ = "0.1.0"

from . import types
from .client import AivenClient
from .config import ClientConfig, load_config
from .errors import (
    AivenError,
    DeserializationError,
    RemoteError,
    TransportError,
    ValidationError,
)
from .log import configure_logging

__all__ = [
    "AivenClient",
    "AivenError",
    "ClientConfig",
    "DeserializationError",
    "RemoteError",
    "TransportError",
    "ValidationError",
    "__version__",
    "configure_logging",
    "load_config",
    "types",
]
