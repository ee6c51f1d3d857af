"""Client configuration."""

import json
import os
import pathlib
from typing import Any

import pydantic

from .transport import DEFAULT_API_VERSION, DEFAULT_TIMEOUT, is_http_url

CONFIG_ENV_VAR = "AIVEN_CLIENT_CONFIG_PATH"

DEFAULT_BASE_URL = "https://api.aiven.io"


class ClientConfig(pydantic.BaseModel):
    """Connection settings for an AivenClient.

    The token may be given inline or through ``token_file``; an inline
    token wins when both are set.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    base_url: str = pydantic.Field(
        DEFAULT_BASE_URL,
        description="API root, without the version segment",
    )
    api_version: str = pydantic.Field(
        DEFAULT_API_VERSION,
        description="API version path segment",
    )
    token: str | None = pydantic.Field(
        None,
        description="API token sent as 'Authorization: aivenv1 <token>'",
    )
    token_file: str | None = pydantic.Field(
        None,
        description="Path to file containing the API token",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )

    @pydantic.field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not is_http_url(value):
            msg = f"base_url must be an absolute http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value.rstrip("/")

    @pydantic.field_validator("api_version")
    @classmethod
    def _strip_api_version(cls, value: str) -> str:
        version = value.replace("/", "")
        if not version:
            msg = "api_version cannot be empty"
            raise ValueError(msg)
        return version

    @pydantic.model_validator(mode="before")
    @classmethod
    def _read_token_file(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        token_file = data.get("token_file")
        if token_file and not data.get("token"):
            path = pathlib.Path(token_file)
            if not path.exists():
                msg = f"Token file not found: {token_file}"
                raise FileNotFoundError(msg)
            data = {**data, "token": path.read_text().strip()}
        return data


def load_config(config_path: str | None = None) -> ClientConfig:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the file. Defaults to the value of the
            AIVEN_CLIENT_CONFIG_PATH environment variable.

    Raises:
        ValueError: If no path is given and the variable is not set.
        FileNotFoundError: If the configuration or token file is missing.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not resolved_path:
        msg = f"No configuration path given and {CONFIG_ENV_VAR} is not set"
        raise ValueError(msg)

    path = pathlib.Path(resolved_path)
    if not path.exists():
        msg = f"Configuration file not found: {resolved_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)
