"""Tests for ClientConfig and load_config."""

import json

import pydantic
import pytest

from aiven_client.config import CONFIG_ENV_VAR, ClientConfig, load_config

# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


def test_defaults():
    """An empty config points at the public API without a token."""
    config = ClientConfig()

    assert config.base_url == "https://api.aiven.io"
    assert config.api_version == "v1"
    assert config.token is None
    assert config.timeout == 30.0


def test_base_url_trailing_slash_stripped():
    """Trailing slashes are removed from the base URL."""
    assert ClientConfig(base_url="https://api.aiven.test/").base_url == (
        "https://api.aiven.test"
    )


@pytest.mark.parametrize("base_url", ["api.aiven.io", "ftp://api.aiven.io", ""])
def test_invalid_base_url_rejected(base_url):
    """Only absolute http(s) URLs are accepted."""
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(base_url=base_url)


def test_api_version_slashes_stripped():
    """Slashes around the version segment are dropped."""
    assert ClientConfig(api_version="/v2/").api_version == "v2"


def test_empty_api_version_rejected():
    """A version made only of slashes is rejected."""
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(api_version="/")


@pytest.mark.parametrize("timeout", [0, -1.5])
def test_non_positive_timeout_rejected(timeout):
    """Timeouts must be positive."""
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(timeout=timeout)


def test_config_is_frozen():
    """Settings cannot be changed after construction."""
    config = ClientConfig(token="abc")

    with pytest.raises(pydantic.ValidationError):
        config.token = "other"


# ---------------------------------------------------------------------------
# Token file
# ---------------------------------------------------------------------------


def test_token_read_from_file(tmp_path):
    """The token file is read and stripped when no token is given."""
    token_file = tmp_path / "token"
    token_file.write_text("secret-token\n")

    config = ClientConfig(token_file=str(token_file))

    assert config.token == "secret-token"


def test_inline_token_wins_over_file(tmp_path):
    """An inline token is kept and the file is not read."""
    config = ClientConfig(token="inline", token_file=str(tmp_path / "missing"))

    assert config.token == "inline"


def test_missing_token_file_raises(tmp_path):
    """A token file that does not exist is an error."""
    with pytest.raises(FileNotFoundError, match="Token file not found"):
        ClientConfig(token_file=str(tmp_path / "missing"))


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


def test_load_config_from_path(tmp_path):
    """Settings are read from a JSON file."""
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"base_url": "https://api.aiven.test", "token": "abc", "timeout": 5})
    )

    config = load_config(str(path))

    assert config.base_url == "https://api.aiven.test"
    assert config.token == "abc"
    assert config.timeout == 5.0


def test_load_config_from_env(tmp_path, monkeypatch):
    """The environment variable is used when no path is given."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"api_version": "v2"}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().api_version == "v2"


def test_load_config_without_path(monkeypatch):
    """Without a path or environment variable loading fails."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    with pytest.raises(ValueError, match=CONFIG_ENV_VAR):
        load_config()


def test_load_config_missing_file(tmp_path):
    """A configuration path that does not exist is an error."""
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        load_config(str(tmp_path / "nope.json"))


def test_load_config_with_token_file(tmp_path):
    """A token_file entry in the JSON file is resolved."""
    token_file = tmp_path / "token"
    token_file.write_text("from-file")
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"token_file": str(token_file)}))

    assert load_config(str(path)).token == "from-file"
