"""Low-level HTTP transport for the Aiven REST API.

Owns the ``httpx.AsyncClient``, the versioned base URL and the default
headers, and turns HTTP responses into response models or typed errors.
Resource clients never talk to ``httpx`` directly.
"""

import time
from functools import lru_cache
from typing import Any
from urllib.parse import quote

import httpx
import pydantic
import structlog

from . import __version__
from .errors import DeserializationError, RemoteError, TransportError
from .types.base import ApiPayload

logger = structlog.get_logger(__name__)

DEFAULT_API_VERSION = "v1"

DEFAULT_TIMEOUT = 30.0

AUTH_SCHEME = "aivenv1"

# Length of the body excerpt kept on DeserializationError.
RAW_SNIPPET_LENGTH = 200


def is_http_url(value: str) -> bool:
    """Return True for absolute http or https URLs with a host."""
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL:
        return False
    return url.scheme in ("http", "https") and bool(url.host)


def encode_param(value: str) -> str:
    """Percent-encode a single path segment.

    Every character outside the unreserved set is escaped, including
    ``/``, ``?``, ``#`` and spaces, so the server sees the literal value
    as exactly one path segment. The values ``.`` and ``..`` are escaped
    as well so they are not resolved as relative segments.
    """
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe="")


@lru_cache(maxsize=256)
def _adapter(response_type: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(response_type)


class ApiError(pydantic.BaseModel):
    """Single entry of the error envelope returned with non-2xx responses."""

    message: str | None = None
    status: int | None = None
    more_info: str | None = None


class ApiErrorEnvelope(pydantic.BaseModel):
    """Error body shape: ``{"errors": [...], "message": "..."}``."""

    errors: list[ApiError] = []
    message: str | None = None


def _serialize_body(body: Any) -> Any:
    if isinstance(body, ApiPayload):
        return body.to_body()
    if isinstance(body, pydantic.BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return body


class ApiTransport:
    """HTTP transport shared by all resource clients of one AivenClient.

    Each call is a single attempt: there are no retries, no rate limiting
    and no state kept between calls other than the connection pool of the
    lazily created ``httpx.AsyncClient``. One transport may be used by many
    concurrent tasks.
    """

    def __init__(
        self,
        base_url: str,
        api_version: str = DEFAULT_API_VERSION,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            base_url: API root (e.g., "https://api.aiven.io").
            api_version: Version path segment (default: v1).
            token: Optional API token sent with every request.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional httpx transport, mostly for tests.

        Raises:
            ValueError: If base_url is not an absolute http(s) URL or timeout
                is not positive.
        """
        if not is_http_url(base_url):
            msg = f"base_url must be an absolute http(s) URL, got {base_url!r}"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        version = api_version.replace("/", "")
        if not version:
            msg = "api_version cannot be empty"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.api_version = version
        self._timeout = timeout
        self._transport = transport

        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"aiven-client-async/{__version__}",
        }
        if token:
            self._headers["Authorization"] = f"{AUTH_SCHEME} {token}"

        self._client: httpx.AsyncClient | None = None

    @property
    def api_url(self) -> str:
        """Versioned root that request paths are joined to."""
        return f"{self.base_url}/{self.api_version}/"

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client.

        The client is created lazily and recreated if it has been closed.

        Returns:
            The shared httpx.AsyncClient instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and release the connection pool."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx client if open."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def _execute(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
        body: Any,
    ) -> httpx.Response:
        """Perform one HTTP exchange and check the status code.

        Returns:
            The successful httpx response.

        Raises:
            TransportError: If the request fails below the HTTP layer.
            RemoteError: If the API answers with a non-2xx status.
        """
        start_time = time.time()
        endpoint = path.lstrip("/")
        params = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug(
            "Making API request",
            method=method,
            endpoint=endpoint,
            params=params,
        )
        try:
            if body is None:
                response = await self.client.request(method, endpoint, params=params)
            else:
                response = await self.client.request(
                    method,
                    endpoint,
                    params=params,
                    json=_serialize_body(body),
                )
        except httpx.RequestError as exc:
            duration = time.time() - start_time
            logger.warning(
                "API request failed",
                method=method,
                endpoint=endpoint,
                error=repr(exc),
                duration_seconds=round(duration, 3),
            )
            raise TransportError(exc) from exc

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        if not response.is_success:
            raise self._remote_error(response)
        return response

    def _remote_error(self, response: httpx.Response) -> RemoteError:
        """Build a RemoteError from an error response.

        The body is parsed as the API error envelope. If that fails, or the
        envelope carries no message, the raw text is kept verbatim as the
        only message.
        """
        text = response.text
        try:
            envelope = ApiErrorEnvelope.model_validate_json(text)
        except pydantic.ValidationError:
            messages = [text] if text else []
            errors: list[ApiError] = []
        else:
            errors = envelope.errors
            messages = [error.message for error in errors if error.message]
            if not messages and envelope.message:
                messages = [envelope.message]
            if not messages and text:
                messages = [text]

        logger.warning(
            "API error response",
            status_code=response.status_code,
            url=str(response.request.url),
            error_messages=messages,
        )
        return RemoteError(response.status_code, messages, errors)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        response_type: Any = None,
    ) -> Any:
        """Send a request and deserialize the JSON response.

        Args:
            method: HTTP verb (GET, POST, PUT or DELETE).
            path: Path relative to the versioned base URL, with any user
                supplied segments already encoded via :func:`encode_param`.
            params: Optional query parameters; ``None`` values are dropped.
            body: Optional request body (ApiPayload, pydantic model or any
                JSON-serializable value).
            response_type: Type to validate the response body into. When
                ``None`` the body is ignored and ``None`` is returned.

        Returns:
            The validated response, or None when no response_type is given.

        Raises:
            TransportError: If the request fails below the HTTP layer.
            RemoteError: If the API answers with a non-2xx status.
            DeserializationError: If the body does not match response_type.
        """
        response = await self._execute(method, path, params, body)
        if response_type is None:
            return None

        content = response.content
        try:
            return _adapter(response_type).validate_json(content)
        except pydantic.ValidationError as exc:
            snippet = response.text[:RAW_SNIPPET_LENGTH]
            logger.warning(
                "Failed to deserialize API response",
                endpoint=path,
                response_type=getattr(response_type, "__name__", str(response_type)),
            )
            raise DeserializationError(snippet, exc) from exc

    async def send_bytes(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> bytes:
        """Send a request and return the raw response body.

        Used for binary downloads such as invoice PDFs.

        Raises:
            TransportError: If the request fails below the HTTP layer.
            RemoteError: If the API answers with a non-2xx status.
        """
        response = await self._execute(method, path, params, None)
        return response.content
