"""Shared building blocks for resource clients.

A resource client turns one API operation into a request: it validates
the scope parameters (project name, service name, ...), percent-encodes
them into the path template and hands the request to the shared
:class:`~aiven_client.transport.ApiTransport`.

Collections that follow the usual list/get/create/update/delete layout
compose the CRUD mixins below and only declare their path templates and
response models as class attributes.
"""

import string
from typing import Any, Generic, TypeVar

from ..errors import ValidationError
from ..transport import ApiTransport, encode_param

ListT = TypeVar("ListT")
ItemT = TypeVar("ItemT")
CreatedT = TypeVar("CreatedT")
UpdatedT = TypeVar("UpdatedT")

SERVICE_PATH = "project/{project}/service/{service_name}"

_formatter = string.Formatter()


def template_fields(template: str) -> list[str]:
    """Return the placeholder names of a path template, in order."""
    return [name for _, name, _, _ in _formatter.parse(template) if name]


class ResourceClient:
    """Base class for all resource clients.

    Holds a reference to the shared transport and nothing else, so
    instances are cheap to create and safe to share between tasks.
    """

    def __init__(self, transport: ApiTransport):
        self._transport = transport

    def path(self, template: str, **scope: Any) -> str:
        """Fill a path template with validated, percent-encoded values.

        Args:
            template: Path template such as "project/{project}/vpcs".
            **scope: Values for every placeholder of the template.

        Returns:
            The relative request path.

        Raises:
            ValidationError: If a placeholder value is missing or empty.
            TypeError: If a value is given for an unknown placeholder.
        """
        fields = template_fields(template)
        unknown = set(scope) - set(fields)
        if unknown:
            msg = f"Unexpected path parameters: {', '.join(sorted(unknown))}"
            raise TypeError(msg)

        encoded = {}
        for name in fields:
            value = scope.get(name)
            if value is None:
                raise ValidationError(name, "is required")
            value = str(value)
            if not value.strip():
                raise ValidationError(name, "must not be empty")
            encoded[name] = encode_param(value)
        return template.format(**encoded)

    async def _get(
        self,
        path: str,
        response_type: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._transport.send(
            "GET", path, params=params, response_type=response_type
        )

    async def _post(
        self,
        path: str,
        body: Any = None,
        response_type: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._transport.send(
            "POST", path, params=params, body=body, response_type=response_type
        )

    async def _put(
        self,
        path: str,
        body: Any = None,
        response_type: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._transport.send(
            "PUT", path, params=params, body=body, response_type=response_type
        )

    async def _delete(self, path: str, response_type: Any = None) -> Any:
        return await self._transport.send("DELETE", path, response_type=response_type)


class ListMixin(ResourceClient, Generic[ListT]):
    """GET on the collection path."""

    collection_path: str
    list_model: type[ListT]

    async def list_all(self, **scope: str) -> ListT:
        """List the collection identified by the scope parameters."""
        return await self._get(
            self.path(self.collection_path, **scope), self.list_model
        )


class GetMixin(ResourceClient, Generic[ItemT]):
    """GET on the item path."""

    item_path: str
    item_model: type[ItemT]

    async def get(self, **scope: str) -> ItemT:
        """Fetch a single item identified by the scope parameters."""
        return await self._get(self.path(self.item_path, **scope), self.item_model)


class CreateMixin(ResourceClient, Generic[CreatedT]):
    """POST on the collection path.

    Not idempotent: repeating the call creates another resource.
    """

    collection_path: str
    create_model: type[CreatedT] | None

    async def create(self, payload: Any, **scope: str) -> CreatedT:
        """Create an item from ``payload`` inside the given scope."""
        return await self._post(
            self.path(self.collection_path, **scope), payload, self.create_model
        )


class UpdateMixin(ResourceClient, Generic[UpdatedT]):
    """PUT on the item path."""

    item_path: str
    update_model: type[UpdatedT] | None

    async def update(self, payload: Any, **scope: str) -> UpdatedT:
        """Update the item identified by the scope parameters."""
        return await self._put(
            self.path(self.item_path, **scope), payload, self.update_model
        )


class DeleteMixin(ResourceClient):
    """DELETE on the item path; success is decided by status code alone."""

    item_path: str

    async def delete(self, **scope: str) -> None:
        """Delete the item identified by the scope parameters."""
        await self._delete(self.path(self.item_path, **scope))
