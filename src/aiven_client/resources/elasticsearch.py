"""Elasticsearch indexes and ACL configuration."""

from typing import Any

from ..types.elasticsearch import AclConfigResponse, IndexList
from .base import SERVICE_PATH, ResourceClient

ACL_PATH = SERVICE_PATH + "/elasticsearch/acl"


class ElasticsearchApi(ResourceClient):
    async def list_indexes(self, project: str, service_name: str) -> IndexList:
        """List the indexes of an Elasticsearch service."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/index", project=project, service_name=service_name
            ),
            IndexList,
        )

    async def delete_index(
        self, project: str, service_name: str, index_name: str
    ) -> None:
        """Delete an index and all documents in it."""
        await self._delete(
            self.path(
                SERVICE_PATH + "/index/{index_name}",
                project=project,
                service_name=service_name,
                index_name=index_name,
            )
        )

    async def get_acl_config(
        self, project: str, service_name: str
    ) -> AclConfigResponse:
        """Get the ACL configuration of an Elasticsearch service."""
        return await self._get(
            self.path(ACL_PATH, project=project, service_name=service_name),
            AclConfigResponse,
        )

    async def set_acl_config(
        self, project: str, service_name: str, payload: Any
    ) -> AclConfigResponse:
        """Replace the whole ACL configuration.

        Args:
            payload: An AclConfigPayload; rules not included are dropped.
        """
        return await self._post(
            self.path(ACL_PATH, project=project, service_name=service_name),
            payload,
            AclConfigResponse,
        )

    async def update_acl_config(
        self, project: str, service_name: str, payload: Any
    ) -> AclConfigResponse:
        """Merge the given ACL rules into the current configuration."""
        return await self._put(
            self.path(ACL_PATH, project=project, service_name=service_name),
            payload,
            AclConfigResponse,
        )
