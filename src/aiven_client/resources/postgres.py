"""PostgreSQL connection pools and query statistics."""

from typing import Any

from ..types.postgres import PostgresQueryStatsList
from .base import SERVICE_PATH, ResourceClient

POOL_PATH = SERVICE_PATH + "/connection_pool"


class PostgresApi(ResourceClient):
    async def create_pool(self, project: str, service_name: str, payload: Any) -> None:
        """Create a PgBouncer connection pool."""
        await self._post(
            self.path(POOL_PATH, project=project, service_name=service_name), payload
        )

    async def update_pool(
        self, project: str, service_name: str, pool_name: str, payload: Any
    ) -> None:
        """Change the settings of a connection pool."""
        await self._put(
            self.path(
                POOL_PATH + "/{pool_name}",
                project=project,
                service_name=service_name,
                pool_name=pool_name,
            ),
            payload,
        )

    async def delete_pool(
        self, project: str, service_name: str, pool_name: str
    ) -> None:
        """Delete a connection pool."""
        await self._delete(
            self.path(
                POOL_PATH + "/{pool_name}",
                project=project,
                service_name=service_name,
                pool_name=pool_name,
            )
        )

    async def query_stats(
        self, project: str, service_name: str, payload: Any = None
    ) -> PostgresQueryStatsList:
        """Fetch statement statistics collected by pg_stat_statements.

        Args:
            project: Project name.
            service_name: PostgreSQL service name.
            payload: Optional QueryStatsPayload with limit, offset and
                ordering.
        """
        return await self._post(
            self.path(
                SERVICE_PATH + "/pg/query/stats",
                project=project,
                service_name=service_name,
            ),
            payload if payload is not None else {},
            PostgresQueryStatsList,
        )
