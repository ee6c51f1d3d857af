"""MySQL query statistics."""

from typing import Any

from ..types.mysql import MysqlQueryStatsList
from .base import SERVICE_PATH, ResourceClient


class MysqlApi(ResourceClient):
    async def query_stats(
        self, project: str, service_name: str, payload: Any = None
    ) -> MysqlQueryStatsList:
        """Fetch statement digest statistics from performance_schema."""
        return await self._post(
            self.path(
                SERVICE_PATH + "/mysql/query/stats",
                project=project,
                service_name=service_name,
            ),
            payload if payload is not None else {},
            MysqlQueryStatsList,
        )
