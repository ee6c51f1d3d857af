"""Services and the objects that live inside them: users, databases, tasks."""

from typing import Any

from ..types.service import (
    CancelQueryResponse,
    DatabaseList,
    EnableWritesResponse,
    LogList,
    QueryList,
    QueryStatsReset,
    ServiceAlertList,
    ServiceCertificate,
    ServiceKeyPair,
    ServiceList,
    ServiceResponse,
    ServiceTypeList,
    ServiceUserResponse,
    TaskResponse,
)
from .base import (
    SERVICE_PATH,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ListMixin,
    UpdateMixin,
)


def _secrets_param(include_secrets: bool | None) -> dict[str, Any] | None:
    if include_secrets is None:
        return None
    return {"include_secrets": "true" if include_secrets else "false"}


class ServiceApi(
    CreateMixin[ServiceResponse],
    UpdateMixin[ServiceResponse],
    DeleteMixin,
):
    """Service lifecycle and service level operations.

    ``delete`` terminates the service and discards its data unless
    termination protection is enabled, in which case the API refuses.
    """

    collection_path = "project/{project}/service"
    item_path = SERVICE_PATH
    create_model = ServiceResponse
    update_model = ServiceResponse

    async def list_all(
        self, project: str, include_secrets: bool | None = None
    ) -> ServiceList:
        """List the services of a project.

        Args:
            project: Project name.
            include_secrets: Ask the API to include passwords and access
                keys in the connection info. Left to the API default when
                not given.
        """
        return await self._get(
            self.path(self.collection_path, project=project),
            ServiceList,
            params=_secrets_param(include_secrets),
        )

    async def get(
        self, project: str, service_name: str, include_secrets: bool | None = None
    ) -> ServiceResponse:
        """Get the full record of a single service."""
        return await self._get(
            self.path(self.item_path, project=project, service_name=service_name),
            ServiceResponse,
            params=_secrets_param(include_secrets),
        )

    async def list_service_types(self, project: str | None = None) -> ServiceTypeList:
        """List service types and their plans.

        Without a project the public catalogue is returned; with a project
        the plans and prices available to that project.
        """
        if project is None:
            return await self._get("service_types", ServiceTypeList)
        return await self._get(
            self.path("project/{project}/service_types", project=project),
            ServiceTypeList,
        )

    async def list_alerts(self, project: str, service_name: str) -> ServiceAlertList:
        """List the active alerts of a service."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/alerts", project=project, service_name=service_name
            ),
            ServiceAlertList,
        )

    async def get_logs(
        self, project: str, service_name: str, payload: Any = None
    ) -> LogList:
        """Fetch service log entries.

        Args:
            project: Project name.
            service_name: Service name.
            payload: Optional LogQueryPayload with offset, limit and
                sort order.
        """
        return await self._post(
            self.path(
                SERVICE_PATH + "/logs", project=project, service_name=service_name
            ),
            payload if payload is not None else {},
            LogList,
        )

    async def get_metrics(
        self, project: str, service_name: str, period: str
    ) -> dict[str, Any]:
        """Fetch metrics for graphing.

        The result is keyed by metric name and its shape varies per service
        type, so it is returned as plain JSON.

        Args:
            period: One of hour, day, week, month or year.
        """
        return await self._post(
            self.path(
                SERVICE_PATH + "/metrics", project=project, service_name=service_name
            ),
            {"period": period},
            dict[str, Any],
        )

    async def create_task(
        self, project: str, service_name: str, payload: Any
    ) -> TaskResponse:
        """Start a service task such as an upgrade or migration check."""
        return await self._post(
            self.path(
                SERVICE_PATH + "/task", project=project, service_name=service_name
            ),
            payload,
            TaskResponse,
        )

    async def get_task(
        self, project: str, service_name: str, task_id: str
    ) -> TaskResponse:
        """Get the state and result of a service task."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/task/{task_id}",
                project=project,
                service_name=service_name,
                task_id=task_id,
            ),
            TaskResponse,
        )

    async def start_maintenance(self, project: str, service_name: str) -> None:
        """Apply pending maintenance updates now."""
        await self._put(
            self.path(
                SERVICE_PATH + "/maintenance/start",
                project=project,
                service_name=service_name,
            )
        )

    async def enable_writes(
        self, project: str, service_name: str
    ) -> EnableWritesResponse:
        """Temporarily lift the write block of a service with a full disk."""
        return await self._post(
            self.path(
                SERVICE_PATH + "/enable-writes",
                project=project,
                service_name=service_name,
            ),
            response_type=EnableWritesResponse,
        )

    async def get_ca_certificate(
        self, project: str, service_name: str, ca_name: str
    ) -> ServiceCertificate:
        """Get a CA certificate of the service by name."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/kms/ca/{ca_name}",
                project=project,
                service_name=service_name,
                ca_name=ca_name,
            ),
            ServiceCertificate,
        )

    async def get_keypair(
        self, project: str, service_name: str, keypair_name: str
    ) -> ServiceKeyPair:
        """Get a certificate and private key pair of the service."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/kms/keypairs/{keypair_name}",
                project=project,
                service_name=service_name,
                keypair_name=keypair_name,
            ),
            ServiceKeyPair,
        )

    async def list_queries(
        self, project: str, service_name: str, payload: Any = None
    ) -> QueryList:
        """Fetch the queries currently running on a PostgreSQL service."""
        return await self._post(
            self.path(
                SERVICE_PATH + "/query/activity",
                project=project,
                service_name=service_name,
            ),
            payload if payload is not None else {},
            QueryList,
        )

    async def cancel_query(
        self,
        project: str,
        service_name: str,
        pid: int,
        terminate: bool = False,
    ) -> CancelQueryResponse:
        """Cancel a running query, or terminate its backend.

        Args:
            project: Project name.
            service_name: Service name.
            pid: Backend process id from list_queries.
            terminate: Terminate the whole connection instead of only
                cancelling the query.
        """
        return await self._post(
            self.path(
                SERVICE_PATH + "/query/cancel",
                project=project,
                service_name=service_name,
            ),
            {"pid": pid, "terminate": terminate},
            CancelQueryResponse,
        )

    async def reset_query_stats(
        self, project: str, service_name: str
    ) -> QueryStatsReset:
        """Discard the collected query statistics."""
        return await self._put(
            self.path(
                SERVICE_PATH + "/query/stats/reset",
                project=project,
                service_name=service_name,
            ),
            response_type=QueryStatsReset,
        )


class ServiceUserApi(
    GetMixin[ServiceUserResponse],
    CreateMixin[ServiceUserResponse],
    DeleteMixin,
):
    collection_path = SERVICE_PATH + "/user"
    item_path = SERVICE_PATH + "/user/{service_username}"
    item_model = ServiceUserResponse
    create_model = ServiceUserResponse

    async def modify_credentials(
        self, payload: Any, project: str, service_name: str, service_username: str
    ) -> ServiceUserResponse:
        """Change the password or authentication plugin of a service user."""
        return await self._put(
            self.path(
                self.item_path,
                project=project,
                service_name=service_name,
                service_username=service_username,
            ),
            payload,
            ServiceUserResponse,
        )

    async def reset_credentials(
        self, project: str, service_name: str, service_username: str
    ) -> ServiceResponse:
        """Generate new credentials for a service user.

        Returns:
            The updated service record.
        """
        return await self._put(
            self.path(
                self.item_path + "/credentials/reset",
                project=project,
                service_name=service_name,
                service_username=service_username,
            ),
            response_type=ServiceResponse,
        )


class ServiceDatabaseApi(ListMixin[DatabaseList], CreateMixin[None], DeleteMixin):
    """Logical databases of PostgreSQL and MySQL services."""

    collection_path = SERVICE_PATH + "/db"
    item_path = SERVICE_PATH + "/db/{dbname}"
    list_model = DatabaseList
    create_model = None
