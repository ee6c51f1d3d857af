"""Service integrations and external integration endpoints."""

from ..types.integrations import (
    EndpointTypeList,
    IntegrationEndpointList,
    IntegrationEndpointResponse,
    IntegrationTypeList,
    ServiceIntegrationList,
    ServiceIntegrationResponse,
)
from .base import (
    SERVICE_PATH,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ListMixin,
    UpdateMixin,
)


class ServiceIntegrationApi(
    GetMixin[ServiceIntegrationResponse],
    CreateMixin[ServiceIntegrationResponse],
    UpdateMixin[ServiceIntegrationResponse],
    DeleteMixin,
):
    """Integrations between two services, or a service and an endpoint."""

    collection_path = "project/{project}/integration"
    item_path = "project/{project}/integration/{integration_id}"
    item_model = ServiceIntegrationResponse
    create_model = ServiceIntegrationResponse
    update_model = ServiceIntegrationResponse

    async def list_for_service(
        self, project: str, service_name: str
    ) -> ServiceIntegrationList:
        """List the integrations a service takes part in, either side."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/integration",
                project=project,
                service_name=service_name,
            ),
            ServiceIntegrationList,
        )

    async def list_types(self, project: str) -> IntegrationTypeList:
        """List the integration types and the service types they connect."""
        return await self._get(
            self.path("project/{project}/integration_types", project=project),
            IntegrationTypeList,
        )


class IntegrationEndpointApi(
    ListMixin[IntegrationEndpointList],
    CreateMixin[IntegrationEndpointResponse],
    UpdateMixin[IntegrationEndpointResponse],
    DeleteMixin,
):
    """Endpoints for external services (syslog, Datadog, Prometheus, ...)."""

    collection_path = "project/{project}/integration_endpoint"
    item_path = "project/{project}/integration_endpoint/{integration_endpoint_id}"
    list_model = IntegrationEndpointList
    create_model = IntegrationEndpointResponse
    update_model = IntegrationEndpointResponse

    async def list_types(self, project: str) -> EndpointTypeList:
        """List the external endpoint types that can be created."""
        return await self._get(
            self.path("project/{project}/integration_endpoint_types", project=project),
            EndpointTypeList,
        )
