"""Service integration and integration endpoint models."""

from typing import Any

from .base import ApiModel, ApiPayload


class ServiceIntegration(ApiModel):
    active: bool | None = None
    description: str | None = None
    dest_endpoint: str | None = None
    dest_endpoint_id: str | None = None
    dest_project: str | None = None
    dest_service: str | None = None
    dest_service_type: str | None = None
    enabled: bool | None = None
    integration_status: dict[str, Any] | None = None
    integration_type: str | None = None
    service_integration_id: str | None = None
    source_endpoint: str | None = None
    source_endpoint_id: str | None = None
    source_project: str | None = None
    source_service: str | None = None
    source_service_type: str | None = None
    user_config: dict[str, Any] | None = None


class ServiceIntegrationResponse(ApiModel):
    service_integration: ServiceIntegration | None = None


class ServiceIntegrationList(ApiModel):
    service_integrations: list[ServiceIntegration] = []


class CreateIntegrationPayload(ApiPayload):
    integration_type: str | None = None
    source_service: str | None = None
    source_endpoint_id: str | None = None
    dest_service: str | None = None
    dest_endpoint_id: str | None = None
    dest_project: str | None = None
    user_config: dict[str, Any] | None = None


class UpdateIntegrationPayload(ApiPayload):
    user_config: dict[str, Any] | None = None


class IntegrationType(ApiModel):
    dest_description: str | None = None
    dest_service_type: str | None = None
    dest_service_types: list[str] | None = None
    integration_type: str | None = None
    source_description: str | None = None
    source_service_types: list[str] | None = None
    user_config_schema: dict[str, Any] | None = None


class IntegrationTypeList(ApiModel):
    integration_types: list[IntegrationType] = []


class IntegrationEndpoint(ApiModel):
    endpoint_config: dict[str, Any] | None = None
    endpoint_id: str | None = None
    endpoint_name: str | None = None
    endpoint_type: str | None = None
    user_config: dict[str, Any] | None = None


class IntegrationEndpointResponse(ApiModel):
    service_integration_endpoint: IntegrationEndpoint | None = None


class IntegrationEndpointList(ApiModel):
    service_integration_endpoints: list[IntegrationEndpoint] = []


class CreateEndpointPayload(ApiPayload):
    endpoint_name: str | None = None
    endpoint_type: str | None = None
    user_config: dict[str, Any] | None = None


class UpdateEndpointPayload(ApiPayload):
    user_config: dict[str, Any] | None = None


class EndpointType(ApiModel):
    endpoint_type: str | None = None
    service_types: list[str] | None = None
    title: str | None = None
    user_config_schema: dict[str, Any] | None = None


class EndpointTypeList(ApiModel):
    endpoint_types: list[EndpointType] = []
