"""Service models.

The service record is the largest structure of the API. Parts of it have
no fixed schema across service types (``connection_info``, ``features``,
``metadata``, ``user_config``, ``service_uri_params``); those are kept as
plain dicts of JSON values.
"""

from typing import Any

from pydantic import Field

from .base import ApiModel, ApiPayload
from .integrations import ServiceIntegration
from .kafka import Topic
from .project import Alert


class Acl(ApiModel):
    id: str | None = None
    permission: str | None = None
    topic: str | None = None
    username: str | None = None


class Backup(ApiModel):
    backup_name: str | None = None
    backup_time: str | None = None
    data_size: int | None = None


class Component(ApiModel):
    component: str | None = None
    host: str | None = None
    kafka_authentication_method: str | None = None
    port: int | None = None
    route: str | None = None
    ssl: bool | None = None
    usage: str | None = None


class ConnectionPool(ApiModel):
    connection_uri: str | None = None
    database: str | None = None
    pool_mode: str | None = None
    pool_name: str | None = None
    pool_size: int | None = None
    username: str | None = None


class MaintenanceUpdate(ApiModel):
    deadline: str | None = None
    description: str | None = None
    start_after: str | None = None
    start_at: str | None = None


class Maintenance(ApiModel):
    dow: str | None = None
    time: str | None = None
    updates: list[MaintenanceUpdate] | None = None


class ProgressUpdate(ApiModel):
    completed: bool | None = None
    current: int | None = None
    max: int | None = None
    min: int | None = None
    phase: str | None = None
    unit: str | None = None


class NodeState(ApiModel):
    name: str | None = None
    progress_updates: list[ProgressUpdate] | None = None
    role: str | None = None
    state: str | None = None


class ServiceUser(ApiModel):
    access_cert: str | None = None
    access_key: str | None = None
    authentication: str | None = None
    password: str | None = None
    type: str | None = None
    username: str | None = None


class Service(ApiModel):
    """A managed service (Kafka, PostgreSQL, MySQL, Elasticsearch, ...)."""

    acl: list[Acl] | None = None
    backups: list[Backup] | None = None
    cloud_description: str | None = None
    cloud_name: str | None = None
    components: list[Component] | None = None
    connection_info: dict[str, Any] | None = None
    connection_pools: list[ConnectionPool] | None = None
    create_time: str | None = None
    databases: list[str] | None = None
    disk_space_mb: int | None = None
    features: dict[str, Any] | None = None
    group_list: list[str] | None = None
    maintenance: Maintenance | None = None
    metadata: dict[str, Any] | None = None
    node_count: int | None = None
    node_cpu_count: int | None = None
    node_memory_mb: float | None = None
    node_states: list[NodeState] | None = None
    plan: str | None = None
    project_vpc_id: str | None = None
    service_integrations: list[ServiceIntegration] | None = None
    service_name: str | None = None
    service_type: str | None = None
    service_type_description: str | None = None
    service_uri: str | None = None
    service_uri_params: dict[str, Any] | None = None
    state: str | None = None
    termination_protection: bool | None = None
    topics: list[Topic] | None = None
    update_time: str | None = None
    user_config: dict[str, Any] | None = None
    users: list[ServiceUser] | None = None


class ServiceResponse(ApiModel):
    service: Service | None = None


class ServiceList(ApiModel):
    services: list[Service] = []


class CreateServicePayload(ApiPayload):
    service_name: str | None = None
    service_type: str | None = None
    plan: str | None = None
    cloud: str | None = None
    disk_space_mb: int | None = None
    group_name: str | None = None
    maintenance: dict[str, Any] | None = None
    project_vpc_id: str | None = None
    service_integrations: list[dict[str, Any]] | None = None
    termination_protection: bool | None = None
    user_config: dict[str, Any] | None = None


class UpdateServicePayload(ApiPayload):
    cloud: str | None = None
    disk_space_mb: int | None = None
    group_name: str | None = None
    karapace: bool | None = None
    maintenance: dict[str, Any] | None = None
    plan: str | None = None
    powered: bool | None = None
    project_vpc_id: str | None = None
    schema_registry_authorization: bool | None = None
    termination_protection: bool | None = None
    user_config: dict[str, Any] | None = None


class BackupConfig(ApiModel):
    interval: int | None = None
    max_count: int | None = None
    recovery_mode: str | None = None


class PlanRegion(ApiModel):
    disk_space_mb: int | None = None
    node_cpu_count: int | None = None
    node_memory_mb: int | None = None
    price_usd: str | None = None


class ServicePlan(ApiModel):
    backup_config: BackupConfig | None = None
    max_memory_percent: int | None = None
    node_count: int | None = None
    regions: dict[str, PlanRegion] | None = None
    service_plan: str | None = None
    service_type: str | None = None


class ServiceType(ApiModel):
    description: str | None = None
    latest_available_version: str | None = None
    service_plans: list[ServicePlan] | None = None
    user_config_schema: dict[str, Any] | None = None


class ServiceTypeList(ApiModel):
    service_types: dict[str, ServiceType] = {}


class ServiceAlertList(ApiModel):
    alerts: list[Alert] = []


class CreateServiceUserPayload(ApiPayload):
    username: str | None = None
    authentication: str | None = None


class ModifyServiceUserPayload(ApiPayload):
    operation: str | None = None
    authentication: str | None = None
    new_password: str | None = None


class ServiceUserResponse(ApiModel):
    user: ServiceUser | None = None


class Database(ApiModel):
    database_name: str | None = None
    lc_collate: str | None = None
    lc_ctype: str | None = None
    owner: str | None = None
    quoted_owner: str | None = None


class DatabaseList(ApiModel):
    databases: list[Database] = []


class CreateDatabasePayload(ApiPayload):
    database: str | None = None
    lc_collate: str | None = None
    lc_ctype: str | None = None


class Task(ApiModel):
    create_time: str | None = None
    result: str | None = None
    success: bool | None = None
    task_id: str | None = None
    task_type: str | None = None


class TaskResponse(ApiModel):
    task: Task | None = None


class CreateTaskPayload(ApiPayload):
    task_type: str | None = None
    migration_check: dict[str, Any] | None = None
    target_version: str | None = None


class LogEntry(ApiModel):
    msg: str | None = None
    time: str | None = None
    unit: str | None = None


class LogList(ApiModel):
    first_log_offset: str | None = None
    logs: list[LogEntry] = []
    offset: str | None = None


class LogQueryPayload(ApiPayload):
    limit: int | None = None
    offset: str | None = None
    sort_order: str | None = None


class EnableWritesResponse(ApiModel):
    message: str | None = None
    until: str | None = None


class ServiceCertificate(ApiModel):
    certificate: str | None = None


class ServiceKeyPair(ApiModel):
    certificate: str | None = None
    key: str | None = None


class Query(ApiModel):
    """One row of the active query list (PostgreSQL or Redis)."""

    active_database: str | None = None
    application_name: str | None = None
    backend_start: str | None = None
    backend_type: str | None = None
    backend_xid: str | None = None
    backend_xmin: str | None = None
    client_addr: str | None = None
    client_hostname: str | None = None
    client_port: int | None = None
    datid: int | None = None
    datname: str | None = None
    flags: list[str] | None = None
    id: str | None = None
    name: str | None = None
    pid: int | None = None
    query: str | None = None
    query_duration: float | None = None
    query_start: str | None = None
    state: str | None = None
    state_change: str | None = None
    usename: str | None = None
    usesysid: int | None = None
    wait_event: str | None = None
    wait_event_type: str | None = None
    waiting: bool | None = None
    xact_start: str | None = None


class QueryList(ApiModel):
    queries: list[Query] = []


class QueryActivityPayload(ApiPayload):
    limit: int | None = None
    offset: int | None = None
    order_by: str | None = None


class CancelQueryResponse(ApiModel):
    success: bool | None = None


class QueryStatsReset(ApiModel):
    queries: list[dict[str, Any]] = []


class MetricsPayload(ApiPayload):
    period: str | None = Field(None, description="hour, day, week, month or year")
