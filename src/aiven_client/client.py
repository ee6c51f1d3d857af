"""Entry point of the library: the AivenClient."""

import httpx

from .config import DEFAULT_BASE_URL, ClientConfig
from .resources import (
    AccountApi,
    BillingGroupApi,
    CloudApi,
    ElasticsearchApi,
    IntegrationEndpointApi,
    KafkaAclApi,
    KafkaConnectApi,
    KafkaMirrorMakerApi,
    KafkaSchemaRegistryApi,
    KafkaTopicApi,
    MysqlApi,
    PaymentApi,
    PostgresApi,
    ProjectApi,
    ProjectBillingApi,
    ProjectKeyManagementApi,
    ProjectVpcApi,
    ServiceApi,
    ServiceDatabaseApi,
    ServiceIntegrationApi,
    ServiceUserApi,
    TicketApi,
    UserApi,
)
from .transport import DEFAULT_API_VERSION, DEFAULT_TIMEOUT, ApiTransport


class AivenClient:
    """Asynchronous client for the Aiven REST API.

    Resource clients are created on demand by the factory methods and share
    this client's transport, so one AivenClient can serve many concurrent
    tasks.

    Example:
        async with AivenClient(token=token) as client:
            projects = await client.project().list_all()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root (default: https://api.aiven.io).
            api_version: Version path segment (default: v1).
            token: API token; unauthenticated endpoints work without one.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional httpx transport, mostly for tests.

        Raises:
            ValueError: If base_url is not an absolute http(s) URL or timeout
                is not positive.
        """
        self._transport = ApiTransport(
            base_url,
            api_version=api_version,
            token=token,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AivenClient":
        """Build a client from a ClientConfig."""
        return cls(
            base_url=config.base_url,
            api_version=config.api_version,
            token=config.token,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def transport(self) -> ApiTransport:
        """Transport shared by every resource client of this client."""
        return self._transport

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._transport.aclose()

    def cloud(self) -> CloudApi:
        """Cloud region listings."""
        return CloudApi(self._transport)

    def user(self) -> UserApi:
        """Authentication and the current user's profile and tokens."""
        return UserApi(self._transport)

    def account(self) -> AccountApi:
        """Account authentication methods."""
        return AccountApi(self._transport)

    def project(self) -> ProjectApi:
        """Projects, their members, events and alerts."""
        return ProjectApi(self._transport)

    def project_vpc(self) -> ProjectVpcApi:
        """Project VPCs and peering connections."""
        return ProjectVpcApi(self._transport)

    def project_billing(self) -> ProjectBillingApi:
        """Project credits and invoices."""
        return ProjectBillingApi(self._transport)

    def key_management(self) -> ProjectKeyManagementApi:
        """Project CA certificate."""
        return ProjectKeyManagementApi(self._transport)

    def payment(self) -> PaymentApi:
        """Credit cards of the current user."""
        return PaymentApi(self._transport)

    def billing_group(self) -> BillingGroupApi:
        """Billing groups."""
        return BillingGroupApi(self._transport)

    def ticket(self) -> TicketApi:
        """Support tickets."""
        return TicketApi(self._transport)

    def service(self) -> ServiceApi:
        """Services and service level operations."""
        return ServiceApi(self._transport)

    def service_user(self) -> ServiceUserApi:
        """Users of a service."""
        return ServiceUserApi(self._transport)

    def service_database(self) -> ServiceDatabaseApi:
        """Logical databases of a service."""
        return ServiceDatabaseApi(self._transport)

    def service_integration(self) -> ServiceIntegrationApi:
        """Integrations between services and endpoints."""
        return ServiceIntegrationApi(self._transport)

    def integration_endpoint(self) -> IntegrationEndpointApi:
        """External integration endpoints."""
        return IntegrationEndpointApi(self._transport)

    def kafka_topic(self) -> KafkaTopicApi:
        """Kafka topics and topic messages."""
        return KafkaTopicApi(self._transport)

    def kafka_acl(self) -> KafkaAclApi:
        """Kafka ACL entries."""
        return KafkaAclApi(self._transport)

    def kafka_connect(self) -> KafkaConnectApi:
        """Kafka Connect connectors."""
        return KafkaConnectApi(self._transport)

    def kafka_schema_registry(self) -> KafkaSchemaRegistryApi:
        """Kafka schema registry subjects, versions and config."""
        return KafkaSchemaRegistryApi(self._transport)

    def kafka_mirrormaker(self) -> KafkaMirrorMakerApi:
        """MirrorMaker replication flows."""
        return KafkaMirrorMakerApi(self._transport)

    def postgres(self) -> PostgresApi:
        """PostgreSQL connection pools and query statistics."""
        return PostgresApi(self._transport)

    def mysql(self) -> MysqlApi:
        """MySQL query statistics."""
        return MysqlApi(self._transport)

    def elasticsearch(self) -> ElasticsearchApi:
        """Elasticsearch indexes and ACLs."""
        return ElasticsearchApi(self._transport)
