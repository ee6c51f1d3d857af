"""Resource clients, one per API resource family.

Instances are obtained from :class:`~aiven_client.client.AivenClient`
factory methods and share its transport.
"""

from .account import AccountApi
from .base import ResourceClient
from .billing_group import BillingGroupApi
from .cloud import CloudApi
from .elasticsearch import ElasticsearchApi
from .integrations import IntegrationEndpointApi, ServiceIntegrationApi
from .kafka import (
    KafkaAclApi,
    KafkaConnectApi,
    KafkaMirrorMakerApi,
    KafkaSchemaRegistryApi,
    KafkaTopicApi,
)
from .mysql import MysqlApi
from .payment import PaymentApi
from .postgres import PostgresApi
from .project import (
    ProjectApi,
    ProjectBillingApi,
    ProjectKeyManagementApi,
    ProjectVpcApi,
)
from .service import ServiceApi, ServiceDatabaseApi, ServiceUserApi
from .ticket import TicketApi
from .user import UserApi

__all__ = [
    "AccountApi",
    "BillingGroupApi",
    "CloudApi",
    "ElasticsearchApi",
    "IntegrationEndpointApi",
    "KafkaAclApi",
    "KafkaConnectApi",
    "KafkaMirrorMakerApi",
    "KafkaSchemaRegistryApi",
    "KafkaTopicApi",
    "MysqlApi",
    "PaymentApi",
    "PostgresApi",
    "ProjectApi",
    "ProjectBillingApi",
    "ProjectKeyManagementApi",
    "ProjectVpcApi",
    "ResourceClient",
    "ServiceApi",
    "ServiceDatabaseApi",
    "ServiceIntegrationApi",
    "ServiceUserApi",
    "TicketApi",
    "UserApi",
]
