"""Tests for AivenClient construction, factories and lifecycle."""

import asyncio

import httpx
import pytest

from aiven_client import AivenClient, ClientConfig
from aiven_client.resources import (
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

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_invalid_base_url_rejected():
    """The client refuses relative or non-http URLs."""
    with pytest.raises(ValueError, match="base_url"):
        AivenClient("not a url")


def test_non_positive_timeout_rejected():
    """The client refuses a zero timeout."""
    with pytest.raises(ValueError, match="timeout"):
        AivenClient(timeout=0)


async def test_from_config():
    """Settings of a ClientConfig are carried over to the transport."""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"clouds": []})

    config = ClientConfig(base_url="https://api.aiven.test/", token="abc")

    client = AivenClient.from_config(config, transport=httpx.MockTransport(handler))
    await client.cloud().list_all()

    assert client.transport.api_url == "https://api.aiven.test/v1/"
    assert str(requests[0].url) == "https://api.aiven.test/v1/clouds"
    assert requests[0].headers["Authorization"] == "aivenv1 abc"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("factory", "api_class"),
    [
        ("cloud", CloudApi),
        ("user", UserApi),
        ("account", AccountApi),
        ("project", ProjectApi),
        ("project_vpc", ProjectVpcApi),
        ("project_billing", ProjectBillingApi),
        ("key_management", ProjectKeyManagementApi),
        ("payment", PaymentApi),
        ("billing_group", BillingGroupApi),
        ("ticket", TicketApi),
        ("service", ServiceApi),
        ("service_user", ServiceUserApi),
        ("service_database", ServiceDatabaseApi),
        ("service_integration", ServiceIntegrationApi),
        ("integration_endpoint", IntegrationEndpointApi),
        ("kafka_topic", KafkaTopicApi),
        ("kafka_acl", KafkaAclApi),
        ("kafka_connect", KafkaConnectApi),
        ("kafka_schema_registry", KafkaSchemaRegistryApi),
        ("kafka_mirrormaker", KafkaMirrorMakerApi),
        ("postgres", PostgresApi),
        ("mysql", MysqlApi),
        ("elasticsearch", ElasticsearchApi),
    ],
)
def test_factories_share_transport(make_client, factory, api_class):
    """Every factory returns its resource client bound to the shared transport."""
    client, _ = make_client()

    api = getattr(client, factory)()

    assert isinstance(api, api_class)
    assert api._transport is client.transport


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


async def test_context_manager_closes_pool(make_client):
    """Leaving the context closes the underlying httpx client."""
    client, _ = make_client(json_body={"clouds": []})

    async with client as entered:
        assert entered is client
        await client.cloud().list_all()
        http_client = client.transport.client

    assert http_client.is_closed


async def test_client_usable_after_close(make_client):
    """A closed client opens a new connection pool on the next call."""
    client, handler = make_client(json_body={"clouds": []})

    await client.aclose()
    await client.cloud().list_all()

    assert len(handler.requests) == 1
    await client.aclose()


async def test_concurrent_calls_share_one_pool(make_client):
    """Concurrent tasks go through the same httpx client."""
    client, handler = make_client(json_body={"clouds": []})
    http_client = client.transport.client

    results = await asyncio.gather(*(client.cloud().list_all() for _ in range(5)))

    assert len(results) == 5
    assert len(handler.requests) == 5
    assert client.transport.client is http_client
    await client.aclose()
