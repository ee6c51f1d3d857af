"""Tests for the response and payload models.

Response models must survive fields they do not know, keep JSON nulls and
dump back to the document they came from. Payloads must only send what the
caller set.
"""

import pytest

from aiven_client.types import kafka, project, service
from aiven_client.types.base import ApiModel

# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


def test_service_round_trip(load_json):
    """A full service document dumps back to the same JSON."""
    data = load_json("service/get.json")

    response = service.ServiceResponse.model_validate(data)

    assert response.to_dict() == data


def test_project_list_round_trip(load_json):
    """Nested lists and maps keep content and server order."""
    data = load_json("project/list.json")

    projects = project.ProjectList.model_validate(data)

    assert [p.project_name for p in projects.projects] == [
        "my-project",
        "other-project",
    ]
    assert projects.to_dict() == data


def test_dump_then_validate_yields_equal_instance(load_json):
    """Validating a dump gives back an equal model."""
    original = service.ServiceResponse.model_validate(load_json("service/get.json"))

    copy = service.ServiceResponse.model_validate(original.to_dict())

    assert copy == original


def test_missing_optional_field_is_none(load_json):
    """disk_space_mb is absent from the document and reads as None."""
    svc = service.ServiceResponse.model_validate(load_json("service/get.json")).service

    assert svc.disk_space_mb is None
    assert "disk_space_mb" not in svc.to_dict()


def test_unknown_fields_preserved(load_json):
    """Fields the model does not declare are kept."""
    svc = service.ServiceResponse.model_validate(load_json("service/get.json")).service

    assert svc.model_extra == {"shard_count": 1}
    assert svc.to_dict()["shard_count"] == 1


def test_nested_structures_parsed(load_json):
    """Nested records become typed models, loose ones stay dicts."""
    svc = service.ServiceResponse.model_validate(load_json("service/get.json")).service

    assert svc.maintenance.updates[0].description == "Update to Kafka 2.7.0"
    assert svc.node_states[0].progress_updates[0].completed is True
    assert svc.topics[0].topic_name == "events"
    assert svc.users[0].username == "avnadmin"
    assert svc.connection_info["kafka"] == ["kafka-abc.aivencloud.com:12345"]
    assert svc.user_config == {"kafka_rest": True, "kafka_version": "2.7"}


def test_explicit_null_kept_on_dump(load_json):
    """A null sent by the API is dumped as null, not dropped."""
    svc = service.ServiceResponse.model_validate(load_json("service/get.json")).service

    assert svc.project_vpc_id is None
    assert svc.to_dict()["project_vpc_id"] is None


def test_empty_document_validates():
    """Every field is optional."""
    assert service.Service.model_validate({}).to_dict() == {}


def test_envelope_lists_default_to_empty():
    """List envelopes without their list read as empty."""
    assert service.ServiceList.model_validate({}).services == []


def test_api_model_is_open():
    """ApiModel subclasses accept arbitrary extra keys."""

    class Thing(ApiModel):
        name: str | None = None

    thing = Thing.model_validate({"name": "a", "new_field": {"x": 1}})
    assert thing.to_dict() == {"name": "a", "new_field": {"x": 1}}


def test_connector_plugin_aliases_and_string_booleans(load_json):
    """Connect plugin listings use aliases and "true"/"false" strings."""
    plugins = kafka.ConnectorPluginList.model_validate(
        load_json("kafka/connector_plugins.json")
    ).plugins

    assert plugins[0].class_name == "io.aiven.connect.jdbc.JdbcSinkConnector"
    assert plugins[0].doc_url.startswith("https://github.com/aiven/")
    assert plugins[0].preview is False
    assert plugins[1].preview is True
    assert plugins[1].doc_url is None
    assert plugins[0].to_dict()["class"] == plugins[0].class_name


def test_string_boolean_accepts_real_booleans():
    """Booleans pass through unchanged."""
    option = kafka.ConfigurationOption.model_validate({"required": True})
    assert option.required is True


def test_string_boolean_rejects_other_strings():
    """Strings other than true/false are a validation error."""
    with pytest.raises(ValueError, match="expected 'true' or 'false'"):
        kafka.ConnectorPlugin.model_validate({"preview": "maybe"})


def test_replication_flow_dotted_alias():
    """MirrorMaker uses a dotted key for the topic blacklist."""
    flow = kafka.ReplicationFlow.model_validate(
        {"source_cluster": "a", "target_cluster": "b", "topics.blacklist": ["x"]}
    )
    assert flow.topics_blacklist == ["x"]
    assert flow.to_dict()["topics.blacklist"] == ["x"]


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


def test_payload_omits_unset_fields():
    """Only fields given to the constructor are serialized."""
    payload = service.CreateServicePayload(
        service_name="my-pg", service_type="pg", plan="hobbyist"
    )
    assert payload.to_body() == {
        "service_name": "my-pg",
        "service_type": "pg",
        "plan": "hobbyist",
    }


def test_payload_sends_explicit_none():
    """An explicit None is sent as null."""
    payload = service.UpdateServicePayload(project_vpc_id=None)
    assert payload.to_body() == {"project_vpc_id": None}


def test_payload_nested_models_omit_unset_fields():
    """Unset fields of nested payloads are omitted as well."""
    payload = project.CreateVpcPayload(
        cloud_name="aws-eu-west-1",
        peering_connections=[
            project.PeeringConnectionPayload(peer_cloud_account="1", peer_vpc="v")
        ],
    )
    assert payload.to_body() == {
        "cloud_name": "aws-eu-west-1",
        "peering_connections": [{"peer_cloud_account": "1", "peer_vpc": "v"}],
    }


def test_payload_accepts_extra_fields():
    """Fields not modelled yet can still be sent."""
    payload = project.CreateProjectPayload(project="p", tags={"env": "prod"})
    assert payload.to_body() == {"project": "p", "tags": {"env": "prod"}}


def test_member_type_values():
    """Member types serialize to the API's lowercase names."""
    assert [m.value for m in project.MemberType] == [
        "admin",
        "developer",
        "operator",
        "read_only",
    ]
