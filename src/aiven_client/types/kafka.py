"""Kafka models: topics, ACLs, Connect, schema registry, REST proxy, MirrorMaker."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from .base import ApiModel, ApiPayload


def _bool_from_string(value: Any) -> Any:
    # Connect plugin listings encode some booleans as "true"/"false".
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        msg = f"expected 'true' or 'false', got {value!r}"
        raise ValueError(msg)
    return value


StringBool = Annotated[bool, BeforeValidator(_bool_from_string)]


class Topic(ApiModel):
    cleanup_policy: str | None = None
    min_insync_replicas: int | None = None
    partitions: int | None = None
    replication: int | None = None
    retention_bytes: int | None = None
    retention_hours: int | None = None
    state: str | None = None
    topic_name: str | None = None


class TopicList(ApiModel):
    topics: list[Topic] = []


class ConsumerGroup(ApiModel):
    group_name: str | None = None
    offset: int | None = None


class Partition(ApiModel):
    consumer_groups: list[ConsumerGroup] | None = None
    earliest_offset: int | None = None
    isr: int | None = None
    latest_offset: int | None = None
    partition: int | None = None
    size: int | None = None


class TopicInfo(ApiModel):
    cleanup_policy: str | None = None
    config: dict[str, Any] | None = None
    min_insync_replicas: int | None = None
    partitions: list[Partition] | None = None
    replication: int | None = None
    retention_bytes: int | None = None
    retention_hours: int | None = None
    state: str | None = None
    topic_name: str | None = None


class TopicInfoResponse(ApiModel):
    topic: TopicInfo | None = None


class CreateTopicPayload(ApiPayload):
    topic_name: str | None = None
    partitions: int | None = None
    replication: int | None = None
    cleanup_policy: str | None = None
    min_insync_replicas: int | None = None
    retention_bytes: int | None = None
    retention_hours: int | None = None
    config: dict[str, Any] | None = None


class UpdateTopicPayload(ApiPayload):
    partitions: int | None = None
    replication: int | None = None
    min_insync_replicas: int | None = None
    retention_bytes: int | None = None
    retention_hours: int | None = None
    config: dict[str, Any] | None = None


class KafkaAcl(ApiModel):
    id: str | None = None
    permission: str | None = None
    topic: str | None = None
    username: str | None = None


class KafkaAclList(ApiModel):
    acl: list[KafkaAcl] = []


class CreateAclPayload(ApiPayload):
    permission: str | None = None
    topic: str | None = None
    username: str | None = None


class ConsumeRecord(ApiModel):
    key: Any = None
    offset: int | None = None
    partition: int | None = None
    topic: str | None = None
    value: Any = None


class MessageList(ApiModel):
    messages: list[ConsumeRecord] = []


class ListMessagesPayload(ApiPayload):
    format: str | None = None
    max_bytes: int | None = None
    partitions: dict[str, Any] | None = None
    timeout: int | None = None


class ProduceRecord(ApiPayload):
    key: Any = None
    partition: int | None = None
    value: Any = None


class ProducePayload(ApiPayload):
    format: str | None = None
    key_schema: str | None = None
    key_schema_id: int | None = None
    records: list[ProduceRecord] | None = None
    value_schema: str | None = None
    value_schema_id: int | None = None


class ProduceOffset(ApiModel):
    error: str | None = None
    error_code: int | None = None
    offset: int | None = None
    partition: int | None = None


class ProduceResult(ApiModel):
    key_schema_id: int | None = None
    offsets: list[ProduceOffset] | None = None
    value_schema_id: int | None = None


class ConnectorPlugin(ApiModel):
    author: str | None = None
    class_name: str | None = Field(None, alias="class")
    doc_url: str | None = Field(None, alias="docURL")
    preview: StringBool | None = None
    preview_info: str | None = None
    title: str | None = None
    type: str | None = None
    version: str | None = None


class ConnectorPluginList(ApiModel):
    plugins: list[ConnectorPlugin] = []


class ConnectorTask(ApiModel):
    connector: str | None = None
    task: int | None = None


class Connector(ApiModel):
    config: dict[str, Any] | None = None
    name: str | None = None
    plugin: ConnectorPlugin | None = None
    tasks: list[ConnectorTask] | None = None


class ConnectorResponse(ApiModel):
    connector: Connector | None = None


class ConnectorList(ApiModel):
    connectors: list[Connector] = []


class ConfigurationOption(ApiModel):
    default_value: Any = None
    display_name: str | None = None
    documentation: str | None = None
    group: str | None = None
    importance: str | None = None
    name: str | None = None
    order: int | None = None
    required: StringBool | None = None
    type: str | None = None
    width: str | None = None


class ConnectorConfigurationSchema(ApiModel):
    configuration_schema: list[ConfigurationOption] = []


class ConnectTaskStatus(ApiModel):
    id: int | None = None
    state: str | None = None
    trace: str | None = None


class ConnectorStatus(ApiModel):
    state: str | None = None
    tasks: list[ConnectTaskStatus] | None = None


class ConnectorStatusResponse(ApiModel):
    status: ConnectorStatus | None = None


class SubjectList(ApiModel):
    subjects: list[str] = []


class VersionList(ApiModel):
    versions: list[int] = []


class SchemaVersion(ApiModel):
    id: int | None = None
    schema_: str | None = Field(None, alias="schema")
    subject: str | None = None
    version: int | None = None


class SchemaVersionResponse(ApiModel):
    version: SchemaVersion | None = None


class SchemaResponse(ApiModel):
    schema_: str | None = Field(None, alias="schema")


class RegisterSchemaPayload(ApiPayload):
    schema_: str | None = Field(None, alias="schema")
    schema_type: str | None = Field(None, alias="schemaType")


class RegisteredSchema(ApiModel):
    id: int | None = None


class CompatibilityResult(ApiModel):
    is_compatible: bool | None = None


class SchemaRegistryConfig(ApiModel):
    compatibility_level: str | None = Field(None, alias="compatibilityLevel")


class CompatibilityUpdate(ApiModel):
    compatibility: str | None = None


class CompatibilityPayload(ApiPayload):
    compatibility: str | None = None


class ReplicationFlow(ApiModel):
    enabled: bool | None = None
    source_cluster: str | None = None
    target_cluster: str | None = None
    topics: list[str] | None = None
    topics_blacklist: list[str] | None = Field(None, alias="topics.blacklist")
    sync_group_offsets_enabled: bool | None = None
    replication_policy_class: str | None = None


class ReplicationFlowResponse(ApiModel):
    replication_flow: ReplicationFlow | None = None


class ReplicationFlowList(ApiModel):
    replication_flows: list[ReplicationFlow] = []


class ReplicationFlowPayload(ApiPayload):
    enabled: bool | None = None
    source_cluster: str | None = None
    target_cluster: str | None = None
    topics: list[str] | None = None
    topics_blacklist: list[str] | None = Field(None, alias="topics.blacklist")
    sync_group_offsets_enabled: bool | None = None
    replication_policy_class: str | None = None
