"""Kafka: topics, ACLs, REST proxy, Connect, schema registry and MirrorMaker."""

from typing import Any

from ..types.kafka import (
    CompatibilityResult,
    CompatibilityUpdate,
    ConnectorConfigurationSchema,
    ConnectorList,
    ConnectorPluginList,
    ConnectorResponse,
    ConnectorStatusResponse,
    KafkaAclList,
    MessageList,
    ProduceResult,
    RegisteredSchema,
    ReplicationFlowList,
    ReplicationFlowResponse,
    SchemaRegistryConfig,
    SchemaResponse,
    SchemaVersionResponse,
    SubjectList,
    TopicInfoResponse,
    TopicList,
    VersionList,
)
from .base import (
    SERVICE_PATH,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceClient,
    UpdateMixin,
)

REST_TOPIC_PATH = SERVICE_PATH + "/kafka/rest/topics/{topic_name}"
CONNECTOR_PATH = SERVICE_PATH + "/connectors/{connector_name}"
SCHEMA_PATH = SERVICE_PATH + "/kafka/schema"
SUBJECT_PATH = SCHEMA_PATH + "/subjects/{subject_name}"
VERSION_PATH = SUBJECT_PATH + "/versions/{version_id}"


class KafkaTopicApi(
    ListMixin[TopicList],
    GetMixin[TopicInfoResponse],
    CreateMixin[None],
    UpdateMixin[None],
    DeleteMixin,
):
    """Topic management and topic messages through the Kafka REST proxy.

    Topic creation and updates are applied asynchronously; the topic shows
    up in the listing with state ``CONFIGURING`` until it is ready.
    """

    collection_path = SERVICE_PATH + "/topic"
    item_path = SERVICE_PATH + "/topic/{topic_name}"
    list_model = TopicList
    item_model = TopicInfoResponse
    create_model = None
    update_model = None

    async def list_messages(
        self, project: str, service_name: str, topic_name: str, payload: Any
    ) -> MessageList:
        """Consume messages from a topic.

        Requires Kafka REST to be enabled on the service.
        """
        return await self._post(
            self.path(
                REST_TOPIC_PATH + "/messages",
                project=project,
                service_name=service_name,
                topic_name=topic_name,
            ),
            payload,
            MessageList,
        )

    async def produce(
        self, project: str, service_name: str, topic_name: str, payload: Any
    ) -> ProduceResult:
        """Produce messages into a topic."""
        return await self._post(
            self.path(
                REST_TOPIC_PATH + "/produce",
                project=project,
                service_name=service_name,
                topic_name=topic_name,
            ),
            payload,
            ProduceResult,
        )


class KafkaAclApi(ListMixin[KafkaAclList], CreateMixin[KafkaAclList]):
    """Kafka ACL entries.

    Every call returns the complete ACL list of the service after the
    change.
    """

    collection_path = SERVICE_PATH + "/acl"
    item_path = SERVICE_PATH + "/acl/{kafka_acl_id}"
    list_model = KafkaAclList
    create_model = KafkaAclList

    async def delete(
        self, project: str, service_name: str, kafka_acl_id: str
    ) -> KafkaAclList:
        """Delete an ACL entry and return the remaining entries."""
        return await self._delete(
            self.path(
                self.item_path,
                project=project,
                service_name=service_name,
                kafka_acl_id=kafka_acl_id,
            ),
            KafkaAclList,
        )


class KafkaConnectApi(
    ListMixin[ConnectorList],
    CreateMixin[ConnectorResponse],
    UpdateMixin[ConnectorResponse],
    DeleteMixin,
):
    collection_path = SERVICE_PATH + "/connectors"
    item_path = CONNECTOR_PATH
    list_model = ConnectorList
    create_model = ConnectorResponse
    update_model = ConnectorResponse

    async def list_available(
        self, project: str, service_name: str
    ) -> ConnectorPluginList:
        """List the connector plugins installed on the Connect cluster."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/available-connectors",
                project=project,
                service_name=service_name,
            ),
            ConnectorPluginList,
        )

    async def get_configuration_schema(
        self, project: str, service_name: str, connector_name: str
    ) -> ConnectorConfigurationSchema:
        """Get the configuration options accepted by a connector plugin."""
        return await self._get(
            self.path(
                SERVICE_PATH + "/connector-plugins/{connector_name}/configuration",
                project=project,
                service_name=service_name,
                connector_name=connector_name,
            ),
            ConnectorConfigurationSchema,
        )

    async def get_status(
        self, project: str, service_name: str, connector_name: str
    ) -> ConnectorStatusResponse:
        """Get the state of a connector and its tasks."""
        return await self._get(
            self.path(
                CONNECTOR_PATH + "/status",
                project=project,
                service_name=service_name,
                connector_name=connector_name,
            ),
            ConnectorStatusResponse,
        )

    async def _connector_action(
        self, action: str, project: str, service_name: str, connector_name: str
    ) -> None:
        await self._post(
            self.path(
                CONNECTOR_PATH + "/" + action,
                project=project,
                service_name=service_name,
                connector_name=connector_name,
            )
        )

    async def pause(self, project: str, service_name: str, connector_name: str) -> None:
        """Pause a connector."""
        await self._connector_action("pause", project, service_name, connector_name)

    async def resume(
        self, project: str, service_name: str, connector_name: str
    ) -> None:
        """Resume a paused connector."""
        await self._connector_action("resume", project, service_name, connector_name)

    async def restart(
        self, project: str, service_name: str, connector_name: str
    ) -> None:
        """Restart a connector."""
        await self._connector_action("restart", project, service_name, connector_name)

    async def restart_task(
        self, project: str, service_name: str, connector_name: str, task_id: str
    ) -> None:
        """Restart a single task of a connector."""
        await self._post(
            self.path(
                CONNECTOR_PATH + "/tasks/{task_id}/restart",
                project=project,
                service_name=service_name,
                connector_name=connector_name,
                task_id=task_id,
            )
        )


class KafkaSchemaRegistryApi(ResourceClient):
    """Karapace schema registry of a Kafka service.

    Subjects and versions follow the Confluent schema registry API; version
    identifiers may be a number or ``latest``.
    """

    async def list_subjects(self, project: str, service_name: str) -> SubjectList:
        """List the subjects registered in the schema registry."""
        return await self._get(
            self.path(
                SCHEMA_PATH + "/subjects", project=project, service_name=service_name
            ),
            SubjectList,
        )

    async def delete_subject(
        self, project: str, service_name: str, subject_name: str
    ) -> None:
        """Delete a subject together with all of its versions."""
        await self._delete(
            self.path(
                SUBJECT_PATH,
                project=project,
                service_name=service_name,
                subject_name=subject_name,
            )
        )

    async def list_versions(
        self, project: str, service_name: str, subject_name: str
    ) -> VersionList:
        """List the registered versions of a subject."""
        return await self._get(
            self.path(
                SUBJECT_PATH + "/versions",
                project=project,
                service_name=service_name,
                subject_name=subject_name,
            ),
            VersionList,
        )

    async def register_schema(
        self, project: str, service_name: str, subject_name: str, payload: Any
    ) -> RegisteredSchema:
        """Register a new schema version under a subject.

        Args:
            project: Project name.
            service_name: Kafka service name.
            subject_name: Subject to register the schema under.
            payload: A RegisterSchemaPayload carrying the schema text.

        Returns:
            The global id of the schema.
        """
        return await self._post(
            self.path(
                SUBJECT_PATH + "/versions",
                project=project,
                service_name=service_name,
                subject_name=subject_name,
            ),
            payload,
            RegisteredSchema,
        )

    async def get_version(
        self, project: str, service_name: str, subject_name: str, version_id: str
    ) -> SchemaVersionResponse:
        """Get one version of a subject, including its schema."""
        return await self._get(
            self.path(
                VERSION_PATH,
                project=project,
                service_name=service_name,
                subject_name=subject_name,
                version_id=version_id,
            ),
            SchemaVersionResponse,
        )

    async def get_version_schema(
        self, project: str, service_name: str, subject_name: str, version_id: str
    ) -> SchemaResponse:
        """Get only the schema text of a subject version."""
        return await self._get(
            self.path(
                VERSION_PATH + "/schema",
                project=project,
                service_name=service_name,
                subject_name=subject_name,
                version_id=version_id,
            ),
            SchemaResponse,
        )

    async def delete_version(
        self, project: str, service_name: str, subject_name: str, version_id: str
    ) -> None:
        """Delete one version of a subject."""
        await self._delete(
            self.path(
                VERSION_PATH,
                project=project,
                service_name=service_name,
                subject_name=subject_name,
                version_id=version_id,
            )
        )

    async def get_schema(
        self, project: str, service_name: str, schema_id: str
    ) -> SchemaResponse:
        """Get a schema by its global id."""
        return await self._get(
            self.path(
                SCHEMA_PATH + "/schemas/ids/{schema_id}",
                project=project,
                service_name=service_name,
                schema_id=schema_id,
            ),
            SchemaResponse,
        )

    async def check_compatibility(
        self,
        project: str,
        service_name: str,
        subject_name: str,
        version_id: str,
        payload: Any,
    ) -> CompatibilityResult:
        """Check a schema against a registered version of a subject."""
        return await self._post(
            self.path(
                SCHEMA_PATH + "/compatibility/subjects/{subject_name}"
                "/versions/{version_id}",
                project=project,
                service_name=service_name,
                subject_name=subject_name,
                version_id=version_id,
            ),
            payload,
            CompatibilityResult,
        )

    async def get_config(
        self, project: str, service_name: str, subject_name: str | None = None
    ) -> SchemaRegistryConfig:
        """Get the compatibility level, globally or for one subject."""
        return await self._get(
            self._config_path(project, service_name, subject_name),
            SchemaRegistryConfig,
        )

    async def set_config(
        self,
        project: str,
        service_name: str,
        compatibility: str,
        subject_name: str | None = None,
    ) -> CompatibilityUpdate:
        """Set the compatibility level, globally or for one subject.

        Args:
            project: Project name.
            service_name: Kafka service name.
            compatibility: BACKWARD, FORWARD, FULL, NONE or one of their
                transitive variants.
            subject_name: Subject to configure; the global level is set
                when omitted.
        """
        return await self._put(
            self._config_path(project, service_name, subject_name),
            {"compatibility": compatibility},
            CompatibilityUpdate,
        )

    def _config_path(
        self, project: str, service_name: str, subject_name: str | None
    ) -> str:
        if subject_name is None:
            return self.path(
                SCHEMA_PATH + "/config", project=project, service_name=service_name
            )
        return self.path(
            SCHEMA_PATH + "/config/{subject_name}",
            project=project,
            service_name=service_name,
            subject_name=subject_name,
        )


class KafkaMirrorMakerApi(
    ListMixin[ReplicationFlowList],
    GetMixin[ReplicationFlowResponse],
    CreateMixin[None],
    UpdateMixin[ReplicationFlowResponse],
    DeleteMixin,
):
    """Replication flows of a Kafka MirrorMaker 2 service."""

    collection_path = SERVICE_PATH + "/mirrormaker/replication-flows"
    item_path = collection_path + "/{source_cluster}/{target_cluster}"
    list_model = ReplicationFlowList
    item_model = ReplicationFlowResponse
    create_model = None
    update_model = ReplicationFlowResponse
