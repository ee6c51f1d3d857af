"""Elasticsearch index and ACL models."""

from .base import ApiModel, ApiPayload


class Index(ApiModel):
    create_time: str | None = None
    docs: int | None = None
    health: str | None = None
    index_name: str | None = None
    number_of_replicas: int | None = None
    number_of_shards: int | None = None
    read_only_allow_delete: bool | None = None
    size: int | None = None
    status: str | None = None


class IndexList(ApiModel):
    indexes: list[Index] = []


class AclRule(ApiPayload):
    index: str | None = None
    permission: str | None = None


class UserAcl(ApiPayload):
    rules: list[AclRule] | None = None
    username: str | None = None


class AclConfig(ApiPayload):
    acls: list[UserAcl] | None = None
    enabled: bool | None = None
    extended_acl: bool | None = None


class AclConfigPayload(ApiPayload):
    elasticsearch_acl_config: AclConfig | None = None


class AclConfigResponse(ApiModel):
    elasticsearch_acl_config: AclConfig | None = None
