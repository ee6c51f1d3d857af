"""Account authentication method models."""

from typing import Any

from .base import ApiModel, ApiPayload


class SamlFieldMapping(ApiModel):
    email: str | None = None
    first_name: str | None = None
    identity: str | None = None
    last_name: str | None = None
    real_name: str | None = None


class AccountAuthenticationMethod(ApiModel):
    account_id: str | None = None
    authentication_method_enabled: bool | None = None
    authentication_method_id: str | None = None
    authentication_method_name: str | None = None
    authentication_method_type: str | None = None
    auto_join_team_id: str | None = None
    create_time: str | None = None
    delete_time: str | None = None
    saml_acs_url: str | None = None
    saml_certificate: str | None = None
    saml_certificate_issuer: str | None = None
    saml_certificate_not_valid_after: str | None = None
    saml_certificate_not_valid_before: str | None = None
    saml_certificate_subject: str | None = None
    saml_digest_algorithm: str | None = None
    saml_entity_id: str | None = None
    saml_field_mapping: SamlFieldMapping | None = None
    saml_idp_url: str | None = None
    saml_metadata_url: str | None = None
    saml_signature_algorithm: str | None = None
    saml_variant: str | None = None
    state: str | None = None
    update_time: str | None = None


class AccountAuthenticationMethodResponse(ApiModel):
    authentication_method: AccountAuthenticationMethod | None = None


class AccountAuthenticationMethodList(ApiModel):
    authentication_methods: list[AccountAuthenticationMethod] = []


class CreateAuthenticationMethodPayload(ApiPayload):
    authentication_method_name: str | None = None
    authentication_method_type: str | None = None
    auto_join_team_id: str | None = None
    saml_certificate: str | None = None
    saml_digest_algorithm: str | None = None
    saml_entity_id: str | None = None
    saml_field_mapping: dict[str, Any] | None = None
    saml_idp_url: str | None = None
    saml_signature_algorithm: str | None = None
    saml_variant: str | None = None
