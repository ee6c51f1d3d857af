"""User profile, authentication and access token models."""

from typing import Any

from .base import ApiModel, ApiPayload


class UserAuth(ApiModel):
    state: str | None = None
    token: str | None = None
    user_email: str | None = None


class UserAuthPayload(ApiPayload):
    email: str | None = None
    otp: str | None = None
    password: str | None = None


class LoginOptions(ApiModel):
    """How the given email address is expected to log in."""

    action: str | None = None
    method: str | None = None
    name: str | None = None
    redirect_url: str | None = None


class UserInvitation(ApiModel):
    invite_code: str | None = None
    invite_time: str | None = None
    inviting_user_email: str | None = None
    project_name: str | None = None


class User(ApiModel):
    auth: list[str] | None = None
    create_time: str | None = None
    features: dict[str, Any] | None = None
    intercom: dict[str, Any] | None = None
    invitations: list[UserInvitation] | None = None
    project_membership: dict[str, str] | None = None
    projects: list[str] | None = None
    real_name: str | None = None
    state: str | None = None
    token_validity_begin: str | None = None
    user: str | None = None
    user_id: str | None = None


class UserInfo(ApiModel):
    user: User | None = None


class UserCreated(ApiModel):
    state: str | None = None
    token: str | None = None
    user: User | None = None
    user_email: str | None = None


class CreateUserPayload(ApiPayload):
    credit_code: str | None = None
    email: str | None = None
    email_communication_categories: list[str] | None = None
    origin: str | None = None
    password: str | None = None
    real_name: str | None = None
    token: str | None = None


class PasswordChangePayload(ApiPayload):
    new_password: str | None = None
    password: str | None = None


class TokenResponse(ApiModel):
    token: str | None = None


class TwoFactorPayload(ApiPayload):
    method: str | None = None
    password: str | None = None


class TwoFactorConfig(ApiModel):
    method: str | None = None
    qrcode: str | None = None
    uri: str | None = None


class OtpConfigPayload(ApiPayload):
    otp: str | None = None
    password: str | None = None
    uri: str | None = None


class OtpConfigResult(ApiModel):
    method: str | None = None
    token: str | None = None


class UserEmail(ApiModel):
    user_email: str | None = None


class InviteDetailsResponse(ApiModel):
    invite_details: UserEmail | None = None


class AccessToken(ApiModel):
    create_time: str | None = None
    created_manually: bool | None = None
    currently_active: bool | None = None
    description: str | None = None
    expiry_time: str | None = None
    extend_when_used: bool | None = None
    full_token: str | None = None
    last_ip: str | None = None
    last_used_time: str | None = None
    last_user_agent: str | None = None
    last_user_agent_human_readable: str | None = None
    max_age_seconds: int | None = None
    token_prefix: str | None = None


class AccessTokenList(ApiModel):
    tokens: list[AccessToken] = []


class CreateAccessTokenPayload(ApiPayload):
    description: str | None = None
    extend_when_used: bool | None = None
    max_age_seconds: int | None = None


class AuthenticationMethod(ApiModel):
    """Login method linked to the current user."""

    authentication_method_account_id: str | None = None
    create_time: str | None = None
    currently_active: bool | None = None
    delete_time: str | None = None
    last_used_time: str | None = None
    method_id: str | None = None
    name: str | None = None
    public_remote_identity: str | None = None
    remote_provider_id: str | None = None
    state: str | None = None
    update_time: str | None = None
    user_email: str | None = None


class AuthenticationMethodList(ApiModel):
    authentication_methods: list[AuthenticationMethod] = []


class AccountInvite(ApiModel):
    account_id: str | None = None
    account_name: str | None = None
    create_time: str | None = None
    invited_by_user_email: str | None = None
    team_id: str | None = None
    team_name: str | None = None
    user_email: str | None = None


class AccountInviteList(ApiModel):
    account_invites: list[AccountInvite] = []
