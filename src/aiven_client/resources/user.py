"""Operations on the authenticated user and its credentials."""

from typing import Any

from ..types.user import (
    AccessToken,
    AccessTokenList,
    AccountInviteList,
    AuthenticationMethodList,
    InviteDetailsResponse,
    LoginOptions,
    OtpConfigResult,
    TokenResponse,
    TwoFactorConfig,
    UserAuth,
    UserCreated,
    UserInfo,
)
from .base import ResourceClient


class UserApi(ResourceClient):
    """User authentication, profile and access token management.

    Most of these endpoints act on the user owning the API token
    (the ``me`` endpoints) and take no scope parameters.
    """

    async def authenticate(self, payload: Any) -> UserAuth:
        """Exchange email and password (and OTP) for a session token.

        Args:
            payload: A UserAuthPayload or an equivalent dict.

        Returns:
            The token and state of the authenticated user.
        """
        return await self._post("userauth", payload, UserAuth)

    async def auth_login_options(self, email: str) -> LoginOptions:
        """Ask which login method the given email address should use."""
        return await self._post(
            "userauth/login_options", {"email": email}, LoginOptions
        )

    async def create(self, payload: Any) -> UserCreated:
        """Sign up a new user."""
        return await self._post("user", payload, UserCreated)

    async def info(self) -> UserInfo:
        """Get the profile of the current user."""
        return await self._get("me", UserInfo)

    async def password_change(self, payload: Any) -> TokenResponse:
        """Change the password; the response carries a fresh token."""
        return await self._put("me/password", payload, TokenResponse)

    async def configure_2fa(self, payload: Any) -> TwoFactorConfig:
        """Start enabling or disabling two-factor authentication."""
        return await self._put("me/2fa", payload, TwoFactorConfig)

    async def complete_otp_config(self, payload: Any) -> OtpConfigResult:
        """Finish the OTP setup with a code from the authenticator app."""
        return await self._put("me/2fa/otp", payload, OtpConfigResult)

    async def confirm_email_address(
        self, verification_code: str
    ) -> InviteDetailsResponse:
        """Confirm the email address with the code sent on sign up."""
        return await self._post(
            self.path(
                "user/verify_email/{verification_code}",
                verification_code=verification_code,
            ),
            response_type=InviteDetailsResponse,
        )

    async def password_reset(self, email: str) -> None:
        """Request a password reset email."""
        await self._post("user/password_reset_request", {"email": email})

    async def confirm_password_reset(
        self, verification_code: str, new_password: str
    ) -> None:
        """Set a new password using the code from the reset email."""
        await self._post(
            self.path(
                "user/password_reset/{verification_code}",
                verification_code=verification_code,
            ),
            {"new_password": new_password},
        )

    async def logout(self) -> None:
        """Invalidate the token used for this request."""
        await self._post("me/logout")

    async def expire_auth_tokens(self) -> None:
        """Invalidate every session token of the user."""
        await self._post("me/expire_tokens")

    async def list_auth_methods(self) -> AuthenticationMethodList:
        """List the login methods linked to the current user."""
        return await self._get("me/authentication_methods", AuthenticationMethodList)

    async def delete_auth_method(self, authentication_method_id: str) -> None:
        """Unlink a login method from the current user."""
        await self._delete(
            self.path(
                "me/authentication_methods/{authentication_method_id}",
                authentication_method_id=authentication_method_id,
            )
        )

    async def list_access_tokens(self) -> AccessTokenList:
        """List the access tokens of the current user."""
        return await self._get("access_token", AccessTokenList)

    async def create_access_token(self, payload: Any) -> AccessToken:
        """Create a long lived access token.

        The full token is only returned by this call, in ``full_token``.
        """
        return await self._post("access_token", payload, AccessToken)

    async def update_access_token(
        self, token_prefix: str, description: str
    ) -> AccessToken:
        """Change the description of an access token."""
        return await self._put(
            self.path("access_token/{token_prefix}", token_prefix=token_prefix),
            {"description": description},
            AccessToken,
        )

    async def revoke_access_token(self, token_prefix: str) -> None:
        """Revoke an access token."""
        await self._delete(
            self.path("access_token/{token_prefix}", token_prefix=token_prefix)
        )

    async def list_account_invites(self) -> AccountInviteList:
        """List pending invitations to join account teams."""
        return await self._get("me/account/invites", AccountInviteList)

    async def accept_account_invite(
        self, account_id: str, team_id: str | None = None
    ) -> AccountInviteList:
        """Accept the pending invites of an account.

        Args:
            account_id: Account whose invites are accepted.
            team_id: Only accept the invite to this team.

        Returns:
            The invites still pending afterwards.
        """
        body = {"account_id": account_id}
        if team_id is not None:
            body["team_id"] = team_id
        return await self._post("me/account/invites/accept", body, AccountInviteList)

    async def reject_account_invite(
        self, account_id: str, team_id: str
    ) -> AccountInviteList:
        """Decline the invite to an account team."""
        return await self._post(
            "me/account/invites/reject",
            {"account_id": account_id, "team_id": team_id},
            AccountInviteList,
        )
