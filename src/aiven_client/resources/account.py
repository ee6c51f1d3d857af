"""Account level authentication methods (SAML and others)."""

from typing import Any

from ..types.account import (
    AccountAuthenticationMethodList,
    AccountAuthenticationMethodResponse,
)
from .base import ResourceClient

AUTHENTICATION_PATH = "account/{account_id}/authentication"


class AccountApi(ResourceClient):
    async def create_authentication_method(
        self, account_id: str, payload: Any
    ) -> AccountAuthenticationMethodResponse:
        """Add an authentication method to an account.

        Args:
            account_id: Account identifier.
            payload: A CreateAuthenticationMethodPayload or dict.
        """
        return await self._post(
            self.path(AUTHENTICATION_PATH, account_id=account_id),
            payload,
            AccountAuthenticationMethodResponse,
        )

    async def list_authentication_methods(
        self, account_id: str
    ) -> AccountAuthenticationMethodList:
        """List the authentication methods configured for an account."""
        return await self._get(
            self.path(AUTHENTICATION_PATH, account_id=account_id),
            AccountAuthenticationMethodList,
        )
