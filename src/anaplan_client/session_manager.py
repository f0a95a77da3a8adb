"""High-level session management for authentication.

SessionManager provides a facade for the token lifecycle:
- Connect with username/password or with a CA certificate
- Connection verification and automatic token refresh
- Logout with optional server-side revocation
- Pre-configured IntegrationClient creation

For low-level access to the token endpoints, use AuthClient directly.
"""

import time
from typing import TYPE_CHECKING

from loguru import logger

from .auth import AnaplanTokenAuthProvider
from .auth_client import AuthClient
from .auth_models import AuthTokenResponse, TokenInfo
from .config import AnaplanClientConfig
from .exceptions import NotConnectedError, TokenExpiredError
from .server_pref import ServerPref

if TYPE_CHECKING:
    from .integration_client import IntegrationClient


def _now_ms() -> int:
    return int(time.time() * 1000)


class SessionManager:
    """High-level session management for authentication.

    Token refresh is automatic: when get_valid_token() is called and the token
    expires in less than TOKEN_REFRESH_THRESHOLD seconds, it is exchanged for
    a new one transparently.

    Example:
        async with SessionManager() as session:
            await session.connect(username="user@example.com", password="pass")

            async with session.create_integration_client() as client:
                workspaces = await client.get_all_workspaces()

            await session.logout()
    """

    def __init__(
        self,
        base_url: str | None = None,
        server_pref: ServerPref | None = None,
    ) -> None:
        """Initialize session manager.

        Args:
            base_url: Auth service URL (overrides server_pref.auth_url)
            server_pref: Server configuration (default: from environment)
        """
        self._config: ServerPref = server_pref or ServerPref.from_env()
        self._auth_client: AuthClient = AuthClient(
            base_url=base_url,
            server_pref=self._config,
        )

        # Session state
        self._token_info: TokenInfo | None = None

    @property
    def server_pref(self) -> ServerPref:
        """Get the current server configuration."""
        return self._config

    @property
    def auth_client(self) -> AuthClient:
        """Access to underlying AuthClient for advanced operations."""
        return self._auth_client

    @property
    def token_info(self) -> TokenInfo | None:
        """Full token details of the current session, if connected."""
        return self._token_info

    # ========================================================================
    # Authentication Lifecycle
    # ========================================================================

    def _store(self, response: AuthTokenResponse) -> AuthTokenResponse:
        self._token_info = response.token_info
        logger.debug(
            f"Anaplan token acquired, expires at {response.token_info.expires_at_datetime}"
        )
        return response

    async def connect(self, username: str, password: str) -> AuthTokenResponse:
        """Connect with username and password.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        response = await self._auth_client.authenticate(username, password)
        return self._store(response)

    async def connect_with_certificate(
        self,
        certificate: str,
        encoded_data: str,
        encoded_signed_data: str,
    ) -> AuthTokenResponse:
        """Connect with a CA certificate.

        Args:
            certificate: Base64-encoded certificate in PEM format
            encoded_data: Base64-encoded random string
            encoded_signed_data: Base64-encoded signed random string

        Raises:
            AuthenticationError: If the certificate is rejected
        """
        response = await self._auth_client.authenticate_with_certificate(
            certificate, encoded_data, encoded_signed_data
        )
        return self._store(response)

    async def logout(self, revoke: bool = True) -> None:
        """Clear session state, revoking the token on the server by default.

        The local state is cleared even when revocation fails; the
        revocation error is then re-raised.

        Args:
            revoke: Whether to call the logout endpoint
        """
        token_info = self._token_info
        self._token_info = None
        if revoke and token_info is not None:
            try:
                await self._auth_client.logout(token_info.token_value)
            except Exception as e:
                logger.error(f"Failed to revoke Anaplan token: {e}")
                raise

    def is_authenticated(self) -> bool:
        """Check if a token is held (it may still be expired)."""
        return self._token_info is not None

    def verify_connection(self) -> None:
        """Ensure a usable token is held.

        Raises:
            NotConnectedError: If not connected
            TokenExpiredError: If the token has expired
        """
        if self._token_info is None:
            raise NotConnectedError()
        if self._token_info.expires_at < _now_ms() + AnaplanClientConfig.TOKEN_EXPIRY_MARGIN_MS:
            raise TokenExpiredError()

    # ========================================================================
    # Token Management
    # ========================================================================

    def get_token(self) -> str:
        """Get current token (synchronous, no refresh).

        Raises:
            NotConnectedError: If not connected
        """
        if self._token_info is None:
            raise NotConnectedError()
        return self._token_info.token_value

    def should_refresh(self) -> bool:
        """Check whether the token expires within the refresh threshold."""
        if self._token_info is None:
            return False
        remaining_ms = self._token_info.expires_at - _now_ms()
        return remaining_ms < AnaplanClientConfig.TOKEN_REFRESH_THRESHOLD * 1000

    async def get_valid_token(self) -> str:
        """Get a token, refreshing it first when close to expiry.

        Raises:
            NotConnectedError: If not connected
            AuthenticationError: If the refresh is rejected
        """
        token = self.get_token()
        if self.should_refresh():
            logger.debug("Anaplan token close to expiry, refreshing")
            response = await self._auth_client.refresh_token(token)
            _ = self._store(response)
        return self.get_token()

    # ========================================================================
    # Client Factories
    # ========================================================================

    def create_integration_client(
        self, timeout: float | None = None
    ) -> "IntegrationClient":
        """Create an IntegrationClient using this session's configuration and auth.

        Raises:
            NotConnectedError: If not connected
        """
        # Import here to avoid circular dependency
        from .integration_client import IntegrationClient

        self.verify_connection()
        return IntegrationClient(
            base_url=self._config.integration_url,
            auth_provider=AnaplanTokenAuthProvider(session_manager=self),
            timeout=timeout or self._config.timeout,
        )

    # ========================================================================
    # Cleanup
    # ========================================================================

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        await self._auth_client.close()

    async def __aenter__(self) -> "SessionManager":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
