"""Modular authentication system.

Auth providers follow a simple protocol: they must implement get_headers().
This allows easy swapping between no-auth (tests, proxies) and token auth.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .session_manager import SessionManager


class AuthProvider(ABC):
    """Abstract base class for auth providers (protocol-based)."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Get authentication headers for HTTP requests.

        Returns:
            Dictionary of headers to add to requests
        """
        pass

    async def refresh_token_if_needed(self) -> None:
        """Refresh credentials before a request (no-op by default)."""
        return None


class NoAuthProvider(AuthProvider):
    """No authentication.

    Returns empty headers for all requests.
    """

    def get_headers(self) -> dict[str, str]:
        return {}


class AnaplanTokenAuthProvider(AuthProvider):
    """Anaplan token authentication.

    Supports two modes:
    1. Direct token mode: Initialized with a static token string
    2. SessionManager mode: Reads the token from a SessionManager, which
       refreshes it when close to expiry

    Example (Direct mode):
        provider = AnaplanTokenAuthProvider(token="0Ae3Mkk8...")
        headers = provider.get_headers()

    Example (SessionManager mode):
        provider = AnaplanTokenAuthProvider(session_manager=session)
        await provider.refresh_token_if_needed()
        headers = provider.get_headers()
    """

    SCHEME: str = "AnaplanAuthToken"

    def __init__(
        self,
        token: str | None = None,
        session_manager: "SessionManager | None" = None,
    ) -> None:
        """Initialize token auth provider.

        Args:
            token: Static Anaplan auth token
            session_manager: SessionManager instance (for auto-refresh mode)

        Raises:
            ValueError: If neither token nor session_manager is provided
        """
        if token is None and session_manager is None:
            raise ValueError("Either token or session_manager must be provided")

        self._token = token
        self._session_manager = session_manager

    def get_token(self) -> str:
        """Get current token.

        Returns:
            Current Anaplan auth token

        Raises:
            NotConnectedError: If the session manager holds no token
            ValueError: If no token is available
        """
        if self._token is not None:
            return self._token

        if self._session_manager is not None:
            return self._session_manager.get_token()

        raise ValueError("No token available")

    async def refresh_token_if_needed(self) -> None:
        """Let the session manager refresh its token when close to expiry."""
        if self._session_manager is not None:
            _ = await self._session_manager.get_valid_token()

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers with the Anaplan token scheme.

        Returns:
            Authorization header (``AnaplanAuthToken <token>``)
        """
        return {"Authorization": f"{self.SCHEME} {self.get_token()}"}


def get_default_auth() -> AuthProvider:
    """Get default auth provider.

    Returns:
        NoAuthProvider instance
    """
    return NoAuthProvider()
