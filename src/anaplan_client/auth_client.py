"""Low-level client for the Anaplan authentication service.

Provides direct wrappers for the token endpoints without lifecycle management.
For connect/refresh/logout handling, use SessionManager instead.
"""

import base64

import httpx

from .auth import AnaplanTokenAuthProvider
from .auth_models import AuthTokenResponse, TokenValidationResponse
from .config import AnaplanClientConfig
from .http_utils import HttpUtils
from .server_pref import ServerPref


class AuthClient:
    """Low-level client for the Anaplan auth service REST API.

    All methods are async and return parsed Pydantic models.

    Example:
        async with AuthClient() as auth:
            response = await auth.authenticate(username="user@example.com", password="pass")
            print(response.token_info.token_value)
    """

    def __init__(
        self,
        base_url: str | None = None,
        server_pref: ServerPref | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize auth client.

        Args:
            base_url: Auth service URL (overrides server_pref.auth_url)
            server_pref: Server configuration (default: from environment)
            timeout: Request timeout in seconds (default: server_pref.timeout)
        """
        config = server_pref or ServerPref.from_env()
        self.base_url: str = base_url or config.auth_url
        self.timeout: float = timeout or config.timeout

        self._session: httpx.AsyncClient = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
        )

    @staticmethod
    def _token_headers(token: str) -> dict[str, str]:
        return AnaplanTokenAuthProvider(token=token).get_headers()

    async def _post(
        self,
        endpoint: str,
        headers: dict[str, str],
        json: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._session.post(endpoint, headers=headers, json=json)
        except httpx.RequestError as e:
            raise HttpUtils.request_failed(e) from e
        HttpUtils.check_response(response)
        return response

    # ========================================================================
    # Token Management
    # ========================================================================

    async def authenticate(self, username: str, password: str) -> AuthTokenResponse:
        """Create a token with username and password.

        POST /token/authenticate (Basic auth)

        Args:
            username: Anaplan username
            password: Anaplan password

        Returns:
            AuthTokenResponse with token_info

        Raises:
            AuthenticationError: 401 if credentials invalid
            TransportError: On any other failure
        """
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
        response = await self._post(
            AnaplanClientConfig.ENDPOINT_AUTHENTICATE,
            headers={"Authorization": f"Basic {credentials}"},
        )
        return HttpUtils.parse_model(AuthTokenResponse, HttpUtils.json_object(response))

    async def authenticate_with_certificate(
        self,
        certificate: str,
        encoded_data: str,
        encoded_signed_data: str,
    ) -> AuthTokenResponse:
        """Create a token with a CA certificate.

        POST /token/authenticate (CACertificate auth)

        Args:
            certificate: Base64-encoded certificate in PEM format
            encoded_data: Base64-encoded random string (at least 100 bytes)
            encoded_signed_data: Base64-encoded random string signed with the private key

        Returns:
            AuthTokenResponse with token_info

        Raises:
            AuthenticationError: 401 if the certificate is rejected
            TransportError: On any other failure
        """
        response = await self._post(
            AnaplanClientConfig.ENDPOINT_AUTHENTICATE,
            headers={"Authorization": f"CACertificate {certificate}"},
            json={
                "encodedData": encoded_data,
                "encodedSignedData": encoded_signed_data,
            },
        )
        return HttpUtils.parse_model(AuthTokenResponse, HttpUtils.json_object(response))

    async def validate_token(self, token: str) -> TokenValidationResponse:
        """Get details of an existing token.

        GET /token/validate

        The response carries the token expiry and its owner but not the
        token value itself.

        Raises:
            AuthenticationError: 401 if token invalid or expired
        """
        try:
            response = await self._session.get(
                AnaplanClientConfig.ENDPOINT_VALIDATE,
                headers=self._token_headers(token),
            )
        except httpx.RequestError as e:
            raise HttpUtils.request_failed(e) from e
        HttpUtils.check_response(response)
        return HttpUtils.parse_model(TokenValidationResponse, HttpUtils.json_object(response))

    async def refresh_token(self, token: str) -> AuthTokenResponse:
        """Exchange an existing token for a new one.

        POST /token/refresh

        Raises:
            AuthenticationError: 401 if token invalid or expired
        """
        response = await self._post(
            AnaplanClientConfig.ENDPOINT_REFRESH,
            headers=self._token_headers(token),
        )
        return HttpUtils.parse_model(AuthTokenResponse, HttpUtils.json_object(response))

    async def logout(self, token: str) -> None:
        """Revoke a token.

        POST /token/logout

        Raises:
            AuthenticationError: 401 if token already invalid
        """
        _ = await self._post(
            AnaplanClientConfig.ENDPOINT_LOGOUT,
            headers=self._token_headers(token),
        )

    # ========================================================================
    # Cleanup
    # ========================================================================

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        await self._session.aclose()

    async def __aenter__(self) -> "AuthClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
