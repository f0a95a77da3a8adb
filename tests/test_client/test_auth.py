"""Tests for auth.py"""

from unittest.mock import AsyncMock, Mock

import pytest

from anaplan_client.auth import (
    AnaplanTokenAuthProvider,
    AuthProvider,
    NoAuthProvider,
    get_default_auth,
)


def test_no_auth_provider():
    """Test NoAuthProvider returns empty headers."""
    provider = NoAuthProvider()
    headers = provider.get_headers()

    assert headers == {}
    assert isinstance(provider, AuthProvider)


def test_token_auth_provider():
    """Test AnaplanTokenAuthProvider uses the AnaplanAuthToken scheme."""
    provider = AnaplanTokenAuthProvider(token="test-token-123")
    headers = provider.get_headers()

    assert headers == {"Authorization": "AnaplanAuthToken test-token-123"}
    assert isinstance(provider, AuthProvider)


def test_token_auth_provider_requires_source():
    """Test that a token or session manager is required."""
    with pytest.raises(ValueError, match="Either token or session_manager"):
        AnaplanTokenAuthProvider()


def test_token_auth_provider_session_mode():
    """Test that the token is read from the session manager."""
    session = Mock()
    session.get_token.return_value = "session-token"
    provider = AnaplanTokenAuthProvider(session_manager=session)

    assert provider.get_headers()["Authorization"] == "AnaplanAuthToken session-token"
    session.get_token.assert_called_once()


def test_token_auth_provider_without_token_source():
    """Test get_token raises when both token sources are gone."""
    provider = AnaplanTokenAuthProvider(token="test-token-123")
    provider._token = None

    with pytest.raises(ValueError, match="No token available"):
        provider.get_headers()


@pytest.mark.asyncio
async def test_refresh_delegates_to_session_manager():
    """Test that refresh_token_if_needed asks the session for a valid token."""
    session = Mock()
    session.get_valid_token = AsyncMock(return_value="fresh")
    provider = AnaplanTokenAuthProvider(session_manager=session)

    await provider.refresh_token_if_needed()

    session.get_valid_token.assert_awaited_once()


@pytest.mark.asyncio
async def test_refresh_noop_for_static_token():
    """Test that static tokens and no-auth need no refresh."""
    await AnaplanTokenAuthProvider(token="t").refresh_token_if_needed()
    await NoAuthProvider().refresh_token_if_needed()


def test_get_default_auth():
    """Test get_default_auth returns NoAuthProvider."""
    provider = get_default_auth()

    assert isinstance(provider, NoAuthProvider)
    assert provider.get_headers() == {}


def test_auth_provider_is_abstract():
    """Test that AuthProvider cannot be instantiated directly."""
    with pytest.raises(TypeError):
        AuthProvider()  # type: ignore[abstract]
