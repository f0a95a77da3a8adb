"""Tests for server_pref.py"""

import pytest

from anaplan_client.server_pref import ServerPref


class TestServerPref:
    """Tests for ServerPref dataclass."""

    def test_defaults(self):
        """Test ServerPref with default values."""
        pref = ServerPref()

        assert pref.auth_url == "https://auth.anaplan.com"
        assert pref.integration_url == "https://api.anaplan.com/2/0"
        assert pref.timeout == 30.0

    def test_custom_values(self):
        """Test ServerPref with custom values."""
        pref = ServerPref(
            auth_url="https://auth.example.com",
            integration_url="https://api.example.com/2/0",
            timeout=5.0,
        )

        assert pref.auth_url == "https://auth.example.com"
        assert pref.integration_url == "https://api.example.com/2/0"
        assert pref.timeout == 5.0

    def test_from_env_all_vars(self, monkeypatch: pytest.MonkeyPatch):
        """Test ServerPref.from_env() with all environment variables set."""
        monkeypatch.setenv("ANAPLAN_AUTH_URL", "https://auth.proxy.example.com")
        monkeypatch.setenv("ANAPLAN_INTEGRATION_API_URL", "https://api.proxy.example.com/2/0")
        monkeypatch.setenv("ANAPLAN_TIMEOUT", "12.5")

        pref = ServerPref.from_env()

        assert pref.auth_url == "https://auth.proxy.example.com"
        assert pref.integration_url == "https://api.proxy.example.com/2/0"
        assert pref.timeout == 12.5

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Test ServerPref.from_env() falls back to defaults."""
        monkeypatch.delenv("ANAPLAN_AUTH_URL", raising=False)
        monkeypatch.delenv("ANAPLAN_INTEGRATION_API_URL", raising=False)
        monkeypatch.delenv("ANAPLAN_TIMEOUT", raising=False)

        pref = ServerPref.from_env()

        assert pref == ServerPref()
