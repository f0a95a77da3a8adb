"""Server configuration for URL management.

Provides centralized configuration for the auth service and the
integration API, loaded from the environment when available.
"""

import os
from dataclasses import dataclass

from .config import AnaplanClientConfig


@dataclass
class ServerPref:
    """Configuration for Anaplan service URLs.

    All fields default to the public Anaplan endpoints but can be customized
    for proxies or test servers.

    Example:
        # Default configuration
        pref = ServerPref()

        # Custom configuration
        pref = ServerPref(integration_url="https://proxy.example.com/2/0")

        # From environment variables
        pref = ServerPref.from_env()
    """

    auth_url: str = AnaplanClientConfig.DEFAULT_AUTH_URL
    integration_url: str = AnaplanClientConfig.DEFAULT_INTEGRATION_URL
    timeout: float = AnaplanClientConfig.DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ServerPref":
        """Create ServerPref from environment variables.

        Environment variables:
            ANAPLAN_AUTH_URL: Auth service URL (default: https://auth.anaplan.com)
            ANAPLAN_INTEGRATION_API_URL: Integration API URL
                (default: https://api.anaplan.com/2/0)
            ANAPLAN_TIMEOUT: Request timeout in seconds (default: 30.0)

        Returns:
            ServerPref with values from environment or defaults
        """
        default = cls()

        return cls(
            auth_url=os.getenv("ANAPLAN_AUTH_URL", default.auth_url),
            integration_url=os.getenv(
                "ANAPLAN_INTEGRATION_API_URL", default.integration_url
            ),
            timeout=float(os.getenv("ANAPLAN_TIMEOUT", str(default.timeout))),
        )
