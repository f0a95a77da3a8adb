"""Python client library for the Anaplan auth service and integration API.

Public API exports for client library usage.
"""

from .auth import AnaplanTokenAuthProvider, AuthProvider, NoAuthProvider, get_default_auth
from .auth_client import AuthClient
from .auth_models import (
    AuthTokenResponse,
    TokenDetails,
    TokenInfo,
    TokenValidationResponse,
    UserInfo,
)
from .config import AnaplanClientConfig
from .exceptions import (
    AggregationCancelledError,
    AnaplanClientError,
    AuthenticationError,
    NotConnectedError,
    ProtocolError,
    ResourceNotFoundError,
    TokenExpiredError,
    TransportError,
)
from .integration_client import IntegrationClient
from .models import (
    Action,
    ExportDefinition,
    FileChunk,
    ImportDefinition,
    Model,
    PageEnvelope,
    PageMeta,
    Paging,
    Process,
    ResponseStatus,
    ServerFile,
    Task,
    Workspace,
)
from .pagination import PageAggregator, aggregate
from .server_pref import ServerPref
from .session_manager import SessionManager

__all__ = [
    # Clients
    "AuthClient",
    "IntegrationClient",
    "SessionManager",
    # Pagination
    "PageAggregator",
    "aggregate",
    # Configuration
    "AnaplanClientConfig",
    "ServerPref",
    # Models
    "PageEnvelope",
    "PageMeta",
    "Paging",
    "ResponseStatus",
    "Workspace",
    "Model",
    "ImportDefinition",
    "ExportDefinition",
    "Process",
    "Action",
    "ServerFile",
    "FileChunk",
    "Task",
    # Auth Models
    "TokenDetails",
    "TokenInfo",
    "AuthTokenResponse",
    "TokenValidationResponse",
    "UserInfo",
    # Exceptions
    "AnaplanClientError",
    "TransportError",
    "AuthenticationError",
    "ProtocolError",
    "AggregationCancelledError",
    "NotConnectedError",
    "TokenExpiredError",
    "ResourceNotFoundError",
    # Auth
    "AuthProvider",
    "NoAuthProvider",
    "AnaplanTokenAuthProvider",
    "get_default_auth",
]
