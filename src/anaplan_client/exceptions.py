"""Custom exceptions for the Anaplan client."""

from __future__ import annotations


class AnaplanClientError(Exception):
    """Base exception for Anaplan client errors."""

    pass


class TransportError(AnaplanClientError):
    """HTTP request failed (network error or non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize TransportError.

        Args:
            message: Human readable error description
            status_code: HTTP status code, None for network failures
        """
        super().__init__(message)
        self.status_code: int | None = status_code


class AuthenticationError(TransportError):
    """Authentication rejected by the server (401/403)."""

    pass


class ProtocolError(AnaplanClientError):
    """Page envelope does not follow the paging contract."""

    pass


class AggregationCancelledError(AnaplanClientError):
    """Pagination was cancelled between two page fetches.

    Carries whatever had been accumulated before cancellation. This is the
    only way to observe a partial collection; a normal return always holds
    the complete collection.
    """

    def __init__(self, items: list[object], pages_fetched: int) -> None:
        """Initialize AggregationCancelledError.

        Args:
            items: Items accumulated before cancellation
            pages_fetched: Number of pages fetched before cancellation
        """
        super().__init__(
            f"Pagination cancelled after {pages_fetched} page(s), {len(items)} item(s)"
        )
        self.items: list[object] = items
        self.pages_fetched: int = pages_fetched


class NotConnectedError(AnaplanClientError):
    """No authentication token available."""

    def __init__(self) -> None:
        super().__init__("Not connected. Please connect first.")


class TokenExpiredError(AnaplanClientError):
    """Authentication token has expired."""

    def __init__(self) -> None:
        super().__init__("Token expired. Please reconnect.")


class ResourceNotFoundError(AnaplanClientError):
    """Named resource lookup found no match."""

    def __init__(self, resource: str, identifier: str) -> None:
        """Initialize ResourceNotFoundError.

        Args:
            resource: Resource kind (e.g., "workspace", "model")
            identifier: ID or name that was looked up
        """
        super().__init__(f"{resource.capitalize()} not found: {identifier}")
        self.resource: str = resource
        self.identifier: str = identifier
