"""Shared fixtures for unit tests (no live Anaplan tenant needed)."""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from anaplan_client.integration_client import IntegrationClient


def make_page(
    items: list[object],
    total_size: int,
    payload_key: str = "items",
    offset: int = 0,
) -> dict[str, object]:
    """Build an integration API page envelope."""
    return {
        "meta": {
            "paging": {
                "currentPageSize": len(items),
                "offset": offset,
                "totalSize": total_size,
            },
            "schema": f"https://api.anaplan.com/2/0/objects/{payload_key}",
        },
        "status": {"code": 200, "message": "Success"},
        payload_key: items,
    }


def make_response(json_data: object, status_code: int = 200) -> Mock:
    """Build a mocked httpx.Response."""
    response = Mock(spec=httpx.Response)
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = str(json_data)
    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}",
            request=Mock(spec=httpx.Request),
            response=response,
        )
    else:
        response.raise_for_status = Mock()
    return response


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx.AsyncClient."""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
async def integration_client(mock_httpx_client):
    """Create IntegrationClient with mocked httpx client."""
    client = IntegrationClient(base_url="https://api.example.com/2/0")
    await client.__aenter__()
    await client._client.aclose()
    # Replace the real client with our mock
    client._client = mock_httpx_client
    yield client
