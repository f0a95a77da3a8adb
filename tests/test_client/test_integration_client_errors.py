from unittest.mock import AsyncMock

import httpx
import pytest

from anaplan_client.auth import AnaplanTokenAuthProvider
from anaplan_client.exceptions import AnaplanClientError, AuthenticationError, TransportError
from anaplan_client.integration_client import IntegrationClient
from conftest import make_page, make_response


@pytest.mark.asyncio
async def test_integration_client_uninitialized_errors():
    """Test that IntegrationClient methods raise RuntimeError when not initialized."""
    client = IntegrationClient()

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.list_workspaces()

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.get_workspace("w1")

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.list_files("w1", "m1")

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.get_all_models()


@pytest.mark.asyncio
async def test_not_found_maps_to_transport_error(integration_client, mock_httpx_client):
    """Test a 404 carries the server's status message."""
    mock_httpx_client.get.return_value = make_response(
        {"status": {"code": 404, "message": "Workspace not found"}}, status_code=404
    )

    with pytest.raises(TransportError, match="Workspace not found") as exc_info:
        await integration_client.get_workspace("missing")

    assert exc_info.value.status_code == 404
    assert not isinstance(exc_info.value, AuthenticationError)


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 403])
async def test_auth_failure_maps_to_authentication_error(
    integration_client, mock_httpx_client, status_code
):
    """Test 401/403 raise AuthenticationError."""
    mock_httpx_client.get.return_value = make_response({}, status_code=status_code)

    with pytest.raises(AuthenticationError) as exc_info:
        await integration_client.list_workspaces()

    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
async def test_network_failure_maps_to_transport_error(integration_client, mock_httpx_client):
    """Test request errors raise TransportError without a status code."""
    mock_httpx_client.get.side_effect = httpx.ConnectTimeout("timed out")

    with pytest.raises(TransportError, match="timed out") as exc_info:
        await integration_client.list_workspaces()

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_error_mid_aggregation_propagates(integration_client, mock_httpx_client):
    """Test a failing page aborts aggregation with the transport error."""
    mock_httpx_client.get.side_effect = [
        make_response(make_page([{"id": "w1", "name": "A"}], 2, payload_key="workspaces")),
        make_response({"status": {"code": 500, "message": "Internal error"}}, status_code=500),
    ]

    with pytest.raises(TransportError, match="Internal error"):
        await integration_client.get_all_workspaces(page_size=1)

    assert mock_httpx_client.get.call_count == 2


@pytest.mark.asyncio
async def test_non_object_body(integration_client, mock_httpx_client):
    """Test a JSON array body is rejected."""
    mock_httpx_client.get.return_value = make_response([1, 2, 3])

    with pytest.raises(TransportError, match="expected dict"):
        await integration_client.list_workspaces()


@pytest.mark.asyncio
async def test_invalid_json_body(integration_client, mock_httpx_client):
    """Test an undecodable body is rejected."""
    response = make_response({})
    response.json.side_effect = ValueError("Expecting value")
    mock_httpx_client.get.return_value = response

    with pytest.raises(TransportError, match="Invalid JSON response"):
        await integration_client.list_workspaces()


@pytest.mark.asyncio
async def test_missing_record_field(integration_client, mock_httpx_client):
    """Test a single record response without its object is rejected."""
    mock_httpx_client.get.return_value = make_response({"status": {"code": 200}})

    with pytest.raises(TransportError, match="missing 'model'"):
        await integration_client.get_model("m1")


@pytest.mark.asyncio
async def test_session_refresh_failure_propagates(integration_client, mock_httpx_client):
    """Test a failing token refresh aborts the request before it is sent."""
    session = AsyncMock()
    session.get_valid_token.side_effect = AuthenticationError("Unauthorized", status_code=401)
    integration_client.auth_provider = AnaplanTokenAuthProvider(session_manager=session)

    with pytest.raises(AuthenticationError):
        await integration_client.list_workspaces()

    mock_httpx_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_collection_record_missing_field(integration_client, mock_httpx_client):
    """Test an aggregated record failing validation raises TransportError."""
    mock_httpx_client.get.side_effect = [
        make_response(make_page([{"id": "w1"}], 1, payload_key="workspaces")),
        make_response(make_page([], 1, payload_key="workspaces", offset=1)),
    ]

    with pytest.raises(TransportError, match="Invalid response format") as exc_info:
        await integration_client.get_all_workspaces()

    assert isinstance(exc_info.value, AnaplanClientError)
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_single_record_missing_field(integration_client, mock_httpx_client):
    """Test a single record failing validation raises TransportError."""
    mock_httpx_client.get.return_value = make_response({"task": {"taskState": "COMPLETE"}})

    with pytest.raises(TransportError, match="Invalid response format"):
        await integration_client.get_import_task("w1", "m1", "112000000000", "T1")


@pytest.mark.asyncio
async def test_start_task_failure(integration_client, mock_httpx_client):
    """Test a rejected task start carries the server's message."""
    mock_httpx_client.post.return_value = make_response(
        {"status": {"code": 409, "message": "Task already running"}}, status_code=409
    )

    with pytest.raises(TransportError, match="Task already running") as exc_info:
        await integration_client.start_process("w1", "m1", "118000000000")

    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_start_and_cancel_uninitialized():
    """Test task control requires the async context manager."""
    client = IntegrationClient()

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.start_import("w1", "m1", "112000000000")

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.cancel_export_task("w1", "m1", "116000000000", "T1")
