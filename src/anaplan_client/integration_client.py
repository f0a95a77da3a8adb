"""HTTP client for the Anaplan integration API.

Every paged collection endpoint has a ``list_*`` method returning one raw page
(a dict with ``meta.paging`` and a payload list). These methods are the page
fetchers handed to PageAggregator by the ``get_all_*`` helpers, which return
the whole collection as Pydantic models.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar, cast

import httpx
from loguru import logger
from pydantic import BaseModel

from .auth import AuthProvider
from .config import AnaplanClientConfig
from .exceptions import ResourceNotFoundError, TransportError
from .http_utils import HttpUtils
from .models import (
    Action,
    ExportDefinition,
    FileChunk,
    ImportDefinition,
    JSONObject,
    JSONValue,
    Model,
    Process,
    ServerFile,
    Task,
    Workspace,
)
from .pagination import PageAggregator, PageFetcher

M = TypeVar("M", bound=BaseModel)

DEFAULT_PAGE_SIZE = AnaplanClientConfig.DEFAULT_PAGE_SIZE
UNLIMITED_PAGES = AnaplanClientConfig.UNLIMITED_PAGES


def _flag(value: bool) -> str:
    return "true" if value else "false"


class IntegrationClient:
    """HTTP client for integration API operations.

    Examples:
        # Usually created by an authenticated SessionManager
        async with session.create_integration_client() as client:
            workspaces = await client.get_all_workspaces()

        # Direct usage with a static token
        from anaplan_client.auth import AnaplanTokenAuthProvider
        auth = AnaplanTokenAuthProvider(token="0Ae3Mkk8...")
        async with IntegrationClient(auth_provider=auth) as client:
            page = await client.list_files(workspace_id, model_id, limit=100)
    """

    def __init__(
        self,
        base_url: str = AnaplanClientConfig.DEFAULT_INTEGRATION_URL,
        auth_provider: AuthProvider | None = None,
        timeout: float = AnaplanClientConfig.DEFAULT_TIMEOUT,
    ):
        """Initialize the integration client.

        Args:
            base_url: Base URL of the integration API
            auth_provider: Auth provider for authenticated requests
            timeout: Request timeout in seconds
        """
        self._base_url: str = base_url.rstrip("/")
        self.auth_provider: AuthProvider | None = auth_provider
        self._timeout: float = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "IntegrationClient":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(timeout=self._timeout)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self.auth_provider:
            await self.auth_provider.refresh_token_if_needed()
            headers.update(self.auth_provider.get_headers())
        return headers

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")
        return self._client

    @staticmethod
    async def _send(request: Awaitable[httpx.Response]) -> dict[str, object]:
        try:
            response = await request
        except httpx.RequestError as e:
            raise HttpUtils.request_failed(e) from e
        HttpUtils.check_response(response)
        return HttpUtils.json_object(response)

    async def _get(
        self,
        endpoint: str,
        params: dict[str, str | int] | None = None,
    ) -> dict[str, object]:
        """GET an endpoint and return the decoded JSON object.

        Raises:
            RuntimeError: If used outside ``async with``
            AuthenticationError: On 401/403
            TransportError: On any other HTTP or network failure
        """
        client = self._require_client()
        headers = await self._get_headers()
        return await self._send(
            client.get(f"{self._base_url}{endpoint}", params=params, headers=headers)
        )

    async def _post(self, endpoint: str, json: JSONObject) -> dict[str, object]:
        client = self._require_client()
        headers = await self._get_headers()
        return await self._send(
            client.post(f"{self._base_url}{endpoint}", json=json, headers=headers)
        )

    async def _delete(self, endpoint: str) -> dict[str, object]:
        client = self._require_client()
        headers = await self._get_headers()
        return await self._send(client.delete(f"{self._base_url}{endpoint}", headers=headers))

    @staticmethod
    def _field(data: dict[str, object], key: str) -> JSONObject:
        value = data.get(key)
        if not isinstance(value, dict):
            raise TransportError(f"Invalid response format: missing '{key}' object")
        return cast(JSONObject, value)

    # ========================================================================
    # Workspaces
    # ========================================================================

    async def list_workspaces(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        tenant_details: bool = False,
    ) -> dict[str, object]:
        """Get one page of the workspaces the user has access to.

        GET /workspaces (payload key: ``workspaces``)
        """
        return await self._get(
            AnaplanClientConfig.ENDPOINT_WORKSPACES,
            params={
                "tenantDetails": _flag(tenant_details),
                "limit": limit,
                "offset": offset,
            },
        )

    async def get_workspace(
        self, workspace_id: str, tenant_details: bool = False
    ) -> Workspace:
        """Get one workspace.

        GET /workspaces/{workspace_id}
        """
        data = await self._get(
            AnaplanClientConfig.ENDPOINT_WORKSPACE.format(workspace_id=workspace_id),
            params={"tenantDetails": _flag(tenant_details)},
        )
        return HttpUtils.parse_model(Workspace, self._field(data, "workspace"))

    # ========================================================================
    # Models
    # ========================================================================

    async def list_models(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        model_details: bool = False,
        search: str | None = None,
    ) -> dict[str, object]:
        """Get one page of all models the user has access to.

        GET /models (payload key: ``models``)

        Args:
            limit: Page size
            offset: Items to skip
            model_details: Include memory usage and category details
            search: Only models whose name contains this text
        """
        params: dict[str, str | int] = {
            "modelDetails": _flag(model_details),
            "limit": limit,
            "offset": offset,
        }
        if search:
            params["s"] = search
        return await self._get(AnaplanClientConfig.ENDPOINT_MODELS, params=params)

    async def get_model(self, model_id: str, model_details: bool = False) -> Model:
        """Get one model.

        GET /models/{model_id}
        """
        data = await self._get(
            AnaplanClientConfig.ENDPOINT_MODEL.format(model_id=model_id),
            params={"modelDetails": _flag(model_details)},
        )
        return HttpUtils.parse_model(Model, self._field(data, "model"))

    async def list_workspace_models(
        self,
        workspace_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        model_details: bool = False,
    ) -> dict[str, object]:
        """Get one page of the models of a workspace.

        GET /workspaces/{workspace_id}/models (payload key: ``models``)
        """
        return await self._get(
            AnaplanClientConfig.ENDPOINT_WORKSPACE_MODELS.format(workspace_id=workspace_id),
            params={
                "modelDetails": _flag(model_details),
                "limit": limit,
                "offset": offset,
            },
        )

    # ========================================================================
    # Model resources (imports, exports, processes, actions, files)
    # ========================================================================

    async def _list_model_resource(
        self,
        resource: str,
        workspace_id: str,
        model_id: str,
        limit: int,
        offset: int,
    ) -> dict[str, object]:
        endpoint = AnaplanClientConfig.ENDPOINT_MODEL_RESOURCES.format(
            workspace_id=workspace_id, model_id=model_id, resource=resource
        )
        return await self._get(endpoint, params={"limit": limit, "offset": offset})

    async def list_imports(
        self, workspace_id: str, model_id: str, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> dict[str, object]:
        """Get one page of import definitions (payload key: ``imports``)."""
        return await self._list_model_resource("imports", workspace_id, model_id, limit, offset)

    async def list_exports(
        self, workspace_id: str, model_id: str, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> dict[str, object]:
        """Get one page of export definitions (payload key: ``exports``)."""
        return await self._list_model_resource("exports", workspace_id, model_id, limit, offset)

    async def list_processes(
        self, workspace_id: str, model_id: str, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> dict[str, object]:
        """Get one page of processes (payload key: ``processes``)."""
        return await self._list_model_resource(
            "processes", workspace_id, model_id, limit, offset
        )

    async def list_actions(
        self, workspace_id: str, model_id: str, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> dict[str, object]:
        """Get one page of actions (payload key: ``actions``)."""
        return await self._list_model_resource("actions", workspace_id, model_id, limit, offset)

    async def list_files(
        self, workspace_id: str, model_id: str, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> dict[str, object]:
        """Get one page of server files (payload key: ``files``)."""
        return await self._list_model_resource("files", workspace_id, model_id, limit, offset)

    async def list_file_chunks(
        self,
        workspace_id: str,
        model_id: str,
        file_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> dict[str, object]:
        """Get one page of a file's chunk descriptors.

        GET /workspaces/{workspace_id}/models/{model_id}/files/{file_id}/chunks
        (payload key: ``chunks``)
        """
        endpoint = AnaplanClientConfig.ENDPOINT_FILE_CHUNKS.format(
            workspace_id=workspace_id, model_id=model_id, file_id=file_id
        )
        return await self._get(endpoint, params={"limit": limit, "offset": offset})

    async def _get_metadata(
        self, resource: str, workspace_id: str, model_id: str, resource_id: str
    ) -> JSONObject:
        endpoint = AnaplanClientConfig.ENDPOINT_MODEL_RESOURCE.format(
            workspace_id=workspace_id,
            model_id=model_id,
            resource=resource,
            resource_id=resource_id,
        )
        data = await self._get(endpoint)
        return self._field(data, AnaplanClientConfig.get_task_metadata_key(resource))

    async def get_import(self, workspace_id: str, model_id: str, import_id: str) -> JSONObject:
        """Get the metadata of an import definition (``importMetadata``)."""
        return await self._get_metadata("imports", workspace_id, model_id, import_id)

    async def get_export(self, workspace_id: str, model_id: str, export_id: str) -> JSONObject:
        """Get the metadata of an export definition (``exportMetadata``)."""
        return await self._get_metadata("exports", workspace_id, model_id, export_id)

    async def get_process(self, workspace_id: str, model_id: str, process_id: str) -> JSONObject:
        """Get the metadata of a process (``processMetadata``)."""
        return await self._get_metadata("processes", workspace_id, model_id, process_id)

    async def get_action(self, workspace_id: str, model_id: str, action_id: str) -> Action:
        """Get an action's definition.

        GET /workspaces/{workspace_id}/models/{model_id}/actions/{action_id}
        """
        metadata = await self._get_metadata("actions", workspace_id, model_id, action_id)
        return HttpUtils.parse_model(Action, metadata)

    # ========================================================================
    # Tasks
    # ========================================================================

    async def list_tasks(
        self,
        resource: str,
        workspace_id: str,
        model_id: str,
        resource_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> dict[str, object]:
        """Get one page of the runs of an import, export, process or action.

        GET /workspaces/{workspace_id}/models/{model_id}/{resource}/{resource_id}/tasks
        (payload key: ``tasks``)

        Args:
            resource: "imports", "exports", "processes" or "actions"

        Raises:
            ValueError: If resource does not run as a task
        """
        _ = AnaplanClientConfig.get_task_metadata_key(resource)
        endpoint = AnaplanClientConfig.ENDPOINT_TASKS.format(
            workspace_id=workspace_id,
            model_id=model_id,
            resource=resource,
            resource_id=resource_id,
        )
        return await self._get(endpoint, params={"limit": limit, "offset": offset})

    async def list_import_tasks(
        self,
        workspace_id: str,
        model_id: str,
        import_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> dict[str, object]:
        return await self.list_tasks("imports", workspace_id, model_id, import_id, limit, offset)

    async def list_export_tasks(
        self,
        workspace_id: str,
        model_id: str,
        export_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> dict[str, object]:
        return await self.list_tasks("exports", workspace_id, model_id, export_id, limit, offset)

    async def list_process_tasks(
        self,
        workspace_id: str,
        model_id: str,
        process_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> dict[str, object]:
        return await self.list_tasks(
            "processes", workspace_id, model_id, process_id, limit, offset
        )

    async def get_task(
        self,
        resource: str,
        workspace_id: str,
        model_id: str,
        resource_id: str,
        task_id: str,
    ) -> Task:
        """Get the status of one run.

        GET .../{resource}/{resource_id}/tasks/{task_id}
        """
        _ = AnaplanClientConfig.get_task_metadata_key(resource)
        endpoint = AnaplanClientConfig.ENDPOINT_TASK.format(
            workspace_id=workspace_id,
            model_id=model_id,
            resource=resource,
            resource_id=resource_id,
            task_id=task_id,
        )
        data = await self._get(endpoint)
        return HttpUtils.parse_model(Task, self._field(data, "task"))

    async def get_import_task(
        self, workspace_id: str, model_id: str, import_id: str, task_id: str
    ) -> Task:
        return await self.get_task("imports", workspace_id, model_id, import_id, task_id)

    async def get_export_task(
        self, workspace_id: str, model_id: str, export_id: str, task_id: str
    ) -> Task:
        return await self.get_task("exports", workspace_id, model_id, export_id, task_id)

    async def get_process_task(
        self, workspace_id: str, model_id: str, process_id: str, task_id: str
    ) -> Task:
        return await self.get_task("processes", workspace_id, model_id, process_id, task_id)

    async def get_action_task(
        self, workspace_id: str, model_id: str, action_id: str, task_id: str
    ) -> Task:
        return await self.get_task("actions", workspace_id, model_id, action_id, task_id)

    async def start_task(
        self,
        resource: str,
        workspace_id: str,
        model_id: str,
        resource_id: str,
        locale_name: str = AnaplanClientConfig.DEFAULT_LOCALE,
    ) -> Task:
        """Start a run of an import, export, process or delete action.

        POST /workspaces/{workspace_id}/models/{model_id}/{resource}/{resource_id}/tasks

        Args:
            resource: "imports", "exports", "processes" or "actions"
            locale_name: Locale of the run's messages

        Returns:
            The new task (usually only task_id is set)

        Raises:
            ValueError: If resource does not run as a task
        """
        _ = AnaplanClientConfig.get_task_metadata_key(resource)
        endpoint = AnaplanClientConfig.ENDPOINT_TASKS.format(
            workspace_id=workspace_id,
            model_id=model_id,
            resource=resource,
            resource_id=resource_id,
        )
        data = await self._post(endpoint, json={"localeName": locale_name})
        task = HttpUtils.parse_model(Task, self._field(data, "task"))
        logger.info(f"Started {resource} task {task.task_id} for {resource_id}")
        return task

    async def start_import(self, workspace_id: str, model_id: str, import_id: str) -> Task:
        return await self.start_task("imports", workspace_id, model_id, import_id)

    async def start_export(self, workspace_id: str, model_id: str, export_id: str) -> Task:
        return await self.start_task("exports", workspace_id, model_id, export_id)

    async def start_process(self, workspace_id: str, model_id: str, process_id: str) -> Task:
        return await self.start_task("processes", workspace_id, model_id, process_id)

    async def start_delete_action(
        self, workspace_id: str, model_id: str, action_id: str
    ) -> Task:
        return await self.start_task("actions", workspace_id, model_id, action_id)

    async def cancel_task(
        self,
        resource: str,
        workspace_id: str,
        model_id: str,
        resource_id: str,
        task_id: str,
    ) -> Task:
        """Cancel a running task.

        DELETE .../{resource}/{resource_id}/tasks/{task_id}

        The server rolls back the run's changes; the returned task moves to
        CANCELLING and then CANCELLED.
        """
        _ = AnaplanClientConfig.get_task_metadata_key(resource)
        endpoint = AnaplanClientConfig.ENDPOINT_TASK.format(
            workspace_id=workspace_id,
            model_id=model_id,
            resource=resource,
            resource_id=resource_id,
            task_id=task_id,
        )
        data = await self._delete(endpoint)
        logger.info(f"Cancelled {resource} task {task_id}")
        return HttpUtils.parse_model(Task, self._field(data, "task"))

    async def cancel_import_task(
        self, workspace_id: str, model_id: str, import_id: str, task_id: str
    ) -> Task:
        return await self.cancel_task("imports", workspace_id, model_id, import_id, task_id)

    async def cancel_export_task(
        self, workspace_id: str, model_id: str, export_id: str, task_id: str
    ) -> Task:
        return await self.cancel_task("exports", workspace_id, model_id, export_id, task_id)

    async def cancel_process_task(
        self, workspace_id: str, model_id: str, process_id: str, task_id: str
    ) -> Task:
        return await self.cancel_task("processes", workspace_id, model_id, process_id, task_id)

    # ========================================================================
    # Whole collections (via PageAggregator)
    # ========================================================================

    async def _collect(
        self,
        fetch_page: PageFetcher,
        params: dict[str, object],
        payload_key: str,
        model: type[M],
        page_size: int,
        max_pages: int,
        cancel_event: asyncio.Event | None,
    ) -> list[M]:
        aggregator = PageAggregator(
            page_size=page_size, max_pages=max_pages, payload_key=payload_key
        )
        items = await aggregator.aggregate(fetch_page, params, cancel_event=cancel_event)
        logger.debug(f"Collected {len(items)} {payload_key}")
        return [HttpUtils.parse_model(model, item) for item in items]

    async def get_all_workspaces(
        self,
        tenant_details: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Workspace]:
        """Get every workspace the user has access to."""
        return await self._collect(
            self.list_workspaces,
            {"tenant_details": tenant_details},
            "workspaces",
            Workspace,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_models(
        self,
        model_details: bool = False,
        search: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Model]:
        """Get every model the user has access to, optionally filtered by name."""
        return await self._collect(
            self.list_models,
            {"model_details": model_details, "search": search},
            "models",
            Model,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_workspace_models(
        self,
        workspace_id: str,
        model_details: bool = False,
        page_size: int = AnaplanClientConfig.WORKSPACE_MODELS_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Model]:
        """Get every model of a workspace."""
        return await self._collect(
            self.list_workspace_models,
            {"workspace_id": workspace_id, "model_details": model_details},
            "models",
            Model,
            page_size,
            max_pages,
            cancel_event,
        )

    async def _collect_model_resource(
        self,
        fetch_page: PageFetcher,
        payload_key: str,
        model: type[M],
        workspace_id: str,
        model_id: str,
        page_size: int,
        max_pages: int,
        cancel_event: asyncio.Event | None,
    ) -> list[M]:
        return await self._collect(
            fetch_page,
            {"workspace_id": workspace_id, "model_id": model_id},
            payload_key,
            model,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_imports(
        self,
        workspace_id: str,
        model_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[ImportDefinition]:
        """Get every import definition of a model."""
        return await self._collect_model_resource(
            self.list_imports,
            "imports",
            ImportDefinition,
            workspace_id,
            model_id,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_exports(
        self,
        workspace_id: str,
        model_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[ExportDefinition]:
        """Get every export definition of a model."""
        return await self._collect_model_resource(
            self.list_exports,
            "exports",
            ExportDefinition,
            workspace_id,
            model_id,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_processes(
        self,
        workspace_id: str,
        model_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Process]:
        """Get every process of a model."""
        return await self._collect_model_resource(
            self.list_processes,
            "processes",
            Process,
            workspace_id,
            model_id,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_actions(
        self,
        workspace_id: str,
        model_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Action]:
        """Get every action of a model."""
        return await self._collect_model_resource(
            self.list_actions,
            "actions",
            Action,
            workspace_id,
            model_id,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_files(
        self,
        workspace_id: str,
        model_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[ServerFile]:
        """Get every server file of a model."""
        return await self._collect_model_resource(
            self.list_files,
            "files",
            ServerFile,
            workspace_id,
            model_id,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_file_chunks(
        self,
        workspace_id: str,
        model_id: str,
        file_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[FileChunk]:
        """Get every chunk descriptor of a server file."""
        return await self._collect(
            self.list_file_chunks,
            {"workspace_id": workspace_id, "model_id": model_id, "file_id": file_id},
            "chunks",
            FileChunk,
            page_size,
            max_pages,
            cancel_event,
        )

    async def get_all_tasks(
        self,
        resource: str,
        workspace_id: str,
        model_id: str,
        resource_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Task]:
        """Get every run of an import, export, process or action.

        Args:
            resource: "imports", "exports", "processes" or "actions"
        """
        return await self._collect(
            self.list_tasks,
            {
                "resource": resource,
                "workspace_id": workspace_id,
                "model_id": model_id,
                "resource_id": resource_id,
            },
            "tasks",
            Task,
            page_size,
            max_pages,
            cancel_event,
        )

    # ========================================================================
    # Lookups
    # ========================================================================

    async def find_workspace(
        self,
        workspace_id: str | None = None,
        workspace_name: str | None = None,
    ) -> Workspace:
        """Get a workspace by ID or by name.

        When both are given the ID is used. Name lookups scan all workspaces.

        Raises:
            ValueError: If neither workspace_id nor workspace_name is given
            ResourceNotFoundError: If no workspace has the given name
        """
        if not workspace_id and not workspace_name:
            raise ValueError("Please provide a workspace_id or workspace_name.")

        if workspace_id:
            return await self.get_workspace(workspace_id)

        assert workspace_name is not None
        for workspace in await self.get_all_workspaces():
            if workspace.name == workspace_name:
                return workspace
        raise ResourceNotFoundError("workspace", workspace_name)

    async def find_model(
        self,
        workspace_id: str,
        model_id: str | None = None,
        model_name: str | None = None,
        model_details: bool = False,
    ) -> Model:
        """Get a model of a workspace by ID or by name.

        When both are given the ID is used.

        Raises:
            ValueError: If neither model_id nor model_name is given
            ResourceNotFoundError: If no model of the workspace has the given name
        """
        if not model_id and not model_name:
            raise ValueError("Either model_id or model_name must be provided.")

        if model_id:
            return await self.get_model(model_id, model_details=model_details)

        assert model_name is not None
        models = await self.get_all_workspace_models(workspace_id, model_details=model_details)
        for model in models:
            if model.name == model_name:
                return model
        raise ResourceNotFoundError("model", model_name)

    async def get_all_items(
        self,
        fetch_page: PageFetcher,
        params: dict[str, object] | None = None,
        payload_key: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = UNLIMITED_PAGES,
        cancel_event: asyncio.Event | None = None,
    ) -> list[JSONValue]:
        """Aggregate any paged fetcher into raw items.

        Escape hatch for endpoints without a dedicated ``get_all_*`` helper.
        """
        aggregator = PageAggregator(
            page_size=page_size, max_pages=max_pages, payload_key=payload_key
        )
        return await aggregator.aggregate(fetch_page, params, cancel_event=cancel_event)
