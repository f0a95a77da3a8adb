"""Pydantic models for the Anaplan integration API.

Field names are snake_case; the camelCase wire names are kept as aliases so
records validate straight from ``response.json()``.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ProtocolError

# JSON type hierarchy
type JSONPrimitive = str | int | float | bool | None
type JSONValue = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]
type JSONObject = dict[str, JSONValue]


class AnaplanModel(BaseModel):
    """Base model accepting both wire (camelCase) and Python field names."""

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", protected_namespaces=()
    )


# ============================================================================
# Page Envelope
# ============================================================================


class Paging(AnaplanModel):
    """Paging block of a collection response (``meta.paging``)."""

    current_page_size: int = Field(
        ..., alias="currentPageSize", ge=0, description="Items in this page"
    )
    total_size: int = Field(
        ..., alias="totalSize", ge=0, description="Items across all pages"
    )
    offset: int = Field(0, ge=0, description="Offset echoed by the server")


class PageMeta(AnaplanModel):
    """Metadata block of a collection response."""

    paging: Paging = Field(..., description="Paging information")
    # Informational only, kept as sent
    schema_uri: JSONValue = Field(
        None, alias="schema", description="Schema URI of the payload items"
    )


class ResponseStatus(AnaplanModel):
    """Status block returned alongside most integration API responses."""

    code: int | None = Field(None, description="Status code")
    message: str | None = Field(None, description="Status message")


class PageEnvelope(BaseModel):
    """One page of a paginated collection.

    The payload list lives under a resource-specific key (``workspaces``,
    ``files``, ``tasks``, ...) and is kept as an extra field.

    Example:
        {
            "meta": {
                "paging": {"currentPageSize": 2, "offset": 0, "totalSize": 2},
                "schema": "https://api.anaplan.com/2/0/objects/workspace"
            },
            "status": {"code": 200, "message": "Success"},
            "workspaces": [{"id": "8a81b09d"}, {"id": "8a81b09e"}]
        }
    """

    model_config = ConfigDict(extra="allow")

    meta: PageMeta = Field(..., description="Paging metadata")
    # Parsed as ResponseStatus when it has that shape, otherwise kept as sent
    status: ResponseStatus | JSONValue = Field(
        None, union_mode="left_to_right", description="Response status"
    )

    @classmethod
    def from_response(cls, data: object) -> "PageEnvelope":
        """Validate a raw page response.

        Args:
            data: Decoded JSON body or an existing PageEnvelope

        Returns:
            Validated PageEnvelope

        Raises:
            ProtocolError: If the body is not an object or lacks meta.paging
        """
        if isinstance(data, PageEnvelope):
            return data
        if not isinstance(data, dict):
            msg = f"Malformed page response: expected object, got {type(data).__name__}"
            raise ProtocolError(msg)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ProtocolError(f"Malformed page response: {e}") from e

    @property
    def paging(self) -> Paging:
        return self.meta.paging

    def payload(self, key: str | None = None) -> list[JSONValue]:
        """Get the payload list of this page.

        Args:
            key: Payload field name; when None the first list-valued field is used

        Returns:
            Payload items in server order

        Raises:
            ProtocolError: If the named field is missing or not a list, or no
                list-valued field exists
        """
        extra = self.model_extra or {}
        if key is not None:
            value = extra.get(key)
            if not isinstance(value, list):
                msg = f"Malformed page response: no list payload under '{key}'"
                raise ProtocolError(msg)
            return value

        for value in extra.values():
            if isinstance(value, list):
                return value
        raise ProtocolError("Malformed page response: no list payload found")


# ============================================================================
# Resource Models
# ============================================================================


class Workspace(AnaplanModel):
    """Workspace the user has access to.

    Example:
        {
            "id": "8a8b8c8d8e8f8g8i",
            "name": "Financial Planning",
            "active": true,
            "sizeAllowance": 1073741824,
            "currentSize": 873741824
        }
    """

    id: str = Field(..., description="Workspace ID")
    name: str = Field(..., description="Workspace name")
    active: bool = Field(True, description="Whether the workspace is active")
    size_allowance: int | None = Field(
        None, alias="sizeAllowance", description="Allowed size in bytes"
    )
    current_size: int | None = Field(
        None, alias="currentSize", description="Current size in bytes"
    )


class Model(AnaplanModel):
    """Model inside a workspace."""

    id: str = Field(..., description="Model ID")
    name: str = Field(..., description="Model name")
    active_state: str | None = Field(
        None, alias="activeState", description="UNLOCKED, ARCHIVED, ..."
    )
    current_workspace_id: str | None = Field(None, alias="currentWorkspaceId")
    current_workspace_name: str | None = Field(None, alias="currentWorkspaceName")
    model_url: str | None = Field(None, alias="modelUrl")
    category_values: list[JSONObject] = Field(
        default_factory=list, alias="categoryValues"
    )


class ImportDefinition(AnaplanModel):
    """Import definition of a model."""

    id: str = Field(..., description="Import ID")
    name: str = Field(..., description="Import name")
    import_data_source_id: str | None = Field(None, alias="importDataSourceId")
    import_type: str | None = Field(None, alias="importType")


class ExportDefinition(AnaplanModel):
    """Export definition of a model."""

    id: str = Field(..., description="Export ID")
    name: str = Field(..., description="Export name")
    export_type: str | None = Field(None, alias="exportType")
    export_format: str | None = Field(None, alias="exportFormat")
    encoding: str | None = Field(None)
    layout: str | None = Field(None)


class Process(AnaplanModel):
    """Process definition of a model."""

    id: str = Field(..., description="Process ID")
    name: str = Field(..., description="Process name")


class Action(AnaplanModel):
    """Action (delete, ...) of a model."""

    id: str = Field(..., description="Action ID")
    name: str = Field(..., description="Action name")
    action_type: str | None = Field(None, alias="actionType")


class ServerFile(AnaplanModel):
    """Import data source file stored on the server."""

    id: str = Field(..., description="File ID")
    name: str = Field(..., description="File name")
    chunk_count: int = Field(0, alias="chunkCount", description="Number of chunks")
    delimiter: str | None = Field(None)
    encoding: str | None = Field(None)
    first_data_row: int | None = Field(None, alias="firstDataRow")
    format: str | None = Field(None)
    header_row: int | None = Field(None, alias="headerRow")
    separator: str | None = Field(None)


class FileChunk(AnaplanModel):
    """Chunk descriptor of a server file."""

    id: str = Field(..., description="Chunk ID")
    name: str | None = Field(None, description="Chunk name")


class Task(AnaplanModel):
    """Import, export or process run."""

    task_id: str = Field(..., alias="taskId", description="Task ID")
    task_state: str | None = Field(
        None, alias="taskState", description="NOT_STARTED, IN_PROGRESS, COMPLETE, ..."
    )
    creation_time: int | None = Field(
        None, alias="creationTime", description="Creation timestamp (milliseconds)"
    )
    progress: float | None = Field(None, description="Progress (0.0-1.0)")
    current_step: str | None = Field(None, alias="currentStep")
    result: JSONObject | None = Field(None, description="Task result once complete")

    @property
    def is_done(self) -> bool:
        """Whether the task reached a terminal state."""
        return self.task_state in ("COMPLETE", "CANCELLED")
