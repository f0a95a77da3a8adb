"""Configuration for the Anaplan client.

All endpoints and default parameters are defined here as class variables.
This enables easy modification without changing code throughout the library.
"""


class AnaplanClientConfig:
    """Configuration for the Anaplan client.

    All endpoints and default parameters are defined here as class variables.
    This enables easy modification without changing code throughout the library.
    """

    # Server Connection
    DEFAULT_AUTH_URL: str = "https://auth.anaplan.com"
    DEFAULT_INTEGRATION_URL: str = "https://api.anaplan.com/2/0"
    DEFAULT_TIMEOUT: float = 30.0

    # Auth service endpoints
    ENDPOINT_AUTHENTICATE: str = "/token/authenticate"
    ENDPOINT_VALIDATE: str = "/token/validate"
    ENDPOINT_REFRESH: str = "/token/refresh"
    ENDPOINT_LOGOUT: str = "/token/logout"

    # Integration API endpoints
    ENDPOINT_WORKSPACES: str = "/workspaces"
    ENDPOINT_WORKSPACE: str = "/workspaces/{workspace_id}"
    ENDPOINT_MODELS: str = "/models"
    ENDPOINT_MODEL: str = "/models/{model_id}"
    ENDPOINT_WORKSPACE_MODELS: str = "/workspaces/{workspace_id}/models"
    ENDPOINT_MODEL_RESOURCES: str = (
        "/workspaces/{workspace_id}/models/{model_id}/{resource}"
    )
    ENDPOINT_MODEL_RESOURCE: str = (
        "/workspaces/{workspace_id}/models/{model_id}/{resource}/{resource_id}"
    )
    ENDPOINT_FILE_CHUNKS: str = (
        "/workspaces/{workspace_id}/models/{model_id}/files/{file_id}/chunks"
    )
    ENDPOINT_TASKS: str = (
        "/workspaces/{workspace_id}/models/{model_id}/{resource}/{resource_id}/tasks"
    )
    ENDPOINT_TASK: str = (
        "/workspaces/{workspace_id}/models/{model_id}/{resource}/{resource_id}/tasks/{task_id}"
    )

    # Resource kinds that run as tasks (path segment -> single-record key)
    TASK_RESOURCES: dict[str, str] = {
        "imports": "importMetadata",
        "exports": "exportMetadata",
        "processes": "processMetadata",
        "actions": "action",
    }

    # Locale sent when starting a task
    DEFAULT_LOCALE: str = "en_US"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 1000
    UNLIMITED_PAGES: int = -1
    WORKSPACE_MODELS_PAGE_SIZE: int = 5000

    # Token lifecycle
    TOKEN_REFRESH_THRESHOLD: float = 60.0
    TOKEN_EXPIRY_MARGIN_MS: int = 10

    @classmethod
    def get_task_metadata_key(cls, resource: str) -> str:
        """Get the response key holding a task resource's metadata.

        Args:
            resource: Resource path segment (e.g., "imports")

        Returns:
            Response key name

        Raises:
            ValueError: If resource does not run as a task
        """
        if resource not in cls.TASK_RESOURCES:
            msg = (
                f"Unknown task resource: {resource}. "
                f"Available: {list(cls.TASK_RESOURCES.keys())}"
            )
            raise ValueError(msg)
        return cls.TASK_RESOURCES[resource]
