from __future__ import annotations

from typing import TypeVar, cast

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from .exceptions import AuthenticationError, TransportError

M = TypeVar("M", bound=BaseModel)


class HttpUtils:
    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract the server's error message from a failed response.

        Integration API errors look like ``{"status": {"code": 404, "message": "..."}}``;
        anything else falls back to the raw body.
        """
        try:
            body = cast(object, response.json())
        except ValueError:
            return response.text

        if isinstance(body, dict):
            status = cast(dict[str, object], body).get("status")
            if isinstance(status, dict):
                message = cast(dict[str, object], status).get("message")
                if message:
                    return str(message)
            status_message = cast(dict[str, object], body).get("statusMessage")
            if status_message:
                return str(status_message)
        return str(body)

    @staticmethod
    def check_response(response: httpx.Response) -> None:
        """Raise TransportError (or AuthenticationError) for non-2xx responses."""
        try:
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            detail = HttpUtils._error_detail(e.response)
            logger.error(f"API response error ({status_code}): {detail}")
            if status_code in (401, 403):
                raise AuthenticationError(detail, status_code=status_code) from e
            raise TransportError(detail, status_code=status_code) from e

    @staticmethod
    def request_failed(error: httpx.RequestError) -> TransportError:
        """Wrap a network level failure (no response received)."""
        logger.error(f"No response received: {error}")
        return TransportError(f"Request failed: {error}")

    @staticmethod
    def json_object(response: httpx.Response) -> dict[str, object]:
        """Decode a JSON object body.

        Raises:
            TransportError: If the body is not a JSON object
        """
        try:
            data_raw = cast(object, response.json())
        except ValueError as e:
            raise TransportError(f"Invalid JSON response: {e}") from e
        if not isinstance(data_raw, dict):
            msg = f"Invalid response format: expected dict, got {type(data_raw).__name__}"
            raise TransportError(msg)
        return cast(dict[str, object], data_raw)

    @staticmethod
    def parse_model(model: type[M], data: object) -> M:
        """Validate a decoded response record into a model.

        Raises:
            TransportError: If the record does not match the model
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} in response: {e}")
            raise TransportError(f"Invalid response format: {e}") from e
