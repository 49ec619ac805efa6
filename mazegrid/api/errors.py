from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ApiErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DIFFICULTY_NOT_FOUND = "DIFFICULTY_NOT_FOUND"
    GRID_NOT_FOUND = "GRID_NOT_FOUND"
    GRID_DATA_UNAVAILABLE = "GRID_DATA_UNAVAILABLE"


class ApiError(BaseModel):
    error: str
    code: str
    details: Any | None = Field(default=None)


DEFAULT_MESSAGES: dict[str, str] = {
    ApiErrorCode.VALIDATION_ERROR.value: "Invalid request",
    ApiErrorCode.HTTP_ERROR.value: "Request failed",
    ApiErrorCode.INTERNAL_ERROR.value: "Internal server error",
    ApiErrorCode.DIFFICULTY_NOT_FOUND.value: "Difficulty not found",
    ApiErrorCode.GRID_NOT_FOUND.value: "Grid not found",
    ApiErrorCode.GRID_DATA_UNAVAILABLE.value: "Failed to retrieve maze grids",
}


class ApiException(Exception):
    def __init__(
        self,
        *,
        status_code: int,
        code: ApiErrorCode | str,
        message: str | None = None,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code.value if isinstance(code, ApiErrorCode) else code
        self.message = message or DEFAULT_MESSAGES.get(self.code, "Request failed")
        self.details = details
        super().__init__(self.message)


def make_error_payload(code: ApiErrorCode | str, message: str, details: Any | None = None) -> dict[str, Any]:
    code_value = code.value if isinstance(code, ApiErrorCode) else code
    return ApiError(error=message, code=code_value, details=details).model_dump(exclude_none=True)


__all__ = [
    "ApiError",
    "ApiErrorCode",
    "ApiException",
    "make_error_payload",
]
