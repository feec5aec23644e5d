"""Standard API response envelope and JSON output modes."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any

DEFAULT_SUCCESS_CODE = "0"
DEFAULT_ERROR_CODE = "-1"
DEFAULT_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class ApiJson:
    """An API response: either data with a code, or an error with a code and message."""

    code: str | None = None
    data: Any = None
    error: str | None = None
    is_error: bool = False

    @classmethod
    def ok(cls, data: Any) -> ApiJson:
        return cls(data=data)

    @classmethod
    def data_with_code(cls, data: Any, code: str) -> ApiJson:
        return cls(code=code, data=data)

    @classmethod
    def error_builder(cls) -> ApiJsonErrorBuilder:
        return ApiJsonErrorBuilder()

    @classmethod
    def no_content(cls) -> ApiJson:
        return cls(data=None)

    @classmethod
    def default_error(cls) -> ApiJson:
        return cls(code=DEFAULT_ERROR_CODE, error=DEFAULT_ERROR_MESSAGE, is_error=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the response."""
        if self.is_error:
            result: dict[str, Any] = {
                "code": self.code if self.code is not None else DEFAULT_ERROR_CODE
            }
            if self.error is not None:
                result["message"] = self.error
            return result
        return {
            "code": self.code if self.code is not None else DEFAULT_SUCCESS_CODE,
            "data": self.data,
        }


@dataclass
class ApiJsonErrorBuilder:
    """Builds an error :class:`ApiJson`, filling in defaults for unset parts."""

    _code: str | None = None
    _error: str | None = None

    def code(self, code: str) -> ApiJsonErrorBuilder:
        self._code = code
        return self

    def error(self, error: str) -> ApiJsonErrorBuilder:
        self._error = error
        return self

    def build(self) -> ApiJson:
        return ApiJson(
            code=self._code if self._code is not None else DEFAULT_ERROR_CODE,
            error=self._error if self._error is not None else DEFAULT_ERROR_MESSAGE,
            is_error=True,
        )


def _default(obj: Any) -> Any:
    if isinstance(obj, ApiJson):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JsonMode(enum.Enum):
    """Compact or pretty JSON output."""

    NORMAL = "normal"
    PRETTY = "pretty"

    def to_string(self, value: Any) -> str:
        if self is JsonMode.PRETTY:
            return json.dumps(value, indent=2, ensure_ascii=False, default=_default)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_default)

    def to_bytes(self, value: Any) -> bytes:
        return self.to_string(value).encode("utf-8")