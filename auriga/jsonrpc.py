"""JSON-RPC 2.0 request parsing and response building."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

PARSE_ERROR = -32700


class JsonRpcParseError(ValueError):
    """Raised when a request body is not a valid JSON-RPC request."""

    code = PARSE_ERROR


@dataclass
class Request:
    """An incoming JSON-RPC 2.0 request or notification."""

    jsonrpc: str
    method: str
    id: Any = None
    params: Any = None

    @classmethod
    def from_json(cls, raw: str | bytes) -> Request:
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise JsonRpcParseError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Any) -> Request:
        if not isinstance(data, dict):
            raise JsonRpcParseError("request must be a JSON object")
        jsonrpc = data.get("jsonrpc")
        method = data.get("method")
        if not isinstance(jsonrpc, str):
            raise JsonRpcParseError("missing or invalid field: jsonrpc")
        if not isinstance(method, str):
            raise JsonRpcParseError("missing or invalid field: method")
        return cls(
            jsonrpc=jsonrpc,
            method=method,
            id=data.get("id"),
            params=data.get("params"),
        )

    def is_notification(self) -> bool:
        """True when the request carries no id and expects no response."""
        return self.id is None


@dataclass
class RpcError:
    code: int
    message: str


@dataclass
class Response:
    """An outgoing JSON-RPC 2.0 response: either a result or an error."""

    id: Any = None
    result: Any = None
    error: RpcError | None = None
    jsonrpc: str = "2.0"

    @classmethod
    def success(cls, request_id: Any, result: Any) -> Response:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, code: int, message: str) -> Response:
        return cls(id=request_id, error=RpcError(code, message))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.id is not None:
            data["id"] = self.id
        if self.error is None:
            data["result"] = self.result
        else:
            data["error"] = {"code": self.error.code, "message": self.error.message}
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))