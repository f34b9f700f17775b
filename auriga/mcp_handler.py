"""MCP tool handling: turns JSON-RPC requests into events for the main loop."""

from __future__ import annotations

import json
import queue
from dataclasses import dataclass, field
from typing import Any, Union

from auriga.jsonrpc import Request, Response

METHOD_NOT_FOUND = -32601
PROTOCOL_VERSION = "2024-11-05"

TOOL_LIST_AGENTS = "list_agents"
TOOL_SEND_MESSAGE = "send_message"

_SEND_FAILURES: tuple[type[BaseException], ...] = tuple(
    exc for exc in (queue.Full, getattr(queue, "ShutDown", None)) if exc is not None
)


@dataclass(frozen=True)
class AgentInfo:
    """What other agents learn about an agent."""

    id: str
    name: str
    status: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "status": self.status}


@dataclass(frozen=True)
class ListAgents:
    """Ask the main loop for every running agent."""


@dataclass(frozen=True)
class SendMessage:
    """Ask the main loop to deliver a message from one agent to another."""

    from_agent_name: str
    to_agent_name: str
    message: str


McpRequest = Union[ListAgents, SendMessage]


@dataclass
class Agents:
    agents: list[AgentInfo] = field(default_factory=list)


@dataclass(frozen=True)
class MessageSent:
    """The message reached its target."""


@dataclass(frozen=True)
class McpFailure:
    message: str


McpResponse = Union[Agents, MessageSent, McpFailure]


@dataclass
class McpEvent:
    """A request for the main loop together with the way to answer it."""

    request: McpRequest
    _responses: queue.Queue = field(
        default_factory=queue.Queue, init=False, repr=False, compare=False
    )

    def reply(self, response: McpResponse | None) -> None:
        """Answer the waiting handler; None means the request was dropped."""
        self._responses.put(response)

    def _wait(self) -> McpResponse | None:
        return self._responses.get()


def handle_request(request: Request, events: queue.Queue) -> Response | None:
    """Answer a JSON-RPC request; None for notifications that need no reply.

    Tool calls are put on ``events`` and block until the main loop replies.
    """
    method = request.method
    if method == "initialize":
        return _handle_initialize(request)
    if method == "notifications/initialized":
        return None
    if method == "tools/list":
        return _handle_tools_list(request)
    if method == "tools/call":
        return _handle_tools_call(request, events)
    return Response.failure(request.id, METHOD_NOT_FOUND, f"Method not found: {method}")


def _handle_initialize(request: Request) -> Response:
    return Response.success(
        request.id,
        {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": "auriga", "version": "0.1.0"},
            "instructions": (
                "You are one of several AI agents running inside an Auriga. "
                "Your agent name is in the AURIGA_AGENT_NAME environment variable. "
                "Use list_agents to discover other agents and send_message to "
                "coordinate with them."
            ),
        },
    )


def _handle_tools_list(request: Request) -> Response:
    return Response.success(
        request.id,
        {
            "tools": [
                {
                    "name": TOOL_LIST_AGENTS,
                    "description": (
                        "List all agents currently running in Auriga. Returns each "
                        "agent's UUID, name, and current status."
                    ),
                    "inputSchema": {
                        "type": "object",
                        "properties": {},
                        "required": [],
                    },
                },
                {
                    "name": TOOL_SEND_MESSAGE,
                    "description": (
                        "Send a message to another agent. Use list_agents first to "
                        "get valid agent names."
                    ),
                    "inputSchema": {
                        "type": "object",
                        "properties": {
                            "from_agent_name": {
                                "type": "string",
                                "description": "Your own agent name from AURIGA_AGENT_NAME.",
                            },
                            "to_agent_name": {
                                "type": "string",
                                "description": "The exact target agent name from list_agents.",
                            },
                            "message": {
                                "type": "string",
                                "description": "The message to send.",
                            },
                        },
                        "required": ["from_agent_name", "to_agent_name", "message"],
                    },
                },
            ]
        },
    )


def _string_arg(arguments: dict[str, Any], name: str) -> str | None:
    value = arguments.get(name)
    return value if isinstance(value, str) else None


def _handle_tools_call(request: Request, events: queue.Queue) -> Response:
    params = request.params if isinstance(request.params, dict) else {}
    tool_name = params.get("name")
    if not isinstance(tool_name, str):
        tool_name = ""
    arguments = params.get("arguments")
    if not isinstance(arguments, dict):
        arguments = {}

    mcp_request: McpRequest
    if tool_name == TOOL_LIST_AGENTS:
        mcp_request = ListAgents()
    elif tool_name == TOOL_SEND_MESSAGE:
        values = {}
        for name in ("from_agent_name", "to_agent_name", "message"):
            value = _string_arg(arguments, name)
            if value is None:
                return _tool_error(request, f"Missing required parameter: {name}")
            values[name] = value
        mcp_request = SendMessage(**values)
    else:
        return _tool_error(request, f"Unknown tool: {tool_name}")

    event = McpEvent(mcp_request)
    try:
        events.put_nowait(event)
    except _SEND_FAILURES:
        return _tool_error(request, "Auriga is shutting down")

    response = event._wait()
    if isinstance(response, Agents):
        text = json.dumps(
            [agent.to_dict() for agent in response.agents], indent=2, ensure_ascii=False
        )
        return _tool_success(request, text)
    if isinstance(response, MessageSent):
        return _tool_success(request, "Message delivered to agent.")
    if isinstance(response, McpFailure):
        return _tool_error(request, response.message)
    return _tool_error(request, "Failed to get response from auriga")


def _tool_result(request: Request, text: str, is_error: bool) -> Response:
    return Response.success(
        request.id,
        {"content": [{"type": "text", "text": text}], "isError": is_error},
    )


def _tool_success(request: Request, text: str) -> Response:
    return _tool_result(request, text, False)


def _tool_error(request: Request, message: str) -> Response:
    return _tool_result(request, message, True)