"""Conversation turns: content blocks, per-role metadata and the turn store."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union

from auriga.models import AgentId, TokenUsage


@dataclass(frozen=True, order=True)
class TurnId:
    """Store-assigned sequential identifier of a turn."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


class TurnStatus(enum.Enum):
    ACTIVE = "active"
    COMPLETE = "complete"


class TurnRole(enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class MessageType(enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class StopReason(enum.Enum):
    END_TURN = "end_turn"
    MAX_TOKENS = "max_tokens"
    STOP_SEQUENCE = "stop_sequence"
    TOOL_USE = "tool_use"


@dataclass
class TextBlock:
    text: str


@dataclass
class ThinkingBlock:
    thinking: str
    signature: str | None = None


@dataclass
class ToolUseBlock:
    id: str
    name: str
    input: Any


@dataclass
class ToolResultBlock:
    """Result of a tool call; content is plain text or a list of blocks."""

    tool_use_id: str
    content: str | list[ContentBlock]
    is_error: bool = False


class ImageSourceType(enum.Enum):
    BASE64 = "base64"
    URL = "url"


@dataclass
class ImageSource:
    source_type: ImageSourceType
    media_type: str
    data: str


@dataclass
class ImageBlock:
    source: ImageSource


ContentBlock = Union[TextBlock, ThinkingBlock, ToolUseBlock, ToolResultBlock, ImageBlock]
MessageContent = Union[str, list]


@dataclass
class UserMeta:
    is_meta: bool = False
    is_compact_summary: bool = False
    source_tool_assistant_uuid: str | None = None


@dataclass
class AssistantMeta:
    model: str | None = None
    stop_reason: StopReason | None = None
    stop_sequence: str | None = None
    usage: TokenUsage | None = None
    request_id: str | None = None


@dataclass
class SystemMeta:
    subtype: str | None = None
    level: str | None = None


TurnMeta = Union[UserMeta, AssistantMeta, SystemMeta]


@dataclass
class Turn:
    """A single message in an agent's conversation."""

    id: TurnId
    agent_id: AgentId
    number: int
    uuid: str
    timestamp: str
    message_type: MessageType
    role: TurnRole
    content: MessageContent
    meta: TurnMeta
    status: TurnStatus = TurnStatus.COMPLETE
    parent_uuid: str | None = None
    session_id: str | None = None
    cwd: str | None = None
    git_branch: str | None = None
    extra: dict = field(default_factory=dict)


@dataclass
class TurnBuilder:
    """Everything about a turn except the identifiers the store assigns."""

    uuid: str
    timestamp: str
    message_type: MessageType
    role: TurnRole
    content: MessageContent
    meta: TurnMeta
    status: TurnStatus = TurnStatus.COMPLETE
    parent_uuid: str | None = None
    session_id: str | None = None
    cwd: str | None = None
    git_branch: str | None = None
    extra: dict = field(default_factory=dict)

    def build(self, turn_id: TurnId, agent_id: AgentId, number: int) -> Turn:
        return Turn(
            id=turn_id,
            agent_id=agent_id,
            number=number,
            uuid=self.uuid,
            timestamp=self.timestamp,
            message_type=self.message_type,
            role=self.role,
            content=self.content,
            meta=self.meta,
            status=self.status,
            parent_uuid=self.parent_uuid,
            session_id=self.session_id,
            cwd=self.cwd,
            git_branch=self.git_branch,
            extra=self.extra,
        )


class TurnStore:
    """Turns of all agents in insertion order."""

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._next_id = 1

    def insert(self, agent_id: AgentId, builder: TurnBuilder) -> TurnId:
        """Store a turn, assigning its id and its per-agent number."""
        number = self.agent_turn_count(agent_id) + 1
        turn_id = TurnId(self._next_id)
        self._next_id += 1
        self._turns.append(builder.build(turn_id, agent_id, number))
        return turn_id

    def get(self, turn_id: TurnId) -> Turn | None:
        return next((t for t in self._turns if t.id == turn_id), None)

    def find_by_uuid(self, uuid: str) -> Turn | None:
        return next((t for t in self._turns if t.uuid == uuid), None)

    def turns_for(self, agent_id: AgentId) -> list[Turn]:
        return [t for t in self._turns if t.agent_id == agent_id]

    def active_turn(self, agent_id: AgentId) -> Turn | None:
        """The most recent active turn of an agent."""
        return next(
            (
                t
                for t in reversed(self._turns)
                if t.agent_id == agent_id and t.status is TurnStatus.ACTIVE
            ),
            None,
        )

    def complete_turn(self, turn_id: TurnId) -> bool:
        """Mark an active turn complete; False if missing or already complete."""
        turn = self.get(turn_id)
        if turn is None or turn.status is not TurnStatus.ACTIVE:
            return False
        turn.status = TurnStatus.COMPLETE
        return True

    def agent_turn_count(self, agent_id: AgentId) -> int:
        return sum(1 for t in self._turns if t.agent_id == agent_id)

    def count(self) -> int:
        return len(self._turns)

    def remove_agent_turns(self, agent_id: AgentId) -> None:
        self._turns = [t for t in self._turns if t.agent_id != agent_id]

    def agent_token_usage(self, agent_id: AgentId) -> TokenUsage:
        """Token usage summed over an agent's assistant turns."""
        total = TokenUsage()
        for turn in self._turns:
            if turn.agent_id != agent_id or not isinstance(turn.meta, AssistantMeta):
                continue
            usage = turn.meta.usage
            if usage is None:
                continue
            total.input_tokens += usage.input_tokens
            total.output_tokens += usage.output_tokens
            if usage.cache_creation_input_tokens is not None:
                total.cache_creation_input_tokens = (
                    total.cache_creation_input_tokens or 0
                ) + usage.cache_creation_input_tokens
            if usage.cache_read_input_tokens is not None:
                total.cache_read_input_tokens = (
                    total.cache_read_input_tokens or 0
                ) + usage.cache_read_input_tokens
        return total