"""Core data types shared by the stores: agents, file entries, traces."""

from __future__ import annotations

import enum
import threading
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path

_clock_lock = threading.Lock()
_last_tick = 0


def _tick() -> int:
    """Return a strictly increasing monotonic timestamp in nanoseconds."""
    global _last_tick
    with _clock_lock:
        now = time.monotonic_ns()
        _last_tick = max(now, _last_tick + 1)
        return _last_tick


@dataclass(frozen=True, order=True)
class AgentId:
    """Unique identifier of an agent."""

    value: uuid.UUID

    @classmethod
    def new(cls) -> AgentId:
        return cls(uuid.uuid4())

    @classmethod
    def from_int(cls, value: int) -> AgentId:
        return cls(uuid.UUID(int=value))

    def simple(self) -> str:
        """The UUID as 32 lower-case hex digits without hyphens."""
        return self.value.hex

    def __str__(self) -> str:
        return str(self.value)


class AgentStatus(enum.Enum):
    IDLE = "idle"
    WORKING = "working"


@dataclass
class Agent:
    id: AgentId
    name: str
    provider: str
    status: AgentStatus = AgentStatus.IDLE
    session_id: str | None = None


@dataclass
class FileEntry:
    """A file or directory shown in the project file tree."""

    path: Path
    depth: int
    is_dir: bool
    expanded: bool = True
    last_modified: int | None = None
    modify_count: int = 0
    modified_by: AgentId | None = None
    diff_added: int = 0
    diff_removed: int = 0

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @classmethod
    def dir(cls, path, depth: int) -> FileEntry:
        return cls(Path(path), depth, is_dir=True)

    @classmethod
    def file(cls, path, depth: int) -> FileEntry:
        return cls(Path(path), depth, is_dir=False)

    def display_name(self) -> str:
        return self.path.name or str(self.path)

    def touch(self, agent: AgentId | None) -> None:
        """Record a modification, optionally attributed to an agent."""
        self.last_modified = _tick()
        self.modify_count += 1
        self.modified_by = agent

    def age_secs(self) -> int | None:
        """Whole seconds since the last modification, or None if never touched."""
        if self.last_modified is None:
            return None
        return max(0, time.monotonic_ns() - self.last_modified) // 1_000_000_000

    def set_diff(self, added: int, removed: int) -> None:
        self.diff_added = added
        self.diff_removed = removed


@dataclass
class FileActivity:
    """Modification history of a single path."""

    path: Path
    modified_by: AgentId | None = None
    modify_count: int = 1
    last_modified: int = field(default_factory=_tick)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def touch(self, agent: AgentId | None) -> None:
        self.last_modified = _tick()
        self.modify_count += 1
        self.modified_by = agent


@dataclass
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int | None = None
    cache_read_input_tokens: int | None = None


@dataclass(frozen=True, order=True)
class TraceId:
    """Unique identifier of a trace."""

    value: uuid.UUID

    @classmethod
    def new(cls) -> TraceId:
        return cls(uuid.uuid4())

    @classmethod
    def from_int(cls, value: int) -> TraceId:
        return cls(uuid.UUID(int=value))

    def __str__(self) -> str:
        return str(self.value)


class TraceStatus(enum.Enum):
    ACTIVE = "active"
    COMPLETE = "complete"
    ABORTED = "aborted"


@dataclass
class Trace:
    """One agent session with its status and accumulated usage."""

    id: TraceId
    agent_id: AgentId
    session_id: str
    provider: str
    started_at: str
    status: TraceStatus = TraceStatus.ACTIVE
    completed_at: str | None = None
    turn_count: int = 0
    token_usage: TokenUsage = field(default_factory=TokenUsage)
    model: str | None = None


class ScrollDirection(enum.Enum):
    UP = "up"
    DOWN = "down"