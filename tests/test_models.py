import uuid
from pathlib import Path

from auriga.models import (
    AgentId,
    FileActivity,
    FileEntry,
    TokenUsage,
    Trace,
    TraceId,
    TraceStatus,
)


def test_agent_id_new_is_unique():
    simples = {AgentId.new().simple() for _ in range(10)}
    assert len(simples) == 10


def test_agent_id_from_int_is_stable():
    assert AgentId.from_int(1) == AgentId.from_int(1)
    assert AgentId.from_int(1).simple() == AgentId.from_int(1).simple()
    assert AgentId.from_int(1).simple() == "00000000000000000000000000000001"
    assert AgentId.from_int(2).simple() == "00000000000000000000000000000002"


def test_agent_id_simple_is_hex_without_hyphens():
    agent_id = AgentId.new()
    simple = agent_id.simple()
    assert len(simple) == 32
    assert uuid.UUID(hex=simple) == agent_id.value


def test_trace_id_string_form():
    assert str(TraceId.from_int(0x99)) == "00000000-0000-0000-0000-000000000099"


def test_trace_id_new_is_unique():
    texts = {str(TraceId.new()) for _ in range(10)}
    assert len(texts) == 10


def test_display_name_returns_filename():
    entry = FileEntry.file("/project/src/main.rs", 1)
    assert entry.display_name() == "main.rs"
    assert entry.path == Path("/project/src/main.rs")


def test_dir_and_file_constructors():
    assert FileEntry.dir("/project/src", 0).is_dir
    assert not FileEntry.file("/project/src/main.rs", 1).is_dir


def test_age_secs_none_when_not_modified():
    entry = FileEntry.file("test.rs", 0)
    assert entry.age_secs() is None


def test_age_secs_some_after_touch():
    entry = FileEntry.file("test.rs", 0)
    entry.touch(None)
    age = entry.age_secs()
    assert age is not None and age >= 0


def test_touch_counts_and_attributes():
    entry = FileEntry.file("test.rs", 0)
    agent = AgentId.from_int(1)
    entry.touch(agent)
    entry.touch(agent)
    assert entry.modify_count == 2
    assert entry.modified_by == agent


def test_touch_times_increase():
    entry = FileEntry.file("test.rs", 0)
    entry.touch(None)
    first = entry.last_modified
    entry.touch(None)
    assert entry.last_modified > first


def test_set_diff():
    entry = FileEntry.file("test.rs", 0)
    entry.set_diff(5, 3)
    assert (entry.diff_added, entry.diff_removed) == (5, 3)


def test_file_activity_touch():
    activity = FileActivity(Path("src/main.rs"))
    assert activity.modify_count == 1
    activity.touch(AgentId.from_int(2))
    assert activity.modify_count == 2
    assert activity.modified_by == AgentId.from_int(2)


def test_trace_defaults():
    trace = Trace(
        id=TraceId.new(),
        agent_id=AgentId.from_int(1),
        session_id="s1",
        provider="claude",
        started_at="2026-01-01T00:00:00Z",
    )
    assert trace.status is TraceStatus.ACTIVE
    assert trace.token_usage == TokenUsage()
    assert trace.completed_at is None