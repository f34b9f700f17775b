"""In-memory store of agent traces and their lifecycle."""

from __future__ import annotations

from auriga.models import AgentId, Trace, TraceId, TraceStatus


class TraceStore:
    def __init__(self) -> None:
        self._traces: list[Trace] = []

    def create(
        self, agent_id: AgentId, session_id: str, provider: str, started_at: str
    ) -> TraceId:
        """Create a new active trace and return its id."""
        trace_id = TraceId.new()
        self._traces.append(
            Trace(
                id=trace_id,
                agent_id=agent_id,
                session_id=session_id,
                provider=provider,
                started_at=started_at,
            )
        )
        return trace_id

    def get(self, trace_id: TraceId) -> Trace | None:
        return next((t for t in self._traces if t.id == trace_id), None)

    def active_trace(self, agent_id: AgentId) -> Trace | None:
        """The most recently created active trace of an agent."""
        return next(
            (
                t
                for t in reversed(self._traces)
                if t.agent_id == agent_id and t.status is TraceStatus.ACTIVE
            ),
            None,
        )

    def find_by_session(self, agent_id: AgentId, session_id: str) -> Trace | None:
        return next(
            (
                t
                for t in self._traces
                if t.agent_id == agent_id and t.session_id == session_id
            ),
            None,
        )

    def _finish(self, trace_id: TraceId, status: TraceStatus, completed_at: str) -> bool:
        trace = self.get(trace_id)
        if trace is None or trace.status is not TraceStatus.ACTIVE:
            return False
        trace.status = status
        trace.completed_at = completed_at
        return True

    def complete(self, trace_id: TraceId, completed_at: str) -> bool:
        """Mark an active trace complete; False if missing or not active."""
        return self._finish(trace_id, TraceStatus.COMPLETE, completed_at)

    def abort(self, trace_id: TraceId, completed_at: str) -> bool:
        """Mark an active trace aborted; False if missing or not active."""
        return self._finish(trace_id, TraceStatus.ABORTED, completed_at)

    def traces_for(self, agent_id: AgentId) -> list[Trace]:
        return [t for t in self._traces if t.agent_id == agent_id]

    def remove_agent_traces(self, agent_id: AgentId) -> None:
        self._traces = [t for t in self._traces if t.agent_id != agent_id]

    def take_finished(self) -> list[Trace]:
        """Remove and return every trace that is no longer active."""
        finished = [t for t in self._traces if t.status is not TraceStatus.ACTIVE]
        self._traces = [t for t in self._traces if t.status is TraceStatus.ACTIVE]
        return finished

    def count(self) -> int:
        return len(self._traces)