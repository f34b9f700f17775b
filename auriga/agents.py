"""In-memory store of running agents."""

from __future__ import annotations

from collections.abc import Iterator

from auriga.models import Agent, AgentId


class AgentStore:
    """Holds agents in creation order."""

    def __init__(self) -> None:
        self._agents: list[Agent] = []

    def create(self, provider: str) -> AgentId:
        """Create an agent named after its provider and a short id."""
        agent_id = AgentId.new()
        name = f"{provider} #{agent_id.simple()[:8]}"
        self._agents.append(Agent(agent_id, name, provider))
        return agent_id

    def remove(self, agent_id: AgentId) -> bool:
        before = len(self._agents)
        self._agents = [a for a in self._agents if a.id != agent_id]
        return len(self._agents) < before

    def get(self, agent_id: AgentId) -> Agent | None:
        return next((a for a in self._agents if a.id == agent_id), None)

    def list(self) -> list[Agent]:
        return list(self._agents)

    def count(self) -> int:
        return len(self._agents)

    def ids(self) -> list[AgentId]:
        return [a.id for a in self._agents]

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(list(self._agents))