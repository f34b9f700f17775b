"""Built-in skills: static markdown instructions that agents can pick up."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterator
from dataclasses import dataclass


class Skill(abc.ABC):
    """A named piece of markdown content shipped with the application."""

    @abc.abstractmethod
    def name(self) -> str:
        """Unique kebab-case identifier."""

    @abc.abstractmethod
    def description(self) -> str:
        """One sentence on what the skill does and when to trigger it."""

    @abc.abstractmethod
    def body(self) -> str:
        """Markdown instructions written into SKILL.md."""


_CODE_REVIEW_BODY = (
    "# Code Review\n"
    "\n"
    "Use this skill whenever you are about to declare a task done. Review "
    "every change you made in this session before finishing.\n"
    "\n"
    "For each changed file, check:\n"
    "\n"
    "1. **Correctness** — does the logic actually do what was intended? "
    "Trace the flow with concrete values.\n"
    "2. **Edge cases** — inputs or states that would break it. Empty "
    "collections, missing optionals, zero, boundary indices.\n"
    "3. **Error handling** — failures are handled, not silenced. No "
    "`unwrap` on user input, no swallowed errors.\n"
    "4. **Tests** — existing tests still pass. New logic has new tests.\n"
    "5. **Style** — matches the surrounding code conventions.\n"
    "\n"
    "List any issues you find. If everything looks good, say so briefly. "
    "Do not perform the review silently — produce a short written summary "
    "so the user can see what you checked.\n"
)


class CodeReviewSkill(Skill):
    """Review recent changes before declaring work done."""

    def name(self) -> str:
        return "code-review"

    def description(self) -> str:
        return (
            "Review recent code changes for correctness, edge cases, error "
            "handling, tests, and style. Use before declaring a task done."
        )

    def body(self) -> str:
        return _CODE_REVIEW_BODY


@dataclass
class SkillStatus:
    name: str
    description: str
    downloaded: bool


class DuplicateSkillError(ValueError):
    """Raised when a skill name is registered twice."""


class SkillRegistry:
    """Lookup of registered skills in registration order."""

    def __init__(self) -> None:
        self._skills: list[Skill] = []

    def register(self, skill: Skill) -> None:
        name = skill.name()
        if self.get(name) is not None:
            raise DuplicateSkillError(
                f"duplicate skill name: '{name}' is already registered"
            )
        self._skills.append(skill)

    def count(self) -> int:
        return len(self._skills)

    def get(self, name: str) -> Skill | None:
        return next((s for s in self._skills if s.name() == name), None)

    def skills_info(self, downloaded: Callable[[str], bool]) -> list[SkillStatus]:
        """One status per skill; ``downloaded`` tells whether it is on disk."""
        return [
            SkillStatus(s.name(), s.description(), bool(downloaded(s.name())))
            for s in self._skills
        ]

    def __iter__(self) -> Iterator[Skill]:
        return iter(list(self._skills))

    def __len__(self) -> int:
        return len(self._skills)