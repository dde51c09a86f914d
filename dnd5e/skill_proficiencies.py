"""Which skills a creature is proficient in, and at what level."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from dnd5e.ability import Skill


class SkillLevel(Enum):
    """The proficiency level a creature has in a skill."""

    PROFICIENT = "Proficient"
    EXPERTISE = "Expertise"


class SkillProficiencies:
    """A set of skills, each held either with proficiency or with expertise."""

    def __init__(self, proficiencies: Iterable[tuple[Skill, SkillLevel]] = ()) -> None:
        self._levels: dict[Skill, SkillLevel] = {}
        self.update(proficiencies)

    def is_proficient(self, skill: Skill) -> bool:
        """Whether the skill is held at plain proficiency (not expertise)."""
        return self._levels.get(skill) is SkillLevel.PROFICIENT

    def has_expertise(self, skill: Skill) -> bool:
        """Whether the skill is held with expertise."""
        return self._levels.get(skill) is SkillLevel.EXPERTISE

    def get(self, skill: Skill) -> SkillLevel | None:
        """The level the skill is held at, or None."""
        return self._levels.get(skill)

    def set(self, skill: Skill, level: SkillLevel) -> None:
        """Hold the skill at the given level, replacing any previous level."""
        if not isinstance(skill, Skill):
            raise TypeError(f"expected a Skill, not {type(skill).__name__}")
        if not isinstance(level, SkillLevel):
            raise TypeError(f"expected a SkillLevel, not {type(level).__name__}")
        self._levels[skill] = level

    def update(self, proficiencies: Iterable[tuple[Skill, SkillLevel]]) -> None:
        """Set the level of each given skill."""
        for skill, level in proficiencies:
            self.set(skill, level)

    def set_proficient(self, skill: Skill) -> None:
        """Hold the skill at proficiency, removing any expertise."""
        self.set(skill, SkillLevel.PROFICIENT)

    def set_expertise(self, skill: Skill) -> None:
        """Hold the skill with expertise, replacing plain proficiency."""
        self.set(skill, SkillLevel.EXPERTISE)

    def clear(self, skill: Skill) -> None:
        """Remove any proficiency in the skill."""
        self._levels.pop(skill, None)

    def clear_all(self) -> None:
        """Remove every proficiency."""
        self._levels.clear()

    def __iter__(self) -> Iterator[tuple[Skill, SkillLevel]]:
        return ((skill, self._levels[skill]) for skill in Skill if skill in self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, skill: object) -> bool:
        return skill in self._levels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkillProficiencies):
            return NotImplemented
        return self._levels == other._levels

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{skill.name}={level.name}" for skill, level in self)
        return f"SkillProficiencies({inner})"