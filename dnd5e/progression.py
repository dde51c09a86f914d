"""Character levels and the proficiency bonus they grant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")
    return value


@dataclass(frozen=True, order=True)
class ProficiencyBonus:
    """A proficiency bonus, in the range 2 to 9."""

    value: int

    MIN: ClassVar[ProficiencyBonus]
    MAX: ClassVar[ProficiencyBonus]

    _LOW: ClassVar[int] = 2
    _HIGH: ClassVar[int] = 9

    def __post_init__(self) -> None:
        value = _check_int(self.value, "Proficiency bonus")
        if value < self._LOW:
            raise ValueError("Proficiency bonus cannot be less than 2")
        if value > self._HIGH:
            raise ValueError("Proficiency bonus cannot be greater than 9")

    @classmethod
    def clamped(cls, value: int) -> ProficiencyBonus:
        """Create a bonus, clamping the value into the valid range."""
        value = _check_int(value, "Proficiency bonus")
        return cls(min(max(value, cls._LOW), cls._HIGH))

    @classmethod
    def from_level(cls, level: Level) -> ProficiencyBonus:
        """The proficiency bonus granted at the given level."""
        return level.proficiency_bonus()

    def __int__(self) -> int:
        return self.value


ProficiencyBonus.MIN = ProficiencyBonus(ProficiencyBonus._LOW)
ProficiencyBonus.MAX = ProficiencyBonus(ProficiencyBonus._HIGH)


@dataclass(frozen=True, order=True)
class Level:
    """The level of a player character, in the range 1 to 20; 1 by default."""

    value: int = 1

    MIN: ClassVar[Level]
    MAX: ClassVar[Level]

    _LOW: ClassVar[int] = 1
    _HIGH: ClassVar[int] = 20

    def __post_init__(self) -> None:
        value = _check_int(self.value, "Level")
        if value < self._LOW:
            raise ValueError("Level cannot be less than 1")
        if value > self._HIGH:
            raise ValueError("Level cannot be greater than 20")

    @classmethod
    def clamped(cls, value: int) -> Level:
        """Create a level, clamping the value into the valid range."""
        value = _check_int(value, "Level")
        return cls(min(max(value, cls._LOW), cls._HIGH))

    def proficiency_bonus(self) -> ProficiencyBonus:
        """The proficiency bonus for this level: +1 every four levels from 2."""
        return ProficiencyBonus.clamped((self.value - 1) // 4 + 2)

    def __int__(self) -> int:
        return self.value


Level.MIN = Level(Level._LOW)
Level.MAX = Level(Level._HIGH)