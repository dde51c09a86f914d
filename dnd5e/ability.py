"""The six abilities and the eighteen skills that rely on them."""

from __future__ import annotations

from enum import Enum


class Ability(Enum):
    """An ability measuring a physical or mental characteristic of a creature."""

    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    CONSTITUTION = "Constitution"
    INTELLIGENCE = "Intelligence"
    WISDOM = "Wisdom"
    CHARISMA = "Charisma"

    @classmethod
    def all(cls) -> tuple[Ability, ...]:
        """Every ability, in definition order."""
        return tuple(cls)

    @classmethod
    def parse(cls, text: str) -> Ability:
        """Parse a full title-case name or an upper-case abbreviation."""
        for ability in cls:
            if text in (ability.value, _ABILITY_ABBREVIATIONS[ability]):
                return ability
        raise ValueError("Unknown ability")

    def label(self) -> str:
        """The full name of the ability, in title case."""
        return self.value

    def abbr(self) -> str:
        """The three-letter upper-case abbreviation."""
        return _ABILITY_ABBREVIATIONS[self]

    def skills(self) -> tuple[Skill, ...]:
        """Skills associated with this ability, in skill order."""
        return tuple(skill for skill in Skill if skill.ability() is self)

    def __str__(self) -> str:
        return self.value


_ABILITY_ABBREVIATIONS = {
    Ability.STRENGTH: "STR",
    Ability.DEXTERITY: "DEX",
    Ability.CONSTITUTION: "CON",
    Ability.INTELLIGENCE: "INT",
    Ability.WISDOM: "WIS",
    Ability.CHARISMA: "CHA",
}


class Skill(Enum):
    """A category of things creatures try to do with an ability check."""

    ACROBATICS = "Acrobatics"
    ANIMAL_HANDLING = "Animal Handling"
    ARCANA = "Arcana"
    ATHLETICS = "Athletics"
    DECEPTION = "Deception"
    HISTORY = "History"
    INSIGHT = "Insight"
    INTIMIDATION = "Intimidation"
    INVESTIGATION = "Investigation"
    MEDICINE = "Medicine"
    NATURE = "Nature"
    PERCEPTION = "Perception"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"
    RELIGION = "Religion"
    SLEIGHT_OF_HAND = "Sleight of Hand"
    STEALTH = "Stealth"
    SURVIVAL = "Survival"

    @classmethod
    def all(cls) -> tuple[Skill, ...]:
        """Every skill, in definition order."""
        return tuple(cls)

    @classmethod
    def parse(cls, text: str) -> Skill:
        """Parse a skill from its exact name."""
        for skill in cls:
            if skill.value == text:
                return skill
        raise ValueError("Unknown skill")

    def label(self) -> str:
        """The name of the skill."""
        return self.value

    def ability(self) -> Ability:
        """The ability this skill is tied to."""
        return _SKILL_ABILITIES[self]

    def __str__(self) -> str:
        return self.value


_SKILL_ABILITIES = {
    Skill.ACROBATICS: Ability.DEXTERITY,
    Skill.SLEIGHT_OF_HAND: Ability.DEXTERITY,
    Skill.STEALTH: Ability.DEXTERITY,
    Skill.ATHLETICS: Ability.STRENGTH,
    Skill.ANIMAL_HANDLING: Ability.WISDOM,
    Skill.INSIGHT: Ability.WISDOM,
    Skill.MEDICINE: Ability.WISDOM,
    Skill.PERCEPTION: Ability.WISDOM,
    Skill.SURVIVAL: Ability.WISDOM,
    Skill.ARCANA: Ability.INTELLIGENCE,
    Skill.HISTORY: Ability.INTELLIGENCE,
    Skill.INVESTIGATION: Ability.INTELLIGENCE,
    Skill.NATURE: Ability.INTELLIGENCE,
    Skill.RELIGION: Ability.INTELLIGENCE,
    Skill.DECEPTION: Ability.CHARISMA,
    Skill.INTIMIDATION: Ability.CHARISMA,
    Skill.PERFORMANCE: Ability.CHARISMA,
    Skill.PERSUASION: Ability.CHARISMA,
}