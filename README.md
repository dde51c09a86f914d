# dnd5e

Types and common mechanics for Dungeons & Dragons 5th Edition: the six
abilities, the eighteen skills, character levels, proficiency bonuses and
skill proficiencies. It has no dependencies outside the standard library.

## Installation

```
pip install dnd5e
```

## Abilities and skills

`dnd5e.ability` holds two enums, `Ability` and `Skill`.

```python
from dnd5e.ability import Ability, Skill

assert Ability.STRENGTH.label() == "Strength"
assert Ability.STRENGTH.abbr() == "STR"
assert str(Ability.WISDOM) == "Wisdom"
assert Ability.parse("DEX") is Ability.DEXTERITY
assert Ability.parse("Dexterity") is Ability.DEXTERITY
assert Ability.STRENGTH.skills() == (Skill.ATHLETICS,)
assert Ability.CONSTITUTION.skills() == ()

assert Skill.parse("Sleight of Hand") is Skill.SLEIGHT_OF_HAND
assert Skill.SLEIGHT_OF_HAND.ability() is Ability.DEXTERITY
assert str(Skill.ANIMAL_HANDLING) == "Animal Handling"
assert len(Skill.all()) == 18
```

`Ability.all()` and `Skill.all()` return every member in definition order.
`Ability.parse` accepts the exact title-case name or the upper-case
abbreviation; `Skill.parse` accepts the exact name. Both raise `ValueError`
for anything else.

## Levels and proficiency bonuses

`dnd5e.progression` holds `Level` (1 to 20, default 1) and
`ProficiencyBonus` (2 to 9). Both are frozen, ordered dataclasses with a
`value` field, convert with `int()`, and have `MIN` and `MAX` class
attributes.

```python
from dnd5e.progression import Level, ProficiencyBonus

level = Level(5)
assert int(level.proficiency_bonus()) == 3
assert ProficiencyBonus.from_level(level) == ProficiencyBonus(3)
assert Level() == Level.MIN

assert Level.clamped(0) == Level.MIN
assert Level.clamped(21) == Level.MAX
assert ProficiencyBonus.clamped(1) == ProficiencyBonus.MIN
```

The constructors raise `ValueError` for values out of range (for example
`"Level cannot be greater than 20"`) and `TypeError` for values that are not
integers; the `clamped` class methods pull out-of-range values to the
nearest bound instead.

The proficiency bonus is 2 at levels 1–4 and rises by one every four levels,
reaching 6 at levels 17–20.

## Skill proficiencies

`dnd5e.skill_proficiencies` holds the `SkillLevel` enum (`PROFICIENT`,
`EXPERTISE`) and `SkillProficiencies`, a set of skills each held at one of
those levels.

```python
from dnd5e.ability import Skill
from dnd5e.skill_proficiencies import SkillLevel, SkillProficiencies

profs = SkillProficiencies()
profs.set_proficient(Skill.ACROBATICS)
profs.set_expertise(Skill.STEALTH)

assert profs.is_proficient(Skill.ACROBATICS)
assert profs.has_expertise(Skill.STEALTH)
assert not profs.is_proficient(Skill.STEALTH)
assert profs.get(Skill.STEALTH) is SkillLevel.EXPERTISE
assert profs.get(Skill.ARCANA) is None
assert list(profs) == [
    (Skill.ACROBATICS, SkillLevel.PROFICIENT),
    (Skill.STEALTH, SkillLevel.EXPERTISE),
]

profs.clear(Skill.ACROBATICS)
assert len(profs) == 1
profs.clear_all()
assert list(profs) == []
```

A skill is held at one level at a time: setting expertise replaces plain
proficiency and the other way round, so `is_proficient` is false for a skill
held with expertise. The constructor and `update` take an iterable of
`(Skill, SkillLevel)` pairs; `set(skill, level)` sets one skill and raises
`TypeError` for arguments of the wrong type. Iteration yields pairs in skill
order. Two sets compare equal when they hold the same skills at the same
levels; they are not hashable.

## What the package does not do

There are no types here for ability scores, ability modifiers, or a
creature's full set of six ability scores; the package covers abilities and
skills as names only, together with levels, proficiency bonuses and skill
proficiencies. It has no command-line interface and no storage.

## Running the tests

```
pip install -e ".[test]"
pytest
```