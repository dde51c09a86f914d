import pytest

from dnd5e.ability import Ability, Skill


def test_ability_all():
    assert Ability.all() == (
        Ability.STRENGTH,
        Ability.DEXTERITY,
        Ability.CONSTITUTION,
        Ability.INTELLIGENCE,
        Ability.WISDOM,
        Ability.CHARISMA,
    )


@pytest.mark.parametrize(
    "ability, expected",
    [
        (Ability.STRENGTH, "Strength"),
        (Ability.DEXTERITY, "Dexterity"),
        (Ability.CONSTITUTION, "Constitution"),
        (Ability.INTELLIGENCE, "Intelligence"),
        (Ability.WISDOM, "Wisdom"),
        (Ability.CHARISMA, "Charisma"),
    ],
)
def test_ability_label(ability, expected):
    assert ability.label() == expected


@pytest.mark.parametrize(
    "ability, expected",
    [
        (Ability.STRENGTH, "STR"),
        (Ability.DEXTERITY, "DEX"),
        (Ability.CONSTITUTION, "CON"),
        (Ability.INTELLIGENCE, "INT"),
        (Ability.WISDOM, "WIS"),
        (Ability.CHARISMA, "CHA"),
    ],
)
def test_ability_abbr(ability, expected):
    assert ability.abbr() == expected


def test_ability_str():
    strength = Ability.parse("STR")
    dexterity = Ability.parse("DEX")
    assert str(strength) == "Strength"
    assert f"{dexterity}" == "Dexterity"
    assert str(strength) == strength.label()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Strength", Ability.STRENGTH),
        ("STR", Ability.STRENGTH),
        ("Dexterity", Ability.DEXTERITY),
        ("DEX", Ability.DEXTERITY),
        ("Constitution", Ability.CONSTITUTION),
        ("CON", Ability.CONSTITUTION),
        ("Intelligence", Ability.INTELLIGENCE),
        ("INT", Ability.INTELLIGENCE),
        ("Wisdom", Ability.WISDOM),
        ("WIS", Ability.WISDOM),
        ("Charisma", Ability.CHARISMA),
        ("CHA", Ability.CHARISMA),
    ],
)
def test_ability_parse(text, expected):
    assert Ability.parse(text) is expected


def test_ability_parse_invalid():
    with pytest.raises(ValueError, match="Unknown ability"):
        Ability.parse("invalid")


def test_ability_skills_match_skill_ability():
    for ability in Ability.all():
        for skill in ability.skills():
            assert skill.ability() is ability


def test_ability_skills_values():
    assert Ability.STRENGTH.skills() == (Skill.ATHLETICS,)
    assert Ability.DEXTERITY.skills() == (
        Skill.ACROBATICS,
        Skill.SLEIGHT_OF_HAND,
        Skill.STEALTH,
    )
    assert Ability.CONSTITUTION.skills() == ()
    assert Ability.INTELLIGENCE.skills() == (
        Skill.ARCANA,
        Skill.HISTORY,
        Skill.INVESTIGATION,
        Skill.NATURE,
        Skill.RELIGION,
    )
    assert Ability.WISDOM.skills() == (
        Skill.ANIMAL_HANDLING,
        Skill.INSIGHT,
        Skill.MEDICINE,
        Skill.PERCEPTION,
        Skill.SURVIVAL,
    )
    assert Ability.CHARISMA.skills() == (
        Skill.DECEPTION,
        Skill.INTIMIDATION,
        Skill.PERFORMANCE,
        Skill.PERSUASION,
    )


def test_skill_all_count_and_order():
    skills = Skill.all()
    assert len(skills) == 18
    assert skills[0] is Skill.ACROBATICS
    assert skills[-1] is Skill.SURVIVAL


def test_skill_names_not_empty():
    for skill in Skill.all():
        assert len(skill.label()) > 0


def test_skill_abilities_contain_skill():
    for skill in Skill.all():
        assert skill in skill.ability().skills()


def test_skill_parse_roundtrip():
    for skill in Skill.all():
        assert Skill.parse(skill.label()) is skill


def test_skill_parse_invalid():
    with pytest.raises(ValueError, match="Unknown skill"):
        Skill.parse("Sleight Of Hand")


def test_skill_display():
    for skill in Skill.all():
        assert str(skill) == skill.label()


def test_skill_multiword_labels():
    assert Skill.ANIMAL_HANDLING.label() == "Animal Handling"
    assert Skill.SLEIGHT_OF_HAND.label() == "Sleight of Hand"


def test_skill_ability_examples():
    assert Skill.ACROBATICS.ability() is Ability.DEXTERITY
    assert Skill.ATHLETICS.ability() is Ability.STRENGTH