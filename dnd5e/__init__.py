"""D&D 5e abilities, skills, levels, proficiency bonuses and skill proficiencies."""

__version__ = "0.2.0"