"""Enumeration types for gamemstr.

This module defines the closed descriptor sets of the schema: dice, damage
types, conditions, alignments, languages, skills, item and spell
descriptors. Enum values are stable snake_case tags used in serialized
records; display strings come from fixed lookup tables so that irregular
forms ("Deep Speech", "Thri-Kreen", "Very Rare") never drift.
"""

from __future__ import annotations

from enum import StrEnum


class Die(StrEnum):
    """Polyhedral dice."""

    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def faces(self) -> int:
        """Get the number of faces on this die.

        Returns:
            Face count (e.g., 6 for D6).
        """
        faces: dict[Die, int] = {
            Die.D4: 4,
            Die.D6: 6,
            Die.D8: 8,
            Die.D10: 10,
            Die.D12: 12,
            Die.D20: 20,
            Die.D100: 100,
        }
        return faces[self]

    @property
    def display_name(self) -> str:
        """Get the die in dice notation (e.g., 'd6')."""
        return f"d{self.faces}"


class DamageType(StrEnum):
    """D&D 5E damage types."""

    SLASHING = "slashing"
    PIERCING = "piercing"
    BLUDGEONING = "bludgeoning"
    POISON = "poison"
    ACID = "acid"
    FIRE = "fire"
    COLD = "cold"
    RADIANT = "radiant"
    NECROTIC = "necrotic"
    LIGHTNING = "lightning"
    THUNDER = "thunder"
    FORCE = "force"
    PSYCHIC = "psychic"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Slashing')."""
        return _DAMAGE_TYPE_NAMES[self]


_DAMAGE_TYPE_NAMES: dict[DamageType, str] = {
    DamageType.SLASHING: "Slashing",
    DamageType.PIERCING: "Piercing",
    DamageType.BLUDGEONING: "Bludgeoning",
    DamageType.POISON: "Poison",
    DamageType.ACID: "Acid",
    DamageType.FIRE: "Fire",
    DamageType.COLD: "Cold",
    DamageType.RADIANT: "Radiant",
    DamageType.NECROTIC: "Necrotic",
    DamageType.LIGHTNING: "Lightning",
    DamageType.THUNDER: "Thunder",
    DamageType.FORCE: "Force",
    DamageType.PSYCHIC: "Psychic",
}


class ConditionType(StrEnum):
    """D&D 5E conditions that can affect creatures."""

    BLINDED = "blinded"
    CHARMED = "charmed"
    DEAFENED = "deafened"
    EXHAUSTION = "exhaustion"
    FRIGHTENED = "frightened"
    GRAPPLED = "grappled"
    INCAPACITATED = "incapacitated"
    INVISIBLE = "invisible"
    PARALYZED = "paralyzed"
    PETRIFIED = "petrified"
    POISONED = "poisoned"
    PRONE = "prone"
    RESTRAINED = "restrained"
    STUNNED = "stunned"
    UNCONSCIOUS = "unconscious"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Frightened')."""
        return _CONDITION_NAMES[self]


_CONDITION_NAMES: dict[ConditionType, str] = {
    ConditionType.BLINDED: "Blinded",
    ConditionType.CHARMED: "Charmed",
    ConditionType.DEAFENED: "Deafened",
    ConditionType.EXHAUSTION: "Exhaustion",
    ConditionType.FRIGHTENED: "Frightened",
    ConditionType.GRAPPLED: "Grappled",
    ConditionType.INCAPACITATED: "Incapacitated",
    ConditionType.INVISIBLE: "Invisible",
    ConditionType.PARALYZED: "Paralyzed",
    ConditionType.PETRIFIED: "Petrified",
    ConditionType.POISONED: "Poisoned",
    ConditionType.PRONE: "Prone",
    ConditionType.RESTRAINED: "Restrained",
    ConditionType.STUNNED: "Stunned",
    ConditionType.UNCONSCIOUS: "Unconscious",
}


class Alignment(StrEnum):
    """Creature alignments, including the Monster Manual group forms.

    Display names are lower-case prose as printed in stat blocks.
    """

    ANY_ALIGNMENT = "any_alignment"
    ANY_CHAOTIC = "any_chaotic"
    ANY_EVIL = "any_evil"
    ANY_GOOD = "any_good"
    ANY_LAWFUL = "any_lawful"
    ANY_NEUTRAL = "any_neutral"
    ANY_NON_CHAOTIC = "any_non_chaotic"
    ANY_NON_EVIL = "any_non_evil"
    ANY_NON_GOOD = "any_non_good"
    ANY_NON_LAWFUL = "any_non_lawful"
    ANY_NON_NEUTRAL = "any_non_neutral"
    CHAOTIC_EVIL = "chaotic_evil"
    CHAOTIC_NEUTRAL = "chaotic_neutral"
    CHAOTIC_GOOD = "chaotic_good"
    LAWFUL_EVIL = "lawful_evil"
    LAWFUL_NEUTRAL = "lawful_neutral"
    LAWFUL_GOOD = "lawful_good"
    NEUTRAL_EVIL = "neutral_evil"
    TRUE_NEUTRAL = "true_neutral"
    NEUTRAL_GOOD = "neutral_good"
    TYPICALLY_CHAOTIC_EVIL = "typically_chaotic_evil"
    TYPICALLY_CHAOTIC_NEUTRAL = "typically_chaotic_neutral"
    TYPICALLY_CHAOTIC_GOOD = "typically_chaotic_good"
    TYPICALLY_LAWFUL_EVIL = "typically_lawful_evil"
    TYPICALLY_LAWFUL_NEUTRAL = "typically_lawful_neutral"
    TYPICALLY_LAWFUL_GOOD = "typically_lawful_good"
    TYPICALLY_NEUTRAL_EVIL = "typically_neutral_evil"
    TYPICALLY_TRUE_NEUTRAL = "typically_true_neutral"
    TYPICALLY_NEUTRAL_GOOD = "typically_neutral_good"
    UNALIGNED = "unaligned"

    @property
    def display_name(self) -> str:
        """Get human-readable alignment prose.

        Returns:
            Alignment text (e.g., 'chaotic evil', 'any non-good alignment').
        """
        return _ALIGNMENT_NAMES[self]


_ALIGNMENT_NAMES: dict[Alignment, str] = {
    Alignment.ANY_ALIGNMENT: "any alignment",
    Alignment.ANY_CHAOTIC: "any chaotic alignment",
    Alignment.ANY_EVIL: "any evil alignment",
    Alignment.ANY_GOOD: "any good alignment",
    Alignment.ANY_LAWFUL: "any lawful alignment",
    Alignment.ANY_NEUTRAL: "any neutral alignment",
    Alignment.ANY_NON_CHAOTIC: "any non-chaotic alignment",
    Alignment.ANY_NON_EVIL: "any non-evil alignment",
    Alignment.ANY_NON_GOOD: "any non-good alignment",
    Alignment.ANY_NON_LAWFUL: "any non-lawful alignment",
    Alignment.ANY_NON_NEUTRAL: "any non-neutral alignment",
    Alignment.CHAOTIC_EVIL: "chaotic evil",
    Alignment.CHAOTIC_NEUTRAL: "chaotic neutral",
    Alignment.CHAOTIC_GOOD: "chaotic good",
    Alignment.LAWFUL_EVIL: "lawful evil",
    Alignment.LAWFUL_NEUTRAL: "lawful neutral",
    Alignment.LAWFUL_GOOD: "lawful good",
    Alignment.NEUTRAL_EVIL: "neutral evil",
    Alignment.TRUE_NEUTRAL: "true neutral",
    Alignment.NEUTRAL_GOOD: "neutral good",
    Alignment.TYPICALLY_CHAOTIC_EVIL: "typically chaotic evil",
    Alignment.TYPICALLY_CHAOTIC_NEUTRAL: "typically chaotic neutral",
    Alignment.TYPICALLY_CHAOTIC_GOOD: "typically chaotic good",
    Alignment.TYPICALLY_LAWFUL_EVIL: "typically lawful evil",
    Alignment.TYPICALLY_LAWFUL_NEUTRAL: "typically lawful neutral",
    Alignment.TYPICALLY_LAWFUL_GOOD: "typically lawful good",
    Alignment.TYPICALLY_NEUTRAL_EVIL: "typically neutral evil",
    Alignment.TYPICALLY_TRUE_NEUTRAL: "typically true neutral",
    Alignment.TYPICALLY_NEUTRAL_GOOD: "typically neutral good",
    Alignment.UNALIGNED: "unaligned",
}


class MonsterType(StrEnum):
    """D&D 5E creature types for monsters."""

    ABERRATION = "aberration"
    BEAST = "beast"
    CELESTIAL = "celestial"
    CONSTRUCT = "construct"
    DRAGON = "dragon"
    ELEMENTAL = "elemental"
    FEY = "fey"
    FIEND = "fiend"
    GIANT = "giant"
    HUMANOID = "humanoid"
    MONSTROSITY = "monstrosity"
    OOZE = "ooze"
    PLANT = "plant"
    UNDEAD = "undead"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Monstrosity')."""
        return self.value.capitalize()


class AbilityType(StrEnum):
    """The six D&D ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def display_name(self) -> str:
        """Get the full name of the ability (e.g., 'Strength')."""
        return self.value.capitalize()

    @property
    def short_name(self) -> str:
        """Get the short stat-block form (e.g., 'Dex')."""
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g., 'STR')."""
        return self.name


class SkillType(StrEnum):
    """D&D 5E skills."""

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def display_name(self) -> str:
        """Get the display name with its ability annotation.

        Returns:
            Skill text (e.g., 'Sleight of Hand (Dex)').
        """
        return _SKILL_NAMES[self]

    @property
    def ability(self) -> AbilityType:
        """Get the ability score this skill is checked against."""
        return _SKILL_ABILITIES[self]


_SKILL_NAMES: dict[SkillType, str] = {
    SkillType.ACROBATICS: "Acrobatics (Dex)",
    SkillType.ANIMAL_HANDLING: "Animal Handling (Wis)",
    SkillType.ARCANA: "Arcana (Int)",
    SkillType.ATHLETICS: "Athletics (Str)",
    SkillType.DECEPTION: "Deception (Cha)",
    SkillType.HISTORY: "History (Int)",
    SkillType.INSIGHT: "Insight (Wis)",
    SkillType.INTIMIDATION: "Intimidation (Cha)",
    SkillType.INVESTIGATION: "Investigation (Int)",
    SkillType.MEDICINE: "Medicine (Wis)",
    SkillType.NATURE: "Nature (Int)",
    SkillType.PERCEPTION: "Perception (Wis)",
    SkillType.PERFORMANCE: "Performance (Cha)",
    SkillType.PERSUASION: "Persuasion (Cha)",
    SkillType.RELIGION: "Religion (Int)",
    SkillType.SLEIGHT_OF_HAND: "Sleight of Hand (Dex)",
    SkillType.STEALTH: "Stealth (Dex)",
    SkillType.SURVIVAL: "Survival (Wis)",
}

_SKILL_ABILITIES: dict[SkillType, AbilityType] = {
    SkillType.ACROBATICS: AbilityType.DEX,
    SkillType.ANIMAL_HANDLING: AbilityType.WIS,
    SkillType.ARCANA: AbilityType.INT,
    SkillType.ATHLETICS: AbilityType.STR,
    SkillType.DECEPTION: AbilityType.CHA,
    SkillType.HISTORY: AbilityType.INT,
    SkillType.INSIGHT: AbilityType.WIS,
    SkillType.INTIMIDATION: AbilityType.CHA,
    SkillType.INVESTIGATION: AbilityType.INT,
    SkillType.MEDICINE: AbilityType.WIS,
    SkillType.NATURE: AbilityType.INT,
    SkillType.PERCEPTION: AbilityType.WIS,
    SkillType.PERFORMANCE: AbilityType.CHA,
    SkillType.PERSUASION: AbilityType.CHA,
    SkillType.RELIGION: AbilityType.INT,
    SkillType.SLEIGHT_OF_HAND: AbilityType.DEX,
    SkillType.STEALTH: AbilityType.DEX,
    SkillType.SURVIVAL: AbilityType.WIS,
}


class SenseType(StrEnum):
    """Special senses."""

    BLINDSIGHT = "blindsight"
    DARKVISION = "darkvision"
    TREMORSENSE = "tremorsense"
    TRUESIGHT = "truesight"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Darkvision')."""
        return self.value.capitalize()


class Language(StrEnum):
    """Languages across the published settings."""

    ABANASINIA = "abanasinia"
    ABYSSAL = "abyssal"
    AQUAN = "aquan"
    AURAN = "auran"
    CELESTIAL = "celestial"
    COMMON = "common"
    DEEP_SPEECH = "deep_speech"
    DRACONIC = "draconic"
    DWARVISH = "dwarvish"
    ELVISH = "elvish"
    ERGOT = "ergot"
    GIANT = "giant"
    GNOMISH = "gnomish"
    GOBLIN = "goblin"
    HADOZEE = "hadozee"
    HALFLING = "halfling"
    IGNAN = "ignan"
    INFERNAL = "infernal"
    ISTARIAN = "istarian"
    KENDERSPEAK = "kenderspeak"
    KHAROLIAN = "kharolian"
    KHUR = "khur"
    KOTHIAN = "kothian"
    KRAUL = "kraul"
    LEONIN = "leonin"
    LOXODON = "loxodon"
    MARQUESIAN = "marquesian"
    MERFOLK = "merfolk"
    MINOTAUR = "minotaur"
    NAUSH = "naush"
    NARAKESE = "narakese"
    NORDMAARIAN = "nordmaarian"
    ORC = "orc"
    PRIMORDIAL = "primordial"
    QUORI = "quori"
    RIEDRAN = "riedran"
    SOLAMNIC = "solamnic"
    SPHINX = "sphinx"
    SYLVAN = "sylvan"
    TERRAN = "terran"
    THRI_KREEN = "thri_kreen"
    UNDERCOMMON = "undercommon"
    VEDALKEN = "vedalken"
    ZEMNIAN = "zemnian"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Deep Speech', 'Thri-Kreen')."""
        return _LANGUAGE_NAMES[self]


_LANGUAGE_NAMES: dict[Language, str] = {
    Language.ABANASINIA: "Abanasinia",
    Language.ABYSSAL: "Abyssal",
    Language.AQUAN: "Aquan",
    Language.AURAN: "Auran",
    Language.CELESTIAL: "Celestial",
    Language.COMMON: "Common",
    Language.DEEP_SPEECH: "Deep Speech",
    Language.DRACONIC: "Draconic",
    Language.DWARVISH: "Dwarvish",
    Language.ELVISH: "Elvish",
    Language.ERGOT: "Ergot",
    Language.GIANT: "Giant",
    Language.GNOMISH: "Gnomish",
    Language.GOBLIN: "Goblin",
    Language.HADOZEE: "Hadozee",
    Language.HALFLING: "Halfling",
    Language.IGNAN: "Ignan",
    Language.INFERNAL: "Infernal",
    Language.ISTARIAN: "Istarian",
    Language.KENDERSPEAK: "Kenderspeak",
    Language.KHAROLIAN: "Kharolian",
    Language.KHUR: "Khur",
    Language.KOTHIAN: "Kothian",
    Language.KRAUL: "Kraul",
    Language.LEONIN: "Leonin",
    Language.LOXODON: "Loxodon",
    Language.MARQUESIAN: "Marquesian",
    Language.MERFOLK: "Merfolk",
    Language.MINOTAUR: "Minotaur",
    Language.NAUSH: "Naush",
    Language.NARAKESE: "Narakese",
    Language.NORDMAARIAN: "Nordmaarian",
    Language.ORC: "Orc",
    Language.PRIMORDIAL: "Primordial",
    Language.QUORI: "Quori",
    Language.RIEDRAN: "Riedran",
    Language.SOLAMNIC: "Solamnic",
    Language.SPHINX: "Sphinx",
    Language.SYLVAN: "Sylvan",
    Language.TERRAN: "Terran",
    Language.THRI_KREEN: "Thri-Kreen",
    Language.UNDERCOMMON: "Undercommon",
    Language.VEDALKEN: "Vedalken",
    Language.ZEMNIAN: "Zemnian",
}


class Race(StrEnum):
    """Player character races."""

    HUMAN = "human"
    ELF = "elf"
    DWARF = "dwarf"
    HALFLING = "halfling"
    GNOME = "gnome"
    HALF_ELF = "half_elf"
    HALF_ORC = "half_orc"
    TIEFLING = "tiefling"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Half-Elf')."""
        return _RACE_NAMES[self]


_RACE_NAMES: dict[Race, str] = {
    Race.HUMAN: "Human",
    Race.ELF: "Elf",
    Race.DWARF: "Dwarf",
    Race.HALFLING: "Halfling",
    Race.GNOME: "Gnome",
    Race.HALF_ELF: "Half-Elf",
    Race.HALF_ORC: "Half-Orc",
    Race.TIEFLING: "Tiefling",
}


class PlayerClass(StrEnum):
    """Player character classes."""

    BARBARIAN = "barbarian"
    BARD = "bard"
    CLERIC = "cleric"
    DRUID = "druid"
    FIGHTER = "fighter"
    MONK = "monk"
    PALADIN = "paladin"
    RANGER = "ranger"
    ROGUE = "rogue"
    SORCERER = "sorcerer"
    WARLOCK = "warlock"
    WIZARD = "wizard"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Warlock')."""
        return self.value.capitalize()


class ItemType(StrEnum):
    """Magic item categories."""

    ARMOR = "armor"
    POTION = "potion"
    RING = "ring"
    ROD = "rod"
    SCROLL = "scroll"
    STAFF = "staff"
    WAND = "wand"
    WEAPON = "weapon"
    WONDROUS_ITEM = "wondrous_item"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Wondrous Item')."""
        return _ITEM_TYPE_NAMES[self]


_ITEM_TYPE_NAMES: dict[ItemType, str] = {
    ItemType.ARMOR: "Armor",
    ItemType.POTION: "Potion",
    ItemType.RING: "Ring",
    ItemType.ROD: "Rod",
    ItemType.SCROLL: "Scroll",
    ItemType.STAFF: "Staff",
    ItemType.WAND: "Wand",
    ItemType.WEAPON: "Weapon",
    ItemType.WONDROUS_ITEM: "Wondrous Item",
}


class ItemRarity(StrEnum):
    """Magic item rarities."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    VERY_RARE = "very_rare"
    LEGENDARY = "legendary"
    ARTIFACT = "artifact"
    VARIES = "varies"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Very Rare')."""
        return _RARITY_NAMES[self]


_RARITY_NAMES: dict[ItemRarity, str] = {
    ItemRarity.COMMON: "Common",
    ItemRarity.UNCOMMON: "Uncommon",
    ItemRarity.RARE: "Rare",
    ItemRarity.VERY_RARE: "Very Rare",
    ItemRarity.LEGENDARY: "Legendary",
    ItemRarity.ARTIFACT: "Artifact",
    ItemRarity.VARIES: "Varies",
    ItemRarity.UNKNOWN: "Unknown Rarity",
}


class WeaponType(StrEnum):
    """Weapon sub-types a magic weapon can be based on."""

    AXE = "axe"
    BOW = "bow"
    CROSSBOW = "crossbow"
    DAGGER = "dagger"
    HAMMER = "hammer"
    MACE = "mace"
    SPEAR = "spear"
    STAFF = "staff"
    SWORD = "sword"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Sword')."""
        return self.value.capitalize()


class ArmorType(StrEnum):
    """Armor sub-types a magic armor can be based on."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    SHIELD = "shield"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Shield')."""
        return self.value.capitalize()


class TimeDivision(StrEnum):
    """Units of time used for charges and durations."""

    ROUND = "round"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def display_name(self) -> str:
        """Get the singular display name (e.g., 'Round')."""
        return self.value.capitalize()

    @property
    def plural(self) -> str:
        """Get the plural display name for prose (e.g., 'Rounds')."""
        return f"{self.display_name}s"


class SpellLevel(StrEnum):
    """Spell levels from cantrip through 9th."""

    CANTRIP = "cantrip"
    LEVEL_1 = "level_1"
    LEVEL_2 = "level_2"
    LEVEL_3 = "level_3"
    LEVEL_4 = "level_4"
    LEVEL_5 = "level_5"
    LEVEL_6 = "level_6"
    LEVEL_7 = "level_7"
    LEVEL_8 = "level_8"
    LEVEL_9 = "level_9"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., '3rd Level')."""
        return _SPELL_LEVEL_NAMES[self]

    @property
    def number(self) -> int:
        """Get the numeric level (0 for cantrips)."""
        if self is SpellLevel.CANTRIP:
            return 0
        return int(self.value.removeprefix("level_"))


_SPELL_LEVEL_NAMES: dict[SpellLevel, str] = {
    SpellLevel.CANTRIP: "Cantrip",
    SpellLevel.LEVEL_1: "1st Level",
    SpellLevel.LEVEL_2: "2nd Level",
    SpellLevel.LEVEL_3: "3rd Level",
    SpellLevel.LEVEL_4: "4th Level",
    SpellLevel.LEVEL_5: "5th Level",
    SpellLevel.LEVEL_6: "6th Level",
    SpellLevel.LEVEL_7: "7th Level",
    SpellLevel.LEVEL_8: "8th Level",
    SpellLevel.LEVEL_9: "9th Level",
}


class CastingTime(StrEnum):
    """Spell casting times."""

    ACTION = "action"
    BONUS_ACTION = "bonus_action"
    REACTION = "reaction"
    MINUTE = "minute"
    HOUR = "hour"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Bonus Action')."""
        return _CASTING_TIME_NAMES[self]


_CASTING_TIME_NAMES: dict[CastingTime, str] = {
    CastingTime.ACTION: "Action",
    CastingTime.BONUS_ACTION: "Bonus Action",
    CastingTime.REACTION: "Reaction",
    CastingTime.MINUTE: "Minute",
    CastingTime.HOUR: "Hour",
}


class SpellDuration(StrEnum):
    """Spell durations."""

    INSTANTANEOUS = "instantaneous"
    CONCENTRATION = "concentration"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    UNTIL_DISPELLED = "until_dispelled"
    UNTIL_DISPELLED_OR_TRIGGERED = "until_dispelled_or_triggered"
    UNTIL_TRIGGERED = "until_triggered"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Until Dispelled or Triggered')."""
        return _DURATION_NAMES[self]


_DURATION_NAMES: dict[SpellDuration, str] = {
    SpellDuration.INSTANTANEOUS: "Instantaneous",
    SpellDuration.CONCENTRATION: "Concentration",
    SpellDuration.MINUTE: "Minute",
    SpellDuration.HOUR: "Hour",
    SpellDuration.DAY: "Day",
    SpellDuration.UNTIL_DISPELLED: "Until Dispelled",
    SpellDuration.UNTIL_DISPELLED_OR_TRIGGERED: "Until Dispelled or Triggered",
    SpellDuration.UNTIL_TRIGGERED: "Until Triggered",
}


class AreaShape(StrEnum):
    """Areas of effect for spells."""

    CUBE = "cube"
    SPHERE = "sphere"
    CONE = "cone"
    LINE = "line"
    CYLINDER = "cylinder"
    WALL = "wall"

    @property
    def display_name(self) -> str:
        """Get the display name (e.g., 'Sphere')."""
        return self.value.capitalize()


__all__ = [
    "Die",
    "DamageType",
    "ConditionType",
    "Alignment",
    "MonsterType",
    "AbilityType",
    "SkillType",
    "SenseType",
    "Language",
    "Race",
    "PlayerClass",
    "ItemType",
    "ItemRarity",
    "WeaponType",
    "ArmorType",
    "TimeDivision",
    "SpellLevel",
    "CastingTime",
    "SpellDuration",
    "AreaShape",
]
