"""Plain-text stat-block rendering.

Each renderer returns the block as newline-separated lines in the order
used by published stat blocks. Optional sections are omitted when the
underlying field is absent.

Example:
    >>> print(render_creature(dragon))
    Adult Red Dragon
    Dragon, chaotic evil
    Armor Class 19
    Hit Points 256 (19d12 + 133)
    ...
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from gamemstr.core.config import get_settings
from gamemstr.core.constants import EMPTY_LIST_MARKER
from gamemstr.core.logging import get_logger
from gamemstr.models.enums import AbilityType
from gamemstr.rendering.text import join_phrases, signed

if TYPE_CHECKING:
    from gamemstr.models.attributes import Lair, Paragraph
    from gamemstr.models.creature import Creature
    from gamemstr.models.item import Item
    from gamemstr.models.spell import Spell

logger = get_logger(__name__)


def _labelled(label: str, values: Iterable[object] | None) -> str | None:
    """Render 'Label a, b, c', or None when the list is absent or empty."""
    if not values:
        return None
    return f"{label} {join_phrases(values)}"


def _display_names(values: Iterable[object] | None) -> list[str] | None:
    if values is None:
        return None
    return [value.display_name for value in values]


def _render_paragraph(paragraph: Paragraph, bullet: str) -> str:
    if paragraph.bullet:
        return f"{bullet} {paragraph.text}"
    return paragraph.text


def _render_lair(lair: Lair) -> list[str]:
    bullet = get_settings().render.bullet
    lines = [lair.name]
    if lair.description:
        lines.append(lair.description)
    if lair.lair_actions:
        lines.append("Lair Actions")
        lines.extend(_render_paragraph(p, bullet) for p in lair.lair_actions)
    if lair.regional_effects:
        lines.append("Regional Effects")
        lines.extend(_render_paragraph(p, bullet) for p in lair.regional_effects)
    return lines


def _languages_line(creature: Creature) -> str | None:
    if creature.languages is None:
        return None
    if not creature.languages:
        return f"Languages {EMPTY_LIST_MARKER}"
    return _labelled("Languages", _display_names(creature.languages))


def render_creature(creature: Creature) -> str:
    """Render a creature stat block.

    Args:
        creature: The creature to render.

    Returns:
        The stat block as newline-separated text.
    """
    logger.debug("Rendering stat block", kind="creature", id=creature.id)
    settings = get_settings().render

    lines: list[str | None] = [
        creature.name,
        f"{creature.category.display_name}, {creature.alignment.display_name}",
        f"Armor Class {creature.armor_class}",
        f"Hit Points {creature.hit_points}",
        f"Speed {join_phrases(creature.speed)}",
        join_phrases(
            (creature.ability_score(kind) for kind in AbilityType),
            settings.ability_separator,
        ),
        _labelled("Saving Throws", creature.saving_throws),
        _labelled("Skills", creature.skills),
        _labelled("Damage Vulnerabilities", _display_names(creature.damage_vulnerabilities)),
        _labelled("Damage Resistances", _display_names(creature.damage_resistances)),
        _labelled("Damage Immunities", _display_names(creature.damage_immunities)),
        _labelled("Condition Immunities", _display_names(creature.condition_immunities)),
        _labelled("Senses", creature.senses),
        _languages_line(creature),
        f"Challenge {creature.challenge_rating}",
    ]
    lines.extend(str(trait) for trait in creature.racial_traits or [])
    lines.extend(str(other) for other in creature.others or [])
    if creature.description:
        lines.append(creature.description)
    if creature.actions:
        lines.append("Actions")
        lines.extend(action.render() for action in creature.actions)
    if creature.lair is not None:
        lines.extend(_render_lair(creature.lair))

    return "\n".join(line for line in lines if line is not None)


def render_item(item: Item) -> str:
    """Render an item card.

    Args:
        item: The item to render.

    Returns:
        The item card as newline-separated text.
    """
    logger.debug("Rendering stat block", kind="item", id=item.id)

    lines: list[str | None] = [item.name, item.header()]
    if item.weapon_type is not None:
        lines.append(f"Weapon Type {item.weapon_type.display_name}")
    if item.armor_type is not None:
        lines.append(f"Armor Type {item.armor_type.display_name}")
    if item.charges is not None:
        lines.append(f"Charges {item.charges}")
    lines.append(_labelled("Conditions", _display_names(item.conditions)))
    if item.attached_spell is not None:
        spell = item.attached_spell
        lines.append(f"Spell {spell.name} ({spell.summary()})")
    lines.extend(str(other) for other in item.others or [])
    if item.actions:
        lines.append("Actions")
        lines.extend(action.render() for action in item.actions)
    if item.inventory:
        lines.append("Contents")
        lines.extend(f"{held.name} ({held.header()})" for held in item.inventory)

    return "\n".join(line for line in lines if line is not None)


def render_spell(spell: Spell) -> str:
    """Render a spell card.

    Args:
        spell: The spell to render.

    Returns:
        The spell card as newline-separated text.
    """
    logger.debug("Rendering stat block", kind="spell", id=spell.id)

    lines = [
        spell.name,
        spell.level.display_name,
        f"Casting Time {spell.casting_time.display_name}",
        f"Range {spell.range}",
    ]
    if spell.area is not None:
        lines.append(f"Area {spell.area}")
    lines.append(f"Components {spell.components}")
    lines.append(f"Duration {spell.duration.display_name}")
    if spell.attack_bonus is not None:
        lines.append(f"Attack {signed(spell.attack_bonus)} to hit")
    if spell.save is not None:
        lines.append(f"Saving Throw {spell.save}")
    if spell.damage is not None:
        damage = str(spell.damage)
        if spell.damage_type is not None:
            damage = f"{damage} {spell.damage_type.display_name}"
        lines.append(f"Damage {damage}")
    lines.append(spell.description)

    return "\n".join(lines)


__all__ = [
    "render_creature",
    "render_item",
    "render_spell",
]
