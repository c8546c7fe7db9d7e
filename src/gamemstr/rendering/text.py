"""Text helpers shared by the stat-block renderers.

Number spelling is delegated to num2words and normalised to the US
form used in published stat blocks ("one hundred twenty", not
"one hundred and twenty").
"""

from __future__ import annotations

from collections.abc import Iterable

from num2words import num2words

from gamemstr.core.exceptions import RenderError


def number_to_words(value: int) -> str:
    """Spell out a non-negative integer in English words.

    Args:
        value: The number to spell out.

    Returns:
        The number in words (e.g., 'thirty', 'twenty-five').

    Raises:
        RenderError: If value is negative or not an integer.

    Example:
        >>> number_to_words(30)
        'thirty'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise RenderError("Only integers can be spelled out", value=value)
    if value < 0:
        raise RenderError("Negative numbers cannot be spelled out", value=value)
    return num2words(value, lang="en").replace(" and ", " ").replace(",", "")


def signed(value: int) -> str:
    """Format a modifier with an explicit sign.

    Example:
        >>> signed(4), signed(-1), signed(0)
        ('+4', '-1', '+0')
    """
    return f"{value:+d}"


def join_phrases(phrases: Iterable[object], separator: str = ", ") -> str:
    """Join rendered phrases with a separator."""
    return separator.join(str(phrase) for phrase in phrases)


__all__ = [
    "number_to_words",
    "signed",
    "join_phrases",
]
