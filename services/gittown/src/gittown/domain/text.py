from __future__ import annotations

from collections.abc import Sequence

INDENT_UNIT = "  "
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")


def capture_text(raw: str) -> str:
    return raw.strip()


def indent(message: str, level: int) -> str:
    """Prefix every line of ``message`` with ``level`` two-space units."""
    prefix = INDENT_UNIT * level
    return prefix + message.replace("\n", "\n" + prefix)


def pluralize(count: str, word: str) -> str:
    """Return ``"<count> <word>"``, pluralizing the word unless count is "1".

    ``count`` is compared literally, so "01" or "1.0" are still plural.
    """
    if count == "1":
        return f"{count} {word}"
    suffix = "es" if word.endswith(_SIBILANT_ENDINGS) else "s"
    return f"{count} {word}{suffix}"


def sequence_contains(sequence: Sequence[str], target: str) -> bool:
    return any(element == target for element in sequence)


def sequence_without(sequence: Sequence[str], target: str) -> list[str]:
    return [element for element in sequence if element != target]
