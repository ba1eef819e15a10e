"""Canonical labels for occasions, moods, wardrobe categories and colors.

Occasion and mood tags stay free text on the wire; these helpers only
normalise them so that ``"Work Meeting"`` and ``"work-meeting"`` are stored
the same way. Wardrobe categories and undertones are validated.
"""

import re
from typing import Iterable, List

OCCASIONS = [
    "work-meeting",
    "casual-day",
    "date-night",
    "weekend-brunch",
    "formal-event",
    "workout",
]

MOODS = ["confident", "playful", "elegant", "bold", "calm", "creative"]

CATEGORIES = ["top", "bottom", "shoes", "accessory", "outerwear", "dress"]

UNDERTONES = ["warm", "cool", "neutral"]

STYLE_AXES = ["minimalist", "bold_colors", "vintage", "formal"]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_tag(value: str) -> str:
    """Lower-case a free-form tag and join its words with hyphens."""

    return "-".join(value.strip().lower().replace("_", " ").split())


def validate_category(value: str) -> str:
    """Validate and normalise a wardrobe category.

    Plural forms used by the client filters ("tops", "accessories") are
    accepted and folded onto the canonical singular; "shoe" folds onto
    "shoes".
    """

    key = normalize_tag(value)
    candidates = [key, key + "s"]
    if key.endswith("ies"):
        candidates.append(key[:-3] + "y")
    if key.endswith("es"):
        candidates.append(key[:-2])
    if key.endswith("s"):
        candidates.append(key[:-1])
    for candidate in candidates:
        if candidate in CATEGORIES:
            return candidate
    raise ValueError(f"Unsupported category '{value}'. Allowed: {CATEGORIES}")


def validate_undertone(value: str) -> str:
    key = value.strip().lower()
    if key not in UNDERTONES:
        raise ValueError(f"Unsupported undertone '{value}'. Allowed: {UNDERTONES}")
    return key


def normalize_hex_color(value: str) -> str:
    """Return ``#RRGGBB`` for hex input, or the trimmed value for color names."""

    stripped = value.strip()
    match = _HEX_PATTERN.match(stripped)
    if not match:
        return stripped.lower()
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def normalize_colors(values: Iterable[str]) -> List[str]:
    """Normalise colors, dropping blanks and duplicates while keeping order."""

    seen = set()
    colors = []
    for value in values:
        color = normalize_hex_color(str(value))
        if color and color not in seen:
            seen.add(color)
            colors.append(color)
    return colors


def normalize_tags(values: Iterable[str]) -> List[str]:
    tags = []
    for value in values:
        tag = normalize_tag(str(value))
        if tag and tag not in tags:
            tags.append(tag)
    return tags


__all__ = [
    "OCCASIONS",
    "MOODS",
    "CATEGORIES",
    "UNDERTONES",
    "STYLE_AXES",
    "normalize_tag",
    "validate_category",
    "validate_undertone",
    "normalize_hex_color",
    "normalize_colors",
    "normalize_tags",
]
