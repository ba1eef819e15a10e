"""User account and style profile models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from models.common import clamp_score, ensure_list, new_id, utc_now
from models.taxonomy import normalize_colors, normalize_tags, validate_undertone


@dataclass
class User:
    """A registered account. ``password`` holds the bcrypt hash only."""

    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    def public(self) -> dict:
        """Fields safe to return to clients."""

        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }


@dataclass
class StylePreferences:
    """Slider weights from 0 (not me) to 100 (very me)."""

    minimalist: int = 50
    bold_colors: int = 50
    vintage: int = 50
    formal: int = 50

    def __post_init__(self) -> None:
        self.minimalist = clamp_score(self.minimalist)
        self.bold_colors = clamp_score(self.bold_colors)
        self.vintage = clamp_score(self.vintage)
        self.formal = clamp_score(self.formal)


@dataclass
class ColorPersonality:
    undertone: str = "neutral"
    preferred_colors: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.undertone = validate_undertone(self.undertone)
        self.preferred_colors = normalize_colors(ensure_list(self.preferred_colors))


@dataclass
class UserProfile:
    """Style profile kept 1:1 with a :class:`User`."""

    user_id: str
    style_preferences: StylePreferences = field(default_factory=StylePreferences)
    color_personality: ColorPersonality = field(default_factory=ColorPersonality)
    body_type: Optional[str] = None
    favorite_occasions: List[str] = field(default_factory=list)
    mood_preferences: List[str] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if isinstance(self.style_preferences, dict):
            self.style_preferences = StylePreferences(**self.style_preferences)
        if isinstance(self.color_personality, dict):
            self.color_personality = ColorPersonality(**self.color_personality)
        self.favorite_occasions = normalize_tags(ensure_list(self.favorite_occasions))
        self.mood_preferences = normalize_tags(ensure_list(self.mood_preferences))


def default_profile(user_id: str) -> UserProfile:
    """Neutral starting profile created at registration or first access."""

    return UserProfile(user_id=user_id)


__all__ = ["User", "StylePreferences", "ColorPersonality", "UserProfile", "default_profile"]
