"""Outfit records and the AI recommendation shape they are built from."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from models.common import clamp_score, ensure_list, new_id, utc_now
from models.taxonomy import normalize_colors, normalize_tag


@dataclass
class OutfitItems:
    """Garment slots. Any slot may be empty for a partial outfit."""

    top: Optional[str] = None
    bottom: Optional[str] = None
    shoes: Optional[str] = None
    accessories: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.accessories = [str(a).strip() for a in ensure_list(self.accessories) if str(a).strip()]


@dataclass
class OutfitFeedback:
    """Stylist commentary attached to a generated outfit."""

    feedback: str
    suggestions: List[str] = field(default_factory=list)
    impact: str = ""


@dataclass
class OutfitRecommendation:
    """One outfit as returned by the style gateway, before it is saved."""

    name: str
    occasion: str
    mood: str
    items: OutfitItems
    colors: List[str]
    confidence_score: int
    feedback: str
    impact: str
    suggestions: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.items, dict):
            self.items = OutfitItems(**self.items)
        self.colors = normalize_colors(self.colors)
        self.confidence_score = clamp_score(self.confidence_score)


@dataclass
class Outfit:
    user_id: str
    name: str
    occasion: str
    mood: str
    items: OutfitItems
    colors: List[str]
    confidence_score: int
    ai_analysis: Optional[OutfitFeedback] = None
    is_favorite: bool = False
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if isinstance(self.items, dict):
            self.items = OutfitItems(**self.items)
        if isinstance(self.ai_analysis, dict):
            self.ai_analysis = OutfitFeedback(**self.ai_analysis)
        self.occasion = normalize_tag(self.occasion)
        self.mood = normalize_tag(self.mood)
        self.colors = normalize_colors(self.colors)
        self.confidence_score = clamp_score(self.confidence_score)
        self.is_favorite = bool(self.is_favorite)


def outfit_from_recommendation(user_id: str, recommendation: OutfitRecommendation) -> Outfit:
    return Outfit(
        user_id=user_id,
        name=recommendation.name,
        occasion=recommendation.occasion,
        mood=recommendation.mood,
        items=recommendation.items,
        colors=list(recommendation.colors),
        confidence_score=recommendation.confidence_score,
        ai_analysis=OutfitFeedback(
            feedback=recommendation.feedback,
            suggestions=list(recommendation.suggestions),
            impact=recommendation.impact,
        ),
    )


__all__ = [
    "OutfitItems",
    "OutfitFeedback",
    "OutfitRecommendation",
    "Outfit",
    "outfit_from_recommendation",
]
