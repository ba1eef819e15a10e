"""Outfit photo analyses and user feedback records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from models.common import clamp_score, new_id, utc_now
from models.taxonomy import normalize_colors


@dataclass
class ColorAnalysis:
    dominant_colors: List[str] = field(default_factory=list)
    complementary_colors: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.dominant_colors = normalize_colors(self.dominant_colors)
        self.complementary_colors = normalize_colors(self.complementary_colors)


@dataclass
class StyleMatch:
    occasion: str
    mood: str
    confidence: int

    def __post_init__(self) -> None:
        self.confidence = clamp_score(self.confidence)


@dataclass
class ImageAnalysisResult:
    """Structured verdict on an uploaded outfit photo."""

    suitability: int
    feedback: str
    suggestions: List[str]
    color_analysis: ColorAnalysis
    style_match: StyleMatch

    def __post_init__(self) -> None:
        self.suitability = clamp_score(self.suitability)
        if isinstance(self.color_analysis, dict):
            self.color_analysis = ColorAnalysis(**self.color_analysis)
        if isinstance(self.style_match, dict):
            self.style_match = StyleMatch(**self.style_match)


@dataclass
class OutfitAnalysis:
    user_id: str
    image_url: str
    analysis: ImageAnalysisResult
    user_rating: Optional[int] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if isinstance(self.analysis, dict):
            self.analysis = ImageAnalysisResult(**self.analysis)


@dataclass
class UserFeedback:
    """A 1-5 star rating on an outfit or an analysis."""

    user_id: str
    rating: int
    outfit_id: Optional[str] = None
    analysis_id: Optional[str] = None
    comment: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not 1 <= int(self.rating) <= 5:
            raise ValueError("rating must be between 1 and 5")
        self.rating = int(self.rating)


__all__ = [
    "ColorAnalysis",
    "StyleMatch",
    "ImageAnalysisResult",
    "OutfitAnalysis",
    "UserFeedback",
]
