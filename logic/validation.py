"""Pydantic schemas for API payloads and generative-model replies.

Wire payloads use camelCase (``firstName``, ``isFavorite``); every schema also
accepts the snake_case field names so that internal callers and tests can
build them directly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from models.taxonomy import validate_category


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Requests


class RegisterRequest(CamelModel):
    username: str = Field(min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    confirm_password: str
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)

    @field_validator("username", "first_name", "last_name")
    @classmethod
    def _strip(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)


class StylePreferencesUpdate(CamelModel):
    minimalist: Optional[int] = Field(default=None, ge=0, le=100)
    bold_colors: Optional[int] = Field(default=None, ge=0, le=100)
    vintage: Optional[int] = Field(default=None, ge=0, le=100)
    formal: Optional[int] = Field(default=None, ge=0, le=100)


class ColorPersonalityUpdate(CamelModel):
    undertone: Optional[Literal["warm", "cool", "neutral"]] = None
    preferred_colors: Optional[List[str]] = None


class ProfileUpdate(CamelModel):
    """Partial profile update; only fields present in the body are applied."""

    style_preferences: Optional[StylePreferencesUpdate] = None
    color_personality: Optional[ColorPersonalityUpdate] = None
    body_type: Optional[str] = None
    favorite_occasions: Optional[List[str]] = None
    mood_preferences: Optional[List[str]] = None


class RecommendationRequest(CamelModel):
    occasion: str = Field(min_length=1, max_length=64)
    mood: str = Field(min_length=1, max_length=64)
    count: int = Field(default=2, ge=1, le=6)


class FavoriteUpdate(CamelModel):
    is_favorite: bool


class WardrobeItemCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    category: str
    colors: List[str]
    image_url: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    purchased: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        return validate_category(value)


class WardrobeItemUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[str] = None
    colors: Optional[List[str]] = None
    image_url: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    purchased: Optional[datetime] = None
    tags: Optional[List[str]] = None

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: Optional[str]) -> Optional[str]:
        return validate_category(value) if value is not None else None


class PaletteRequest(CamelModel):
    base_colors: List[str]

    @field_validator("base_colors", mode="before")
    @classmethod
    def _must_be_array(cls, value: Any) -> Any:
        if not isinstance(value, list):
            raise ValueError("baseColors must be an array")
        return value


class FeedbackCreate(CamelModel):
    outfit_id: Optional[str] = None
    analysis_id: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=2000)


# Responses


class MessageResponse(CamelModel):
    message: str


class UserPublic(CamelModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str


class AuthResponse(CamelModel):
    user: UserPublic
    token: str


class StylePreferencesPublic(CamelModel):
    minimalist: int
    bold_colors: int
    vintage: int
    formal: int


class ColorPersonalityPublic(CamelModel):
    undertone: str
    preferred_colors: List[str]


class ProfilePublic(CamelModel):
    id: str
    user_id: str
    style_preferences: StylePreferencesPublic
    color_personality: ColorPersonalityPublic
    body_type: Optional[str] = None
    favorite_occasions: List[str]
    mood_preferences: List[str]


class OutfitItemsPublic(CamelModel):
    top: Optional[str] = None
    bottom: Optional[str] = None
    shoes: Optional[str] = None
    accessories: List[str] = Field(default_factory=list)


class OutfitFeedbackPublic(CamelModel):
    feedback: str
    suggestions: List[str]
    impact: str


class OutfitPublic(CamelModel):
    id: str
    user_id: str
    name: str
    occasion: str
    mood: str
    items: OutfitItemsPublic
    colors: List[str]
    confidence_score: int
    ai_analysis: Optional[OutfitFeedbackPublic] = None
    is_favorite: bool
    created_at: datetime


class WardrobeItemPublic(CamelModel):
    id: str
    user_id: str
    name: str
    category: str
    colors: List[str]
    image_url: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    purchased: Optional[datetime] = None
    tags: List[str]


class ColorAnalysisPublic(CamelModel):
    dominant_colors: List[str]
    complementary_colors: List[str]


class StyleMatchPublic(CamelModel):
    occasion: str
    mood: str
    confidence: int


class ImageAnalysisPublic(CamelModel):
    suitability: int
    feedback: str
    suggestions: List[str]
    color_analysis: ColorAnalysisPublic
    style_match: StyleMatchPublic


class AnalysisPublic(CamelModel):
    id: str
    user_id: str
    image_url: str
    analysis: ImageAnalysisPublic
    user_rating: Optional[int] = None
    created_at: datetime


class FeedbackPublic(CamelModel):
    id: str
    user_id: str
    outfit_id: Optional[str] = None
    analysis_id: Optional[str] = None
    rating: int
    comment: Optional[str] = None
    created_at: datetime


class PaletteResponse(CamelModel):
    complementary_colors: List[str]


class ConfidenceStats(CamelModel):
    average: int
    trend: Literal["improving", "declining", "stable", "neutral"]


class StyleStats(CamelModel):
    confidence: ConfidenceStats
    outfit_count: int
    favorite_count: int
    analysis_count: int
    wardrobe_by_category: Dict[str, int]


# Generative-model replies


class AIRecommendation(CamelModel):
    name: str
    occasion: str
    mood: str
    items: OutfitItemsPublic
    colors: List[str]
    confidence_score: float
    feedback: str
    impact: str
    suggestions: List[str] = Field(default_factory=list)


class AIRecommendationBatch(CamelModel):
    recommendations: List[AIRecommendation] = Field(default_factory=list)


class AIStyleMatch(CamelModel):
    occasion: str
    mood: str
    confidence: float


class AIImageAnalysis(CamelModel):
    suitability: float
    feedback: str
    suggestions: List[str]
    color_analysis: ColorAnalysisPublic
    style_match: AIStyleMatch


class AIPalette(CamelModel):
    complementary_colors: List[str] = Field(default_factory=list)


def describe_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into ``field: reason`` text for clients."""

    parts = []
    for error in errors:
        loc = [
            part
            for part in error.get("loc", ())
            if isinstance(part, str) and part not in ("body", "query", "path")
        ]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts) or "Invalid request"


__all__ = [
    "CamelModel",
    "RegisterRequest",
    "LoginRequest",
    "ProfileUpdate",
    "RecommendationRequest",
    "FavoriteUpdate",
    "WardrobeItemCreate",
    "WardrobeItemUpdate",
    "PaletteRequest",
    "FeedbackCreate",
    "MessageResponse",
    "UserPublic",
    "AuthResponse",
    "ProfilePublic",
    "OutfitPublic",
    "WardrobeItemPublic",
    "AnalysisPublic",
    "FeedbackPublic",
    "PaletteResponse",
    "ConfidenceStats",
    "StyleStats",
    "AIRecommendation",
    "AIRecommendationBatch",
    "AIImageAnalysis",
    "AIPalette",
    "describe_errors",
]
