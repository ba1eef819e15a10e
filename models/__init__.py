"""Model package exports."""

from models.analysis import ColorAnalysis, ImageAnalysisResult, OutfitAnalysis, StyleMatch, UserFeedback
from models.outfit import Outfit, OutfitFeedback, OutfitItems, OutfitRecommendation, outfit_from_recommendation
from models.user import ColorPersonality, StylePreferences, User, UserProfile, default_profile
from models.wardrobe_item import WardrobeItem

__all__ = [
    "ColorAnalysis",
    "ColorPersonality",
    "ImageAnalysisResult",
    "Outfit",
    "OutfitAnalysis",
    "OutfitFeedback",
    "OutfitItems",
    "OutfitRecommendation",
    "StyleMatch",
    "StylePreferences",
    "User",
    "UserFeedback",
    "UserProfile",
    "WardrobeItem",
    "default_profile",
    "outfit_from_recommendation",
]
