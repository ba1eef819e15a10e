"""Fixed demo payloads served when no Gemini API key is configured."""

from __future__ import annotations

from typing import List

from models.analysis import ColorAnalysis, ImageAnalysisResult, StyleMatch
from models.outfit import OutfitItems, OutfitRecommendation

DEMO_NOTICE = (
    "This is a demo {kind}. Add a Gemini API key to get personalized AI-powered results."
)


def mock_recommendations(occasion: str, mood: str) -> List[OutfitRecommendation]:
    return [
        OutfitRecommendation(
            name=f"Perfect {occasion} Look",
            occasion=occasion,
            mood=mood,
            items=OutfitItems(
                top="Classic white button-down shirt",
                bottom="Dark blue tailored trousers",
                shoes="Brown leather loafers",
                accessories=["Minimalist watch", "Leather belt"],
            ),
            colors=["#FFFFFF", "#1E3A8A", "#8B4513"],
            confidence_score=85,
            feedback=DEMO_NOTICE.format(kind="recommendation")
            + " This classic combination works well for professional occasions.",
            impact="Projects confidence and professionalism",
            suggestions=[
                "Add a blazer for a more formal look",
                "Consider a pocket square for added elegance",
                "Try different shoe colors to match your style",
            ],
        ),
        OutfitRecommendation(
            name=f"Casual {mood} Style",
            occasion=occasion,
            mood=mood,
            items=OutfitItems(
                top="Soft cotton t-shirt",
                bottom="Comfortable jeans",
                shoes="White sneakers",
                accessories=["Canvas tote bag", "Simple necklace"],
            ),
            colors=["#F8F9FA", "#6C757D", "#FFFFFF"],
            confidence_score=80,
            feedback=DEMO_NOTICE.format(kind="recommendation")
            + " This relaxed look is perfect for casual outings.",
            impact="Conveys comfort and approachability",
            suggestions=[
                "Layer with a denim jacket for cooler weather",
                "Add colorful accessories to express personality",
                "Try different jean washes for variety",
            ],
        ),
    ]


def mock_analysis() -> ImageAnalysisResult:
    return ImageAnalysisResult(
        suitability=75,
        feedback=DEMO_NOTICE.format(kind="analysis")
        + " The outfit looks well-coordinated with good color harmony.",
        suggestions=[
            "Consider adding a statement accessory to elevate the look",
            "The color combination works well for casual occasions",
            "Try experimenting with different shoe styles for variety",
        ],
        color_analysis=ColorAnalysis(
            dominant_colors=["#2C3E50", "#E8F4FD", "#95A5A6"],
            complementary_colors=["#E74C3C", "#F39C12", "#27AE60", "#8E44AD"],
        ),
        style_match=StyleMatch(occasion="Casual Day Out", mood="Relaxed and Comfortable", confidence=80),
    )


MOCK_PALETTE: List[str] = [
    "#E74C3C",
    "#F39C12",
    "#F1C40F",
    "#27AE60",
    "#3498DB",
    "#8E44AD",
    "#E67E22",
    "#2ECC71",
]


__all__ = ["mock_recommendations", "mock_analysis", "MOCK_PALETTE"]
