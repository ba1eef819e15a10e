"""Prompt builders and response schemas for the Gemini style gateway."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import MOODS, OCCASIONS, STYLE_AXES
from models.user import UserProfile

GUARDRAIL_BULLETS: List[str] = [
    "Stay within fashion styling: outfits, colors, fit and occasion advice.",
    "Recommend real, achievable garments rather than costumes or fantasy items.",
    "Give color values as hex codes such as #1E3A8A.",
    "Keep scores between 0 and 100 and explain them honestly.",
    "Do not comment on body weight, attractiveness, or any medical topic.",
    "Answer only with JSON matching the requested schema.",
]


def system_instruction(role_hint: str) -> str:
    """Compose the shared system prompt for one gateway role."""

    boundary_text = "\n".join(f"- {bullet}" for bullet in GUARDRAIL_BULLETS)
    return f"You are Wearorithm's {role_hint}.\nFollow these rules:\n{boundary_text}"


def _profile_context(profile: Optional[UserProfile]) -> Dict[str, Any]:
    if profile is None:
        return {"style_preferences": {}, "color_personality": {}}
    data = asdict(profile)
    return {
        "style_preferences": {axis: data["style_preferences"][axis] for axis in STYLE_AXES},
        "color_personality": data["color_personality"],
        "body_type": data.get("body_type"),
        "favorite_occasions": data.get("favorite_occasions", []),
        "mood_preferences": data.get("mood_preferences", []),
    }


def recommendation_prompt(profile: Optional[UserProfile], occasion: str, mood: str, count: int) -> str:
    context = _profile_context(profile)
    return (
        f"Generate {count} outfit recommendations for a person with these preferences.\n\n"
        f"Style preferences (0-100 sliders): {json.dumps(context['style_preferences'])}\n"
        f"Color personality: {json.dumps(context['color_personality'])}\n"
        f"Occasion: {occasion}\n"
        f"Mood: {mood}\n\n"
        "For each outfit provide a creative name, specific items (top, bottom, shoes, "
        "accessories), a hex color palette, a confidence score from 0 to 100, feedback "
        "explaining why it works, the personality impact it projects, and improvement "
        "suggestions. Label each outfit's occasion with one of "
        f"{', '.join(OCCASIONS)} and its mood with one of {', '.join(MOODS)} "
        "when one fits; otherwise reuse the requested wording."
    )


ANALYSIS_PROMPT = (
    "Analyze this outfit photo. Provide an overall suitability score (0-100), feedback "
    "on fit, style and color coordination, specific improvement suggestions, the "
    "dominant colors and complementary colors as hex codes, and the occasion, mood and "
    "confidence level (0-100) the outfit conveys. Be constructive and specific."
)


def palette_prompt(base_colors: Iterable[str]) -> str:
    colors = ", ".join(base_colors) or "no base colors"
    return (
        f"Generate a complementary color palette for these base colors: {colors}.\n"
        "Provide 5-8 additional hex colors that work with them in an outfit, mixing "
        "harmonious tones with a few accents."
    )


_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": _STRING}

RECOMMENDATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "recommendations": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": _STRING,
                    "occasion": _STRING,
                    "mood": _STRING,
                    "items": {
                        "type": "object",
                        "properties": {
                            "top": _STRING,
                            "bottom": _STRING,
                            "shoes": _STRING,
                            "accessories": _STRING_LIST,
                        },
                        "required": ["top", "bottom", "shoes", "accessories"],
                    },
                    "colors": _STRING_LIST,
                    "confidenceScore": {"type": "number"},
                    "feedback": _STRING,
                    "impact": _STRING,
                    "suggestions": _STRING_LIST,
                },
                "required": [
                    "name",
                    "occasion",
                    "mood",
                    "items",
                    "colors",
                    "confidenceScore",
                    "feedback",
                    "impact",
                    "suggestions",
                ],
            },
        }
    },
    "required": ["recommendations"],
}

ANALYSIS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "suitability": {"type": "number"},
        "feedback": _STRING,
        "suggestions": _STRING_LIST,
        "colorAnalysis": {
            "type": "object",
            "properties": {
                "dominantColors": _STRING_LIST,
                "complementaryColors": _STRING_LIST,
            },
            "required": ["dominantColors", "complementaryColors"],
        },
        "styleMatch": {
            "type": "object",
            "properties": {
                "occasion": _STRING,
                "mood": _STRING,
                "confidence": {"type": "number"},
            },
            "required": ["occasion", "mood", "confidence"],
        },
    },
    "required": ["suitability", "feedback", "suggestions", "colorAnalysis", "styleMatch"],
}

PALETTE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {"complementaryColors": _STRING_LIST},
    "required": ["complementaryColors"],
}


__all__ = [
    "GUARDRAIL_BULLETS",
    "system_instruction",
    "recommendation_prompt",
    "ANALYSIS_PROMPT",
    "palette_prompt",
    "RECOMMENDATION_SCHEMA",
    "ANALYSIS_SCHEMA",
    "PALETTE_SCHEMA",
]
