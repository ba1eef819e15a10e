"""Gateway to the hosted Gemini model for outfit advice.

The gateway owns prompt assembly, the structured-output request and parsing of
the JSON reply into domain records. Without an API key it never touches the
network and answers with the fixed payloads from :mod:`tools.mock_responses`.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from google import generativeai as genai
from pydantic import BaseModel

from logic import prompts
from logic.validation import AIImageAnalysis, AIPalette, AIRecommendationBatch
from models.analysis import ColorAnalysis, ImageAnalysisResult, StyleMatch
from models.outfit import OutfitItems, OutfitRecommendation
from models.taxonomy import normalize_colors
from models.user import UserProfile
from tools.mock_responses import MOCK_PALETTE, mock_analysis, mock_recommendations
from tools.observability import instrument_call
from wearorithm_app.config import WearorithmConfig
from wearorithm_app.errors import GatewayError
from wearorithm_app.logging_config import get_logger, log_event

LOGGER = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

# (model_name, response_schema, system_instruction) -> object with generate_content()
ModelFactory = Callable[[str, Dict[str, Any], str], Any]


def gemini_model_factory(model_name: str, response_schema: Dict[str, Any], system_prompt: str) -> Any:
    return genai.GenerativeModel(
        model_name=model_name,
        system_instruction=system_prompt,
        generation_config=genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=response_schema,
        ),
    )


class StyleGateway:
    """Recommendation, image-analysis and palette calls with a mock fallback."""

    def __init__(self, config: WearorithmConfig, model_factory: ModelFactory | None = None) -> None:
        self.config = config
        self._model_factory = model_factory or gemini_model_factory
        if config.ai_enabled and model_factory is None:
            genai.configure(api_key=config.gemini_api_key)

    @property
    def ai_enabled(self) -> bool:
        return self.config.ai_enabled

    def _log_mock(self, call: str) -> None:
        log_event(LOGGER, logging.INFO, "gateway_mock_response", call=call, reason="no_api_key")

    def _generate(
        self,
        *,
        model_name: str,
        schema: Dict[str, Any],
        role: str,
        contents: Any,
        reply_model: Type[M],
    ) -> M:
        """Call the model and validate its JSON reply against ``reply_model``."""

        model = self._model_factory(model_name, schema, prompts.system_instruction(role))
        response = model.generate_content(
            contents,
            request_options={"timeout": self.config.gemini_timeout_seconds},
        )
        raw = json.loads(getattr(response, "text", None) or "{}")
        return reply_model.model_validate(raw)

    @instrument_call("gemini:recommendations")
    def generate_outfit_recommendations(
        self,
        profile: Optional[UserProfile],
        occasion: str,
        mood: str,
        count: int = 2,
    ) -> List[OutfitRecommendation]:
        if not self.ai_enabled:
            self._log_mock("recommendations")
            return mock_recommendations(occasion, mood)[:count]

        try:
            batch = self._generate(
                model_name=self.config.recommendation_model,
                schema=prompts.RECOMMENDATION_SCHEMA,
                role="professional fashion stylist",
                contents=prompts.recommendation_prompt(profile, occasion, mood, count),
                reply_model=AIRecommendationBatch,
            )
        except Exception as exc:
            raise self._failure("recommendations", "Failed to generate outfit recommendations", exc) from exc

        return [
            OutfitRecommendation(
                name=rec.name,
                occasion=rec.occasion or occasion,
                mood=rec.mood or mood,
                items=OutfitItems(**rec.items.model_dump()),
                colors=rec.colors,
                confidence_score=rec.confidence_score,
                feedback=rec.feedback,
                impact=rec.impact,
                suggestions=rec.suggestions,
            )
            for rec in batch.recommendations[:count]
        ]

    @instrument_call("gemini:image_analysis")
    def analyze_outfit_image(self, image_bytes: bytes, mime_type: str) -> ImageAnalysisResult:
        if not self.ai_enabled:
            self._log_mock("image_analysis")
            return mock_analysis()

        try:
            reply = self._generate(
                model_name=self.config.analysis_model,
                schema=prompts.ANALYSIS_SCHEMA,
                role="professional fashion expert reviewing outfit photos",
                contents=[{"mime_type": mime_type, "data": image_bytes}, prompts.ANALYSIS_PROMPT],
                reply_model=AIImageAnalysis,
            )
        except Exception as exc:
            raise self._failure("image_analysis", "Failed to analyze outfit image", exc) from exc

        return ImageAnalysisResult(
            suitability=reply.suitability,
            feedback=reply.feedback,
            suggestions=list(reply.suggestions),
            color_analysis=ColorAnalysis(
                dominant_colors=reply.color_analysis.dominant_colors,
                complementary_colors=reply.color_analysis.complementary_colors,
            ),
            style_match=StyleMatch(
                occasion=reply.style_match.occasion,
                mood=reply.style_match.mood,
                confidence=reply.style_match.confidence,
            ),
        )

    @instrument_call("gemini:color_palette")
    def generate_color_palette(self, base_colors: Sequence[str]) -> List[str]:
        if not self.ai_enabled:
            self._log_mock("color_palette")
            return list(MOCK_PALETTE)

        try:
            reply = self._generate(
                model_name=self.config.palette_model,
                schema=prompts.PALETTE_SCHEMA,
                role="color theory expert",
                contents=prompts.palette_prompt(base_colors),
                reply_model=AIPalette,
            )
        except Exception as exc:
            raise self._failure("color_palette", "Failed to generate color palette", exc) from exc

        return normalize_colors(reply.complementary_colors)

    @staticmethod
    def _failure(call: str, message: str, exc: Exception) -> GatewayError:
        log_event(
            LOGGER,
            logging.ERROR,
            "gateway_call_failed",
            call=call,
            error=type(exc).__name__,
            details=str(exc)[:500],
        )
        return GatewayError(message)


__all__ = ["StyleGateway", "ModelFactory", "gemini_model_factory"]
