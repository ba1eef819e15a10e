"""Wearorithm use cases wired over the store, auth helpers and style gateway."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import timedelta
from typing import Any, Dict, List, Optional

from logic.stats import confidence_stats, wardrobe_by_category
from logic.validation import (
    FeedbackCreate,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    WardrobeItemCreate,
    WardrobeItemUpdate,
)
from memory.store import DuplicateUserError, InMemoryStore, Store
from models.analysis import OutfitAnalysis, UserFeedback
from models.outfit import Outfit, outfit_from_recommendation
from models.taxonomy import validate_category
from models.user import User, UserProfile, default_profile
from models.wardrobe_item import WardrobeItem
from tools.security import (
    InvalidTokenError,
    TokenClaims,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from tools.style_gateway import StyleGateway
from tools.uploads import ImageUpload, validate_image_upload
from wearorithm_app.config import WearorithmConfig
from wearorithm_app.errors import AuthenticationFailed, NotFound, PermissionDenied, ValidationFailed
from wearorithm_app.logging_config import configure_logging, get_logger, log_event, operation_context

LOGGER = get_logger(__name__)

# Nested profile sections that merge key-by-key instead of being replaced.
_MERGED_PROFILE_SECTIONS = ("style_preferences", "color_personality")
# Optional wardrobe fields a client may reset with an explicit null.
_CLEARABLE_ITEM_FIELDS = {"image_url", "brand", "size", "purchased"}


class WearorithmApp:
    """Entry point for every API operation.

    Methods take plain ids and validated request models and return domain
    records; failures are raised as :mod:`wearorithm_app.errors` exceptions
    carrying the HTTP status the API layer should use.
    """

    def __init__(
        self,
        config: WearorithmConfig | None = None,
        store: Store | None = None,
        gateway: StyleGateway | None = None,
    ) -> None:
        self.config = config or WearorithmConfig.from_env()
        configure_logging()
        self.store = store or InMemoryStore()
        self.gateway = gateway or StyleGateway(self.config)

    # Auth

    def _issue_token(self, user: User) -> str:
        return create_access_token(
            user,
            self.config.session_secret,
            timedelta(minutes=self.config.token_ttl_minutes),
        )

    def register(self, payload: RegisterRequest) -> Dict[str, Any]:
        with operation_context("app:register"):
            if self.store.get_user_by_email(payload.email):
                raise ValidationFailed("User already exists with this email")
            if self.store.get_user_by_username(payload.username):
                raise ValidationFailed("Username already taken")

            user = User(
                username=payload.username,
                email=payload.email,
                password=hash_password(payload.password),
                first_name=payload.first_name,
                last_name=payload.last_name,
            )
            try:
                self.store.create_user(user)
            except DuplicateUserError as exc:
                # Lost a race with a concurrent registration.
                if exc.field_name == "email":
                    raise ValidationFailed("User already exists with this email") from exc
                raise ValidationFailed("Username already taken") from exc

            self.store.create_user_profile(default_profile(user.id))
            log_event(LOGGER, logging.INFO, "user_registered", user_id=user.id)
            return {"user": user.public(), "token": self._issue_token(user)}

    def login(self, payload: LoginRequest) -> Dict[str, Any]:
        with operation_context("app:login"):
            user = self.store.get_user_by_email(payload.email)
            if user is None or not verify_password(payload.password, user.password):
                log_event(LOGGER, logging.INFO, "login_rejected")
                raise AuthenticationFailed("Invalid credentials")
            log_event(LOGGER, logging.INFO, "login_succeeded", user_id=user.id)
            return {"user": user.public(), "token": self._issue_token(user)}

    def authenticate_token(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise AuthenticationFailed("Access token required")
        try:
            return decode_access_token(token, self.config.session_secret)
        except InvalidTokenError as exc:
            raise PermissionDenied("Invalid or expired token") from exc

    # Profile

    def get_profile(self, user_id: str) -> UserProfile:
        profile = self.store.get_user_profile(user_id)
        if profile is None:
            profile = self.store.create_user_profile(default_profile(user_id))
        return profile

    def update_profile(self, user_id: str, payload: ProfileUpdate) -> UserProfile:
        current = self.get_profile(user_id)
        updates = payload.model_dump(exclude_unset=True)
        for section in _MERGED_PROFILE_SECTIONS:
            if section in updates:
                merged = asdict(getattr(current, section))
                merged.update({k: v for k, v in (updates[section] or {}).items() if v is not None})
                updates[section] = merged
        try:
            updated = self.store.update_user_profile(user_id, updates)
        except ValueError as exc:
            raise ValidationFailed(str(exc)) from exc
        if updated is None:
            raise NotFound("Profile not found")
        return updated

    # Outfits

    def recommend_outfits(self, user_id: str, occasion: str, mood: str, count: int = 2) -> List[Outfit]:
        with operation_context("app:recommend_outfits"):
            profile = self.store.get_user_profile(user_id)
            recommendations = self.gateway.generate_outfit_recommendations(profile, occasion, mood, count)
            saved = [
                self.store.create_outfit(outfit_from_recommendation(user_id, rec))
                for rec in recommendations
            ]
            log_event(
                LOGGER,
                logging.INFO,
                "outfits_recommended",
                user_id=user_id,
                occasion=occasion,
                mood=mood,
                outfit_count=len(saved),
            )
            return saved

    def list_outfits(self, user_id: str) -> List[Outfit]:
        return self.store.get_outfits_by_user(user_id)

    def get_outfit(self, user_id: str, outfit_id: str) -> Outfit:
        outfit = self.store.get_outfit(outfit_id)
        if outfit is None or outfit.user_id != user_id:
            raise NotFound("Outfit not found")
        return outfit

    def set_favorite(self, user_id: str, outfit_id: str, is_favorite: bool) -> Outfit:
        self.get_outfit(user_id, outfit_id)
        updated = self.store.update_outfit(outfit_id, {"is_favorite": is_favorite})
        if updated is None:
            raise NotFound("Outfit not found")
        return updated

    def delete_outfit(self, user_id: str, outfit_id: str) -> None:
        self.get_outfit(user_id, outfit_id)
        if not self.store.delete_outfit(outfit_id):
            raise NotFound("Outfit not found")

    # Image analysis

    def analyze_image(
        self,
        user_id: str,
        filename: Optional[str],
        content_type: Optional[str],
        data: Optional[bytes],
    ) -> OutfitAnalysis:
        with operation_context("app:analyze_image"):
            upload: ImageUpload = validate_image_upload(
                filename, content_type, data, max_bytes=self.config.max_upload_bytes
            )
            result = self.gateway.analyze_outfit_image(upload.data, upload.content_type)
            analysis = self.store.create_outfit_analysis(
                OutfitAnalysis(user_id=user_id, image_url=upload.data_url(), analysis=result)
            )
            log_event(
                LOGGER,
                logging.INFO,
                "image_analyzed",
                user_id=user_id,
                analysis_id=analysis.id,
                size_bytes=len(upload.data),
                suitability=result.suitability,
            )
            return analysis

    def list_analyses(self, user_id: str) -> List[OutfitAnalysis]:
        return self.store.get_outfit_analyses(user_id)

    # Wardrobe

    def list_wardrobe(self, user_id: str, category: Optional[str] = None) -> List[WardrobeItem]:
        items = self.store.get_wardrobe_items(user_id)
        if not category or category == "all":
            return items
        try:
            wanted = validate_category(category)
        except ValueError as exc:
            raise ValidationFailed(str(exc)) from exc
        return [item for item in items if item.category == wanted]

    def add_wardrobe_item(self, user_id: str, payload: WardrobeItemCreate) -> WardrobeItem:
        try:
            item = WardrobeItem(user_id=user_id, **payload.model_dump())
        except ValueError as exc:
            raise ValidationFailed(str(exc)) from exc
        return self.store.create_wardrobe_item(item)

    def _owned_item(self, user_id: str, item_id: str) -> WardrobeItem:
        item = self.store.get_wardrobe_item(item_id)
        if item is None or item.user_id != user_id:
            raise NotFound("Item not found")
        return item

    def update_wardrobe_item(self, user_id: str, item_id: str, payload: WardrobeItemUpdate) -> WardrobeItem:
        self._owned_item(user_id, item_id)
        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in _CLEARABLE_ITEM_FIELDS
        }
        try:
            updated = self.store.update_wardrobe_item(item_id, updates)
        except ValueError as exc:
            raise ValidationFailed(str(exc)) from exc
        if updated is None:
            raise NotFound("Item not found")
        return updated

    def delete_wardrobe_item(self, user_id: str, item_id: str) -> None:
        self._owned_item(user_id, item_id)
        if not self.store.delete_wardrobe_item(item_id):
            raise NotFound("Item not found")

    # Colors

    def color_palette(self, base_colors: List[str]) -> List[str]:
        with operation_context("app:color_palette"):
            return self.gateway.generate_color_palette(base_colors)

    # Feedback

    def submit_feedback(self, user_id: str, payload: FeedbackCreate) -> UserFeedback:
        if payload.outfit_id is not None:
            self.get_outfit(user_id, payload.outfit_id)
        if payload.analysis_id is not None:
            analysis = self.store.get_outfit_analysis(payload.analysis_id)
            if analysis is None or analysis.user_id != user_id:
                raise NotFound("Analysis not found")

        feedback = self.store.create_user_feedback(
            UserFeedback(
                user_id=user_id,
                rating=payload.rating,
                outfit_id=payload.outfit_id,
                analysis_id=payload.analysis_id,
                comment=payload.comment,
            )
        )
        if payload.analysis_id is not None:
            self.store.update_outfit_analysis(payload.analysis_id, {"user_rating": payload.rating})
        return feedback

    def list_feedback(self, user_id: str) -> List[UserFeedback]:
        return self.store.get_user_feedback(user_id)

    # Stats

    def style_stats(self, user_id: str) -> Dict[str, Any]:
        outfits = self.store.get_outfits_by_user(user_id)
        return {
            "confidence": confidence_stats(outfits),
            "outfit_count": len(outfits),
            "favorite_count": sum(1 for outfit in outfits if outfit.is_favorite),
            "analysis_count": len(self.store.get_outfit_analyses(user_id)),
            "wardrobe_by_category": wardrobe_by_category(self.store.get_wardrobe_items(user_id)),
        }


__all__ = ["WearorithmApp"]
