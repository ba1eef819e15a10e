"""Repository interface and the process-local in-memory implementation.

Nothing here survives a restart. All reads hand out deep copies, so the only
way to change a stored record is through the ``update_*`` methods.
"""
from __future__ import annotations

import copy
import threading
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional, TypeVar

from models.analysis import OutfitAnalysis, UserFeedback
from models.outfit import Outfit
from models.user import User, UserProfile
from models.wardrobe_item import WardrobeItem

T = TypeVar("T")

_IMMUTABLE_FIELDS = {"id", "user_id", "created_at"}


class DuplicateUserError(ValueError):
    """Raised when an email or username is already registered."""

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(f"{field_name} '{value}' is already registered")
        self.field_name = field_name
        self.value = value


class Store:
    """Persistence interface for every Wearorithm entity."""

    # Users
    def get_user(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_user_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_user_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, user: User) -> User:
        raise NotImplementedError

    # Profiles
    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def create_user_profile(self, profile: UserProfile) -> UserProfile:
        raise NotImplementedError

    def update_user_profile(self, user_id: str, updates: Dict[str, Any]) -> Optional[UserProfile]:
        raise NotImplementedError

    # Outfits
    def get_outfits_by_user(self, user_id: str) -> List[Outfit]:
        raise NotImplementedError

    def get_outfit(self, outfit_id: str) -> Optional[Outfit]:
        raise NotImplementedError

    def create_outfit(self, outfit: Outfit) -> Outfit:
        raise NotImplementedError

    def update_outfit(self, outfit_id: str, updates: Dict[str, Any]) -> Optional[Outfit]:
        raise NotImplementedError

    def delete_outfit(self, outfit_id: str) -> bool:
        raise NotImplementedError

    # Wardrobe
    def get_wardrobe_items(self, user_id: str) -> List[WardrobeItem]:
        raise NotImplementedError

    def get_wardrobe_item(self, item_id: str) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def create_wardrobe_item(self, item: WardrobeItem) -> WardrobeItem:
        raise NotImplementedError

    def update_wardrobe_item(self, item_id: str, updates: Dict[str, Any]) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def delete_wardrobe_item(self, item_id: str) -> bool:
        raise NotImplementedError

    # Analyses
    def get_outfit_analyses(self, user_id: str) -> List[OutfitAnalysis]:
        raise NotImplementedError

    def get_outfit_analysis(self, analysis_id: str) -> Optional[OutfitAnalysis]:
        raise NotImplementedError

    def create_outfit_analysis(self, analysis: OutfitAnalysis) -> OutfitAnalysis:
        raise NotImplementedError

    def update_outfit_analysis(self, analysis_id: str, updates: Dict[str, Any]) -> Optional[OutfitAnalysis]:
        raise NotImplementedError

    # Feedback
    def get_user_feedback(self, user_id: str) -> List[UserFeedback]:
        raise NotImplementedError

    def create_user_feedback(self, feedback: UserFeedback) -> UserFeedback:
        raise NotImplementedError


class InMemoryStore(Store):
    """Dict-backed store guarded by a single re-entrant lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._profiles: Dict[str, UserProfile] = {}
        self._outfits: Dict[str, Outfit] = {}
        self._wardrobe: Dict[str, WardrobeItem] = {}
        self._analyses: Dict[str, OutfitAnalysis] = {}
        self._feedback: Dict[str, UserFeedback] = {}

    @staticmethod
    def _copy(record: Optional[T]) -> Optional[T]:
        return copy.deepcopy(record) if record is not None else None

    @staticmethod
    def _owned_by(records: Iterable[T], user_id: str) -> List[T]:
        return [copy.deepcopy(r) for r in records if getattr(r, "user_id", None) == user_id]

    @staticmethod
    def _apply(record: T, updates: Dict[str, Any]) -> T:
        """Rebuild ``record`` with ``updates`` so ``__post_init__`` re-validates."""

        data = asdict(record)
        for key, value in updates.items():
            if key in _IMMUTABLE_FIELDS or key not in data:
                continue
            data[key] = value
        return type(record)(**data)

    # Users
    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._copy(self._users.get(user_id))

    def _find_user(self, field_name: str, value: str) -> Optional[User]:
        wanted = value.strip().lower() if field_name == "email" else value
        for user in self._users.values():
            current = getattr(user, field_name)
            if (current.lower() if field_name == "email" else current) == wanted:
                return user
        return None

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._copy(self._find_user("email", email))

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return self._copy(self._find_user("username", username))

    def create_user(self, user: User) -> User:
        with self._lock:
            if self._find_user("email", user.email):
                raise DuplicateUserError("email", user.email)
            if self._find_user("username", user.username):
                raise DuplicateUserError("username", user.username)
            self._users[user.id] = copy.deepcopy(user)
        return user

    # Profiles
    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        with self._lock:
            return self._copy(self._profiles.get(user_id))

    def create_user_profile(self, profile: UserProfile) -> UserProfile:
        with self._lock:
            self._profiles[profile.user_id] = copy.deepcopy(profile)
        return profile

    def update_user_profile(self, user_id: str, updates: Dict[str, Any]) -> Optional[UserProfile]:
        with self._lock:
            current = self._profiles.get(user_id)
            if current is None:
                return None
            updated = self._apply(current, updates)
            self._profiles[user_id] = updated
            return copy.deepcopy(updated)

    # Outfits
    def get_outfits_by_user(self, user_id: str) -> List[Outfit]:
        with self._lock:
            return self._owned_by(self._outfits.values(), user_id)

    def get_outfit(self, outfit_id: str) -> Optional[Outfit]:
        with self._lock:
            return self._copy(self._outfits.get(outfit_id))

    def create_outfit(self, outfit: Outfit) -> Outfit:
        with self._lock:
            self._outfits[outfit.id] = copy.deepcopy(outfit)
        return outfit

    def update_outfit(self, outfit_id: str, updates: Dict[str, Any]) -> Optional[Outfit]:
        with self._lock:
            current = self._outfits.get(outfit_id)
            if current is None:
                return None
            updated = self._apply(current, updates)
            self._outfits[outfit_id] = updated
            return copy.deepcopy(updated)

    def delete_outfit(self, outfit_id: str) -> bool:
        with self._lock:
            return self._outfits.pop(outfit_id, None) is not None

    # Wardrobe
    def get_wardrobe_items(self, user_id: str) -> List[WardrobeItem]:
        with self._lock:
            return self._owned_by(self._wardrobe.values(), user_id)

    def get_wardrobe_item(self, item_id: str) -> Optional[WardrobeItem]:
        with self._lock:
            return self._copy(self._wardrobe.get(item_id))

    def create_wardrobe_item(self, item: WardrobeItem) -> WardrobeItem:
        with self._lock:
            self._wardrobe[item.id] = copy.deepcopy(item)
        return item

    def update_wardrobe_item(self, item_id: str, updates: Dict[str, Any]) -> Optional[WardrobeItem]:
        with self._lock:
            current = self._wardrobe.get(item_id)
            if current is None:
                return None
            updated = self._apply(current, updates)
            self._wardrobe[item_id] = updated
            return copy.deepcopy(updated)

    def delete_wardrobe_item(self, item_id: str) -> bool:
        with self._lock:
            return self._wardrobe.pop(item_id, None) is not None

    # Analyses
    def get_outfit_analyses(self, user_id: str) -> List[OutfitAnalysis]:
        with self._lock:
            return self._owned_by(self._analyses.values(), user_id)

    def get_outfit_analysis(self, analysis_id: str) -> Optional[OutfitAnalysis]:
        with self._lock:
            return self._copy(self._analyses.get(analysis_id))

    def create_outfit_analysis(self, analysis: OutfitAnalysis) -> OutfitAnalysis:
        with self._lock:
            self._analyses[analysis.id] = copy.deepcopy(analysis)
        return analysis

    def update_outfit_analysis(self, analysis_id: str, updates: Dict[str, Any]) -> Optional[OutfitAnalysis]:
        with self._lock:
            current = self._analyses.get(analysis_id)
            if current is None:
                return None
            updated = self._apply(current, updates)
            self._analyses[analysis_id] = updated
            return copy.deepcopy(updated)

    # Feedback
    def get_user_feedback(self, user_id: str) -> List[UserFeedback]:
        with self._lock:
            return self._owned_by(self._feedback.values(), user_id)

    def create_user_feedback(self, feedback: UserFeedback) -> UserFeedback:
        with self._lock:
            self._feedback[feedback.id] = copy.deepcopy(feedback)
        return feedback


__all__ = ["Store", "InMemoryStore", "DuplicateUserError"]
