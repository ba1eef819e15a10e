"""Unit tests for the in-memory repository."""

import threading

import pytest

from memory.store import DuplicateUserError, InMemoryStore
from models.analysis import OutfitAnalysis
from models.outfit import Outfit, OutfitItems
from models.user import User, default_profile
from models.wardrobe_item import WardrobeItem
from tools.mock_responses import mock_analysis


def _user(username: str = "ada", email: str = "ada@example.com") -> User:
    return User(username=username, email=email, password="hash", first_name="Ada", last_name="L")


def _outfit(user_id: str, score: int = 70) -> Outfit:
    return Outfit(
        user_id=user_id,
        name="Test look",
        occasion="Casual Day",
        mood="Calm",
        items=OutfitItems(top="Tee"),
        colors=["#fff"],
        confidence_score=score,
    )


def test_create_user_enforces_unique_email_and_username() -> None:
    store = InMemoryStore()
    store.create_user(_user())

    with pytest.raises(DuplicateUserError) as by_email:
        store.create_user(_user(username="other", email="ADA@example.com"))
    assert by_email.value.field_name == "email"

    with pytest.raises(DuplicateUserError) as by_name:
        store.create_user(_user(email="other@example.com"))
    assert by_name.value.field_name == "username"


def test_concurrent_registration_admits_exactly_one() -> None:
    store = InMemoryStore()
    errors = []

    def attempt(index: int) -> None:
        try:
            store.create_user(_user(username=f"user{index}", email="shared@example.com"))
        except DuplicateUserError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=attempt, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(errors) == 7
    assert store.get_user_by_email("shared@example.com") is not None


def test_reads_return_copies() -> None:
    store = InMemoryStore()
    outfit = store.create_outfit(_outfit("u1"))

    fetched = store.get_outfit(outfit.id)
    fetched.is_favorite = True
    fetched.items.accessories.append("Hat")

    stored = store.get_outfit(outfit.id)
    assert stored.is_favorite is False
    assert stored.items.accessories == []


def test_update_ignores_immutable_and_unknown_fields() -> None:
    store = InMemoryStore()
    outfit = store.create_outfit(_outfit("u1"))

    updated = store.update_outfit(
        outfit.id,
        {"is_favorite": True, "id": "hijack", "user_id": "u2", "bogus": 1},
    )

    assert updated.id == outfit.id
    assert updated.user_id == "u1"
    assert updated.is_favorite is True
    assert updated.created_at == outfit.created_at
    assert store.update_outfit("missing", {"is_favorite": True}) is None


def test_update_revalidates_records() -> None:
    store = InMemoryStore()
    item = store.create_wardrobe_item(WardrobeItem(user_id="u1", name="Tee", category="top", colors=["red"]))

    with pytest.raises(ValueError):
        store.update_wardrobe_item(item.id, {"category": "spaceship"})

    assert store.get_wardrobe_item(item.id).category == "top"


def test_listing_is_scoped_by_owner() -> None:
    store = InMemoryStore()
    store.create_outfit(_outfit("u1"))
    store.create_outfit(_outfit("u1"))
    store.create_outfit(_outfit("u2"))
    store.create_outfit_analysis(OutfitAnalysis(user_id="u2", image_url="data:,", analysis=mock_analysis()))

    assert len(store.get_outfits_by_user("u1")) == 2
    assert len(store.get_outfits_by_user("u2")) == 1
    assert store.get_outfit_analyses("u1") == []
    assert len(store.get_outfit_analyses("u2")) == 1


def test_profile_update_rebuilds_nested_sections() -> None:
    store = InMemoryStore()
    store.create_user_profile(default_profile("u1"))

    updated = store.update_user_profile(
        "u1",
        {"style_preferences": {"minimalist": 90, "bold_colors": 10, "vintage": 50, "formal": 50}},
    )

    assert updated.style_preferences.minimalist == 90
    assert updated.style_preferences.bold_colors == 10
    assert store.update_user_profile("missing", {}) is None


def test_delete_reports_whether_anything_was_removed() -> None:
    store = InMemoryStore()
    outfit = store.create_outfit(_outfit("u1"))

    assert store.delete_outfit(outfit.id) is True
    assert store.delete_outfit(outfit.id) is False
    assert store.get_outfit(outfit.id) is None
