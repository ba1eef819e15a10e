"""Use-case level checks that bypass the HTTP layer."""

import pytest

from logic.validation import RegisterRequest, WardrobeItemCreate
from memory.store import InMemoryStore
from wearorithm_app.app import WearorithmApp
from wearorithm_app.errors import AuthenticationFailed, NotFound, PermissionDenied, ValidationFailed


class _RacyStore(InMemoryStore):
    """Pretends the pre-insert lookups saw nothing, as a concurrent writer would."""

    def get_user_by_email(self, email):
        return None

    def get_user_by_username(self, username):
        return None


def _request(username: str, email: str) -> RegisterRequest:
    return RegisterRequest(
        username=username,
        email=email,
        password="secret123",
        confirm_password="secret123",
        first_name="Test",
        last_name="User",
    )


def test_register_creates_default_profile(service: WearorithmApp) -> None:
    result = service.register(_request("ada", "ada@example.com"))

    profile = service.store.get_user_profile(result["user"]["id"])
    assert profile is not None
    assert profile.style_preferences.minimalist == 50


def test_lost_registration_race_is_a_validation_error(config) -> None:
    service = WearorithmApp(config=config, store=_RacyStore())
    service.register(_request("ada", "ada@example.com"))

    with pytest.raises(ValidationFailed, match="User already exists with this email"):
        service.register(_request("bob", "ada@example.com"))
    with pytest.raises(ValidationFailed, match="Username already taken"):
        service.register(_request("ada", "other@example.com"))


def test_profile_is_created_on_first_access(service: WearorithmApp) -> None:
    profile = service.get_profile("user-without-profile")

    assert profile.user_id == "user-without-profile"
    assert service.store.get_user_profile("user-without-profile") is not None


def test_authenticate_token_errors(service: WearorithmApp) -> None:
    with pytest.raises(AuthenticationFailed, match="Access token required"):
        service.authenticate_token(None)

    with pytest.raises(PermissionDenied):
        service.authenticate_token("garbage")


def test_wardrobe_ownership_is_enforced(service: WearorithmApp) -> None:
    item = service.add_wardrobe_item(
        "owner",
        WardrobeItemCreate(name="Loafers", category="shoes", colors=["brown"]),
    )

    with pytest.raises(NotFound):
        service.delete_wardrobe_item("someone-else", item.id)
    assert service.list_wardrobe("owner") == [item]
