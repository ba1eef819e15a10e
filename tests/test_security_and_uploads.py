"""Password hashing, access tokens and upload validation helpers."""

import io
from datetime import timedelta

import pytest
from jose import jwt

from models.user import User
from tools.security import (
    ALGORITHM,
    InvalidTokenError,
    bearer_token,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from tools.uploads import read_limited, validate_image_upload
from wearorithm_app.errors import ValidationFailed

USER = User(username="ada", email="ada@example.com", password="x", first_name="Ada", last_name="L", id="user-1")


def test_password_hash_roundtrip() -> None:
    hashed = hash_password("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_token_carries_identity_and_expiry() -> None:
    token = create_access_token(USER, "s3cret", timedelta(minutes=30))

    claims = decode_access_token(token, "s3cret")
    assert (claims.id, claims.email, claims.username) == ("user-1", "ada@example.com", "ada")

    raw = jwt.decode(token, "s3cret", algorithms=[ALGORITHM])
    assert raw["exp"] - raw["iat"] == 30 * 60


def test_token_missing_claims_is_invalid() -> None:
    token = jwt.encode({"id": "user-1"}, "s3cret", algorithm=ALGORITHM)

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, "s3cret")


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", "abc.def"),
        ("Basic abc", None),
        ("Bearer", None),
        ("", None),
        (None, None),
    ],
)
def test_bearer_token_parsing(header, expected) -> None:
    assert bearer_token(header) == expected


def test_read_limited_stops_one_past_the_limit() -> None:
    assert len(read_limited(io.BytesIO(b"x" * 100), 10)) == 11
    assert read_limited(io.BytesIO(b"abc"), 10) == b"abc"


def test_validate_image_upload() -> None:
    upload = validate_image_upload("look.JPG", "image/jpeg; charset=binary", b"\xff\xd8", max_bytes=10)

    assert upload.content_type == "image/jpeg"
    assert upload.data_url() == "data:image/jpeg;base64,/9g="

    with pytest.raises(ValidationFailed, match="Only image files are allowed"):
        validate_image_upload("doc.pdf", "application/pdf", b"%PDF", max_bytes=10)
    with pytest.raises(ValidationFailed, match="File too large"):
        validate_image_upload("big.png", "image/png", b"x" * 11, max_bytes=10)
    with pytest.raises(ValidationFailed, match="No image file provided"):
        validate_image_upload(None, None, None, max_bytes=10)


def test_installed_bcrypt_exposes_version_metadata_for_passlib() -> None:
    import bcrypt

    assert bcrypt.__about__.__version__.startswith("4.0")
