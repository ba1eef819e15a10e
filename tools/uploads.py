"""Validation for outfit photo uploads."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import BinaryIO, Optional

from wearorithm_app.errors import ValidationFailed

DEFAULT_MAX_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content_type: str
    data: bytes

    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


def read_limited(stream: BinaryIO, max_bytes: int) -> bytes:
    """Read at most ``max_bytes + 1`` bytes so oversize files are detectable."""

    return stream.read(max_bytes + 1)


def validate_image_upload(
    filename: Optional[str],
    content_type: Optional[str],
    data: Optional[bytes],
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> ImageUpload:
    """Check type and size before anything is sent to the model."""

    if data is None:
        raise ValidationFailed("No image file provided")
    mime = (content_type or "").split(";")[0].strip().lower()
    if not mime.startswith("image/"):
        raise ValidationFailed("Only image files are allowed")
    if len(data) > max_bytes:
        raise ValidationFailed("File too large")
    if not data:
        raise ValidationFailed("No image file provided")
    return ImageUpload(filename=filename or "upload", content_type=mime, data=data)


__all__ = ["ImageUpload", "read_limited", "validate_image_upload", "DEFAULT_MAX_BYTES"]
