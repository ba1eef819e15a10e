"""Wardrobe item data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from models.common import ensure_list, new_id
from models.taxonomy import normalize_colors, normalize_tags, validate_category


@dataclass
class WardrobeItem:
    """Represents a garment or accessory in the user's wardrobe."""

    user_id: str
    name: str
    category: str
    colors: List[str] = field(default_factory=list)
    image_url: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    purchased: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        self.name = self.name.strip()
        if not self.name:
            raise ValueError("Wardrobe item name is required")
        self.category = validate_category(self.category)
        self.colors = normalize_colors(ensure_list(self.colors))
        self.tags = normalize_tags(ensure_list(self.tags))


__all__ = ["WardrobeItem"]
