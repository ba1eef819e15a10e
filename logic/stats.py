"""Summary statistics shown on the dashboard and profile pages."""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Sequence

from models.outfit import Outfit
from models.wardrobe_item import WardrobeItem

TREND_THRESHOLD = 5


def _mean(values: Sequence[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def confidence_stats(outfits: Sequence[Outfit]) -> Dict[str, object]:
    """Average confidence plus a trend comparing older and newer outfits.

    Outfits are taken in creation order and split in half; the newer half
    must beat the older half by more than ``TREND_THRESHOLD`` points to count
    as improving (or trail it by that much to count as declining).
    """

    if not outfits:
        return {"average": 0, "trend": "neutral"}

    scores = [outfit.confidence_score for outfit in sorted(outfits, key=lambda o: o.created_at)]
    average = int(math.floor(_mean(scores) + 0.5))
    midpoint = len(scores) // 2
    older, newer = scores[:midpoint], scores[midpoint:]
    if not older:
        return {"average": average, "trend": "stable"}

    older_avg, newer_avg = _mean(older), _mean(newer)
    if newer_avg > older_avg + TREND_THRESHOLD:
        trend = "improving"
    elif newer_avg < older_avg - TREND_THRESHOLD:
        trend = "declining"
    else:
        trend = "stable"
    return {"average": average, "trend": trend}


def wardrobe_by_category(items: Sequence[WardrobeItem]) -> Dict[str, int]:
    return dict(Counter(item.category for item in items))


__all__ = ["confidence_stats", "wardrobe_by_category", "TREND_THRESHOLD"]
