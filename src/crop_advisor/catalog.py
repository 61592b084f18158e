"""
Crop Catalog
============

Fixed set of candidate crops. Catalog order matters: it breaks ties when
candidates are ranked, and the first eight entries are the crops the wizard
offers as "grown last season" choices.
"""

from typing import Dict, Optional, Tuple

from .models import CropDefinition, ProfitTier


CROP_CATALOG: Tuple[CropDefinition, ...] = (
    CropDefinition("tomatoes", "🍅", "25-40", ProfitTier.HIGH, 85),
    CropDefinition("lettuce", "🥬", "10-15", ProfitTier.MEDIUM, 92),
    CropDefinition("carrots", "🥕", "20-30", ProfitTier.MEDIUM, 88),
    CropDefinition("peppers", "🌶️", "15-25", ProfitTier.HIGH, 82),
    CropDefinition("broccoli", "🥦", "8-12", ProfitTier.MEDIUM, 90),
    CropDefinition("spinach", "🌿", "12-18", ProfitTier.MEDIUM, 95),
    CropDefinition("wheat", "🌾", "2-3", ProfitTier.LOW, 75),
    CropDefinition("rice", "🍚", "3-5", ProfitTier.LOW, 60),
    CropDefinition("maize", "🌽", "4-6", ProfitTier.MEDIUM, 70),
    CropDefinition("potato", "🥔", "30-50", ProfitTier.MEDIUM, 80),
    CropDefinition("onion", "🧅", "20-35", ProfitTier.HIGH, 85),
    CropDefinition("cabbage", "🥬", "25-45", ProfitTier.MEDIUM, 88),
    CropDefinition("peas", "🫛", "3-6", ProfitTier.MEDIUM, 94),
    CropDefinition("rye", "🌾", "1.5-2.5", ProfitTier.LOW, 85),
)

_CROPS_BY_KEY: Dict[str, CropDefinition] = {crop.key: crop for crop in CROP_CATALOG}

PAST_CROP_OPTION_COUNT = 8


def get_crop(key: str) -> Optional[CropDefinition]:
    """Look up a catalog crop by key; None if the key is unknown."""
    return _CROPS_BY_KEY.get(key)


def is_known_crop(key: str) -> bool:
    return key in _CROPS_BY_KEY


def past_crop_options() -> Tuple[CropDefinition, ...]:
    """Crops the wizard lists for the planting-history question."""
    return CROP_CATALOG[:PAST_CROP_OPTION_COUNT]


def sustainability_band(score: int) -> str:
    """Colour band for the sustainability bar: high (>=90), medium (>=75), low."""
    if score >= 90:
        return "high"
    if score >= 75:
        return "medium"
    return "low"
