"""
Calendar Generator
==================

Maps a crop to its cultivation task schedule. Crops fall into one of three
buckets (cereal, rice, vegetable) and each bucket has a fixed sequence of
tasks with day offsets counted from the start of soil preparation.
"""

from typing import Dict, Tuple

from .models import CalendarPlan, CalendarTask


CEREAL_CROPS = frozenset({"wheat", "rye", "maize"})
RICE_CROPS = frozenset({"rice"})

CATEGORY_CEREAL = "cereal"
CATEGORY_RICE = "rice"
CATEGORY_VEGETABLE = "vegetable"

# (day range, task key) per category
CALENDAR_TEMPLATES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    CATEGORY_CEREAL: (
        ("1-7", "prepareSoil"),
        ("8", "planting"),
        ("30-60", "fertilizing"),
        ("45-90", "pestScouting"),
        ("120", "harvesting"),
    ),
    CATEGORY_RICE: (
        ("1-10", "preparePaddy"),
        ("11", "transplanting"),
        ("30-70", "waterManagement"),
        ("40-80", "pestScouting"),
        ("110", "harvesting"),
    ),
    CATEGORY_VEGETABLE: (
        ("1-5", "prepareSoil"),
        ("6", "planting"),
        ("30-60", "fertilizing"),
        ("15-75", "pestScouting"),
        ("90", "harvesting"),
    ),
}


def crop_category(crop_key: str) -> str:
    """Calendar bucket for a crop; anything not a cereal or rice is a vegetable."""
    if crop_key in CEREAL_CROPS:
        return CATEGORY_CEREAL
    if crop_key in RICE_CROPS:
        return CATEGORY_RICE
    return CATEGORY_VEGETABLE


def generate_calendar(crop_key: str) -> CalendarPlan:
    """Build the task calendar for a crop."""
    template = CALENDAR_TEMPLATES[crop_category(crop_key)]
    return CalendarPlan(
        crop_key=crop_key,
        tasks=tuple(CalendarTask(day=day, task_key=task) for day, task in template),
    )
