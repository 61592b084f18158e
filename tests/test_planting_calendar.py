"""
Unit tests for the Calendar Generator
"""

import pytest

from crop_advisor.catalog import CROP_CATALOG
from crop_advisor.planting_calendar import crop_category, generate_calendar


def as_pairs(plan):
    return [(task.day, task.task_key) for task in plan.tasks]


class TestGenerateCalendar:

    @pytest.mark.parametrize("crop_key", ["wheat", "rye", "maize"])
    def test_cereal_calendar(self, crop_key):
        plan = generate_calendar(crop_key)

        assert plan.crop_key == crop_key
        assert as_pairs(plan) == [
            ("1-7", "prepareSoil"),
            ("8", "planting"),
            ("30-60", "fertilizing"),
            ("45-90", "pestScouting"),
            ("120", "harvesting"),
        ]

    def test_rice_calendar(self):
        assert as_pairs(generate_calendar("rice")) == [
            ("1-10", "preparePaddy"),
            ("11", "transplanting"),
            ("30-70", "waterManagement"),
            ("40-80", "pestScouting"),
            ("110", "harvesting"),
        ]

    @pytest.mark.parametrize("crop_key", ["tomatoes", "potato", "onion", "dragonfruit", ""])
    def test_vegetable_default(self, crop_key):
        assert as_pairs(generate_calendar(crop_key)) == [
            ("1-5", "prepareSoil"),
            ("6", "planting"),
            ("30-60", "fertilizing"),
            ("15-75", "pestScouting"),
            ("90", "harvesting"),
        ]

    def test_calendar_is_deterministic(self):
        assert generate_calendar("wheat") == generate_calendar("wheat")
        assert generate_calendar("rice") != generate_calendar("wheat")

    def test_same_category_same_tasks(self):
        assert generate_calendar("wheat").tasks == generate_calendar("maize").tasks

    def test_to_dict_layout(self):
        data = generate_calendar("rice").to_dict()

        assert data["cropKey"] == "rice"
        assert data["tasks"][0] == {"day": "1-10", "taskKey": "preparePaddy"}
        assert len(data["tasks"]) == 5


class TestCropCategory:

    def test_every_catalog_crop_has_a_category(self):
        categories = {crop.key: crop_category(crop.key) for crop in CROP_CATALOG}

        assert categories["wheat"] == "cereal"
        assert categories["rye"] == "cereal"
        assert categories["maize"] == "cereal"
        assert categories["rice"] == "rice"
        assert set(categories.values()) == {"cereal", "rice", "vegetable"}
