"""
Integration tests for the Crop Advisor flow:
recommend -> details -> save plan -> saved plans -> delete, plus comparison.
"""

import pytest
from unittest.mock import patch, MagicMock

from crop_advisor.advisor import CropAdvisor
from crop_advisor.models import EnvironmentSnapshot
from crop_advisor.plan_store import InMemoryStorage, PlanStore


WARM_LOAM = EnvironmentSnapshot.from_dict({
    "sensorData": {"temperature": 22, "humidity": 60, "soilType": "loam", "sunlightHours": 8},
    "weatherData": {"temperature": 25, "humidity": 55, "windSpeed": 10, "condition": "Sunny"},
})


@pytest.fixture
def advisor():
    return CropAdvisor(plan_store=PlanStore(InMemoryStorage()))


class TestRecommend:

    def test_returns_top_three(self, advisor):
        result = advisor.recommend([], "2.5", WARM_LOAM)

        assert "error" not in result
        assert result["farm_size"] == 2.5
        assert [r["key"] for r in result["recommendations"]] == ["tomatoes", "peppers", "rice"]

        top = result["recommendations"][0]
        assert top["reasons"] == ["scale", "weather", "soil", "rotation"]
        assert top["emoji"] == "🍅"
        assert top["yield"] == "25-40"
        assert top["profit"] == "High"
        assert top["sustainability"] == 85
        assert top["sustainabilityBand"] == "medium"
        assert "score" not in top

    def test_history_changes_ranking(self, advisor):
        result = advisor.recommend(["tomatoes", "peppers"], 1, WARM_LOAM)

        keys = [r["key"] for r in result["recommendations"]]
        assert keys == ["rice", "maize", "tomatoes"]
        assert result["past_crops"] == ["peppers", "tomatoes"]

    @pytest.mark.parametrize("farm_size", ["", "0", -3, "lots", None])
    def test_invalid_farm_size_is_validation_message(self, advisor, farm_size):
        result = advisor.recommend([], farm_size, WARM_LOAM)

        assert result == {"error": "cropAdvisor.form.error", "recommendations": []}

    @patch('crop_advisor.advisor.generate_recommendations')
    def test_invalid_farm_size_skips_scoring(self, mock_generate, advisor):
        advisor.recommend([], "-1", WARM_LOAM)

        mock_generate.assert_not_called()

    def test_unknown_past_crops_ignored(self, advisor):
        result = advisor.recommend(["durian"], 1, WARM_LOAM)

        assert result["past_crops"] == []


class TestDetailsAndPlans:

    def test_crop_details(self, advisor):
        details = advisor.crop_details("wheat")

        assert details["key"] == "wheat"
        assert details["category"] == "cereal"
        assert details["calendar"]["tasks"][-1] == {"day": "120", "taskKey": "harvesting"}
        assert details["saved"] is False

    def test_crop_details_unknown(self, advisor):
        assert advisor.crop_details("durian") is None

    def test_save_view_delete_cycle(self, advisor):
        assert advisor.save_plan("rice") is True
        assert advisor.save_plan("tomatoes") is True
        assert advisor.crop_details("rice")["saved"] is True

        saved = advisor.saved_plans()
        assert [p["cropKey"] for p in saved] == ["rice", "tomatoes"]
        assert saved[0]["tasks"][0] == {"day": "1-10", "taskKey": "preparePaddy"}

        assert advisor.delete_plan("rice") is True
        assert [p["cropKey"] for p in advisor.saved_plans()] == ["tomatoes"]
        assert advisor.delete_plan("rice") is False

    def test_save_unknown_crop(self, advisor):
        assert advisor.save_plan("durian") is False
        assert advisor.saved_plans() == []

    def test_save_failure_reported(self):
        store = MagicMock()
        store.save_plan.return_value = False

        assert CropAdvisor(plan_store=store).save_plan("rice") is False

    @patch('crop_advisor.advisor.get_plan_store')
    def test_default_store_built_lazily(self, mock_get_store):
        mock_get_store.return_value = PlanStore(InMemoryStorage())
        advisor = CropAdvisor()
        mock_get_store.assert_not_called()

        advisor.saved_plans()

        mock_get_store.assert_called_once()


class TestCompare:

    def test_compare_known_crops(self, advisor):
        table = advisor.compare(["rice", "peas"])

        assert [c["key"] for c in table["columns"]] == ["rice", "peas"]

    def test_compare_drops_unknown(self, advisor):
        table = advisor.compare(["durian", "rice"])

        assert [c["key"] for c in table["columns"]] == ["rice"]
