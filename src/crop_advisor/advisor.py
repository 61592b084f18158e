"""
Crop Advisor
============

Drives the crop-advisor wizard end to end:
form input -> recommendations -> crop details + calendar -> saved plans.
Comparison of recommended crops runs alongside.

Responses are plain dicts ready for JSON serialization.
"""

from typing import Any, Dict, Iterable, List, Optional

from .catalog import get_crop, sustainability_band
from .comparison import build_comparison
from .models import EnvironmentSnapshot
from .plan_store import PlanStore, get_plan_store
from .planting_calendar import crop_category, generate_calendar
from .ranking import generate_recommendations
from .validation import InvalidFarmSizeError, normalize_past_crops, parse_farm_size
from .utils.logger import logger


class CropAdvisor:
    """Entry point for the dashboard's crop-advisor flow."""

    def __init__(self, plan_store: PlanStore = None):
        self._plan_store = plan_store

    @property
    def plan_store(self) -> PlanStore:
        if self._plan_store is None:
            self._plan_store = get_plan_store()
        return self._plan_store

    def recommend(
        self,
        past_crops: Iterable[str],
        farm_size: Any,
        environment: EnvironmentSnapshot,
    ) -> Dict[str, Any]:
        """
        Recommend crops for the next season.

        Args:
            past_crops: Crop keys grown recently
            farm_size: Farm size in hectares as entered (number or text)
            environment: Current sensor + weather snapshot

        Returns:
            {"recommendations": [...], "farm_size": float, "past_crops": [...]}
            or {"error": <message key>, "recommendations": []} for invalid input
        """
        try:
            size = parse_farm_size(farm_size)
        except InvalidFarmSizeError as e:
            logger.warning(f"Rejected recommendation request: {e}")
            return {"error": e.message_key, "recommendations": []}

        past = normalize_past_crops(past_crops)
        recommendations = generate_recommendations(past, size, environment)

        results = []
        for rec in recommendations:
            entry = rec.to_dict()
            entry["sustainabilityBand"] = sustainability_band(rec.crop.sustainability)
            results.append(entry)

        return {
            "recommendations": results,
            "farm_size": size,
            "past_crops": sorted(past),
        }

    def crop_details(self, crop_key: str) -> Optional[Dict[str, Any]]:
        """Crop card data plus its task calendar; None for an unknown crop."""
        crop = get_crop(crop_key)
        if crop is None:
            logger.warning(f"No catalog entry for crop {crop_key!r}")
            return None

        details = crop.to_dict()
        details["sustainabilityBand"] = sustainability_band(crop.sustainability)
        details["category"] = crop_category(crop_key)
        details["calendar"] = generate_calendar(crop_key).to_dict()
        details["saved"] = self.plan_store.get_plan(crop_key) is not None
        return details

    def save_plan(self, crop_key: str) -> bool:
        """Generate and persist the calendar for a catalog crop."""
        if get_crop(crop_key) is None:
            logger.warning(f"Not saving calendar for unknown crop {crop_key!r}")
            return False
        return self.plan_store.save_plan(generate_calendar(crop_key))

    def saved_plans(self) -> List[Dict[str, Any]]:
        """Saved calendars in the order they were first saved."""
        return [plan.to_dict() for plan in self.plan_store.load_all_plans().values()]

    def delete_plan(self, crop_key: str) -> bool:
        return self.plan_store.delete_plan(crop_key)

    def compare(self, crop_keys: Iterable[str]) -> Dict[str, Any]:
        """Comparison table for the given crop keys; unknown keys are dropped."""
        crops = []
        for key in crop_keys:
            crop = get_crop(key)
            if crop is None:
                logger.warning(f"Ignoring unknown crop in comparison: {key!r}")
                continue
            crops.append(crop)
        return build_comparison(crops)
