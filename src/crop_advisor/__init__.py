"""
Crop Advisor Engine
===================

Recommendation core behind the farm dashboard's crop-advisor wizard:
- Crop Catalog: fixed candidate crops with yield, profit and sustainability
- Scoring Engine: heuristic weather/soil/rotation scoring with reason tags
- Ranker: top-3 crops, ties broken by catalog order
- Calendar Generator: cultivation tasks per crop category
- Comparison Builder: side-by-side metrics for up to three crops
- Plan Store: saved calendars in key-value storage (memory, file, DynamoDB)

Sensor and weather readings come from the dashboard and are treated as
read-only inputs.
"""

from .advisor import CropAdvisor
from .catalog import CROP_CATALOG, get_crop
from .models import (
    CalendarPlan,
    CalendarTask,
    CropDefinition,
    EnvironmentSnapshot,
    Fertility,
    ProfitTier,
    Recommendation,
    SensorReading,
    SoilType,
    WeatherCondition,
    WeatherReading,
)
from .planting_calendar import generate_calendar
from .plan_store import PlanStore, get_plan_store
from .ranking import generate_recommendations

__all__ = [
    "CROP_CATALOG",
    "CalendarPlan",
    "CalendarTask",
    "CropAdvisor",
    "CropDefinition",
    "EnvironmentSnapshot",
    "Fertility",
    "PlanStore",
    "ProfitTier",
    "Recommendation",
    "SensorReading",
    "SoilType",
    "WeatherCondition",
    "WeatherReading",
    "generate_calendar",
    "generate_recommendations",
    "get_crop",
    "get_plan_store",
]
