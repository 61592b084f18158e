"""
Scoring Engine
==============

Scores every catalog crop against the current environment and the farm's
planting history using a handful of weighted rules:

- Warm-weather bonus (+4) for heat-loving crops on warm, sunny days
- Cool-weather bonus (+3) for cool-tolerant crops below 22°C
- Soil bonus (+2) for loam, or for root crops on sandy soil
- Rotation bonus (+3) for crops not grown recently

Every rule that fires adds a reason tag so the dashboard can explain the
result. Scoring is deterministic and keeps no state between calls.
"""

from typing import Iterable, List, Optional, Sequence

from .catalog import CROP_CATALOG
from .models import CropDefinition, EnvironmentSnapshot, ScoredCandidate, SoilType
from .utils.logger import logger


# Reason tags
REASON_SCALE = "scale"
REASON_WEATHER = "weather"
REASON_SOIL = "soil"
REASON_ROTATION = "rotation"

WARM_CROPS = frozenset({"tomatoes", "peppers", "maize", "rice"})
COOL_CROPS = frozenset({
    "lettuce", "spinach", "broccoli", "wheat", "peas",
    "cabbage", "rye", "potato", "carrots",
})
SANDY_SOIL_CROPS = frozenset({"carrots", "potato"})

# Weather temperature threshold (°C); strict on both sides
TEMPERATURE_THRESHOLD = 22
MIN_SUNLIGHT_HOURS = 7

WARM_WEATHER_BONUS = 4
COOL_WEATHER_BONUS = 3
SOIL_BONUS = 2
ROTATION_BONUS = 3


def score_crop(
    crop: CropDefinition,
    past_crops: Iterable[str],
    environment: EnvironmentSnapshot,
) -> ScoredCandidate:
    """Apply the scoring rules to a single crop."""
    past = set(past_crops)
    candidate = ScoredCandidate(crop=crop, score=0, reasons=[REASON_SCALE])

    weather_temp = environment.weather.temperature
    sensor = environment.sensor

    if (
        crop.key in WARM_CROPS
        and weather_temp > TEMPERATURE_THRESHOLD
        and sensor.sunlight_hours > MIN_SUNLIGHT_HOURS
    ):
        candidate.score += WARM_WEATHER_BONUS
        candidate.reasons.append(REASON_WEATHER)

    if crop.key in COOL_CROPS and weather_temp < TEMPERATURE_THRESHOLD:
        candidate.score += COOL_WEATHER_BONUS
        candidate.reasons.append(REASON_WEATHER)

    if sensor.soil_type == SoilType.LOAM:
        candidate.score += SOIL_BONUS
        candidate.reasons.append(REASON_SOIL)
    elif sensor.soil_type == SoilType.SANDY and crop.key in SANDY_SOIL_CROPS:
        candidate.score += SOIL_BONUS
        candidate.reasons.append(REASON_SOIL)

    if crop.key not in past:
        candidate.score += ROTATION_BONUS
        candidate.reasons.append(REASON_ROTATION)

    return candidate


def score_candidates(
    past_crops: Iterable[str],
    farm_size: float,
    environment: EnvironmentSnapshot,
    catalog: Optional[Sequence[CropDefinition]] = None,
) -> List[ScoredCandidate]:
    """
    Score every crop in the catalog.

    Args:
        past_crops: Keys of crops grown in recent seasons
        farm_size: Farm size in hectares (validated upstream; not weighted yet)
        environment: Current sensor + weather snapshot
        catalog: Crops to score, defaults to the full catalog

    Returns:
        One ScoredCandidate per crop, in catalog order
    """
    catalog = CROP_CATALOG if catalog is None else catalog
    past = frozenset(past_crops)

    logger.info(
        f"Scoring {len(catalog)} crops: weather={environment.weather.temperature}°C, "
        f"sunlight={environment.sensor.sunlight_hours}h, soil={environment.sensor.soil_type.value}, "
        f"past_crops={sorted(past)}, farm_size={farm_size}"
    )

    return [score_crop(crop, past, environment) for crop in catalog]
