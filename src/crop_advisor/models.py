"""
Crop Advisor Value Types
------------------------
Read-only inputs (sensor and weather readings) and the records the engine
hands back to the dashboard (crops, recommendations, calendar plans).
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class SoilType(Enum):
    """Soil types reported by the field sensor."""
    SANDY = "sandy"
    CLAY = "clay"
    LOAM = "loam"


class Fertility(Enum):
    """Soil fertility tier."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class WeatherCondition(Enum):
    """Current sky condition."""
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    STORMY = "Stormy"


class ProfitTier(Enum):
    """Relative profitability of a crop."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _pick(data: Dict[str, Any], *names: str, default: Any = None) -> Any:
    """Return the first key present in data (camelCase or snake_case)."""
    for name in names:
        if name in data and data[name] is not None:
            return data[name]
    return default


@dataclass(frozen=True)
class SensorReading:
    """Snapshot of the in-field sensor array."""

    temperature: float
    humidity: float
    soil_type: SoilType
    sunlight_hours: float
    nitrogen: float = 0.0
    phosphorus: float = 0.0
    potassium: float = 0.0
    ph: float = 7.0
    fertility: Fertility = Fertility.MEDIUM
    soil_moisture: Optional[float] = None
    leaf_wetness: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SensorReading":
        """Build a reading from the dashboard payload (camelCase keys accepted)."""
        return cls(
            temperature=float(data["temperature"]),
            humidity=float(_pick(data, "humidity", default=0.0)),
            soil_type=SoilType(_pick(data, "soilType", "soil_type")),
            sunlight_hours=float(_pick(data, "sunlightHours", "sunlight_hours", default=0.0)),
            nitrogen=float(_pick(data, "nitrogen", default=0.0)),
            phosphorus=float(_pick(data, "phosphorus", default=0.0)),
            potassium=float(_pick(data, "potassium", default=0.0)),
            ph=float(_pick(data, "ph", default=7.0)),
            fertility=Fertility(_pick(data, "fertility", default="Medium")),
            soil_moisture=_pick(data, "soilMoisture", "soil_moisture"),
            leaf_wetness=_pick(data, "leafWetness", "leaf_wetness"),
        )


@dataclass(frozen=True)
class WeatherReading:
    """Current local weather."""

    temperature: float
    condition: WeatherCondition = WeatherCondition.SUNNY
    humidity: float = 0.0
    wind_speed: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherReading":
        return cls(
            temperature=float(data["temperature"]),
            condition=WeatherCondition(_pick(data, "condition", default="Sunny")),
            humidity=float(_pick(data, "humidity", default=0.0)),
            wind_speed=float(_pick(data, "windSpeed", "wind_speed", default=0.0)),
        )


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Combined sensor + weather reading used as scoring input."""

    sensor: SensorReading
    weather: WeatherReading

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnvironmentSnapshot":
        sensor = _pick(data, "sensorData", "sensor")
        weather = _pick(data, "weatherData", "weather")
        if sensor is None or weather is None:
            raise ValueError("Environment requires both sensor and weather readings")
        return cls(
            sensor=SensorReading.from_dict(sensor),
            weather=WeatherReading.from_dict(weather),
        )


@dataclass(frozen=True)
class CropDefinition:
    """A catalog crop. Created once at import time."""

    key: str
    emoji: str
    yield_range: str
    profit: ProfitTier
    sustainability: int

    @property
    def name_key(self) -> str:
        return f"dashboard.suggestions.crops.{self.key}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "nameKey": self.name_key,
            "emoji": self.emoji,
            "yield": self.yield_range,
            "profit": self.profit.value,
            "sustainability": self.sustainability,
        }


@dataclass
class ScoredCandidate:
    """A crop with the score and reason tags accumulated in one scoring pass."""

    crop: CropDefinition
    score: int = 0
    reasons: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Recommendation:
    """Ranked entry shown to the user; the score only decides the order."""

    crop: CropDefinition
    reasons: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        data = self.crop.to_dict()
        data["reasons"] = list(self.reasons)
        return data


@dataclass(frozen=True)
class CalendarTask:
    day: str
    task_key: str

    def to_dict(self) -> Dict[str, str]:
        return {"day": self.day, "taskKey": self.task_key}


@dataclass(frozen=True)
class CalendarPlan:
    """Ordered cultivation tasks for one crop."""

    crop_key: str
    tasks: Tuple[CalendarTask, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cropKey": self.crop_key,
            "tasks": [task.to_dict() for task in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalendarPlan":
        """
        Parse a stored plan.

        Raises:
            ValueError: if the record does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"Plan record must be an object, got {type(data).__name__}")
        crop_key = data.get("cropKey")
        tasks = data.get("tasks")
        if not isinstance(crop_key, str) or not isinstance(tasks, list):
            raise ValueError("Plan record is missing cropKey or tasks")
        parsed = []
        for task in tasks:
            if not isinstance(task, dict) or "day" not in task or "taskKey" not in task:
                raise ValueError(f"Malformed task in plan for {crop_key}")
            parsed.append(CalendarTask(day=str(task["day"]), task_key=str(task["taskKey"])))
        return cls(crop_key=crop_key, tasks=tuple(parsed))
