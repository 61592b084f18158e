"""
Wizard input validation.
"""

import math
from typing import Any, FrozenSet, Iterable

from .catalog import is_known_crop
from .utils.logger import logger

FARM_SIZE_ERROR_KEY = "cropAdvisor.form.error"


class InvalidFarmSizeError(ValueError):
    """Raised when the farm size is missing, not a number, or not positive."""
    def __init__(self, value: Any):
        self.value = value
        self.message_key = FARM_SIZE_ERROR_KEY
        super().__init__(f"Farm size must be a positive number, got {value!r}")


def parse_farm_size(raw: Any) -> float:
    """
    Convert the farm size field to hectares.

    Raises:
        InvalidFarmSizeError: for empty, non-numeric, non-finite or <= 0 input
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidFarmSizeError(raw)
    if isinstance(raw, str):
        raw_text = raw.strip()
        if not raw_text:
            raise InvalidFarmSizeError(raw)
    else:
        raw_text = raw

    try:
        size = float(raw_text)
    except (TypeError, ValueError):
        raise InvalidFarmSizeError(raw)

    if not math.isfinite(size) or size <= 0:
        raise InvalidFarmSizeError(raw)
    return size


def normalize_past_crops(past_crops: Iterable[str]) -> FrozenSet[str]:
    """Keep only catalog crop keys from the planting history."""
    if past_crops is None:
        return frozenset()
    known = set()
    for key in past_crops:
        if is_known_crop(key):
            known.add(key)
        else:
            logger.warning(f"Ignoring unknown past crop: {key!r}")
    return frozenset(known)
