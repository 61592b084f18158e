"""
Comparison Builder
==================

Side-by-side metrics for up to three crops the user picked from the
recommendation cards.
"""

from typing import Any, Dict, List, Sequence, Tuple

from . import config
from .models import CropDefinition


def toggle_compare(
    selection: Sequence[CropDefinition],
    crop: CropDefinition,
    limit: int = None,
) -> Tuple[CropDefinition, ...]:
    """
    Add or remove a crop from the comparison selection.

    A crop already selected is removed. A new crop is appended while there is
    room; once the selection is full further crops are ignored.

    Returns:
        The new selection; the input is left untouched
    """
    limit = config.COMPARE_LIMIT if limit is None else limit
    if any(c.key == crop.key for c in selection):
        return tuple(c for c in selection if c.key != crop.key)
    if len(selection) < limit:
        return tuple(selection) + (crop,)
    return tuple(selection)


def _distinct(selection: Sequence[CropDefinition], limit: int) -> List[CropDefinition]:
    seen = set()
    crops = []
    for crop in selection:
        if crop.key in seen:
            continue
        seen.add(crop.key)
        crops.append(crop)
        if len(crops) == limit:
            break
    return crops


def build_comparison(selection: Sequence[CropDefinition], limit: int = None) -> Dict[str, Any]:
    """
    Build the comparison table.

    Returns:
        {"columns": [...], "rows": [{"metric": ..., "values": [...]}]}
        with one value per column in column order. An empty selection gives
        no columns and no rows.
    """
    limit = config.COMPARE_LIMIT if limit is None else limit
    crops = _distinct(selection, limit)
    if not crops:
        return {"columns": [], "rows": []}

    columns = [
        {
            "key": crop.key,
            "nameKey": crop.name_key,
            "emoji": crop.emoji,
            "removable": True,
        }
        for crop in crops
    ]
    rows = [
        {"metric": "yield", "values": [crop.yield_range for crop in crops]},
        {"metric": "profit", "values": [crop.profit.value for crop in crops]},
        {"metric": "sustainability", "values": [f"{crop.sustainability}%" for crop in crops]},
    ]
    return {"columns": columns, "rows": rows}
