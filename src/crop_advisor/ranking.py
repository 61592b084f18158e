"""
Ranker
======

Orders scored candidates and keeps the best few.
"""

from typing import Iterable, List, Optional, Sequence

from . import config
from .models import CropDefinition, EnvironmentSnapshot, Recommendation, ScoredCandidate
from .scoring import score_candidates
from .utils.logger import logger


def rank_candidates(candidates: Sequence[ScoredCandidate], limit: int = None) -> List[Recommendation]:
    """
    Sort candidates by score, highest first, and return the top entries.

    Equal scores keep their input (catalog) order since sorted() is stable.
    """
    limit = config.RECOMMENDATION_LIMIT if limit is None else limit
    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
    return [
        Recommendation(crop=c.crop, reasons=tuple(c.reasons))
        for c in ranked[:limit]
    ]


def generate_recommendations(
    past_crops: Iterable[str],
    farm_size: float,
    environment: EnvironmentSnapshot,
    catalog: Optional[Sequence[CropDefinition]] = None,
    limit: int = None,
) -> List[Recommendation]:
    """Score the catalog and return the top-ranked crops."""
    candidates = score_candidates(past_crops, farm_size, environment, catalog)
    recommendations = rank_candidates(candidates, limit)

    if recommendations:
        logger.info(
            f"Top crops: {[r.crop.key for r in recommendations]} "
            f"(best score {max(c.score for c in candidates)})"
        )
    return recommendations
