"""
Location bonus for job recommendations.

Applied to a finished :class:`~skillmatch.rank.scorer.MatchResult`
rather than inside the scorer, so callers that do not want geographic
weighting keep the plain skill score.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .scorer import MatchResult

DEFAULT_LOCATION_BONUS = 10


def location_matches(candidate_location: Optional[str], job_location: Optional[str]) -> bool:
    """True when the candidate's location appears inside the job's, ignoring case."""
    if not candidate_location or not job_location:
        return False
    return candidate_location.lower() in job_location.lower()


def apply_location_bonus(
    result: MatchResult,
    candidate_location: Optional[str],
    job_location: Optional[str],
    bonus: int = DEFAULT_LOCATION_BONUS,
) -> MatchResult:
    """Return a copy of ``result`` with the location bonus added.

    The score is capped at 100.  The skill breakdowns are unchanged and
    the input result is not modified.
    """
    if not location_matches(candidate_location, job_location):
        return replace(result)
    return replace(result, score=min(100, result.score + bonus))
