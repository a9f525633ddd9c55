"""
Skill overlap scoring.

Compares a candidate's skills with the skills a job asks for.  Both
sides are normalized before comparison; the job side is walked in its
given order and repeated job skills are classified independently.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Sequence

from ..vocabulary import normalize

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Outcome of scoring one candidate against one job."""

    score: int = 0
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def score(candidate_skills: Sequence[str], job_skills: Optional[Sequence[str]]) -> MatchResult:
    """Score how much of a job's skill list the candidate covers.

    Args:
        candidate_skills: Skills on the candidate profile.  Order and
            duplicates are irrelevant.
        job_skills: Skills required by the job.  ``None`` or an empty
            sequence yields a zero score with empty breakdowns.

    Returns:
        A :class:`MatchResult` whose ``matched_skills`` and
        ``missing_skills`` hold the job's original strings in job order
        and whose ``score`` is ``round(matched / len(job_skills) * 100)``.
    """
    if not job_skills:
        return MatchResult()
    candidate_set = {normalize(s) for s in candidate_skills}
    matched: List[str] = []
    missing: List[str] = []
    for skill in job_skills:
        if normalize(skill) in candidate_set:
            matched.append(skill)
        else:
            missing.append(skill)
    result = MatchResult(
        score=round_half_up((len(matched) / len(job_skills)) * 100),
        matched_skills=matched,
        missing_skills=missing,
    )
    assert 0 <= result.score <= 100
    logger.debug("Matched %d/%d job skills, score %d", len(matched), len(job_skills), result.score)
    return result
