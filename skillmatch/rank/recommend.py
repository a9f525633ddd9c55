"""
Ranking jobs and candidates by skill match.

These helpers sit on top of :func:`~skillmatch.rank.scorer.score` and
provide the listings a job board needs: matched jobs for a candidate,
matched candidates for a job, a single job's breakdown, and
recommendations that add the location bonus.  Only open jobs are ranked
for candidates.  Sorting is stable, so ties keep their input order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..records.schema import CandidateProfile, JobPosting
from .location import DEFAULT_LOCATION_BONUS, apply_location_bonus
from .scorer import MatchResult, score

logger = logging.getLogger(__name__)

SORT_KEYS = ("score", "posted")
DEFAULT_RECOMMENDATION_LIMIT = 5


@dataclass
class JobMatch:
    """A job posting with its match result for one candidate."""

    job: JobPosting
    match: MatchResult


@dataclass
class CandidateMatch:
    """A candidate profile with its match result for one job."""

    candidate: CandidateProfile
    match: MatchResult


def _open_jobs(jobs: Iterable[JobPosting]) -> List[JobPosting]:
    return [job for job in jobs if job.status == "open"]


def rank_jobs_for_candidate(
    candidate_skills: Sequence[str],
    jobs: Iterable[JobPosting],
    min_score: int = 0,
    sort_by: str = "score",
) -> List[JobMatch]:
    """Score every open job against the candidate's skills.

    Args:
        candidate_skills: Skills on the candidate profile.
        jobs: Job postings; non-open jobs are skipped.
        min_score: Matches scoring below this are dropped.
        sort_by: ``"score"`` (highest first) or ``"posted"`` (newest
            ``posted_date`` first, undated jobs last).

    Returns:
        The ranked matches.  An empty list when the candidate has no
        skills.
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"sort_by must be one of {SORT_KEYS}, got {sort_by!r}")
    if not candidate_skills:
        logger.info("Candidate has no skills; add skills to the profile to see matched jobs")
        return []
    matches = [JobMatch(job, score(candidate_skills, job.skills)) for job in _open_jobs(jobs)]
    filtered = [m for m in matches if m.match.score >= min_score]
    if sort_by == "score":
        filtered.sort(key=lambda m: m.match.score, reverse=True)
    else:
        dated = [m for m in filtered if m.job.posted_date]
        undated = [m for m in filtered if not m.job.posted_date]
        dated.sort(key=lambda m: m.job.posted_date, reverse=True)
        filtered = dated + undated
    logger.info("Ranked %d -> %d jobs (min score %d)", len(matches), len(filtered), min_score)
    return filtered


def rank_candidates_for_job(
    job: JobPosting,
    candidates: Iterable[CandidateProfile],
    min_score: int = 0,
) -> List[CandidateMatch]:
    """Score every candidate that lists at least one skill against ``job``.

    Returns matches scoring at least ``min_score``, highest first.
    """
    matches = [
        CandidateMatch(candidate, score(candidate.skills, job.skills))
        for candidate in candidates
        if candidate.skills
    ]
    filtered = [m for m in matches if m.match.score >= min_score]
    filtered.sort(key=lambda m: m.match.score, reverse=True)
    logger.info("Ranked %d candidates for job %s", len(filtered), job.job_id)
    return filtered


def job_match_summary(candidate_skills: Sequence[str], job: JobPosting) -> Dict[str, object]:
    """Return the match breakdown for a single job."""
    result = score(candidate_skills, job.skills)
    return {
        "job_id": job.job_id,
        "match_score": result.score,
        "matched_skills": result.matched_skills,
        "missing_skills": result.missing_skills,
        "total_required_skills": len(job.skills),
        "candidate_skills_count": len(candidate_skills),
    }


def recommend_jobs(
    candidate_skills: Sequence[str],
    candidate_location: Optional[str],
    jobs: Iterable[JobPosting],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    bonus: int = DEFAULT_LOCATION_BONUS,
) -> List[JobMatch]:
    """Recommend open jobs, boosting those in the candidate's location.

    Jobs whose boosted score is zero are left out.  At most ``limit``
    jobs are returned, highest score first.

    Raises:
        ValueError: If ``limit`` is below 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    if not candidate_skills:
        logger.info("Candidate has no skills; add skills to get recommendations")
        return []
    scored: List[JobMatch] = []
    for job in _open_jobs(jobs):
        result = apply_location_bonus(
            score(candidate_skills, job.skills), candidate_location, job.location, bonus
        )
        scored.append(JobMatch(job, result))
    recommendations = [m for m in scored if m.match.score > 0]
    recommendations.sort(key=lambda m: m.match.score, reverse=True)
    logger.debug("Recommending %d of %d scored jobs", min(limit, len(recommendations)), len(scored))
    return recommendations[:limit]
