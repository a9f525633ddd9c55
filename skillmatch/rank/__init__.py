"""
Scoring and ranking.

* `scorer` – Pure skill overlap score between a candidate and a job.
* `location` – Optional location bonus applied after scoring.
* `recommend` – Listings built on the scorer: matched jobs, matched
  candidates, a single job breakdown and recommendations.
"""

from .scorer import MatchResult, round_half_up, score  # noqa: F401
from .location import apply_location_bonus, location_matches  # noqa: F401
from .recommend import (  # noqa: F401
    CandidateMatch,
    JobMatch,
    job_match_summary,
    rank_candidates_for_job,
    rank_jobs_for_candidate,
    recommend_jobs,
)
