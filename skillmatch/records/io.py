"""
Readers and writers for job and candidate records.

Jobs live in a CSV file with the columns in
:data:`~skillmatch.records.schema.JOB_HEADERS`; the ``skills`` column
holds a semicolon separated list.  Candidate profiles live in a JSON
file holding a list of objects.  Files are read and written as UTF‑8
and existing output files are overwritten.
"""

from __future__ import annotations

import csv
import json
import logging
from typing import TYPE_CHECKING, Iterable, List, Sequence

from .schema import JOB_HEADERS, JOB_STATUSES, CandidateProfile, JobPosting

if TYPE_CHECKING:
    from ..rank.recommend import JobMatch

logger = logging.getLogger(__name__)

MATCH_HEADERS = [
    "job_id",
    "title",
    "company",
    "location",
    "match_score",
    "matched_skills",
    "missing_skills",
]


def _split_skills(value: str) -> List[str]:
    return [s.strip().lower() for s in value.split(";") if s.strip()]


def load_jobs_csv(path: str) -> List[JobPosting]:
    """Read job postings from a CSV file.

    Skills are stripped and lower-cased as they are read.  Rows with an
    unknown status are treated as closed so they never rank.
    """
    jobs: List[JobPosting] = []
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            status = (row.get("status") or "open").strip().lower()
            if status not in JOB_STATUSES:
                logger.warning("Job %s has unknown status %r; treating as closed", row.get("job_id"), status)
                status = "closed"
            jobs.append(
                JobPosting(
                    job_id=row.get("job_id", ""),
                    title=row.get("title", ""),
                    company=row.get("company", ""),
                    location=row.get("location", ""),
                    skills=_split_skills(row.get("skills") or ""),
                    description=row.get("description", "") or "",
                    status=status,
                    posted_date=row.get("posted_date") or None,
                )
            )
    logger.debug("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def write_jobs_csv(jobs: Iterable[JobPosting], path: str) -> None:
    """Write job postings to a CSV file.

    Args:
        jobs: Iterable of `JobPosting` objects.
        path: Destination path for the CSV.
    """
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=JOB_HEADERS)
        writer.writeheader()
        for job in jobs:
            writer.writerow(job.to_csv_row())


def load_profiles_json(path: str) -> List[CandidateProfile]:
    """Read candidate profiles from a JSON list (or a single object)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    profiles = [
        CandidateProfile(
            candidate_id=str(item.get("candidate_id", "")),
            name=item.get("name", ""),
            email=item.get("email", ""),
            location=item.get("location", "") or "",
            skills=list(item.get("skills", []) or []),
            resume_path=item.get("resume_path"),
        )
        for item in data
    ]
    logger.debug("Loaded %d candidate profiles from %s", len(profiles), path)
    return profiles


def save_profiles_json(profiles: Sequence[CandidateProfile], path: str) -> None:
    """Serialize candidate profiles to a JSON list."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump([p.to_dict() for p in profiles], f, indent=2)


def write_matches_csv(rows: Iterable["JobMatch"], path: str) -> int:
    """Write ranked job matches to CSV and return the number of rows."""
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=MATCH_HEADERS)
        writer.writeheader()
        for entry in rows:
            job = entry.job
            match = entry.match
            writer.writerow(
                {
                    "job_id": job.job_id,
                    "title": job.title,
                    "company": job.company,
                    "location": job.location,
                    "match_score": match.score,
                    "matched_skills": "; ".join(match.matched_skills),
                    "missing_skills": "; ".join(match.missing_skills),
                }
            )
            count += 1
    return count
