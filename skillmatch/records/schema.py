# records/schema.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

JOB_HEADERS = [
    "job_id", "title", "company", "location", "skills", "description",
    "status", "posted_date",
]

JOB_STATUSES = ("open", "closed", "paused")


@dataclass
class JobPosting:
    job_id: str
    title: str
    company: str
    location: str
    skills: List[str]             # lower-cased on load, like the job store
    description: str = ""
    status: str = "open"          # 'open' | 'closed' | 'paused'
    posted_date: Optional[str] = None  # YYYY-MM-DD

    def to_csv_row(self) -> Dict[str, object]:
        d = asdict(self)
        d["skills"] = ";".join(self.skills)
        d["posted_date"] = self.posted_date or ""
        return d


@dataclass
class CandidateProfile:
    candidate_id: str
    name: str = ""
    email: str = ""
    location: str = ""
    skills: List[str] = field(default_factory=list)
    resume_path: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
