"""
Job and candidate records.

Dataclasses standing in for the job store and profile store, plus the
CSV/JSON helpers the command line interface uses to read and write
them.
"""

from .schema import CandidateProfile, JobPosting  # noqa: F401
from .io import (  # noqa: F401
    load_jobs_csv,
    load_profiles_json,
    save_profiles_json,
    write_jobs_csv,
    write_matches_csv,
)
