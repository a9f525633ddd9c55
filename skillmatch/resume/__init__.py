"""
Résumé processing.

Extracts catalog skills from a résumé file and merges them into a
candidate profile.
"""

from .parse_resume import (  # noqa: F401
    ResumeExtraction,
    attach_resume,
    extract_skills_from_resume,
    merge_skills,
    reextract_skills,
    save_resume_json,
)
