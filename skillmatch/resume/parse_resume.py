"""
Résumé skill extraction.

Turns an uploaded résumé into a list of catalog skills and merges them
into a candidate profile.  Attaching a résumé is best-effort: a
document that cannot be parsed is still attached, it just adds no
skills.  Re-extracting skills from an attached résumé is an explicit
request, so there the failure propagates.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Optional

from ..errors import ExtractionError
from ..extract import extract_text_from_file
from ..recognize import SkillRecognizer, extract_skills_from_text
from ..records.schema import CandidateProfile

logger = logging.getLogger(__name__)


@dataclass
class ResumeExtraction:
    """Text and recognized skills of one résumé."""

    text: str
    skills: List[str] = field(default_factory=list)


def extract_skills_from_resume(
    file_path: str, recognizer: Optional[SkillRecognizer] = None
) -> ResumeExtraction:
    """Read a résumé file and recognize its skills.

    Args:
        file_path: Path to the résumé (``.pdf``, ``.docx``, ``.html``,
            ``.txt`` or ``.md``).
        recognizer: Recognizer to use; defaults to the shared one for
            the built-in catalog.

    Raises:
        FileNotFoundError: If the file does not exist.
        ExtractionError: If the document cannot be parsed.
    """
    text = extract_text_from_file(file_path)
    skills = extract_skills_from_text(text, recognizer)
    logger.debug("Extracted %d skills from %s", len(skills), file_path)
    return ResumeExtraction(text=text, skills=skills)


def merge_skills(existing: Iterable[str], extracted: Iterable[str]) -> List[str]:
    """Union two skill lists by exact string.

    Existing skills keep their order and new skills are appended in the
    order they were extracted.  Near-duplicates such as ``"React"`` and
    ``"react"`` are both kept.
    """
    merged = list(existing)
    seen = set(merged)
    for skill in extracted:
        if skill not in seen:
            seen.add(skill)
            merged.append(skill)
    return merged


def attach_resume(
    profile: CandidateProfile,
    file_path: str,
    recognizer: Optional[SkillRecognizer] = None,
) -> List[str]:
    """Attach a résumé to a profile and merge its skills.

    The résumé path is always recorded.  When the document cannot be
    parsed the failure is logged and no skills are added.

    Returns:
        The skills extracted from the résumé (empty on failure).
    """
    try:
        extraction = extract_skills_from_resume(file_path, recognizer)
        extracted = extraction.skills
    except ExtractionError as exc:
        logger.warning("Skill extraction failed for %s: %s", file_path, exc)
        extracted = []
    profile.resume_path = file_path
    profile.skills = merge_skills(profile.skills, extracted)
    logger.info(
        "Attached résumé %s to %s: %d extracted, %d total skills",
        file_path,
        profile.candidate_id,
        len(extracted),
        len(profile.skills),
    )
    return extracted


def reextract_skills(profile: CandidateProfile, recognizer: Optional[SkillRecognizer] = None) -> List[str]:
    """Extract skills again from the profile's attached résumé.

    The profile is not modified.

    Raises:
        ValueError: If the profile has no résumé attached.
        FileNotFoundError: If the attached file is missing.
        ExtractionError: If the document cannot be parsed.
    """
    if not profile.resume_path:
        raise ValueError(f"No resume uploaded for {profile.candidate_id}")
    return extract_skills_from_resume(profile.resume_path, recognizer).skills


def save_resume_json(extraction: ResumeExtraction, out_path: str) -> None:
    """Serialize a `ResumeExtraction` dataclass to JSON.

    Args:
        extraction: The extracted résumé to save.
        out_path: Path where the JSON file will be written.
    """
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(asdict(extraction), f, indent=2)
