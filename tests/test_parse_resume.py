"""Tests for résumé skill extraction and profile merging.

Extraction failures are best-effort when a résumé is attached to a
profile and propagate when skills are explicitly re-extracted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest  # type: ignore

from skillmatch.errors import ExtractionError
from skillmatch.records import CandidateProfile
from skillmatch.recognize import SkillRecognizer
from skillmatch.resume import (
    attach_resume,
    extract_skills_from_resume,
    merge_skills,
    reextract_skills,
    save_resume_json,
)


def test_extract_skills_from_pdf_resume(pdf_factory) -> None:
    path = pdf_factory(["Jane Doe", "Experienced with Python, Django, and PostgreSQL."])
    extraction = extract_skills_from_resume(path)
    assert "Jane Doe" in extraction.text
    assert {"python", "django", "postgresql"} <= set(extraction.skills)
    assert "ruby" not in extraction.skills


def test_extract_skills_from_text_resume(tmp_path: Path) -> None:
    path = tmp_path / "resume.txt"
    path.write_text("John Smith\nSkills: Data Science, Python\n", encoding="utf-8")
    extraction = extract_skills_from_resume(str(path))
    assert extraction.skills == ["python", "data science"]


def test_extract_with_custom_recognizer(tmp_path: Path) -> None:
    path = tmp_path / "resume.txt"
    path.write_text("Uses c++ daily", encoding="utf-8")
    assert extract_skills_from_resume(str(path)).skills == []
    token = SkillRecognizer(boundary="token")
    assert extract_skills_from_resume(str(path), token).skills == ["c++"]


def test_merge_skills_keeps_existing_order() -> None:
    assert merge_skills(["React", "python"], ["python", "django"]) == ["React", "python", "django"]


def test_merge_skills_keeps_near_duplicates() -> None:
    assert merge_skills(["React"], ["react"]) == ["React", "react"]


def test_attach_resume_merges_skills(tmp_path: Path) -> None:
    path = tmp_path / "resume.txt"
    path.write_text("Python and Django developer", encoding="utf-8")
    profile = CandidateProfile(candidate_id="cand-1", skills=["React", "python"])
    extracted = attach_resume(profile, str(path))
    assert extracted == ["python", "django"]
    assert profile.skills == ["React", "python", "django"]
    assert profile.resume_path == str(path)


def test_attach_resume_continues_on_bad_pdf(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"this is not a pdf")
    profile = CandidateProfile(candidate_id="cand-1", skills=["go"])
    with caplog.at_level(logging.WARNING, logger="skillmatch.resume.parse_resume"):
        extracted = attach_resume(profile, str(path))
    assert extracted == []
    assert profile.skills == ["go"]
    assert profile.resume_path == str(path)
    assert "Skill extraction failed" in caplog.text


def test_reextract_skills_propagates_failure(tmp_path: Path) -> None:
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"this is not a pdf")
    profile = CandidateProfile(candidate_id="cand-1", resume_path=str(path))
    with pytest.raises(ExtractionError):
        reextract_skills(profile)


def test_reextract_skills_requires_resume() -> None:
    with pytest.raises(ValueError):
        reextract_skills(CandidateProfile(candidate_id="cand-1"))


def test_reextract_skills_leaves_profile_untouched(pdf_factory) -> None:
    path = pdf_factory(["Kubernetes and Terraform"])
    profile = CandidateProfile(candidate_id="cand-1", skills=["go"], resume_path=path)
    assert reextract_skills(profile) == ["kubernetes", "terraform"]
    assert profile.skills == ["go"]


def test_save_resume_json(tmp_path: Path) -> None:
    source = tmp_path / "resume.txt"
    source.write_text("GraphQL APIs", encoding="utf-8")
    out = tmp_path / "resume.json"
    save_resume_json(extract_skills_from_resume(str(source)), str(out))
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["skills"] == ["graphql"]
    assert data["text"] == "GraphQL APIs"


def test_attach_resume_continues_on_undecodable_text(tmp_path: Path) -> None:
    path = tmp_path / "resume.txt"
    path.write_bytes(b"Python \xff\xfe developer")
    profile = CandidateProfile(candidate_id="cand-1", skills=["go"])
    assert attach_resume(profile, str(path)) == []
    assert profile.skills == ["go"]
    assert profile.resume_path == str(path)
