"""Shared fixtures for the skillmatch test suite."""

from __future__ import annotations

from typing import List, Sequence

import pytest

from skillmatch.records import CandidateProfile, JobPosting

SKILLMATCH_ENV_VARS = ("SKILLMATCH_LOG_LEVEL", "SKILLMATCH_BOUNDARY", "SKILLMATCH_CATALOG_FILE")


def make_pdf(lines: Sequence[str], with_page: bool = True, encrypted: bool = False) -> bytes:
    """Build a minimal one-page PDF whose text layer holds ``lines``.

    Uses the standard Helvetica font so no font program is embedded.
    With ``with_page=False`` the document has an empty page tree.  With
    ``encrypted=True`` the trailer carries a standard security handler
    whose keys match no password, so the document cannot be opened.
    """
    content = ["BT", "/F1 14 Tf", "18 TL", "72 720 Td"]
    for i, line in enumerate(lines):
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        if i:
            content.append("T*")
        content.append(f"({escaped}) Tj")
    content.append("ET")
    stream = "\n".join(content).encode("latin-1")
    if with_page:
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        ]
    else:
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [] /Count 0 >>",
        ]
    out = bytearray(b"%PDF-1.4\n")
    offsets: List[int] = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    encryption = b""
    if encrypted:
        zeros = b"0" * 64
        encryption = (
            b" /Encrypt << /Filter /Standard /V 1 /R 2 /P -44 /O <" + zeros + b"> /U <" + zeros + b"> >>"
            b" /ID [<0123456789abcdef0123456789abcdef> <0123456789abcdef0123456789abcdef>]"
        )
    out += b"trailer\n<< /Size %d /Root 1 0 R%s >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        encryption,
        xref_offset,
    )
    return bytes(out)


@pytest.fixture
def pdf_bytes():
    """Return the in-memory PDF builder."""
    return make_pdf


@pytest.fixture
def pdf_factory(tmp_path):
    """Write a PDF with the given lines and return its path."""

    def _write(lines: Sequence[str], name: str = "resume.pdf") -> str:
        path = tmp_path / name
        path.write_bytes(make_pdf(lines))
        return str(path)

    return _write


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no skillmatch overrides set."""
    for name in SKILLMATCH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_jobs() -> List[JobPosting]:
    return [
        JobPosting(
            job_id="job-1",
            title="Senior React Developer",
            company="TechCorp Solutions",
            location="San Francisco, CA",
            skills=["react", "javascript", "typescript", "redux", "html", "css", "git"],
            posted_date="2024-03-01",
        ),
        JobPosting(
            job_id="job-2",
            title="Backend Engineer",
            company="Innovate.io",
            location="Austin, TX",
            skills=["python", "django", "postgresql", "docker", "rest"],
            posted_date="2024-03-05",
        ),
        JobPosting(
            job_id="job-3",
            title="Full Stack Developer",
            company="StartupIndia Tech",
            location="Bangalore, India",
            skills=["node.js", "express", "mongodb", "react", "aws"],
            posted_date="2024-02-20",
        ),
        JobPosting(
            job_id="job-4",
            title="Data Scientist",
            company="GlobalSoft Inc",
            location="New York, NY",
            skills=["python", "machine learning", "pandas"],
            status="paused",
            posted_date="2024-01-15",
        ),
    ]


@pytest.fixture
def sample_profiles() -> List[CandidateProfile]:
    return [
        CandidateProfile(
            candidate_id="cand-1",
            name="Ana Lopez",
            location="Austin",
            skills=["Python", "Django", "PostgreSQL", "Docker"],
        ),
        CandidateProfile(
            candidate_id="cand-2",
            name="Sam Lee",
            location="San Francisco",
            skills=["react", "javascript", "css", "node.js"],
        ),
        CandidateProfile(candidate_id="cand-3", name="No Skills Yet"),
    ]
