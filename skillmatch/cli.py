"""
Command line interface for skillmatch.

Subcommands cover the flows a job board runs against the matching core:
extracting skills from a résumé (optionally attaching it to a candidate
profile), listing matched jobs for a candidate, recommending jobs with
the location bonus, ranking candidates for a job, showing one job's
breakdown, and printing a report of a matches CSV.  Jobs are read from
a CSV file and candidate profiles from a JSON file; see
:mod:`skillmatch.records`.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, Settings, load_settings
from .errors import SkillMatchError
from .rank import (
    job_match_summary,
    rank_candidates_for_job,
    rank_jobs_for_candidate,
    recommend_jobs,
)
from .records import (
    CandidateProfile,
    JobPosting,
    load_jobs_csv,
    load_profiles_json,
    save_profiles_json,
    write_matches_csv,
)
from .resume import attach_resume, extract_skills_from_resume, save_resume_json

logger = logging.getLogger("skillmatch.cli")


def _find_profile(path: str, candidate_id: str) -> tuple[List[CandidateProfile], CandidateProfile]:
    profiles = load_profiles_json(path)
    for profile in profiles:
        if profile.candidate_id == candidate_id:
            return profiles, profile
    raise ValueError(f"Candidate {candidate_id} not found in {path}")


def _find_job(path: str, job_id: str) -> JobPosting:
    for job in load_jobs_csv(path):
        if job.job_id == job_id:
            return job
    raise ValueError(f"Job {job_id} not found in {path}")


def _candidate_skills(args: argparse.Namespace) -> tuple[List[str], str]:
    """Return (skills, location) from --skills or from a stored profile."""
    if args.skills is not None:
        return [s.strip() for s in args.skills.split(",") if s.strip()], args.location or ""
    if not (args.profiles and args.candidate_id):
        raise ValueError("Provide --skills or both --profiles and --candidate-id")
    _, profile = _find_profile(args.profiles, args.candidate_id)
    return profile.skills, args.location or profile.location


def cmd_resume_extract(args: argparse.Namespace, settings: Settings) -> None:
    """Extract skills from a résumé file.

    With ``--profiles`` and ``--candidate-id`` the résumé is attached to
    that profile on a best-effort basis and the profiles file is
    rewritten.  Without them, extraction failures are reported as
    errors.
    """
    recognizer = settings.build_recognizer()
    if args.profiles and args.candidate_id:
        profiles, profile = _find_profile(args.profiles, args.candidate_id)
        extracted = attach_resume(profile, args.file, recognizer)
        save_profiles_json(profiles, args.profiles)
        print(json.dumps({"extracted_skills": extracted, "all_skills": profile.skills}, indent=2))
        return
    extraction = extract_skills_from_resume(args.file, recognizer)
    if args.out:
        save_resume_json(extraction, args.out)
        logger.info("Résumé skills saved to %s", args.out)
    print(json.dumps({"extracted_skills": extraction.skills}, indent=2))


def cmd_match(args: argparse.Namespace, settings: Settings) -> None:
    """Rank open jobs for a candidate and write matches CSV."""
    skills, _ = _candidate_skills(args)
    jobs = load_jobs_csv(args.jobs)
    matches = rank_jobs_for_candidate(skills, jobs, min_score=args.min_score, sort_by=args.sort_by)
    count = write_matches_csv(matches, args.out)
    logger.info("Wrote %d matches to %s", count, args.out)


def cmd_recommend(args: argparse.Namespace, settings: Settings) -> None:
    """Print job recommendations including the location bonus."""
    skills, location = _candidate_skills(args)
    jobs = load_jobs_csv(args.jobs)
    limit = args.limit if args.limit is not None else settings.recommendation_limit
    recommendations = recommend_jobs(skills, location, jobs, limit=limit, bonus=settings.location_bonus)
    for i, entry in enumerate(recommendations):
        print(f"{i+1:02d}. {entry.job.title} at {entry.job.company} ({entry.job.location}) – {entry.match.score}%")
        if entry.match.matched_skills:
            print(f"   Matched: {', '.join(entry.match.matched_skills)}")
    if not recommendations:
        print("No recommendations found")


def cmd_candidates(args: argparse.Namespace, settings: Settings) -> None:
    """Print candidates ranked for one job."""
    job = _find_job(args.jobs, args.job_id)
    candidates = load_profiles_json(args.profiles)
    ranked = rank_candidates_for_job(job, candidates, min_score=args.min_score)
    for i, entry in enumerate(ranked):
        print(f"{i+1:02d}. {entry.candidate.name or entry.candidate.candidate_id} – {entry.match.score}%")
        if entry.match.missing_skills:
            print(f"   Missing: {', '.join(entry.match.missing_skills)}")


def cmd_job(args: argparse.Namespace, settings: Settings) -> None:
    """Print the match breakdown of one job as JSON."""
    skills, _ = _candidate_skills(args)
    job = _find_job(args.jobs, args.job_id)
    print(json.dumps(job_match_summary(skills, job), indent=2))


def cmd_report(args: argparse.Namespace, settings: Settings) -> None:
    """Print a simple report from matches CSV."""
    with open(args.matches, "r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = list(reader)
    limit = args.limit if args.limit is not None else len(rows)
    for i, row in enumerate(rows[:limit]):
        print(f"{i+1:02d}. {row['title']} at {row['company']} – {row['match_score']}%")
        print(f"   Matched: {row['matched_skills']}")
        if row["missing_skills"]:
            print(f"   Missing: {row['missing_skills']}")
        print()


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_candidate_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--skills", help="Comma separated candidate skills")
    parser.add_argument("--profiles", help="Path to candidate profiles JSON")
    parser.add_argument("--candidate-id", dest="candidate_id", help="Candidate id within --profiles")
    parser.add_argument("--location", help="Candidate location (overrides the profile)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skillmatch", description="Résumé skill extraction and job matching")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--log-level", dest="log_level", choices=LOG_LEVELS, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Resume extract
    resume_parser = subparsers.add_parser("resume", help="Résumé related commands")
    resume_sub = resume_parser.add_subparsers(dest="subcommand", required=True)
    extract_cmd = resume_sub.add_parser("extract", help="Extract skills from a résumé file")
    extract_cmd.add_argument("--file", required=True, help="Path to résumé file (pdf, docx, html, txt, md)")
    extract_cmd.add_argument("--out", help="Optional path for the extracted text and skills JSON")
    extract_cmd.add_argument("--profiles", help="Candidate profiles JSON to attach the résumé to")
    extract_cmd.add_argument("--candidate-id", dest="candidate_id", help="Candidate id within --profiles")
    extract_cmd.set_defaults(func=cmd_resume_extract)

    # Match
    match_cmd = subparsers.add_parser("match", help="Rank open jobs for a candidate")
    match_cmd.add_argument("--jobs", required=True, help="Path to jobs CSV")
    _add_candidate_args(match_cmd)
    match_cmd.add_argument("--min-score", type=int, default=0, dest="min_score", help="Minimum match score")
    match_cmd.add_argument("--sort-by", choices=["score", "posted"], default="score", dest="sort_by")
    match_cmd.add_argument("--out", default="matches.csv", help="Output CSV path")
    match_cmd.set_defaults(func=cmd_match)

    # Recommend
    rec_cmd = subparsers.add_parser("recommend", help="Recommend jobs with the location bonus")
    rec_cmd.add_argument("--jobs", required=True, help="Path to jobs CSV")
    _add_candidate_args(rec_cmd)
    rec_cmd.add_argument("--limit", type=_positive_int, help="Number of recommendations (default from config)")
    rec_cmd.set_defaults(func=cmd_recommend)

    # Candidates
    cand_cmd = subparsers.add_parser("candidates", help="Rank candidates for a job")
    cand_cmd.add_argument("--jobs", required=True, help="Path to jobs CSV")
    cand_cmd.add_argument("--job-id", required=True, dest="job_id")
    cand_cmd.add_argument("--profiles", required=True, help="Path to candidate profiles JSON")
    cand_cmd.add_argument("--min-score", type=int, default=0, dest="min_score", help="Minimum match score")
    cand_cmd.set_defaults(func=cmd_candidates)

    # Job
    job_cmd = subparsers.add_parser("job", help="Show the match breakdown for one job")
    job_cmd.add_argument("--jobs", required=True, help="Path to jobs CSV")
    job_cmd.add_argument("--job-id", required=True, dest="job_id")
    _add_candidate_args(job_cmd)
    job_cmd.set_defaults(func=cmd_job)

    # Report
    report_cmd = subparsers.add_parser("report", help="Generate a text report from matches CSV")
    report_cmd.add_argument("--matches", required=True, help="Path to matches CSV")
    report_cmd.add_argument("--limit", type=_positive_int, default=20, help="Number of top matches to display")
    report_cmd.set_defaults(func=cmd_report)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (SkillMatchError, FileNotFoundError) as exc:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        logger.error("%s", exc)
        return 2
    level = args.log_level or settings.log_level
    logging.basicConfig(level=getattr(logging, level), format="[%(levelname)s] %(message)s")
    try:
        args.func(args, settings)
    except (SkillMatchError, FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
