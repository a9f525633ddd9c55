"""Tests for catalog skill recognition.

Symbol-bearing labels (``c++``, ``c#``, ``.net``) behave differently in
the two boundary modes; those cases are pinned explicitly here.
"""

from __future__ import annotations

import pytest

from skillmatch.recognize import (
    SkillRecognizer,
    default_recognizer,
    extract_skills_from_text,
    surface_variants,
)
from skillmatch.vocabulary import catalog


def test_word_boundary_keeps_java_out_of_javascript() -> None:
    skills = extract_skills_from_text("I love javascript development")
    assert "javascript" in skills
    assert "java" not in skills


def test_dotted_spelling_matches_dotted_entry() -> None:
    skills = extract_skills_from_text("Built services with Node.js")
    assert "node.js" in skills
    assert "node" in skills


def test_joined_spelling_matches_dotted_entry() -> None:
    skills = extract_skills_from_text("Worked with nodejs daily")
    assert "node.js" in skills
    assert "nodejs" in skills
    assert "node" not in skills


def test_spaced_label_matches_without_space() -> None:
    skills = extract_skills_from_text("Shipped a reactnative app")
    assert "react native" in skills
    assert "react" not in skills


def test_results_follow_catalog_order() -> None:
    assert extract_skills_from_text("python and javascript") == ["javascript", "python"]


def test_matching_ignores_case() -> None:
    assert "postgresql" in extract_skills_from_text("POSTGRESQL administration")


def test_end_to_end_sentence() -> None:
    skills = extract_skills_from_text("Experienced with Python, Django, and PostgreSQL.")
    assert {"python", "django", "postgresql"} <= set(skills)
    assert "ruby" not in skills
    assert "postgres" not in skills


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Nothing relevant here",
        "Senior engineer: Kubernetes, Terraform, AWS, CI/CD, scikit-learn and Power BI.",
        "c++17, C#, .NET, asp.net, node.js, vue.js, react.js",
    ],
)
def test_results_are_catalog_members(text: str) -> None:
    known = set(catalog())
    skills = extract_skills_from_text(text)
    assert set(skills) <= known
    assert len(skills) == len(set(skills))


def test_no_match_returns_empty_list() -> None:
    assert extract_skills_from_text("Nothing relevant here") == []


def test_multi_word_and_slash_labels() -> None:
    skills = extract_skills_from_text("Owned CI/CD pipelines and Spring Boot services")
    assert "ci/cd" in skills
    assert "spring boot" in skills
    assert "spring" in skills


class TestWordBoundaryMode:
    """Default mode: ASCII \\b around every variant."""

    def test_trailing_symbol_needs_word_character_after(self) -> None:
        assert "c++" not in extract_skills_from_text("uses c++ daily")
        assert "c#" not in extract_skills_from_text("writes c# services")

    def test_trailing_symbol_followed_by_digit(self) -> None:
        assert "c++" in extract_skills_from_text("modern c++17 codebase")

    def test_leading_dot_needs_word_character_before(self) -> None:
        assert ".net" not in extract_skills_from_text("experience with .net core")
        skills = extract_skills_from_text("asp.net developer")
        assert ".net" in skills
        assert "asp.net" in skills


class TestTokenBoundaryMode:
    """Token mode: only letters, digits and underscores count as neighbours."""

    recognizer = SkillRecognizer(boundary="token")

    def test_symbol_labels_match_between_spaces(self) -> None:
        skills = self.recognizer.recognize("uses c++ daily, c# and go at work")
        assert "c++" in skills
        assert "c#" in skills
        assert "go" in skills

    def test_leading_dot_label(self) -> None:
        assert ".net" in self.recognizer.recognize("experience with .net core")
        skills = self.recognizer.recognize("asp.net developer")
        assert "asp.net" in skills
        assert ".net" not in skills

    def test_java_still_not_inside_javascript(self) -> None:
        skills = self.recognizer.recognize("I love javascript development")
        assert "javascript" in skills
        assert "java" not in skills


def test_unknown_boundary_mode() -> None:
    with pytest.raises(ValueError):
        SkillRecognizer(boundary="fuzzy")


def test_custom_catalog_labels_are_lower_cased() -> None:
    recognizer = SkillRecognizer(["Rust", "Go"])
    assert recognizer.recognize("Rust and Go services") == ["rust", "go"]


def test_default_recognizer_is_shared() -> None:
    assert default_recognizer() is default_recognizer()
    assert default_recognizer("token") is not default_recognizer()


@pytest.mark.parametrize(
    "skill, expected",
    [
        ("node.js", ["node.js", "node js", "nodejs"]),
        ("react native", ["react native", "reactnative"]),
        ("scikit-learn", ["scikit-learn", "scikitlearn", "scikit learn"]),
        ("c++", ["c++"]),
        (".net", [".net", " net"]),
        ("ci/cd", ["ci/cd", "cicd"]),
    ],
)
def test_surface_variants(skill: str, expected: list) -> None:
    assert surface_variants(skill) == expected
