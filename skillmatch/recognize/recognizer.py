"""
Catalog skill recognition.

Skill names show up in documents with inconsistent punctuation and
spacing ("Node.js", "node js", "nodejs"), so each catalog label is
searched for through a handful of surface variants.  Every variant is
wrapped in boundary assertions so that ``java`` does not fire inside
``javascript``.

Two boundary modes are available:

* ``"word"`` – ASCII ``\\b``.  ``+``, ``#`` and ``.`` count as non-word
  characters, so labels that end in a symbol (``c++``, ``c#``) only
  match when a word character follows them, and labels that start with
  one (``.net``) only match after a word character.  This is the
  default and mirrors the job board's historical results.
* ``"token"`` – lookarounds that only reject a neighbouring letter,
  digit or underscore, so ``c++`` matches in ``"uses c++ daily"``.

Patterns are compiled once per recognizer because the catalog never
changes after load.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import Dict, Iterable, List, Optional, Pattern, Sequence, Tuple

from ..vocabulary import catalog, normalize

logger = logging.getLogger(__name__)

BOUNDARY_MODES: Dict[str, Tuple[str, str]] = {
    "word": (r"\b", r"\b"),
    "token": (r"(?<![a-z0-9_])", r"(?![a-z0-9_])"),
}

_DOT_OR_HYPHEN = re.compile(r"[.-]")
_WHITESPACE = re.compile(r"\s+")
_INNER_SEPARATOR = re.compile(r"(?<=[a-z0-9])[.\-\s]+(?=[a-z0-9])")


def surface_variants(skill: str) -> List[str]:
    """Return the spellings searched for a catalog label, in order.

    1. the label lower-cased
    2. the normalized label
    3. ``.`` and ``-`` replaced with spaces (``node.js`` -> ``node js``)
    4. whitespace removed (``react native`` -> ``reactnative``)
    5. separators between two alphanumerics removed
       (``node.js`` -> ``nodejs``)

    Empty and repeated spellings are dropped.
    """
    lowered = skill.lower()
    candidates = [
        lowered,
        normalize(skill),
        _DOT_OR_HYPHEN.sub(" ", lowered),
        _WHITESPACE.sub("", lowered),
        _INNER_SEPARATOR.sub("", lowered),
    ]
    variants: List[str] = []
    for candidate in candidates:
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants


class SkillRecognizer:
    """Find catalog skills in free text.

    Args:
        skills: Catalog labels to search for.  Defaults to the built-in
            catalog.
        boundary: ``"word"`` or ``"token"``; see the module docstring.
    """

    def __init__(self, skills: Optional[Sequence[str]] = None, boundary: str = "word") -> None:
        if boundary not in BOUNDARY_MODES:
            raise ValueError(
                f"Unknown boundary mode {boundary!r}; expected one of {sorted(BOUNDARY_MODES)}"
            )
        self.boundary = boundary
        self.skills: Tuple[str, ...] = tuple(catalog() if skills is None else skills)
        left, right = BOUNDARY_MODES[boundary]
        self._patterns: List[Tuple[str, List[Pattern[str]]]] = []
        for skill in self.skills:
            patterns = [
                re.compile(left + re.escape(variant) + right, re.IGNORECASE | re.ASCII)
                for variant in surface_variants(skill)
            ]
            self._patterns.append((skill.lower(), patterns))
        logger.debug(
            "Compiled %d skill patterns (%s boundaries)",
            sum(len(p) for _, p in self._patterns),
            boundary,
        )

    def recognize(self, text: str) -> List[str]:
        """Return the catalog labels present in ``text``.

        Labels are lower-cased, unique, and listed in catalog order
        rather than document order.  Text without any match yields an
        empty list.
        """
        corpus = text.lower()
        found: List[str] = []
        for label, patterns in self._patterns:
            if label in found:
                continue
            for pattern in patterns:
                if pattern.search(corpus):
                    found.append(label)
                    break
        logger.debug("Recognized %d skills in %d characters", len(found), len(corpus))
        return found


@functools.lru_cache(maxsize=None)
def default_recognizer(boundary: str = "word") -> SkillRecognizer:
    """Return the shared recognizer for the built-in catalog."""
    return SkillRecognizer(boundary=boundary)


def extract_skills_from_text(text: str, recognizer: Optional[SkillRecognizer] = None) -> List[str]:
    """Recognize catalog skills in ``text``.

    Uses the shared built-in recognizer unless one is supplied.
    """
    return (recognizer or default_recognizer()).recognize(text)


def build_recognizer(skills: Optional[Iterable[str]] = None, boundary: str = "word") -> SkillRecognizer:
    """Return a recognizer, reusing the shared one for the built-in catalog."""
    if skills is None:
        return default_recognizer(boundary)
    return SkillRecognizer(tuple(skills), boundary=boundary)
