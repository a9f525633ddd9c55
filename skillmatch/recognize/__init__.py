"""
Skill recognition.

Scans free text for catalog skills.  See :mod:`.recognizer` for the
variant and boundary rules.
"""

from .recognizer import (  # noqa: F401
    SkillRecognizer,
    build_recognizer,
    default_recognizer,
    extract_skills_from_text,
    surface_variants,
)
