"""
Exception types raised by skillmatch.

Only document extraction and configuration loading can fail.  Skill
normalization, recognition and scoring are total over string input and
never raise these errors.
"""

from __future__ import annotations


class SkillMatchError(Exception):
    """Base class for errors raised by the package."""


class ExtractionError(SkillMatchError):
    """A document could not be parsed into text.

    Retrying the same bytes yields the same failure, so callers should
    either surface the error or skip skill population for the document.
    """


class ConfigError(SkillMatchError):
    """A configuration value is missing or has an unsupported value."""
