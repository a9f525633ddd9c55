"""
Skill vocabulary.

Holds the static catalog of recognizable skills and the normalization
function every other subpackage uses to compare skill strings.
"""

from .catalog import (  # noqa: F401
    TECH_SKILLS,
    NormalizedSkill,
    catalog,
    catalog_as_normalized_set,
    load_catalog_file,
    normalize,
)
