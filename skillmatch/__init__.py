"""
Skill extraction and matching core for a job board.

The package turns résumé documents into skill lists and scores how well
a candidate's skills cover the skills a job posting asks for.  Each
subpackage implements one step of that flow:

1. **vocabulary** – The fixed catalog of recognizable skills and the
   single normalization rule used whenever two skill strings are
   compared.
2. **extract** – Turn a PDF (or DOCX, HTML, plain text) document into
   plain text for keyword search.
3. **recognize** – Scan text for catalog skills using surface variants
   and word boundary patterns compiled once per catalog.
4. **rank** – Score candidate skills against job skills, apply the
   optional location bonus and order jobs or candidates by fit.
5. **resume** – Extract skills from an uploaded résumé and merge them
   into a candidate profile on a best-effort basis.
6. **records** – Job and candidate dataclasses with the CSV/JSON
   readers and writers used by the command line interface.
7. **cli** – Command line entry point wiring the above together.
"""

from importlib import metadata

from .errors import ConfigError, ExtractionError, SkillMatchError  # noqa: F401
from .vocabulary import catalog, catalog_as_normalized_set, normalize  # noqa: F401
from .extract import extract_text, extract_text_from_file  # noqa: F401
from .recognize import SkillRecognizer, extract_skills_from_text  # noqa: F401
from .rank import MatchResult, apply_location_bonus, score  # noqa: F401

try:
    __version__ = metadata.version("skillmatch")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0"
