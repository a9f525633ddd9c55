"""
Text extraction from résumé and job documents.

Converts PDF bytes, or files in the other supported formats, into plain
text for the skill recognizer.  Failures surface as
:class:`~skillmatch.errors.ExtractionError`.
"""

from .text import extract_text, extract_text_from_file  # noqa: F401
