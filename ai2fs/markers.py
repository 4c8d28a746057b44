"""
Marker Recognition for AI Transcripts

Decides, one line at a time, whether a line announces a new output file
("// src/app.js", "- main.js", "[ styles/site.css ]") and pulls the
relative path out of it.

Rules applied in order:
1. Blank lines and directory-tree drawings ("├── src/index.ts") are content.
2. The first entry of PATH_MARKERS the stripped line starts with is the marker.
3. What follows the marker (minus one trailing "]") must carry a file
   extension: a dot followed by at least one non-whitespace character.
   "// notes" is a comment, "// notes.txt" is a file.
"""

from typing import Optional

from ai2fs import config
from ai2fs.utils.constants import PATH_MARKERS, TREE_DRAWING_TOKENS, BRACKET_CLOSE
from ai2fs.utils.logger import setup_logger

logger = setup_logger("MarkerRecognizer")


def match_marker(stripped_line: str, markers=PATH_MARKERS):
    """Returns the first PathMarker the line starts with, or None."""
    for marker in markers:
        if not stripped_line.startswith(marker.prefix):
            continue
        if marker.needs_space:
            rest = stripped_line[len(marker.prefix):]
            if not rest[:1].isspace():
                continue
        return marker
    return None


def has_extension(candidate: str) -> bool:
    """True when something other than whitespace follows the last dot."""
    last_dot = candidate.rfind(".")
    if last_dot == -1:
        return False
    return bool(candidate[last_dot + 1:].strip())


def _clean_candidate(raw: str) -> str:
    candidate = raw.strip()
    if candidate.endswith(BRACKET_CLOSE):
        candidate = candidate[:-len(BRACKET_CLOSE)]
    return candidate.strip()


def extract_path(line: str, max_line_length: Optional[int] = None, markers=PATH_MARKERS) -> Optional[str]:
    """
    Classifies a raw transcript line and extracts its candidate path.

    Args:
        line: The line exactly as read, trailing newline included.
        max_line_length: Lines longer than this are always content.
                         Defaults to config.MAX_LINE_LENGTH.
        markers: Ordered marker table (first match wins).

    Returns:
        The relative path announced by the line, or None if the line is content.

    Example:
        >>> extract_path("// src/utils/helpers.js\\n")
        'src/utils/helpers.js'
        >>> extract_path("[ styles/site.css ]")
        'styles/site.css'
        >>> extract_path("# Installation") is None
        True
    """
    if max_line_length is None:
        max_line_length = config.MAX_LINE_LENGTH

    if len(line) > max_line_length:
        logger.debug("Line exceeds max length, treated as content", extra={"length": len(line)})
        return None

    stripped = line.strip()
    if not stripped:
        return None

    if any(token in stripped for token in TREE_DRAWING_TOKENS):
        return None

    marker = match_marker(stripped, markers)
    if marker is None:
        return None

    candidate = _clean_candidate(stripped[len(marker.prefix):])
    if not candidate or not has_extension(candidate):
        return None

    return candidate


def is_path_line(line: str, max_line_length: Optional[int] = None) -> bool:
    """True when the line announces a new output file."""
    return extract_path(line, max_line_length) is not None
