"""
Unified Data Types for Reference Extraction
===========================================
All modules MUST use these types. No custom structures allowed.

Type Hierarchy:
- BibRecord: One parsed bibliography entry
- CitationRecord: In-text citation occurrence linked to a BibRecord

Helpers:
- extract_ref_year: Plausible publication year in a string
- author_string_to_list: Raw author substring -> "First Last" names
- cite_author_from_authors: Short author form used in citation keys
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


# ============================================================
# Constants
# ============================================================

# Plausible publication years lie strictly between these bounds
MINYEAR = 1800
MAXYEAR = 2100

# Marker inserted before every document line when building the bib buffer
LINE_DELIMITER = "<bb>"


# ============================================================
# Core Data Structures
# ============================================================

@dataclass(frozen=True)
class BibRecord:
    """
    A single parsed bibliography entry.

    Attributes:
        title: Title of the referenced work (may be empty)
        authors: Normalized "First Last" names, in citation order
        venue: Journal / conference / publisher text, free-form
        citation_key: Numeric tag ("3") or author-year key ("Smith et al., 1999")
        year: Publication year, 0 if unknown
    """
    title: str
    authors: Tuple[str, ...]
    venue: str
    citation_key: str
    year: int = 0

    @property
    def first_author(self) -> Optional[str]:
        """First listed author, if any"""
        return self.authors[0] if self.authors else None

    def has_year(self) -> bool:
        """Check if a year was recovered"""
        return self.year != 0


@dataclass(frozen=True)
class CitationRecord:
    """
    An in-text citation occurrence linked to a bibliography entry.
    Reserved for citation correlation; nothing populates it yet.

    Attributes:
        reference_index: Index of the BibRecord this marker refers to
        context: Surrounding text of the marker
        start_offset: Marker start within context
        end_offset: Marker end within context
    """
    reference_index: int
    context: str
    start_offset: int
    end_offset: int


# ============================================================
# Year Extraction
# ============================================================

_YEAR_PATTERN = re.compile(r" [12][0-9]{3}")


def parse_year(raw: str) -> Optional[int]:
    """
    Parse a year token to int.

    Returns None instead of raising on malformed input.
    """
    text = raw.strip()
    if not text.isdigit():
        return None
    try:
        return int(text)
    except ValueError:
        return None


def is_plausible_year(year: int, min_year: int = MINYEAR, max_year: int = MAXYEAR) -> bool:
    """Check min_year < year < max_year"""
    return min_year < year < max_year


def extract_ref_year(text: str, min_year: int = MINYEAR, max_year: int = MAXYEAR) -> int:
    """
    Find a plausible 4-digit year in text.

    Scans " 1xxx" / " 2xxx" tokens in order:
    - first token strictly inside (min_year, max_year) wins
    - otherwise the last token that parsed
    - otherwise 0
    """
    last = 0
    for match in _YEAR_PATTERN.finditer(text):
        year = parse_year(match.group())
        if year is None:
            continue
        if is_plausible_year(year, min_year, max_year):
            return year
        last = year
    return last


# ============================================================
# Author Normalization
# ============================================================

# Runs of "," and " and " separate names (and "Last, First" halves)
_AUTHOR_SPLIT = re.compile(r"(?:,|(?: and ))+")


def _starts_with_initial(text: str) -> bool:
    """"M. Johnson" style: uppercase letter followed by a period"""
    return len(text) > 1 and text[0].isupper() and text[1] == "."


def author_string_to_list(auth_string: str) -> List[str]:
    """
    Normalize a raw author substring to a list of "First Last" names.

    Examples:
    - "E. Chang and A. Zakhor" -> ["E. Chang", "A. Zakhor"]
    - "Doe, A. and Roe, B." -> ["A. Doe", "B. Roe"]
    - "Stonebreaker, M." -> ["M. Stonebreaker"]

    Tokens are whitespace-trimmed in both conventions ("A. Smith, B. Jones"
    -> ["A. Smith", "B. Jones"]). A trailing unpaired token in "Last, First"
    mode is kept as-is.
    """
    first_last = _starts_with_initial(auth_string)
    names = _AUTHOR_SPLIT.split(auth_string)
    # Trailing separators leave empty tokens behind
    while names and not names[-1].strip():
        names.pop()
    logger.debug("auth string: %r -> names: %r", auth_string, names)

    if first_last:
        out = [name.strip() for name in names]
    else:
        out = []
        for i in range(0, len(names), 2):
            if i + 1 < len(names):
                out.append(names[i + 1].strip() + " " + names[i].strip())
            else:
                out.append(names[i].strip())  # unpaired, keep as-is

    logger.debug("authors: %r", out)
    return out


def author_last_name(name: str) -> str:
    """Text after the last space ("A. Doe" -> "Doe")"""
    return name[name.rfind(" ") + 1:]


def cite_author_from_authors(authors: Sequence[str]) -> Optional[str]:
    """
    Short author form for author-year citation keys.

    - 1 author -> "Doe"
    - 2 authors -> "Doe and Roe"
    - 3+ authors -> "Doe et al."
    - none -> None
    """
    if len(authors) > 2:
        return author_last_name(authors[0]) + " et al."
    if len(authors) == 2:
        return author_last_name(authors[0]) + " and " + author_last_name(authors[1])
    if len(authors) == 1:
        return author_last_name(authors[0])
    return None
