"""
Author-Year Citation Style
==========================
One entry per line, cited in text as [Smith, 1999; Lee, 2001].

Example entry:
    STONEBREAKER, M. 1986. A Case for Shared Nothing. Database Engineering 9, 1, 4-9.
"""

import logging
import re
import sys
import unicodedata
from typing import List, Optional

from ..types import BibRecord, LINE_DELIMITER, author_string_to_list, cite_author_from_authors
from .base import BibRecordParser, BibStractor

logger = logging.getLogger(__name__)


def category_class(prefixes: str) -> str:
    """
    Regex character-class body covering every code point whose Unicode
    general category starts with one of prefixes ("LP" -> letters and
    punctuation).
    """
    parts = []
    start = None
    for cp in range(sys.maxunicode + 2):
        inside = cp <= sys.maxunicode and unicodedata.category(chr(cp))[0] in prefixes
        if inside and start is None:
            start = cp
        elif not inside and start is not None:
            end = cp - 1
            if start == end:
                parts.append(re.escape(chr(start)))
            else:
                parts.append(re.escape(chr(start)) + "-" + re.escape(chr(end)))
            start = None
    return "".join(parts)


# Letters, punctuation and the plain space; no digits or symbols
AUTHOR_CHARS = category_class("LP") + " "


class AuthorYearParser(BibRecordParser):
    """
    Parse `Authors Year[a-z]. Title. [in] Venue[.]`.

    Authors run is letters, punctuation and spaces. The letter suffix that
    disambiguates same-year works ("1999b") is dropped.
    """

    ENTRY_PATTERN = re.compile(
        r"(?P<authors>[" + AUTHOR_CHARS + r"]+) "
        r"(?P<year>[0-9]{4})[a-z]?\. "
        r"(?P<title>[^.]+)\. "
        r"(?:(?:I|i)n )?(?P<venue>.*)\.?"
    )

    def parse_record(self, line: str) -> Optional[BibRecord]:
        m = self.ENTRY_PATTERN.fullmatch(line.strip())
        if m is None:
            return None
        authors = author_string_to_list(m.group("authors"))
        year = int(m.group("year"))
        short = cite_author_from_authors(authors)
        cite_str = f"{short}, {year}" if short is not None else str(year)
        return BibRecord(
            title=m.group("title"),
            authors=tuple(authors),
            venue=m.group("venue"),
            citation_key=cite_str,
            year=year,
        )


class NamedYear(BibStractor):
    """
    Author-year style.

    Every delimited line is one entry. Lines that do not parse are dropped.
    """

    name = "author_year"
    cite_regex = re.compile(
        r"\[(?P<body>[^\[\];]+, [0-9]{4}[a-z]?(?:; [^\[\];]+, [0-9]{4}[a-z]?)*)\]"
    )
    cite_delimiter = ";"

    def __init__(self, record_parser: Optional[BibRecordParser] = None):
        super().__init__(record_parser or AuthorYearParser())

    def split_entries(self, text: str) -> List[str]:
        if text.startswith(LINE_DELIMITER):
            text = text[len(LINE_DELIMITER):]
        return text.split(LINE_DELIMITER)

    def parse(self, text: str) -> List[Optional[BibRecord]]:
        entries = self.split_entries(text)
        if entries:
            logger.debug("author_year: first entry %r", entries[0])
        records = [self.record_parser.parse_record(s) for s in entries]
        return [r for r in records if r is not None]
