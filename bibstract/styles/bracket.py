"""
Bracket-Numbered Citation Style
===============================
Bibliographies tagged [1], [2], [3]... with quoted titles, cited in text
as [3] or [3,7].

Example entry:
    [1] E. Chang and A. Zakhor, “Scalable video data placement on parallel
    disk arrays,” in IS&T/SPIE Int. Symp. Electronic Imaging, Feb. 1994.
"""

import logging
import re
from typing import List, Optional

from ..types import BibRecord, LINE_DELIMITER, author_string_to_list, extract_ref_year
from .base import BibRecordParser, BibStractor

logger = logging.getLogger(__name__)

# Initial / final quotation punctuation, plus the straight double quote
OPEN_QUOTES = '"«‘‛“‟‹⸂⸄⸉⸌⸜⸠'
CLOSE_QUOTES = '"»’”›⸃⸅⸊⸍⸝⸡'


class InitialFirstQuotedParser(BibRecordParser):
    """
    Parse `[N] Authors, “Title,” [in] Venue[.]`.

    Authors are usually "E. Chang and A. Zakhor" (initials first).
    """

    ENTRY_PATTERN = re.compile(
        r"\[(?P<tag>[0-9]+)\] (?P<authors>.*), "
        rf"[{OPEN_QUOTES}](?P<title>.*),[{CLOSE_QUOTES}] "
        r"(?:(?:I|i)n )?(?P<venue>.*)\.?"
    )

    def parse_record(self, line: str) -> Optional[BibRecord]:
        m = self.ENTRY_PATTERN.fullmatch(line.strip())
        if m is None:
            return None
        venue = m.group("venue")
        return BibRecord(
            title=m.group("title"),
            authors=tuple(author_string_to_list(m.group("authors"))),
            venue=venue,
            citation_key=m.group("tag"),
            year=extract_ref_year(venue),
        )


class BracketNumber(BibStractor):
    """
    Bracket-numbered style.

    Segmentation walks tags [1], [2], ... in sequence. Each entry runs up to
    the next tag; the walk stops at the first missing number, so entries
    after a numbering gap are dropped.

    Parse failures are kept in the output as None.
    """

    name = "bracket"
    cite_regex = re.compile(r"\[(?P<body>[0-9,]+)\]")
    cite_delimiter = ","

    def __init__(self, record_parser: Optional[BibRecordParser] = None):
        super().__init__(record_parser or InitialFirstQuotedParser())

    def split_entries(self, text: str) -> List[str]:
        # Line markers are dropped; wrapped lines join directly
        text = text.replace(LINE_DELIMITER, "")
        entries: List[str] = []
        i = 1
        tag = f"[{i}]"
        st = text.find(tag)
        while st >= 0:
            next_tag = f"[{i + 1}]"
            end = text.find(next_tag, st + len(tag))
            if end >= 0:
                entries.append(text[st:end])
            else:
                entries.append(text[st:])
            i += 1
            tag = next_tag
            st = end
        return entries

    def parse(self, text: str) -> List[Optional[BibRecord]]:
        entries = self.split_entries(text)
        records = [self.record_parser.parse_record(s) for s in entries]
        logger.debug(
            "bracket: %d entries, %d parsed",
            len(entries), sum(1 for r in records if r is not None)
        )
        return records
