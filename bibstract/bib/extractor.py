"""
Bibliography Extractor
======================
Locates the bibliography section in document lines and builds the
delimited text buffer that every citation style segments.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..types import LINE_DELIMITER


# Section headings, matched as a case-sensitive line suffix
DEFAULT_HEADINGS: Tuple[str, ...] = (
    "References",
    "Citations",
    "Bibliography",
    "REFERENCES",
    "CITATIONS",
    "BIBLIOGRAPHY",
)


@dataclass(frozen=True)
class BibSection:
    """
    Located bibliography section.

    Attributes:
        heading_index: Line index of the heading, -1 if none was found
        start: First line index included in the buffer
        text: Lines from start, each prefixed with LINE_DELIMITER
    """
    heading_index: int
    start: int
    text: str

    @property
    def heading_found(self) -> bool:
        return self.heading_index >= 0

    @property
    def line_count(self) -> int:
        return self.text.count(LINE_DELIMITER)


class BibliographyExtractor:
    """
    Find the bibliography heading and join the section into one buffer.

    Supports:
    - Header detection: "References", "Citations", "Bibliography" (+ all caps)
    - Missing header: whole document is treated as bibliography
    """

    def __init__(self, headings: Optional[Sequence[str]] = None):
        self.headings = tuple(headings) if headings is not None else DEFAULT_HEADINGS

    def find_heading(self, lines: Sequence[str]) -> int:
        """Index of the first heading line, or -1"""
        for i, line in enumerate(lines):
            if line.endswith(self.headings):
                return i
        return -1

    def build_buffer(self, lines: Sequence[str], start: int) -> str:
        """Prefix each line from start with the line delimiter and concatenate"""
        return "".join(LINE_DELIMITER + line for line in lines[start:])

    def extract(self, lines: Sequence[str]) -> BibSection:
        """
        Extract bibliography section from document lines.

        Args:
            lines: Document text, one logical line per element

        Returns:
            BibSection; starts at line 0 when no heading exists
        """
        heading_index = self.find_heading(lines)
        start = heading_index + 1
        return BibSection(
            heading_index=heading_index,
            start=start,
            text=self.build_buffer(lines, start),
        )
