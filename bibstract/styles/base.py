"""
Citation Style Base
===================
A citation style bundles:
- an entry segmentation rule (bib buffer -> raw entry strings)
- an entry parser (raw entry -> BibRecord or None)
- the in-text citation marker pattern and its group delimiter
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional

from ..types import BibRecord


class BibRecordParser(ABC):
    """Parse one raw entry string. Returns None when the entry does not match."""

    @abstractmethod
    def parse_record(self, line: str) -> Optional[BibRecord]:
        ...


class BibStractor(ABC):
    """
    Extraction strategy for one citation style.

    Subclasses set:
    - name: Style identifier used in debug output
    - cite_regex: Pattern for an in-text citation marker group
    - cite_delimiter: Separator between markers inside one group
    """

    name: str = ""
    cite_regex: re.Pattern = re.compile(r"(?!)")
    cite_delimiter: str = ""

    def __init__(self, record_parser: BibRecordParser):
        self.record_parser = record_parser

    @abstractmethod
    def split_entries(self, text: str) -> List[str]:
        """Segment the delimited bib buffer into raw entry strings"""
        ...

    @abstractmethod
    def parse(self, text: str) -> List[Optional[BibRecord]]:
        """Segment and parse the bib buffer"""
        ...

    def find_markers(self, text: str) -> List[List[str]]:
        """
        Find in-text citation marker groups.

        Returns one list per group, holding the stripped pieces between
        delimiters, e.g. "[3,7]" -> ["3", "7"].
        """
        groups = []
        for match in self.cite_regex.finditer(text):
            body = match.group("body")
            groups.append([p.strip() for p in body.split(self.cite_delimiter) if p.strip()])
        return groups

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
