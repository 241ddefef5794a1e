"""
Citation Styles
===============
Each style segments and parses the bibliography its own way:
- bracket: [1] Authors, “Title,” Venue.
- author_year: Authors 1999. Title. Venue.

STYLES is the fixed registry, in selection priority order.
"""

from typing import Tuple

from .base import BibRecordParser, BibStractor
from .bracket import BracketNumber, InitialFirstQuotedParser
from .author_year import AuthorYearParser, NamedYear

STYLES: Tuple[BibStractor, ...] = (BracketNumber(), NamedYear())

__all__ = [
    'BibRecordParser', 'BibStractor',
    'BracketNumber', 'InitialFirstQuotedParser',
    'NamedYear', 'AuthorYearParser',
    'STYLES',
]
