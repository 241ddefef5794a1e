"""
Bibliography Extraction Module
==============================
Locate the bibliography section of a document and delimit its lines.
"""

from .extractor import BibliographyExtractor, BibSection, DEFAULT_HEADINGS

__all__ = ['BibliographyExtractor', 'BibSection', 'DEFAULT_HEADINGS']
