"""
Reference Extraction Engine
===========================
Dual-style (bracket-numbered + author-year) bibliography extraction from
document lines.

Architecture:
- bib: Bibliography section location and line delimiting
- styles: Citation styles (segmentation + entry parsing + marker pattern)
- pipeline: Runs every style and keeps the one with the most records
- document: PDF -> lines loader

Usage:
    from bibstract import ReferencePipeline
    pipeline = ReferencePipeline()
    records, debug = pipeline.run(lines)
"""

from .types import (
    BibRecord,
    CitationRecord,
    MINYEAR,
    MAXYEAR,
    author_string_to_list,
    cite_author_from_authors,
    extract_ref_year,
)
from .styles import STYLES, BibStractor, BracketNumber, NamedYear
from .pipeline import (
    ReferencePipeline,
    PipelineConfig,
    DebugBundle,
    find_references,
    find_citations,
)

__all__ = [
    'BibRecord',
    'CitationRecord',
    'MINYEAR',
    'MAXYEAR',
    'author_string_to_list',
    'cite_author_from_authors',
    'extract_ref_year',
    'STYLES',
    'BibStractor',
    'BracketNumber',
    'NamedYear',
    'ReferencePipeline',
    'PipelineConfig',
    'DebugBundle',
    'find_references',
    'find_citations',
]

__version__ = '1.0.0'
