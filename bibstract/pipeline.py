"""
Reference Pipeline
==================
Single entry point for running the complete reference extraction.
Orchestrates: Lines -> BibSection -> Styles -> Selection -> BibRecord list
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .types import BibRecord, CitationRecord
from .bib import BibliographyExtractor, DEFAULT_HEADINGS
from .styles import STYLES, BibStractor

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Complete pipeline configuration"""
    # Bibliography heading labels (line suffix match)
    headings: Tuple[str, ...] = DEFAULT_HEADINGS

    # Remove unparsed bracket entries (None) from the output
    drop_unparsed: bool = False

    # Debug
    debug: bool = False

    @classmethod
    def default(cls) -> 'PipelineConfig':
        """Default config: unparsed bracket entries kept as None"""
        return cls()

    @classmethod
    def strict(cls) -> 'PipelineConfig':
        """Strict config: only parsed records are returned"""
        return cls(drop_unparsed=True)


@dataclass
class DebugBundle:
    """Debug information from pipeline run"""
    heading_index: int = -1
    start_line: int = 0
    section_lines: int = 0

    candidate_counts: Dict[str, int] = field(default_factory=dict)
    parsed_counts: Dict[str, int] = field(default_factory=dict)
    selected_style: str = ""

    records_count: int = 0

    @property
    def heading_found(self) -> bool:
        return self.heading_index >= 0

    def summary(self) -> str:
        """Generate summary string"""
        lines = [
            "=" * 60,
            "REFERENCE EXTRACTION DEBUG SUMMARY",
            "=" * 60,
            f"Heading Found: {self.heading_found} (line {self.heading_index})",
            f"Section Start Line: {self.start_line}",
            f"Section Lines: {self.section_lines}",
            "",
            "Style Candidates (entries / parsed):",
        ]
        for name, count in self.candidate_counts.items():
            lines.append(f"  {name}: {count} / {self.parsed_counts.get(name, 0)}")
        lines.extend([
            "",
            f"Selected Style: {self.selected_style}",
            f"Final Records: {self.records_count}",
            "=" * 60,
        ])
        return "\n".join(lines)


def longest_idx(results: Sequence[Sequence[object]]) -> int:
    """
    Index of the longest result list.
    Ties go to the earliest list; -1 if there are none.
    """
    max_len = -1
    idx = -1
    for i, result in enumerate(results):
        if len(result) > max_len:
            idx = i
            max_len = len(result)
    return idx


class ReferencePipeline:
    """
    Main reference extraction pipeline.

    Usage:
        pipeline = ReferencePipeline()
        records, debug = pipeline.run(lines)
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        styles: Sequence[BibStractor] = STYLES,
    ):
        self.config = config or PipelineConfig.default()
        self.styles = tuple(styles)

        # Initialize components
        self.bib_extractor = BibliographyExtractor(self.config.headings)

    def run(self, lines: Sequence[str]) -> Tuple[List[Optional[BibRecord]], DebugBundle]:
        """
        Run pipeline on document lines.

        Args:
            lines: Document text, one logical line per element

        Returns:
            Tuple of (records, debug_bundle). Records come from the style
            that produced the most entries.
        """
        debug = DebugBundle()

        # 1. Locate bibliography
        section = self.bib_extractor.extract(lines)
        debug.heading_index = section.heading_index
        debug.start_line = section.start
        debug.section_lines = section.line_count

        if self.config.debug:
            if section.heading_found:
                logger.info("[PIPELINE] Bibliography heading at line %d", section.heading_index)
            else:
                logger.info("[PIPELINE] No bibliography heading, using whole document")

        # 2. Run styles
        results: List[List[Optional[BibRecord]]] = []
        for style in self.styles:
            records = style.parse(section.text)
            results.append(records)
            debug.candidate_counts[style.name] = len(records)
            debug.parsed_counts[style.name] = sum(1 for r in records if r is not None)

            if self.config.debug:
                logger.info("[PIPELINE] %s candidates: %d", style.name, len(records))

        # 3. Select
        idx = longest_idx(results)
        if idx < 0:
            return [], debug

        selected = results[idx]
        if self.config.drop_unparsed:
            selected = [r for r in selected if r is not None]

        debug.selected_style = self.styles[idx].name
        debug.records_count = len(selected)

        if self.config.debug:
            logger.info("[PIPELINE] Selected style: %s (%d records)", debug.selected_style, len(selected))

        return selected, debug


def find_references(
    lines: Sequence[str],
    config: Optional[PipelineConfig] = None
) -> List[Optional[BibRecord]]:
    """
    Extract bibliography records from document lines.

    Bracket-numbered entries that fail to parse appear as None unless
    config.drop_unparsed is set.
    """
    records, _ = ReferencePipeline(config).run(lines)
    return records


def find_citations(
    lines: Sequence[str],
    records: Sequence[Optional[BibRecord]]
) -> List[CitationRecord]:
    """
    Link in-text citation markers to bibliography records.

    Not implemented: always returns an empty list. Marker patterns are
    available per style through BibStractor.find_markers.
    """
    return []


def run_reference_pipeline(
    pdf_path: str,
    config: Optional[PipelineConfig] = None
) -> Tuple[List[Optional[BibRecord]], DebugBundle]:
    """
    Single entry point for running the pipeline on a PDF path.
    """
    from .document import lines_from_pdf

    cfg = config or PipelineConfig.default()
    lines = lines_from_pdf(pdf_path)

    if cfg.debug:
        logger.info("[PIPELINE] Loaded %d lines from %s", len(lines), pdf_path)

    pipeline = ReferencePipeline(cfg)
    return pipeline.run(lines)
