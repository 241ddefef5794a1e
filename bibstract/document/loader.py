"""
Document Loader
===============
Turns a PDF into ordered plain-text lines for the reference pipeline.
"""

from typing import List

import pdfplumber


def page_lines(text: str) -> List[str]:
    """Split page text into lines, dropping blank ones"""
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def lines_from_pdf(pdf_path: str) -> List[str]:
    """
    Extract document lines from a PDF, page by page.

    Pages without a text layer contribute no lines.
    """
    lines: List[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages:
            lines.extend(page_lines(page.extract_text() or ""))
    return lines
