"""
Document Loading Module
=======================
PDF -> document lines via pdfplumber.
"""

from .loader import lines_from_pdf, page_lines

__all__ = ['lines_from_pdf', 'page_lines']
