"""
Tests for the PDF line loader
"""

import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from unittest.mock import MagicMock, patch

from bibstract.document import lines_from_pdf, page_lines
from bibstract.pipeline import run_reference_pipeline


def _mock_pdf(*page_texts):
    pages = []
    for text in page_texts:
        page = MagicMock()
        page.extract_text.return_value = text
        pages.append(page)
    pdf = MagicMock()
    pdf.pages = pages
    return pdf


class TestLoader(unittest.TestCase):

    def test_page_lines(self):
        self.assertEqual(page_lines("a  \n\n  \nb\n"), ["a", "b"])

    def test_lines_from_pdf(self):
        with patch("pdfplumber.open") as mock_open:
            mock_open.return_value.__enter__.return_value = _mock_pdf(
                "Intro\nText",
                None,  # page without text layer
                "References\n[1] A. One, “Title One,” Venue One.",
            )
            lines = lines_from_pdf("dummy.pdf")
        mock_open.assert_called_once_with("dummy.pdf")
        self.assertEqual(
            lines,
            ["Intro", "Text", "References", "[1] A. One, “Title One,” Venue One."]
        )

    def test_run_reference_pipeline(self):
        with patch("pdfplumber.open") as mock_open:
            mock_open.return_value.__enter__.return_value = _mock_pdf(
                "Body\nREFERENCES\nSmith, J. 1999. A Title. In Some Venue."
            )
            records, debug = run_reference_pipeline("dummy.pdf")
        self.assertEqual(debug.selected_style, "author_year")
        self.assertEqual(records[0].citation_key, "Smith, 1999")


if __name__ == "__main__":
    unittest.main()
