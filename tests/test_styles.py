"""
Tests for citation styles (segmentation, entry parsing, markers)
"""

import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bibstract.styles import (
    STYLES,
    AuthorYearParser,
    BracketNumber,
    InitialFirstQuotedParser,
    NamedYear,
)


class TestInitialFirstQuotedParser(unittest.TestCase):

    def setUp(self):
        self.parser = InitialFirstQuotedParser()

    def test_full_entry(self):
        rec = self.parser.parse_record(
            "[1] E. Chang and A. Zakhor, “Scalable video data placement on parallel disk "
            "arrays,” in IS&T/SPIE Int. Symp. Electronic Imaging: Science and Technology, "
            "Volume 2185: Image and Video Databases II, San Jose, CA, Feb. 1994, pp. 208–221."
        )
        self.assertIsNotNone(rec)
        self.assertEqual(rec.citation_key, "1")
        self.assertEqual(rec.authors, ("E. Chang", "A. Zakhor"))
        self.assertEqual(
            rec.title,
            "Scalable video data placement on parallel disk arrays"
        )
        self.assertTrue(rec.venue.startswith("IS&T/SPIE"))
        self.assertEqual(rec.year, 1994)

    def test_straight_quotes(self):
        rec = self.parser.parse_record('[2] B. Two, "Title Two," Venue Two.')
        self.assertEqual(rec.title, "Title Two")
        self.assertEqual(rec.citation_key, "2")
        self.assertEqual(rec.year, 0)

    def test_surrounding_whitespace(self):
        rec = self.parser.parse_record("  [3] C. Three, “Title,” In Venue.  ")
        self.assertEqual(rec.title, "Title")
        self.assertTrue(rec.venue.startswith("Venue"))

    def test_no_match(self):
        self.assertIsNone(self.parser.parse_record("[1] Unquoted title, Venue."))
        self.assertIsNone(self.parser.parse_record(""))


class TestAuthorYearParser(unittest.TestCase):

    def setUp(self):
        self.parser = AuthorYearParser()

    def test_single_author(self):
        rec = self.parser.parse_record("Smith, J. 1999. A Title. In Some Venue.")
        self.assertIsNotNone(rec)
        self.assertEqual(rec.year, 1999)
        self.assertEqual(rec.authors, ("J. Smith",))
        self.assertEqual(rec.citation_key, "Smith, 1999")
        self.assertEqual(rec.title, "A Title")
        self.assertTrue(rec.venue.startswith("Some Venue"))

    def test_year_suffix_dropped(self):
        rec = self.parser.parse_record("Lee, K. and Park, M. 2001b. Another Title. Journal X.")
        self.assertEqual(rec.year, 2001)
        self.assertEqual(rec.authors, ("K. Lee", "M. Park"))
        self.assertEqual(rec.citation_key, "Lee and Park, 2001")

    def test_et_al_key(self):
        rec = self.parser.parse_record(
            "Doe, A., Roe, B., and Poe, C. 2010. Three Authors. Proc. Venue."
        )
        self.assertEqual(rec.citation_key, "Doe et al., 2010")

    def test_all_caps_author(self):
        rec = self.parser.parse_record(
            "STONEBREAKER, M. 1986. A Case for Shared Nothing. Database Engineering 9, 1, 4–9."
        )
        self.assertEqual(rec.authors, ("M. STONEBREAKER",))
        self.assertEqual(rec.title, "A Case for Shared Nothing")
        self.assertEqual(rec.citation_key, "STONEBREAKER, 1986")

    def test_unicode_punctuation_in_authors(self):
        # U+2010 HYPHEN is punctuation
        rec = self.parser.parse_record("Jean‐Paul, S. 1999. A Title. Venue.")
        self.assertIsNotNone(rec)
        self.assertEqual(rec.authors, ("S. Jean‐Paul",))
        self.assertEqual(rec.citation_key, "Jean‐Paul, 1999")

    def test_accented_authors(self):
        rec = self.parser.parse_record("Müller, Ø. and Łukasz, É. 2004. Title. Venue.")
        self.assertEqual(rec.authors, ("Ø. Müller", "É. Łukasz"))

    def test_symbols_rejected_in_authors(self):
        self.assertIsNone(
            self.parser.parse_record("Smith + Jones = x, J. 1999. A Title. Venue.")
        )
        self.assertIsNone(self.parser.parse_record("Smith$, J. 1999. A Title. Venue."))
        self.assertIsNone(self.parser.parse_record("Smith|Lee, J. 1999. A Title. Venue."))

    def test_no_match(self):
        self.assertIsNone(self.parser.parse_record("Just a sentence without a year."))
        self.assertIsNone(self.parser.parse_record("[1] A. One, “Title One,” Venue One."))


class TestBracketNumber(unittest.TestCase):

    def setUp(self):
        self.style = BracketNumber()

    def test_sequential_entries(self):
        text = (
            "<bb>[1] A. One, “Title One,” Venue One. "
            "[2] B. Two, “Title Two,” Venue Two."
        )
        records = self.style.parse(text)
        self.assertEqual(len(records), 2)
        self.assertEqual([r.title for r in records], ["Title One", "Title Two"])
        self.assertEqual([r.citation_key for r in records], ["1", "2"])

    def test_entry_across_lines(self):
        # Line markers are removed, not replaced by spaces
        text = "<bb>[1] A. One, “Long<bb> title,” Venue.<bb>[2] B. Two, “T2,” V2."
        records = self.style.parse(text)
        self.assertEqual(records[0].title, "Long title")
        self.assertEqual(records[0].venue, "Venue.")

    def test_hyphen_at_line_break(self):
        records = self.style.parse("<bb>[1] A. One, “Data place-<bb>ment,” Venue.")
        self.assertEqual(records[0].title, "Data place-ment")

    def test_gap_stops_segmentation(self):
        entries = self.style.split_entries("<bb>[1] A<bb>[2] B<bb>[4] D")
        self.assertEqual(len(entries), 2)
        self.assertTrue(entries[1].startswith("[2]"))

    def test_no_tags(self):
        self.assertEqual(self.style.parse("<bb>Smith, J. 1999. A Title. Venue."), [])

    def test_unparsed_entries_kept(self):
        records = self.style.parse("<bb>[1] A. One, “Title One,” Venue One.<bb>[2] garbage")
        self.assertEqual(len(records), 2)
        self.assertIsNotNone(records[0])
        self.assertIsNone(records[1])

    def test_markers(self):
        self.assertEqual(
            self.style.find_markers("as shown in [3,7] and [12]."),
            [["3", "7"], ["12"]]
        )
        self.assertEqual(self.style.find_markers("[Smith, 1999]"), [])


class TestNamedYear(unittest.TestCase):

    def setUp(self):
        self.style = NamedYear()

    def test_split_entries(self):
        self.assertEqual(self.style.split_entries("<bb>a<bb>b"), ["a", "b"])
        self.assertEqual(self.style.split_entries("a<bb>b"), ["a", "b"])

    def test_failures_filtered(self):
        text = (
            "<bb>Smith, J. 1999. A Title. In Some Venue."
            "<bb>page 12"
            "<bb>Lee, K. and Park, M. 2001b. Another Title. Journal X."
        )
        records = self.style.parse(text)
        self.assertEqual(len(records), 2)
        self.assertEqual(
            [r.citation_key for r in records],
            ["Smith, 1999", "Lee and Park, 2001"]
        )

    def test_markers(self):
        self.assertEqual(
            self.style.find_markers("see [Smith, 1999; Lee, 2001b] and [3]."),
            [["Smith, 1999", "Lee, 2001b"]]
        )


class TestRegistry(unittest.TestCase):

    def test_order_and_immutability(self):
        self.assertIsInstance(STYLES, tuple)
        self.assertEqual([s.name for s in STYLES], ["bracket", "author_year"])
        self.assertEqual([s.cite_delimiter for s in STYLES], [",", ";"])


if __name__ == "__main__":
    unittest.main()
