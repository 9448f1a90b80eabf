import re
import unittest
from datetime import date, datetime

from condlog.config import DAY_NOTE_TITLE_PATTERN
from condlog.dates import day_note_title, is_date_placeholder, parse_nlp_date, to_epoch_millis
from condlog.errors import DateParseError


NOW = datetime(2026, 10, 19, 9, 0)


class TestDatePlaceholder(unittest.TestCase):
    def test_placeholder_variants(self) -> None:
        for target in ("{date}", "{DATE}", "  {Date}\t"):
            self.assertTrue(is_date_placeholder(target), target)
        for target in ("date", "{date} page", "{dates}", ""):
            self.assertFalse(is_date_placeholder(target), target)


class TestDayNoteTitles(unittest.TestCase):
    def test_ordinals(self) -> None:
        self.assertEqual(day_note_title(date(2026, 10, 1)), "October 1st, 2026")
        self.assertEqual(day_note_title(date(2026, 10, 2)), "October 2nd, 2026")
        self.assertEqual(day_note_title(date(2026, 10, 3)), "October 3rd, 2026")
        self.assertEqual(day_note_title(date(2026, 10, 11)), "October 11th, 2026")
        self.assertEqual(day_note_title(date(2026, 10, 22)), "October 22nd, 2026")

    def test_titles_match_day_note_pattern(self) -> None:
        regex = re.compile(DAY_NOTE_TITLE_PATTERN)
        self.assertTrue(regex.search(day_note_title(date(2026, 10, 19))))
        self.assertIsNone(regex.search("Meeting notes"))


class TestParseNlpDate(unittest.TestCase):
    def test_absolute_formats(self) -> None:
        self.assertEqual(parse_nlp_date("2026-01-05", now=NOW), datetime(2026, 1, 5))
        self.assertEqual(parse_nlp_date("2026-01-05T10:15:00", now=NOW), datetime(2026, 1, 5, 10, 15))
        self.assertEqual(parse_nlp_date("October 19th, 2026", now=NOW), datetime(2026, 10, 19))
        self.assertEqual(parse_nlp_date("01/05/2026", now=NOW), datetime(2026, 1, 5))

    def test_now_and_tomorrow(self) -> None:
        self.assertEqual(parse_nlp_date("now", now=NOW), NOW)
        self.assertEqual(parse_nlp_date("tomorrow", now=NOW), datetime(2026, 10, 20))

    def test_unparseable(self) -> None:
        with self.assertRaises(DateParseError):
            parse_nlp_date("the day after the party", now=NOW)
        with self.assertRaises(DateParseError):
            parse_nlp_date("   ", now=NOW)

    def test_epoch_millis(self) -> None:
        moment = datetime.fromisoformat("2026-10-19T00:00:00+00:00")
        self.assertEqual(to_epoch_millis(moment), 1792368000000)


if __name__ == "__main__":
    unittest.main()
