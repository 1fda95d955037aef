import unittest

import numpy as np
import pandas as pd

from lifeexp.cleaning import clean_observations, list_periods, parse_period
from lifeexp.errors import DuplicateKeyError, InvalidPeriodError, MissingColumnError


def make_raw(rows, extra=False):
    df = pd.DataFrame(rows, columns=["Country or Area", "Subgroup", "Year", "Value"])
    if extra:
        df["Value Footnotes"] = np.nan
    return df


class TestCleanObservations(unittest.TestCase):
    def test_rename_and_types(self):
        raw = make_raw([
            (" Japan ", "Female", "2000-2005", "85.5"),
            ("Japan", "Male", "2000-2005", 78.3),
        ], extra=True)
        df, log = clean_observations(raw)
        self.assertEqual(df.columns.tolist(), ["country", "subgroup", "period", "value"])
        self.assertEqual(df["country"].tolist(), ["Japan", "Japan"])
        self.assertEqual(df["value"].tolist(), [85.5, 78.3])
        self.assertTrue(any("extra column" in line for line in log))

    def test_missing_columns(self):
        raw = make_raw([("Japan", "Male", "2000-2005", 78.3)]).drop(columns=["Value", "Year"])
        with self.assertRaises(MissingColumnError) as ctx:
            clean_observations(raw)
        self.assertEqual(ctx.exception.missing, ["Year", "Value"])

    def test_subgroup_normalised_and_filtered(self):
        raw = make_raw([
            ("Chad", "male ", "2000-2005", 48.0),
            ("Chad", "FEMALE", "2000-2005", 50.0),
            ("Chad", "Total", "2000-2005", 49.0),
        ])
        df, log = clean_observations(raw)
        self.assertEqual(df["subgroup"].tolist(), ["Male", "Female"])
        self.assertTrue(any("Total" in line for line in log))

    def test_footnote_rows_dropped(self):
        raw = make_raw([
            ("Peru", "Male", "1985-1990", 61.0),
            ("footnoteSeqID", "Footnote", np.nan, np.nan),
            ("1", "Data refer to a five-year period.", np.nan, np.nan),
            (np.nan, np.nan, np.nan, np.nan),
        ])
        df, log = clean_observations(raw)
        self.assertEqual(len(df), 1)
        self.assertTrue(any("footnote" in line for line in log))

    def test_non_numeric_value_dropped(self):
        raw = make_raw([
            ("Peru", "Male", "1985-1990", "n/a"),
            ("Peru", "Female", "1985-1990", 65.0),
        ])
        df, _ = clean_observations(raw)
        self.assertEqual(df["subgroup"].tolist(), ["Female"])

    def test_duplicates_raise(self):
        raw = make_raw([
            ("Peru", "Male", "1985-1990", 61.0),
            ("Peru", "male", "1985-1990", 62.0),
        ])
        with self.assertRaises(DuplicateKeyError) as ctx:
            clean_observations(raw)
        self.assertEqual(ctx.exception.keys, [("Peru", "Male", "1985-1990")])

    def test_spaced_period_is_same_key(self):
        raw = make_raw([
            ("A", "Male", "2000-2005", 70.0),
            ("A", "Male", "2000 - 2005", 71.0),
        ])
        with self.assertRaises(DuplicateKeyError) as ctx:
            clean_observations(raw)
        self.assertEqual(ctx.exception.keys, [("A", "Male", "2000-2005")])

    def test_period_labels_normalised(self):
        raw = make_raw([
            ("A", "Male", "2000 - 2005", 70.0),
            ("A", "Female", "2000-2005", 76.0),
        ])
        df, log = clean_observations(raw)
        self.assertEqual(list_periods(df), ["2000-2005"])
        self.assertTrue(any("Normalised 1 period label" in line for line in log))

    def test_malformed_period_raises(self):
        raw = make_raw([("Peru", "Male", "1985", 61.0)])
        with self.assertRaises(InvalidPeriodError):
            clean_observations(raw)

    def test_input_not_modified(self):
        raw = make_raw([(" Peru", "male", "1985-1990", "61")])
        before = raw.copy()
        clean_observations(raw)
        pd.testing.assert_frame_equal(raw, before)


class TestPeriods(unittest.TestCase):
    def test_parse_period(self):
        self.assertEqual(parse_period("1985-1990"), (1985, 1990))
        self.assertEqual(parse_period(" 2000 - 2005 "), (2000, 2005))

    def test_parse_period_invalid(self):
        for bad in ["1985", "1990-1985", "abcd-efgh", None]:
            with self.assertRaises(InvalidPeriodError):
                parse_period(bad)

    def test_list_periods_sorted(self):
        obs = pd.DataFrame({"period": ["2000-2005", "1950-1955", "2000-2005", "1985-1990"]})
        self.assertEqual(list_periods(obs), ["1950-1955", "1985-1990", "2000-2005"])


if __name__ == "__main__":
    unittest.main()
