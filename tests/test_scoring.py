import unittest

import numpy as np
import pandas as pd

from lifeexp.scoring import add_gender_gap, combined_delta, gender_gap, gender_gap_change


class TestScoring(unittest.TestCase):
    def test_row_scores(self):
        crosstab_row = pd.Series({"male_value": 70.0, "female_value": 76.0})
        self.assertAlmostEqual(gender_gap(crosstab_row), 6.0)

        comparison_row = pd.Series({"male_delta": 4.0, "female_delta": 5.0})
        self.assertAlmostEqual(gender_gap_change(comparison_row), 1.0)
        self.assertAlmostEqual(combined_delta(comparison_row), 9.0)

    def test_missing_value_scores_nan(self):
        row = pd.Series({"male_delta": 4.0, "female_delta": np.nan})
        self.assertTrue(np.isnan(combined_delta(row)))

    def test_add_gender_gap_returns_copy(self):
        table = pd.DataFrame({"country": ["A"], "male_value": [70.0], "female_value": [76.0]})
        out = add_gender_gap(table)
        self.assertEqual(out["gender_gap"].tolist(), [6.0])
        self.assertNotIn("gender_gap", table.columns)


if __name__ == "__main__":
    unittest.main()
