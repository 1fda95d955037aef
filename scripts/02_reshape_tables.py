#!/usr/bin/env python
"""
02_reshape_tables.py
- Cross-tabulate male vs female life expectancy for one period
- Compare two periods with per-subgroup deltas
- Rank outlier countries (largest gender gap, largest combined change)
- Save all tables into outputs/tables/ for the plotting notebooks
"""

import logging
import sys
from pathlib import Path

import pandas as pd

# ensure repo root on path for `lifeexp` package imports when running as script
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from lifeexp import config
from lifeexp.cleaning import clean_observations
from lifeexp.io import load_observations_csv, save_table
from lifeexp.reshape import pivot_single_period, pivot_two_period_comparison, top_n_by_extremum
from lifeexp.scoring import add_gender_gap, combined_delta, gender_gap


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    config.ensure_dirs()

    print("=" * 80)
    print("RESHAPE TABLES")
    print("=" * 80)

    df_raw = load_observations_csv(config.INPUT_FILES["life_expectancy"])
    observations, _ = clean_observations(df_raw)
    print(f"\n[DATA] {len(observations):,} observations, {observations['country'].nunique()} countries")

    # ------------------------------------------------------------------
    # 1. Single-period cross-tabulation
    # ------------------------------------------------------------------
    period = config.DEFAULT_PERIOD
    crosstab = add_gender_gap(pivot_single_period(observations, period))
    out = save_table(crosstab, config.table_path("crosstab", period))
    print(f"\n[1/3] Cross-tabulation {period}: {len(crosstab)} countries → {out.name}")

    top_gap = top_n_by_extremum(crosstab, gender_gap, config.TOP_N, "descending")
    out = save_table(top_gap, config.OUTPUT_FILES["top_gender_gap"])
    print(f"  Largest female-minus-male gaps → {out.name}")
    for _, row in top_gap.iterrows():
        print(f"    {row['country']:40s} {row['score']:6.2f}")

    # ------------------------------------------------------------------
    # 2. Two-period comparison
    # ------------------------------------------------------------------
    period_a, period_b = config.COMPARISON_PERIODS
    comparison = pivot_two_period_comparison(observations, period_a, period_b)
    out = save_table(comparison, config.table_path("comparison", period_a, period_b))
    print(f"\n[2/3] Comparison {period_a} → {period_b}: {len(comparison)} countries → {out.name}")

    # ------------------------------------------------------------------
    # 3. Largest improvements and declines
    # ------------------------------------------------------------------
    improved = top_n_by_extremum(comparison, combined_delta, config.TOP_N, "descending")
    declined = top_n_by_extremum(comparison, combined_delta, config.TOP_N, "ascending")
    extremes = pd.concat(
        [improved.assign(direction="improvement"), declined.assign(direction="decline")],
        ignore_index=True,
    )
    out = save_table(extremes, config.OUTPUT_FILES["top_combined_delta"])
    print(f"\n[3/3] Largest combined changes → {out.name}")
    for _, row in extremes.iterrows():
        print(f"    {row['direction']:12s} {row['country']:40s} {row['score']:+6.2f}")

    print("\n✓ Tables saved to", config.OUTPUT_TABLES)


if __name__ == "__main__":
    main()
