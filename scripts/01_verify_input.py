#!/usr/bin/env python
"""
01_verify_input.py
- Load the raw life expectancy export
- Clean it into one observation per (country, subgroup, period)
- Print a QC report and save the cleaned observations into data/processed/
"""

import logging
import sys
from pathlib import Path

# ensure repo root on path for `lifeexp` package imports when running as script
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from lifeexp import config, qc
from lifeexp.cleaning import clean_observations, list_periods
from lifeexp.io import load_observations_csv, save_table
from lifeexp.reshape import pivot_single_period


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    config.print_config()
    config.ensure_dirs()

    input_path = config.INPUT_FILES["life_expectancy"]
    print("=" * 80)
    print("VERIFY INPUT")
    print("=" * 80)
    print(f"\n[1/3] Loading {input_path.name}...")
    df_raw = load_observations_csv(input_path)
    print(f"  ✓ Loaded {len(df_raw):,} rows, columns: {df_raw.columns.tolist()}")

    print("\n[2/3] Cleaning...")
    observations, log = clean_observations(df_raw)
    for line in log:
        print(f"  {line}")

    periods = list_periods(observations)
    print(f"\n  Periods: {', '.join(periods)}")

    checks = [
        ("Unique observation keys", qc.check_unique_observations, {"df": observations}),
        ("Subgroup vocabulary", qc.check_subgroup_values, {"df": observations}),
        ("Life expectancy range", qc.check_value_range, {"df": observations}),
        ("Period labels", qc.check_period_format, {"df": observations}),
    ]
    if config.DEFAULT_PERIOD in periods:
        crosstab = pivot_single_period(observations, config.DEFAULT_PERIOD)
        checks.append((f"Female vs male ({config.DEFAULT_PERIOD})", qc.check_female_above_male, {"crosstab": crosstab}))
    qc.print_qc_report(checks)

    print("\n[3/3] Saving...")
    out = save_table(observations, config.OUTPUT_FILES["observations_clean"])
    print(f"  ✓ Saved {len(observations):,} observations → {out}")


if __name__ == "__main__":
    main()
