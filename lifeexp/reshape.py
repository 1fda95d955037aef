"""
Reshape module: pivot long-format observations into the wide tables used for
male vs. female comparisons, and rank their rows.

All functions take cleaned observations (columns country, subgroup, period,
value) and return new DataFrames; inputs are never modified.
"""

import logging

import numpy as np
import pandas as pd

from . import config
from .cleaning import find_duplicate_keys, require_columns
from .errors import DuplicateKeyError, EmptyResultError, InvalidPeriodError

logger = logging.getLogger(__name__)

DIRECTIONS = ("ascending", "descending")


def crosstab_columns():
    """Value columns of a single-period cross-tabulation, e.g. male_value."""
    return [f"{config.SUBGROUP_PREFIX[s]}_value" for s in config.SUBGROUPS]


def comparison_columns():
    """Value and delta columns of a two-period comparison table."""
    values = [
        f"{config.SUBGROUP_PREFIX[s]}_value_period_{label}"
        for s in config.SUBGROUPS
        for label in ("a", "b")
    ]
    deltas = [f"{config.SUBGROUP_PREFIX[s]}_delta" for s in config.SUBGROUPS]
    return values + deltas


def _select_periods(observations, periods):
    """Rows of the requested periods with a known subgroup, as a copy."""
    require_columns(observations, config.OBSERVATION_COLUMNS)
    mask = observations["period"].isin(periods) & observations["subgroup"].isin(config.SUBGROUPS)
    return observations.loc[mask, config.OBSERVATION_COLUMNS].copy()


def _check_unique(subset):
    duplicates = find_duplicate_keys(subset, config.KEY_COLUMNS)
    if duplicates:
        raise DuplicateKeyError(duplicates)


def _pivot_on_key(subset, key, columns):
    """One row per country, one column per composite key, in `columns` order."""
    wide = subset.assign(key=key).pivot(index="country", columns="key", values="value")
    wide = wide.reindex(columns=columns).astype(np.float64).sort_index()
    wide.columns.name = None
    return wide.reset_index()


def pivot_single_period(observations, period):
    """
    Cross-tabulate one period: one row per country, male_value and female_value.

    A country observed for only one subgroup keeps its row; the other
    column is NaN.

    Raises:
        EmptyResultError: no observation matches `period`
        DuplicateKeyError: a (country, subgroup) pair repeats within the period
        MissingColumnError: observations lack an internal column
    """
    subset = _select_periods(observations, [period])
    if subset.empty:
        raise EmptyResultError(f"No observations for period {period!r}")
    _check_unique(subset)

    key = subset["subgroup"].map(config.SUBGROUP_PREFIX) + "_value"
    table = _pivot_on_key(subset, key, crosstab_columns())

    logger.debug("Cross-tabulated %s: %d countries", period, len(table))
    return table


def pivot_two_period_comparison(observations, period_a, period_b):
    """
    Compare two periods: per subgroup, the value in each period and the
    change from `period_a` to `period_b`.

    Deltas are NaN unless both periods' values are present for that
    subgroup. If only one of the periods has observations the table is
    still returned, with the other period's columns empty.

    Raises:
        InvalidPeriodError: period_a and period_b are the same
        EmptyResultError: neither period has observations
        DuplicateKeyError: a (country, subgroup, period) key repeats
        MissingColumnError: observations lack an internal column
    """
    if period_a == period_b:
        raise InvalidPeriodError(f"Comparison needs two different periods, got {period_a!r} twice")

    subset = _select_periods(observations, [period_a, period_b])
    if subset.empty:
        raise EmptyResultError(f"No observations for periods {period_a!r} or {period_b!r}")
    _check_unique(subset)

    present = set(subset["period"])
    for period in (period_a, period_b):
        if period not in present:
            logger.warning("No observations for period %r; its columns and deltas will be empty", period)

    label = subset["period"].map({period_a: "a", period_b: "b"})
    key = subset["subgroup"].map(config.SUBGROUP_PREFIX) + "_value_period_" + label
    value_columns = [c for c in comparison_columns() if "_value_period_" in c]
    table = _pivot_on_key(subset, key, value_columns)

    for subgroup in config.SUBGROUPS:
        prefix = config.SUBGROUP_PREFIX[subgroup]
        # NaN propagates, so a missing period leaves the delta missing
        table[f"{prefix}_delta"] = table[f"{prefix}_value_period_b"] - table[f"{prefix}_value_period_a"]

    logger.debug("Compared %s → %s: %d countries", period_a, period_b, len(table))
    return table


def top_n_by_extremum(table, score_fn, n, direction="descending"):
    """
    Rank rows by `score_fn(row)` and return the first `n` with a `score` column.

    Ties keep their original row order. Rows scoring NaN go last in either
    direction. The input must not already carry a `score` column.

    Args:
        table: cross-tabulation or comparison table
        score_fn: callable mapping a row (pd.Series) to a number
        n: number of rows to return
        direction: 'descending' (largest first) or 'ascending'

    Returns:
        New DataFrame of at most `n` rows, original index preserved
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if "score" in table.columns:
        raise ValueError("table already has a 'score' column; rename it before ranking")

    scores = pd.Series(
        [score_fn(row) for _, row in table.iterrows()],
        index=table.index,
        dtype=np.float64,
    )
    sort_key = -scores if direction == "descending" else scores

    ranked = table.assign(score=scores, _sort_key=sort_key)
    ranked = ranked.sort_values("_sort_key", kind="mergesort", na_position="last")
    return ranked.drop(columns="_sort_key").head(n)
