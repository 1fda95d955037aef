"""
Cleaning module: validate, rename, and type the raw life expectancy export.
"""

import re

import numpy as np
import pandas as pd

from . import config
from .errors import DuplicateKeyError, InvalidPeriodError, MissingColumnError

_PERIOD_RE = re.compile(config.PERIOD_PATTERN)


def parse_period(period):
    """
    Parse a period label like "1985-1990" into (start_year, end_year).

    Raises:
        InvalidPeriodError: label is not "YYYY-YYYY" or start > end
    """
    match = _PERIOD_RE.match(str(period))
    if match is None:
        raise InvalidPeriodError(f"Malformed period {period!r}; expected 'YYYY-YYYY'")
    start, end = int(match.group(1)), int(match.group(2))
    if start > end:
        raise InvalidPeriodError(f"Period {period!r} starts after it ends")
    return start, end


def list_periods(observations):
    """Distinct periods in the observations, ordered by start year."""
    return sorted(observations["period"].dropna().unique().tolist(), key=parse_period)


def require_columns(df, columns):
    """Raise MissingColumnError naming every column of `columns` absent from df."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MissingColumnError(missing, available=list(df.columns))


def find_duplicate_keys(df, keys=None):
    """Return the list of key tuples that occur more than once in df."""
    keys = keys or config.KEY_COLUMNS
    dup_mask = df.duplicated(subset=keys, keep=False)
    if not dup_mask.any():
        return []
    return list(df.loc[dup_mask, keys].drop_duplicates().itertuples(index=False, name=None))


def clean_observations(df_raw):
    """
    Clean the raw export into one observation per (country, subgroup, period).

    Args:
        df_raw: DataFrame with the source columns
            'Country or Area', 'Subgroup', 'Year', 'Value'

    Returns:
        Cleaned DataFrame (columns country, subgroup, period, value) and log info

    Raises:
        MissingColumnError: a required source column is absent
        InvalidPeriodError: a period label is not 'YYYY-YYYY'
        DuplicateKeyError: a (country, subgroup, period) key repeats
    """
    log = []
    df_clean = df_raw.copy()

    # 1. Required columns
    df_clean.columns = [str(col).strip() for col in df_clean.columns]
    require_columns(df_clean, config.REQUIRED_COLUMNS)

    extra = [c for c in df_clean.columns if c not in config.SOURCE_COLUMNS]
    df_clean = df_clean[config.REQUIRED_COLUMNS].rename(columns=config.SOURCE_COLUMNS)
    log.append(f"✓ Columns renamed to {config.OBSERVATION_COLUMNS}")
    if extra:
        log.append(f"✓ Dropped {len(extra)} extra column(s): {extra}")

    # 2. Footnote / blank rows (UNdata appends footnotes below the table)
    for col in ["country", "subgroup", "period"]:
        df_clean[col] = df_clean[col].astype("string").str.strip()
    blank = (
        df_clean["country"].isna() | (df_clean["country"] == "")
        | df_clean["period"].isna() | (df_clean["period"] == "")
    )
    if blank.any():
        log.append(f"⚠️  Dropped {int(blank.sum())} blank or footnote rows")
        df_clean = df_clean[~blank]

    # 3. Subgroup vocabulary
    df_clean["subgroup"] = df_clean["subgroup"].str.capitalize()
    known = df_clean["subgroup"].isin(config.SUBGROUPS)
    if not known.all():
        others = sorted(df_clean.loc[~known, "subgroup"].dropna().unique().tolist())
        log.append(f"⚠️  Dropped {int((~known).sum())} rows with subgroup outside {config.SUBGROUPS}: {others}")
        df_clean = df_clean[known]

    # 4. Periods must parse; labels are rewritten as "YYYY-YYYY"
    canonical = {}
    bad_periods = []
    for period in df_clean["period"].unique():
        try:
            start, end = parse_period(period)
        except InvalidPeriodError:
            bad_periods.append(period)
            continue
        canonical[period] = f"{start}-{end}"
    if bad_periods:
        raise InvalidPeriodError(f"Malformed period label(s): {sorted(bad_periods)}")
    renamed = sum(1 for label, fixed in canonical.items() if label != fixed)
    if renamed:
        log.append(f"⚠️  Normalised {renamed} period label(s) to 'YYYY-YYYY'")
    df_clean["period"] = df_clean["period"].map(canonical).astype("string")
    log.append(f"✓ {df_clean['period'].nunique()} periods parsed")

    # 5. Numeric values
    df_clean["value"] = pd.to_numeric(df_clean["value"], errors="coerce").astype(np.float64)
    null_values = int(df_clean["value"].isna().sum())
    if null_values > 0:
        log.append(f"⚠️  Dropped {null_values} rows with missing or non-numeric value")
        df_clean = df_clean[df_clean["value"].notna()]

    # 6. Key uniqueness
    duplicates = find_duplicate_keys(df_clean)
    if duplicates:
        raise DuplicateKeyError(duplicates)
    log.append(f"✓ Observation keys are unique")

    df_clean = df_clean.astype({"country": object, "subgroup": object, "period": object})
    df_clean = df_clean.reset_index(drop=True)

    log.append(
        f"✓ Observation cleaning complete: {df_raw.shape} → {df_clean.shape} "
        f"({df_clean['country'].nunique()} countries)"
    )

    return df_clean, log
