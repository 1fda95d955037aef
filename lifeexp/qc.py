"""
Quality Control (QC) module: Assertions and data quality checks.
"""

from . import config
from .cleaning import find_duplicate_keys, parse_period
from .errors import InvalidPeriodError

def check_unique_observations(df, keys=None):
    """Assert (country, subgroup, period) keys are unique."""
    keys = keys or config.KEY_COLUMNS
    duplicates = find_duplicate_keys(df, keys)
    assert not duplicates, f"{len(duplicates)} duplicate {tuple(keys)} keys found, e.g. {duplicates[0]}"
    return f"✓ {tuple(keys)} is unique (n={len(df)})"

def check_subgroup_values(df, subgroup_col='subgroup'):
    """Assert subgroup is one of the known vocabulary."""
    if subgroup_col not in df.columns:
        return f"⚠️  {subgroup_col} column not found"
    
    unknown = sorted(set(df[subgroup_col].dropna()) - set(config.SUBGROUPS))
    assert not unknown, f"Unknown subgroup values: {unknown}"
    return f"✓ Subgroups: {sorted(df[subgroup_col].unique())}"

def check_value_range(df, value_col='value', min_value=config.VALUE_MIN, max_value=config.VALUE_MAX):
    """Check life expectancy values are plausible (logs outliers)."""
    if value_col not in df.columns:
        return f"⚠️  {value_col} column not found"
    
    outliers_low = int((df[value_col] < min_value).sum())
    outliers_high = int((df[value_col] > max_value).sum())
    
    if outliers_low > 0 or outliers_high > 0:
        return f"⚠️  Value outliers: <{min_value}y: {outliers_low}, >{max_value}y: {outliers_high}"
    
    return f"✓ Values in range {min_value}-{max_value} years"

def check_period_format(df, period_col='period'):
    """Assert every period parses as 'YYYY-YYYY'."""
    if period_col not in df.columns:
        return f"⚠️  {period_col} column not found"
    
    bad = []
    for period in df[period_col].dropna().unique():
        try:
            parse_period(period)
        except InvalidPeriodError:
            bad.append(period)
    assert not bad, f"Malformed periods: {sorted(bad)}"
    
    periods = sorted(df[period_col].dropna().unique(), key=parse_period)
    return f"✓ {len(periods)} periods: {periods[0]} to {periods[-1]}" if periods else "⚠️  No periods found"

def check_female_above_male(crosstab):
    """Report the share of countries where female life expectancy >= male."""
    both = crosstab.dropna(subset=['male_value', 'female_value'])
    if both.empty:
        return "⚠️  No country has both subgroups"
    
    share = (both['female_value'] >= both['male_value']).mean()
    missing = len(crosstab) - len(both)
    msg = f"✓ Female ≥ male in {share:.1%} of {len(both)} countries"
    if missing:
        msg += f" ({missing} with one subgroup missing)"
    return msg

def print_qc_report(checks):
    """
    Print formatted QC report.
    
    Args:
        checks: List of (name, check_func, kwargs) tuples
    """
    print("\n" + "=" * 80)
    print("QUALITY CONTROL REPORT")
    print("=" * 80)
    
    for name, check_func, kwargs in checks:
        try:
            result = check_func(**kwargs)
            print(f"\n{name}")
            print(f"  {result}")
        except AssertionError as e:
            print(f"\n❌ {name}")
            print(f"  ERROR: {e}")
    
    print("\n" + "=" * 80)
