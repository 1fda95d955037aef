"""
Row scores for ranking countries with reshape.top_n_by_extremum.
"""


def gender_gap(row):
    """Female minus male life expectancy (cross-tabulation row)."""
    return row["female_value"] - row["male_value"]


def gender_gap_change(row):
    """Change in the female-minus-male gap between two periods (comparison row)."""
    return row["female_delta"] - row["male_delta"]


def combined_delta(row):
    """Total improvement (positive) or decline (negative) of both subgroups."""
    return row["male_delta"] + row["female_delta"]


def add_gender_gap(table):
    """Copy of a cross-tabulation with a `gender_gap` column."""
    return table.assign(gender_gap=table["female_value"] - table["male_value"])
