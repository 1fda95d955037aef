"""
Configuration module: paths, column names, subgroup vocabulary, and global settings.
"""

from pathlib import Path
import os

# ============================================================================
# PROJECT PATHS (all relative to PROJECT_ROOT)
# ============================================================================

def get_project_root():
    """Auto-detect project root by checking for the lifeexp/ package folder."""
    cwd = Path.cwd()

    # If already in project root
    if (cwd / "lifeexp").exists():
        return cwd

    # If in notebooks/ or scripts/
    if cwd.name in ["notebooks", "scripts"] and (cwd.parent / "lifeexp").exists():
        return cwd.parent

    # Fallback: the checkout this module lives in
    return Path(__file__).resolve().parents[1]

PROJECT_ROOT = get_project_root()

# Core data paths
DATA_DIR = PROJECT_ROOT / "data"
ORIGINAL_DIR = DATA_DIR / "original"
PROCESSED_DIR = DATA_DIR / "processed"
OUTPUTS_DIR = PROJECT_ROOT / "outputs"
OUTPUT_TABLES = OUTPUTS_DIR / "tables"

# Input files (raw data)
INPUT_FILES = {
    "life_expectancy": Path(
        os.getenv("LIFEEXP_INPUT_FILE", str(ORIGINAL_DIR / "life_expectancy.csv"))
    ),
}

# Output files (derived tables); period-specific names are built by table_path()
OUTPUT_FILES = {
    "observations_clean": PROCESSED_DIR / "observations_clean.csv",
    "top_gender_gap": OUTPUT_TABLES / "top_gender_gap.csv",
    "top_combined_delta": OUTPUT_TABLES / "top_combined_delta.csv",
}


def ensure_dirs():
    """Create processed/output directories if missing."""
    for d in (PROCESSED_DIR, OUTPUT_TABLES):
        d.mkdir(parents=True, exist_ok=True)


def table_path(kind, *periods):
    """Output path for a period-specific table, e.g. crosstab_2000-2005.csv."""
    return OUTPUT_TABLES / f"{kind}_{'_vs_'.join(periods)}.csv"

# ============================================================================
# COLUMN NAMES
# ============================================================================

# Source column -> internal field (UNdata export layout)
SOURCE_COLUMNS = {
    "Country or Area": "country",
    "Subgroup": "subgroup",
    "Year": "period",
    "Value": "value",
}
REQUIRED_COLUMNS = list(SOURCE_COLUMNS)
OBSERVATION_COLUMNS = list(SOURCE_COLUMNS.values())
KEY_COLUMNS = ["country", "subgroup", "period"]

# Subgroup vocabulary and the column prefix each one pivots into
SUBGROUPS = ["Male", "Female"]
SUBGROUP_PREFIX = {"Male": "male", "Female": "female"}

# ============================================================================
# DATA QUALITY CONSTANTS
# ============================================================================

# Plausible life expectancy at birth, in years
VALUE_MIN = 10
VALUE_MAX = 100

# Periods look like "1985-1990"
PERIOD_PATTERN = r"^\s*(\d{4})\s*-\s*(\d{4})\s*$"

# ============================================================================
# ANALYSIS SETTINGS
# ============================================================================

DEFAULT_PERIOD = os.getenv("LIFEEXP_PERIOD", "2000-2005")
COMPARISON_PERIODS = (
    os.getenv("LIFEEXP_PERIOD_A", "1985-1990"),
    os.getenv("LIFEEXP_PERIOD_B", "2000-2005"),
)
TOP_N = int(os.getenv("LIFEEXP_TOP_N", "5"))

# ============================================================================
# LOGGING
# ============================================================================

LOG_LEVEL = os.getenv("LIFEEXP_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR

def print_config():
    """Print all configuration settings."""
    print("\n" + "=" * 80)
    print("PIPELINE CONFIGURATION")
    print("=" * 80)
    print(f"\n📁 PROJECT ROOT: {PROJECT_ROOT}")
    print(f"📂 INPUT FILE: {INPUT_FILES['life_expectancy']}")
    print(f"📂 PROCESSED DIR: {PROCESSED_DIR}")
    print(f"📂 OUTPUT TABLES: {OUTPUT_TABLES}")
    print(f"\n📅 Periods:")
    print(f"   Cross-tabulation: {DEFAULT_PERIOD}")
    print(f"   Comparison: {COMPARISON_PERIODS[0]} → {COMPARISON_PERIODS[1]}")
    print(f"   Top N: {TOP_N}")
    print(f"\n✓ Configuration loaded successfully")
    print("=" * 80 + "\n")
