# eth_fuzz_report_core/config.py
"""
Default configuration values for the campaign report core library.
These can be overridden by scenario-specific configurations.
"""

# --- Transaction Defaults ---
DEFAULT_TX_GAS: int = 12_500_000   # Gas limit given to every generated tx; equal gas is not printed

# --- Campaign Limits ---
DEFAULT_TEST_LIMIT: int = 50_000    # Once an open test reaches this many tries it is reported as passed
DEFAULT_SHRINK_LIMIT: int = 5_000   # Shrink progress is only shown below this many attempts
DEFAULT_SEED: int = 0

# --- Address Labels ---
DEFAULT_LABELS_FILE: str = './address_labels.csv'  # CSV with 'address' and 'label' columns
MAX_LABELS_TO_LOAD: int = 1000                     # Safety limit for the label table

# --- Snapshot ---
DEFAULT_SNAPSHOT_FILE: str = './campaign_snapshot.json'


# --- Logging ---
# Outer layers print messages with an "INFO:", "WARN:" or "ERROR:" prefix.
# The report renderer itself never prints.
