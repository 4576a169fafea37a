# eth_fuzz_report/scenarios/campaign_report_scenario.py
"""
Renders the text report for a campaign snapshot dumped by the fuzzing engine.
This script wires the snapshot loader, the rendering configuration and the
report renderer together and prints the result.
"""
import json
from typing import Optional

# Import core library components
from eth_fuzz_report_core.report_config import ReportConfig
from eth_fuzz_report_core.report import pp_campaign
from eth_fuzz_report_core.snapshot import load_campaign
from eth_fuzz_report_core import config as core_config


def run_campaign_report_scenario(
    snapshot_path: str = core_config.DEFAULT_SNAPSHOT_FILE,
    label_file: Optional[str] = None,
    tx_gas: int = core_config.DEFAULT_TX_GAS,
    test_limit: int = core_config.DEFAULT_TEST_LIMIT,
    shrink_limit: int = core_config.DEFAULT_SHRINK_LIMIT
) -> Optional[str]:
    """
    Loads a snapshot, renders its report and prints it.
    Returns the report text, or None if the snapshot could not be loaded.
    """
    print("--- Starting Campaign Report Scenario ---")
    print(f"Snapshot: {snapshot_path}")

    # 1. Load the campaign snapshot
    try:
        campaign = load_campaign(snapshot_path)
    except FileNotFoundError:
        print(f"ERROR: Snapshot file not found: {snapshot_path}")
        return None
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        print(f"CRITICAL ERROR: Malformed campaign snapshot {snapshot_path}: {e}")
        return None

    print(f"INFO: Loaded {campaign}")

    # 2. Build the rendering configuration
    report_config = ReportConfig(tx_gas=tx_gas, test_limit=test_limit, shrink_limit=shrink_limit)
    if label_file is not None:
        report_config = report_config.with_labels([label_file])

    # 3. Render and print
    report_text = pp_campaign(campaign, report_config)

    print("\n--- Campaign Report ---")
    print(report_text)
    return report_text


if __name__ == "__main__":
    # To run: python -m scenarios.campaign_report_scenario
    run_campaign_report_scenario(
        snapshot_path=core_config.DEFAULT_SNAPSHOT_FILE,
        test_limit=core_config.DEFAULT_TEST_LIMIT,
        shrink_limit=core_config.DEFAULT_SHRINK_LIMIT
    )
