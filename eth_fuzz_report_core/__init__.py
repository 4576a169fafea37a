# eth_fuzz_report_core/__init__.py

# This file makes the directory a Python package.
# Scenarios and tests import directly from the modules:
# from .tx import Tx, TxCall
# from .campaign import Campaign, CampaignTest, TestState, TestType
# from .report_config import ReportConfig
# from .report import pp_campaign
