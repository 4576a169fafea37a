"""
Read-only rendering configuration passed explicitly to every report renderer.
"""
from typing import List, NamedTuple, Optional

from .naming import NamesPolicy, default_names, labelled_names, load_address_labels
from . import config as core_config


class ReportConfig(NamedTuple):
    """
    :param names: Naming policy for sender/receiver addresses.
    :param tx_gas: Default gas limit; a tx using exactly this much gas gets no "Gas:" suffix.
    :param test_limit: Tries after which an open test without a reproducer counts as passed.
    :param shrink_limit: Shrink attempts below which shrinking progress is reported.
    """
    names: NamesPolicy = default_names
    tx_gas: int = core_config.DEFAULT_TX_GAS
    test_limit: int = core_config.DEFAULT_TEST_LIMIT
    shrink_limit: int = core_config.DEFAULT_SHRINK_LIMIT

    def with_labels(self, label_file_paths: Optional[List[str]] = None) -> 'ReportConfig':
        """Returns a copy whose naming policy shows labels loaded from CSV files."""
        labels = load_address_labels(label_file_paths)
        return self._replace(names=labelled_names(labels))
