"""
Address naming policies: how sender and receiver addresses are displayed next
to a transaction in a report, and loading of human-readable address labels.
"""
from enum import Enum
from typing import Callable, Dict, List, Optional

import pandas as pd
from web3 import Web3

from . import config as core_config


class AddressRole(Enum):
    SENDER = "sender"
    RECEIVER = "receiver"


# (role, address) -> text appended after the call, e.g. " from: 0x...".
NamesPolicy = Callable[[AddressRole, str], str]


def default_names(role: AddressRole, address: str) -> str:
    """Shows the sender as `` from: <checksum address>`` and hides the receiver."""
    if role is AddressRole.SENDER:
        return " from: " + Web3.to_checksum_address(address)
    return ""


def labelled_names(labels: Dict[str, str]) -> NamesPolicy:
    """
    Builds a naming policy that prefers a label over the raw address and shows
    both sides of the call.

    :param labels: Mapping of checksummed address to label.
    """
    def names(role: AddressRole, address: str) -> str:
        checksummed = Web3.to_checksum_address(address)
        shown = labels.get(checksummed, checksummed)
        if role is AddressRole.SENDER:
            return " from: " + shown
        return " to: " + shown

    return names


def load_address_labels(label_file_paths: Optional[List[str]] = None,
                        max_labels_to_load: int = core_config.MAX_LABELS_TO_LOAD
                       ) -> Dict[str, str]:
    """
    Loads address labels from CSV files with 'address' and 'label' columns.
    The first label seen for an address wins. Files that are missing or empty are
    skipped with a warning.
    """
    if label_file_paths is None:
        label_file_paths = [core_config.DEFAULT_LABELS_FILE]

    labels: Dict[str, str] = {}
    for file_path in label_file_paths:
        if len(labels) >= max_labels_to_load:
            break
        try:
            print(f"INFO: Loading address labels from: {file_path}")
            label_data_frame = pd.read_csv(file_path, dtype=str)
        except FileNotFoundError:
            print(f"WARN: Label file not found: {file_path}")
            continue
        except pd.errors.EmptyDataError:
            print(f"WARN: Label file is empty: {file_path}")
            continue

        if 'address' not in label_data_frame.columns or 'label' not in label_data_frame.columns:
            print(f"WARN: Skipping {file_path}: expected 'address' and 'label' columns.")
            continue

        for _, row_data in label_data_frame.iterrows():
            if len(labels) >= max_labels_to_load:
                break
            raw_address, label = row_data['address'], row_data['label']
            if pd.isna(raw_address) or pd.isna(label) or not Web3.is_address(raw_address):
                print(f"WARN: Skipping row in {file_path} with invalid address or empty label: {raw_address}")
                continue
            labels.setdefault(Web3.to_checksum_address(raw_address), str(label).strip())

    print(f"INFO: Loaded {len(labels)} address labels.")
    return labels
