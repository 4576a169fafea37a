"""
Builds a Campaign snapshot from the JSON-compatible dict an engine dumps, so a
report can be rendered outside the process that ran the campaign.

Expected shape (all keys optional except where noted)::

    {
      "seed": 42,
      "tests": [{"type": "property", "name": "echidna_x", "state": {"kind": "open", "counter": 10},
                 "events": [...], "reproducer": [<tx>, ...], "value": 3}],
      "coverage": {"<codehash>": [<point>, ...]},
      "corpus": [[<priority>, [<tx>, ...]], ...],
      "gas_info": {"<function>": [<gas>, [<tx>, ...]]}
    }

with ``<tx>`` = {"call": {"kind": "sol_call", "name": "f", "args": [...]}, "src": "0x..",
"dst": "0x..", "gas": 1, "gasprice": 0, "value": 0, "delay": [0, 0]}.
"""
import json
from typing import Any, Dict, Hashable, List

from web3 import Web3

from .campaign import (Campaign, CampaignTest, Corpus, StateKind, TestKind, TestState,
                       TestType)
from .tx import CallKind, Tx, TxCall
from . import config as core_config


def _hashable(point: Any) -> Hashable:
    # JSON arrays come back as lists; coverage points need to be set members
    if isinstance(point, list):
        return tuple(_hashable(p) for p in point)
    return point


def tx_call_from_dict(data: Dict[str, Any]) -> TxCall:
    kind = CallKind(data["kind"])
    if kind is CallKind.NO_CALL:
        return TxCall.no_call()
    if kind is CallKind.SOL_CALL:
        return TxCall.sol_call(data["name"], data.get("args", []))
    if kind is CallKind.SOL_CREATE:
        return TxCall.sol_create(Web3.to_bytes(hexstr=data.get("data", "0x")))
    return TxCall.sol_calldata(Web3.to_bytes(hexstr=data.get("data", "0x")))


def tx_from_dict(data: Dict[str, Any]) -> Tx:
    time_delay, block_delay = data.get("delay", (0, 0))
    return Tx(
        call=tx_call_from_dict(data["call"]),
        src=Web3.to_checksum_address(data["src"]),
        dst=Web3.to_checksum_address(data["dst"]),
        gas=int(data.get("gas", core_config.DEFAULT_TX_GAS)),
        gasprice=int(data.get("gasprice", 0)),
        value=int(data.get("value", 0)),
        delay=(int(time_delay), int(block_delay))
    )


def txs_from_list(data: List[Dict[str, Any]]) -> List[Tx]:
    return [tx_from_dict(tx_data) for tx_data in data]


def state_from_dict(data: Dict[str, Any]) -> TestState:
    kind = StateKind(data["kind"])
    if kind is StateKind.OPEN:
        return TestState.open(int(data.get("counter", 0)))
    if kind is StateKind.LARGE:
        return TestState.large(int(data.get("counter", 0)))
    if kind is StateKind.FAILED:
        return TestState.failed(data.get("error", ""))
    if kind is StateKind.SOLVED:
        return TestState.solved()
    return TestState.passed()


def type_from_dict(data: Dict[str, Any]) -> TestType:
    kind = TestKind(data["type"])
    if kind is TestKind.PROPERTY:
        return TestType.property_test(data["name"], data.get("address"))
    if kind is TestKind.CALL:
        return TestType.call_test(data["name"])
    if kind is TestKind.ASSERTION:
        name, abi_types = data["signature"]
        return TestType.assertion_test((name, abi_types), data.get("address"))
    if kind is TestKind.OPTIMIZATION:
        return TestType.optimization_test(data["name"], data.get("address"))
    return TestType.exploration()


def campaign_test_from_dict(data: Dict[str, Any]) -> CampaignTest:
    return CampaignTest(
        test_type=type_from_dict(data),
        state=state_from_dict(data["state"]),
        reproducer=txs_from_list(data.get("reproducer", [])),
        events=list(data.get("events", [])),
        value=data.get("value")
    )


def campaign_from_dict(data: Dict[str, Any]) -> Campaign:
    """
    Converts a decoded snapshot into a Campaign.
    Unknown test, state or call kinds raise ValueError; entries of the wrong
    shape raise TypeError. Addresses are checksummed so case never matters.
    """
    return Campaign(
        tests=[campaign_test_from_dict(t) for t in data.get("tests", [])],
        coverage={codehash: [_hashable(p) for p in points]
                  for codehash, points in data.get("coverage", {}).items()},
        corpus=Corpus([(int(priority), txs_from_list(txs)) for priority, txs in data.get("corpus", [])]),
        gas_info={func: (int(gas), txs_from_list(txs))
                  for func, (gas, txs) in data.get("gas_info", {}).items()},
        seed=int(data.get("seed", core_config.DEFAULT_SEED))
    )


def load_campaign(snapshot_path: str = core_config.DEFAULT_SNAPSHOT_FILE) -> Campaign:
    """Reads a JSON snapshot file written by the engine."""
    with open(snapshot_path, encoding="utf-8") as snapshot_file:
        return campaign_from_dict(json.load(snapshot_file))
