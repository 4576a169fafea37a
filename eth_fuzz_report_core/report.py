# eth_fuzz_report_core/report.py
"""
Renders a campaign snapshot into the plain-text report shown at the end of (or
periodically during) a fuzzing campaign.

Every function here is a pure projection from data to text. The ReportConfig is
passed explicitly wherever naming, default gas or limits are needed.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from .campaign import (Campaign, CampaignTest, CoverageMap, Corpus, GasInfo,
                       StateKind, TestKind, TestState, TestValue, coverage_points)
from .naming import AddressRole
from .report_config import ReportConfig
from .tx import CallKind, Tx, encode_sig, pp_tx_call

NO_TRANSACTIONS_FAIL = "failed with no transactions made ⁉️  "
NO_TRANSACTIONS_OPTIMIZED = "Call sequence:\n(no transactions)"
PASSED = " passed! 🎉"

# (current, limit) pair shown as ", shrinking (n/m)" while a reproducer is being shrunk.
ShrinkProgress = Optional[Tuple[int, int]]


def progress(n: int, m: int) -> str:
    """Given a number of boxes checked and a number of total boxes, renders ``(n/m)``."""
    return f"({n}/{m})"


def pp_delay(delay: Tuple[int, int]) -> str:
    time_delay, block_delay = delay
    return ((f" Time delay: {time_delay} seconds" if time_delay != 0 else "")
            + (f" Block delay: {block_delay}" if block_delay != 0 else ""))


# Optional suffixes after the call and addresses, in display order.
_TX_SUFFIXES: List[Tuple[Callable[[Tx, ReportConfig], bool], Callable[[Tx], str]]] = [
    (lambda tx, config: tx.gas != config.tx_gas, lambda tx: f" Gas: {tx.gas}"),
    (lambda tx, config: tx.gasprice != 0, lambda tx: f" Gas price: {tx.gasprice}"),
    (lambda tx, config: tx.value != 0, lambda tx: f" Value: {tx.value}"),
]


def pp_tx(tx: Tx, print_addresses: bool, config: ReportConfig) -> str:
    """
    Renders one transaction. A wait (no call) only shows its delay; otherwise the
    addresses are shown when ``print_addresses`` is set and gas, gas price and
    value are shown only when they differ from their defaults.
    """
    if tx.call.kind is CallKind.NO_CALL:
        return pp_tx_call(tx.call) + pp_delay(tx.delay)

    text = pp_tx_call(tx.call)
    if print_addresses:
        text += config.names(AddressRole.SENDER, tx.src) + config.names(AddressRole.RECEIVER, tx.dst)
    for applies, render in _TX_SUFFIXES:
        if applies(tx, config):
            text += render(tx)
    return text + pp_delay(tx.delay)


def must_print_addresses(txs: Sequence[Tx]) -> bool:
    """Addresses only add information when the sequence does not come from a single sender."""
    return len({tx.src for tx in txs}) != 1


def pp_call_sequence(txs: Sequence[Tx], config: ReportConfig) -> str:
    """Indented, newline-terminated lines for a call sequence."""
    print_addresses = must_print_addresses(txs)
    return "".join("    " + pp_tx(tx, print_addresses, config) + "\n" for tx in txs)


def pp_events(events: Sequence[str]) -> str:
    if not events:
        return ""
    return "Event sequence: " + ", ".join(events)


def _pp_shrinking(shrink_progress: ShrinkProgress) -> str:
    if shrink_progress is None:
        return ""
    n, m = shrink_progress
    return ", shrinking " + progress(n, m)


def pp_fail(shrink_progress: ShrinkProgress, events: Sequence[str], txs: Sequence[Tx],
            config: ReportConfig) -> str:
    """Status of a test with a failing call sequence."""
    if not txs:
        return NO_TRANSACTIONS_FAIL
    return ("failed!💥  \n  Call sequence" + _pp_shrinking(shrink_progress) + ":\n"
            + pp_call_sequence(txs, config) + "\n"
            + pp_events(events))


def pp_optimized(shrink_progress: ShrinkProgress, events: Sequence[str], txs: Sequence[Tx],
                 config: ReportConfig) -> str:
    """Status of an optimization test: the call sequence reaching the best value so far."""
    if not txs:
        return NO_TRANSACTIONS_OPTIMIZED
    return ("\n  Call sequence" + _pp_shrinking(shrink_progress) + ":\n"
            + pp_call_sequence(txs, config) + "\n"
            + pp_events(events))


def _pp_could_not_evaluate(state: TestState) -> str:
    return "could not evaluate ☣\n  " + str(state.error)


def _shrink_progress(state: TestState, config: ReportConfig) -> ShrinkProgress:
    if state.counter < config.shrink_limit:
        return (state.counter, config.shrink_limit)
    return None


def pp_test_state(state: TestState, events: Sequence[str], txs: Sequence[Tx],
                  config: ReportConfig) -> str:
    """Status text of a property, call or assertion test."""
    if state.kind is StateKind.FAILED:
        return _pp_could_not_evaluate(state)
    if state.kind is StateKind.SOLVED:
        return pp_fail(None, events, txs, config)
    if state.kind is StateKind.PASSED:
        return PASSED
    if state.kind is StateKind.OPEN:
        if txs:
            return pp_fail(None, events, txs, config)
        if state.counter >= config.test_limit:
            return pp_test_state(TestState.passed(), events, txs, config)
        return " fuzzing " + progress(state.counter, config.test_limit)
    if state.kind is StateKind.LARGE:
        return pp_fail(_shrink_progress(state, config), events, txs, config)
    raise ValueError(f"Unknown test state: {state!r}")


def pp_optimization_state(state: TestState, events: Sequence[str], txs: Sequence[Tx],
                          config: ReportConfig) -> str:
    """Status text of an optimization test; it always shows its best call sequence so far."""
    if state.kind is StateKind.FAILED:
        return _pp_could_not_evaluate(state)
    if state.kind is StateKind.PASSED:
        return PASSED
    if state.kind in (StateKind.SOLVED, StateKind.OPEN):
        return pp_optimized(None, events, txs, config)
    if state.kind is StateKind.LARGE:
        return pp_optimized(_shrink_progress(state, config), events, txs, config)
    raise ValueError(f"Unknown test state: {state!r}")


def pp_test_value(value: TestValue) -> str:
    if value is None:
        return ""
    return str(value)


def pp_test(test: CampaignTest, config: ReportConfig) -> Optional[str]:
    """One report line for a test, or None for tests that are never reported."""
    kind = test.test_type.kind
    if kind in (TestKind.PROPERTY, TestKind.CALL):
        return test.test_type.name + ": " + pp_test_state(test.state, test.events, test.reproducer, config)
    if kind is TestKind.ASSERTION:
        return (encode_sig(test.test_type.signature) + ": "
                + pp_test_state(test.state, test.events, test.reproducer, config))
    if kind is TestKind.OPTIMIZATION:
        return (test.test_type.name + ": max value: " + pp_test_value(test.value) + "\n"
                + pp_optimization_state(test.state, test.events, test.reproducer, config))
    if kind is TestKind.EXPLORATION:
        return None
    raise ValueError(f"Unknown test type: {test.test_type!r}")


def pp_tests(tests: Sequence[CampaignTest], config: ReportConfig) -> str:
    lines = [pp_test(test, config) for test in tests]
    return "".join(line + "\n" for line in lines if line is not None)


def pp_gas_one(func: str, gas: int, txs: Sequence[Tx], config: ReportConfig) -> str:
    if func == "":
        return ""
    return (f"\n{func} used a maximum of {gas} gas\n"
            "  Call sequence:\n"
            + pp_call_sequence(txs, config))


def pp_gas_info(gas_info: GasInfo, config: ReportConfig) -> str:
    """Maximum gas used per function, sorted by function identifier."""
    if not gas_info:
        return ""
    return "".join(pp_gas_one(func, gas, txs, config)
                   for func, (gas, txs) in sorted(gas_info.items(), key=lambda item: item[0]))


def pp_coverage(coverage: CoverageMap) -> str:
    # No space before the newline.
    return (f"Unique instructions: {coverage_points(coverage)}\n"
            f"Unique codehashes: {len(coverage)}")


def pp_corpus(corpus: Corpus) -> str:
    return f"Corpus size: {corpus.size}"


def pp_campaign(campaign: Campaign, config: ReportConfig) -> str:
    """
    Full report: one line per reported test, then gas usage, coverage, corpus
    size and the seed needed to replay the campaign.
    """
    return (pp_tests(campaign.tests, config)
            + pp_gas_info(campaign.gas_info, config)
            + pp_coverage(campaign.coverage)
            + "\n" + pp_corpus(campaign.corpus)
            + f"\nSeed: {campaign.seed}")
