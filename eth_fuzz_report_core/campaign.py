# eth_fuzz_report_core/campaign.py
"""
Read-only snapshot of a fuzzing campaign as handed over by the fuzzing engine:
tests with their lifecycle state, coverage, corpus, gas statistics and seed.
Nothing in this package mutates these objects.
"""

from enum import Enum
from typing import Any, Dict, Hashable, Iterable, List, NamedTuple, Optional, Tuple, Union

from .tx import Tx
from . import config as core_config

# Best value found by an optimization test. None means "no value yet".
TestValue = Optional[Union[bool, int]]

# Codehash -> coverage points hit inside that code.
CoverageMap = Dict[str, Iterable[Hashable]]

# Function identifier -> (max gas used, call sequence that used it).
GasInfo = Dict[str, Tuple[int, List[Tx]]]


class StateKind(Enum):
    OPEN = "open"
    LARGE = "large"
    SOLVED = "solved"
    PASSED = "passed"
    FAILED = "failed"


class TestState(NamedTuple):
    """
    Lifecycle state of a test. ``counter`` holds the tries so far for OPEN and the
    shrink attempts so far for LARGE; ``error`` is only set for FAILED.
    """
    __test__ = False

    kind: StateKind
    counter: int = 0
    error: Any = None

    @classmethod
    def open(cls, tries: int) -> 'TestState':
        return cls(StateKind.OPEN, counter=tries)

    @classmethod
    def large(cls, shrinks: int) -> 'TestState':
        return cls(StateKind.LARGE, counter=shrinks)

    @classmethod
    def solved(cls) -> 'TestState':
        return cls(StateKind.SOLVED)

    @classmethod
    def passed(cls) -> 'TestState':
        return cls(StateKind.PASSED)

    @classmethod
    def failed(cls, error: Any) -> 'TestState':
        return cls(StateKind.FAILED, error=error)


class TestKind(Enum):
    PROPERTY = "property"
    CALL = "call"
    ASSERTION = "assertion"
    OPTIMIZATION = "optimization"
    EXPLORATION = "exploration"  # Coverage-only run, never reported

    __test__ = False


class TestType(NamedTuple):
    """What a test checks. Assertion tests are named by ``signature`` instead of ``name``."""
    __test__ = False

    kind: TestKind
    name: str = ""
    address: Optional[str] = None
    signature: Optional[Tuple[str, List[str]]] = None

    @classmethod
    def property_test(cls, name: str, address: Optional[str] = None) -> 'TestType':
        return cls(TestKind.PROPERTY, name=name, address=address)

    @classmethod
    def call_test(cls, name: str) -> 'TestType':
        return cls(TestKind.CALL, name=name)

    @classmethod
    def assertion_test(cls, signature: Tuple[str, List[str]], address: Optional[str] = None) -> 'TestType':
        return cls(TestKind.ASSERTION, address=address, signature=(signature[0], list(signature[1])))

    @classmethod
    def optimization_test(cls, name: str, address: Optional[str] = None) -> 'TestType':
        return cls(TestKind.OPTIMIZATION, name=name, address=address)

    @classmethod
    def exploration(cls) -> 'TestType':
        return cls(TestKind.EXPLORATION)


class CampaignTest:
    """
    One test tracked by the campaign, together with the call sequence that
    reproduces its current state and the events that sequence emitted.
    """
    def __init__(self,
                 test_type: TestType,
                 state: TestState,
                 reproducer: Optional[List[Tx]] = None,
                 events: Optional[List[str]] = None,
                 value: TestValue = None
                ):
        self.test_type: TestType = test_type
        self.state: TestState = state
        self.reproducer: List[Tx] = list(reproducer) if reproducer is not None else []
        self.events: List[str] = list(events) if events is not None else []
        self.value: TestValue = value

    def __repr__(self) -> str:
        return (f"CampaignTest(type={self.test_type.kind.value}, state={self.state.kind.value}, "
                f"reproducer_len={len(self.reproducer)}, events={len(self.events)})")


class Corpus:
    """
    The transaction corpus: (priority, call sequence) entries collected by the engine.
    Its size is the total number of transactions across all entries.
    """
    def __init__(self, entries: Optional[List[Tuple[int, List[Tx]]]] = None):
        self.entries: List[Tuple[int, List[Tx]]] = list(entries) if entries is not None else []

    @property
    def size(self) -> int:
        return sum(len(txs) for _, txs in self.entries)

    def __repr__(self) -> str:
        return f"Corpus(entries={len(self.entries)}, size={self.size})"


class Campaign:
    """Immutable-by-convention snapshot of campaign state used to render one report."""
    def __init__(self,
                 tests: Optional[List[CampaignTest]] = None,
                 coverage: Optional[CoverageMap] = None,
                 corpus: Optional[Corpus] = None,
                 gas_info: Optional[GasInfo] = None,
                 seed: int = core_config.DEFAULT_SEED
                ):
        self.tests: List[CampaignTest] = list(tests) if tests is not None else []
        self.coverage: CoverageMap = dict(coverage) if coverage is not None else {}
        self.corpus: Corpus = corpus if corpus is not None else Corpus()
        self.gas_info: GasInfo = dict(gas_info) if gas_info is not None else {}
        self.seed: int = seed

    def __repr__(self) -> str:
        return (f"Campaign(tests={len(self.tests)}, codehashes={len(self.coverage)}, "
                f"corpus_size={self.corpus.size}, gas_entries={len(self.gas_info)}, seed={self.seed})")


def coverage_points(coverage: CoverageMap) -> int:
    """Number of distinct coverage points, counted per codehash and summed."""
    return sum(len(set(points)) for points in coverage.values())
