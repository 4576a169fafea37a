"""
Defines the basic data structures for simulated transactions and their calls,
plus the text form of a call as it appears in a report.
"""
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Tuple

from web3 import Web3


class CallKind(Enum):
    NO_CALL = "no_call"          # Only advance time/blocks ("*wait*")
    SOL_CALL = "sol_call"        # Call a function by name with ABI arguments
    SOL_CREATE = "sol_create"    # Deploy bytecode
    SOL_CALLDATA = "sol_calldata"  # Send raw calldata


class TxCall(NamedTuple):
    """
    The payload of a simulated transaction. Build instances through the
    classmethods rather than the raw constructor.
    """
    kind: CallKind
    name: str = ""
    args: Tuple[Any, ...] = ()
    data: bytes = b""

    @classmethod
    def no_call(cls) -> 'TxCall':
        return cls(CallKind.NO_CALL)

    @classmethod
    def sol_call(cls, name: str, args: Optional[List[Any]] = None) -> 'TxCall':
        return cls(CallKind.SOL_CALL, name=name, args=tuple(args or ()))

    @classmethod
    def sol_create(cls, bytecode: bytes) -> 'TxCall':
        return cls(CallKind.SOL_CREATE, data=bytecode)

    @classmethod
    def sol_calldata(cls, data: bytes) -> 'TxCall':
        return cls(CallKind.SOL_CALLDATA, data=data)


class Tx(NamedTuple):
    """
    A single simulated call as recorded by the fuzzing engine.

    ``delay`` is a (time delay in seconds, block delay) pair applied before the call.
    """
    call: TxCall
    src: str
    dst: str
    gas: int
    gasprice: int = 0
    value: int = 0
    delay: Tuple[int, int] = (0, 0)


def pp_abi_value(value: Any) -> str:
    """
    Renders one decoded ABI argument.

    bool is checked before int since it is an int subclass. Strings that look like
    0x-prefixed addresses are checksummed, any other string is double-quoted.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, str):
        if value.startswith("0x") and Web3.is_address(value):
            return Web3.to_checksum_address(value)
        return '"' + value + '"'
    if isinstance(value, list):
        return "[" + ", ".join(pp_abi_value(v) for v in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(pp_abi_value(v) for v in value) + ")"
    raise TypeError(f"Cannot render ABI value of type {type(value).__name__}: {value!r}")


def pp_tx_call(call: TxCall) -> str:
    """Text form of a call payload, e.g. ``transfer(0xAb..,100)``."""
    if call.kind is CallKind.SOL_CALL:
        return call.name + "(" + ",".join(pp_abi_value(v) for v in call.args) + ")"
    if call.kind is CallKind.SOL_CREATE:
        return "<CREATE>"
    if call.kind is CallKind.SOL_CALLDATA:
        return "0x" + call.data.hex()
    if call.kind is CallKind.NO_CALL:
        return "*wait*"
    raise ValueError(f"Unknown call kind: {call.kind!r}")


def encode_sig(signature: Tuple[str, List[str]]) -> str:
    """Solidity-style signature ``name(type1,type2)`` used to name assertion tests."""
    name, abi_types = signature
    return name + "(" + ",".join(abi_types) + ")"
