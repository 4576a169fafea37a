import pytest
from web3 import Web3

from eth_fuzz_report_core.tx import CallKind, TxCall, encode_sig, pp_abi_value, pp_tx_call

CONTRACT_LOWER = "0x00a329c0648769a73afac7f9381e08fb43dbea72"


class TestAbiValues:
    @pytest.mark.parametrize("value, expected", [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-5, "-5"),
        (2 ** 255, str(2 ** 255)),
        (b"\x01\xff", "0x01ff"),
        ("hello", '"hello"'),
        ([1, [2, 3]], "[1, [2, 3]]"),
        ((1, True), "(1, true)"),
        ([], "[]"),
    ])
    def test_render(self, value, expected):
        assert pp_abi_value(value) == expected

    def test_address_is_checksummed(self):
        assert pp_abi_value(CONTRACT_LOWER) == Web3.to_checksum_address(CONTRACT_LOWER)

    def test_unprefixed_hex_string_is_quoted(self):
        unprefixed = CONTRACT_LOWER[2:]
        assert pp_abi_value(unprefixed) == '"' + unprefixed + '"'

    def test_unsupported_value_raises(self):
        with pytest.raises(TypeError):
            pp_abi_value(1.5)


class TestTxCall:
    def test_sol_call(self):
        call = TxCall.sol_call("transfer", [CONTRACT_LOWER, 10])
        assert call.kind is CallKind.SOL_CALL
        assert pp_tx_call(call) == f"transfer({Web3.to_checksum_address(CONTRACT_LOWER)},10)"

    def test_sol_call_without_args(self):
        assert pp_tx_call(TxCall.sol_call("f")) == "f()"

    def test_create(self):
        assert pp_tx_call(TxCall.sol_create(b"\x60\x80")) == "<CREATE>"

    def test_calldata(self):
        assert pp_tx_call(TxCall.sol_calldata(b"\xde\xad\xbe\xef")) == "0xdeadbeef"

    def test_no_call(self):
        assert pp_tx_call(TxCall.no_call()) == "*wait*"

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            pp_tx_call(TxCall("bogus"))


class TestEncodeSig:
    def test_with_types(self):
        assert encode_sig(("transfer", ["address", "uint256"])) == "transfer(address,uint256)"

    def test_without_types(self):
        assert encode_sig(("check", [])) == "check()"
