from __future__ import annotations

from typing import Any

import pytest

from ethhex import (
    EthConfig,
    default_transaction_builder,
    detect_transaction_type,
    get_transaction_from_attr,
    get_transaction_type,
    number_to_hex,
    transaction_builder,
)

SENDER = "0x" + "eb" * 20
OTHER = "0x" + "cd" * 20


def _tx(**extra: Any) -> dict[str, Any]:
    tx = {
        "to": "0x3535353535353535353535353535353535353535",
        "value": "0x174876e800",
        "gas": "0x5208",
        "data": "0x0",
        "nonce": "0x4",
        "chainId": "0x1",
        "gasLimit": "0x5208",
    }
    tx.update(extra)
    return tx


def test_from_attr_prefers_transaction():
    config = EthConfig(default_account=OTHER)
    assert get_transaction_from_attr(config) == OTHER
    assert get_transaction_from_attr(config, _tx()) == OTHER
    assert get_transaction_from_attr(config, _tx(**{"from": SENDER})) == SENDER
    assert get_transaction_from_attr(EthConfig()) is None


def test_default_type_used_when_nothing_detected():
    config = EthConfig(default_transaction_type="0x4444")
    assert get_transaction_type(_tx(), config) == "0x4444"
    assert get_transaction_type(_tx(), EthConfig()) == "0x0"


def test_type_detection():
    config = EthConfig()
    assert get_transaction_type(_tx(type="0x1"), config) == "0x1"
    assert get_transaction_type(_tx(maxFeePerGas="0x1"), config) == "0x2"
    assert get_transaction_type(_tx(maxPriorityFeePerGas="0x1"), config) == "0x2"
    assert get_transaction_type(_tx(accessList=[]), config) == "0x1"
    assert detect_transaction_type(_tx()) is None


def test_type_parser_hook_called():
    seen: list[dict] = []

    def parser(tx):
        seen.append(tx)
        return "0x7"

    config = EthConfig(transaction_type_parser=parser)
    tx = _tx(gasPrice="0x4a817c800")
    assert detect_transaction_type(tx, config) == "0x7"
    assert seen == [tx]


def test_default_builder_fills_from_config():
    config = EthConfig(default_account=SENDER, default_network_id=4, default_chain="rinkeby")
    original = _tx()
    res = default_transaction_builder(transaction=original, config=config)
    assert res["from"] == SENDER
    assert res["networkId"] == 4
    assert res["chain"] == "rinkeby"
    assert res["hardfork"] == "london"
    assert res["type"] == "0x0"
    assert "maxPriorityFeePerGas" not in res
    # input untouched
    assert "from" not in original


def test_default_builder_keeps_explicit_fields():
    config = EthConfig(default_network_id=4, default_hardfork="istanbul")
    res = default_transaction_builder(
        transaction=_tx(networkId=9, chain="goerli", hardfork="berlin"), config=config
    )
    assert (res["networkId"], res["chain"], res["hardfork"]) == (9, "goerli", "berlin")


def test_default_builder_common_replaces_chain_and_hardfork():
    common = {"customChain": {"name": "test", "networkId": 123, "chainId": 1234}, "hardfork": "dao"}
    res = default_transaction_builder(transaction=_tx(), config=EthConfig(default_common=common))
    assert res["common"] is common
    assert "chain" not in res and "hardfork" not in res


def test_default_builder_priority_fee_for_eip1559():
    config = EthConfig(default_max_priority_fee_per_gas=number_to_hex(1200000000))
    res = default_transaction_builder(transaction=_tx(type="0x2"), config=config)
    assert res["maxPriorityFeePerGas"] == number_to_hex(1200000000)

    kept = default_transaction_builder(
        transaction=_tx(type="0x2", maxPriorityFeePerGas="0x1"), config=config
    )
    assert kept["maxPriorityFeePerGas"] == "0x1"


def test_transaction_builder_hook():
    calls: list[dict] = []

    def builder(*, transaction, config):
        calls.append({"transaction": transaction, "config": config})
        return {**transaction, "built": True}

    config = EthConfig(transaction_builder=builder)
    tx = _tx(gasPrice="0x4a817c800")
    res = transaction_builder(transaction=tx, config=config)
    assert res["built"] is True
    assert len(calls) == 1 and calls[0]["config"] is config


def test_transaction_builder_without_hook_uses_default():
    config = EthConfig(default_account=SENDER)
    res = transaction_builder(transaction=_tx(), config=config)
    assert res["from"] == SENDER


@pytest.mark.parametrize("bad_type", ["2", "two", 2.0, True])
def test_default_builder_rejects_unreadable_type(bad_type):
    with pytest.raises(ValueError, match="transaction type"):
        default_transaction_builder(transaction=_tx(type=bad_type), config=EthConfig())


def test_default_builder_reports_bad_type_from_hook():
    config = EthConfig(transaction_type_parser=lambda tx: "2")
    with pytest.raises(ValueError, match="'2'"):
        default_transaction_builder(transaction=_tx(), config=config)


def test_default_builder_accepts_int_type():
    res = default_transaction_builder(transaction=_tx(type=2), config=EthConfig())
    assert res["maxPriorityFeePerGas"] == number_to_hex(2500000000)
