from __future__ import annotations

from typing import Any

from hexcodecs.errors import HexCodecError
from hexcodecs.numbers import hex_to_number

from .config import EthConfig

Transaction = dict[str, Any]


def get_transaction_from_attr(config: EthConfig, transaction: Transaction | None = None) -> str | None:
    if transaction is not None and transaction.get("from") is not None:
        return transaction["from"]
    return config.default_account


def default_transaction_type_parser(transaction: Transaction) -> str | None:
    tx_type = transaction.get("type")
    if tx_type is not None:
        return tx_type
    if transaction.get("maxFeePerGas") is not None or transaction.get("maxPriorityFeePerGas") is not None:
        return "0x2"
    if transaction.get("accessList") is not None:
        return "0x1"
    return None


def detect_transaction_type(transaction: Transaction, config: EthConfig | None = None) -> str | None:
    if config is not None and config.transaction_type_parser is not None:
        return config.transaction_type_parser(transaction)
    return default_transaction_type_parser(transaction)


def get_transaction_type(transaction: Transaction, config: EthConfig) -> str | None:
    inferred = detect_transaction_type(transaction, config)
    if inferred is not None:
        return inferred
    return config.default_transaction_type


def _type_number(tx_type: str | int) -> int:
    # type must be an int or a 0x-prefixed hex string
    if isinstance(tx_type, int) and not isinstance(tx_type, bool):
        return tx_type
    try:
        return hex_to_number(tx_type)
    except (HexCodecError, TypeError) as e:
        raise ValueError(f"transaction type must be an int or 0x-hex string, got {tx_type!r}") from e


def default_transaction_builder(*, transaction: Transaction, config: EthConfig) -> Transaction:
    """Fill missing transaction fields from ``config``.

    Returns a new dict; ``transaction`` is left as it was. Only defaults held
    by the config are applied, so nothing here touches the network.
    """
    tx = dict(transaction)

    sender = get_transaction_from_attr(config, tx)
    if sender is not None:
        tx["from"] = sender

    if tx.get("networkId") is None and config.default_network_id is not None:
        tx["networkId"] = config.default_network_id

    if tx.get("common") is None and config.default_common is not None:
        tx["common"] = config.default_common
    if tx.get("common") is None:
        tx.setdefault("chain", config.default_chain)
        tx.setdefault("hardfork", config.default_hardfork)

    tx_type = get_transaction_type(tx, config)
    if tx_type is not None:
        tx["type"] = tx_type
        if _type_number(tx_type) >= 2 and tx.get("maxPriorityFeePerGas") is None:
            tx["maxPriorityFeePerGas"] = config.default_max_priority_fee_per_gas
    return tx


def transaction_builder(*, transaction: Transaction, config: EthConfig) -> Transaction:
    if config.transaction_builder is not None:
        return config.transaction_builder(transaction=transaction, config=config)
    return default_transaction_builder(transaction=transaction, config=config)


__all__ = [
    "default_transaction_builder",
    "default_transaction_type_parser",
    "detect_transaction_type",
    "get_transaction_from_attr",
    "get_transaction_type",
    "transaction_builder",
]
