from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Callable

from web3 import Web3

from hexcodecs.numbers import number_to_hex
from hexcodecs.utils import is_hex_str

logger = logging.getLogger(__name__)

BLOCK_TAGS = ("latest", "earliest", "pending", "safe", "finalized")

TransactionBuilder = Callable[..., dict[str, Any]]
TransactionTypeParser = Callable[[dict[str, Any]], str | None]


class InvalidConfigError(ValueError):
    pass


@dataclass
class EthConfig:
    """Client defaults consulted by the transaction helpers and middleware.

    Every instance starts from the class defaults. ``set_config`` changes only
    the fields it names; values are stored as given, not copied.
    """

    default_account: str | None = None
    handle_revert: bool = False
    default_block: str | int = "latest"
    transaction_block_timeout: int = 50
    transaction_confirmation_blocks: int = 24
    transaction_polling_interval: int = 1000
    transaction_polling_timeout: int = 750
    transaction_receipt_polling_interval: int | None = None
    transaction_confirmation_polling_interval: int | None = None
    block_header_timeout: int = 10
    max_listeners_warning_threshold: int = 100
    default_network_id: int | None = None
    default_chain: str = "mainnet"
    default_hardfork: str = "london"
    default_common: dict[str, Any] | None = None
    default_transaction_type: str = "0x0"
    default_max_priority_fee_per_gas: str = number_to_hex(2500000000)
    transaction_builder: TransactionBuilder | None = None
    transaction_type_parser: TransactionTypeParser | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            _validate(f.name, getattr(self, f.name))

    def set_config(self, **changes: Any) -> None:
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise InvalidConfigError(f"unknown config option(s): {', '.join(unknown)}")
        # validate everything first so a bad value leaves the instance untouched
        for name, value in changes.items():
            _validate(name, value)
        for name, value in changes.items():
            setattr(self, name, value)
        logger.debug("config updated: %s", ", ".join(changes))

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _validate(name: str, value: Any) -> None:
    if name == "default_account":
        if value is not None and not Web3.is_address(value):
            raise InvalidConfigError(f"default_account is not an address: {value!r}")
    elif name == "default_block":
        if isinstance(value, bool):
            raise InvalidConfigError(f"invalid default_block: {value!r}")
        if isinstance(value, int):
            if value < 0:
                raise InvalidConfigError(f"default_block must be non-negative: {value}")
        elif value not in BLOCK_TAGS and not is_hex_str(value):
            raise InvalidConfigError(f"invalid default_block: {value!r}")
    elif name in ("default_transaction_type", "default_max_priority_fee_per_gas"):
        if not is_hex_str(value):
            raise InvalidConfigError(f"{name} must be a hex string: {value!r}")
    elif name in ("transaction_builder", "transaction_type_parser"):
        if value is not None and not callable(value):
            raise InvalidConfigError(f"{name} must be callable")


__all__ = ["BLOCK_TAGS", "EthConfig", "InvalidConfigError"]
