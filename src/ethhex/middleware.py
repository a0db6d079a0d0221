from __future__ import annotations

import logging
from typing import Any

from .config import EthConfig

logger = logging.getLogger(__name__)

# method -> index of its trailing block parameter
BLOCK_PARAM_INDEX = {
    "eth_getBalance": 1,
    "eth_getCode": 1,
    "eth_getTransactionCount": 1,
    "eth_call": 1,
    "eth_getStorageAt": 2,
}

SENDER_METHODS = ("eth_sendTransaction", "eth_call", "eth_estimateGas")


def apply_request_defaults(config: EthConfig, method: str, params: Any) -> Any:
    """Return ``params`` with the configured default block and sender filled in.

    The caller's list and transaction dict are not modified. Params that are
    not a list or tuple (web3 allows ``None``) are returned as given.
    """
    if not isinstance(params, (list, tuple)):
        return params
    out = list(params)

    if method in SENDER_METHODS and out and isinstance(out[0], dict):
        tx = out[0]
        if tx.get("from") is None and config.default_account is not None:
            out[0] = {**tx, "from": config.default_account}
            logger.debug("%s: using default account %s", method, config.default_account)

    idx = BLOCK_PARAM_INDEX.get(method)
    if idx is not None and len(out) == idx:
        block = config.default_block
        out.append(hex(block) if isinstance(block, int) else block)
        logger.debug("%s: using default block %s", method, out[idx])

    return out


class _Web3Adapter:
    """What web3 v7 gets back from ``middleware(w3)``."""

    def __init__(self, parent, w3):
        self.parent = parent
        self.w3 = w3

    def wrap_make_request(self, make_request):
        return self.parent._build(make_request, self.w3)

    # web3 v7 awaits this when composing async middleware
    async def async_wrap_make_request(self, make_request):
        return self.parent._build(make_request, self.w3)


class _DefaultsMiddlewareBase:
    def __init__(self, config: EthConfig | None = None) -> None:
        self.config = config if config is not None else EthConfig()

    def _build(self, make_request, w3):
        raise NotImplementedError

    def __call__(self, *args):
        # v6: (make_request, w3) -> request function
        if len(args) == 2:
            make_request, w3 = args
            return self._build(make_request, w3)
        # v7: (w3) -> adapter exposing wrap_make_request
        if len(args) == 1:
            return _Web3Adapter(self, args[0])
        raise TypeError(f"{type(self).__name__}: expected (make_request, w3) or (w3)")


class DefaultsMiddleware(_DefaultsMiddlewareBase):
    def _build(self, make_request, w3):
        def middleware(method: str, params: Any) -> dict[str, Any]:
            return dict(make_request(method, apply_request_defaults(self.config, method, params)))

        return middleware


class AsyncDefaultsMiddleware(_DefaultsMiddlewareBase):
    def _build(self, make_request, w3):
        async def middleware(method: str, params: Any) -> dict:
            return dict(await make_request(method, apply_request_defaults(self.config, method, params)))

        return middleware


__all__ = ["AsyncDefaultsMiddleware", "DefaultsMiddleware", "apply_request_defaults"]
