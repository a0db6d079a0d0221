from hexcodecs.errors import (
    EncodingRangeError,
    FormatErrorKind,
    HexCodecError,
    HexFormatError,
    HexTypeError,
    InvalidTextError,
)

from .codec import (
    ASCII,
    UTF8,
    HexCodec,
    ascii_to_hex,
    bytes_to_hex,
    hex_to_ascii,
    hex_to_bytes,
    hex_to_number,
    hex_to_utf8,
    is_hex,
    number_to_hex,
    utf8_to_hex,
)
from .config import EthConfig, InvalidConfigError
from .middleware import AsyncDefaultsMiddleware, DefaultsMiddleware
from .transaction import (
    default_transaction_builder,
    detect_transaction_type,
    get_transaction_from_attr,
    get_transaction_type,
    transaction_builder,
)

__all__ = [
    "ASCII",
    "UTF8",
    "AsyncDefaultsMiddleware",
    "DefaultsMiddleware",
    "EncodingRangeError",
    "EthConfig",
    "FormatErrorKind",
    "HexCodec",
    "HexCodecError",
    "HexFormatError",
    "HexTypeError",
    "InvalidConfigError",
    "InvalidTextError",
    "ascii_to_hex",
    "bytes_to_hex",
    "default_transaction_builder",
    "detect_transaction_type",
    "get_transaction_from_attr",
    "get_transaction_type",
    "hex_to_ascii",
    "hex_to_bytes",
    "hex_to_number",
    "hex_to_utf8",
    "is_hex",
    "number_to_hex",
    "transaction_builder",
    "utf8_to_hex",
]
