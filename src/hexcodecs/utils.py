import re

from .errors import FormatErrorKind, HexFormatError, HexTypeError

_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def strip_hex_prefix(hex_str: str) -> str:
    """Validate a 0x-prefixed hex string and return its digits unchanged."""
    if not isinstance(hex_str, str):
        raise HexTypeError(hex_str)
    if not hex_str.startswith(("0x", "0X")):
        raise HexFormatError(FormatErrorKind.MISSING_PREFIX, hex_str)
    digits = hex_str[2:]
    bad = _NON_HEX.search(digits)
    if bad is not None:
        raise HexFormatError(FormatErrorKind.INVALID_DIGIT, hex_str, bad.start() + 2)
    return digits


def is_hex_str(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return value.startswith(("0x", "0X")) and _NON_HEX.search(value, 2) is None


def norm_hex(hex_str: str) -> str:
    # Odd-length payloads carry an implicit leading zero nibble.
    s = strip_hex_prefix(hex_str).lower()
    if len(s) % 2 != 0:
        s = "0" + s
    return s


def hex_to_bytes(hex_str: str) -> bytes:
    return bytes.fromhex(norm_hex(hex_str))


def bytes_to_hex(data: bytes | bytearray | memoryview) -> str:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise HexTypeError(data, "bytes-like object")
    return "0x" + bytes(data).hex()
