"""
Hex <-> text conversion over a single text encoding.

``latin-1`` maps every byte 0x00-0xff to the code point of the same value, so
decoding with it is total and encoding rejects only characters above U+00FF.
Multi-byte encodings such as ``utf-8`` can also fail while decoding.
"""

from .errors import EncodingRangeError, HexTypeError, InvalidTextError
from .utils import bytes_to_hex, hex_to_bytes

LATIN1 = "latin-1"


def hex_to_text(hex_str: str, encoding: str = LATIN1) -> str:
    """Decode a 0x-prefixed hex string into text.

    Raises HexTypeError for non-str input, HexFormatError for a missing prefix
    or bad digit, and InvalidTextError if the bytes do not decode.
    """
    raw = hex_to_bytes(hex_str)
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise InvalidTextError(hex_str, encoding, e.start) from e


def text_to_hex(text: str, encoding: str = LATIN1) -> str:
    """Encode text as a lower-case, even-length hex string with 0x prefix."""
    if not isinstance(text, str):
        raise HexTypeError(text, "str")
    try:
        raw = text.encode(encoding)
    except UnicodeEncodeError as e:
        raise EncodingRangeError(text, e.start, encoding) from e
    return bytes_to_hex(raw)
