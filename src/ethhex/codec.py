from __future__ import annotations

from dataclasses import dataclass

from hexcodecs.numbers import hex_to_number as _hex_to_number
from hexcodecs.numbers import number_to_hex as _number_to_hex
from hexcodecs.text import hex_to_text, text_to_hex
from hexcodecs.utils import bytes_to_hex as _bytes_to_hex
from hexcodecs.utils import hex_to_bytes as _hex_to_bytes
from hexcodecs.utils import is_hex_str

BytesLike = bytes | bytearray | memoryview


@dataclass(frozen=True)
class HexCodec:
    """Pairs hex decoding and encoding under one text encoding.

    ``decode`` accepts only a ``str`` of the form ``0x`` + hex digits and
    ``encode`` always returns lower-case, even-length hex. For every text the
    encoding can represent, ``decode(encode(text)) == text``.
    """

    name: str
    encoding: str

    def decode(self, value: str) -> str:
        return hex_to_text(value, self.encoding)

    def encode(self, text: str) -> str:
        return text_to_hex(text, self.encoding)


# One character per byte: bytes 0x80-0xff keep their value as code point.
ASCII = HexCodec("ascii", "latin-1")
UTF8 = HexCodec("utf8", "utf-8")


def hex_to_ascii(value: str) -> str:
    return ASCII.decode(value)


def ascii_to_hex(text: str) -> str:
    return ASCII.encode(text)


def hex_to_utf8(value: str) -> str:
    return UTF8.decode(value)


def utf8_to_hex(text: str) -> str:
    return UTF8.encode(text)


def hex_to_bytes(value: str) -> bytes:
    return _hex_to_bytes(value)


def bytes_to_hex(data: BytesLike) -> str:
    return _bytes_to_hex(data)


def hex_to_number(value: str) -> int:
    return _hex_to_number(value)


def number_to_hex(value: int) -> str:
    return _number_to_hex(value)


def is_hex(value: object) -> bool:
    return is_hex_str(value)


__all__ = [
    "ASCII",
    "UTF8",
    "HexCodec",
    "ascii_to_hex",
    "bytes_to_hex",
    "hex_to_ascii",
    "hex_to_bytes",
    "hex_to_number",
    "hex_to_utf8",
    "is_hex",
    "number_to_hex",
    "utf8_to_hex",
]
