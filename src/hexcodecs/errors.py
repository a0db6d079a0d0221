from __future__ import annotations

from enum import Enum
from typing import Any


class FormatErrorKind(str, Enum):
    MISSING_PREFIX = "missing 0x prefix"
    INVALID_DIGIT = "invalid hex digit"


def _preview(value: Any, limit: int = 42) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[: limit - 3] + "..."


class HexCodecError(Exception):
    """Base class for every error raised by the hex codecs."""


class HexTypeError(HexCodecError, TypeError):
    def __init__(self, value: Any, expected: str = "hex string") -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"expected {expected}, got {type(value).__name__}: {_preview(value)}")


class HexFormatError(HexCodecError, ValueError):
    def __init__(self, kind: FormatErrorKind, value: str, position: int | None = None) -> None:
        self.kind = kind
        self.value = value
        self.position = position
        where = f" at index {position}" if position is not None else ""
        super().__init__(f"{kind.value}{where}: {_preview(value)}")


class EncodingRangeError(HexCodecError, ValueError):
    """Raised when a character has no single-byte representation."""

    def __init__(self, text: str, position: int, encoding: str) -> None:
        self.text = text
        self.position = position
        self.char = text[position]
        self.encoding = encoding
        super().__init__(
            f"character {self.char!r} (U+{ord(self.char):04X}) at index {position} "
            f"is outside the {encoding} range"
        )


class InvalidTextError(HexCodecError, ValueError):
    """Raised when decoded bytes are not valid in the requested text encoding."""

    def __init__(self, value: str, encoding: str, position: int) -> None:
        self.value = value
        self.encoding = encoding
        self.position = position
        super().__init__(f"byte {position} of {_preview(value)} is not valid {encoding}")


__all__ = [
    "EncodingRangeError",
    "FormatErrorKind",
    "HexCodecError",
    "HexFormatError",
    "HexTypeError",
    "InvalidTextError",
]
