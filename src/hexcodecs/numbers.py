from .errors import HexTypeError
from .utils import strip_hex_prefix


def number_to_hex(value: int) -> str:
    # bool is an int subclass but never a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise HexTypeError(value, "int")
    if value < 0:
        return "-0x" + format(-value, "x")
    return "0x" + format(value, "x")


def hex_to_number(hex_str: str) -> int:
    if not isinstance(hex_str, str):
        raise HexTypeError(hex_str)
    sign = 1
    if hex_str.startswith("-"):
        sign = -1
        hex_str = hex_str[1:]
    digits = strip_hex_prefix(hex_str)
    return sign * int(digits or "0", 16)
