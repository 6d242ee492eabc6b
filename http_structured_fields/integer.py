from decimal import Decimal
from string import digits
from typing import Tuple, Union

from .exceptions import ParseError, SerializeError

MAX_INT = 999999999999999
MIN_INT = -999999999999999
INTEGER_DIGITS = 15
DECIMAL_INT_DIGITS = 12
DECIMAL_FRAC_DIGITS = 3

DIGITS = set(digits.encode("ascii"))
NUMBER_START_CHARS = set((digits + "-").encode("ascii"))
PERIOD = ord(b".")
MINUS = ord(b"-")


def parse_integer(data: bytes) -> Tuple[int, int]:
    bytes_consumed, value = parse_number(data)
    if not isinstance(value, int):
        raise ParseError("Expected an Integer, found a Decimal")
    return bytes_consumed, value


def ser_integer(inval: int) -> str:
    if not MIN_INT <= inval <= MAX_INT:
        raise SerializeError(f"Integer {inval} is out of range")
    output = ""
    if inval < 0:
        output += "-"
    output += str(abs(int(inval)))
    return output


INTEGER = "integer"
DECIMAL = "decimal"


def parse_number(data: bytes) -> Tuple[int, Union[int, Decimal]]:
    _type = INTEGER
    bytes_consumed = 0
    decimal_index = 0
    if data[:1] and data[0] == MINUS:
        bytes_consumed += 1
    num_start = bytes_consumed
    if not data[num_start:]:
        raise ParseError("Number input lacked a number")
    if data[num_start] not in DIGITS:
        raise ParseError("Number doesn't start with a DIGIT")
    while bytes_consumed < len(data):
        char = data[bytes_consumed]
        if char in DIGITS:
            bytes_consumed += 1
        elif _type is INTEGER and char == PERIOD:
            if bytes_consumed - num_start > DECIMAL_INT_DIGITS:
                raise ParseError("Decimal integer component too long")
            _type = DECIMAL
            bytes_consumed += 1
            decimal_index = bytes_consumed
        else:
            break
        num_length = bytes_consumed - num_start
        if _type is INTEGER and num_length > INTEGER_DIGITS:
            raise ParseError("Integer too long")
        if _type is DECIMAL and num_length > DECIMAL_INT_DIGITS + DECIMAL_FRAC_DIGITS + 1:
            raise ParseError("Decimal too long")
    if _type is INTEGER:
        return bytes_consumed, int(bytes(data[:bytes_consumed]))
    if bytes_consumed == decimal_index:
        raise ParseError("Decimal ends in '.'")
    if bytes_consumed - decimal_index > DECIMAL_FRAC_DIGITS:
        raise ParseError("Decimal fractional component too long")
    return bytes_consumed, Decimal(bytes(data[:bytes_consumed]).decode("ascii"))
