from datetime import datetime
from typing import Tuple, Union

from .exceptions import ParseError, SerializeError
from .integer import parse_number, ser_integer
from .types import Date


def parse_date(data: bytes) -> Tuple[int, Date]:
    try:
        bytes_consumed, value = parse_number(data[1:])
    except ParseError as why:
        raise ParseError("Date is not followed by an Integer") from why
    if not isinstance(value, int):
        raise ParseError("Non-integer Date")
    return bytes_consumed + 1, Date(value)


def ser_date(inval: Union[Date, datetime]) -> str:
    if isinstance(inval, datetime):
        inval = Date.from_datetime(inval)
    try:
        return f"@{ser_integer(int(inval))}"
    except SerializeError as why:
        raise SerializeError(f"Date {int(inval)} is out of range") from why
