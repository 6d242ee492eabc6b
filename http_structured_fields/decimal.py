import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Tuple, Union

from .exceptions import ParseError, SerializeError
from .integer import parse_number, DECIMAL_INT_DIGITS, DECIMAL_FRAC_DIGITS

INT_DIGITS = DECIMAL_INT_DIGITS
FRAC_DIGITS = DECIMAL_FRAC_DIGITS
PRECISION = Decimal(10) ** -FRAC_DIGITS


def parse_decimal(data: bytes) -> Tuple[int, Decimal]:
    bytes_consumed, value = parse_number(data)
    if not isinstance(value, Decimal):
        raise ParseError("Expected a Decimal, found an Integer")
    return bytes_consumed, value


def ser_decimal(input_decimal: Union[Decimal, float]) -> str:
    if isinstance(input_decimal, float):
        if not math.isfinite(input_decimal):
            raise SerializeError(f"Can't serialise non-finite decimal {input_decimal}")
        input_decimal = Decimal(repr(input_decimal))
    if not isinstance(input_decimal, Decimal):
        raise SerializeError("decimal input is not decimal")
    if not input_decimal.is_finite():
        raise SerializeError(f"Can't serialise non-finite decimal {input_decimal}")
    try:
        abs_decimal = input_decimal.copy_abs().quantize(PRECISION, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as why:
        raise SerializeError(f"decimal {input_decimal} is too large") from why
    integer_component_s, _, fractional_component_s = f"{abs_decimal:f}".partition(".")
    if len(integer_component_s) > INT_DIGITS:
        raise SerializeError(f"decimal with oversize integer component {integer_component_s}")
    fractional_component_s = fractional_component_s.rstrip("0") or "0"
    is_negative = input_decimal.is_signed() and abs_decimal != 0
    return f"{'-' if is_negative else ''}{integer_component_s}.{fractional_component_s}"
