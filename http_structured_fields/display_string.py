from string import digits
from typing import Tuple

from .exceptions import ParseError, SerializeError
from .types import DisplayString

PERCENT = ord("%")
DQUOTE = ord('"')
LOWER_HEX = set((digits + "abcdef").encode("ascii"))


def parse_display_string(data: bytes) -> Tuple[int, DisplayString]:
    output_array = bytearray([])
    if data[:2] != b'%"':
        raise ParseError('Display string does not start with %"')
    bytes_consumed = 2  # consume PERCENT DQUOTE
    while True:
        try:
            char = data[bytes_consumed]
        except IndexError as why:
            raise ParseError("Reached end of input without finding a closing DQUOTE") from why
        bytes_consumed += 1
        if char == PERCENT:
            next_chars = data[bytes_consumed : bytes_consumed + 2]
            if len(next_chars) < 2:
                raise ParseError("Incomplete percent encoding")
            if not all(c in LOWER_HEX for c in next_chars):
                raise ParseError("Percent encoding is not two lowercase hex digits")
            bytes_consumed += 2
            output_array.append(int(bytes(next_chars), base=16))
        elif char == DQUOTE:
            try:
                output_string = output_array.decode("utf-8")
            except UnicodeDecodeError as why:
                raise ParseError("Invalid UTF-8") from why
            return bytes_consumed, DisplayString(output_string)
        elif 31 < char < 127:
            output_array.append(char)
        else:
            raise ParseError("Display string contains disallowed character")


def ser_display_string(inval: str) -> str:
    try:
        byte_array = inval.encode("utf-8")
    except UnicodeEncodeError as why:
        raise SerializeError("Display string is not valid Unicode") from why
    escaped = []
    for byte in byte_array:
        if byte in (PERCENT, DQUOTE) or not 31 < byte < 127:
            escaped.append(f"%{byte:02x}")
        else:
            escaped.append(chr(byte))
    return f'%"{"".join(escaped)}"'
