from typing import Tuple

from .exceptions import ParseError, SerializeError

DQUOTE = ord('"')
BACKSLASH = ord("\\")
ESCAPABLE_CHARS = frozenset([DQUOTE, BACKSLASH])
# VCHAR and SP, minus DQUOTE and backslash which only appear escaped
STRING_CHARS = frozenset(range(0x20, 0x7F)) - ESCAPABLE_CHARS


def parse_string(data: bytes) -> Tuple[int, str]:
    output_string = bytearray()
    bytes_consumed = 1  # consume DQUOTE
    size = len(data)
    while bytes_consumed < size:
        char = data[bytes_consumed]
        bytes_consumed += 1
        if char == DQUOTE:
            return bytes_consumed, output_string.decode("ascii")
        if char == BACKSLASH:
            if bytes_consumed == size:
                raise ParseError("Last character of input was a backslash")
            char = data[bytes_consumed]
            bytes_consumed += 1
            if char not in ESCAPABLE_CHARS:
                raise ParseError(f"Backslash before disallowed character {chr(char)!r}")
        elif char not in STRING_CHARS:
            raise ParseError(f"String contains disallowed character {chr(char)!r}")
        output_string.append(char)
    raise ParseError("Reached end of input without finding a closing DQUOTE")


def ser_string(inval: str) -> str:
    for char in inval:
        if not " " <= char <= "~":
            raise SerializeError(f"String {inval!r} contains disallowed character {char!r}")
    escaped = inval.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
