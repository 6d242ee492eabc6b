from typing import Tuple

from .exceptions import ParseError, SerializeError

QUESTION = ord(b"?")

_boolean_map = {b"?1": True, b"?0": False}


def parse_boolean(data: bytes) -> Tuple[int, bool]:
    value = _boolean_map.get(bytes(data[:2]))
    if value is None:
        raise ParseError(f"Boolean must be ?0 or ?1, not {bytes(data[:2])!r}")
    return 2, value


def ser_boolean(inval: bool) -> str:
    if not isinstance(inval, bool):
        raise SerializeError(f"Can't serialise {inval!r} as a Boolean")
    return "?1" if inval else "?0"
