from string import ascii_lowercase, digits
from typing import FrozenSet, Tuple

from .exceptions import ParseError, SerializeError

SP = frozenset(b" ")
OWS = frozenset(b" \t")


def _discard(data: bytes, chars: FrozenSet[int]) -> int:
    i = 0
    ln = len(data)
    while i < ln and data[i] in chars:
        i += 1
    return i


def discard_sp(data: bytes) -> int:
    "Return the number of space characters at the beginning of data."
    return _discard(data, SP)


def discard_ows(data: bytes) -> int:
    "Return the number of space or HTAB characters at the beginning of data."
    return _discard(data, OWS)


KEY_START_CHARS = frozenset((ascii_lowercase + "*").encode("ascii"))
KEY_CHARS = frozenset((ascii_lowercase + digits + "_-*.").encode("ascii"))


def parse_key(data: bytes) -> Tuple[int, str]:
    if data == b"" or data[0] not in KEY_START_CHARS:
        raise ParseError(f"Key does not begin with lcalpha or *: {bytes(data[:1])!r}")
    bytes_consumed = 1
    size = len(data)
    while bytes_consumed < size and data[bytes_consumed] in KEY_CHARS:
        bytes_consumed += 1
    return bytes_consumed, bytes(data[:bytes_consumed]).decode("ascii")


def is_key(key: str) -> bool:
    return (
        isinstance(key, str)
        and key != ""
        and ord(key[0]) in KEY_START_CHARS
        and all(ord(char) in KEY_CHARS for char in key)
    )


def ser_key(key: str) -> str:
    if not isinstance(key, str) or key == "":
        raise SerializeError(f"Key must be a non-empty string, not {key!r}")
    if ord(key[0]) not in KEY_START_CHARS:
        raise SerializeError(f"Key {key!r} does not start with lcalpha or *")
    if not all(ord(char) in KEY_CHARS for char in key):
        raise SerializeError(f"Key {key!r} contains disallowed characters")
    return key


class StructuredFieldValue:
    "Base for the top-level field types: Item, List and Dictionary."

    def parse(self, data: bytes) -> None:
        # slicing a memoryview doesn't copy the remaining input
        data = memoryview(data)  # type: ignore
        bytes_consumed = discard_ows(data)
        bytes_consumed += self.parse_content(data[bytes_consumed:])
        bytes_consumed += discard_ows(data[bytes_consumed:])
        if data[bytes_consumed:]:
            self.reset()
            raise ParseError("Trailing text after parsed value")

    def parse_content(self, data: bytes) -> int:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError
