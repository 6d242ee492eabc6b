from string import ascii_letters, digits
from typing import Tuple

from .exceptions import SerializeError
from .types import Token

TOKEN_START_CHARS = set((ascii_letters + "*").encode("ascii"))
TOKEN_CHARS = set((ascii_letters + digits + ":/!#$%&'*+-.^_`|~").encode("ascii"))


def parse_token(data: bytes) -> Tuple[int, Token]:
    bytes_consumed = 1  # consume start char
    size = len(data)
    while bytes_consumed < size:
        if data[bytes_consumed] not in TOKEN_CHARS:
            break
        bytes_consumed += 1
    return bytes_consumed, Token(bytes(data[:bytes_consumed]).decode("ascii"))


def is_token(value: str) -> bool:
    return (
        isinstance(value, str)
        and value != ""
        and ord(value[0]) in TOKEN_START_CHARS
        and all(ord(char) in TOKEN_CHARS for char in value)
    )


def ser_token(token: Token) -> str:
    if not token:
        raise SerializeError("Token is empty")
    if ord(str(token)[0]) not in TOKEN_START_CHARS:
        raise SerializeError(f"Token {token!r} didn't start with legal character")
    if not all(ord(char) in TOKEN_CHARS for char in str(token)):
        raise SerializeError(f"Token {token!r} contains disallowed characters")
    return str(token)
