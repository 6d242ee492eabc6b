import base64
import binascii
import re
from typing import Tuple

from .exceptions import ParseError

BYTE_DELIMIT = ord(b":")
B64CONTENT = re.compile(rb"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")


def parse_byteseq(data: bytes) -> Tuple[int, bytes]:
    end_delimit = 1
    size = len(data)
    while end_delimit < size and data[end_delimit] != BYTE_DELIMIT:
        end_delimit += 1
    if end_delimit == size:
        raise ParseError("Binary Sequence didn't contain ending ':'")
    b64_content = bytes(data[1:end_delimit])
    bytes_consumed = end_delimit + 1
    if not B64CONTENT.fullmatch(b64_content):
        raise ParseError("Binary Sequence contained disallowed character or bad padding")
    try:
        binary_content = base64.b64decode(b64_content, validate=True)
    except binascii.Error as why:
        raise ParseError("Binary Sequence failed to decode") from why
    return bytes_consumed, binary_content


def ser_byteseq(byteseq: bytes) -> str:
    return f":{base64.standard_b64encode(byteseq).decode('ascii')}:"
