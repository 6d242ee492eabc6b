from collections import UserDict

from .exceptions import ParseError, SerializeError
from .item import Item, InnerList, itemise, AllItemType
from .list import parse_item_or_inner_list
from .types import JsonDictType
from .util import (
    StructuredFieldValue,
    discard_ows,
    ser_key,
    parse_key,
)

EQUALS = ord(b"=")
COMMA = ord(b",")


class Dictionary(UserDict, StructuredFieldValue):
    def parse_content(self, data: bytes) -> int:
        bytes_consumed = 0
        data_len = len(data)
        if data_len == 0:
            return bytes_consumed
        try:
            while True:
                offset, this_key = parse_key(data[bytes_consumed:])
                bytes_consumed += offset
                try:
                    is_equals = data[bytes_consumed] == EQUALS
                except IndexError:
                    is_equals = False
                if is_equals:
                    bytes_consumed += 1  # consume the "="
                    offset, member = parse_item_or_inner_list(data[bytes_consumed:])
                    bytes_consumed += offset
                else:
                    member = Item(True)
                    bytes_consumed += member.params.parse(data[bytes_consumed:])
                # last occurrence wins, including its position
                self.data.pop(this_key, None)
                self[this_key] = member
                bytes_consumed += discard_ows(data[bytes_consumed:])
                if bytes_consumed == data_len:
                    return bytes_consumed
                if data[bytes_consumed] != COMMA:
                    raise ParseError(f"Dictionary member '{this_key}' has trailing characters")
                bytes_consumed += 1
                bytes_consumed += discard_ows(data[bytes_consumed:])
                if bytes_consumed == data_len:
                    raise ParseError("Dictionary has trailing comma")
        except ParseError:
            self.clear()
            raise

    def reset(self) -> None:
        self.clear()

    def __setitem__(self, key: str, value: AllItemType) -> None:
        self.data[key] = itemise(value)

    def __str__(self) -> str:
        for member in self.data.values():
            if not isinstance(member, (Item, InnerList)):
                raise SerializeError(f"Dictionary member {member!r} is not an Item or Inner List")
        return ", ".join(
            [
                f"{ser_key(m)}"
                f"""{n.params if (isinstance(n, Item) and n.value is True) else f"={n}"}"""
                for m, n in self.items()
            ]
        )

    def to_json(self) -> JsonDictType:
        return [(key, val.to_json()) for (key, val) in self.items()]

    def from_json(self, json_data: JsonDictType) -> None:
        for key, val in json_data:
            if isinstance(val[0], list):
                self[key] = InnerList()
            else:
                self[key] = Item()
            self[key].from_json(val)
