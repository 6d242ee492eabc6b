"""
Functional entry points for parsing and serialising Structured Field Values.

The ``parse_*`` functions never raise for malformed input: a field that does not
match the grammar is treated as absent and ``None`` is returned. The
``serialize_*`` functions raise :class:`SerializeError` when handed a value that
can't be represented.
"""
import logging
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

from .dictionary import Dictionary
from .exceptions import ParseError, SerializeError
from .item import Item, InnerList, AllItemType
from .list import List
from .types import BareItemType
from .util import StructuredFieldValue

logger = logging.getLogger(__name__)

FieldValue = Union[str, bytes]
_SFV = TypeVar("_SFV", bound=StructuredFieldValue)


def _field_bytes(value: FieldValue) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    try:
        return value.encode("ascii")
    except UnicodeEncodeError as why:
        raise ParseError("Field value contains non-ASCII characters") from why


def _parse(field_type: Type[_SFV], value: FieldValue) -> Optional[_SFV]:
    field = field_type()
    try:
        field.parse(_field_bytes(value))
    except ParseError as e:
        logger.debug("Rejected structured field %s %r: %s", field_type.__name__, value, e)
        return None
    return field


def parse_list(value: FieldValue) -> Optional[List]:
    "Parse a combined field value as a List, or return None if it is malformed."
    return _parse(List, value)


def parse_dictionary(value: FieldValue) -> Optional[Dictionary]:
    "Parse a combined field value as a Dictionary, or return None if it is malformed."
    return _parse(Dictionary, value)


def parse_item(value: FieldValue) -> Optional[Item]:
    "Parse a field value as an Item, or return None if it is malformed."
    return _parse(Item, value)


def serialize_list(value: Iterable[AllItemType]) -> str:
    if not isinstance(value, List):
        value = List(value)
    return str(value)


def serialize_dictionary(value: Mapping[str, Any]) -> str:
    if not isinstance(value, Dictionary):
        value = Dictionary(value)
    return str(value)


def serialize_item(value: Union[Item, BareItemType]) -> str:
    if isinstance(value, InnerList):
        raise SerializeError("An Inner List can't be serialised as a top-level Item")
    if not isinstance(value, Item):
        value = Item(value)
    return str(value)


parse_dict = parse_dictionary
serialize_dict = serialize_dictionary
