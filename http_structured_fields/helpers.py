"""
Small helpers shared by the header-specific modules built on top of the codec.
"""
from typing import Mapping, MutableMapping, Optional, Union

from .integer import MAX_INT, MIN_INT
from .item import Item, InnerList
from .token import is_token
from .types import BareItemType
from .util import is_key


is_token_text = is_token
is_key_text = is_key


def is_item(member: Union[Item, InnerList]) -> bool:
    return isinstance(member, Item)


def expect_item(member: Union[Item, InnerList]) -> Optional[Item]:
    "Return the member if it is an Item; Inner Lists give None."
    return member if isinstance(member, Item) else None


def has_no_params(item: Union[Item, InnerList]) -> bool:
    return not item.params


def is_sf_integer(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_INT <= value <= MAX_INT


def merge_extensions(
    target: MutableMapping[str, BareItemType],
    extensions: Optional[Mapping[str, BareItemType]],
) -> None:
    "Copy extension parameters into target, never overriding a key it already has."
    if not extensions:
        return
    for key, value in extensions.items():
        if key not in target:
            target[key] = value


def normalize_optional_header_value(value: Optional[str]) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
