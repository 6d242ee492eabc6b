from datetime import datetime, timezone
from decimal import Decimal
from typing import Union, Dict, List, Tuple


class Token(str):
    pass


class DisplayString(str):
    pass


class Date(int):
    "A Date bare item: signed integer seconds since the Unix epoch."

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(int(self), tz=timezone.utc)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Date":
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls(int(value.timestamp() // 1))

    def __repr__(self) -> str:
        return f"Date({int(self)})"


BareItemType = Union[int, float, str, bool, Decimal, bytes, Token, Date, datetime, DisplayString]
JsonBareType = Union[int, float, str, bool, Dict]

JsonParamType = List[Tuple[str, JsonBareType]]
JsonItemType = Tuple[JsonBareType, JsonParamType]
JsonInnerListType = Tuple[List[JsonItemType], JsonParamType]
JsonListType = List[Union[JsonItemType, JsonInnerListType]]
JsonDictType = List[Tuple[str, Union[JsonItemType, JsonInnerListType]]]
