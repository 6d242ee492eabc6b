from .codec import (  # noqa:F401
    parse_list,
    parse_dictionary,
    parse_dict,
    parse_item,
    serialize_list,
    serialize_dictionary,
    serialize_dict,
    serialize_item,
)
from .dictionary import Dictionary  # noqa:F401
from .exceptions import StructuredFieldsException, ParseError, SerializeError  # noqa:F401
from .item import Item, InnerList, Parameters  # noqa:F401
from .list import List  # noqa:F401
from .types import Date, DisplayString, Token  # noqa:F401
