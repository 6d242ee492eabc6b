"""
Schema-driven mapping between Structured Field Parameters and plain attributes.

Status-like fields (Cache-Status, Proxy-Status and friends) carry a fixed set of
well-known parameters plus arbitrary extensions. A schema is a sequence of
:class:`ParamSchemaEntry` describing the well-known ones; anything else ends up
under the ``"extensions"`` attribute.
"""
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Sequence

from .item import Parameters
from .types import BareItemType

EXTENSIONS = "extensions"


class ParamSchemaEntry(NamedTuple):
    key: str
    name: str
    parse: Callable[[BareItemType], Any]
    format: Callable[[Any], BareItemType]


def parse_params_by_schema(
    params: Optional[Mapping[str, BareItemType]], schema: Sequence[ParamSchemaEntry]
) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    if not params:
        return result
    entries = {entry.key: entry for entry in schema}
    extensions: Dict[str, BareItemType] = {}
    for key, value in params.items():
        entry = entries.get(key)
        if entry is None:
            extensions[key] = value
            continue
        parsed_value = entry.parse(value)
        if parsed_value is not None:
            result[entry.name] = parsed_value
    if extensions:
        result[EXTENSIONS] = extensions
    return result


def build_params_by_schema(
    values: Mapping[str, Any], schema: Sequence[ParamSchemaEntry], protect_known_keys: bool = False
) -> Parameters:
    """
    Build Parameters from mapped attribute values.

    Schema keys are emitted first, in schema order. Extension keys follow, skipping any key
    already emitted; with ``protect_known_keys`` an extension can't supply a schema key even
    when the mapped attribute is unset.
    """
    result = Parameters()
    for entry in schema:
        value = values.get(entry.name)
        if value is not None:
            result[entry.key] = entry.format(value)
    known_keys = {entry.key for entry in schema}
    for key, value in (values.get(EXTENSIONS) or {}).items():
        if protect_known_keys and key in known_keys:
            continue
        if key in result or value is None:
            continue
        result[key] = value
    return result
