# dhl_wrapper/api/query.py
# Author: dhl-wrapper

"""
Serialization of request parameter objects into URL query strings.

A parameter object is a dataclass whose query fields declare their wire name
in the field metadata:

    radius: Optional[int] = field(default=None, metadata={"wire": "radius"})

Fields without a wire name (path parameters) are never part of the query.
Fields whose value is None are omitted.
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, List, Tuple

import yarl

WIRE = "wire"

def format_value(value: Any) -> str:
    """Render a scalar parameter value the way DHL expects it"""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, (int, float, str)):
        return str(value)
    raise TypeError(
        f"Only scalar query parameters are supported, got {type(value).__name__}"
    )

def query_pairs(params: Any) -> List[Tuple[str, str]]:
    """
    Collect the (wire name, value) pairs of all present query fields

    Args:
        params: Dataclass instance with wire names in its field metadata

    Returns:
        Pairs in field declaration order
    """
    if not is_dataclass(params):
        raise TypeError(f"Expected a dataclass instance, got {type(params).__name__}")

    pairs = []
    for f in fields(params):
        wire_name = f.metadata.get(WIRE)
        if wire_name is None:
            continue
        value = getattr(params, f.name)
        if value is None:
            continue
        pairs.append((wire_name, format_value(value)))
    return pairs

def to_query_string(params: Any) -> str:
    """Percent-encoded query string with a leading '?', or '' when nothing is set"""
    pairs = query_pairs(params)
    if not pairs:
        return ""
    return "?" + yarl.URL.build(query=pairs).raw_query_string
