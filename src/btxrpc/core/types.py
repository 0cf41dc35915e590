"""
Composite scalars that accept more than one JSON shape.

``DescRange`` and ``DescTimestamp`` are used by descriptor imports,
``Scanning`` by ``getwalletinfo``. Each accepted value is kept as given.
"""
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import PlainValidator
from pydantic_core import PydanticCustomError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def cast_desc_range(value: Any) -> Union[int, List[int]]:
    """A non-negative end index, or a ``[begin, end]`` pair with ``0 <= begin <= end``."""
    if _is_int(value) and value >= 0:
        return value

    if isinstance(value, (list, tuple)) and len(value) == 2:
        begin, end = value
        if _is_int(begin) and _is_int(end) and 0 <= begin <= end:
            return [begin, end]

    raise PydanticCustomError(
        "desc_range",
        "must be a non-negative integer or array [begin, end], got: {value}",
        {"value": repr(value)},
    )


def cast_desc_timestamp(value: Any) -> Union[int, Literal["now"]]:
    """A unix time, or the literal ``"now"``."""
    if value == "now" and isinstance(value, str):
        return value
    if _is_int(value) and value >= 0:
        return value

    raise PydanticCustomError(
        "desc_timestamp",
        'must be a non-negative integer or "now", got: {value}',
        {"value": repr(value)},
    )


def cast_scanning(value: Any) -> Union[Dict[str, Any], Literal[False]]:
    if value is False:
        return value
    if isinstance(value, dict) and "duration" in value and "progress" in value:
        return dict(value)

    raise PydanticCustomError("scanning", "must be a map with scanning details or false")


DescRange = Annotated[Union[int, List[int]], PlainValidator(cast_desc_range)]
DescTimestamp = Annotated[Union[int, str], PlainValidator(cast_desc_timestamp)]
Scanning = Annotated[Union[Dict[str, Any], bool], PlainValidator(cast_scanning)]
