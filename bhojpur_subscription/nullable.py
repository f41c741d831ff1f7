"""
Nullable scalars
~~~~~~~~~~~~~~~~

A few response fields are documented by the API as "may be null". Declaring
them with one of the types below makes a JSON ``null`` decode to the type's
zero value instead of failing validation. Any other payload is parsed strictly
for the wrapped primitive (no "5" -> 5 coercion), so malformed values still
surface as errors that quote the offending input.

Only use these on fields the API allows to be null; everything else keeps the
plain type and fails on null.
"""

from __future__ import annotations
from typing import Annotated, Any, Callable, Dict, Union

from pydantic import BeforeValidator, Field, Strict, TypeAdapter, ValidationError

from .errors import SubscriptionDecodeError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _zero_if_null(zero: Any) -> Callable[[Any], Any]:
    def hook(value: Any) -> Any:
        return zero if value is None else value
    return hook


NullableInt = Annotated[int, Strict(), BeforeValidator(_zero_if_null(0))]
NullableInt64 = Annotated[int, Strict(), Field(ge=INT64_MIN, le=INT64_MAX), BeforeValidator(_zero_if_null(0))]
NullableBool = Annotated[bool, Strict(), BeforeValidator(_zero_if_null(False))]
NullableStr = Annotated[str, Strict(), BeforeValidator(_zero_if_null(""))]

_ADAPTERS: Dict[str, TypeAdapter] = {
    "int": TypeAdapter(NullableInt),
    "int64": TypeAdapter(NullableInt64),
    "bool": TypeAdapter(NullableBool),
    "str": TypeAdapter(NullableStr),
}


def decode_nullable(raw: Union[str, bytes], kind: str) -> Any:
    """
    Decode the raw JSON text of a single field.

    >>> decode_nullable(b"null", "int")
    0
    >>> decode_nullable(b'"x"', "str")
    'x'
    """
    try:
        adapter = _ADAPTERS[kind]
    except KeyError:
        raise ValueError(f"unknown nullable kind {kind!r}; expected one of {sorted(_ADAPTERS)}") from None
    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    try:
        return adapter.validate_json(data)
    except ValidationError as e:
        text = data.decode("utf-8", errors="replace")
        raise SubscriptionDecodeError(
            f"cannot decode {text!r} as nullable {kind}: {e.errors()[0]['msg']}",
            body=data,
            target=kind,
        ) from e


__all__ = [
    "NullableInt",
    "NullableInt64",
    "NullableBool",
    "NullableStr",
    "decode_nullable",
]
