"""paramstyle parameter bag — declared shapes and the default bag.

The decoder never builds a bag; it only mutates one the caller hands in.
Anything with get/set/add methods works (see ParameterBag).  Params is the
ready-made dict-backed implementation.

Decoded values form a closed set:

    None              EMPTY: the parameter is present, nothing more
    str               PRIMITIVE, or an object without internal structure
    list[str]         ARRAY: appearance order
    dict[str, str]    OBJECT: last write wins per key
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable

Value = Union[None, str, List[str], Dict[str, str]]


class ParamType(IntEnum):
    """Declared shape of a parameter, taken from its schema."""

    EMPTY = 0
    PRIMITIVE = 1
    ARRAY = 2
    OBJECT = 3


@runtime_checkable
class ParameterBag(Protocol):
    def get(self, name: str) -> Any: ...

    def set(self, name: str, value: Value) -> None: ...

    def add(self, name: str, value: str) -> None: ...


class Params(Dict[str, Value]):
    """Default parameter bag: a dict of name → decoded value.

    Not synchronized.  Share one instance across threads only under the
    caller's own lock.
    """

    def set(self, name: str, value: Value) -> None:
        """Overwrite the value at `name`.

        A list never silently turns back into a scalar: a string written
        over a list is appended to it instead.
        """
        current = dict.get(self, name)
        if isinstance(current, list) and isinstance(value, str):
            current.append(value)
            return
        self[name] = value

    def add(self, name: str, value: str) -> None:
        """Append to the list at `name`, creating it on first use."""
        current = dict.get(self, name)
        if not isinstance(current, list):
            current = []
            self[name] = current
        current.append(value)

    def __repr__(self) -> str:
        return "Params({})".format(dict.__repr__(self))


def coerce_shape(shape: Any) -> Optional[ParamType]:
    """Map a ParamType or its int value to ParamType; None if it is neither."""
    if isinstance(shape, bool):
        return None
    try:
        return ParamType(shape)
    except (TypeError, ValueError):
        return None
