"""paramstyle — decode OpenAPI v3 style-serialized parameters.

Turn a path, query or header string into structured values according to
the parameter's style, explode flag and declared shape.

Quick start:
    >>> from paramstyle import ParamType, parse
    >>> parse("color=blue&color=black", "form", True, ParamType.ARRAY)
    Params({'color': ['blue', 'black']})
    >>> parse("color[R]=100&color[G]=200", "deepObject", True, ParamType.OBJECT)
    Params({'color': {'R': '100', 'G': '200'}})

Decoding never fails by default: an unknown style decodes to nothing.
Pass strict=True to get a ParamError instead:
    >>> parse("x=y", "bogus")
    Params({})
"""

from __future__ import annotations

from typing import Any

from ._constants import (
    STYLE_DEEP_OBJECT,
    STYLE_FORM,
    STYLE_LABEL,
    STYLE_MATRIX,
    STYLE_PIPE_DELIMITED,
    STYLE_SIMPLE,
    STYLE_SPACE_DELIMITED,
    STYLES,
)
from ._core import decode, extract_bracket_key
from ._errors import (
    ERR_SHAPE,
    ERR_UNKNOWN_EXPLODE,
    ERR_UNKNOWN_STYLE,
    ParamError,
)
from ._params import ParameterBag, Params, ParamType, Value
from ._styles import TEMPLATES, StyleTemplate, is_known_style, lookup_template

__version__ = "1.0.0"

__all__ = [
    # Public API functions
    "decode",
    "parse",
    "lookup_template",
    "is_known_style",
    "extract_bracket_key",
    # Types
    "Params",
    "ParameterBag",
    "ParamType",
    "StyleTemplate",
    "Value",
    "TEMPLATES",
    # Styles
    "STYLES",
    "STYLE_MATRIX",
    "STYLE_LABEL",
    "STYLE_FORM",
    "STYLE_SIMPLE",
    "STYLE_SPACE_DELIMITED",
    "STYLE_PIPE_DELIMITED",
    "STYLE_DEEP_OBJECT",
    # Exception
    "ParamError",
    # Error codes
    "ERR_UNKNOWN_STYLE",
    "ERR_UNKNOWN_EXPLODE",
    "ERR_SHAPE",
]


def parse(raw: str, style: str, explode: bool = False,
          shape: Any = ParamType.PRIMITIVE, *, strict: bool = False) -> Params:
    """Decode `raw` into a fresh Params bag and return it."""
    bag = Params()
    decode(raw, style, explode, shape, bag, strict=strict)
    return bag
