"""paramstyle style templates — the (style, explode) delimiter table.

Every defined combination maps to exactly five delimiters:

    pair_sep       splits the raw input into independent name/value segments
    kv_sep         splits a segment into name and value
    array_sep      splits a packed array value; "" = one segment per element
    tuple_sep      splits an object payload into tuples
    object_kv_sep  splits a tuple into key and value; "" = positional pairs

Combinations missing from the table (spaceDelimited exploded, deepObject
not exploded, any unknown style) are undefined, and decoding them is a
no-op rather than an error.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

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


class StyleTemplate(NamedTuple):
    pair_sep: str
    kv_sep: str
    array_sep: str
    tuple_sep: str
    object_kv_sep: str


# ── The table ─────────────────────────────────────────────────
# Read-only after import.  Keyed by style, then by explode flag.

TEMPLATES: Mapping[str, Mapping[bool, StyleTemplate]] = MappingProxyType({
    STYLE_MATRIX: MappingProxyType({
        False: StyleTemplate(";", "=", ",", ",", ""),
        True: StyleTemplate(";", "=", "", ";", "="),
    }),
    STYLE_LABEL: MappingProxyType({
        False: StyleTemplate(".", ".", ".", ".", ""),
        True: StyleTemplate(".", "", ".", "=", ""),
    }),
    STYLE_FORM: MappingProxyType({
        False: StyleTemplate("&", "=", ",", ",", ""),
        True: StyleTemplate("&", "=", "", "&", "="),
    }),
    STYLE_SIMPLE: MappingProxyType({
        False: StyleTemplate(",", ",", "", ",", ""),
        True: StyleTemplate(",", "", "", ",", "="),
    }),
    STYLE_SPACE_DELIMITED: MappingProxyType({
        False: StyleTemplate("%20", "%20", "%20", "%20", "%20"),
    }),
    STYLE_PIPE_DELIMITED: MappingProxyType({
        False: StyleTemplate("|", "|", "|", "|", "|"),
    }),
    STYLE_DEEP_OBJECT: MappingProxyType({
        True: StyleTemplate("&", "=", "", "&", "="),
    }),
})


def is_known_style(style: str) -> bool:
    return style in STYLES


def lookup_template(style: str, explode: bool) -> Optional[StyleTemplate]:
    """Return the delimiter set for (style, explode), or None if undefined."""
    by_explode = TEMPLATES.get(style)
    if by_explode is None:
        return None
    return by_explode.get(bool(explode))
