"""paramstyle core — the decoder and the deepObject bracket extractor.

One pass over the raw string: cut it into segments at the pair separator,
cut each segment into name and value, then let the declared shape decide
what lands in the bag.  The raw bytes never change which path runs.

Three places where the grammar is ambiguous, and what we do about it:

  * Exploded label/simple styles have an empty name/value separator, so a
    segment carries no parameter name at all.  Its value is stored under
    the empty name "".
  * Exploded matrix/form objects put each property in its own segment
    (";R=100;G=200").  Each property therefore arrives as a top-level
    name whose payload has no structure, and is stored as a scalar.
  * deepObject hides the object keys in the name ("color[R]=100").  The
    bracket extractor moves the key back into the value before the object
    is split.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from ._constants import BRACKET_GROUP, BRACKET_KV_JOIN
from ._errors import ERR_SHAPE, ERR_UNKNOWN_EXPLODE, ERR_UNKNOWN_STYLE, ParamError
from ._params import ParameterBag, ParamType, coerce_shape
from ._styles import StyleTemplate, is_known_style, lookup_template

logger = logging.getLogger(__name__)


# ── Bracket extractor ─────────────────────────────────────────
# Only one level is unpacked.  "bonzo[ok][a][b]" keeps its interior
# brackets and becomes the single key "ok][a][b" under "bonzo".

def extract_bracket_key(name: str, value: str) -> Tuple[str, str]:
    """Rewrite a bracket-qualified (name, value) as (base, "key=value").

    Names without a bracket group come back unchanged.
    """
    if not BRACKET_GROUP.search(name):
        return name, value
    base = BRACKET_GROUP.sub("", name)
    stripped = name.replace(base, "")[1:]
    if not stripped:
        return name, value
    return base, stripped[:-1] + BRACKET_KV_JOIN + value


# ── Segment splitting ─────────────────────────────────────────

def _split_segment(segment: str, kv_sep: str) -> Tuple[str, str]:
    # An empty separator matches at offset 0: no name, whole segment is value.
    if kv_sep == "":
        return "", segment
    name, _, value = segment.partition(kv_sep)
    return name, value


def _decode_array(bag: ParameterBag, name: str, value: str, tmpl: StyleTemplate) -> None:
    if tmpl.array_sep == "":
        bag.add(name, value)
        return
    for item in value.split(tmpl.array_sep):
        bag.add(name, item)


def _decode_object(bag: ParameterBag, name: str, value: str, tmpl: StyleTemplate) -> None:
    name, value = extract_bracket_key(name, value)

    tuples = value.split(tmpl.tuple_sep)
    # "" is contained in every string, so positional styles never fall back.
    if len(tuples) <= 1 and tmpl.object_kv_sep not in value:
        bag.set(name, value)
        return

    obj = bag.get(name)
    if not isinstance(obj, dict):
        obj = {}
    _fill_object(obj, tuples, tmpl.object_kv_sep)
    bag.set(name, obj)


def _fill_object(obj: Dict[str, str], tuples: List[str], kv_sep: str) -> None:
    if kv_sep == "":
        # Positional: key, value, key, value, ...  A dangling key is dropped.
        for i in range(len(tuples) // 2):
            obj[tuples[2 * i]] = tuples[2 * i + 1]
        return
    for tup in tuples:
        key, _, val = tup.partition(kv_sep)
        obj[key] = val


# ── Public entry point ────────────────────────────────────────

def decode(raw: str, style: str, explode: bool, shape: Any, bag: ParameterBag,
           *, strict: bool = False) -> None:
    """Decode `raw` serialized in (style, explode) into `bag`.

    `shape` is a ParamType (or its int value).  An undefined style/explode
    combination or an unknown shape leaves the bag untouched; with
    strict=True it raises ParamError instead.
    """
    tmpl = lookup_template(style, explode)
    if tmpl is None:
        if is_known_style(style):
            code = ERR_UNKNOWN_EXPLODE
            msg = "style {!r} has no template for explode={}".format(style, bool(explode))
        else:
            code = ERR_UNKNOWN_STYLE
            msg = "unknown style {!r}".format(style)
        if strict:
            raise ParamError(code, msg)
        logger.debug("paramstyle: %s, nothing decoded", msg)
        return

    typ = coerce_shape(shape)
    if typ is None:
        msg = "unknown declared shape {!r}".format(shape)
        if strict:
            raise ParamError(ERR_SHAPE, msg)
        logger.debug("paramstyle: %s, nothing decoded", msg)
        return

    rest = raw
    while rest:
        segment, _, rest = rest.partition(tmpl.pair_sep)
        if not segment:
            continue
        name, value = _split_segment(segment, tmpl.kv_sep)

        if typ is ParamType.EMPTY:
            bag.set(name, None)
        elif typ is ParamType.PRIMITIVE:
            bag.set(name, value)
        elif typ is ParamType.ARRAY:
            _decode_array(bag, name, value, tmpl)
        else:
            _decode_object(bag, name, value, tmpl)
