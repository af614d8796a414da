#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Decoding invariants (property tests) over randomly generated parameters.
#
# This runner:
# - generates random parameter names and values from a safe alphabet
# - serializes them by hand for every defined (style, explode)
# - checks the decoded bag against the algebraic invariants below
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, json, random
from typing import Any, Dict, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from paramstyle import TEMPLATES, Params, ParamType, decode, parse

SEED = int(os.environ.get("PARAMSTYLE_SEED", "1337"))
TRIALS = int(os.environ.get("PARAMSTYLE_TRIALS", "2000"))
MAX_NAMES = int(os.environ.get("PARAMSTYLE_GEN_MAX_NAMES", "6"))
MAX_ITEMS = int(os.environ.get("PARAMSTYLE_GEN_MAX_ITEMS", "6"))
MAX_STR = int(os.environ.get("PARAMSTYLE_GEN_MAX_STR", "8"))

random.seed(SEED)

# No delimiter from any template, no brackets: tokens never split by accident.
ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-~"
# Names and object keys share no characters.  The bracket extractor strips
# the base name from the whole parameter name, keys included.
NAME_ALPHABET = "abcdefghijklmnopqrstuvwxyz-~"
KEY_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"

def rand_token(alphabet: str = ALPHABET) -> str:
    return "".join(random.choice(alphabet) for _ in range(random.randint(1, MAX_STR)))

def rand_names() -> List[str]:
    names = [rand_token(NAME_ALPHABET) for _ in range(random.randint(1, MAX_NAMES))]
    return list(dict.fromkeys(names))  # de-dup

def fail(label: str, context: Dict[str, Any]) -> None:
    print("INVARIANT FAIL:", label)
    print("CTX:", json.dumps(context, ensure_ascii=False)[:2000])
    raise SystemExit(1)

def check_empty(names: List[str]) -> None:
    # (1) N bare names -> N None entries, for every style that carries names
    for style, by_explode in TEMPLATES.items():
        for explode, t in by_explode.items():
            if t.kv_sep == "":
                continue
            raw = t.pair_sep + t.pair_sep.join(names)
            got = parse(raw, style, explode, ParamType.EMPTY)
            if got != {n: None for n in names}:
                fail("empty entries", {"style": style, "explode": explode, "raw": raw, "got": got})

def check_primitive(name: str, values: List[str]) -> None:
    # (2) last write wins
    raw = "&".join("{}={}".format(name, v) for v in values)
    got = parse(raw, "form", True, ParamType.PRIMITIVE)
    if got != {name: values[-1]}:
        fail("primitive last-write-wins", {"raw": raw, "got": got})

def check_array(name: str, items: List[str]) -> None:
    # (3) order preserved, packed and exploded agree
    cases = [
        (";{}={}".format(name, ",".join(items)), "matrix", False),
        ("".join(";{}={}".format(name, i) for i in items), "matrix", True),
        ("{}={}".format(name, ",".join(items)), "form", False),
        ("&".join("{}={}".format(name, i) for i in items), "form", True),
    ]
    for raw, style, explode in cases:
        got = parse(raw, style, explode, ParamType.ARRAY)
        if got != {name: items}:
            fail("array order", {"raw": raw, "style": style, "explode": explode, "got": got})

def check_object(name: str, obj: Dict[str, str]) -> None:
    # (4) deepObject merges repeated segments into one map
    raw = "&".join("{}[{}]={}".format(name, k, v) for k, v in obj.items())
    got = parse(raw, "deepObject", True, ParamType.OBJECT)
    if got != {name: obj}:
        fail("deepObject merge", {"raw": raw, "got": got})

    # (5) positional form round trip
    flat = ",".join("{},{}".format(k, v) for k, v in obj.items())
    got = parse("{}={}".format(name, flat), "form", False, ParamType.OBJECT)
    if got != {name: obj}:
        fail("positional object", {"flat": flat, "got": got})

    # (6) splitting one payload over two decodes gives the same map
    items = list(obj.items())
    cut = random.randint(0, len(items))
    bag = Params()
    for part in (items[:cut], items[cut:]):
        if part:
            decode("{}={}".format(name, ",".join("{},{}".format(k, v) for k, v in part)),
                   "form", False, ParamType.OBJECT, bag)
    if bag != {name: obj}:
        fail("object merge across calls", {"cut": cut, "got": bag})

def check_degenerate(name: str, value: str) -> None:
    # (7) unstructured object payload -> scalar, never an empty map
    got = parse("{}={}".format(name, value), "form", True, ParamType.OBJECT)
    if got != {name: value}:
        fail("degenerate object", {"name": name, "value": value, "got": got})

def check_unknown_style(raw: str) -> None:
    # (8) unknown style -> bag unchanged
    bag = Params({"keep": "x"})
    decode(raw, "x" + rand_token(), False, ParamType.PRIMITIVE, bag)
    if bag != {"keep": "x"}:
        fail("unknown style no-op", {"raw": raw, "got": bag})

def main() -> int:
    for _ in range(TRIALS):
        names = rand_names()
        name = names[0]
        values = [rand_token() for _ in range(random.randint(1, MAX_ITEMS))]
        obj = {rand_token(KEY_ALPHABET): rand_token() for _ in range(random.randint(1, MAX_ITEMS))}

        check_empty(names)
        check_primitive(name, values)
        check_array(name, values)
        check_object(name, obj)
        check_degenerate(name, values[0])
        check_unknown_style("{}={}".format(name, values[0]))

    print(f"OK: invariants passed for TRIALS={TRIALS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
