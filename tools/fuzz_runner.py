#!/usr/bin/env python3
# tools/fuzz_runner.py
#
# Robustness fuzzing for the decoder.
#
# Generates three fuzz categories:
#   A) delimiter-heavy inputs under every defined (style, explode, shape)
#   B) random printable inputs under random (possibly unknown) styles and shapes
#   C) deepObject names with random bracket nesting
#
# Fail-soft decoding must never raise, and every bag value must be one of
# None, str, list[str] or dict[str, str].  Any violation prints a minimal
# repro payload and exits non-zero.

import os, sys, json, random
from typing import Any, Dict

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from paramstyle import STYLES, TEMPLATES, Params, ParamType, decode

SEED = int(os.environ.get("PARAMSTYLE_SEED", "4242"))
ROUNDS = int(os.environ.get("PARAMSTYLE_FUZZ_ROUNDS", "5000"))

random.seed(SEED)

DELIMS = [";", "=", ",", ".", "&", "|", "%20", "[", "]", ""]

def failure(label: str, ctx: Dict[str, Any]) -> None:
    print("FAIL:", label)
    print("CTX:", json.dumps(ctx, ensure_ascii=False, default=repr)[:4000])
    raise SystemExit(1)

def well_typed(v: Any) -> bool:
    if v is None or isinstance(v, str):
        return True
    if isinstance(v, list):
        return all(isinstance(x, str) for x in v)
    if isinstance(v, dict):
        return all(isinstance(k, str) and isinstance(x, str) for k, x in v.items())
    return False

# --- generators ---

def rand_ascii(nmax: int) -> str:
    n = random.randint(0, nmax)
    return "".join(chr(random.randint(0x20, 0x7E)) for _ in range(n))

def rand_delimited() -> str:
    parts = []
    for _ in range(random.randint(0, 12)):
        if random.random() < 0.5:
            parts.append(random.choice(DELIMS))
        else:
            parts.append(rand_ascii(4))
    return "".join(parts)

def rand_bracket_name() -> str:
    name = rand_ascii(4).replace("[", "").replace("]", "")
    for _ in range(random.randint(0, 4)):
        inner = "".join(random.choice("abcXYZ019_") for _ in range(random.randint(0, 3)))
        name += "[" + inner + "]"
    if random.random() < 0.2:
        name += random.choice(["[", "]", "]["])
    return name

def run(raw: str, style: str, explode: bool, shape: Any, label: str) -> None:
    bag = Params()
    ctx = {"raw": raw, "style": style, "explode": explode, "shape": shape}
    try:
        decode(raw, style, explode, shape, bag)
    except Exception as e:
        ctx["error"] = repr(e)
        failure(label + " raised", ctx)
    for name, v in bag.items():
        if not isinstance(name, str) or not well_typed(v):
            ctx["got"] = dict(bag)
            failure(label + " ill-typed value", ctx)

def main() -> int:
    defined = [(s, e) for s, by in TEMPLATES.items() for e in by]
    for _ in range(ROUNDS):
        r = random.random()

        # A) structured-looking input, defined templates
        if r < 0.50:
            style, explode = random.choice(defined)
            run(rand_delimited(), style, explode, random.choice(list(ParamType)), "A")
            continue

        # B) anything goes
        if r < 0.80:
            style = random.choice(list(STYLES) + ["", "bogus", "MATRIX"])
            shape = random.choice(list(ParamType) + [-1, 4, 99])
            run(rand_ascii(24), style, random.random() < 0.5, shape, "B")
            continue

        # C) deepObject bracket nesting
        segs = ["{}={}".format(rand_bracket_name(), rand_ascii(4).replace("&", ""))
                for _ in range(random.randint(1, 4))]
        run("&".join(segs), "deepObject", True, ParamType.OBJECT, "C")

    print(f"OK: fuzz rounds={ROUNDS} seed={SEED} (no failures)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
