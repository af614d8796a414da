#!/usr/bin/env python3
# tools/bench_decode.py
#
# Decode throughput per conformance vector.
#
#   PARAMSTYLE_BENCH_NUMBER   decodes per timing run (default 20000)
#   PARAMSTYLE_VECTORS_DIR    conformance directory (default ../conformance)

import os, sys, json, timeit

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from paramstyle import Params, ParamType, decode

NUMBER = int(os.environ.get("PARAMSTYLE_BENCH_NUMBER", "20000"))
VECTORS_DIR = os.environ.get("PARAMSTYLE_VECTORS_DIR", os.path.join(ROOT, "conformance"))

SHAPES = {t.name.lower(): t for t in ParamType}

def load_vectors():
    with open(os.path.join(VECTORS_DIR, "conformance_vectors.json"), "r", encoding="utf-8") as f:
        return json.load(f)["vectors"]

def bench_one(vec) -> float:
    raw, style, explode = vec["input"], vec["style"], vec["explode"]
    shape = SHAPES[vec["shape"]]

    def run():
        decode(raw, style, explode, shape, Params())

    best = min(timeit.repeat(run, number=NUMBER, repeat=3))
    return best / NUMBER * 1e9

def main() -> int:
    vectors = load_vectors()
    width = max(len(v["test_id"]) for v in vectors)
    total = 0.0
    for vec in vectors:
        ns = bench_one(vec)
        total += ns
        print("{:<{}}  {:>9.0f} ns/op".format(vec["test_id"], width, ns))
    print("{:<{}}  {:>9.0f} ns/op (mean of {})".format("ALL", width, total / len(vectors), len(vectors)))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
