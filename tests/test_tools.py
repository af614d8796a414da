"""Smoke tests for the scripts under tools/.

Each runner is loaded by path (tools/ is not a package) with a small trial
count and must exit 0.
"""

from __future__ import annotations

import importlib.util
import os
import sys
import unittest
from unittest import mock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

_TOOLS = os.path.join(os.path.dirname(__file__), "..", "tools")


def _load(name: str, env: dict):
    path = os.path.join(_TOOLS, name + ".py")
    spec = importlib.util.spec_from_file_location("paramstyle_tools_" + name, path)
    mod = importlib.util.module_from_spec(spec)
    with mock.patch.dict(os.environ, env):
        spec.loader.exec_module(mod)
    return mod


class TestInvariantsRunner(unittest.TestCase):
    def test_passes(self):
        mod = _load("invariants_runner", {"PARAMSTYLE_TRIALS": "50", "PARAMSTYLE_SEED": "7"})
        self.assertEqual(mod.TRIALS, 50)
        with mock.patch("builtins.print"):
            self.assertEqual(mod.main(), 0)


class TestFuzzRunner(unittest.TestCase):
    def test_passes(self):
        mod = _load("fuzz_runner", {"PARAMSTYLE_FUZZ_ROUNDS": "300"})
        with mock.patch("builtins.print"):
            self.assertEqual(mod.main(), 0)

    def test_well_typed(self):
        mod = _load("fuzz_runner", {"PARAMSTYLE_FUZZ_ROUNDS": "1"})
        self.assertTrue(mod.well_typed({"a": "b"}))
        self.assertTrue(mod.well_typed(["a"]))
        self.assertTrue(mod.well_typed(None))
        self.assertFalse(mod.well_typed(1))
        self.assertFalse(mod.well_typed({"a": 1}))


class TestBench(unittest.TestCase):
    def test_runs(self):
        mod = _load("bench_decode", {"PARAMSTYLE_BENCH_NUMBER": "2"})
        with mock.patch("builtins.print") as p:
            self.assertEqual(mod.main(), 0)
        self.assertTrue(p.called)


if __name__ == "__main__":
    unittest.main()
