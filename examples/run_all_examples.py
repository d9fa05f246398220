#!/usr/bin/env python3
"""
Run All Examples - Design Pattern Demonstrations

Runs every example script in sequence through the smoke-test runner in
``scripts/smoke_test.py``, which prints a summary and sets the exit code.

Run: python examples/run_all_examples.py
"""

import importlib.util
from pathlib import Path

SMOKE_TEST = Path(__file__).resolve().parent.parent / "scripts" / "smoke_test.py"


def main():
    spec = importlib.util.spec_from_file_location("smoke_test", SMOKE_TEST)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    module.main()


if __name__ == "__main__":
    main()
