"""
Pytest configuration and shared fixtures for the adder test suite.
"""

import json
import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'simulator', 'config', ... can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from simulator.binary_adder import build_adder_table  # noqa: E402


@pytest.fixture
def adder_table():
    """The shared binary addition table."""
    return build_adder_table()


@pytest.fixture
def config_file(tmp_path):
    """
    Write a runtime config into a temporary directory.

    Returns:
        callable: overrides -> Path of the written JSON file
    """

    def _write(**overrides):
        config = {
            "max_steps": 10_000,
            "trace": False,
            "trace_format": "text",
            "log_traces": False,
            "output_directory": str(tmp_path / "logs"),
            "log_file_prefix": "test_",
            "default_operands": ["1", "1"],
            "sweep": {"max_bits": 2, "random_cases": 4, "random_bits": 5, "seed": 1, "batch_size": 8},
        }
        config.update(overrides)
        path = tmp_path / "runtime_config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write
