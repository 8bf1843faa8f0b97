"""pytest-benchmark configuration for combparse benchmarks.

Configures benchmark defaults and custom options.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from combparse.constants import BENCHMARK_DEPTH
from combparse.generator import random_expression


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add combparse metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "combparse"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def benchmark_config():
    """Configure pytest-benchmark parameters."""
    return {
        "min_rounds": 5,  # Minimum rounds for stable results
        "max_time": 1.0,  # 1 second maximum time
        "warmup": True,  # Warmup before timing
    }


@pytest.fixture(scope="session")
def benchmark_expression() -> str:
    """The deterministic depth-20 expression (41137 characters)."""
    return random_expression(BENCHMARK_DEPTH)
