import os
import sys

import pytest

# Enable contract guards and allocation counters in tests unless explicitly
# overridden.
os.environ.setdefault("SHARRAY_TEST_GUARDS", "1")
os.environ.setdefault("SHARRAY_ALLOC_METRICS", "1")

import jax

# Ensure src/ is importable when the package is not installed.
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
if os.path.isdir(SRC) and SRC not in sys.path:
    sys.path.insert(0, SRC)

from sharray import metrics  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_alloc_metrics():
    metrics.alloc_metrics_reset()
    yield
    metrics.alloc_metrics_reset()


@pytest.fixture(autouse=True)
def _set_default_device():
    with jax.default_device(jax.devices("cpu")[0]):
        yield


@pytest.fixture
def live_metrics():
    """Return a callable reading the allocation counters."""
    if not metrics._alloc_metrics_enabled():
        pytest.skip("SHARRAY_ALLOC_METRICS disabled")
    return metrics.alloc_metrics_get
