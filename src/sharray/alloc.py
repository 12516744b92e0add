"""Host allocator boundary for array stores.

Buffers are raw: ``numpy.empty`` reserves the slots without initializing
them, so callers must write a slot before reading it. Allocation failure is
fatal here; nothing is retried.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import numpy as np

from sharray.errors import SharedArrayAllocError, SharedArrayConfigError
from sharray.metrics import _alloc_metrics_buffer
from sharray.protocols import AllocFn, FreeFn


@dataclass(frozen=True, slots=True)
class AllocConfig:
    """Allocator DI bundle (host-side)."""

    alloc_fn: AllocFn | None = None
    free_fn: FreeFn | None = None
    limit_bytes: Optional[int] = None


DEFAULT_ALLOC_CONFIG = AllocConfig()


def _env_limit_bytes() -> int | None:
    value = os.environ.get("SHARRAY_ALLOC_LIMIT_BYTES", "").strip()
    if not value:
        return None
    if not value.isdigit():
        raise SharedArrayConfigError(name="SHARRAY_ALLOC_LIMIT_BYTES", value=value)
    return int(value)


def _numpy_alloc(count: int, dtype: np.dtype) -> np.ndarray:
    return np.empty((count,), dtype=dtype)


def alloc_raw(
    count: int, dtype, *, cfg: AllocConfig = DEFAULT_ALLOC_CONFIG
) -> np.ndarray:
    """Reserve ``count`` uninitialized slots of ``dtype`` (``count > 0``)."""
    dtype = np.dtype(dtype)
    nbytes = int(count) * dtype.itemsize
    limit = cfg.limit_bytes if cfg.limit_bytes is not None else _env_limit_bytes()
    if limit is not None and nbytes > limit:
        raise SharedArrayAllocError(count=count, nbytes=nbytes, limit=limit)
    alloc_fn = cfg.alloc_fn or _numpy_alloc
    try:
        buffer = alloc_fn(count, dtype)
    except MemoryError as exc:
        raise SharedArrayAllocError(count=count, nbytes=nbytes) from exc
    _alloc_metrics_buffer(buffer.nbytes)
    return buffer


def free_raw(buffer: np.ndarray, *, cfg: AllocConfig = DEFAULT_ALLOC_CONFIG) -> None:
    if cfg.free_fn is not None:
        cfg.free_fn(buffer)
    _alloc_metrics_buffer(buffer.nbytes, freed=True)


__all__ = [
    "AllocConfig",
    "DEFAULT_ALLOC_CONFIG",
    "alloc_raw",
    "free_raw",
]
