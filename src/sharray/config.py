from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sharray.alloc import DEFAULT_ALLOC_CONFIG, AllocConfig
from sharray.guards import DEFAULT_GUARD_CONFIG, GuardConfig


@dataclass(frozen=True, slots=True)
class SharedArrayConfig:
    """Array-level DI bundle (guards + allocator + element type)."""

    guard_cfg: GuardConfig = DEFAULT_GUARD_CONFIG
    alloc_cfg: AllocConfig = DEFAULT_ALLOC_CONFIG
    dtype: object = object

    def __post_init__(self):
        object.__setattr__(self, "dtype", np.dtype(self.dtype))


DEFAULT_CONFIG = SharedArrayConfig()


__all__ = [
    "SharedArrayConfig",
    "DEFAULT_CONFIG",
]
