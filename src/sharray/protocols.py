from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class AllocFn(Protocol):
    def __call__(self, count: int, dtype: np.dtype) -> np.ndarray:
        ...


@runtime_checkable
class FreeFn(Protocol):
    def __call__(self, buffer: np.ndarray) -> None:
        ...


@runtime_checkable
class GuardIndexFn(Protocol):
    def __call__(self, index: int, size: int, label: str, guard=None) -> None:
        ...


@runtime_checkable
class GuardBoundFn(Protocol):
    def __call__(self, obj, label: str, guard=None) -> None:
        ...


__all__ = [
    "AllocFn",
    "FreeFn",
    "GuardIndexFn",
    "GuardBoundFn",
]
