from __future__ import annotations

from functools import partial
from typing import Iterable, Iterator

import jax
import jax.numpy as jnp
import numpy as np

from sharray.config import DEFAULT_CONFIG, SharedArrayConfig
from sharray.guards import guard_bound_cfg
from sharray.store import ArrayStore
from sharray.refcount import SharedHandle


class SharedArray(SharedHandle):
    """Reference-counted array handle.

    ``SharedArray()`` is uninitialized; ``SharedArray(n)`` binds a fresh store
    of ``n`` elements; ``SharedArray(other)`` shares ``other``'s store. Writes
    through any handle are visible through every handle on the same store.
    Sharing is only broken explicitly, with ``copy()``.
    """

    __slots__ = ("_cfg",)

    def __init__(
        self,
        source=None,
        dtype=None,
        *,
        cfg: SharedArrayConfig | None = None,
    ):
        if isinstance(source, SharedArray):
            if dtype is not None:
                raise TypeError(
                    "dtype cannot be given when sharing another SharedArray"
                )
            super().__init__(source)
            self._cfg = source._cfg if cfg is None else cfg
            return
        super().__init__()
        self._cfg = DEFAULT_CONFIG if cfg is None else cfg
        if source is not None:
            self.init(source, dtype)

    def init(self, count, dtype=None) -> "SharedArray":
        """Bind this (uninitialized) handle to a fresh store of ``count``."""
        self._bind(
            partial(ArrayStore, count, dtype, cfg=self._cfg), "SharedArray.init"
        )
        return self

    @classmethod
    def from_values(
        cls,
        values: Iterable,
        dtype=None,
        *,
        cfg: SharedArrayConfig | None = None,
    ) -> "SharedArray":
        values = list(values)
        arr = cls(len(values), dtype, cfg=cfg)
        for i, value in enumerate(values):
            arr[i] = value
        return arr

    def _store(self, label: str) -> ArrayStore:
        guard_bound_cfg(self._object, label, cfg=self._cfg.guard_cfg)
        return self._object

    @property
    def dtype(self) -> np.dtype:
        return self._store("SharedArray.dtype").dtype

    def size(self) -> int:
        return self._store("SharedArray.size").size()

    def __bool__(self) -> bool:
        # Truthiness reports binding, not emptiness.
        return self._object is not None

    def __len__(self) -> int:
        return self._store("SharedArray.__len__").size()

    def __getitem__(self, index):
        return self._store("SharedArray.__getitem__")[index]

    def __setitem__(self, index, value) -> None:
        self._store("SharedArray.__setitem__")[index] = value

    def __iter__(self) -> Iterator:
        store = self._store("SharedArray.__iter__")
        for i in range(store.size()):
            yield store[i]

    def copy(self) -> "SharedArray":
        """Return a handle on an independent deep copy of this array."""
        out = self._empty_like()
        out._bind(self._store("SharedArray.copy").copy, "SharedArray.copy")
        return out

    def shares_with(self, other: "SharedArray") -> bool:
        return self._object is not None and self._object is other._object

    def tolist(self) -> list:
        elements = self._store("SharedArray.tolist").elements
        if elements is None:
            return []
        return elements.tolist()

    def to_device(self) -> jnp.ndarray:
        """Snapshot the elements into a jax array (numeric dtypes only)."""
        store = self._store("SharedArray.to_device")
        if store.dtype.hasobject:
            raise TypeError("to_device requires a numeric dtype, got object")
        if jax.dtypes.canonicalize_dtype(store.dtype) != store.dtype:
            raise TypeError(
                f"jax cannot hold {store.dtype} without narrowing; "
                "enable jax_enable_x64 or use a 32-bit dtype"
            )
        if store.elements is None:
            return jnp.zeros((0,), dtype=store.dtype)
        return jnp.array(store.elements, dtype=store.dtype)

    def _empty_like(self) -> "SharedArray":
        return type(self)(cfg=self._cfg)

    def __repr__(self) -> str:
        if self._object is None:
            return "SharedArray(<uninitialized>)"
        return (
            f"SharedArray({self.tolist()!r}, dtype={self._object.dtype}, "
            f"use_count={self._object.use_count})"
        )


__all__ = ["SharedArray"]
