from __future__ import annotations

import copy as _copy

import numpy as np

from sharray.alloc import alloc_raw, free_raw
from sharray.config import DEFAULT_CONFIG, SharedArrayConfig
from sharray.errors import SharedArrayContractError
from sharray.guards import guard_count, guard_index_cfg
from sharray.host import _host_int_value
from sharray.metrics import _alloc_metrics_copy, _alloc_metrics_store
from sharray.refcount import SharedObject


class ArrayStore(SharedObject):
    """Fixed-length element buffer shared by ``SharedArray`` handles.

    ``count`` is fixed at construction. Slots are reserved, not initialized;
    a zero-length store holds no buffer and never touches the allocator.
    """

    __slots__ = ("_n", "_dtype", "_elements", "_cfg", "_disposed")

    def __init__(
        self,
        count,
        dtype=None,
        *,
        cfg: SharedArrayConfig = DEFAULT_CONFIG,
    ):
        super().__init__()
        n = _host_int_value(count)
        guard_count(n, "ArrayStore")
        self._n = n
        self._dtype = cfg.dtype if dtype is None else np.dtype(dtype)
        self._cfg = cfg
        self._disposed = False
        self._elements = (
            alloc_raw(n, self._dtype, cfg=cfg.alloc_cfg) if n > 0 else None
        )
        _alloc_metrics_store(created=True)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def elements(self) -> np.ndarray | None:
        """Read-only view of the buffer (``None`` for a zero-length store)."""
        if self._elements is None:
            return None
        view = self._elements.view()
        view.flags.writeable = False
        return view

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, index):
        i = _host_int_value(index)
        guard_index_cfg(i, self._n, "ArrayStore.__getitem__", cfg=self._cfg.guard_cfg)
        return self._elements[i]

    def __setitem__(self, index, value) -> None:
        i = _host_int_value(index)
        guard_index_cfg(i, self._n, "ArrayStore.__setitem__", cfg=self._cfg.guard_cfg)
        self._elements[i] = value

    def copy(self) -> "ArrayStore":
        o = ArrayStore(self._n, self._dtype, cfg=self._cfg)
        if self._n > 0:
            try:
                if self._dtype.hasobject:
                    for i in range(self._n - 1, -1, -1):
                        o._elements[i] = _copy.copy(self._elements[i])
                else:
                    np.copyto(o._elements, self._elements)
            except Exception:
                o.dispose()
                raise
        _alloc_metrics_copy()
        return o

    def dispose(self) -> None:
        if self._disposed:
            raise SharedArrayContractError(
                "array store disposed twice", context="ArrayStore.dispose"
            )
        self._disposed = True
        if self._n > 0:
            if self._dtype.hasobject:
                for i in range(self._n - 1, -1, -1):
                    self._elements[i] = None
            free_raw(self._elements, cfg=self._cfg.alloc_cfg)
            self._elements = None
        _alloc_metrics_store(created=False)


__all__ = ["ArrayStore"]
