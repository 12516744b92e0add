from __future__ import annotations

from dataclasses import dataclass

import jax
import numpy as np


@dataclass(frozen=True)
class HostInt:
    v: int

    def __int__(self) -> int:
        return int(self.v)

    def __index__(self) -> int:
        return int(self.v)


def _host_int(value) -> HostInt:
    """Pull an index or count onto the host as a plain int.

    Accepts Python ints, numpy integer scalars and jax scalars coming out of
    device computations. Bools are rejected: ``a[True]`` is never meant.
    """
    if isinstance(value, HostInt):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("expected an integer index, got bool")
    if isinstance(value, int):
        return HostInt(value)
    host = jax.device_get(value)
    if getattr(host, "shape", ()) != ():
        raise TypeError(f"expected a scalar index, got shape {host.shape}")
    if np.issubdtype(np.asarray(host).dtype, np.bool_):
        raise TypeError("expected an integer index, got bool")
    if not np.issubdtype(np.asarray(host).dtype, np.integer):
        raise TypeError(f"expected an integer index, got {type(value).__name__}")
    return HostInt(int(host))


def _host_int_value(value) -> int:
    return int(_host_int(value))


__all__ = [
    "HostInt",
    "_host_int",
    "_host_int_value",
]
