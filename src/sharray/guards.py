"""Contract checks for shared arrays.

Violations are programming errors. The checks are off unless switched on
through the environment (tests switch them on in conftest), so a release run
pays nothing for them and out-of-contract calls have unspecified results.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from sharray.errors import SharedArrayContractError
from sharray.protocols import GuardBoundFn, GuardIndexFn

TEST_GUARDS = os.environ.get("SHARRAY_TEST_GUARDS", "").strip().lower() in (
    "1",
    "true",
    "yes",
    "on",
)
INDEX_GUARD = TEST_GUARDS or os.environ.get(
    "SHARRAY_INDEX_GUARD", ""
).strip().lower() in (
    "1",
    "true",
    "yes",
    "on",
)
STATE_GUARD = TEST_GUARDS or os.environ.get(
    "SHARRAY_STATE_GUARD", ""
).strip().lower() in (
    "1",
    "true",
    "yes",
    "on",
)


@dataclass(frozen=True, slots=True)
class GuardConfig:
    """Guard DI bundle; ``None`` toggles fall back to the environment."""

    index_guard: Optional[bool] = None
    state_guard: Optional[bool] = None
    guard_index_fn: GuardIndexFn | None = None
    guard_bound_fn: GuardBoundFn | None = None


DEFAULT_GUARD_CONFIG = GuardConfig()


def guard_index(index: int, size: int, label: str, guard=None) -> None:
    if guard is None:
        guard = INDEX_GUARD
    if not guard:
        return
    if index < 0 or index >= size:
        raise SharedArrayContractError(
            "index out of bounds", context=label, index=index, size=size
        )


def guard_bound(obj, label: str, guard=None) -> None:
    if guard is None:
        guard = STATE_GUARD
    if not guard:
        return
    if obj is None:
        raise SharedArrayContractError(
            "use of an uninitialized shared array", context=label
        )


def guard_unbound(obj, label: str) -> None:
    # One-time initialization is enforced regardless of the guard toggles:
    # rebinding would silently drop a reference.
    if obj is not None:
        raise SharedArrayContractError(
            "shared array is already initialized", context=label
        )


def guard_count(count: int, label: str) -> None:
    if count < 0:
        raise SharedArrayContractError(
            f"element count must be non-negative, got {count}", context=label
        )


def guard_index_cfg(
    index: int,
    size: int,
    label: str,
    *,
    cfg: GuardConfig = DEFAULT_GUARD_CONFIG,
) -> None:
    fn = cfg.guard_index_fn or guard_index
    fn(index, size, label, guard=cfg.index_guard)


def guard_bound_cfg(
    obj,
    label: str,
    *,
    cfg: GuardConfig = DEFAULT_GUARD_CONFIG,
) -> None:
    fn = cfg.guard_bound_fn or guard_bound
    fn(obj, label, guard=cfg.state_guard)


__all__ = [
    "TEST_GUARDS",
    "INDEX_GUARD",
    "STATE_GUARD",
    "GuardConfig",
    "DEFAULT_GUARD_CONFIG",
    "guard_index",
    "guard_bound",
    "guard_unbound",
    "guard_count",
    "guard_index_cfg",
    "guard_bound_cfg",
]
