from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SharedArrayContractError(AssertionError):
    """Precondition breach: bad index, wrong handle state, bad count."""

    message: str
    context: str | None = None
    index: int | None = None
    size: int | None = None

    def __str__(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append(f"in {self.context}")
        if self.index is not None and self.size is not None:
            parts.append(f"(index={self.index}, size={self.size})")
        return " ".join(parts)


@dataclass(frozen=True)
class SharedArrayAllocError(MemoryError):
    count: int
    nbytes: int
    limit: int | None = None

    def __str__(self) -> str:
        if self.limit is not None:
            return (
                f"cannot allocate {self.count} elements ({self.nbytes} bytes): "
                f"exceeds limit of {self.limit} bytes"
            )
        return f"cannot allocate {self.count} elements ({self.nbytes} bytes)"


@dataclass(frozen=True)
class SharedArrayConfigError(ValueError):
    name: str
    value: object

    def __str__(self) -> str:
        return f"invalid value for {self.name}: {self.value!r}"


__all__ = [
    "SharedArrayContractError",
    "SharedArrayAllocError",
    "SharedArrayConfigError",
]
