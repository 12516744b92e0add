"""Shared-object protocol: use counts, handles, explicit deep copy.

A ``SharedObject`` carries a plain use count (no locking; single thread of
control or external synchronization). A ``SharedHandle`` is a thin wrapper
over one such object or none. Copying a handle shares the object; the only
way to obtain an independent object is ``update(..., share=False)`` (or
``copy.deepcopy``), which calls the object's ``copy`` hook.
"""

from __future__ import annotations

from sharray.errors import SharedArrayContractError
from sharray.guards import guard_unbound


class SharedObject:
    __slots__ = ("_use_count",)

    def __init__(self):
        self._use_count = 0

    @property
    def use_count(self) -> int:
        return self._use_count

    def copy(self) -> "SharedObject":
        """Return an independent object holding a deep copy of this one."""
        raise NotImplementedError

    def dispose(self) -> None:
        """Release resources once the last handle lets go."""

    def _acquire(self) -> None:
        self._use_count += 1

    def _release(self) -> bool:
        self._use_count -= 1
        if self._use_count == 0:
            self.dispose()
            return True
        return False


class SharedHandle:
    __slots__ = ("_object", "_released", "__weakref__")

    def __init__(self, other: "SharedHandle | None" = None):
        self._object = None
        self._released = False
        if other is not None:
            obj = other._object
            if obj is not None:
                obj._acquire()
            self._object = obj

    @property
    def object(self) -> SharedObject | None:
        return self._object

    @property
    def initialized(self) -> bool:
        return self._object is not None

    @property
    def use_count(self) -> int:
        return 0 if self._object is None else self._object.use_count

    def _check_live(self, label: str) -> None:
        if self._released:
            raise SharedArrayContractError(
                "use of a released shared handle", context=label
            )

    def _bind(self, make_object, label: str) -> None:
        """One-time binding to the object returned by ``make_object()``.

        The checks run before ``make_object`` so a rejected bind never
        allocates.
        """
        self._check_live(label)
        guard_unbound(self._object, label)
        obj = make_object()
        obj._acquire()
        self._object = obj

    def _rebind(self, obj: SharedObject | None, label: str) -> None:
        if obj is None and self._object is not None:
            raise SharedArrayContractError(
                "cannot rebind an initialized handle to nothing", context=label
            )
        # Acquire before release so self-assignment never drops to zero.
        if obj is not None:
            obj._acquire()
        old = self._object
        self._object = obj
        if old is not None:
            old._release()

    def assign(self, other: "SharedHandle") -> "SharedHandle":
        """Share ``other``'s object, dropping whatever this handle held."""
        self._check_live("SharedHandle.assign")
        if other._object is not self._object:
            self._rebind(other._object, "SharedHandle.assign")
        return self

    def update(
        self,
        other: "SharedHandle",
        share: bool,
        memo: dict | None = None,
    ) -> "SharedHandle":
        """Rebind to ``other``'s object, or to a deep copy of it.

        With ``share=False`` the object is copied once per ``memo``: handles
        that shared one object before the copy share one new object after it.
        """
        self._check_live("SharedHandle.update")
        obj = other._object
        if obj is not None and not share:
            key = id(obj)
            cached = memo.get(key) if memo is not None else None
            # A memoised copy with no users left has already been disposed.
            if cached is not None and cached.use_count > 0:
                obj = cached
            else:
                obj = obj.copy()
                if memo is not None:
                    memo[key] = obj
        self._rebind(obj, "SharedHandle.update")
        return self

    def release(self) -> None:
        """Drop this handle's reference; the object is disposed at zero."""
        obj = self._object
        self._object = None
        self._released = True
        if obj is not None:
            obj._release()

    def _empty_like(self) -> "SharedHandle":
        return type(self)()

    def __copy__(self):
        return self._empty_like().assign(self)

    def __deepcopy__(self, memo):
        return self._empty_like().update(self, share=False, memo=memo)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __del__(self):
        if getattr(self, "_object", None) is not None:
            self.release()


__all__ = [
    "SharedObject",
    "SharedHandle",
]
