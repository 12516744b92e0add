import os

_alloc_metrics_allocs = 0
_alloc_metrics_frees = 0
_alloc_metrics_bytes_live = 0
_alloc_metrics_stores_live = 0
_alloc_metrics_copies = 0


def _alloc_metrics_enabled():
    value = os.environ.get("SHARRAY_ALLOC_METRICS", "").strip().lower()
    return value in ("1", "true", "yes", "on")


def alloc_metrics_reset():
    global _alloc_metrics_allocs
    global _alloc_metrics_frees
    global _alloc_metrics_bytes_live
    global _alloc_metrics_stores_live
    global _alloc_metrics_copies
    _alloc_metrics_allocs = 0
    _alloc_metrics_frees = 0
    _alloc_metrics_bytes_live = 0
    _alloc_metrics_stores_live = 0
    _alloc_metrics_copies = 0


def alloc_metrics_get():
    if not _alloc_metrics_enabled():
        return {
            "allocs": 0,
            "frees": 0,
            "bytes_live": 0,
            "stores_live": 0,
            "copies": 0,
        }
    return {
        "allocs": int(_alloc_metrics_allocs),
        "frees": int(_alloc_metrics_frees),
        "bytes_live": int(_alloc_metrics_bytes_live),
        "stores_live": int(_alloc_metrics_stores_live),
        "copies": int(_alloc_metrics_copies),
    }


def _alloc_metrics_buffer(nbytes, freed=False):
    global _alloc_metrics_allocs
    global _alloc_metrics_frees
    global _alloc_metrics_bytes_live
    if not _alloc_metrics_enabled():
        return
    if freed:
        _alloc_metrics_frees += 1
        _alloc_metrics_bytes_live -= int(nbytes)
    else:
        _alloc_metrics_allocs += 1
        _alloc_metrics_bytes_live += int(nbytes)


def _alloc_metrics_store(created=True):
    global _alloc_metrics_stores_live
    if not _alloc_metrics_enabled():
        return
    _alloc_metrics_stores_live += 1 if created else -1


def _alloc_metrics_copy():
    global _alloc_metrics_copies
    if not _alloc_metrics_enabled():
        return
    _alloc_metrics_copies += 1


__all__ = [
    "alloc_metrics_reset",
    "alloc_metrics_get",
]
