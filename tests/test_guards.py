import pytest

from sharray import SharedArray, SharedArrayConfig, SharedArrayContractError
from sharray import guards
from sharray.guards import GuardConfig


def test_guards_enabled_in_tests():
    assert guards.TEST_GUARDS, "SHARRAY_TEST_GUARDS must be enabled for guard tests"
    assert guards.INDEX_GUARD
    assert guards.STATE_GUARD


def test_uninitialized_use_rejected():
    a = SharedArray()
    with pytest.raises(SharedArrayContractError, match="uninitialized"):
        a[0]
    with pytest.raises(SharedArrayContractError, match="uninitialized"):
        a[0] = 1
    with pytest.raises(SharedArrayContractError, match="uninitialized"):
        a.size()
    with pytest.raises(SharedArrayContractError, match="uninitialized"):
        a.copy()


def test_out_of_range_index_rejected():
    a = SharedArray(2)
    with pytest.raises(SharedArrayContractError) as info:
        a[2] = "x"
    assert info.value.index == 2
    assert info.value.size == 2
    assert info.value.context == "ArrayStore.__setitem__"
    assert "(index=2, size=2)" in str(info.value)


def test_guard_index_disabled_is_silent():
    guards.guard_index(10, 2, "test.off", guard=False)
    guards.guard_bound(None, "test.off", guard=False)


def test_guard_count_always_checked():
    with pytest.raises(SharedArrayContractError):
        guards.guard_count(-3, "test.count")
    guards.guard_count(0, "test.count")


def test_double_init_rejected_with_guards_off():
    cfg = SharedArrayConfig(
        guard_cfg=GuardConfig(index_guard=False, state_guard=False)
    )
    a = SharedArray(2, cfg=cfg)
    with pytest.raises(SharedArrayContractError, match="already initialized"):
        a.init(3)
    assert a.size() == 2
    assert a.use_count == 1


def test_guard_fns_are_injectable():
    calls = []

    def _record_index(index, size, label, guard=None):
        calls.append(("index", index, size, label))

    def _record_bound(obj, label, guard=None):
        calls.append(("bound", label))

    cfg = SharedArrayConfig(
        guard_cfg=GuardConfig(
            guard_index_fn=_record_index, guard_bound_fn=_record_bound
        )
    )
    a = SharedArray(3, cfg=cfg)
    a[1] = "v"
    assert ("bound", "SharedArray.__setitem__") in calls
    assert ("index", 1, 3, "ArrayStore.__setitem__") in calls


def test_copy_construct_inherits_config():
    cfg = SharedArrayConfig(guard_cfg=GuardConfig(index_guard=True))
    a = SharedArray(1, cfg=cfg)
    b = SharedArray(a)
    assert b.copy().size() == 1
    assert b._cfg is cfg
