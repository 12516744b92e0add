import jax.numpy as jnp
import numpy as np
import pytest

from sharray import SharedArray
from sharray.host import HostInt, _host_int, _host_int_value


def test_host_int_accepts_scalars():
    assert _host_int_value(3) == 3
    assert _host_int_value(np.int16(4)) == 4
    assert _host_int_value(jnp.int32(5)) == 5
    assert _host_int(HostInt(6)).v == 6


@pytest.mark.parametrize("value", [True, np.bool_(False), jnp.bool_(True)])
def test_host_int_rejects_bool(value):
    with pytest.raises(TypeError, match="bool"):
        _host_int(value)


@pytest.mark.parametrize("value", [1.5, "2", jnp.arange(2)])
def test_host_int_rejects_non_integer(value):
    with pytest.raises(TypeError):
        _host_int(value)


def test_device_scalars_as_count_and_index():
    a = SharedArray(jnp.int32(3), np.int64)
    a[jnp.int32(2)] = 7
    assert a.size() == 3
    assert a[np.int64(2)] == 7
