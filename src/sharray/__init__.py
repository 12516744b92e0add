from sharray import alloc as _alloc
from sharray import config as _config
from sharray import errors as _errors
from sharray import metrics as _metrics
from sharray import refcount as _refcount
from sharray import shared_array as _shared_array
from sharray import store as _store
from sharray.alloc import *
from sharray.config import *
from sharray.errors import *
from sharray.metrics import *
from sharray.refcount import *
from sharray.shared_array import *
from sharray.store import *

__all__ = []
__all__ += _errors.__all__
__all__ += _config.__all__
__all__ += _alloc.__all__
__all__ += _metrics.__all__
__all__ += _refcount.__all__
__all__ += _store.__all__
__all__ += _shared_array.__all__
