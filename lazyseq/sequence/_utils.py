from __future__ import annotations

from typing import Any, Callable

import numpy as np
import numpy.typing as npt

from ..protocols import Sequence


class SequenceError(Exception):
    __module__ = Exception.__module__


class SequenceIndexError(SequenceError, IndexError):
    __module__ = Exception.__module__


def scalar(value, dtype: npt.DTypeLike = None) -> np.generic:
    return np.asarray(value, dtype=dtype)[()]


def dtype_of(s: Sequence) -> np.dtype | None:
    return getattr(s, 'dtype', None)


def result_dtype(op: Callable[[Any, Any], Any], *dtypes: np.dtype | None) -> np.dtype | None:
    if any(dtype is None for dtype in dtypes):
        return None
    with np.errstate(all='ignore'):
        return np.asarray(op(*(dtype.type(1) for dtype in dtypes))).dtype


def identity(s: Sequence, value: int):
    dtype = dtype_of(s)
    if dtype is None:
        return value
    return dtype.type(value)
