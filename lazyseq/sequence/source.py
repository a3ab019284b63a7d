from __future__ import annotations

import operator
from typing import Any, Callable, overload

import numpy as np
import numpy.typing as npt

from ..config import SequenceConfig
from ._protocol import sequence
from ._utils import SequenceError, scalar
from .adaptor import take

__all__ = ['pointer', 'array', 'constant', 'null',
           'factorial', 'power',
           'generate', 'linear', 'geometric']


@sequence
class pointer:
    """
    Unbounded cursor over caller-owned storage.

    Always reports a value, even past the end of ``buffer``. Reading there
    raises whatever indexing the buffer raises. Use :func:`array` for a view
    that stops at the end.

    Parameters
    ----------
    buffer : ~numpy.typing.ArrayLike
        Storage to walk. A :class:`numpy.ndarray` is shared, not copied.
    offset : int, optional, default=0
        Index of the first value.
    """

    endless = True

    def __init__(self, buffer: npt.ArrayLike, offset: int = 0):
        self._buffer = np.asarray(buffer)
        self._offset = offset

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def __eq__(self, other):
        if not isinstance(other, pointer):
            return NotImplemented
        return self._buffer is other._buffer and self._offset == other._offset

    def has_value(self) -> bool:
        return True

    def current(self):
        return self._buffer[self._offset]

    def advance(self):
        self._offset += 1
        return self


@overload
def array(buffer: npt.ArrayLike) -> take: ...
@overload
def array(n: int, buffer: npt.ArrayLike) -> take: ...
def array(*args):
    match args:
        case (buffer,):
            buffer = np.asarray(buffer)
            n = len(buffer)
        case (n, buffer):
            buffer = np.asarray(buffer)
            if not 0 <= n <= len(buffer):
                raise SequenceError(f'cannot take {n} values from a buffer of length {len(buffer)}')
        case _:
            raise TypeError(f'array() takes 1 or 2 arguments ({len(args)} given)')
    return take(n, pointer(buffer))


@sequence
class constant:
    endless = True

    def __init__(self, value: Any = None, dtype: npt.DTypeLike = None):
        if value is None:
            value = 0
            if dtype is None:
                dtype = SequenceConfig.dtype
        self._value = scalar(value, dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    def __eq__(self, other):
        if not isinstance(other, constant):
            return NotImplemented
        return bool(self._value == other._value)

    def has_value(self) -> bool:
        return True

    def current(self):
        return self._value

    def advance(self):
        return self


@sequence
class null:
    """
    Zero terminated buffer. Stops at the first zero, which is never yielded.

    ``buffer`` must contain a zero at or after ``offset``.
    """

    def __init__(self, buffer: npt.ArrayLike, offset: int = 0):
        self._buffer = np.asarray(buffer)
        self._offset = offset

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def __eq__(self, other):
        if not isinstance(other, null):
            return NotImplemented
        return self._buffer is other._buffer and self._offset == other._offset

    def has_value(self) -> bool:
        return bool(self._buffer[self._offset] != 0)

    def current(self):
        return self._buffer[self._offset]

    def advance(self):
        if self.has_value():
            self._offset += 1
        return self


@sequence
class factorial:
    """
    :math:`0!, 1!, 2!, \\dots`

    The element type defaults to :attr:`SequenceConfig.dtype`.
    """

    endless = True

    def __init__(self, dtype: npt.DTypeLike = None):
        dtype = np.dtype(SequenceConfig.dtype if dtype is None else dtype)
        self._value = dtype.type(1)
        self._n = dtype.type(0)

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    def __eq__(self, other):
        if not isinstance(other, factorial):
            return NotImplemented
        return bool(self._value == other._value and self._n == other._n)

    def has_value(self) -> bool:
        return True

    def current(self):
        return self._value

    def advance(self):
        self._n += 1
        self._value *= self._n
        return self


@sequence
class power:
    """
    :math:`t^0, t^1, t^2, \\dots`
    """

    endless = True

    def __init__(self, base: Any, dtype: npt.DTypeLike = None):
        self._base = scalar(base, dtype)
        self._value = self._base.dtype.type(1)

    @property
    def dtype(self) -> np.dtype:
        return self._base.dtype

    def __eq__(self, other):
        if not isinstance(other, power):
            return NotImplemented
        return bool(self._base == other._base and self._value == other._value)

    def has_value(self) -> bool:
        return True

    def current(self):
        return self._value

    def advance(self):
        self._value *= self._base
        return self


@sequence
class generate:
    """
    Orbit of ``t0`` under a binary operator:
    ``t0, op(t0, dt), op(op(t0, dt), dt), ...``

    Never terminates, so bound it with :class:`take` or :class:`epsilon`
    before consuming it.

    Parameters
    ----------
    t0 : Any
        First value.
    dt : Any, optional, default=1
        Second operand of every step.
    op : ~typing.Callable[[Any, Any], Any], optional, default=operator.add
        Step operator. Two sequences are equal only if they share the same
        operator object.
    dtype : ~numpy.typing.DTypeLike, optional
        Element type. If not given, the common type of ``t0`` and ``dt``.
    """

    endless = True

    def __init__(
        self,
        t0: Any,
        dt: Any = 1,
        op: Callable[[Any, Any], Any] = operator.add,
        dtype: npt.DTypeLike = None,
    ):
        if dtype is None:
            dtype = np.result_type(t0, dt)
        self._value = scalar(t0, dtype)
        self._step = scalar(dt, dtype)
        self._op = op

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    def __eq__(self, other):
        if not isinstance(other, generate):
            return NotImplemented
        return (
            self._op is other._op
            and bool(self._value == other._value)
            and bool(self._step == other._step)
        )

    def has_value(self) -> bool:
        return True

    def current(self):
        return self._value

    def advance(self):
        self._value = self._op(self._value, self._step)
        return self


class linear(generate):
    def __init__(self, t0: Any, dt: Any = 1, dtype: npt.DTypeLike = None):
        super().__init__(t0, dt, operator.add, dtype)


class geometric(generate):
    def __init__(self, t0: Any, ratio: Any = 1, dtype: npt.DTypeLike = None):
        super().__init__(t0, ratio, operator.mul, dtype)
