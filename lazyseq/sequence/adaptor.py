from __future__ import annotations

import logging
from copy import copy
from typing import Any, Callable

import numpy as np

from ..protocols import Sequence
from ._protocol import sequence
from ._utils import SequenceError, SequenceIndexError, dtype_of, result_dtype

__all__ = ['take', 'epsilon', 'binop', 'concatenate']


@sequence
class take:
    """
    At most ``n`` values of ``s``. Stops at whichever ends first.
    """

    def __init__(self, n: int, s: Sequence):
        if n < 0:
            raise SequenceError(f'cannot take {n} values')
        self._n = n
        self._s = copy(s)

    @property
    def dtype(self) -> np.dtype | None:
        return dtype_of(self._s)

    def size(self) -> int | None:
        """
        Number of remaining values if it is known without traversal, otherwise ``None``.
        """
        if getattr(self._s, 'endless', False):
            return self._n
        if isinstance(self._s, take) and (n := self._s.size()) is not None:
            return min(self._n, n)
        return None

    def __eq__(self, other):
        if not isinstance(other, take):
            return NotImplemented
        return self._n == other._n and bool(self._s == other._s)

    def has_value(self) -> bool:
        return self._n != 0 and self._s.has_value()

    def current(self):
        return self._s.current()

    def advance(self):
        if self.has_value():
            self._n -= 1
            self._s.advance()
            if self._n != 0 and not self._s.has_value():
                logging.debug(f'inner sequence of take() ended with {self._n} values left')
        return self


@sequence
class epsilon:
    """
    Values of ``s`` until one is negligible next to ``1``, i.e. ``s + 1 == 1``.

    Meant for terms of a convergent series whose magnitude decreases.
    """

    def __init__(self, s: Sequence):
        self._s = copy(s)

    @property
    def dtype(self) -> np.dtype | None:
        return dtype_of(self._s)

    def __eq__(self, other):
        if not isinstance(other, epsilon):
            return NotImplemented
        return bool(self._s == other._s)

    def has_value(self) -> bool:
        return self._s.has_value() and bool(self._s.current() + 1 != 1)

    def current(self):
        return self._s.current()

    def advance(self):
        if self.has_value():
            self._s.advance()
        return self


@sequence
class binop:
    """
    Elementwise ``op(s0, s1)``. Ends as soon as either operand ends.

    Parameters
    ----------
    op : ~typing.Callable[[Any, Any], Any]
        Binary operator, e.g. :func:`operator.add`.
    s0, s1 : Sequence
        Left and right operands.

    Notes
    -----
    The element type is the numpy result type of ``op`` applied to the
    element types of the operands, so ``/`` on integers gives floats.
    """

    def __init__(self, op: Callable[[Any, Any], Any], s0: Sequence, s1: Sequence):
        self._op = op
        self._s0 = copy(s0)
        self._s1 = copy(s1)

    @property
    def dtype(self) -> np.dtype | None:
        return result_dtype(self._op, dtype_of(self._s0), dtype_of(self._s1))

    def __eq__(self, other):
        if not isinstance(other, binop):
            return NotImplemented
        return (
            self._op is other._op
            and bool(self._s0 == other._s0)
            and bool(self._s1 == other._s1)
        )

    def has_value(self) -> bool:
        return self._s0.has_value() and self._s1.has_value()

    def current(self):
        return self._op(self._s0.current(), self._s1.current())

    def advance(self):
        self._s0.advance()
        self._s1.advance()
        return self


@sequence
class concatenate:
    """
    All values of the first sequence, then all of the second, and so on.

    The active index always points at a sequence with a value, or one past
    the last sequence once everything is consumed.
    """

    def __init__(self, *sequences: Sequence):
        self._s = [copy(s) for s in sequences]
        self._i = 0
        self._skip()

    def __copy__(self):
        new = object.__new__(type(self))
        new._s = [copy(s) for s in self._s]
        new._i = self._i
        return new

    @property
    def dtype(self) -> np.dtype | None:
        dtypes = [dtype_of(s) for s in self._s]
        if not dtypes or any(dtype is None for dtype in dtypes):
            return None
        return np.result_type(*dtypes)

    @property
    def active(self) -> int:
        return self._i

    def part(self, index: int) -> Sequence:
        if not 0 <= index < len(self._s):
            raise SequenceIndexError(
                f'sequence index {index} out of range for {len(self._s)} sequences'
            )
        return copy(self._s[index])

    def _skip(self):
        while self._i < len(self._s) and not self._s[self._i].has_value():
            self._i += 1
            if self._i < len(self._s):
                logging.debug(f'concatenate() moved to sequence {self._i}')

    def __eq__(self, other):
        if not isinstance(other, concatenate):
            return NotImplemented
        if len(self._s) != len(other._s) or self._i != other._i:
            return False
        return all(bool(a == b) for a, b in zip(self._s, other._s))

    def has_value(self) -> bool:
        return self._i < len(self._s)

    def current(self):
        if not self.has_value():
            raise SequenceIndexError(
                f'sequence index {self._i} out of range for {len(self._s)} sequences'
            )
        return self._s[self._i].current()

    def advance(self):
        if self.has_value():
            self._s[self._i].advance()
            self._skip()
        return self
