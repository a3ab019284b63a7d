"""
Algorithms over any object with ``has_value``, ``current`` and ``advance``.

Every algorithm works on a copy of its input, so the caller's cursor never moves.
"""

from __future__ import annotations

import logging
from copy import copy
from typing import Any, TypeVar

from ..config import SequenceConfig
from ..protocols import Sequence
from ._utils import identity
from .adaptor import take

__all__ = ['length', 'drop', 'last', 'back', 'same',
           'sum', 'product', 'horner']

_SequenceT = TypeVar('_SequenceT', bound=Sequence)


def length(s: Sequence) -> int:
    if isinstance(s, take) and (n := s.size()) is not None:
        return n
    s = copy(s)
    n = 0
    while s.has_value():
        n += 1
        s.advance()
    return n


def drop(n: int, s: _SequenceT) -> _SequenceT:
    s = copy(s)
    while n > 0 and s.has_value():
        s.advance()
        n -= 1
    return s


def last(s: _SequenceT) -> _SequenceT:
    """
    Cursor at the final value of ``s``. ``s`` must not be exhausted.
    """
    s_, s = copy(s), copy(s)
    if s.has_value():
        s.advance()
        while s.has_value():
            s_.advance()
            s.advance()
    return s_


def back(s: Sequence):
    return last(s).current()


def same(u: Sequence, v: Sequence) -> bool:
    """
    Same values in the same order, and the same length.
    """
    u, v = copy(u), copy(v)
    while u.has_value() and v.has_value():
        if u.current() != v.current():
            return False
        u.advance()
        v.advance()
    return not u.has_value() and not v.has_value()


def sum(s: Sequence):
    s = copy(s)
    if not s.has_value():
        return identity(s, 0)
    t = s.current()
    s.advance()
    while s.has_value():
        t = t + s.current()
        s.advance()
    return t


def product(s: Sequence):
    s = copy(s)
    if not s.has_value():
        return identity(s, 1)
    t = s.current()
    s.advance()
    while s.has_value():
        t = t * s.current()
        s.advance()
    return t


def horner(s: Sequence, x: Any):
    """
    Evaluate the polynomial with coefficients ``s`` at ``x``.

    .. math::

        s_0 + x (s_1 + x (s_2 + \\dots))

    Accumulates from the last coefficient unless
    :attr:`SequenceConfig.horner_recursive` is set, in which case the nested
    form is evaluated by recursion, one level per coefficient.
    """
    s = copy(s)
    if SequenceConfig.horner_recursive:
        if (n := length(s)) > SequenceConfig.horner_recursion_warning:
            logging.warning(f'recursive horner() on {n} coefficients may exceed the recursion limit')
        return _horner(s, x)
    coefficients = []
    while s.has_value():
        coefficients.append(s.current())
        s.advance()
    t = identity(s, 0)
    for c in reversed(coefficients):
        t = c + x * t
    return t


def _horner(s: Sequence, x: Any):
    if not s.has_value():
        return identity(s, 0)
    t = s.current()
    s.advance()
    return t + x * _horner(s, x)
