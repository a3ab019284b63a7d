from __future__ import annotations

import operator
from copy import copy
from typing import Any, Callable

from ..protocols import Sequence, alias

__all__ = ['sequence']

_OPERATORS = {
    'add': operator.add,
    'sub': operator.sub,
    'mul': operator.mul,
    'truediv': operator.truediv,
    'floordiv': operator.floordiv,
    'mod': operator.mod,
}


def _iterate(self):
    s = copy(self)
    while s.has_value():
        yield s.current()
        s.advance()


def _copy(self):
    new = object.__new__(type(self))
    for k, v in vars(self).items():
        if isinstance(v, Sequence):
            v = copy(v)
        new.__dict__[k] = v
    return new


def _operand(other) -> Sequence:
    if isinstance(other, Sequence):
        return other
    from .source import constant
    return constant(other)


def _binary(op: Callable[[Any, Any], Any]):
    def forward(self, other):
        from .adaptor import binop
        return binop(op, self, _operand(other))

    def reflected(self, other):
        from .adaptor import binop
        return binop(op, _operand(other), self)

    return forward, reflected


def sequence(cls):
    """
    Turn a class with ``has_value``, ``current`` and ``advance`` into a full
    sequence type.

    Installs truthiness (``has_value``), iteration over a copy, a copy that
    duplicates nested sequences, and the arithmetic operators, which build a
    :class:`~lazyseq.sequence.binop`. Scalars on either side of an operator
    are wrapped in :class:`~lazyseq.sequence.constant`.
    """
    for method in ('current', 'advance'):
        if not callable(getattr(cls, method, None)):
            raise TypeError(f'`{cls.__name__}.{method}()` is not defined')
    cls = alias(bool='has_value')(cls)
    cls.__iter__ = _iterate
    # numpy scalars defer to the reflected operators
    cls.__array_ufunc__ = None
    if '__copy__' not in vars(cls):
        cls.__copy__ = _copy
    for name, op in _OPERATORS.items():
        forward, reflected = _binary(op)
        setattr(cls, f'__{name}__', forward)
        setattr(cls, f'__r{name}__', reflected)
    return cls
