from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from typing_extensions import Self  # DEPRECATE

__all__ = ["Sequence", "alias"]

_ValueT = TypeVar("_ValueT", covariant=True)


@runtime_checkable
class Sequence(Protocol[_ValueT]):
    """
    A forward-only cursor over a (possibly infinite) stream of values.

    Any object with the three methods below is a sequence. :meth:`current` may
    only be called when :meth:`has_value` is ``True``. :meth:`advance` moves the
    cursor in place and returns the same object.
    """

    def has_value(self) -> bool: ...

    def current(self) -> _ValueT: ...

    def advance(self) -> Self: ...


def alias(*methods: str, **renamed: str):
    def wrapper(cls):
        for method in (*methods, *renamed.values()):
            if not callable(getattr(cls, method, None)):
                raise TypeError(f"`{cls.__name__}.{method}()` is not defined")
        for method in methods:
            setattr(cls, f"__{method}__", getattr(cls, method))
        for dunder, method in renamed.items():
            setattr(cls, f"__{dunder}__", getattr(cls, method))
        return cls

    return wrapper
