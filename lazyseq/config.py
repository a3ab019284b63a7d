from __future__ import annotations

from typing import Any, get_type_hints

import numpy as np
import numpy.typing as npt
from rich.text import Text

__all__ = ['Config', 'ConfigError', 'SequenceConfig']


class ConfigError(Exception):
    __module__ = Exception.__module__


class ConfigMeta(type):
    __reserved__ = {
        '__default__': dict,
        '__updated__': dict,
    }

    def __getattr__(cls, key):
        if key in cls.__reserved__:
            _key = f'__{cls.__name__.lower()}{key}'
            if _key not in vars(cls):
                setattr(cls, _key, cls.__reserved__[key]())
            return getattr(cls, _key)
        raise AttributeError(key)


class Config(metaclass=ConfigMeta):
    """
    Global parameters stored as annotated class attributes.

    Subclass to declare parameters, then change them in place with
    :meth:`update` and restore them with :meth:`reset`. Every change remembers
    where it came from, which is shown by :meth:`report`.
    """

    def _protected(func):
        def wrapper(cls, *args, **kwargs):
            if cls is Config:
                raise ConfigError(f'cannot call "Config.{func.__name__}()" from base class')
            return func(cls, *args, **kwargs)
        return wrapper

    @classmethod
    def __get_parameter__(cls) -> dict[str, tuple[Any, Any]]:
        return {k: (t, getattr(cls, k)) for k, t in get_type_hints(cls).items()}

    @classmethod
    def __track_parameter__(cls, __par: str) -> str:
        try:
            return cls.__updated__[__par]
        except KeyError:
            for config in cls.__mro__:
                if __par in vars(config):
                    return config.__name__
        return ''

    @classmethod
    @_protected
    def update(cls, *configs: type[Config] | dict[str, Any]):
        hints = get_type_hints(cls)
        for config in configs:
            if isinstance(config, type) and issubclass(config, Config):
                _name = config.__name__
                _pars = {k: v for k, v in vars(config).items() if k in hints}
            elif isinstance(config, dict):
                _name = 'dict'
                _pars = config
            else:
                raise ConfigError(f'cannot update <{cls.__name__}> with {config!r}')
            for k, v in _pars.items():
                if k not in hints:
                    raise ConfigError(f'<{cls.__name__}> has no parameter "{k}"')
                if k not in cls.__default__:
                    cls.__default__[k] = getattr(cls, k)
                setattr(cls, k, v)
                cls.__updated__[k] = _name

    @classmethod
    @_protected
    def reset(cls):
        for k, v in cls.__default__.items():
            setattr(cls, k, v)
        cls.__default__.clear()
        cls.__updated__.clear()

    @classmethod
    @_protected
    def report(cls) -> Text:
        lines = [Text(f'Config = {cls.__name__}', style='bold yellow')]
        for k, (t, v) in sorted(cls.__get_parameter__().items()):
            _type = getattr(t, '__name__', str(t))
            _value = getattr(v, '__name__', f'{v}')
            lines.append(
                Text(k)
                + Text(' : ') + Text(_type, style='green')
                + Text(' = ') + Text(_value, style='blue')
                + Text(' (') + Text(cls.__track_parameter__(k), style='yellow') + Text(')')
            )
        return Text('\n').join(lines)


class SequenceConfig(Config):
    # element type of sources built without a value to infer it from
    dtype: npt.DTypeLike = np.float64
    horner_recursive: bool = False
    horner_recursion_warning: int = 500
