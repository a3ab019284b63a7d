from ._protocol import sequence
from ._utils import SequenceError, SequenceIndexError
from .adaptor import binop, concatenate, epsilon, take
from .algorithm import back, drop, horner, last, length, product, same, sum
from .source import (array, constant, factorial, generate, geometric, linear,
                     null, pointer, power)

__all__ = [
    # protocol
    "sequence",
    # errors
    "SequenceError",
    "SequenceIndexError",
    # sources
    "pointer",
    "array",
    "constant",
    "null",
    "factorial",
    "power",
    "generate",
    "linear",
    "geometric",
    # adaptors
    "take",
    "epsilon",
    "binop",
    "concatenate",
    # algorithms
    "length",
    "drop",
    "last",
    "back",
    "same",
    "sum",
    "product",
    "horner",
]
