import numpy as np
import numpy.typing as npt

__all__ = ["Metric"]


class Prefix:
    """
    Unit prefixes for consecutive powers of ``base``.

    Parameters
    ----------
    base : int
        Ratio between two neighboring prefixes.
    symbols : list[str]
        Prefixes ordered from the lowest power up.
    lowest : int
        Power of ``base`` the first symbol stands for.
    """

    def __init__(self, base: int, symbols: list[str], lowest: int):
        self.base = np.float64(base)
        self.symbols = np.asarray(symbols)
        self.lowest = lowest

    def scale(self, value: npt.ArrayLike) -> tuple[npt.NDArray, npt.NDArray[np.str_]]:
        value = np.asarray(value, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            exponent = np.floor(np.log(np.abs(value)) / np.log(self.base))
        # zero, inf and nan stay unprefixed
        exponent = np.where(np.isfinite(exponent), exponent, 0).astype(int)
        exponent = np.clip(exponent, self.lowest, self.lowest + len(self.symbols) - 1)
        return value / self.base**exponent, self.symbols[exponent - self.lowest]

    def format(self, value: float, unit: str = "") -> str:
        value, symbol = self.scale(value)
        return f"{float(value):.3g}{symbol}{unit}"


Metric = Prefix(1000, [*"yzafpnμm", "", *"kMGTPEZY"], -8)
