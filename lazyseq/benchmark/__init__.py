from .timer import Timer
from .unit import Metric

__all__ = ["Timer", "Metric"]
