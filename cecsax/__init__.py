from .problems import CEC2005Problem, make_benchmark, sample_params
from .utils import EvalLog

__all__ = [
    "CEC2005Problem",
    "make_benchmark",
    "sample_params",
    "EvalLog",
]
