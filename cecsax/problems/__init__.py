"""Optimization problems module.

Currently provides the CEC2005 real-parameter optimization suite: shifted, rotated
and noisy benchmark functions F1-F14 and the hybrid composition functions F15-F25.

Each problem implements a common interface with `sample` and `eval` methods to sample
solutions from the search space and evaluate their fitness, respectively.
"""

# CEC2005
from .cec2005.cec2005 import CEC2005Problem
from .cec2005.cec2005_benchmarks import Benchmark, fn_names, make_benchmark
from .cec2005.cec2005_fns import cec2005_base_fns
from .cec2005.cec2005_params import sample_params
from .cec2005.errors import (
    ConfigurationArityError,
    DimensionMismatchError,
    NumericDegeneracyError,
)
from .cec2005.hybrid import ComponentSpec, HybridComposer, StochasticHybridComposer
from .cec2005.random_draw import RandomDraw

cec2005 = [
    "CEC2005Problem",
    "Benchmark",
    "fn_names",
    "make_benchmark",
    "cec2005_base_fns",
    "sample_params",
]

composition = [
    "ComponentSpec",
    "HybridComposer",
    "StochasticHybridComposer",
    "RandomDraw",
]

errors = [
    "ConfigurationArityError",
    "DimensionMismatchError",
    "NumericDegeneracyError",
]

__all__ = cec2005 + composition + errors
