"""Type definitions."""

from typing import Any, TypeAlias

import jax
from flax import struct

PyTree: TypeAlias = Any

Solution: TypeAlias = jax.Array
Population: TypeAlias = jax.Array
Fitness: TypeAlias = jax.Array
Metrics: TypeAlias = PyTree


@struct.dataclass
class Params:
    pass
