"""CEC2005 Benchmark Parameters.

Parameter containers and constant tables of the CEC2005 suite [1]. The published
optimum locations and rotation matrices are supplied by the caller. When they are
not available, `sample_params` generates parameters with the same structure from a
PRNG key.

[1] https://www.lri.fr/~hansen/Tech-Report-May-30-05.pdf
"""

from functools import partial

import jax
import jax.numpy as jnp
from flax import struct

from ...types import Params
from .transforms import generate_random_rotation


@struct.dataclass
class ShiftParams(Params):
    o: jax.Array
    fbias: jax.Array


@struct.dataclass
class ShiftRotateParams(Params):
    o: jax.Array
    M: jax.Array
    fbias: jax.Array


@struct.dataclass
class LinearSystemParams(Params):
    o: jax.Array
    A: jax.Array
    fbias: jax.Array


@struct.dataclass
class TrigSystemParams(Params):
    alpha: jax.Array
    a: jax.Array
    b: jax.Array
    fbias: jax.Array


@struct.dataclass
class HybridParams(Params):
    o: jax.Array
    M: jax.Array
    fbias: jax.Array


fbias_table = {
    1: -450.0,
    2: -450.0,
    3: -450.0,
    4: -450.0,
    5: -310.0,
    6: 390.0,
    7: -180.0,
    8: -140.0,
    9: -330.0,
    10: -330.0,
    11: 90.0,
    12: -460.0,
    13: -130.0,
    14: -300.0,
    15: 120.0,
    16: 120.0,
    17: 120.0,
    18: 10.0,
    19: 10.0,
    20: 10.0,
    21: 360.0,
    22: 360.0,
    23: 360.0,
    24: 260.0,
    25: 260.0,
}

# Initialization range of every function
x_ranges = {
    **{fn_id: (-100.0, 100.0) for fn_id in (1, 2, 3, 4, 5, 6, 14)},
    7: (0.0, 600.0),
    8: (-32.0, 32.0),
    9: (-5.0, 5.0),
    10: (-5.0, 5.0),
    11: (-0.5, 0.5),
    12: (-jnp.pi, jnp.pi),
    13: (-3.0, 1.0),
    **{fn_id: (-5.0, 5.0) for fn_id in range(15, 25)},
    25: (2.0, 5.0),
}

# Range of the synthetic optimum locations
x_opt_ranges = {
    **{fn_id: (0.8 * low, 0.8 * high) for fn_id, (low, high) in x_ranges.items()},
    7: (-480.0, 480.0),
    25: (-4.0, 4.0),
}

shift_fn_ids = (1, 2, 4, 6, 9, 13)
shift_rotate_fn_ids = (3, 7, 8, 10, 11, 14)
hybrid_fn_ids = tuple(range(15, 26))
noisy_fn_ids = (4, 17, 24, 25)

component_biases = tuple(100.0 * i for i in range(10))

_scales_15 = (1.0, 1.0, 10.0, 10.0, 5 / 60, 5 / 60, 5 / 32, 5 / 32, 5 / 100, 5 / 100)
_scales_18 = (
    2 * 5 / 32, 5 / 32, 2.0, 1.0, 2 * 5 / 100, 5 / 100, 20.0, 10.0, 2 * 5 / 60, 5 / 60
)
_scales_19 = (
    0.1 * 5 / 32, 5 / 32, 2.0, 1.0, 2 * 5 / 100, 5 / 100, 20.0, 10.0, 2 * 5 / 60, 5 / 60
)
_scales_21 = (
    5 * 5 / 100, 5 / 100, 5.0, 1.0, 5.0, 1.0, 50.0, 10.0, 5 * 5 / 200, 5 / 200
)
_scales_24 = (10.0, 5 / 20, 1.0, 5 / 32, 1.0, 5 / 100, 5 / 50, 1.0, 5 / 100, 5 / 100)

hybrid_scales = {
    15: _scales_15,
    16: _scales_15,
    17: _scales_15,
    18: _scales_18,
    19: _scales_19,
    20: _scales_18,
    21: _scales_21,
    22: _scales_21,
    23: _scales_21,
    24: _scales_24,
    25: _scales_24,
}

_spreads_18 = (1.0, 2.0, 1.5, 1.5, 1.0, 1.0, 1.5, 1.5, 2.0, 2.0)
_spreads_21 = (1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 2.0, 2.0)

hybrid_spreads = {
    15: (1.0,) * 10,
    16: (1.0,) * 10,
    17: (1.0,) * 10,
    18: _spreads_18,
    19: (0.1, 2.0, 1.5, 1.5, 1.0, 1.0, 1.5, 1.5, 2.0, 2.0),
    20: _spreads_18,
    21: _spreads_21,
    22: _spreads_21,
    23: _spreads_21,
    24: (2.0,) * 10,
    25: (2.0,) * 10,
}


@partial(jax.jit, static_argnames=("fn_id", "num_dims"))
def sample_params(key: jax.Array, fn_id: int, num_dims: int) -> Params:
    """Sample synthetic parameters for a CEC2005 function."""
    if fn_id not in fbias_table:
        raise ValueError(f"Unknown CEC2005 function id {fn_id}.")

    dtype = jax.dtypes.canonicalize_dtype(jnp.float64)
    key_o, key_m, key_a, key_b = jax.random.split(key, 4)
    fbias = jnp.asarray(fbias_table[fn_id], dtype=dtype)
    minval, maxval = x_opt_ranges[fn_id]

    if fn_id in hybrid_fn_ids:
        o = jax.random.uniform(key_o, (10, num_dims), minval=minval, maxval=maxval)

        # Last optimum at the origin
        o = o.at[-1].set(0.0)

        # Global optimum on the bounds
        if fn_id == 20:
            o = o.at[0, 1::2].set(5.0)

        if fn_id == 15:
            M = jnp.tile(jnp.eye(num_dims), (10, 1, 1))
        else:
            M = jnp.stack(
                [
                    generate_random_rotation(key, num_dims)
                    for key in jax.random.split(key_m, 10)
                ]
            )
        return HybridParams(o, M, fbias)

    if fn_id == 12:
        alpha = jax.random.uniform(
            key_o, (num_dims,), minval=-jnp.pi, maxval=jnp.pi
        )
        a = jax.random.randint(key_a, (num_dims, num_dims), -100, 101).astype(dtype)
        b = jax.random.randint(key_b, (num_dims, num_dims), -100, 101).astype(dtype)
        return TrigSystemParams(alpha, a, b, fbias)

    o = jax.random.uniform(key_o, (num_dims,), minval=minval, maxval=maxval)

    if fn_id == 5:
        # Global optimum on the bounds
        o = o.at[: -(-num_dims // 4)].set(-100.0)
        o = o.at[(3 * num_dims) // 4 - 1 :].set(100.0)
        A = jax.random.randint(key_a, (num_dims, num_dims), -500, 501).astype(dtype)
        return LinearSystemParams(o, A, fbias)

    if fn_id == 8:
        o = o.at[0::2].set(-32.0)

    if fn_id in shift_rotate_fn_ids:
        M = generate_random_rotation(key_m, num_dims)
        return ShiftRotateParams(o, M, fbias)

    return ShiftParams(o, fbias)
