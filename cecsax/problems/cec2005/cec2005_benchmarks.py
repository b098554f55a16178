"""CEC2005 Benchmark Functions.

This module assembles the 25 functions of the CEC2005 suite from [1] out of the
base functions, the vector transforms and the hybrid composers.

Every function is built once from its parameters and then evaluated as
`fn(key, x) -> (value, weight_sum)`. The key is only consumed by the noisy
functions F4, F17, F24 and F25. The weight sum is the normalization denominator of
the hybrid functions (one for all others) and is checked on the host by
`Benchmark.resolve`.

[1] https://www.lri.fr/~hansen/Tech-Report-May-30-05.pdf
"""

from collections.abc import Callable
from functools import partial

import jax
import jax.numpy as jnp

from ...types import Params
from .cec2005_fns import (
    ackley,
    elliptic,
    expanded_schaffer_f6,
    f8f2,
    griewank,
    non_continuous,
    rastrigin,
    rosenbrock,
    schwefel_12,
    spherical,
    weierstrass,
)
from .cec2005_params import (
    component_biases,
    hybrid_scales,
    hybrid_spreads,
    noisy_fn_ids,
)
from .hybrid import (
    ComponentSpec,
    HybridComposer,
    StochasticHybridComposer,
    check_weight_sum,
)
from .random_draw import RandomDraw, standard_normal
from .transforms import check_vector, rotate, shift, shift_scale_rotate

BenchmarkFn = Callable[[jax.Array, jax.Array], tuple[jax.Array, jax.Array]]

fn_names = {
    1: "Shifted Sphere",
    2: "Shifted Schwefel 1.2",
    3: "Shifted Rotated High Conditioned Elliptic",
    4: "Shifted Schwefel 1.2 with Noise in Fitness",
    5: "Schwefel 2.6 with Global Optimum on Bounds",
    6: "Shifted Rosenbrock",
    7: "Shifted Rotated Griewank without Bounds",
    8: "Shifted Rotated Ackley with Global Optimum on Bounds",
    9: "Shifted Rastrigin",
    10: "Shifted Rotated Rastrigin",
    11: "Shifted Rotated Weierstrass",
    12: "Schwefel 2.13",
    13: "Shifted Expanded Griewank plus Rosenbrock",
    14: "Shifted Rotated Expanded Schaffer F6",
    15: "Hybrid Composition",
    16: "Rotated Hybrid Composition",
    17: "Rotated Hybrid Composition with Noise in Fitness",
    18: "Rotated Hybrid Composition",
    19: "Rotated Hybrid Composition with Narrow Basin Global Optimum",
    20: "Rotated Hybrid Composition with Global Optimum on Bounds",
    21: "Rotated Hybrid Composition",
    22: "Rotated Hybrid Composition with High Condition Number Matrix",
    23: "Non-Continuous Rotated Hybrid Composition",
    24: "Rotated Hybrid Composition",
    25: "Rotated Hybrid Composition without Bounds",
}

# Functions defined on consecutive pairs or with a condition number need two dims
min_num_dims = {fn_id: 2 for fn_id in (3, 6, 13, 14, 21, 22, 23, 24, 25)}


def no_weights() -> jax.Array:
    """Weight sum reported by functions without a composition."""
    return jnp.array(1.0)


def deterministic(base_fn: Callable[[jax.Array], jax.Array]):
    """Wrap a base function into a component returning a random draw."""
    return lambda z: RandomDraw.point(base_fn(z))


def non_continuous_expanded_schaffer_f6(z: jax.Array) -> jax.Array:
    return expanded_schaffer_f6(non_continuous(z))


def non_continuous_rastrigin(z: jax.Array) -> jax.Array:
    return rastrigin(non_continuous(z))


def noisy_spherical(z: jax.Array) -> RandomDraw:
    """Sphere Function with noise in fitness."""
    return standard_normal().map(lambda n: spherical(z) * (1.0 + 0.1 * n))


_components_15 = (
    rastrigin,
    rastrigin,
    weierstrass,
    weierstrass,
    griewank,
    griewank,
    ackley,
    ackley,
    spherical,
    spherical,
)
_components_18 = (
    ackley,
    ackley,
    rastrigin,
    rastrigin,
    spherical,
    spherical,
    weierstrass,
    weierstrass,
    griewank,
    griewank,
)
_components_21 = (
    expanded_schaffer_f6,
    expanded_schaffer_f6,
    rastrigin,
    rastrigin,
    f8f2,
    f8f2,
    weierstrass,
    weierstrass,
    griewank,
    griewank,
)
_components_24 = (
    deterministic(weierstrass),
    deterministic(expanded_schaffer_f6),
    deterministic(f8f2),
    deterministic(ackley),
    deterministic(rastrigin),
    deterministic(griewank),
    deterministic(non_continuous_expanded_schaffer_f6),
    deterministic(non_continuous_rastrigin),
    deterministic(elliptic),
    noisy_spherical,
)

hybrid_components = {
    15: _components_15,
    16: _components_15,
    17: _components_15,
    18: _components_18,
    19: _components_18,
    20: _components_18,
    21: _components_21,
    22: _components_21,
    23: _components_21,
    24: _components_24,
    25: _components_24,
}


def component_specs(fn_id: int, params: Params) -> list[ComponentSpec]:
    """Component specs of a hybrid function."""
    return [
        ComponentSpec(
            offset=params.o[i],
            rotation=params.M[i],
            fn=fn,
            scale=hybrid_scales[fn_id][i],
            spread=hybrid_spreads[fn_id][i],
            bias=component_biases[i],
        )
        for i, fn in enumerate(hybrid_components[fn_id])
    ]


def shifted(base_fn: Callable, offset: float = 0.0):
    """Builder of base_fn(x - o + offset) + fbias."""

    def build(params: Params, key: jax.Array | None) -> BenchmarkFn:
        def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
            return base_fn(shift(x, params.o) + offset) + params.fbias, no_weights()

        return fn

    return build


def shifted_rotated(base_fn: Callable):
    """Builder of base_fn(M(x - o)) + fbias."""

    def build(params: Params, key: jax.Array | None) -> BenchmarkFn:
        def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
            z = shift_scale_rotate(x, params.o, params.M)
            return base_fn(z) + params.fbias, no_weights()

        return fn

    return build


def build_f4(params: Params, key: jax.Array | None) -> BenchmarkFn:
    """Shifted Schwefel's Problem 1.2 with Noise in Fitness ([1], F4)."""
    noise = standard_normal().map(lambda n: 1.0 + 0.4 * jnp.abs(n))

    def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        value = schwefel_12(shift(x, params.o)) * noise.resolve(key)
        return value + params.fbias, no_weights()

    return fn


def build_f5(params: Params, key: jax.Array | None) -> BenchmarkFn:
    """Schwefel's Problem 2.6 with Global Optimum on Bounds ([1], F5)."""
    b = rotate(params.o, params.A)

    def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        z = rotate(x, params.A)
        return jnp.max(jnp.abs(z - b)) + params.fbias, no_weights()

    return fn


def build_f12(params: Params, key: jax.Array | None) -> BenchmarkFn:
    """Schwefel's Problem 2.13 ([1], F12).

    a and b are row-major, A_i = sum_j a_ij sin(alpha_j) + b_ij cos(alpha_j).
    """
    A = rotate(jnp.sin(params.alpha), params.a) + rotate(
        jnp.cos(params.alpha), params.b
    )

    def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        B = rotate(jnp.sin(x), params.a) + rotate(jnp.cos(x), params.b)
        return jnp.sum(jnp.square(A - B)) + params.fbias, no_weights()

    return fn


def hybrid(fn_id: int):
    """Builder of a deterministic hybrid composition function."""

    def build(params: Params, key: jax.Array | None) -> BenchmarkFn:
        composer = HybridComposer(component_specs(fn_id, params), params.o.shape[1])

        def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
            value, weight_sum = composer.compose(x)
            return value + params.fbias, weight_sum

        return fn

    return build


def build_f17(params: Params, key: jax.Array | None) -> BenchmarkFn:
    """Rotated Hybrid Composition Function F16 with Noise in Fitness ([1], F17)."""
    composer = HybridComposer(component_specs(17, params), params.o.shape[1])
    noise = standard_normal().map(lambda n: 1.0 + 0.2 * jnp.abs(n))

    def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        value, weight_sum = composer.compose(x)
        return value * noise.resolve(key) + params.fbias, weight_sum

    return fn


def build_f23(params: Params, key: jax.Array | None) -> BenchmarkFn:
    """Non-Continuous Rotated Hybrid Composition Function ([1], F23)."""
    composer = HybridComposer(component_specs(23, params), params.o.shape[1])

    def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        value, weight_sum = composer.compose(non_continuous(x, params.o[0]))
        return value + params.fbias, weight_sum

    return fn


def stochastic_hybrid(fn_id: int):
    """Builder of a hybrid composition function with noisy components."""

    def build(params: Params, key: jax.Array | None) -> BenchmarkFn:
        if key is None:
            raise ValueError(f"F{fn_id} requires a key to draw its normalization.")
        composer = StochasticHybridComposer(
            component_specs(fn_id, params), params.o.shape[1], key
        )

        def fn(key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
            value, weight_sum = composer.compose(key, x)
            return value + params.fbias, weight_sum

        return fn

    return build


cec2005_builders = {
    1: shifted(spherical),
    2: shifted(schwefel_12),
    3: shifted_rotated(elliptic),
    4: build_f4,
    5: build_f5,
    6: shifted(rosenbrock, offset=1.0),
    7: shifted_rotated(griewank),
    8: shifted_rotated(ackley),
    9: shifted(rastrigin),
    10: shifted_rotated(rastrigin),
    11: shifted_rotated(weierstrass),
    12: build_f12,
    13: shifted(f8f2, offset=1.0),
    14: shifted_rotated(expanded_schaffer_f6),
    15: hybrid(15),
    16: hybrid(16),
    17: build_f17,
    18: hybrid(18),
    19: hybrid(19),
    20: hybrid(20),
    21: hybrid(21),
    22: hybrid(22),
    23: build_f23,
    24: stochastic_hybrid(24),
    25: stochastic_hybrid(25),
}


class Benchmark:
    """A CEC2005 function built from its parameters."""

    def __init__(self, fn_id: int, fn: BenchmarkFn, num_dims: int):
        self.fn_id = fn_id
        self.fn = fn
        self.num_dims = num_dims
        self.noisy = fn_id in noisy_fn_ids

    @partial(jax.jit, static_argnames=("self",))
    def __call__(
        self, key: jax.Array | None, x: jax.Array
    ) -> tuple[jax.Array, jax.Array]:
        """Evaluate x, returning the value and the weight normalization sum."""
        check_vector(x, self.num_dims)
        return self.fn(key, x)

    def resolve(self, key: jax.Array | None, x: jax.Array) -> jax.Array:
        """Evaluate x with key and check the weight normalization."""
        value, weight_sum = self(key, x)
        check_weight_sum(weight_sum)
        return value

    def evaluate(self, x: jax.Array) -> jax.Array | RandomDraw:
        """Evaluate x, as a pending random draw for the noisy functions."""
        if self.noisy:
            return RandomDraw(partial(self.resolve, x=x))
        return self.resolve(None, x)


def make_benchmark(
    fn_id: int, params: Params, key: jax.Array | None = None
) -> Benchmark:
    """Build CEC2005 function fn_id from its parameters.

    The key is only used by F24 and F25, to draw the normalization constants of
    their noisy component.
    """
    if fn_id not in cec2005_builders:
        raise ValueError(f"Unknown CEC2005 function id {fn_id}.")

    if fn_id == 12:
        num_dims = params.alpha.shape[0]
    elif fn_id in hybrid_components:
        num_dims = params.o.shape[1]
    else:
        num_dims = params.o.shape[0]

    if num_dims < min_num_dims.get(fn_id, 1):
        raise ValueError(f"F{fn_id} requires at least {min_num_dims[fn_id]} dims.")

    fn = cec2005_builders[fn_id](params, key)
    return Benchmark(fn_id, fn, num_dims)
