"""Hybrid Composition Functions.

The hybrid functions F15-F25 of the CEC2005 suite blend ten shifted and rotated
base functions into one landscape with ten basins ([1], Section 2.2.3). Component
i contributes

    w_i * (C * f_i(z_i) / fmax_i + bias_i),  z_i = M_i (x - o_i) / lambda_i

where the weights w_i decay with the distance from x to the component optimum o_i.
All weights except the largest one are multiplied by (1 - max(w)^10), so that close
to an optimum only its own component is visible. fmax_i normalizes every component
to a comparable range and is computed once, when the composer is constructed.

Two composers share this algorithm. `HybridComposer` takes base functions that map
a vector to a scalar. `StochasticHybridComposer` takes base functions that map a
vector to a `RandomDraw` and threads a PRNG key through the components in index
order.

[1] https://www.lri.fr/~hansen/Tech-Report-May-30-05.pdf
"""

from collections.abc import Callable, Sequence
from functools import partial

import jax
import jax.numpy as jnp
from flax import struct

from .errors import ConfigurationArityError, NumericDegeneracyError
from .random_draw import RandomDraw, sequence
from .transforms import check_matrix, check_vector, rotate, shift_scale_rotate

NUM_COMPONENTS = 10
C = 2000.0


@struct.dataclass
class ComponentSpec:
    offset: jax.Array
    rotation: jax.Array
    fn: Callable = struct.field(pytree_node=False)
    scale: float = 1.0
    spread: float = 1.0
    bias: float = 0.0


def fmax_point(
    scale: jax.Array, rotation: jax.Array, num_dims: int, dtype
) -> jax.Array:
    """Point at which the normalization constant of a component is evaluated."""
    return rotate(jnp.full((num_dims,), 5.0 / scale, dtype=dtype), rotation)


def composition_weights(
    x: jax.Array, offsets: jax.Array, spreads: jax.Array
) -> tuple[jax.Array, jax.Array]:
    """Normalized component weights and the normalization denominator.

    The first component attaining the maximum weight keeps it, all others are
    suppressed by (1 - max(w)^10). The weights are only meaningful if the returned
    sum is finite and positive, see `check_weight_sum`.
    """
    num_dims = x.shape[0]
    sq_dist = jnp.sum(jnp.square(x - offsets), axis=1)
    weights = jnp.exp(-sq_dist / (2.0 * num_dims * jnp.square(spreads)))

    w_max = jnp.max(weights)
    is_max = jnp.arange(weights.shape[0]) == jnp.argmax(weights)
    weights = jnp.where(is_max, weights, weights * (1.0 - jnp.power(w_max, 10)))

    weight_sum = jnp.sum(weights)
    return weights / weight_sum, weight_sum


def blend(
    values: jax.Array, weights: jax.Array, fmax: jax.Array, biases: jax.Array
) -> jax.Array:
    """Weighted sum of the normalized and biased component values."""
    return jnp.sum(weights * (C * values / fmax + biases))


def check_weight_sum(weight_sum: jax.Array) -> None:
    """Raise if a weight normalization denominator is zero or non-finite."""
    if not bool(jnp.all(jnp.isfinite(weight_sum) & (weight_sum > 0.0))):
        raise NumericDegeneracyError(
            f"Composition weights sum to {weight_sum}. The solution is either "
            "non-finite or too far from every component optimum."
        )


def check_fmax(fmax: jax.Array) -> jax.Array:
    """Raise if a component normalization constant is zero or non-finite."""
    if not bool(jnp.all(jnp.isfinite(fmax) & (fmax > 0.0))):
        raise NumericDegeneracyError(f"Component normalization constants {fmax}.")
    return fmax


class BaseComposer:
    """Shared validation and transforms of the hybrid composers."""

    def __init__(
        self,
        specs: Sequence[ComponentSpec],
        num_dims: int,
        num_components: int = NUM_COMPONENTS,
        dtype=None,
    ):
        """Validate and stack the component specs."""
        if len(specs) != num_components:
            raise ConfigurationArityError(
                f"Expected {num_components} components, got {len(specs)}."
            )
        self.num_dims = num_dims
        self.num_components = num_components
        self.dtype = jax.dtypes.canonicalize_dtype(
            jnp.float64 if dtype is None else dtype
        )

        self.fns = tuple(spec.fn for spec in specs)
        self.offsets = jnp.stack(
            [
                check_vector(jnp.asarray(spec.offset, dtype=self.dtype), num_dims)
                for spec in specs
            ]
        )
        self.rotations = jnp.stack(
            [
                check_matrix(jnp.asarray(spec.rotation, dtype=self.dtype), num_dims)
                for spec in specs
            ]
        )
        self.scales = jnp.array([spec.scale for spec in specs], dtype=self.dtype)
        self.spreads = jnp.array([spec.spread for spec in specs], dtype=self.dtype)
        self.biases = jnp.array([spec.bias for spec in specs], dtype=self.dtype)

    def fmax_points(self) -> list[jax.Array]:
        """Points at which the normalization constants are evaluated."""
        return [
            fmax_point(self.scales[i], self.rotations[i], self.num_dims, self.dtype)
            for i in range(self.num_components)
        ]

    def transform(self, x: jax.Array) -> list[jax.Array]:
        """Shift, scale and rotate x into the frame of every component."""
        check_vector(x, self.num_dims)
        return [
            shift_scale_rotate(x, self.offsets[i], self.rotations[i], self.scales[i])
            for i in range(self.num_components)
        ]

    @partial(jax.jit, static_argnames=("self",))
    def weights(self, x: jax.Array) -> jax.Array:
        """Normalized component weights at x."""
        x = check_vector(jnp.asarray(x, dtype=self.dtype), self.num_dims)
        weights, _ = composition_weights(x, self.offsets, self.spreads)
        return weights


class HybridComposer(BaseComposer):
    """Deterministic hybrid composition of base functions."""

    def __init__(
        self,
        specs: Sequence[ComponentSpec],
        num_dims: int,
        num_components: int = NUM_COMPONENTS,
        dtype=None,
    ):
        """Initialize composer and precompute the normalization constants."""
        super().__init__(specs, num_dims, num_components, dtype)
        values = [fn(point) for fn, point in zip(self.fns, self.fmax_points())]
        self.fmax = check_fmax(jnp.abs(jnp.stack(values)))

    @partial(jax.jit, static_argnames=("self",))
    def compose(self, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        """Composed value at x and the weight normalization denominator."""
        x = jnp.asarray(x, dtype=self.dtype)
        z = self.transform(x)
        values = jnp.stack([fn(z_i) for fn, z_i in zip(self.fns, z)])

        weights, weight_sum = composition_weights(x, self.offsets, self.spreads)
        return blend(values, weights, self.fmax, self.biases), weight_sum

    def evaluate(self, x: jax.Array) -> jax.Array:
        """Evaluate the composition at x."""
        x = jnp.asarray(x, dtype=self.dtype)
        value, weight_sum = self.compose(x)
        check_weight_sum(weight_sum)
        return value

    __call__ = evaluate


class StochasticHybridComposer(BaseComposer):
    """Hybrid composition of base functions that return random draws."""

    def __init__(
        self,
        specs: Sequence[ComponentSpec],
        num_dims: int,
        key: jax.Array,
        num_components: int = NUM_COMPONENTS,
        dtype=None,
    ):
        """Initialize composer and draw the normalization constants with key."""
        super().__init__(specs, num_dims, num_components, dtype)
        draws = [fn(point) for fn, point in zip(self.fns, self.fmax_points())]
        self.fmax = check_fmax(jnp.abs(sequence(draws).resolve(key)))

    @partial(jax.jit, static_argnames=("self",))
    def compose(self, key: jax.Array, x: jax.Array) -> tuple[jax.Array, jax.Array]:
        """Composed value at x and the weight normalization denominator.

        Component i is resolved with the i-th subkey of key.
        """
        x = jnp.asarray(x, dtype=self.dtype)
        z = self.transform(x)
        values = sequence([fn(z_i) for fn, z_i in zip(self.fns, z)]).resolve(key)

        weights, weight_sum = composition_weights(x, self.offsets, self.spreads)
        return blend(values, weights, self.fmax, self.biases), weight_sum

    def evaluate(self, x: jax.Array) -> RandomDraw:
        """Pending evaluation of the composition at x."""
        x = jnp.asarray(x, dtype=self.dtype)

        def sample_fn(key: jax.Array) -> jax.Array:
            value, weight_sum = self.compose(key, x)
            check_weight_sum(weight_sum)
            return value

        return RandomDraw(sample_fn)

    __call__ = evaluate
