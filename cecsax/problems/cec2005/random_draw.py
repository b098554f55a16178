"""Pending random draws.

A `RandomDraw` describes a computation that needs a PRNG key to produce its value.
Nothing is sampled until `resolve` is called with a key, so the same key always
produces the same value. Several draws are combined with `sequence`, which splits
the key once and hands subkey i to draw i, fixing the order in which randomness is
consumed.
"""

from collections.abc import Callable, Sequence
from typing import Any

import jax
import jax.numpy as jnp


class RandomDraw:
    """Computation that requires a PRNG key to produce its value."""

    def __init__(self, sample_fn: Callable[[jax.Array], Any]):
        self.sample_fn = sample_fn

    @classmethod
    def point(cls, value: Any) -> "RandomDraw":
        """Draw that ignores its key and always returns value."""
        return cls(lambda key: value)

    def map(self, fn: Callable[[Any], Any]) -> "RandomDraw":
        """Draw that applies fn to the value of this draw."""
        return RandomDraw(lambda key: fn(self.resolve(key)))

    def resolve(self, key: jax.Array) -> Any:
        """Produce the value of the draw using key."""
        return self.sample_fn(key)


def sequence(draws: Sequence[RandomDraw]) -> RandomDraw:
    """Combine draws into one draw of their stacked values, resolved in order."""

    def sample_fn(key: jax.Array) -> jax.Array:
        keys = jax.random.split(key, len(draws))
        return jnp.stack([draw.resolve(key) for draw, key in zip(draws, keys)])

    return RandomDraw(sample_fn)


def standard_normal(shape: tuple[int, ...] = ()) -> RandomDraw:
    """Draw from the standard normal distribution N(0, 1)."""
    return RandomDraw(lambda key: jax.random.normal(key, shape=shape))
