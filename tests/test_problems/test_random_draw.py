"""Tests for pending random draws."""

import jax
import jax.numpy as jnp
from cecsax.problems import RandomDraw
from cecsax.problems.cec2005.random_draw import sequence, standard_normal


def test_point_ignores_key():
    """A point draw returns its value for every key."""
    draw = RandomDraw.point(jnp.array(3.0))
    assert draw.resolve(jax.random.key(0)) == 3.0
    assert draw.resolve(jax.random.key(1)) == 3.0


def test_map(key):
    """Mapping transforms the resolved value with the same key."""
    draw = standard_normal().map(lambda n: 2.0 * n + 1.0)
    assert draw.resolve(key) == 2.0 * jax.random.normal(key) + 1.0


def test_resolve_is_reproducible(key):
    """The same key always produces the same value."""
    draw = standard_normal(shape=(4,))
    assert jnp.array_equal(draw.resolve(key), draw.resolve(key))
    assert not jnp.array_equal(draw.resolve(key), draw.resolve(jax.random.key(1)))


def test_sequence_order(key):
    """Draw i of a sequence is resolved with subkey i."""
    draws = [standard_normal(), RandomDraw.point(jnp.array(7.0)), standard_normal()]
    values = sequence(draws).resolve(key)

    keys = jax.random.split(key, 3)
    assert values.shape == (3,)
    assert values[0] == jax.random.normal(keys[0])
    assert values[1] == 7.0
    assert values[2] == jax.random.normal(keys[2])
