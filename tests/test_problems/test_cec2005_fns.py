"""Tests for CEC2005 base functions."""

import jax.numpy as jnp
import pytest
from cecsax.problems.cec2005.cec2005_fns import (
    ackley,
    elliptic,
    expanded_schaffer_f6,
    f8f2,
    griewank,
    non_continuous,
    rastrigin,
    rosenbrock,
    schaffer_f6,
    schwefel_12,
    spherical,
    weierstrass,
)


@pytest.mark.parametrize(
    "base_fn",
    [spherical, schwefel_12, elliptic, griewank, ackley, rastrigin, weierstrass],
)
def test_minimum_at_origin(base_fn):
    """Functions centered at the origin vanish there."""
    assert jnp.allclose(base_fn(jnp.zeros(5)), 0.0, atol=1e-10)


def test_minimum_at_ones():
    """Rosenbrock based functions vanish at the all-ones vector."""
    assert rosenbrock(jnp.ones(5)) == 0.0
    assert jnp.allclose(f8f2(jnp.ones(5)), 0.0)


def test_values():
    """Compare against values computed by hand."""
    assert spherical(jnp.array([1.0, 2.0])) == 5.0
    assert schwefel_12(jnp.array([1.0, 2.0])) == 10.0
    assert jnp.allclose(elliptic(jnp.array([1.0, 1.0])), 1.0 + 1e6)
    assert rosenbrock(jnp.array([0.0, 0.0])) == 1.0
    assert jnp.allclose(rastrigin(jnp.array([1.0, 0.0])), 1.0)


def test_expanded_schaffer_f6_wraps_around():
    """The last coordinate is paired with the first."""
    z = jnp.array([1.0, 2.0, 3.0])
    expected = schaffer_f6(1.0, 2.0) + schaffer_f6(2.0, 3.0) + schaffer_f6(3.0, 1.0)
    assert jnp.allclose(expanded_schaffer_f6(z), expected)
    assert schaffer_f6(jnp.array(0.0), jnp.array(0.0)) == 0.0


def test_non_continuous():
    """Coordinates far from the center are rounded to the nearest half."""
    x = jnp.array([0.2, 0.7, -1.3, 1.25])
    assert jnp.allclose(non_continuous(x), jnp.array([0.2, 0.5, -1.5, 1.5]))

    # Close to the center nothing is rounded
    center = jnp.array([0.0, 0.6, 0.0, 1.0])
    assert jnp.allclose(non_continuous(x, center), jnp.array([0.2, 0.7, -1.5, 1.25]))
