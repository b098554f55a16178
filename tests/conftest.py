"""Pytest configuration file for cecsax tests."""

import jax
import jax.numpy as jnp
import pytest
from cecsax.problems import ComponentSpec
from cecsax.problems.cec2005.cec2005_fns import spherical

jax.config.update("jax_enable_x64", True)


# Common test parameters
@pytest.fixture
def num_dims():
    return 3


@pytest.fixture
def key():
    return jax.random.key(0)


@pytest.fixture
def two_sphere_specs(num_dims):
    """Two spherical components with optima at the origin and at 5."""
    return [
        ComponentSpec(
            offset=jnp.zeros(num_dims),
            rotation=jnp.eye(num_dims),
            fn=spherical,
            scale=1.0,
            spread=1.0,
            bias=0.0,
        ),
        ComponentSpec(
            offset=jnp.full(num_dims, 5.0),
            rotation=jnp.eye(num_dims),
            fn=spherical,
            scale=1.0,
            spread=1.0,
            bias=100.0,
        ),
    ]


@pytest.fixture(params=list(range(1, 26)))
def fn_id(request):
    return request.param
