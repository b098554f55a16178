"""CEC2005 Base Functions.

Elementary landscapes used by the CEC2005 benchmark suite from [1]. Each function
takes an already shifted and rotated vector z and returns a scalar.

[1] https://www.lri.fr/~hansen/Tech-Report-May-30-05.pdf
"""

import jax
import jax.numpy as jnp


def spherical(z: jax.Array) -> jax.Array:
    """Sphere Function ([1], F1)."""
    return jnp.sum(jnp.square(z))


def schwefel_12(z: jax.Array) -> jax.Array:
    """Schwefel's Problem 1.2 ([1], F2)."""
    return jnp.sum(jnp.square(jnp.cumsum(z)))


def elliptic(z: jax.Array) -> jax.Array:
    """High Conditioned Elliptic Function ([1], F3)."""
    num_dims = z.shape[0]
    exp = jnp.arange(num_dims) / (num_dims - 1) if num_dims > 1 else jnp.zeros(1)
    return jnp.sum(jnp.power(1e6, exp) * jnp.square(z))


def rosenbrock(z: jax.Array) -> jax.Array:
    """Rosenbrock's Function ([1], F6)."""
    z_i, z_ip1 = z[:-1], z[1:]
    return jnp.sum(100.0 * jnp.square(jnp.square(z_i) - z_ip1) + jnp.square(z_i - 1.0))


def griewank(z: jax.Array) -> jax.Array:
    """Griewank's Function ([1], F7)."""
    i = jnp.arange(1, z.shape[0] + 1)
    return jnp.sum(jnp.square(z)) / 4000.0 - jnp.prod(jnp.cos(z / jnp.sqrt(i))) + 1.0


def ackley(z: jax.Array) -> jax.Array:
    """Ackley's Function ([1], F8)."""
    out_1 = -20.0 * jnp.exp(-0.2 * jnp.sqrt(jnp.mean(jnp.square(z))))
    out_2 = -jnp.exp(jnp.mean(jnp.cos(2 * jnp.pi * z)))
    return out_1 + out_2 + 20.0 + jnp.e


def rastrigin(z: jax.Array) -> jax.Array:
    """Rastrigin's Function ([1], F9)."""
    return jnp.sum(jnp.square(z) - 10.0 * jnp.cos(2 * jnp.pi * z) + 10.0)


def weierstrass(
    z: jax.Array, a: float = 0.5, b: float = 3.0, k_max: int = 20
) -> jax.Array:
    """Weierstrass Function ([1], F11)."""
    a_k = jnp.power(a, jnp.arange(k_max + 1))
    b_k = jnp.power(b, jnp.arange(k_max + 1))

    out_1 = jnp.sum(a_k * jnp.cos(2 * jnp.pi * b_k * (z[:, None] + 0.5)))
    out_2 = z.shape[0] * jnp.sum(a_k * jnp.cos(jnp.pi * b_k))
    return out_1 - out_2


def schaffer_f6(x: jax.Array, y: jax.Array) -> jax.Array:
    """Schaffer's F6 Function for a pair of coordinates ([1], F14)."""
    r_squared = jnp.square(x) + jnp.square(y)
    return 0.5 + (jnp.square(jnp.sin(jnp.sqrt(r_squared))) - 0.5) / jnp.square(
        1.0 + 0.001 * r_squared
    )


def expanded_schaffer_f6(z: jax.Array) -> jax.Array:
    """Expanded Schaffer's F6 Function ([1], F14).

    Sums Schaffer's F6 over consecutive pairs, wrapping the last coordinate
    around to the first.
    """
    return jnp.sum(schaffer_f6(z, jnp.roll(z, -1)))


def f8f2(z: jax.Array) -> jax.Array:
    """Expanded Griewank's plus Rosenbrock's Function ([1], F13).

    Griewank's function evaluated at the two-dimensional Rosenbrock value of
    every consecutive pair, wrapping the last coordinate around to the first.
    """
    z_i, z_ip1 = z, jnp.roll(z, -1)
    f2 = 100.0 * jnp.square(jnp.square(z_i) - z_ip1) + jnp.square(z_i - 1.0)
    return jnp.sum(jnp.square(f2) / 4000.0 - jnp.cos(f2) + 1.0)


def non_continuous(x: jax.Array, center: jax.Array | float = 0.0) -> jax.Array:
    """Round coordinates away from center to the nearest half ([1], F23)."""
    return jnp.where(jnp.abs(x - center) < 0.5, x, jnp.floor(2.0 * x + 0.5) / 2.0)


cec2005_base_fns = {
    "spherical": spherical,
    "schwefel_12": schwefel_12,
    "elliptic": elliptic,
    "rosenbrock": rosenbrock,
    "griewank": griewank,
    "ackley": ackley,
    "rastrigin": rastrigin,
    "weierstrass": weierstrass,
    "expanded_schaffer_f6": expanded_schaffer_f6,
    "f8f2": f8f2,
}
