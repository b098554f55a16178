"""Vector transformations shared by the CEC2005 benchmark functions.

All benchmarks move the landscape with the same primitives: the solution is
shifted by the optimum location, optionally divided by a scale factor, and then
rotated. This order is fixed and only `shift_scale_rotate` combines the steps.

Shape checks are done on static shapes, so they raise at trace time when the
transforms are used under `jax.jit` or `jax.vmap`.

[1] https://www.lri.fr/~hansen/Tech-Report-May-30-05.pdf
"""

import jax
import jax.numpy as jnp

from .errors import DimensionMismatchError


def check_vector(x: jax.Array, num_dims: int | None = None) -> jax.Array:
    """Check that x is a vector, optionally of a given length."""
    if x.ndim != 1:
        raise DimensionMismatchError(f"Expected a vector, got shape {x.shape}.")
    if num_dims is not None and x.shape[0] != num_dims:
        raise DimensionMismatchError(
            f"Expected a vector of length {num_dims}, got length {x.shape[0]}."
        )
    return x


def check_matrix(m: jax.Array, num_dims: int) -> jax.Array:
    """Check that m is a square (num_dims, num_dims) matrix."""
    if m.shape != (num_dims, num_dims):
        raise DimensionMismatchError(
            f"Expected a ({num_dims}, {num_dims}) matrix, got shape {m.shape}."
        )
    return m


def shift(x: jax.Array, o: jax.Array) -> jax.Array:
    """Shift x by the offset o, y_i = x_i - o_i."""
    check_vector(x)
    check_vector(o, x.shape[0])
    return x - o


def rotate(x: jax.Array, m: jax.Array) -> jax.Array:
    """Rotate x by the row-major matrix m, y_i = sum_j m_ij x_j."""
    check_vector(x)
    check_matrix(m, x.shape[0])
    return jnp.matmul(m, x)


def shift_scale_rotate(
    x: jax.Array, o: jax.Array, m: jax.Array, scale: float | jax.Array = 1.0
) -> jax.Array:
    """Shift by o, divide by scale, then rotate by m."""
    return rotate(shift(x, o) / scale, m)


def generate_random_rotation(key: jax.Array, num_dims: int) -> jax.Array:
    """Generate a random (n, n) rotation matrix uniformly sampled from SO(n).

    This implementation follows the method described in:
    "How to generate a random unitary matrix" [Maris Ozols 2006]
    http://home.lu.lv/~sd20008/papers/essays/Random%20unitary%20[paper].pdf
    """
    random_matrix = jax.random.normal(key, (num_dims, num_dims))

    # QR decomposition
    orthogonal_matrix, upper_triangular = jnp.linalg.qr(random_matrix)

    # Extract diagonal and create sign correction matrix
    diagonal = jnp.diag(upper_triangular)
    sign_correction = jnp.diag(diagonal / jnp.abs(diagonal))

    rotation = orthogonal_matrix @ sign_correction

    # Ensure determinant is 1 by possibly flipping first row
    determinant = jnp.linalg.det(rotation)
    rotation = rotation.at[0].multiply(jnp.sign(determinant))

    return rotation
