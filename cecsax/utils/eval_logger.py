from functools import partial

import jax
import jax.numpy as jnp


class EvalLog(object):
    def __init__(
        self,
        num_dims: int,
        f_opt: float,
        checkpoints: tuple[float, ...] = (1e3, 1e4, 1e5),
    ):
        """Simple jittable log of the CEC2005 evaluation criteria.

        Tracks the best solution and records its error f(x) - f_opt once the number
        of function evaluations reaches each checkpoint.
        """
        self.num_dims = num_dims
        self.f_opt = f_opt
        self.checkpoints = checkpoints

    @partial(jax.jit, static_argnums=(0,))
    def initialize(self) -> dict:
        """Initialize the logger storage."""
        log = {
            "best_fitness": jnp.array(jnp.inf),
            "best_params": jnp.zeros(self.num_dims),
            "num_evals": jnp.array(0),
            "error_at_checkpoints": jnp.full(len(self.checkpoints), jnp.inf),
        }
        return log

    @partial(jax.jit, static_argnums=(0,))
    def update(self, log: dict, x: jax.Array, fitness: jax.Array) -> dict:
        """Update the logging storage with a batch of evaluated solutions."""
        # Check if the batch contains a solution better than the current best
        best_idx = jnp.argmin(fitness)
        improved = fitness[best_idx] < log["best_fitness"]
        log["best_fitness"] = jnp.where(
            improved, fitness[best_idx], log["best_fitness"]
        )
        log["best_params"] = jnp.where(improved, x[best_idx], log["best_params"])

        # Record the error at every checkpoint crossed by this batch
        num_evals = log["num_evals"] + fitness.shape[0]
        checkpoints = jnp.array(self.checkpoints)
        reached = (log["num_evals"] < checkpoints) & (num_evals >= checkpoints)
        log["error_at_checkpoints"] = jnp.where(
            reached, log["best_fitness"] - self.f_opt, log["error_at_checkpoints"]
        )
        log["num_evals"] = num_evals
        return log

    def best_error(self, log: dict) -> jax.Array:
        """Error of the best solution found so far."""
        return log["best_fitness"] - self.f_opt
