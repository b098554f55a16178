"""CEC2005 Real-Parameter Optimization Problem.

[1] https://www.lri.fr/~hansen/Tech-Report-May-30-05.pdf
"""

from functools import partial

import jax
from flax import struct

from ...types import Fitness, Metrics, Params, Population, Solution
from ..problem import Problem, State
from .cec2005_benchmarks import fn_names, make_benchmark
from .cec2005_params import hybrid_fn_ids, sample_params, x_ranges
from .hybrid import check_weight_sum


@struct.dataclass
class State(State):
    pass


class CEC2005Problem(Problem):
    """CEC2005 Real-Parameter Optimization Benchmark."""

    def __init__(
        self,
        fn_id: int = 1,
        num_dims: int = 10,
        params: Params | None = None,
        seed: int = 0,
    ):
        """Initialize CEC2005 problem.

        Without params, synthetic parameters are sampled from seed.
        """
        self.fn_id = fn_id
        self._num_dims = num_dims

        key = jax.random.key(seed)
        key_params, key_fmax = jax.random.split(key)

        if params is None:
            params = sample_params(key_params, fn_id, num_dims)
        self._params = params

        self.benchmark = make_benchmark(fn_id, params, key_fmax)
        if self.benchmark.num_dims != num_dims:
            raise ValueError(
                f"Parameters of dimension {self.benchmark.num_dims} do not match "
                f"num_dims={num_dims}."
            )

    @property
    def fn_name(self) -> str:
        return fn_names[self.fn_id]

    @property
    def x_range(self):
        """Range of the search space for solutions."""
        return x_ranges[self.fn_id]

    @property
    def x_opt(self):
        """Optimal solution location."""
        if self.fn_id == 12:
            return self._params.alpha
        if self.fn_id in hybrid_fn_ids:
            return self._params.o[0]
        return self._params.o

    @property
    def f_opt(self):
        """Optimal function value."""
        return self._params.fbias

    @partial(jax.jit, static_argnames=("self",))
    def init(self, key: jax.Array) -> State:
        """Initialize state."""
        return State(counter=0)

    @partial(jax.jit, static_argnames=("self",))
    def _eval(
        self, key: jax.Array, solutions: Population
    ) -> tuple[Fitness, jax.Array]:
        keys = jax.random.split(key, solutions.shape[0])
        return jax.vmap(self.benchmark)(keys, solutions)

    def eval(
        self, key: jax.Array, solutions: Population, state: State
    ) -> tuple[Fitness, State, Metrics]:
        """Evaluate a batch of solutions."""
        fn_val, weight_sum = self._eval(key, solutions)
        check_weight_sum(weight_sum)
        info = {"weight_sum": weight_sum}
        return fn_val, state.replace(counter=state.counter + 1), info

    @partial(jax.jit, static_argnames=("self",))
    def sample(self, key: jax.Array) -> Solution:
        """Sample a solution in the search space."""
        return jax.random.uniform(
            key,
            shape=(self._num_dims,),
            minval=self.x_range[0],
            maxval=self.x_range[1],
        )
