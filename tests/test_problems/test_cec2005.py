"""Tests for CEC2005 problems."""

import jax
import jax.numpy as jnp
import pytest
from cecsax.problems import (
    CEC2005Problem,
    NumericDegeneracyError,
    RandomDraw,
    fn_names,
    make_benchmark,
    sample_params,
)


def test_cec2005_problem_init():
    """Test CEC2005 problem initialization with default settings."""
    problem = CEC2005Problem(fn_id=1, num_dims=2)
    assert problem.fn_name == "Shifted Sphere"
    assert problem.num_dims == 2


def test_cec2005_problem_optimum(fn_id, key):
    """Every function attains its bias at the optimum."""
    problem = CEC2005Problem(fn_id=fn_id, num_dims=10, seed=0)
    state = problem.init(key)

    fitness, state, info = problem.eval(key, problem.x_opt[None], state)
    assert fitness.shape == (1,)
    assert jnp.allclose(fitness[0], problem.f_opt, atol=1e-6)


def test_cec2005_problem_sample(fn_id, key):
    """Test CEC2005 problem solution sampling."""
    problem = CEC2005Problem(fn_id=fn_id, num_dims=3, seed=0)
    solution = problem.sample(key)

    assert solution.shape == (3,)
    assert jnp.all(solution >= problem.x_range[0])
    assert jnp.all(solution <= problem.x_range[1])


def test_cec2005_problem_eval(key):
    """Test CEC2005 problem evaluation of a population."""
    problem = CEC2005Problem(fn_id=9, num_dims=3, seed=0)
    state = problem.init(key)

    population_size = 5
    keys = jax.random.split(key, population_size)
    solutions = jax.vmap(problem.sample)(keys)

    fitness, state, info = problem.eval(key, solutions, state)
    assert fitness.shape == (population_size,)
    assert jnp.all(fitness >= problem.f_opt)
    assert state.counter == 1

    fitness, state, info = problem.eval(key, solutions, state)
    assert state.counter == 2


@pytest.mark.parametrize("fn_id", [4, 17, 24, 25])
def test_cec2005_problem_noise(fn_id, key):
    """Noisy functions are reproducible for a fixed key."""
    problem = CEC2005Problem(fn_id=fn_id, num_dims=3, seed=0)
    state = problem.init(key)
    solutions = jnp.ones((2, 3))

    fitness_1, _, _ = problem.eval(key, solutions, state)
    fitness_2, _, _ = problem.eval(key, solutions, state)
    fitness_3, _, _ = problem.eval(jax.random.key(1), solutions, state)

    assert jnp.array_equal(fitness_1, fitness_2)
    assert not jnp.array_equal(fitness_1, fitness_3)


def test_cec2005_problem_seed():
    """The seed determines the parameters."""
    problem_1 = CEC2005Problem(fn_id=3, num_dims=3, seed=0)
    problem_2 = CEC2005Problem(fn_id=3, num_dims=3, seed=0)
    problem_3 = CEC2005Problem(fn_id=3, num_dims=3, seed=1)

    assert jnp.array_equal(problem_1.x_opt, problem_2.x_opt)
    assert not jnp.array_equal(problem_1.x_opt, problem_3.x_opt)


def test_cec2005_problem_custom_params(key):
    """Test CEC2005 problem with custom parameters."""
    params = sample_params(key, 16, 3)
    params = params.replace(o=params.o.at[0].set(jnp.array([1.0, 2.0, 3.0])))

    problem = CEC2005Problem(fn_id=16, num_dims=3, params=params)
    assert jnp.array_equal(problem.x_opt, jnp.array([1.0, 2.0, 3.0]))
    assert problem.f_opt == 120.0

    state = problem.init(key)
    fitness, _, _ = problem.eval(key, problem.x_opt[None], state)
    assert jnp.allclose(fitness, 120.0)


def test_cec2005_problem_params_mismatch(key):
    """Parameters must match the number of dimensions."""
    params = sample_params(key, 1, 4)
    with pytest.raises(ValueError):
        CEC2005Problem(fn_id=1, num_dims=3, params=params)


def test_cec2005_problem_invalid():
    """Unknown ids and too few dimensions are rejected."""
    with pytest.raises(ValueError):
        CEC2005Problem(fn_id=26, num_dims=3)

    with pytest.raises(ValueError):
        CEC2005Problem(fn_id=21, num_dims=1)


def test_cec2005_problem_degenerate(key):
    """Solutions far from every hybrid optimum are rejected."""
    problem = CEC2005Problem(fn_id=15, num_dims=3, seed=0)
    state = problem.init(key)

    with pytest.raises(NumericDegeneracyError):
        problem.eval(key, jnp.full((2, 3), 1e4), state)


def test_make_benchmark(key):
    """Noisy benchmarks evaluate to random draws."""
    params = sample_params(key, 4, 3)
    benchmark = make_benchmark(4, params)
    draw = benchmark.evaluate(jnp.ones(3))

    assert isinstance(draw, RandomDraw)
    assert draw.resolve(key) == draw.resolve(key)

    params = sample_params(key, 1, 3)
    benchmark = make_benchmark(1, params)
    assert jnp.allclose(benchmark.evaluate(params.o), -450.0)


def test_make_benchmark_requires_key(key):
    """Hybrids with noisy components need a key for their normalization."""
    params = sample_params(key, 24, 3)
    with pytest.raises(ValueError):
        make_benchmark(24, params)

    benchmark = make_benchmark(24, params, key)
    assert isinstance(benchmark.evaluate(jnp.ones(3)), RandomDraw)


def test_fn_names():
    """All 25 functions are named."""
    assert sorted(fn_names) == list(range(1, 26))


def test_sample_params_f5_bounds(key):
    """F5 optimum lies on the lower bound for the first ceil(D/4) coordinates and
    on the upper bound from coordinate floor(3D/4) on (1-based)."""
    o = sample_params(key, 5, 10).o
    assert jnp.all(o[:3] == -100.0)
    assert jnp.all(o[6:] == 100.0)
    assert jnp.all(jnp.abs(o[3:6]) < 100.0)

    o = sample_params(key, 5, 4).o
    assert o[0] == -100.0
    assert jnp.all(o[2:] == 100.0)
    assert jnp.abs(o[1]) < 100.0


def test_cec2005_problem_info(key):
    """Evaluation reports the composition weight sum of every solution."""
    problem = CEC2005Problem(fn_id=15, num_dims=3, seed=0)
    state = problem.init(key)
    solutions = jnp.stack([problem.x_opt, jnp.ones(3)])

    _, _, info = problem.eval(key, solutions, state)
    assert info["weight_sum"].shape == (2,)
    assert jnp.all(info["weight_sum"] > 0.0)
    assert jnp.allclose(info["weight_sum"][0], 1.0)

    problem = CEC2005Problem(fn_id=1, num_dims=3, seed=0)
    _, _, info = problem.eval(key, solutions, state)
    assert jnp.array_equal(info["weight_sum"], jnp.ones(2))
