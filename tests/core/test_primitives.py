"""Tests for primitives module."""

import jax
import jax.numpy as jnp
import pytest

from vexel.core.primitives import (
    METRIC_DTYPE,
    check_index,
    component_dtype,
    divide,
    dot_n,
    from_metric,
    interpolate,
    norm_n,
    to_metric,
)


def test_precision_settings() -> None:
    """Test that importing vexel switches JAX to 64-bit mode."""
    assert jnp.array(1.0).dtype == jnp.float64
    assert METRIC_DTYPE == jnp.float64
    assert to_metric(1.0).dtype == jnp.float64


def test_component_dtype() -> None:
    """Test common dtype inference."""
    # Standard case 1 - matching float32 components
    a = jnp.array(1.0, dtype=jnp.float32)
    b = jnp.array(2.0, dtype=jnp.float32)
    assert component_dtype(a, b) == jnp.float32

    # Standard case 2 - matching int32 components
    i = jnp.array(1, dtype=jnp.int32)
    j = jnp.array(2, dtype=jnp.int32)
    assert component_dtype(i, j) == jnp.int32

    # Edge case 1 - python floats use the default 64-bit float
    assert component_dtype(1.0, 2.0) == jnp.float64


def test_to_metric_and_from_metric() -> None:
    """Test conversion to and from the metric representation."""
    # Standard case 1 - integer to float64
    value = to_metric(jnp.array(3, dtype=jnp.int32))
    assert value.dtype == jnp.float64
    assert value == 3.0

    # Standard case 2 - float64 back to float32
    result = from_metric(jnp.array(0.5, dtype=jnp.float64), jnp.float32)
    assert result.dtype == jnp.float32
    assert result == 0.5

    # Edge case 1 - integer targets truncate toward zero
    assert from_metric(to_metric(2.7), jnp.int32) == 2
    assert from_metric(to_metric(-2.7), jnp.int32) == -2


def test_divide(jit_mode: str) -> None:
    """Test component division."""
    divide_jit = jax.jit(divide)

    # Standard case 1 - float division
    result_1 = divide_jit(jnp.array(7.0), jnp.array(2.0))
    assert result_1 == 3.5

    # Standard case 2 - integer division truncates and keeps dtype
    seven = jnp.array(7, dtype=jnp.int32)
    two = jnp.array(2, dtype=jnp.int32)
    result_2 = divide_jit(seven, two)
    assert result_2.dtype == jnp.int32
    assert result_2 == 3

    # Edge case 1 - negative integer division truncates toward zero
    result_3 = divide_jit(-seven, two)
    assert result_3 == -3

    # Edge case 2 - float division by zero gives inf and nan
    assert jnp.isinf(divide_jit(jnp.array(1.0), jnp.array(0.0)))
    assert jnp.isnan(divide_jit(jnp.array(0.0), jnp.array(0.0)))

    # Edge case 3 - integer division by zero returns a value instead of raising
    result_4 = divide_jit(seven, jnp.array(0, dtype=jnp.int32))
    assert result_4.dtype == jnp.int32


def test_interpolate(jit_mode: str) -> None:
    """Test component interpolation."""
    interpolate_jit = jax.jit(interpolate)

    # Standard case 1 - follows start + (end - start) * t
    assert interpolate_jit(1.0, 5.0, 0.5) == 3.0
    assert interpolate_jit(0.1, 0.7, 0.25) == 0.1 + (0.7 - 0.1) * 0.25

    # Standard case 2 - endpoints are exact
    assert interpolate_jit(0.1, 0.7, 0.0) == 0.1
    assert interpolate_jit(0.1, 0.7, 1.0) == 0.7

    # Edge case 1 - equal endpoints are returned unchanged
    assert interpolate_jit(0.1, 0.1, 0.3) == 0.1
    assert interpolate_jit(1e308, 1e308, 2.0) == 1e308

    # Edge case 2 - integer components give a float64 result
    result = interpolate_jit(jnp.array(0, dtype=jnp.int32), jnp.array(10, dtype=jnp.int32), 0.25)
    assert result.dtype == jnp.float64
    assert result == 2.5


def test_dot_n(jit_mode: str) -> None:
    """Test metric dot product over component sequences."""
    # Standard case 1 - three components
    result_1 = dot_n((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))
    assert result_1 == 32.0
    assert result_1.dtype == jnp.float64

    # Standard case 2 - integer components are promoted to float64
    ints = (jnp.array(2, dtype=jnp.int32), jnp.array(3, dtype=jnp.int32))
    result_2 = dot_n(ints, ints)
    assert result_2 == 13.0
    assert result_2.dtype == jnp.float64

    # Edge case 1 - mismatched lengths are rejected
    with pytest.raises(ValueError):
        dot_n((1.0, 2.0), (1.0, 2.0, 3.0))


def test_norm_n(jit_mode: str) -> None:
    """Test Euclidean norm over component sequences."""
    # Standard case 1 - 3-4-5 triangle
    assert norm_n((3.0, 4.0)) == 5.0

    # Standard case 2 - 2-3-6 gives 7
    assert jnp.isclose(norm_n((2.0, 3.0, 6.0)), 7.0)

    # Edge case 1 - zero vector
    assert norm_n((0.0, 0.0, 0.0, 0.0)) == 0.0

    # Edge case 2 - negative components
    assert norm_n((-3.0, -4.0)) == 5.0

    # Test with vmap
    xs = jnp.array([3.0, 0.0, -3.0, 1.0])
    ys = jnp.array([4.0, 1.0, -4.0, 0.0])
    results = jax.vmap(lambda x, y: norm_n((x, y)))(xs, ys)
    assert jnp.allclose(results, jnp.array([5.0, 1.0, 5.0, 1.0]))


def test_check_index() -> None:
    """Test swizzle index validation."""
    # Standard case 1 - valid indices pass through
    assert check_index(0, 2) == 0
    assert check_index(3, 4) == 3

    # Edge case 1 - index equal to the size
    with pytest.raises(IndexError):
        check_index(2, 2)

    # Edge case 2 - negative index
    with pytest.raises(IndexError):
        check_index(-1, 3)

    # Edge case 3 - non-integer index
    with pytest.raises(TypeError):
        check_index(1.0, 3)
