"""
Primitives module for shared type aliases, precision settings, and the metric
helpers every vector type computes with.
"""

import logging
import operator
from collections.abc import Sequence

import jax
import jax.numpy as jnp
from jax.typing import DTypeLike
from jaxtyping import Array, Bool, Float, Scalar

logger = logging.getLogger(__name__)

# Metric operations always run in double precision
jax.config.update("jax_enable_x64", True)
logger.debug("Enabled JAX 64-bit mode for metric operations.")

METRIC_DTYPE = jnp.float64

# Project type aliases
Scalar = Scalar
BoolScalar = Bool[Array, ""]
FloatScalar = Float[Array, ""]
Array = Array
DTypeLike = DTypeLike


def component_dtype(*components: Scalar) -> jnp.dtype:
    """Common dtype of a set of vector components."""
    return jnp.result_type(*components)


def to_metric(value: Scalar) -> FloatScalar:
    """Convert a component to the metric (float64) representation."""
    return jnp.asarray(value, dtype=METRIC_DTYPE)


def from_metric(value: FloatScalar, dtype: DTypeLike) -> Scalar:
    """
    Convert a metric value back to a component dtype.

    Parameters
    ----------
    value : FloatScalar
        Value computed in float64.
    dtype : DTypeLike
        Target component dtype.

    Returns
    -------
    Scalar
        Value cast to ``dtype``. Integer targets truncate toward zero.
    """
    return jnp.asarray(value).astype(dtype)


def divide(a: Scalar, b: Scalar) -> Scalar:
    """
    Divide two components, keeping the component dtype.

    Parameters
    ----------
    a : Scalar
        Dividend.
    b : Scalar
        Divisor.

    Returns
    -------
    Scalar
        Truncated quotient for integer dtypes, true quotient otherwise.

    Notes
    -----
    Floating division by zero yields inf or nan. Integer division by zero
    does not raise or abort: it deliberately returns XLA's
    implementation-defined value, since a traced computation cannot trap.
    This departs from fixed-width integer types that panic on a zero divisor.
    """
    dtype = component_dtype(a, b)
    if jnp.issubdtype(dtype, jnp.integer):
        return jax.lax.div(jnp.asarray(a, dtype=dtype), jnp.asarray(b, dtype=dtype))
    return jnp.true_divide(a, b)


def dot_n(a: Sequence[Scalar], b: Sequence[Scalar]) -> FloatScalar:
    """
    Compute the dot product of two equally sized component sequences.

    Parameters
    ----------
    a : Sequence[Scalar]
        Components of the first vector.
    b : Sequence[Scalar]
        Components of the second vector, same length as ``a``.

    Returns
    -------
    dot : FloatScalar
        Sum of componentwise products, computed in float64.
    """
    total = to_metric(0.0)
    for a_i, b_i in zip(a, b, strict=True):
        total = total + to_metric(a_i) * to_metric(b_i)
    return total


def interpolate(a: Scalar, b: Scalar, t: FloatScalar) -> FloatScalar:
    """
    Linearly interpolate one component pair in float64.

    Parameters
    ----------
    a : Scalar
        Start component, returned at ``t = 0``.
    b : Scalar
        End component, returned exactly at ``t = 1``.
    t : FloatScalar
        Interpolation factor, not clamped.

    Returns
    -------
    FloatScalar
        ``a + (b - a) * t`` computed in float64.
    """
    a, b, t = to_metric(a), to_metric(b), to_metric(t)
    return jnp.where(t == 1.0, b, a + (b - a) * t)


def norm_n(v: Sequence[Scalar]) -> FloatScalar:
    """
    Compute the Euclidean norm of a component sequence.

    Parameters
    ----------
    v : Sequence[Scalar]
        Vector components [x, y, ...].

    Returns
    -------
    norm : FloatScalar
        L2 norm (magnitude) of the vector, computed in float64.
    """
    return jnp.sqrt(dot_n(v, v))


def check_index(index: int, size: int) -> int:
    """
    Validate a swizzle index against a vector's dimensionality.

    Raises
    ------
    TypeError
        If ``index`` is not an integer.
    IndexError
        If ``index`` is outside ``[0, size - 1]``.
    """
    index = operator.index(index)
    if not 0 <= index < size:
        raise IndexError(
            f"Swizzle index {index} out of range for a {size}-component vector"
        )
    return index
