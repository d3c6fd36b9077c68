"""
Vector2 module for 2D vectors over a generic numeric component dtype.

Componentwise arithmetic keeps the component dtype. Metric operations
(length, dot, cross, normalize, projection, interpolation, angles) are
computed in float64 and converted back to the component dtype when they
return a vector.
"""

from dataclasses import dataclass
from typing import Iterator

import jax
import jax.numpy as jnp

from .config import ToleranceConfig
from .primitives import (
    Array,
    BoolScalar,
    DTypeLike,
    FloatScalar,
    Scalar,
    check_index,
    component_dtype,
    divide,
    dot_n,
    from_metric,
    interpolate,
    norm_n,
    to_metric,
)


@jax.tree_util.register_dataclass
@dataclass(frozen=True, eq=False)
class Vector2:
    """
    2D vector [x, y] with components of a shared numeric dtype.

    Equality (``==``) is exact componentwise equality without any tolerance,
    so float vectors only compare equal when every component matches bit for
    bit. Use ``isclose`` for tolerance-based comparison.
    """

    x: Scalar
    """First component."""

    y: Scalar
    """Second component."""

    @classmethod
    def new(cls, x: Scalar, y: Scalar, dtype: DTypeLike | None = None) -> "Vector2":
        """
        Construct a vector with both components cast to one dtype.

        Parameters
        ----------
        x : Scalar
            First component.
        y : Scalar
            Second component.
        dtype : DTypeLike, optional
            Component dtype. Inferred from ``x`` and ``y`` when omitted.

        Returns
        -------
        Vector2
            New vector [x, y].
        """
        if dtype is None:
            dtype = component_dtype(x, y)
        return cls(jnp.asarray(x).astype(dtype), jnp.asarray(y).astype(dtype))

    @classmethod
    def from_array(cls, arr: Array) -> "Vector2":
        """
        Build a vector from an array whose leading dimension holds [x, y].

        Raises
        ------
        ValueError
            If the leading dimension is not 2.
        """
        arr = jnp.asarray(arr)
        if arr.ndim == 0 or arr.shape[0] != 2:
            raise ValueError(f"Expected an array with leading dimension 2, got shape {arr.shape}")
        return cls(arr[0], arr[1])

    @property
    def dtype(self) -> jnp.dtype:
        """Common dtype of the components."""
        return component_dtype(self.x, self.y)

    def astype(self, dtype: DTypeLike) -> "Vector2":
        """Return a copy with components cast to ``dtype``."""
        return Vector2(jnp.asarray(self.x).astype(dtype), jnp.asarray(self.y).astype(dtype))

    def to_array(self) -> Array:
        """Stack the components into an array of shape (2, ...)."""
        return jnp.stack([self.x, self.y])

    def length(self) -> FloatScalar:
        """
        Compute the Euclidean length of the vector.

        Returns
        -------
        length : FloatScalar
            ``sqrt(x**2 + y**2)`` computed in float64.
        """
        return norm_n((self.x, self.y))

    def length_squared(self) -> FloatScalar:
        """Squared length, ``x**2 + y**2`` in float64."""
        return dot_n((self.x, self.y), (self.x, self.y))

    def dot(self, other: "Vector2") -> FloatScalar:
        """
        Compute the dot product with another vector.

        Parameters
        ----------
        other : Vector2
            Second operand.

        Returns
        -------
        dot : FloatScalar
            ``x1 * x2 + y1 * y2`` computed in float64.
        """
        return dot_n((self.x, self.y), (other.x, other.y))

    def cross(self, other: "Vector2") -> FloatScalar:
        """
        Compute the 2D cross product (perpendicular dot product).

        Parameters
        ----------
        other : Vector2
            Second operand.

        Returns
        -------
        cross : FloatScalar
            ``x1 * y2 - y1 * x2``, the z component of the cross product of
            both vectors embedded in the z = 0 plane.
        """
        return to_metric(self.x) * to_metric(other.y) - to_metric(self.y) * to_metric(other.x)

    def normalize(self) -> "Vector2":
        """
        Scale the vector to unit length.

        Returns
        -------
        Vector2
            Unit vector in the component dtype, or this vector unchanged when
            its length is exactly zero.
        """
        dtype = self.dtype
        length = self.length()
        is_zero = length == 0.0
        return Vector2(
            jnp.where(is_zero, self.x, from_metric(to_metric(self.x) / length, dtype)),
            jnp.where(is_zero, self.y, from_metric(to_metric(self.y) / length, dtype)),
        )

    def project_onto(self, other: "Vector2") -> "Vector2":
        """
        Project this vector onto another vector.

        Parameters
        ----------
        other : Vector2
            Direction to project onto.

        Returns
        -------
        Vector2
            ``dot(self, other) / dot(other, other) * other`` in the component
            dtype.

        Notes
        -----
        Projecting onto a zero vector is not guarded: the division yields nan
        and the result components are nan (or the cast of nan for integer
        dtypes).
        """
        dtype = self.dtype
        scalar = self.dot(other) / other.dot(other)
        return Vector2(
            from_metric(scalar * to_metric(other.x), dtype),
            from_metric(scalar * to_metric(other.y), dtype),
        )

    def reject_from(self, other: "Vector2") -> "Vector2":
        """
        Compute the component of this vector orthogonal to another vector.

        The projection is converted to the component dtype before it is
        subtracted, so ``project_onto(other) + reject_from(other)`` recovers
        this vector up to that rounding.
        """
        return self - self.project_onto(other)

    def lerp(self, other: "Vector2", t: FloatScalar) -> "Vector2":
        """
        Linearly interpolate towards another vector.

        Parameters
        ----------
        other : Vector2
            End point, returned exactly at ``t = 1``.
        t : FloatScalar
            Interpolation factor. Not clamped: values outside [0, 1]
            extrapolate.

        Returns
        -------
        Vector2
            ``self + (other - self) * t`` in the component dtype.
        """
        dtype = self.dtype
        return Vector2(
            from_metric(interpolate(self.x, other.x, t), dtype),
            from_metric(interpolate(self.y, other.y, t), dtype),
        )

    def angle_between(self, other: "Vector2") -> FloatScalar:
        """
        Compute the angle to another vector.

        Parameters
        ----------
        other : Vector2
            Second operand.

        Returns
        -------
        angle : FloatScalar
            Angle in radians in [0, pi]. nan if either vector has zero length.
        """
        return jnp.arccos(self.dot(other) / (self.length() * other.length()))

    def swizzle(self, i: int, j: int) -> "Vector2":
        """
        Gather components by index into a new vector.

        Parameters
        ----------
        i, j : int
            Index into [x, y] for the new x and y. Indices may repeat.

        Returns
        -------
        Vector2
            New vector [components[i], components[j]].

        Raises
        ------
        IndexError
            If an index is outside {0, 1}.
        """
        components = (self.x, self.y)
        return Vector2(components[check_index(i, 2)], components[check_index(j, 2)])

    def isclose(self, other: "Vector2", config: ToleranceConfig = ToleranceConfig()) -> BoolScalar:
        """Componentwise comparison within the tolerances of ``config``."""
        return jnp.allclose(self.to_array(), other.to_array(), rtol=config.rtol, atol=config.atol)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: "Vector2") -> "Vector2":
        """
        Componentwise division.

        Integer division by zero deliberately returns an undefined value
        instead of panicking like fixed-width integer division would.
        """
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(divide(self.x, other.x), divide(self.y, other.y))

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(jnp.all(self.x == other.x)) and bool(jnp.all(self.y == other.y))

    def __iter__(self) -> Iterator[Scalar]:
        return iter((self.x, self.y))

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"
