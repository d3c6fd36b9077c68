"""
Vector4 module for 4D vectors over a generic numeric component dtype.

The cross product is only defined for three dimensions: ``Vector4.cross``
works on the [x, y, z] part and always returns a float64 vector with w = 0.
"""

from dataclasses import dataclass
from typing import Iterator

import jax
import jax.numpy as jnp

from .config import ToleranceConfig
from .primitives import (
    METRIC_DTYPE,
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
class Vector4:
    """
    4D vector [x, y, z, w] with components of a shared numeric dtype.

    ``==`` compares components exactly, without tolerance.
    """

    x: Scalar
    """First component."""

    y: Scalar
    """Second component."""

    z: Scalar
    """Third component."""

    w: Scalar
    """Fourth component."""

    @classmethod
    def new(
        cls,
        x: Scalar,
        y: Scalar,
        z: Scalar,
        w: Scalar,
        dtype: DTypeLike | None = None,
    ) -> "Vector4":
        """
        Construct a vector with all components cast to one dtype.

        Parameters
        ----------
        x, y, z, w : Scalar
            Components.
        dtype : DTypeLike, optional
            Component dtype. Inferred from the components when omitted.

        Returns
        -------
        Vector4
            New vector [x, y, z, w].
        """
        if dtype is None:
            dtype = component_dtype(x, y, z, w)
        return cls(
            jnp.asarray(x).astype(dtype),
            jnp.asarray(y).astype(dtype),
            jnp.asarray(z).astype(dtype),
            jnp.asarray(w).astype(dtype),
        )

    @classmethod
    def from_array(cls, arr: Array) -> "Vector4":
        """
        Build a vector from an array whose leading dimension holds [x, y, z, w].

        Raises
        ------
        ValueError
            If the leading dimension is not 4.
        """
        arr = jnp.asarray(arr)
        if arr.ndim == 0 or arr.shape[0] != 4:
            raise ValueError(f"Expected an array with leading dimension 4, got shape {arr.shape}")
        return cls(arr[0], arr[1], arr[2], arr[3])

    @property
    def dtype(self) -> jnp.dtype:
        """Common dtype of the components."""
        return component_dtype(self.x, self.y, self.z, self.w)

    def astype(self, dtype: DTypeLike) -> "Vector4":
        """Return a copy with components cast to ``dtype``."""
        return Vector4(
            jnp.asarray(self.x).astype(dtype),
            jnp.asarray(self.y).astype(dtype),
            jnp.asarray(self.z).astype(dtype),
            jnp.asarray(self.w).astype(dtype),
        )

    def to_array(self) -> Array:
        """Stack the components into an array of shape (4, ...)."""
        return jnp.stack([self.x, self.y, self.z, self.w])

    def length(self) -> FloatScalar:
        """
        Compute the Euclidean length of the vector.

        Returns
        -------
        length : FloatScalar
            ``sqrt(x**2 + y**2 + z**2 + w**2)`` computed in float64.
        """
        return norm_n((self.x, self.y, self.z, self.w))

    def length_squared(self) -> FloatScalar:
        """Squared length in float64."""
        components = (self.x, self.y, self.z, self.w)
        return dot_n(components, components)

    def dot(self, other: "Vector4") -> FloatScalar:
        """
        Compute the dot product with another vector.

        Returns
        -------
        dot : FloatScalar
            ``x1*x2 + y1*y2 + z1*z2 + w1*w2`` computed in float64.
        """
        return dot_n((self.x, self.y, self.z, self.w), (other.x, other.y, other.z, other.w))

    def cross(self, other: "Vector4") -> "Vector4":
        """
        Compute the 3D cross product of the [x, y, z] parts.

        Parameters
        ----------
        other : Vector4
            Right-hand operand.

        Returns
        -------
        Vector4
            Float64 vector ``(y1*z2 - z1*y2, z1*x2 - x1*z2, x1*y2 - y1*x2, 0)``.

        Notes
        -----
        Four-dimensional vectors have no single canonical cross product. The w
        components of both operands are ignored, the result w is exactly 0.0,
        and the result stays in float64 instead of the component dtype.
        """
        x1, y1, z1 = to_metric(self.x), to_metric(self.y), to_metric(self.z)
        x2, y2, z2 = to_metric(other.x), to_metric(other.y), to_metric(other.z)
        return Vector4(
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
            jnp.zeros_like(x1, dtype=METRIC_DTYPE),
        )

    def normalize(self) -> "Vector4":
        """Unit vector in the component dtype, or this vector unchanged at zero length."""
        dtype = self.dtype
        length = self.length()
        is_zero = length == 0.0
        return Vector4(
            jnp.where(is_zero, self.x, from_metric(to_metric(self.x) / length, dtype)),
            jnp.where(is_zero, self.y, from_metric(to_metric(self.y) / length, dtype)),
            jnp.where(is_zero, self.z, from_metric(to_metric(self.z) / length, dtype)),
            jnp.where(is_zero, self.w, from_metric(to_metric(self.w) / length, dtype)),
        )

    def project_onto(self, other: "Vector4") -> "Vector4":
        """
        Project this vector onto another vector.

        Parameters
        ----------
        other : Vector4
            Direction to project onto.

        Returns
        -------
        Vector4
            ``dot(self, other) / dot(other, other) * other`` in the component
            dtype. nan when ``other`` is the zero vector.
        """
        dtype = self.dtype
        scalar = self.dot(other) / other.dot(other)
        return Vector4(
            from_metric(scalar * to_metric(other.x), dtype),
            from_metric(scalar * to_metric(other.y), dtype),
            from_metric(scalar * to_metric(other.z), dtype),
            from_metric(scalar * to_metric(other.w), dtype),
        )

    def reject_from(self, other: "Vector4") -> "Vector4":
        """Component of this vector orthogonal to ``other``."""
        return self - self.project_onto(other)

    def lerp(self, other: "Vector4", t: FloatScalar) -> "Vector4":
        """
        Linearly interpolate towards another vector.

        Parameters
        ----------
        other : Vector4
            End point.
        t : FloatScalar
            Interpolation factor, not clamped.

        Returns
        -------
        Vector4
            This vector at ``t = 0``, ``other`` at ``t = 1``.
        """
        dtype = self.dtype
        return Vector4(
            from_metric(interpolate(self.x, other.x, t), dtype),
            from_metric(interpolate(self.y, other.y, t), dtype),
            from_metric(interpolate(self.z, other.z, t), dtype),
            from_metric(interpolate(self.w, other.w, t), dtype),
        )

    def angle_between(self, other: "Vector4") -> FloatScalar:
        """Angle to ``other`` in radians, nan if either vector has zero length."""
        return jnp.arccos(self.dot(other) / (self.length() * other.length()))

    def swizzle(self, i: int, j: int, k: int, l: int) -> "Vector4":  # noqa: E741
        """
        Gather components by index into a new vector.

        Parameters
        ----------
        i, j, k, l : int
            Indices into [x, y, z, w]. Indices may repeat.

        Raises
        ------
        IndexError
            If an index is outside {0, 1, 2, 3}.
        """
        components = (self.x, self.y, self.z, self.w)
        return Vector4(
            components[check_index(i, 4)],
            components[check_index(j, 4)],
            components[check_index(k, 4)],
            components[check_index(l, 4)],
        )

    def isclose(self, other: "Vector4", config: ToleranceConfig = ToleranceConfig()) -> BoolScalar:
        """Componentwise comparison within the tolerances of ``config``."""
        return jnp.allclose(self.to_array(), other.to_array(), rtol=config.rtol, atol=config.atol)

    def __add__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def __truediv__(self, other: "Vector4") -> "Vector4":
        """
        Componentwise division.

        Integer division by zero deliberately returns an undefined value
        instead of panicking like fixed-width integer division would.
        """
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            divide(self.x, other.x),
            divide(self.y, other.y),
            divide(self.z, other.z),
            divide(self.w, other.w),
        )

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return (
            bool(jnp.all(self.x == other.x))
            and bool(jnp.all(self.y == other.y))
            and bool(jnp.all(self.z == other.z))
            and bool(jnp.all(self.w == other.w))
        )

    def __iter__(self) -> Iterator[Scalar]:
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self) -> str:
        return f"Vector4(x={self.x}, y={self.y}, z={self.z}, w={self.w})"
