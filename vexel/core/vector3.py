"""
Vector3 module for 3D vectors over a generic numeric component dtype.

Metric operations run in float64 and are converted back to the component
dtype when they produce a vector.
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
class Vector3:
    """
    3D vector [x, y, z] with components of a shared numeric dtype.

    ``==`` compares components exactly. Use ``isclose`` when a tolerance is
    needed.
    """

    x: Scalar
    """First component."""

    y: Scalar
    """Second component."""

    z: Scalar
    """Third component."""

    @classmethod
    def new(
        cls,
        x: Scalar,
        y: Scalar,
        z: Scalar,
        dtype: DTypeLike | None = None,
    ) -> "Vector3":
        """Construct a vector with all components cast to ``dtype`` (inferred if omitted)."""
        if dtype is None:
            dtype = component_dtype(x, y, z)
        return cls(
            jnp.asarray(x).astype(dtype),
            jnp.asarray(y).astype(dtype),
            jnp.asarray(z).astype(dtype),
        )

    @classmethod
    def from_array(cls, arr: Array) -> "Vector3":
        """Build a vector from an array whose leading dimension holds [x, y, z]."""
        arr = jnp.asarray(arr)
        if arr.ndim == 0 or arr.shape[0] != 3:
            raise ValueError(f"Expected an array with leading dimension 3, got shape {arr.shape}")
        return cls(arr[0], arr[1], arr[2])

    @property
    def dtype(self) -> jnp.dtype:
        """Common dtype of the components."""
        return component_dtype(self.x, self.y, self.z)

    def astype(self, dtype: DTypeLike) -> "Vector3":
        """Return a copy with components cast to ``dtype``."""
        return Vector3(
            jnp.asarray(self.x).astype(dtype),
            jnp.asarray(self.y).astype(dtype),
            jnp.asarray(self.z).astype(dtype),
        )

    def to_array(self) -> Array:
        """Stack the components into an array of shape (3, ...)."""
        return jnp.stack([self.x, self.y, self.z])

    def length(self) -> FloatScalar:
        """Euclidean length ``sqrt(x**2 + y**2 + z**2)`` in float64."""
        return norm_n((self.x, self.y, self.z))

    def length_squared(self) -> FloatScalar:
        """Squared length in float64."""
        return dot_n((self.x, self.y, self.z), (self.x, self.y, self.z))

    def dot(self, other: "Vector3") -> FloatScalar:
        """Dot product ``x1 * x2 + y1 * y2 + z1 * z2`` in float64."""
        return dot_n((self.x, self.y, self.z), (other.x, other.y, other.z))

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Compute the cross product with another vector.

        Parameters
        ----------
        other : Vector3
            Right-hand operand.

        Returns
        -------
        Vector3
            ``(y1*z2 - z1*y2, z1*x2 - x1*z2, x1*y2 - y1*x2)`` computed in
            float64 and converted to the component dtype.
        """
        dtype = self.dtype
        x1, y1, z1 = to_metric(self.x), to_metric(self.y), to_metric(self.z)
        x2, y2, z2 = to_metric(other.x), to_metric(other.y), to_metric(other.z)
        return Vector3(
            from_metric(y1 * z2 - z1 * y2, dtype),
            from_metric(z1 * x2 - x1 * z2, dtype),
            from_metric(x1 * y2 - y1 * x2, dtype),
        )

    def normalize(self) -> "Vector3":
        """
        Scale the vector to unit length.

        Returns
        -------
        Vector3
            Unit vector in the component dtype, or this vector unchanged when
            its length is exactly zero.
        """
        dtype = self.dtype
        length = self.length()
        is_zero = length == 0.0
        return Vector3(
            jnp.where(is_zero, self.x, from_metric(to_metric(self.x) / length, dtype)),
            jnp.where(is_zero, self.y, from_metric(to_metric(self.y) / length, dtype)),
            jnp.where(is_zero, self.z, from_metric(to_metric(self.z) / length, dtype)),
        )

    def project_onto(self, other: "Vector3") -> "Vector3":
        """
        Project this vector onto another vector.

        Notes
        -----
        A zero ``other`` is not guarded and the result is nan.
        """
        dtype = self.dtype
        scalar = self.dot(other) / other.dot(other)
        return Vector3(
            from_metric(scalar * to_metric(other.x), dtype),
            from_metric(scalar * to_metric(other.y), dtype),
            from_metric(scalar * to_metric(other.z), dtype),
        )

    def reject_from(self, other: "Vector3") -> "Vector3":
        """Component of this vector orthogonal to ``other``."""
        return self - self.project_onto(other)

    def lerp(self, other: "Vector3", t: FloatScalar) -> "Vector3":
        """
        Linearly interpolate towards another vector.

        ``t`` is not clamped. ``t = 0`` returns this vector and ``t = 1``
        returns ``other``.
        """
        dtype = self.dtype
        return Vector3(
            from_metric(interpolate(self.x, other.x, t), dtype),
            from_metric(interpolate(self.y, other.y, t), dtype),
            from_metric(interpolate(self.z, other.z, t), dtype),
        )

    def angle_between(self, other: "Vector3") -> FloatScalar:
        """Angle to ``other`` in radians, nan if either vector has zero length."""
        return jnp.arccos(self.dot(other) / (self.length() * other.length()))

    def swizzle(self, i: int, j: int, k: int) -> "Vector3":
        """
        Gather components by index into a new vector.

        Raises
        ------
        IndexError
            If an index is outside {0, 1, 2}.
        """
        components = (self.x, self.y, self.z)
        return Vector3(
            components[check_index(i, 3)],
            components[check_index(j, 3)],
            components[check_index(k, 3)],
        )

    def isclose(self, other: "Vector3", config: ToleranceConfig = ToleranceConfig()) -> BoolScalar:
        """Componentwise comparison within the tolerances of ``config``."""
        return jnp.allclose(self.to_array(), other.to_array(), rtol=config.rtol, atol=config.atol)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other: "Vector3") -> "Vector3":
        """
        Componentwise division.

        Integer division by zero deliberately returns an undefined value
        instead of panicking like fixed-width integer division would.
        """
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(
            divide(self.x, other.x),
            divide(self.y, other.y),
            divide(self.z, other.z),
        )

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            bool(jnp.all(self.x == other.x))
            and bool(jnp.all(self.y == other.y))
            and bool(jnp.all(self.z == other.z))
        )

    def __iter__(self) -> Iterator[Scalar]:
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"
