"""Configuration dataclasses for approximate vector comparison."""

from dataclasses import dataclass

import jax


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances used by ``isclose`` on every vector type."""

    atol: float = 1e-6
    """Absolute tolerance per component."""

    rtol: float = 0.0
    """Relative tolerance per component, scaled by the other vector."""
