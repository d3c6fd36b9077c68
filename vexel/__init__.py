"""
Vexel - JAX-based 2D, 3D and 4D vector math primitives.

Importing vexel enables ``jax_enable_x64`` process-wide, so every JAX user in
the same process gets 64-bit default floats and integers.
"""

import logging

from vexel.core.config import ToleranceConfig
from vexel.core.primitives import METRIC_DTYPE
from vexel.core.vector2 import Vector2
from vexel.core.vector3 import Vector3
from vexel.core.vector4 import Vector4

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Vector types
    "Vector2",
    "Vector3",
    "Vector4",
    # Configuration
    "ToleranceConfig",
    # Precision
    "METRIC_DTYPE",
    "__version__",
]
