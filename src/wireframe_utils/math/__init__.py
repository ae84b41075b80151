"""Import definitions for vector algebra, matrix products, and basis decomposition."""

from .decomposition import decompose as decompose
from .decomposition import reconstruct as reconstruct
from .decomposition import scalar_projection_on_axis as scalar_projection_on_axis
from .decomposition import signed_distance_on_axis as signed_distance_on_axis
from .matrices import matrix_multiply as matrix_multiply
from .vectors import ZERO as ZERO
from .vectors import DimensionMismatchError as DimensionMismatchError
from .vectors import Vector as Vector
from .vectors import Vector2D as Vector2D
from .vectors import Vector3D as Vector3D
from .vectors import point as point
