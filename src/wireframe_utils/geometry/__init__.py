"""Import classes and definitions representing bases, frames, and wireframe geometry."""

from .bases import Basis as Basis
from .bases import Basis2D as Basis2D
from .bases import Basis3D as Basis3D
from .bases import basis_from_matrix as basis_from_matrix
from .bases import matrix_from_basis as matrix_from_basis
from .bases import rotate_basis as rotate_basis
from .coordinate_systems import CoordinateSystem as CoordinateSystem
from .coordinate_systems import ProjectionPlane as ProjectionPlane
from .coordinate_systems import project_point as project_point
from .coordinate_systems import project_segment as project_segment
from .coordinate_systems import project_segments as project_segments
from .coordinate_systems import projection_plane_of as projection_plane_of
from .coordinate_systems import screen_point_to_world as screen_point_to_world
from .cuboid import Cuboid as Cuboid
from .lines import LineSegment as LineSegment
from .rotations import rotation_between as rotation_between
