"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Geometric structures and line set construction.

This module contains:
- Geometry, Geometry3D: Base geometry contract
- PointCloud, TriangleMesh, TetraMesh: Geometries line sets are built from
- AxisAlignedBoundingBox, OrientedBoundingBox: Bounding volumes
- LineSet: Points connected by indexed line segments
- lineset_factory: LineSet construction from the geometries above

Dependencies: numpy, scipy
"""

from .geometry import Geometry, Geometry3D, GeometryType
from .pointcloud import PointCloud
from .mesh import MeshBase, TriangleMesh, TetraMesh
from .bounding_box import AxisAlignedBoundingBox, OrientedBoundingBox
from .lineset import LineIndexError, LineSet
from .lineset_factory import (
    create_from_axis_aligned_bounding_box,
    create_from_oriented_bounding_box,
    create_from_point_cloud_correspondences,
    create_from_tetra_mesh,
    create_from_triangle_mesh,
)

__all__ = [
    "Geometry",
    "Geometry3D",
    "GeometryType",
    "PointCloud",
    "MeshBase",
    "TriangleMesh",
    "TetraMesh",
    "AxisAlignedBoundingBox",
    "OrientedBoundingBox",
    "LineIndexError",
    "LineSet",
    "create_from_point_cloud_correspondences",
    "create_from_oriented_bounding_box",
    "create_from_axis_aligned_bounding_box",
    "create_from_triangle_mesh",
    "create_from_tetra_mesh",
]
