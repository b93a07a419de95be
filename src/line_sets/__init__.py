"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
line_sets - 3D line set geometry.

A line set is a collection of 3D points connected pairwise by indexed line
segments, each optionally colored. This package provides the line set
container with its bounds and transforms, and builds line sets from point
cloud correspondences, bounding boxes and mesh edges.

The package is organized into focused submodules:
- core: Configuration and path handling
- geometry: Geometric structures (LineSet, PointCloud, meshes, bounding boxes)
"""

# Version information
__version__ = "0.1.0"
__author__ = "Cem Bilaloglu"
__email__ = "cem.bilaloglu@idiap.ch"
__license__ = "MIT"

from .core import Config
from .geometry import (
    AxisAlignedBoundingBox,
    Geometry,
    Geometry3D,
    GeometryType,
    LineIndexError,
    LineSet,
    OrientedBoundingBox,
    PointCloud,
    TetraMesh,
    TriangleMesh,
)

__all__ = [
    "Config",
    "Geometry",
    "Geometry3D",
    "GeometryType",
    "PointCloud",
    "TriangleMesh",
    "TetraMesh",
    "AxisAlignedBoundingBox",
    "OrientedBoundingBox",
    "LineIndexError",
    "LineSet",
]

# Provide easy access to submodules
from . import core
from . import geometry
