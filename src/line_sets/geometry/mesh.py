"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

import numpy as np

from .geometry import (
    Geometry3D,
    GeometryType,
    as_points_array,
    compute_center,
    compute_max_bound,
    compute_min_bound,
    rotate_points,
    scale_points,
    transform_points,
    translate_points,
)


class MeshBase(Geometry3D):
    """Vertex container shared by triangle and tetrahedral meshes."""

    def __init__(self, geometry_type, vertices=None):
        super().__init__(geometry_type)
        self.vertices = vertices

    @property
    def vertices(self):
        return self._vertices

    @vertices.setter
    def vertices(self, vertices):
        self._vertices = as_points_array(vertices)

    def has_vertices(self):
        return len(self._vertices) > 0

    def is_empty(self):
        return not self.has_vertices()

    def get_min_bound(self):
        return compute_min_bound(self._vertices)

    def get_max_bound(self):
        return compute_max_bound(self._vertices)

    def get_center(self):
        return compute_center(self._vertices)

    def get_axis_aligned_bounding_box(self):
        from .bounding_box import AxisAlignedBoundingBox

        return AxisAlignedBoundingBox.create_from_points(self._vertices)

    def get_oriented_bounding_box(self):
        from .bounding_box import OrientedBoundingBox

        return OrientedBoundingBox.create_from_points(self._vertices)

    def transform(self, transformation):
        self._vertices = transform_points(transformation, self._vertices)
        return self

    def translate(self, translation, relative=True):
        self._vertices = translate_points(translation, self._vertices, relative)
        return self

    def scale(self, scale, center=True):
        self._vertices = scale_points(scale, self._vertices, center)
        return self

    def rotate(self, rotation, center=True):
        self._vertices = rotate_points(rotation, self._vertices, center)
        return self


class TriangleMesh(MeshBase):
    def __init__(self, vertices=None, triangles=None):
        super().__init__(GeometryType.TriangleMesh, vertices)
        self.triangles = triangles

    @property
    def triangles(self):
        return self._triangles

    @triangles.setter
    def triangles(self, triangles):
        self._triangles = as_points_array(triangles, width=3, dtype=int)

    def __repr__(self):
        return (
            f"TriangleMesh with {len(self._vertices)} points and "
            f"{len(self._triangles)} triangles."
        )

    def clear(self):
        self.vertices = None
        self.triangles = None
        return self

    def has_triangles(self):
        return self.has_vertices() and len(self._triangles) > 0

    @classmethod
    def from_open3d(cls, mesh):
        return cls(
            vertices=np.asarray(mesh.vertices), triangles=np.asarray(mesh.triangles)
        )

    def to_open3d(self):
        import open3d as o3d

        mesh = o3d.geometry.TriangleMesh()
        mesh.vertices = o3d.utility.Vector3dVector(self._vertices)
        mesh.triangles = o3d.utility.Vector3iVector(
            self._triangles.astype(np.int32)
        )
        return mesh


class TetraMesh(MeshBase):
    def __init__(self, vertices=None, tetras=None):
        super().__init__(GeometryType.TetraMesh, vertices)
        self.tetras = tetras

    @property
    def tetras(self):
        return self._tetras

    @tetras.setter
    def tetras(self, tetras):
        self._tetras = as_points_array(tetras, width=4, dtype=int)

    def __repr__(self):
        return (
            f"TetraMesh with {len(self._vertices)} points and "
            f"{len(self._tetras)} tetrahedra."
        )

    def clear(self):
        self.vertices = None
        self.tetras = None
        return self

    def has_tetras(self):
        return self.has_vertices() and len(self._tetras) > 0

    @classmethod
    def from_open3d(cls, mesh):
        return cls(vertices=np.asarray(mesh.vertices), tetras=np.asarray(mesh.tetras))
