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
    resize_and_paint_uniform_color,
    rotate_points,
    scale_points,
    transform_points,
    translate_points,
)


class PointCloud(Geometry3D):
    """
    Point cloud with optional per-point colors.

    Line sets only read ``points`` from a cloud; the transform methods are
    here so that a cloud can be placed before correspondences are drawn.
    """

    def __init__(self, points=None, colors=None):
        super().__init__(GeometryType.PointCloud)
        self.points = points
        self.colors = colors

    @property
    def points(self):
        return self._points

    @points.setter
    def points(self, points):
        self._points = as_points_array(points)

    @property
    def colors(self):
        return self._colors

    @colors.setter
    def colors(self, colors):
        self._colors = as_points_array(colors)

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"PointCloud with {len(self._points)} points."

    def clear(self):
        self.points = None
        self.colors = None
        return self

    def is_empty(self):
        return not self.has_points()

    def has_points(self):
        return len(self._points) > 0

    def has_colors(self):
        return self.has_points() and len(self._colors) == len(self._points)

    def get_min_bound(self):
        return compute_min_bound(self._points)

    def get_max_bound(self):
        return compute_max_bound(self._points)

    def get_center(self):
        return compute_center(self._points)

    def get_axis_aligned_bounding_box(self):
        from .bounding_box import AxisAlignedBoundingBox

        return AxisAlignedBoundingBox.create_from_points(self._points)

    def get_oriented_bounding_box(self):
        from .bounding_box import OrientedBoundingBox

        return OrientedBoundingBox.create_from_points(self._points)

    def transform(self, transformation):
        self._points = transform_points(transformation, self._points)
        return self

    def translate(self, translation, relative=True):
        self._points = translate_points(translation, self._points, relative)
        return self

    def scale(self, scale, center=True):
        self._points = scale_points(scale, self._points, center)
        return self

    def rotate(self, rotation, center=True):
        self._points = rotate_points(rotation, self._points, center)
        return self

    def paint_uniform_color(self, color):
        self._colors = resize_and_paint_uniform_color(len(self._points), color)
        return self

    @classmethod
    def from_open3d(cls, pcd):
        colors = np.asarray(pcd.colors) if pcd.has_colors() else None
        return cls(points=np.asarray(pcd.points), colors=colors)

    def to_open3d(self):
        import open3d as o3d

        pcd = o3d.geometry.PointCloud()
        pcd.points = o3d.utility.Vector3dVector(self._points)
        if self.has_colors():
            pcd.colors = o3d.utility.Vector3dVector(self._colors)
        return pcd
