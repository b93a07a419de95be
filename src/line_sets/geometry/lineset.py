"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

import numpy as np
from scipy.spatial.transform import Rotation as R

from .bounding_box import AxisAlignedBoundingBox, OrientedBoundingBox
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


class LineIndexError(IndexError):
    """A line index, or a point index stored in a line, is out of range."""


class LineSet(Geometry3D):
    """
    A set of 3D points connected pairwise by line segments.

    ``lines[k] = (i, j)`` joins ``points[i]`` and ``points[j]``. Colors are
    per line and only count when there is exactly one per line. Point indices
    stored in ``lines`` are not checked on assignment; they are checked when a
    line is dereferenced (see ``get_line_coordinate``).

    Attributes:
        points (np.ndarray): Nx3 float array of point coordinates.
        lines (np.ndarray): Mx2 int array of point index pairs.
        colors (np.ndarray): Kx3 float array of RGB colors, one per line.
    """

    def __init__(self, points=None, lines=None):
        super().__init__(GeometryType.LineSet)
        self.points = points
        self.lines = lines
        self.colors = None

    @property
    def points(self):
        return self._points

    @points.setter
    def points(self, points):
        self._points = as_points_array(points)

    @property
    def lines(self):
        return self._lines

    @lines.setter
    def lines(self, lines):
        self._lines = as_points_array(lines, width=2, dtype=int)

    @property
    def colors(self):
        return self._colors

    @colors.setter
    def colors(self, colors):
        self._colors = as_points_array(colors)

    def __len__(self):
        return len(self._lines)

    def __repr__(self):
        return f"LineSet with {len(self._lines)} lines."

    def copy(self):
        lineset = LineSet(self._points.copy(), self._lines.copy())
        lineset.colors = self._colors.copy()
        return lineset

    def clear(self):
        self.points = None
        self.lines = None
        self.colors = None
        return self

    def is_empty(self):
        return not self.has_points()

    def has_points(self):
        return len(self._points) > 0

    def has_lines(self):
        return self.has_points() and len(self._lines) > 0

    def has_colors(self):
        return self.has_lines() and len(self._colors) == len(self._lines)

    def get_min_bound(self):
        return compute_min_bound(self._points)

    def get_max_bound(self):
        return compute_max_bound(self._points)

    def get_center(self):
        return compute_center(self._points)

    def get_axis_aligned_bounding_box(self):
        return AxisAlignedBoundingBox.create_from_points(self._points)

    def get_oriented_bounding_box(self):
        return OrientedBoundingBox.create_from_points(self._points)

    def transform(self, transformation):
        self._points = transform_points(transformation, self._points)
        return self

    def translate(self, translation, relative=True):
        """
        Translate the points.

        If ``relative`` is True the translation is added to every point,
        otherwise the center of the points is moved to ``translation``.
        """
        self._points = translate_points(translation, self._points, relative)
        return self

    def scale(self, scale, center=True):
        """Scale the points about their center, or about the origin."""
        self._points = scale_points(scale, self._points, center)
        return self

    def rotate(self, rotation, center=True):
        """
        Rotate the points about their center, or about the origin.

        ``rotation`` is a 3x3 matrix or a scipy ``Rotation``.
        """
        self._points = rotate_points(rotation, self._points, center)
        return self

    def __iadd__(self, other):
        if other.is_empty():
            return self

        num_points = len(self._points)
        if (not self.has_lines() or self.has_colors()) and other.has_colors():
            if self.has_colors():
                own_colors = self._colors
            else:
                own_colors = np.zeros((len(self._lines), 3))
            colors = np.vstack([own_colors, other.colors])
        else:
            colors = None

        self._points = np.vstack([self._points, other.points])
        self._lines = np.vstack([self._lines, other.lines + num_points])
        self.colors = colors
        return self

    def __add__(self, other):
        lineset = self.copy()
        lineset += other
        return lineset

    def _check_line_index(self, line_index):
        if not 0 <= line_index < len(self._lines):
            raise LineIndexError(
                f"Line index {line_index} out of range for {len(self._lines)} lines"
            )
        i, j = self._lines[line_index]
        num_points = len(self._points)
        if not (0 <= i < num_points and 0 <= j < num_points):
            raise LineIndexError(
                f"Line {line_index} references points ({i}, {j}) "
                f"but there are only {num_points} points"
            )
        return i, j

    def get_line_coordinate(self, line_index):
        """
        Return the two endpoint coordinates of a line.

        Raises:
            LineIndexError: if the line index or one of its point indices is
                out of range.
        """
        i, j = self._check_line_index(line_index)
        return self._points[i].copy(), self._points[j].copy()

    def get_line_lengths(self):
        if len(self._lines) == 0:
            return np.zeros(0)
        invalid = np.any(
            (self._lines < 0) | (self._lines >= len(self._points)), axis=1
        )
        if np.any(invalid):
            self._check_line_index(int(np.argmax(invalid)))
        segments = self._points[self._lines[:, 1]] - self._points[self._lines[:, 0]]
        return np.linalg.norm(segments, axis=1)

    def paint_uniform_color(self, color):
        """Give every line the same color, replacing any previous colors."""
        self._colors = resize_and_paint_uniform_color(len(self._lines), color)
        return self

    def apply_object_parameters(self, object_name):
        """
        Place and color the line set from its entry in ``linesets.yaml``.

        Each of ``scale``, ``rotation`` (xyz Euler angles in degrees),
        ``translation`` and ``color`` is applied only when the entry has it.
        """
        from ..core import Config

        params = Config.load_lineset_config(object_name) or {}

        if "scale" in params:
            self.scale(params["scale"], center=True)
        if "rotation" in params:
            rotation = R.from_euler("xyz", params["rotation"], degrees=True)
            self.rotate(rotation, center=True)
        if "translation" in params:
            self.translate(params["translation"], relative=True)
        if "color" in params:
            self.paint_uniform_color(params["color"])
        return self

    @classmethod
    def from_open3d(cls, lineset):
        result = cls(np.asarray(lineset.points), np.asarray(lineset.lines))
        if lineset.has_colors():
            result.colors = np.asarray(lineset.colors)
        return result

    def to_open3d(self):
        import open3d as o3d

        lineset = o3d.geometry.LineSet()
        lineset.points = o3d.utility.Vector3dVector(self._points)
        lineset.lines = o3d.utility.Vector2iVector(self._lines.astype(np.int32))
        if self.has_colors():
            lineset.colors = o3d.utility.Vector3dVector(self._colors)
        return lineset

    # Factory functions live in lineset_factory
    # ==============================================================================
    @classmethod
    def create_from_point_cloud_correspondences(cls, cloud0, cloud1, correspondences):
        from .lineset_factory import create_from_point_cloud_correspondences

        return create_from_point_cloud_correspondences(cloud0, cloud1, correspondences)

    @classmethod
    def create_from_oriented_bounding_box(cls, box):
        from .lineset_factory import create_from_oriented_bounding_box

        return create_from_oriented_bounding_box(box)

    @classmethod
    def create_from_axis_aligned_bounding_box(cls, box):
        from .lineset_factory import create_from_axis_aligned_bounding_box

        return create_from_axis_aligned_bounding_box(box)

    @classmethod
    def create_from_triangle_mesh(cls, mesh):
        from .lineset_factory import create_from_triangle_mesh

        return create_from_triangle_mesh(mesh)

    @classmethod
    def create_from_tetra_mesh(cls, mesh):
        from .lineset_factory import create_from_tetra_mesh

        return create_from_tetra_mesh(mesh)
