"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from enum import Enum

import numpy as np
from scipy.spatial.transform import Rotation as R


class GeometryType(Enum):
    Unspecified = 0
    PointCloud = 1
    LineSet = 2
    TriangleMesh = 3
    TetraMesh = 4
    AxisAlignedBoundingBox = 5
    OrientedBoundingBox = 6


def as_points_array(points, width=3, dtype=float):
    """
    Coerce a sequence of coordinates (or index tuples) to an (N, width) array.

    An empty sequence gives an empty (0, width) array instead of numpy's (0,).
    With an integer dtype, values that are not whole numbers raise ValueError
    instead of being truncated.
    """
    if points is None:
        return np.zeros((0, width), dtype=dtype)
    if np.issubdtype(dtype, np.integer):
        array = np.array(points)
        if array.size > 0 and not np.issubdtype(array.dtype, np.integer):
            if not np.issubdtype(array.dtype, np.number) or not np.array_equal(
                array, np.round(array)
            ):
                raise ValueError(f"Indices must be integers, got {array.tolist()}")
        array = array.astype(dtype)
    else:
        array = np.array(points, dtype=dtype)
    if array.size == 0:
        return np.zeros((0, width), dtype=dtype)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(
            f"Expected an array of shape (N, {width}), got {array.shape}"
        )
    return array


def as_vector3(vector, name="vector"):
    vector = np.asarray(vector, dtype=float).reshape(-1)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got {vector.shape[0]}")
    return vector


def as_rotation_matrix(rotation):
    """
    Return a 3x3 rotation matrix from either an array-like or a scipy Rotation.
    """
    if isinstance(rotation, R):
        if not rotation.single:
            raise ValueError(
                f"Rotation matrix must be 3x3, got a stack of {len(rotation)}"
            )
        return rotation.as_matrix()
    matrix = np.asarray(rotation, dtype=float)
    if matrix.shape != (3, 3):
        raise ValueError(f"Rotation matrix must be 3x3, got {matrix.shape}")
    return matrix


def compute_min_bound(points):
    if len(points) == 0:
        return np.zeros(3)
    return np.min(points, axis=0)


def compute_max_bound(points):
    if len(points) == 0:
        return np.zeros(3)
    return np.max(points, axis=0)


def compute_center(points):
    if len(points) == 0:
        return np.zeros(3)
    return np.mean(points, axis=0)


def transform_points(transformation, points):
    """
    Apply a 4x4 homogeneous transformation to an (N, 3) array of points.

    Each transformed point is divided by its homogeneous component.
    """
    transformation = np.asarray(transformation, dtype=float)
    if transformation.shape != (4, 4):
        raise ValueError(
            f"Transformation must be a 4x4 matrix, got {transformation.shape}"
        )
    if len(points) == 0:
        return points
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    transformed = homogeneous @ transformation.T
    return transformed[:, :3] / transformed[:, 3:4]


def translate_points(translation, points, relative=True):
    translation = as_vector3(translation, "translation")
    if len(points) == 0:
        return points
    if relative:
        return points + translation
    return points + (translation - compute_center(points))


def scale_points(scale, points, center=True):
    if len(points) == 0:
        return points
    if center:
        points_center = compute_center(points)
        return points_center + scale * (points - points_center)
    return scale * points


def rotate_points(rotation, points, center=True):
    rotation = as_rotation_matrix(rotation)
    if len(points) == 0:
        return points
    if center:
        points_center = compute_center(points)
        return points_center + (points - points_center) @ rotation.T
    return points @ rotation.T


def resize_and_paint_uniform_color(num_elements, color):
    color = as_vector3(color, "color")
    return np.tile(color, (num_elements, 1))


class Geometry:
    """Base class carrying the geometry type tag and dimension."""

    def __init__(self, geometry_type=GeometryType.Unspecified, dimension=3):
        self.geometry_type = geometry_type
        self._dimension = dimension

    def get_geometry_type(self):
        return self.geometry_type

    def dimension(self):
        return self._dimension

    def clear(self):
        raise NotImplementedError

    def is_empty(self):
        raise NotImplementedError


class Geometry3D(Geometry):
    """
    Common interface of all 3D geometries.

    Transform methods mutate the geometry in place and return it so that
    calls can be chained, e.g. ``geometry.scale(2.0).translate(t)``.
    """

    def __init__(self, geometry_type=GeometryType.Unspecified):
        super().__init__(geometry_type=geometry_type, dimension=3)

    def get_min_bound(self):
        raise NotImplementedError

    def get_max_bound(self):
        raise NotImplementedError

    def get_center(self):
        raise NotImplementedError

    def get_axis_aligned_bounding_box(self):
        raise NotImplementedError

    def get_oriented_bounding_box(self):
        raise NotImplementedError

    def transform(self, transformation):
        raise NotImplementedError

    def translate(self, translation, relative=True):
        raise NotImplementedError

    def scale(self, scale, center=True):
        raise NotImplementedError

    def rotate(self, rotation, center=True):
        raise NotImplementedError

    # Rotation helpers; angles are in radians.
    @staticmethod
    def get_rotation_matrix_from_xyz(rotation):
        return R.from_euler("XYZ", rotation).as_matrix()

    @staticmethod
    def get_rotation_matrix_from_yzx(rotation):
        return R.from_euler("YZX", rotation).as_matrix()

    @staticmethod
    def get_rotation_matrix_from_zxy(rotation):
        return R.from_euler("ZXY", rotation).as_matrix()

    @staticmethod
    def get_rotation_matrix_from_xzy(rotation):
        return R.from_euler("XZY", rotation).as_matrix()

    @staticmethod
    def get_rotation_matrix_from_zyx(rotation):
        return R.from_euler("ZYX", rotation).as_matrix()

    @staticmethod
    def get_rotation_matrix_from_yxz(rotation):
        return R.from_euler("YXZ", rotation).as_matrix()

    @staticmethod
    def get_rotation_matrix_from_axis_angle(rotation):
        """
        Rotation matrix from an axis-angle vector whose norm is the angle.
        """
        return R.from_rotvec(as_vector3(rotation, "axis-angle")).as_matrix()
