"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Axis-aligned and oriented bounding boxes.

Both box types enumerate their 8 corners in the same topological order, so a
single edge table can turn either one into a wireframe:

    0: (-x, -y, -z)    4: (+x, +y, +z)
    1: (+x, -y, -z)    5: (-x, +y, +z)
    2: (-x, +y, -z)    6: (+x, -y, +z)
    3: (-x, -y, +z)    7: (+x, +y, -z)

where the signs are taken along the box axes.
"""

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .geometry import (
    Geometry3D,
    GeometryType,
    as_points_array,
    as_rotation_matrix,
    as_vector3,
)


class AxisAlignedBoundingBox(Geometry3D):
    def __init__(self, min_bound=(0.0, 0.0, 0.0), max_bound=(0.0, 0.0, 0.0)):
        super().__init__(GeometryType.AxisAlignedBoundingBox)
        self.min_bound = as_vector3(min_bound, "min_bound")
        self.max_bound = as_vector3(max_bound, "max_bound")
        self.color = np.zeros(3)

    def __repr__(self):
        return (
            f"AxisAlignedBoundingBox: min: {self.min_bound.tolist()}, "
            f"max: {self.max_bound.tolist()}"
        )

    def clear(self):
        self.min_bound = np.zeros(3)
        self.max_bound = np.zeros(3)
        self.color = np.zeros(3)
        return self

    def is_empty(self):
        return self.volume() <= 0

    def get_min_bound(self):
        return self.min_bound.copy()

    def get_max_bound(self):
        return self.max_bound.copy()

    def get_center(self):
        return (self.min_bound + self.max_bound) * 0.5

    def get_extent(self):
        return self.max_bound - self.min_bound

    def get_half_extent(self):
        return self.get_extent() * 0.5

    def volume(self):
        return float(np.prod(self.get_extent()))

    def get_axis_aligned_bounding_box(self):
        box = AxisAlignedBoundingBox(self.min_bound, self.max_bound)
        box.color = self.color.copy()
        return box

    def get_oriented_bounding_box(self):
        return OrientedBoundingBox.create_from_axis_aligned_bounding_box(self)

    def transform(self, transformation):
        raise NotImplementedError(
            "A general transformation does not keep the box axis aligned; "
            "use get_oriented_bounding_box() first"
        )

    def rotate(self, rotation, center=True):
        raise NotImplementedError(
            "A rotation does not keep the box axis aligned; "
            "use get_oriented_bounding_box() first"
        )

    def translate(self, translation, relative=True):
        translation = as_vector3(translation, "translation")
        if not relative:
            translation = translation - self.get_center()
        self.min_bound = self.min_bound + translation
        self.max_bound = self.max_bound + translation
        return self

    def scale(self, scale, center=True):
        if center:
            box_center = self.get_center()
            first = box_center + scale * (self.min_bound - box_center)
            second = box_center + scale * (self.max_bound - box_center)
        else:
            first = scale * self.min_bound
            second = scale * self.max_bound
        # a negative factor mirrors the box, so the corners swap roles
        self.min_bound = np.minimum(first, second)
        self.max_bound = np.maximum(first, second)
        return self

    def get_box_points(self):
        extent = self.get_extent()
        dx = np.array([extent[0], 0.0, 0.0])
        dy = np.array([0.0, extent[1], 0.0])
        dz = np.array([0.0, 0.0, extent[2]])
        return np.array(
            [
                self.min_bound,
                self.min_bound + dx,
                self.min_bound + dy,
                self.min_bound + dz,
                self.max_bound,
                self.max_bound - dx,
                self.max_bound - dy,
                self.max_bound - dz,
            ]
        )

    def get_point_indices_within_bounding_box(self, points):
        points = as_points_array(points)
        inside = np.all(
            (points >= self.min_bound) & (points <= self.max_bound), axis=1
        )
        return np.flatnonzero(inside).tolist()

    @classmethod
    def create_from_points(cls, points):
        """
        Smallest axis-aligned box containing all points.

        An empty point set gives the zero box.
        """
        points = as_points_array(points)
        if len(points) == 0:
            return cls()
        return cls(np.min(points, axis=0), np.max(points, axis=0))


class OrientedBoundingBox(Geometry3D):
    def __init__(
        self, center=(0.0, 0.0, 0.0), R=np.eye(3), extent=(0.0, 0.0, 0.0)
    ):
        super().__init__(GeometryType.OrientedBoundingBox)
        self.center = as_vector3(center, "center")
        self.R = as_rotation_matrix(R).copy()
        self.extent = as_vector3(extent, "extent")
        self.color = np.zeros(3)

    def __repr__(self):
        return (
            f"OrientedBoundingBox: center: {self.center.tolist()}, "
            f"extent: {self.extent.tolist()}"
        )

    def clear(self):
        self.center = np.zeros(3)
        self.R = np.eye(3)
        self.extent = np.zeros(3)
        self.color = np.zeros(3)
        return self

    def is_empty(self):
        return self.volume() <= 0

    def get_min_bound(self):
        return np.min(self.get_box_points(), axis=0)

    def get_max_bound(self):
        return np.max(self.get_box_points(), axis=0)

    def get_center(self):
        return self.center.copy()

    def volume(self):
        return float(np.prod(self.extent))

    def get_axis_aligned_bounding_box(self):
        return AxisAlignedBoundingBox.create_from_points(self.get_box_points())

    def get_oriented_bounding_box(self):
        box = OrientedBoundingBox(self.center, self.R, self.extent)
        box.color = self.color.copy()
        return box

    def transform(self, transformation):
        raise NotImplementedError(
            "A general transformation does not keep the box rectangular; "
            "use translate, rotate and scale instead"
        )

    def translate(self, translation, relative=True):
        translation = as_vector3(translation, "translation")
        if relative:
            self.center = self.center + translation
        else:
            self.center = translation.copy()
        return self

    def scale(self, scale, center=True):
        if not center:
            self.center = scale * self.center
        self.extent = scale * self.extent
        return self

    def rotate(self, rotation, center=True):
        rotation = as_rotation_matrix(rotation)
        if not center:
            self.center = rotation @ self.center
        self.R = rotation @ self.R
        return self

    def get_box_points(self):
        x_axis = self.R @ np.array([self.extent[0] / 2, 0.0, 0.0])
        y_axis = self.R @ np.array([0.0, self.extent[1] / 2, 0.0])
        z_axis = self.R @ np.array([0.0, 0.0, self.extent[2] / 2])
        c = self.center
        return np.array(
            [
                c - x_axis - y_axis - z_axis,
                c + x_axis - y_axis - z_axis,
                c - x_axis + y_axis - z_axis,
                c - x_axis - y_axis + z_axis,
                c + x_axis + y_axis + z_axis,
                c - x_axis + y_axis + z_axis,
                c + x_axis - y_axis + z_axis,
                c + x_axis + y_axis - z_axis,
            ]
        )

    def get_point_indices_within_bounding_box(self, points):
        points = as_points_array(points)
        local = (points - self.center) @ self.R
        inside = np.all(np.abs(local) <= self.extent / 2, axis=1)
        return np.flatnonzero(inside).tolist()

    @classmethod
    def create_from_axis_aligned_bounding_box(cls, aabox):
        box = cls(aabox.get_center(), np.eye(3), aabox.get_extent())
        box.color = aabox.color.copy()
        return box

    @classmethod
    def create_from_points(cls, points):
        """
        Fit an oriented box to a point set by PCA on its convex hull.

        The box axes are the eigenvectors of the covariance of the hull
        vertices, ordered by decreasing eigenvalue and made right-handed.

        Args:
            points (np.ndarray): Nx3 array of points.

        Returns:
            OrientedBoundingBox: the fitted box. An empty point set gives the
            zero box; sets with fewer than four points or lying in a plane
            are fitted on the raw points instead of the hull.
        """
        points = as_points_array(points)
        if len(points) == 0:
            return cls()

        fit_points = points
        if len(points) >= 4:
            try:
                hull = ConvexHull(points)
                fit_points = points[hull.vertices]
            except QhullError:
                print(
                    "Warning: convex hull failed for a degenerate point set, "
                    "fitting the oriented bounding box on all points."
                )

        mean = np.mean(fit_points, axis=0)
        centered = fit_points - mean
        covariance = centered.T @ centered / len(fit_points)
        eigenvalues, eigenvectors = np.linalg.eigh(covariance)

        order = np.argsort(eigenvalues)[::-1]
        rotation = eigenvectors[:, order]
        if np.linalg.det(rotation) < 0:
            rotation[:, 2] = -rotation[:, 2]

        local = (points - mean) @ rotation
        local_min = np.min(local, axis=0)
        local_max = np.max(local, axis=0)

        center = mean + rotation @ ((local_min + local_max) * 0.5)
        return cls(center, rotation, local_max - local_min)
