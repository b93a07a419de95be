"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for the shared geometry contract and the point cloud and mesh
sources line sets are built from.
"""

import numpy as np
import pytest

from line_sets.geometry import (
    Geometry,
    Geometry3D,
    GeometryType,
    PointCloud,
    TetraMesh,
    TriangleMesh,
)


def rotation_x(angle):
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])


def rotation_y(angle):
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])


def rotation_z(angle):
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


def test_rotation_from_xyz_composes_in_axis_order():
    angles = [0.3, -0.7, 1.2]
    expected = rotation_x(angles[0]) @ rotation_y(angles[1]) @ rotation_z(angles[2])

    np.testing.assert_allclose(Geometry3D.get_rotation_matrix_from_xyz(angles), expected)


def test_rotation_from_zyx_composes_in_axis_order():
    angles = [0.3, -0.7, 1.2]
    expected = rotation_z(angles[0]) @ rotation_y(angles[1]) @ rotation_x(angles[2])

    np.testing.assert_allclose(Geometry3D.get_rotation_matrix_from_zyx(angles), expected)


def test_rotation_from_axis_angle():
    rotation = Geometry3D.get_rotation_matrix_from_axis_angle([0.0, 0.0, np.pi / 2])

    np.testing.assert_allclose(rotation @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], atol=1e-12)


def test_base_contract_is_abstract():
    geometry = Geometry3D()

    assert geometry.get_geometry_type() == GeometryType.Unspecified
    assert geometry.dimension() == 3
    with pytest.raises(NotImplementedError):
        geometry.get_min_bound()
    with pytest.raises(NotImplementedError):
        geometry.transform(np.eye(4))
    with pytest.raises(NotImplementedError):
        Geometry().is_empty()


def test_pointcloud_contract():
    cloud = PointCloud([[0.0, 0.0, 0.0], [2.0, 4.0, 6.0]])

    assert cloud.get_geometry_type() == GeometryType.PointCloud
    assert len(cloud) == 2
    assert not cloud.has_colors()
    np.testing.assert_allclose(cloud.get_center(), [1.0, 2.0, 3.0])
    np.testing.assert_allclose(cloud.get_max_bound(), [2.0, 4.0, 6.0])

    cloud.scale(2.0, center=False).translate([1.0, 0.0, 0.0])
    np.testing.assert_allclose(cloud.points[1], [5.0, 8.0, 12.0])

    cloud.paint_uniform_color([0.0, 0.0, 1.0])
    assert cloud.has_colors()

    cloud.clear()
    assert cloud.is_empty()
    np.testing.assert_array_equal(cloud.get_min_bound(), np.zeros(3))


def test_pointcloud_bounding_boxes():
    cloud = PointCloud([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 3.0]])

    aabb = cloud.get_axis_aligned_bounding_box()
    obb = cloud.get_oriented_bounding_box()

    np.testing.assert_allclose(aabb.get_extent(), [1.0, 2.0, 3.0])
    local = (cloud.points - obb.center) @ obb.R
    assert np.all(np.abs(local) <= obb.extent / 2 + 1e-9)


def test_triangle_mesh_contract():
    mesh = TriangleMesh(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], [[0, 1, 2]]
    )

    assert mesh.get_geometry_type() == GeometryType.TriangleMesh
    assert mesh.has_triangles()
    assert repr(mesh) == "TriangleMesh with 3 points and 1 triangles."

    transformation = np.eye(4)
    transformation[:3, 3] = [0.0, 0.0, 1.0]
    mesh.transform(transformation)
    np.testing.assert_allclose(mesh.get_min_bound(), [0.0, 0.0, 1.0])

    mesh.clear()
    assert not mesh.has_triangles()
    assert mesh.is_empty()


def test_mesh_cells_must_have_right_arity():
    with pytest.raises(ValueError):
        TriangleMesh([[0.0, 0.0, 0.0]] * 4, [[0, 1, 2, 3]])
    with pytest.raises(ValueError):
        TetraMesh([[0.0, 0.0, 0.0]] * 3, [[0, 1, 2]])


def test_mesh_cells_must_be_whole_indices():
    with pytest.raises(ValueError):
        TriangleMesh([[0.0, 0.0, 0.0]] * 3, [[0, 1, 2.5]])
    with pytest.raises(ValueError):
        TetraMesh([[0.0, 0.0, 0.0]] * 4, [[0.2, 1, 2, 3]])


def test_tetra_mesh_contract():
    mesh = TetraMesh(np.vstack([np.zeros((1, 3)), np.eye(3)]), [[0, 1, 2, 3]])

    assert mesh.get_geometry_type() == GeometryType.TetraMesh
    assert mesh.has_tetras()
    np.testing.assert_allclose(mesh.get_center(), [0.25, 0.25, 0.25])

    mesh.rotate(Geometry3D.get_rotation_matrix_from_xyz([0.0, 0.0, np.pi]), center=True)
    np.testing.assert_allclose(mesh.get_center(), [0.25, 0.25, 0.25])
