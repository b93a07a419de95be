"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Factory functions building a LineSet from other geometries.

Every function returns a new LineSet and leaves its inputs untouched.
"""

import numpy as np

from .geometry import as_points_array
from .lineset import LineSet

# Wireframe of the 8 corners returned by get_box_points() of either box type
# fmt: off
BOX_EDGES = np.array(
    [
        [0, 1], [1, 7], [7, 2], [2, 0],  # bottom face
        [3, 6], [6, 4], [4, 5], [5, 3],  # top face
        [0, 3], [1, 6], [7, 4], [2, 5],  # vertical edges
    ]
)
# fmt: on

# Local vertex pairs visited for each cell, in this order
TRIANGLE_EDGES = ((0, 1), (1, 2), (2, 0))
TETRA_EDGES = ((0, 1), (1, 2), (2, 0), (0, 3), (1, 3), (2, 3))


def create_from_point_cloud_correspondences(cloud0, cloud1, correspondences):
    """
    Draw one line per correspondence between two point clouds.

    Correspondence ``k = (a, b)`` adds ``cloud0.points[a]`` as point ``2k``,
    ``cloud1.points[b]`` as point ``2k + 1`` and the line ``(2k, 2k + 1)``.
    Source points are never shared between lines.

    Args:
        cloud0 (PointCloud): cloud indexed by the first entry of each pair.
        cloud1 (PointCloud): cloud indexed by the second entry of each pair.
        correspondences: iterable of (a, b) index pairs, or an Nx2 array.

    Returns:
        LineSet: 2N points and N lines, without colors.
    """
    if not isinstance(correspondences, np.ndarray):
        correspondences = list(correspondences)
    correspondences = as_points_array(correspondences, width=2, dtype=int)
    num_correspondences = len(correspondences)
    if num_correspondences == 0:
        return LineSet()

    source_indices = correspondences[:, 0]
    target_indices = correspondences[:, 1]
    for indices, cloud, name in (
        (source_indices, cloud0, "cloud0"),
        (target_indices, cloud1, "cloud1"),
    ):
        if np.any(indices < 0) or np.any(indices >= len(cloud.points)):
            raise IndexError(
                f"Correspondence index out of range for {name} "
                f"with {len(cloud.points)} points"
            )

    points = np.empty((2 * num_correspondences, 3))
    points[0::2] = cloud0.points[source_indices]
    points[1::2] = cloud1.points[target_indices]
    lines = np.arange(2 * num_correspondences).reshape(-1, 2)
    return LineSet(points, lines)


def _create_from_box(box):
    lineset = LineSet(box.get_box_points(), BOX_EDGES.copy())
    lineset.paint_uniform_color(box.color)
    return lineset


def create_from_oriented_bounding_box(box):
    """Wireframe of an oriented box: 8 corners, 12 edges in the box color."""
    return _create_from_box(box)


def create_from_axis_aligned_bounding_box(box):
    """Wireframe of an axis-aligned box: 8 corners, 12 edges in the box color."""
    return _create_from_box(box)


def _unique_cell_edges(cells, cell_edges):
    """
    Undirected edges of a cell array, each listed once in first-seen order.

    An edge keeps the orientation of the cell it was first seen in.
    """
    seen = set()
    lines = []
    for cell in cells:
        for a, b in cell_edges:
            i, j = int(cell[a]), int(cell[b])
            key = (min(i, j), max(i, j))
            if key not in seen:
                seen.add(key)
                lines.append((i, j))
    return lines


def create_from_triangle_mesh(mesh):
    """
    Line set of the unique edges of a triangle mesh.

    Points are the mesh vertices with the same indexing. Shared edges appear
    once, in the order they are first met when walking the triangles.
    """
    lines = _unique_cell_edges(mesh.triangles, TRIANGLE_EDGES)
    return LineSet(mesh.vertices.copy(), lines)


def create_from_tetra_mesh(mesh):
    """Line set of the unique edges of a tetrahedral mesh, see create_from_triangle_mesh."""
    lines = _unique_cell_edges(mesh.tetras, TETRA_EDGES)
    return LineSet(mesh.vertices.copy(), lines)
