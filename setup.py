"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from setuptools import find_packages, setup


# Read version from __init__.py
def get_version():
    with open("src/line_sets/__init__.py", "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.0.1"


setup(
    name="line_sets",
    version=get_version(),
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        # Core dependencies
        "numpy>=1.21.0",
        "scipy>=1.10.0,<1.17",  # 1.17 changed single-axis from_euler stacking
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
        "open3d": [
            "open3d>=0.13.0",  # Conversion to and from open3d.geometry
        ],
    },
    include_package_data=True,
    zip_safe=False,
    description="Line set geometry: points joined by indexed segments",
    long_description="""
    line_sets provides a 3D line set container: points connected pairwise by
    indexed line segments with optional per-line colors.

    This package provides tools for:
    - Bounds, bounding boxes and rigid/affine transforms of line sets
    - Line set union with index remapping
    - Line sets from point cloud correspondences
    - Wireframes of axis-aligned and oriented bounding boxes
    - Unique edges of triangle and tetrahedral meshes
    """,
    long_description_content_type="text/plain",
    author="Cem Bilaloglu",
    author_email="cem.bilaloglu@idiap.ch",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.9",
    keywords="line-set, point-cloud, mesh, bounding-box, geometry",
)
