"""
Copyright (c) 2024 Idiap Research Institute
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Centralized configuration management for line_sets.

This module provides a single source of truth for:
- Project paths (config directory)
- Configuration file loading
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


class Config:
    """Centralized configuration management for line_sets."""

    _project_root: Optional[Path] = None
    _config_dir: Optional[Path] = None

    @classmethod
    def get_project_root(cls) -> Path:
        """
        Get the project root directory.

        This method calculates the project root once and caches it.
        The project root is the directory containing 'src/line_sets'.

        Returns:
            Path: The project root directory
        """
        if cls._project_root is None:
            # This file is in: src/line_sets/core/config.py
            cls._project_root = Path(__file__).resolve().parents[3]

        return cls._project_root

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get the config directory path."""
        if cls._config_dir is not None:
            return cls._config_dir
        return cls.get_project_root() / "config"

    @classmethod
    def set_config_dir(cls, directory: Optional[Union[str, Path]]) -> None:
        """
        Override the config directory.

        Args:
            directory: New config directory, or None to go back to the
                project default
        """
        cls._config_dir = None if directory is None else Path(directory)

    @classmethod
    def get_linesets_config_path(cls) -> Path:
        """Get the line sets configuration file path."""
        return cls.get_config_dir() / "linesets.yaml"

    @classmethod
    def load_lineset_config(cls, object_name: str) -> Dict[str, Any]:
        """
        Load configuration for a specific line set object.

        Args:
            object_name: Name of the line set object to load config for

        Returns:
            Dict containing the configuration parameters

        Raises:
            FileNotFoundError: If config file doesn't exist
            KeyError: If object_name not found in config
        """
        config_path = cls.get_linesets_config_path()

        with open(config_path, "r") as file:
            config = yaml.safe_load(file) or {}

        if object_name not in config:
            raise KeyError(f"Object '{object_name}' not found in linesets config")

        return config[object_name]

    @classmethod
    def get_info(cls) -> Dict[str, str]:
        """
        Get configuration information for debugging.

        Returns:
            Dict with current path configurations
        """
        return {
            "project_root": str(cls.get_project_root()),
            "config_dir": str(cls.get_config_dir()),
            "linesets_config": str(cls.get_linesets_config_path()),
        }
