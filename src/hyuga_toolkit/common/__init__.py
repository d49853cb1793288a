"""Shared helpers: filesystem locations, display names and logging."""

from .naming import generate_display_name
from .paths import StorePaths, get_base_dir, get_models_dir, get_projects_dir

__all__ = [
    "StorePaths",
    "generate_display_name",
    "get_base_dir",
    "get_models_dir",
    "get_projects_dir",
]
