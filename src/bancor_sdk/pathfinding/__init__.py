"""
Pathfinding module for Bancor SDK.

This module provides the anchor path search, the path merge step and the
generator that combines them into conversion paths.
"""

from .anchor_finder import AnchorPathFinder, first_in_order
from .merger import merge_paths, collapse_cycles
from .steps import path_to_steps
from .generator import PathGenerator, generate_path, get_conversion_path

__all__ = [
    "AnchorPathFinder",
    "first_in_order",
    "merge_paths",
    "collapse_cycles",
    "path_to_steps",
    "PathGenerator",
    "generate_path",
    "get_conversion_path",
]
