"""
Map loading module.

Usage:
    from gridpath.maps import load_map, parse_map
"""

from gridpath.maps.loader import load_map, parse_map, resolve_map_path

__all__ = ["load_map", "parse_map", "resolve_map_path"]
