"""Isometric wireframe viewer for .fdf height-map files: parsing, projection, rasterising and a pygame window."""

__version__ = "0.1.0"