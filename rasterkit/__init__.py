"""A small software rasterizer: vectors, a colour grid with line drawing, and plain PPM output."""

__version__ = "0.1.0"
__all__ = ["__version__"]