"""Vectors, matrices, ray colliders, interpolation, simplex noise and a free-fly camera."""

__version__ = "0.1.0"