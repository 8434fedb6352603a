"""Vector, matrix and quaternion math for 2D and 3D games."""

__version__ = "0.1.0"
__all__ = ["scalar", "vector2", "vector3", "matrix", "quaternion"]