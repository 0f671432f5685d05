"""2D composite rigid bodies, colliders, overlap checks and a JSON model loader."""

__version__ = "1.0.0"