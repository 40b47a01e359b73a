"""Rendering and input backends for the camera."""

from lente.backends.arcade_backend import ArcadePointer, ArcadeRenderer

__all__ = ["ArcadePointer", "ArcadeRenderer"]
