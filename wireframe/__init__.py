"""Height-map wireframe viewer with isometric and parallel projections."""

__version__ = "0.1.0"