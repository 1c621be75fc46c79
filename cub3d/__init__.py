"""Grid-based raycasting maze explorer with doors, a minimap and a printf-style formatter."""

__version__ = "0.1.0"