"""Building blocks for grid-based roguelikes: turn queue, field of view, grid, panels, camera and message logs."""

__version__ = "0.1.0"