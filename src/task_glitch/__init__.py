"""TaskGlitch: sales task tracker with ROI metrics."""

__version__ = "0.1.0"
