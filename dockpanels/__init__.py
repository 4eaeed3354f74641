"""Lists, panels, focus handling and table cells for a Docker terminal dashboard."""

__version__ = "0.1.0"