"""System status components and a display-independent tiling window manager model."""

__version__ = "1.0.0"