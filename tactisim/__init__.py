"""A mini tactical simulator: a tile map with selectable units that move on command."""

__version__ = "0.1.0"