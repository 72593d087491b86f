"""graphmap - mapping metadata for object-graph mappers."""

__version__ = "0.1.0"
