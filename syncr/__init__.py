"""Mirror the regular files of a source directory into a target directory."""

__version__ = "0.1.0"
__all__ = ["cli", "helper", "models", "synchronize"]