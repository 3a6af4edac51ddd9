"""Static site builder for a folder-per-page portfolio."""

__version__ = "0.1.0"
