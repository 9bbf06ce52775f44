"""Look up GitHub releases, show their changelog in a window and download assets."""

__version__ = "0.0.1"
__all__ = ["__version__"]