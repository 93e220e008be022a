"""uigen development API server."""

from uigen import __version__

__all__ = ["__version__"]
