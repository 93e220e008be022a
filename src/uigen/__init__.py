"""uigen - AI-assisted UI generation client."""

__version__ = "0.3.0"
