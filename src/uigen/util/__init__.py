"""Utility modules for uigen."""
