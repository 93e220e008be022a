"""User-facing clients and interfaces for uigen."""
