"""REST API for the uigen server."""
