"""Infrastructure layer: HTTP clients and logging setup."""
