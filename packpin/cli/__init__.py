"""Command-line interface for the Packpin client."""
