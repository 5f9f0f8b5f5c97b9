"""Test suite for the Packpin client.

Test structure:
- unit/: Unit tests - core types, settings, base client routine, CLI
- integration/: Endpoint tests against a mocked Packpin API (pytest-httpx)

No test talks to the live Packpin API.
"""
