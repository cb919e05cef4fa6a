"""
Shared test doubles for the catalog.

Holds AsyncMock repository factories for command tests and in-memory
repositories for HTTP tests.
"""
