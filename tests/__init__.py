"""Test suite for the Loom notification service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic and handlers with mocked ports
- integration/: Integration tests - repositories, delivery handlers and
  full producer-to-delivery flows against a SQLite (aiosqlite) database

No external services are needed: emails go to StubEmailService and every
integration test gets a fresh database file.
"""
