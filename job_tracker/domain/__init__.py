"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Company record and query value objects
- Repository Interfaces: Abstract contracts for data access
- Exceptions: Errors raised by use cases and repositories
"""
