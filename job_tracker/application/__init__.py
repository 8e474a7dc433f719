"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (add company, list companies)
- Services: Application services that coordinate multiple use cases
- DTOs: Pydantic models for API requests and responses
"""
