"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Dependencies: Dependency injection setup
- Error handlers: Uniform {"message": ...} error bodies
"""
