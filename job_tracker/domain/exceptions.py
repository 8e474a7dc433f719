"""
Domain Exceptions
=================

Errors raised by use cases and repositories. The API layer maps them to
HTTP status codes.
"""


class ValidationError(ValueError):
    """Request input is missing a required field."""


class StoreUnavailableError(RuntimeError):
    """The document store connection was never established."""
