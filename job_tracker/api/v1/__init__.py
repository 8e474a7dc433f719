"""
API v1 Package
===============

Version 1 API controllers.
"""
from .company_controller import router as company_router
from .error_handlers import register_error_handlers

__all__ = ["company_router", "register_error_handlers"]
