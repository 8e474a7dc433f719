"""
Dependency Container
====================

FastAPI dependencies resolving services from the DI container
attached to the application state.
"""
from fastapi import Request

from job_tracker.application.services.company_service import CompanyService
from job_tracker.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """Get the DI container created for this application."""
    return request.app.state.container


def get_company_service(request: Request) -> CompanyService:
    """
    Get company service instance (singleton within the application).

    Returns:
        CompanyService instance
    """
    return get_container(request).get(CompanyService)
