"""
Company Service
===============

Application service that coordinates company-related operations.
This service orchestrates multiple use cases.
"""
from typing import List, Optional

from job_tracker.domain.models.company import Company
from job_tracker.domain.repositories.company_repository import CompanyRepository
from job_tracker.application.use_cases.company.add_company import AddCompanyUseCase
from job_tracker.application.use_cases.company.list_companies import ListCompaniesUseCase


class CompanyService:
    """
    Application service for company operations.

    This service coordinates multiple use cases and provides
    a high-level interface for company tracking.
    """

    def __init__(self, company_repository: CompanyRepository):
        """
        Initialize service with repository.

        Args:
            company_repository: Repository for company persistence
        """
        self._repository = company_repository
        self._add_use_case = AddCompanyUseCase(company_repository)
        self._list_use_case = ListCompaniesUseCase(company_repository)

    async def add_company(
        self,
        company_name: Optional[str],
        country: Optional[str],
        company_website: Optional[str] = None,
        available_positions: Optional[List[str]] = None,
    ) -> Company:
        """
        Add a company.

        Args:
            company_name: Company name (matches API field companyName)
            country: Country (matches API field country)
            company_website: Optional website (matches API field companyWebsite)
            available_positions: Optional open positions (matches API field availablePositions)

        Returns:
            Created company entity
        """
        return await self._add_use_case.execute(
            company_name=company_name,
            country=country,
            company_website=company_website,
            available_positions=available_positions,
        )

    async def list_companies(
        self,
        company: Optional[str] = None,
        country: Optional[str] = None,
        position: Optional[str] = None,
    ) -> List[Company]:
        """
        List companies with optional filters.

        Args:
            company: Case-insensitive substring of the company name
            country: Case-insensitive substring of the country
            position: Exact open position

        Returns:
            List of company entities, newest first
        """
        return await self._list_use_case.execute(company=company, country=country, position=position)

    def is_store_available(self) -> bool:
        """Check whether the company store connection is established."""
        return self._repository.is_available()
