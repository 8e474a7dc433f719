"""
Add Company Use Case
====================

Business use case for recording a new company.
"""
from typing import List, Optional

from job_tracker.domain.exceptions import ValidationError
from job_tracker.domain.models.company import Company
from job_tracker.domain.repositories.company_repository import CompanyRepository
from job_tracker.utils.datetime_utils import now

MISSING_REQUIRED_FIELDS_MESSAGE = "Missing required fields: companyName and country"


class AddCompanyUseCase:
    """
    Use case for adding a company.

    Every call inserts a new record; identical payloads are not deduplicated.
    """

    def __init__(self, company_repository: CompanyRepository):
        """
        Initialize use case with repository.

        Args:
            company_repository: Repository for company persistence
        """
        self._repository = company_repository

    async def execute(
        self,
        company_name: Optional[str],
        country: Optional[str],
        company_website: Optional[str] = None,
        available_positions: Optional[List[str]] = None,
    ) -> Company:
        """
        Execute the add company use case.

        Args:
            company_name: Company name (required, non-empty)
            country: Country (required, non-empty)
            company_website: Optional website, stored as "" when absent
            available_positions: Optional open positions, stored as [] when absent

        Returns:
            Created company entity with its store-generated id

        Raises:
            ValidationError: If company_name or country is missing or empty
        """
        if not company_name or not country:
            raise ValidationError(MISSING_REQUIRED_FIELDS_MESSAGE)

        new_company = Company(
            company_name=company_name,
            country=country,
            company_website=company_website or "",
            available_positions=list(available_positions or []),
            date_added=now(),
        )
        return await self._repository.create(new_company)
