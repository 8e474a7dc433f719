"""
List Companies Use Case
=======================

Business use case for querying recorded companies.
"""
from typing import List, Optional

from job_tracker.domain.models.company import Company, CompanyQuery
from job_tracker.domain.repositories.company_repository import CompanyRepository


class ListCompaniesUseCase:
    """Use case for listing companies with optional filters, newest first."""

    def __init__(self, company_repository: CompanyRepository):
        self._repository = company_repository

    async def execute(
        self,
        company: Optional[str] = None,
        country: Optional[str] = None,
        position: Optional[str] = None,
    ) -> List[Company]:
        query = CompanyQuery(company=company, country=country, position=position)
        return await self._repository.find(query)
