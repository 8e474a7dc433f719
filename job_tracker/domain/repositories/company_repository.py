"""
Company Repository Interface
============================

Abstract interface for company data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from job_tracker.domain.models.company import Company, CompanyQuery


class CompanyRepository(ABC):
    """
    Abstract repository for company persistence operations.

    This interface defines the contract for company data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, company: Company) -> Company:
        """
        Insert a new company.

        Args:
            company: Company entity to insert (without id)

        Returns:
            Created company entity with its store-generated id

        Raises:
            StoreUnavailableError: If the store connection is not established
        """
        pass

    @abstractmethod
    async def find(self, query: CompanyQuery) -> List[Company]:
        """
        Find companies matching a query, newest first.

        Args:
            query: Filters to apply (all supplied filters must match)

        Returns:
            List of company entities ordered by date_added descending

        Raises:
            StoreUnavailableError: If the store connection is not established
        """
        pass

    def is_available(self) -> bool:
        """Whether the backing store is reachable for operations."""
        return True
