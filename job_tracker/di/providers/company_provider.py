from typing import TYPE_CHECKING
from ...domain.repositories.company_repository import CompanyRepository
from ...application.services.company_service import CompanyService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CompanyProvider:
    """Company service provider - registers company-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register company service.
        Service is created with repository from container.
        """
        container.register_singleton(
            CompanyService,
            CompanyService(
                company_repository=container.get(CompanyRepository)
            )
        )
