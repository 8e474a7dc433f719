from typing import TYPE_CHECKING
from ...domain.repositories.company_repository import CompanyRepository
from ...infrastructure.db.mongo_connection import MongoConnection
from ...infrastructure.db.mongo_company_repository import MongoCompanyRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the database connection from the database provider and creates repository instances.
        """
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            CompanyRepository,
            MongoCompanyRepository(connection=container.get(MongoConnection))
        )
