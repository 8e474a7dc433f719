from .add_company import AddCompanyUseCase, MISSING_REQUIRED_FIELDS_MESSAGE
from .list_companies import ListCompaniesUseCase

__all__ = ["AddCompanyUseCase", "ListCompaniesUseCase", "MISSING_REQUIRED_FIELDS_MESSAGE"]
