from .company_repository import CompanyRepository

__all__ = ["CompanyRepository"]
