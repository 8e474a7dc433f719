from .company import Company, CompanyQuery

__all__ = ["Company", "CompanyQuery"]
