"""
Company DTO
===========

Pydantic models for company API requests and responses.
Field names match the JSON wire format (camelCase).
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from job_tracker.domain.models.company import Company
from job_tracker.utils.datetime_utils import to_iso


class CompanyCreateRequest(BaseModel):
    """DTO for adding a company. Presence of required fields is checked by the use case."""
    companyName: Optional[str] = Field(None, description="Company name (required)")
    country: Optional[str] = Field(None, description="Country (required)")
    companyWebsite: Optional[str] = Field(None, description="Company website, defaults to empty string")
    availablePositions: Optional[List[str]] = Field(None, description="Open positions, defaults to empty list")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "companyName": "Acme",
                "country": "USA",
                "companyWebsite": "https://acme.example",
                "availablePositions": ["Backend Engineer", "Data Analyst"],
            }
        }
    )


class CompanyResponse(BaseModel):
    """DTO for company data."""
    id: str
    companyName: str
    country: str
    companyWebsite: str = ""
    availablePositions: List[str] = []
    dateAdded: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6650b6c1f1d2a3b4c5d6e7f8",
                "companyName": "Acme",
                "country": "USA",
                "companyWebsite": "https://acme.example",
                "availablePositions": ["Backend Engineer", "Data Analyst"],
                "dateAdded": "2025-12-20T09:11:50.840Z",
            }
        }
    )

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id,
            companyName=company.company_name,
            country=company.country,
            companyWebsite=company.company_website,
            availablePositions=company.available_positions,
            dateAdded=to_iso(company.date_added),
        )


class MessageResponse(BaseModel):
    """DTO for status and error messages."""
    message: str


class HealthResponse(BaseModel):
    """DTO for the health check."""
    status: str
    database: str
