"""
Company Controller
==================

FastAPI controller for company tracking endpoints.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, HTTPException, status, Depends

from job_tracker.application.dto.company_dto import (
    CompanyCreateRequest,
    CompanyResponse,
    MessageResponse,
)
from job_tracker.api.v1.dependencies import get_company_service
from job_tracker.application.services.company_service import CompanyService
from job_tracker.domain.exceptions import StoreUnavailableError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["companies"])

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
STORE_UNAVAILABLE_MESSAGE = "Database service unavailable"
COMPANY_ADDED_MESSAGE = "Company added successfully to Database"

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": MessageResponse},
}


@router.post(
    "/add_company",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}, **ERROR_RESPONSES},
    summary="Add a company",
    description="""
    Add a company record.

    - companyName and country are required and must be non-empty
    - companyWebsite defaults to "" and availablePositions to []
    - dateAdded is set by the server
    """
)
async def add_company(
    request: Optional[CompanyCreateRequest] = Body(None),
    service: CompanyService = Depends(get_company_service),
) -> MessageResponse:
    """Add a company."""
    # No body at all means every field is absent
    if request is None:
        request = CompanyCreateRequest()
    try:
        await service.add_company(
            company_name=request.companyName,
            country=request.country,
            company_website=request.companyWebsite,
            available_positions=request.availablePositions,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreUnavailableError as e:
        logger.error("Error in /add_company: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=STORE_UNAVAILABLE_MESSAGE)
    except Exception:
        logger.exception("Error in /add_company")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_MESSAGE)

    return MessageResponse(message=COMPANY_ADDED_MESSAGE)


@router.get(
    "/get_companies",
    response_model=List[CompanyResponse],
    responses=ERROR_RESPONSES,
    summary="List companies",
    description="""
    List companies, newest first.

    - company: case-insensitive substring of the company name
    - country: case-insensitive substring of the country
    - position: exact open position
    """
)
async def get_companies(
    company: Optional[str] = None,
    country: Optional[str] = None,
    position: Optional[str] = None,
    service: CompanyService = Depends(get_company_service),
) -> List[CompanyResponse]:
    """List companies with optional filters."""
    try:
        companies = await service.list_companies(company=company, country=country, position=position)
    except StoreUnavailableError as e:
        logger.error("Error in /get_companies: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=STORE_UNAVAILABLE_MESSAGE)
    except Exception:
        logger.exception("Error in /get_companies")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_MESSAGE)

    return [CompanyResponse.from_entity(item) for item in companies]
