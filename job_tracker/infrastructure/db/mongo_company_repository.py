"""
MongoDB Company Repository
==========================

Concrete implementation of CompanyRepository using MongoDB.
"""
import logging
import re
from typing import Any, Dict, List

from pymongo import DESCENDING
from pymongo.asynchronous.collection import AsyncCollection

from job_tracker.domain.constants.company_fields import CompanyFields
from job_tracker.domain.exceptions import StoreUnavailableError
from job_tracker.domain.models.company import Company, CompanyQuery
from job_tracker.domain.repositories.company_repository import CompanyRepository
from job_tracker.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


def build_filter(query: CompanyQuery) -> Dict[str, Any]:
    """
    Translate a CompanyQuery into a MongoDB filter document.

    Text filters become case-insensitive "contains" regexes with the input
    escaped; the position filter relies on MongoDB matching a scalar against
    array elements.
    """
    mongo_filter: Dict[str, Any] = {}
    if query.company:
        mongo_filter[CompanyFields.COMPANY_NAME] = {"$regex": re.escape(query.company), "$options": "i"}
    if query.country:
        mongo_filter[CompanyFields.COUNTRY] = {"$regex": re.escape(query.country), "$options": "i"}
    if query.position:
        mongo_filter[CompanyFields.AVAILABLE_POSITIONS] = query.position
    return mongo_filter


class MongoCompanyRepository(CompanyRepository):
    """
    MongoDB implementation of CompanyRepository.

    Handles all company persistence operations using MongoDB.
    """

    def __init__(self, connection: MongoConnection):
        """Initialize repository with the shared MongoDB connection."""
        self._connection = connection

    def _get_collection(self) -> AsyncCollection:
        collection = self._connection.collection
        if collection is None:
            raise StoreUnavailableError("MongoDB connection is not established")
        return collection

    def _to_entity(self, doc: dict) -> Company:
        """Convert MongoDB document to Company entity."""
        return Company(
            id=str(doc[CompanyFields.MONGO_ID]),
            company_name=doc.get(CompanyFields.COMPANY_NAME, ""),
            country=doc.get(CompanyFields.COUNTRY, ""),
            company_website=doc.get(CompanyFields.COMPANY_WEBSITE, ""),
            available_positions=list(doc.get(CompanyFields.AVAILABLE_POSITIONS, [])),
            date_added=doc.get(CompanyFields.DATE_ADDED),
        )

    def _to_document(self, company: Company) -> dict:
        """Convert Company entity to MongoDB document (the store assigns _id)."""
        return {
            CompanyFields.COMPANY_NAME: company.company_name,
            CompanyFields.COUNTRY: company.country,
            CompanyFields.COMPANY_WEBSITE: company.company_website,
            CompanyFields.AVAILABLE_POSITIONS: list(company.available_positions),
            CompanyFields.DATE_ADDED: company.date_added,
        }

    def is_available(self) -> bool:
        return self._connection.is_connected()

    async def create(self, company: Company) -> Company:
        """Insert a new company."""
        collection = self._get_collection()

        result = await collection.insert_one(self._to_document(company))
        company.id = str(result.inserted_id)
        logger.info("Saved company to MongoDB (ID: %s)", company.id)

        return company

    async def find(self, query: CompanyQuery) -> List[Company]:
        """Find companies matching the query, newest first."""
        collection = self._get_collection()

        cursor = collection.find(build_filter(query)).sort(CompanyFields.DATE_ADDED, DESCENDING)
        return [self._to_entity(doc) async for doc in cursor]
