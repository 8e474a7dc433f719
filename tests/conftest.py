from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient


# Ensure project root is on sys.path for absolute imports like 'job_tracker.main'
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# Deterministic rendering of dateAdded; set before settings are first loaded
os.environ["TIMEZONE"] = "UTC"


from job_tracker.application.services.company_service import CompanyService  # noqa: E402
from job_tracker.core.config import Settings  # noqa: E402
from job_tracker.di.container import DIContainer  # noqa: E402
from job_tracker.domain.models.company import Company, CompanyQuery  # noqa: E402
from job_tracker.domain.repositories.company_repository import CompanyRepository  # noqa: E402
from job_tracker.main import create_application  # noqa: E402


def matches(query: CompanyQuery, company: Company) -> bool:
    """Evaluate a query against one record the way the MongoDB filter does."""
    if query.company and query.company.lower() not in company.company_name.lower():
        return False
    if query.country and query.country.lower() not in company.country.lower():
        return False
    if query.position and query.position not in company.available_positions:
        return False
    return True


class InMemoryCompanyRepository(CompanyRepository):
    """CompanyRepository backed by a list, with the same filter and ordering rules as MongoDB."""

    def __init__(self) -> None:
        self.companies: List[Company] = []
        self.fail_with: Optional[Exception] = None

    async def create(self, company: Company) -> Company:
        if self.fail_with is not None:
            raise self.fail_with
        company.id = str(ObjectId())
        self.companies.append(company)
        return company

    async def find(self, query: CompanyQuery) -> List[Company]:
        if self.fail_with is not None:
            raise self.fail_with
        # Newest inserts first so equal timestamps keep insertion order reversed
        matched = [c for c in reversed(self.companies) if matches(query, c)]
        return sorted(matched, key=lambda c: c.date_added, reverse=True)


@pytest.fixture
def repository() -> InMemoryCompanyRepository:
    return InMemoryCompanyRepository()


@pytest.fixture
def container(repository: InMemoryCompanyRepository) -> DIContainer:
    container = DIContainer(Settings())
    container.register_singleton(CompanyRepository, repository)
    container.register_singleton(CompanyService, CompanyService(company_repository=repository))
    return container


@pytest.fixture
def client(container: DIContainer) -> TestClient:
    # No context manager: the lifespan (MongoDB connect) is not run
    return TestClient(create_application(container=container))
