"""
Company Model
=============

Domain model representing a company the user is tracking.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import List, Optional
from dataclasses import dataclass, field

from job_tracker.utils.datetime_utils import now


@dataclass
class Company:
    """
    Company domain model.

    Records are immutable once stored: there is no update or delete path.
    `id` is assigned by the store on insert and is None before that.
    """
    company_name: str
    country: str
    company_website: str = ""
    available_positions: List[str] = field(default_factory=list)
    date_added: datetime = field(default_factory=lambda: now())
    id: Optional[str] = None


@dataclass(frozen=True)
class CompanyQuery:
    """
    Filters for listing companies.

    `company` and `country` are case-insensitive substring filters,
    `position` is an exact match against one of the available positions.
    None or empty values apply no constraint.
    """
    company: Optional[str] = None
    country: Optional[str] = None
    position: Optional[str] = None

