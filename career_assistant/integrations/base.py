"""
Job board provider interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from career_assistant.core.models import JobListing


class JobSearchProvider(ABC):
    """A job board the aggregator can query for listings."""

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @property
    @abstractmethod
    def requires_api_key(self) -> bool:
        """True if search_jobs needs self.api_key."""
        pass

    @abstractmethod
    def search_jobs(
        self,
        keywords: str,
        location: Optional[str] = None,
        experience_level: Optional[str] = None,
        job_type: Optional[str] = None,
        remote_filter: Optional[str] = None,
        limit: int = 25,
    ) -> list[JobListing]:
        """
        Return listings for the search filters.

        Args:
            keywords: Job title or skills
            location: Location filter
            experience_level: Seniority filter (entry, mid, senior, executive)
            job_type: full-time, part-time, contract, internship
            remote_filter: remote, hybrid, on-site
            limit: Cap on listings returned

        Returns:
            List of JobListing objects
        """
        pass

    def is_available(self) -> bool:
        """Whether the provider can be queried with its current credentials."""
        return bool(self.api_key) or not self.requires_api_key
