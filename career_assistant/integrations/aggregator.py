"""
Job Aggregator - Combines results from multiple job search providers.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional
import logging

from .base import JobSearchProvider
from .indeed import IndeedProvider
from .linkedin import LinkedInProvider
from career_assistant.core.errors import JobSearchError
from career_assistant.core.models import JobListing


class JobAggregator:
    """Aggregates job listings from multiple providers."""

    def __init__(self, providers: Optional[list[JobSearchProvider]] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.providers: list[JobSearchProvider] = providers if providers is not None else [
            LinkedInProvider(),
            IndeedProvider(),
        ]

    def add_provider(self, provider: JobSearchProvider) -> None:
        """Add a custom job search provider."""
        self.providers.append(provider)

    def get_available_providers(self) -> list[str]:
        """Get list of available (properly configured) providers."""
        return [p.name for p in self.providers if p.is_available()]

    def search_jobs(
        self,
        keywords: str,
        location: Optional[str] = None,
        sources: Optional[list[str]] = None,
        experience_level: Optional[str] = None,
        job_type: Optional[str] = None,
        remote_filter: Optional[str] = None,
        limit: int = 25,
    ) -> list[JobListing]:
        """
        Search for jobs across all (or the selected) providers.

        Args:
            keywords: Search keywords
            location: Location filter
            sources: Provider names to use (None = all available)
            experience_level: Required experience level
            job_type: Type of employment
            remote_filter: remote, hybrid, on-site
            limit: Max results per provider

        Returns:
            Unique listings, best match first
        """
        if not keywords or not keywords.strip():
            raise JobSearchError("Please enter keywords to search for jobs.")

        active = [p for p in self.providers if p.is_available()]
        if sources:
            wanted = {s.lower() for s in sources}
            active = [p for p in active if p.name.lower() in wanted]

        if not active:
            self.logger.warning("No active providers available")
            return []

        all_jobs = []
        failures = 0

        with ThreadPoolExecutor(max_workers=len(active)) as executor:
            futures = {
                executor.submit(
                    provider.search_jobs,
                    keywords,
                    location,
                    experience_level,
                    job_type,
                    remote_filter,
                    limit,
                ): provider
                for provider in active
            }

            for future in as_completed(futures):
                provider = futures[future]
                try:
                    jobs = future.result()
                    all_jobs.extend(jobs)
                    self.logger.debug(f"{provider.name}: Found {len(jobs)} jobs")
                except Exception as e:
                    failures += 1
                    self.logger.error(f"{provider.name} search failed: {e}")

        if failures == len(active):
            raise JobSearchError("Failed to search jobs")

        seen = set()
        unique_jobs = []
        for job in all_jobs:
            if job.id not in seen:
                seen.add(job.id)
                unique_jobs.append(job)

        unique_jobs.sort(key=lambda j: j.match_score or 0, reverse=True)
        self.logger.info(f"Found {len(unique_jobs)} unique jobs from {len(active)} providers")
        return unique_jobs
