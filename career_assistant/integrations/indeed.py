"""
Indeed job search integration.

Indeed has restricted its public API; this provider returns a fixed set of
sample listings regardless of the query.
"""

from typing import Optional

from .base import JobSearchProvider
from career_assistant.core.models import JobListing


class IndeedProvider(JobSearchProvider):
    """Indeed job search provider (sample data)."""

    @property
    def name(self) -> str:
        return "Indeed"

    @property
    def requires_api_key(self) -> bool:
        return False

    def search_jobs(
        self,
        keywords: str,
        location: Optional[str] = None,
        experience_level: Optional[str] = None,
        job_type: Optional[str] = None,
        remote_filter: Optional[str] = None,
        limit: int = 25,
    ) -> list[JobListing]:
        jobs = [
            JobListing(
                id="indeed_1",
                position="Frontend Developer",
                company="TechCorp Inc.",
                location="San Francisco, CA",
                description=(
                    "We are looking for a skilled Frontend Developer to join our team. You will "
                    "be responsible for building user interfaces using React and modern web "
                    "technologies."
                ),
                ago_time="2 days ago",
                source="LinkedIn",
                job_url="https://linkedin.com/jobs/frontend-developer-techcorp",
                salary="$80,000 - $120,000",
                job_type="full-time",
                match_score=87,
            ),
            JobListing(
                id="indeed_2",
                position="React Developer",
                company="StartupXYZ",
                location="Remote",
                description=(
                    "Join our remote team as a React Developer. Work on exciting projects using "
                    "the latest technologies including React, TypeScript, and GraphQL."
                ),
                ago_time="1 day ago",
                source="Indeed",
                job_url="https://indeed.com/jobs/react-developer-startupxyz",
                job_type="remote",
                match_score=92,
            ),
        ]
        return jobs[:limit]
