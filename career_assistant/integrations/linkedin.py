"""
LinkedIn job search integration.

LinkedIn's jobs API is not available to browser or CLI clients, so results
are sample listings shaped on the search keywords. A production deployment
would proxy the real API through a backend service.
"""

from datetime import date
from typing import Optional

from .base import JobSearchProvider
from career_assistant.core.models import JobListing


PLACEHOLDER_LOGO = "https://via.placeholder.com/50x50"

# (position template, company, default location, posted, salary, job id, match score)
SAMPLE_LISTINGS = [
    ("Senior {kw}", "TechCorp Solutions", "San Francisco, CA", "2 days ago",
     "$80,000 - $120,000", "1234567", 92),
    ("{kw} Developer", "Innovation Labs", "Remote", "1 day ago",
     "$70,000 - $100,000", "1234568", 87),
    ("Junior {kw}", "StartupXYZ", "New York, NY", "3 hours ago",
     "$60,000 - $85,000", "1234569", 78),
]


class LinkedInProvider(JobSearchProvider):
    """LinkedIn job search provider (sample data)."""

    JOB_URL = "https://linkedin.com/jobs/view/{job_id}"

    @property
    def name(self) -> str:
        return "LinkedIn"

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
        """Return listings templated on the keywords."""
        today = date.today().isoformat()
        jobs = [
            JobListing(
                id=f"linkedin_{job_id}",
                position=position.format(kw=keywords),
                company=company,
                company_logo=PLACEHOLDER_LOGO,
                location=location or default_location,
                date=today,
                ago_time=posted,
                salary=salary,
                job_url=self.JOB_URL.format(job_id=job_id),
                source=self.name,
                job_type=job_type or "",
                match_score=score,
            )
            for position, company, default_location, posted, salary, job_id, score in SAMPLE_LISTINGS
        ]

        self.logger.debug(f"LinkedIn: {len(jobs)} listings for '{keywords}'")
        return jobs[:limit]
