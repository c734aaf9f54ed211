"""
Job search integrations.
"""

from .base import JobSearchProvider
from .indeed import IndeedProvider
from .linkedin import LinkedInProvider
from .aggregator import JobAggregator

__all__ = [
    "JobSearchProvider",
    "IndeedProvider",
    "LinkedInProvider",
    "JobAggregator",
]
