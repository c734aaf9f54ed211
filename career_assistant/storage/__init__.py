"""
Persistence: hosted (Supabase) and local backends, repositories and auth.
"""

from .base import Backend, TABLES, check_schema
from .supabase_backend import SupabaseBackend
from .local_backend import LocalBackend
from .repositories import JobAlertRepository, PortfolioRepository, ProfileRepository
from .auth import AuthSession

__all__ = [
    "Backend",
    "TABLES",
    "check_schema",
    "SupabaseBackend",
    "LocalBackend",
    "ProfileRepository",
    "JobAlertRepository",
    "PortfolioRepository",
    "AuthSession",
]
