"""
Repositories for the three persisted record types.

Every operation is scoped to one owner: profiles by their own id, job alerts
and portfolios by ``user_id``. A record belonging to someone else is treated
the same as a missing one.
"""

from datetime import datetime, timezone
from typing import Optional
import logging

from .base import Backend
from career_assistant.core.errors import RecordNotFoundError, ValidationError
from career_assistant.core.models import AuthUser, JobAlert, Portfolio, UserProfile


class ProfileRepository:
    """Reads and writes user profiles."""

    TABLE = "profiles"

    def __init__(self, backend: Backend):
        self.backend = backend
        self.logger = logging.getLogger(self.__class__.__name__)

    def get(self, user: AuthUser) -> UserProfile:
        """
        Get a user's profile.

        Returns:
            The stored profile, or a default one built from the user's email
        """
        row = self.backend.select_one(self.TABLE, {"id": user.id})
        if row:
            return UserProfile.from_dict(row)

        self.logger.info(f"No profile stored for {user.email}; using defaults")
        return UserProfile.default_for(user.id, user.email)

    def save(self, profile: UserProfile) -> UserProfile:
        """Create or update a profile."""
        profile.updated_at = datetime.now(timezone.utc)
        row = self.backend.upsert(self.TABLE, profile.to_dict())
        self.logger.info(f"Saved profile {profile.id}")
        return UserProfile.from_dict(row)

    @staticmethod
    def add_skill(profile: UserProfile, skill: str) -> bool:
        """Add a skill to a profile in memory. Returns False if blank or already present."""
        skill = skill.strip()
        if not skill or skill in profile.skills:
            return False
        profile.skills.append(skill)
        return True

    @staticmethod
    def remove_skill(profile: UserProfile, skill: str) -> bool:
        """Remove a skill from a profile in memory. Returns False if it wasn't there."""
        if skill not in profile.skills:
            return False
        profile.skills = [s for s in profile.skills if s != skill]
        return True


class JobAlertRepository:
    """Manages a user's saved job alerts."""

    TABLE = "job_alerts"

    def __init__(self, backend: Backend):
        self.backend = backend
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, user_id: str, alert: JobAlert) -> JobAlert:
        """
        Save a new alert for a user.

        Args:
            user_id: Owner of the alert
            alert: Alert filters (title and keywords are required)

        Returns:
            The stored alert
        """
        if not alert.title.strip() or not alert.keywords.strip():
            raise ValidationError("Please fill in the alert title and keywords.")

        alert.user_id = user_id
        alert.is_active = True
        row = self.backend.insert(self.TABLE, alert.to_insert())

        created = JobAlert.from_dict(row)
        self.logger.info(f"Created job alert '{created.title}'")
        return created

    def list(self, user_id: str) -> list[JobAlert]:
        """A user's alerts, newest first."""
        rows = self.backend.select(
            self.TABLE,
            filters={"user_id": user_id},
            order="created_at",
            desc=True,
        )
        return [JobAlert.from_dict(row) for row in rows]

    def delete(self, user_id: str, alert_id: str) -> None:
        removed = self.backend.delete(self.TABLE, {"id": alert_id, "user_id": user_id})
        if not removed:
            raise RecordNotFoundError(f"Job alert not found: {alert_id}")
        self.logger.info(f"Deleted job alert {alert_id}")

    def toggle(self, user_id: str, alert_id: str, is_active: bool) -> JobAlert:
        """Pause or resume an alert."""
        rows = self.backend.update(
            self.TABLE,
            {"is_active": is_active},
            {"id": alert_id, "user_id": user_id},
        )
        if not rows:
            raise RecordNotFoundError(f"Job alert not found: {alert_id}")

        self.logger.info(f"Job alert {alert_id} {'activated' if is_active else 'paused'}")
        return JobAlert.from_dict(rows[0])


class PortfolioRepository:
    """Stores one portfolio per user."""

    TABLE = "portfolios"

    def __init__(self, backend: Backend):
        self.backend = backend
        self.logger = logging.getLogger(self.__class__.__name__)

    def get(self, user_id: str) -> Optional[Portfolio]:
        row = self.backend.select_one(self.TABLE, {"user_id": user_id})
        return Portfolio.from_dict(row) if row else None

    def save(self, portfolio: Portfolio) -> Portfolio:
        """Create or update the owner's portfolio."""
        portfolio.updated_at = datetime.now(timezone.utc)
        row = self.backend.upsert(self.TABLE, portfolio.to_dict(), on_conflict="user_id")
        self.logger.info(f"Saved portfolio for {portfolio.user_id}")
        return Portfolio.from_dict(row)

    def publish(self, user_id: str, subdomain: str) -> Portfolio:
        """Mark the user's portfolio as published under a subdomain."""
        rows = self.backend.update(
            self.TABLE,
            {
                "subdomain": subdomain,
                "is_published": True,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            },
            {"user_id": user_id},
        )
        if not rows:
            raise RecordNotFoundError(f"No portfolio saved for user {user_id}")

        portfolio = Portfolio.from_dict(rows[0])
        self.logger.info(f"Published portfolio at {portfolio.url}")
        return portfolio

    def delete(self, user_id: str, portfolio_id: str) -> None:
        removed = self.backend.delete(self.TABLE, {"id": portfolio_id, "user_id": user_id})
        if not removed:
            raise RecordNotFoundError(f"Portfolio not found: {portfolio_id}")
        self.logger.info(f"Deleted portfolio {portfolio_id}")
