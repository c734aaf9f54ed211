"""
Auth Session - Sign up, sign in and session persistence against Supabase auth.

The signed-in session (tokens plus the user record) is written to a JSON file
so that later CLI invocations act as the same user. Tokens are refreshed
when they have expired.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import json
import logging
import os

import requests

from .repositories import ProfileRepository
from .supabase_backend import SupabaseBackend
from career_assistant.core.errors import AuthError, BackendError, ValidationError
from career_assistant.core.models import AuthUser, UserProfile


class AuthSession:
    """The current user's session with the hosted backend."""

    def __init__(
        self,
        backend: SupabaseBackend,
        session_path: str,
        profiles: Optional[ProfileRepository] = None,
    ):
        """
        Initialize the auth session.

        Args:
            backend: Supabase backend (its URL, anon key and HTTP session are reused)
            session_path: File the session is persisted to
            profiles: Repository used to create the profile on sign up
        """
        self.backend = backend
        self.session_path = Path(session_path)
        self.profiles = profiles
        self.logger = logging.getLogger(self.__class__.__name__)
        self._session: Optional[dict] = None

    def _auth_request(self, path: str, payload: Optional[dict] = None, token: Optional[str] = None) -> dict:
        url = f"{self.backend.url}/auth/v1/{path}"
        headers = {
            "apikey": self.backend.anon_key,
            "Content-Type": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self.backend.session.post(
                url, json=payload or {}, headers=headers, timeout=self.backend.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"Auth request to {path} failed: {e}")
            raise AuthError(f"Could not reach the authentication service: {e}") from e

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = (
                body.get("error_description")
                or body.get("msg")
                or body.get("message")
                or f"Authentication failed (HTTP {response.status_code})"
            )
            self.logger.error(f"Auth request to {path} returned {response.status_code}: {message}")
            raise AuthError(message)

        if not response.content:
            return {}
        return response.json()

    @staticmethod
    def _user_from(data: dict) -> AuthUser:
        return AuthUser(
            id=data.get("id", ""),
            email=data.get("email") or "",
            metadata=data.get("user_metadata") or {},
        )

    def _store(self, data: dict) -> None:
        """Persist a token response and hand the token to the backend."""
        expires_at = data.get("expires_at")
        if not expires_at and data.get("expires_in"):
            expires_at = int(datetime.now(timezone.utc).timestamp()) + int(data["expires_in"])

        previous_user = (self._session or {}).get("user") or {}
        self._session = {
            "access_token": data["access_token"],
            "refresh_token": data.get("refresh_token"),
            "expires_at": expires_at,
            "user": data.get("user") or previous_user,
        }

        self.session_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.session_path, 'w', encoding='utf-8') as f:
            json.dump(self._session, f, indent=2)
        os.chmod(self.session_path, 0o600)

        self.backend.set_access_token(self._session["access_token"])

    def _clear(self) -> None:
        self._session = None
        self.backend.set_access_token(None)
        if self.session_path.exists():
            self.session_path.unlink()

    def _load(self) -> Optional[dict]:
        if self._session is None and self.session_path.exists():
            with open(self.session_path, 'r', encoding='utf-8') as f:
                self._session = json.load(f)
        return self._session

    def sign_up(self, email: str, password: str, name: str = "") -> AuthUser:
        """
        Create an account.

        A default profile is created for the new user; if that fails the
        error is logged and sign up still succeeds.

        Returns:
            The new user
        """
        if not email or not password:
            raise ValidationError("Please enter your email and password.")

        data = self._auth_request(
            "signup",
            {"email": email, "password": password, "data": {"name": name} if name else {}},
        )

        if data.get("access_token"):
            self._store(data)
            user = self._user_from(data.get("user") or {})
        else:
            # Email confirmation pending: the response is the user itself
            user = self._user_from(data.get("user") or data)

        self.logger.info(f"Signed up {user.email}")

        if self.profiles is not None:
            profile = UserProfile.default_for(user.id, user.email or email, user.metadata.get("name", ""))
            try:
                self.profiles.save(profile)
            except BackendError as e:
                self.logger.error(f"Error creating user profile: {e}")

        return user

    def sign_in(self, email: str, password: str) -> AuthUser:
        """Sign in with email and password."""
        if not email or not password:
            raise ValidationError("Please enter your email and password.")

        data = self._auth_request("token?grant_type=password", {"email": email, "password": password})
        if not data.get("access_token"):
            raise AuthError("Sign in did not return a session")

        self._store(data)
        user = self._user_from(data.get("user") or {})
        self.logger.info(f"Signed in as {user.email}")
        return user

    def sign_out(self) -> None:
        """Sign out and forget the stored session."""
        session = self._load()
        if session:
            try:
                self._auth_request("logout", token=session.get("access_token"))
            except AuthError as e:
                # Local session is dropped regardless
                self.logger.warning(f"Sign out request failed: {e}")
        self._clear()
        self.logger.info("Signed out")

    def current_user(self) -> Optional[AuthUser]:
        """
        The signed-in user, or None.

        Refreshes the access token when it has expired; a failed refresh
        signs the user out.
        """
        session = self._load()
        if not session:
            return None

        expires_at = session.get("expires_at")
        now = datetime.now(timezone.utc).timestamp()
        if expires_at and now >= expires_at:
            if not session.get("refresh_token"):
                self._clear()
                return None
            try:
                data = self._auth_request(
                    "token?grant_type=refresh_token",
                    {"refresh_token": session["refresh_token"]},
                )
            except AuthError as e:
                self.logger.warning(f"Session expired and could not be refreshed: {e}")
                self._clear()
                return None
            self._store(data)
            session = self._session
        else:
            self.backend.set_access_token(session.get("access_token"))

        return self._user_from(session.get("user") or {})

    def require_user(self) -> AuthUser:
        """The signed-in user; raises AuthError when nobody is signed in."""
        user = self.current_user()
        if user is None:
            raise AuthError("Please sign in first: career-assistant auth signin --email you@example.com")
        return user
