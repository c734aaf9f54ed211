"""Tests for AuthSession."""

import json
import time
from unittest import mock

import pytest
import requests

from career_assistant.core.errors import AuthError, BackendError
from career_assistant.storage import AuthSession, SupabaseBackend


URL = "https://demo.supabase.co"

USER = {"id": "user-1", "email": "sam@example.com", "user_metadata": {"name": "Sam"}}


def make_response(payload=None, status=200):
    response = mock.Mock()
    response.ok = status < 400
    response.status_code = status
    response.content = b"" if payload is None else b"x"
    response.json.return_value = payload
    return response


def token_payload(expires_in=3600, access="access-1"):
    return {
        "access_token": access,
        "refresh_token": "refresh-1",
        "expires_in": expires_in,
        "user": USER,
    }


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def backend(session):
    return SupabaseBackend(URL, "anon-key", session=session)


@pytest.fixture
def session_path(tmp_path):
    return tmp_path / "session.json"


def test_sign_in_persists_session(backend, session, session_path):
    session.post.return_value = make_response(token_payload())
    auth = AuthSession(backend, str(session_path))

    user = auth.sign_in("sam@example.com", "secret")

    assert user.id == "user-1"
    assert session.post.call_args.args[0] == f"{URL}/auth/v1/token?grant_type=password"
    assert session.post.call_args.kwargs["json"] == {"email": "sam@example.com", "password": "secret"}
    assert backend.access_token == "access-1"

    stored = json.loads(session_path.read_text())
    assert stored["access_token"] == "access-1"
    assert stored["user"]["email"] == "sam@example.com"


def test_session_survives_new_instance(backend, session, session_path):
    session.post.return_value = make_response(token_payload())
    AuthSession(backend, str(session_path)).sign_in("sam@example.com", "secret")

    fresh_backend = SupabaseBackend(URL, "anon-key", session=session)
    user = AuthSession(fresh_backend, str(session_path)).current_user()

    assert user.email == "sam@example.com"
    assert fresh_backend.access_token == "access-1"


def test_bad_credentials_raise_auth_error(backend, session, session_path):
    session.post.return_value = make_response(
        {"error": "invalid_grant", "error_description": "Invalid login credentials"}, status=400
    )
    with pytest.raises(AuthError, match="Invalid login credentials"):
        AuthSession(backend, str(session_path)).sign_in("sam@example.com", "wrong")
    assert not session_path.exists()


def test_sign_up_creates_default_profile(backend, session, session_path):
    session.post.return_value = make_response(token_payload())
    profiles = mock.Mock()
    auth = AuthSession(backend, str(session_path), profiles=profiles)

    auth.sign_up("sam@example.com", "secret", name="Sam")

    body = session.post.call_args.kwargs["json"]
    assert session.post.call_args.args[0] == f"{URL}/auth/v1/signup"
    assert body["data"] == {"name": "Sam"}
    profile = profiles.save.call_args.args[0]
    assert profile.id == "user-1"
    assert profile.name == "Sam"
    assert profile.avatar_url.endswith("seed=sam@example.com")


def test_sign_up_survives_profile_failure(backend, session, session_path):
    session.post.return_value = make_response(token_payload())
    profiles = mock.Mock()
    profiles.save.side_effect = BackendError("permission denied")

    user = AuthSession(backend, str(session_path), profiles=profiles).sign_up("sam@example.com", "secret")

    assert user.id == "user-1"


def test_sign_up_pending_confirmation_has_no_session(backend, session, session_path):
    session.post.return_value = make_response(USER)

    user = AuthSession(backend, str(session_path)).sign_up("sam@example.com", "secret")

    assert user.email == "sam@example.com"
    assert not session_path.exists()


def test_sign_out_clears_session(backend, session, session_path):
    session.post.return_value = make_response(token_payload())
    auth = AuthSession(backend, str(session_path))
    auth.sign_in("sam@example.com", "secret")

    session.post.return_value = make_response(None, status=204)
    auth.sign_out()

    assert session.post.call_args.args[0] == f"{URL}/auth/v1/logout"
    assert not session_path.exists()
    assert backend.access_token is None
    assert auth.current_user() is None


def test_expired_session_is_refreshed(backend, session, session_path):
    session_path.write_text(json.dumps({
        "access_token": "old",
        "refresh_token": "refresh-1",
        "expires_at": int(time.time()) - 10,
        "user": USER,
    }))
    session.post.return_value = make_response(token_payload(access="access-2"))

    user = AuthSession(backend, str(session_path)).current_user()

    assert user.id == "user-1"
    assert session.post.call_args.args[0] == f"{URL}/auth/v1/token?grant_type=refresh_token"
    assert backend.access_token == "access-2"


def test_require_user_without_session(backend, session_path):
    with pytest.raises(AuthError):
        AuthSession(backend, str(session_path)).require_user()
