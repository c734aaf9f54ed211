"""Tests for the local backend and the owner-scoped repositories."""

import pytest

from career_assistant.core import AuthUser, JobAlert, Portfolio
from career_assistant.core.errors import RecordNotFoundError, ValidationError
from career_assistant.storage import (
    JobAlertRepository,
    LocalBackend,
    PortfolioRepository,
    ProfileRepository,
    check_schema,
)


ALICE = AuthUser(id="alice-id", email="alice@example.com")
BOB = AuthUser(id="bob-id", email="bob@example.com")


# Local backend

def test_local_backend_crud(local_backend):
    row = local_backend.insert("job_alerts", {"user_id": "u1", "title": "A"})
    assert row["id"]
    assert row["created_at"]

    assert local_backend.select("job_alerts", {"user_id": "u1"}) == [row]
    assert local_backend.select("job_alerts", {"user_id": "u2"}) == []

    updated = local_backend.update("job_alerts", {"title": "B"}, {"id": row["id"]})
    assert updated[0]["title"] == "B"

    assert local_backend.delete("job_alerts", {"id": row["id"]}) == 1
    assert local_backend.select("job_alerts") == []


def test_local_backend_persists_between_instances(tmp_path):
    LocalBackend(str(tmp_path)).insert("profiles", {"id": "p1", "name": "Ann"})
    assert LocalBackend(str(tmp_path)).select_one("profiles", {"id": "p1"})["name"] == "Ann"


def test_local_backend_upsert_merges_on_conflict_column(local_backend):
    local_backend.upsert("portfolios", {"user_id": "u1", "template": "modern"}, on_conflict="user_id")
    local_backend.upsert("portfolios", {"user_id": "u1", "template": "classic"}, on_conflict="user_id")

    rows = local_backend.select("portfolios")
    assert len(rows) == 1
    assert rows[0]["template"] == "classic"


def test_local_backend_orders_and_limits(local_backend):
    for i, stamp in enumerate(["2024-01-02", "2024-01-03", "2024-01-01"]):
        local_backend.insert("job_alerts", {"title": str(i), "created_at": stamp})

    rows = local_backend.select("job_alerts", order="created_at", desc=True, limit=2)
    assert [r["title"] for r in rows] == ["1", "0"]


def test_check_schema_on_local_backend(local_backend):
    assert check_schema(local_backend) == []


# Profiles

def test_profile_defaults_from_email(local_backend):
    profile = ProfileRepository(local_backend).get(ALICE)

    assert profile.id == "alice-id"
    assert profile.name == "alice"
    assert profile.avatar_url == "https://api.dicebear.com/7.x/initials/svg?seed=alice@example.com"
    assert profile.skills == []


def test_profile_save_and_reload(local_backend):
    repository = ProfileRepository(local_backend)
    profile = repository.get(ALICE)
    profile.title = "Data Engineer"
    repository.add_skill(profile, "Python")

    saved = repository.save(profile)

    assert saved.updated_at is not None
    reloaded = repository.get(ALICE)
    assert reloaded.title == "Data Engineer"
    assert reloaded.skills == ["Python"]
    assert repository.get(BOB).title == ""


def test_profile_skill_editing_ignores_blank_and_duplicates(local_backend):
    repository = ProfileRepository(local_backend)
    profile = repository.get(ALICE)

    assert repository.add_skill(profile, " SQL ")
    assert not repository.add_skill(profile, "SQL")
    assert not repository.add_skill(profile, "   ")
    assert profile.skills == ["SQL"]

    assert repository.remove_skill(profile, "SQL")
    assert not repository.remove_skill(profile, "SQL")
    assert profile.skills == []


# Job alerts

def make_alert(title="React jobs", keywords="React"):
    return JobAlert(title=title, keywords=keywords, location="Remote", job_type="full-time")


def test_create_alert_sets_owner_and_active(local_backend):
    alert = make_alert()
    alert.is_active = False

    created = JobAlertRepository(local_backend).create(ALICE.id, alert)

    assert created.id
    assert created.user_id == ALICE.id
    assert created.is_active
    assert created.location == "Remote"


@pytest.mark.parametrize("title, keywords", [("", "React"), ("React jobs", "  ")])
def test_create_alert_requires_title_and_keywords(local_backend, title, keywords):
    with pytest.raises(ValidationError):
        JobAlertRepository(local_backend).create(ALICE.id, make_alert(title, keywords))


def test_list_alerts_newest_first_and_owner_scoped(local_backend):
    local_backend.insert("job_alerts", {**make_alert("old").to_insert(), "user_id": ALICE.id,
                                        "created_at": "2024-01-01T00:00:00+00:00"})
    local_backend.insert("job_alerts", {**make_alert("new").to_insert(), "user_id": ALICE.id,
                                        "created_at": "2024-06-01T00:00:00+00:00"})
    local_backend.insert("job_alerts", {**make_alert("bob's").to_insert(), "user_id": BOB.id,
                                        "created_at": "2024-03-01T00:00:00+00:00"})

    alerts = JobAlertRepository(local_backend).list(ALICE.id)

    assert [a.title for a in alerts] == ["new", "old"]


def test_toggle_and_delete_alert(local_backend):
    repository = JobAlertRepository(local_backend)
    alert = repository.create(ALICE.id, make_alert())

    paused = repository.toggle(ALICE.id, alert.id, False)
    assert not paused.is_active
    assert not repository.list(ALICE.id)[0].is_active

    repository.delete(ALICE.id, alert.id)
    assert repository.list(ALICE.id) == []


def test_other_users_cannot_touch_alert(local_backend):
    repository = JobAlertRepository(local_backend)
    alert = repository.create(ALICE.id, make_alert())

    with pytest.raises(RecordNotFoundError):
        repository.toggle(BOB.id, alert.id, False)
    with pytest.raises(RecordNotFoundError):
        repository.delete(BOB.id, alert.id)

    assert repository.list(ALICE.id)[0].is_active


# Portfolios

def test_portfolio_save_get_publish_delete(local_backend):
    repository = PortfolioRepository(local_backend)
    assert repository.get(ALICE.id) is None

    saved = repository.save(Portfolio(user_id=ALICE.id, content={"name": "Alice"}))
    assert not saved.is_published
    assert repository.get(BOB.id) is None

    published = repository.publish(ALICE.id, "alice-ab12c")
    assert published.is_published
    assert published.url == "https://alice-ab12c.portfolioai.app"

    with pytest.raises(RecordNotFoundError):
        repository.delete(BOB.id, saved.id)
    repository.delete(ALICE.id, saved.id)
    assert repository.get(ALICE.id) is None


def test_publish_without_portfolio_raises(local_backend):
    with pytest.raises(RecordNotFoundError):
        PortfolioRepository(local_backend).publish(ALICE.id, "alice-xxxxx")
