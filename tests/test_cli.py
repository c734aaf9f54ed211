"""Tests for CLI dispatch."""

import json

import pytest

from career_assistant import cli
from career_assistant.core.errors import CompletionError


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for var in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "CAREER_ASSISTANT_AI_PROVIDER"):
        monkeypatch.delenv(var, raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "backend": {"type": "local", "data_dir": str(tmp_path / "data")},
        "generation": {"output_dir": str(tmp_path / "out")},
    }))
    return str(path)


@pytest.fixture
def use_client(monkeypatch, fake_client):
    def install(*replies):
        client = fake_client(*replies)
        monkeypatch.setattr(cli, "get_completion_client", lambda config: client)
        return client
    return install


def run(config_file, *args):
    cli.main(["--config", config_file, *args])


def test_no_command_prints_help_and_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 1
    assert "Available commands" in capsys.readouterr().out


def test_jobs_command_lists_results(config_file, capsys):
    run(config_file, "jobs", "--keywords", "Python", "--sources", "linkedin")
    output = capsys.readouterr().out
    assert "Senior Python" in output
    assert "Jobs Found!: Found 3 matching positions." in output


def test_optimize_command_prints_score(config_file, use_client, tmp_path, capsys):
    resume = tmp_path / "resume.txt"
    resume.write_text("Python developer", encoding="utf-8")
    use_client({"matchScore": 66, "missingKeywords": ["Go"]})

    run(config_file, "optimize", "--job", "Go developer", "--resume", str(resume))

    output = capsys.readouterr().out
    assert "Match Score: 66%" in output
    assert "Missing Keywords: Go" in output


def test_failed_request_prints_notification(config_file, use_client, capsys):
    use_client(CompletionError())

    run(config_file, "coach", "advice", "How do I switch careers?")

    output = capsys.readouterr().out
    assert "❌ Error: AI service unavailable" in output


def test_cover_letter_saved_to_output_dir(config_file, use_client, tmp_path, capsys):
    use_client("Dear Acme team")

    run(config_file, "cover-letter", "--company", "Acme", "--position", "Dev",
        "--description", "Python", "--save")

    saved = list((tmp_path / "out" / "cover_letters").iterdir())
    assert len(saved) == 1
    assert saved[0].read_text(encoding="utf-8") == "Dear Acme team"


def test_alerts_lifecycle_on_local_backend(config_file, capsys):
    run(config_file, "alerts", "create", "--title", "Remote React", "--keywords", "React",
        "--remote", "remote")
    assert "Job Alert Created!" in capsys.readouterr().out

    run(config_file, "alerts", "list")
    output = capsys.readouterr().out
    assert "Remote React [active]" in output
    alert_id = output.split("ID: ")[1].split()[0]

    run(config_file, "alerts", "pause", alert_id)
    run(config_file, "alerts", "list")
    assert "Remote React [paused]" in capsys.readouterr().out

    run(config_file, "alerts", "delete", alert_id)
    run(config_file, "alerts", "list")
    assert "No job alerts yet" in capsys.readouterr().out


def test_profile_edit_on_local_backend(config_file, capsys):
    run(config_file, "profile", "--title", "Data Engineer", "--add-skill", "SQL", "--add-skill", "SQL")
    output = capsys.readouterr().out
    assert "Profile updated successfully!" in output
    assert "Title: Data Engineer" in output
    assert "Skills: SQL" in output


def test_portfolio_export_and_publish(config_file, use_client, tmp_path, capsys):
    use_client("not json")
    export = tmp_path / "portfolio.html"

    run(config_file, "portfolio", "--template", "classic", "--export", str(export), "--publish")

    output = capsys.readouterr().out
    assert "Alex Johnson" in output
    assert "Your portfolio is live at https://alexjohnson-" in output
    assert 'class="template-classic"' in export.read_text(encoding="utf-8")


def test_db_check_on_local_backend(config_file, capsys):
    run(config_file, "db", "--check")
    assert "All tables are set up" in capsys.readouterr().out


def test_db_schema_prints_sql(config_file, capsys):
    run(config_file, "db", "--schema")
    assert "create table if not exists public.job_alerts" in capsys.readouterr().out


def test_config_set_parses_json_values(config_file, capsys):
    run(config_file, "config", "--set", "ai.timeout", "30")
    with open(config_file) as f:
        assert json.load(f)["ai"]["timeout"] == 30


def test_unhandled_error_exits_with_status_1(config_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run(config_file, "cv", "--input", "does-not-exist.json", "--no-ai")
    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_optimize_command_with_null_impact(config_file, use_client, tmp_path, capsys):
    resume = tmp_path / "resume.txt"
    resume.write_text("Python developer", encoding="utf-8")
    use_client({"matchScore": 70, "suggestions": [{"section": "Skills", "suggested": "Add Go", "impact": None}]})

    run(config_file, "optimize", "--job", "Go developer", "--resume", str(resume))

    assert "[MEDIUM] Skills" in capsys.readouterr().out


def test_coach_gaps_requires_skills(config_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run(config_file, "coach", "gaps", "--target-role", "Data Scientist")
    assert exc_info.value.code == 2


def test_coach_gaps_saved_analysis_feeds_advice(config_file, use_client, tmp_path, capsys):
    client = use_client("not json", "Start with statistics.")

    run(config_file, "coach", "gaps", "--target-role", "Data Scientist", "--skills", "Python", "--save")
    saved = next((tmp_path / "out" / "analyses").iterdir())
    run(config_file, "coach", "advice", "What should I learn first?", "--context-file", str(saved))

    output = capsys.readouterr().out
    assert "Start with statistics." in output
    assert '"targetRole": "Data Scientist"' in client.last_user_message
