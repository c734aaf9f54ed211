"""Tests for the CV, cover letter and portfolio generators."""

import json
import random
from unittest import mock

import pytest
import requests

from career_assistant.ai.fallbacks import SAMPLE_PORTFOLIO
from career_assistant.core import CoverLetterRequest, CVData, PortfolioContent, PortfolioTemplate, Tone
from career_assistant.core.errors import CompletionError, ValidationError
from career_assistant.generators import CoverLetterWriter, CVGenerator, DocumentManager, PortfolioBuilder
from career_assistant.storage import PortfolioRepository


CV_INPUT = {
    "personalInfo": {"name": "Sam Lee", "email": "sam@example.com", "phone": "", "location": "Austin, TX"},
    "summary": "Backend engineer",
    "experience": [
        {"company": "Acme", "position": "Engineer", "duration": "2021 - Present",
         "description": "Built APIs", "achievements": ["Cut latency 40%"]},
    ],
    "education": [{"institution": "UT Austin", "degree": "BS CS", "year": "2020"}],
    "skills": {"technical": ["Python", "SQL"], "soft": ["Mentoring"]},
    "projects": [],
}


# CV generator

def test_cv_generate_uses_enhanced_reply(fake_client):
    enhanced = json.loads(json.dumps(CV_INPUT))
    enhanced["summary"] = "Results-driven backend engineer"
    client = fake_client(enhanced)

    cv = CVGenerator(client).generate(CVData.from_dict(CV_INPUT))

    assert cv.summary == "Results-driven backend engineer"
    assert client.calls[0]["max_tokens"] == 2000
    assert "Sam Lee" in client.last_user_message
    assert "ATS" in client.last_system_message


def test_cv_generate_keeps_original_on_unparseable_reply(fake_client):
    original = CVData.from_dict(CV_INPUT)
    cv = CVGenerator(fake_client("Sorry, I can't do that.")).generate(original)
    assert cv == original


def test_cv_generate_accepts_skills_as_string(fake_client):
    reply = {"personalInfo": {"name": "Sam Lee"}, "skills": "Python, SQL"}

    cv = CVGenerator(fake_client(reply)).generate(CVData.from_dict(CV_INPUT))

    assert cv.personal_info.name == "Sam Lee"
    assert cv.technical_skills == ["Python", "SQL"]


def test_cv_generate_propagates_completion_errors(failing_client):
    with pytest.raises(CompletionError):
        CVGenerator(failing_client).generate(CVData.from_dict(CV_INPUT))


def test_cv_render_formats(fake_client):
    generator = CVGenerator(fake_client())
    cv = CVData.from_dict(CV_INPUT)

    markdown = generator.render(cv)
    assert markdown.startswith("# Sam Lee")
    assert "- Cut latency 40%" in markdown
    assert "**Technical:** Python, SQL" in markdown

    text = generator.render(cv, "txt")
    assert "**" not in text
    assert text.startswith("Sam Lee")

    html = generator.render(cv, "html")
    assert "<h1>Sam Lee</h1>" in html


def test_cv_render_html_escapes_user_text(fake_client):
    data = json.loads(json.dumps(CV_INPUT))
    data["summary"] = "<script>alert(1)</script>"
    html = CVGenerator(fake_client()).render(CVData.from_dict(data), "html")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


# Cover letter writer

def test_cover_letter_prompt_includes_tone_and_job(fake_client):
    client = fake_client("Dear Hiring Manager, ...")
    request = CoverLetterRequest(
        company="Acme", position="Data Engineer", job_description="Spark, Airflow", tone=Tone.ENTHUSIASTIC
    )

    letter = CoverLetterWriter(client).generate(request)

    assert letter == "Dear Hiring Manager, ..."
    assert "enthusiastic tone" in client.last_system_message
    assert "Company: Acme" in client.last_user_message
    assert "Job Description: Spark, Airflow" in client.last_user_message


def test_cover_letter_requires_description_or_url(fake_client):
    client = fake_client()
    with pytest.raises(ValidationError):
        CoverLetterWriter(client).generate(CoverLetterRequest(company="Acme", position="Dev"))
    assert client.calls == []


def test_cover_letter_empty_reply_uses_template(fake_client):
    request = CoverLetterRequest(company="Acme", position="Dev", job_description="Python")
    letter = CoverLetterWriter(fake_client("")).generate(request, applicant_name="Sam Lee")
    assert letter.startswith("Dear Acme Hiring Manager")
    assert "the Dev position at Acme" in letter
    assert letter.endswith("Sam Lee")


def test_cover_letter_fetches_description_from_url(fake_client):
    session = mock.Mock(spec=requests.Session)
    response = mock.Mock()
    response.text = (
        "<html><head><script>var x = 1;</script></head>"
        "<body><nav>Menu</nav><h1>Data Engineer</h1><p>Build pipelines with Spark.</p></body></html>"
    )
    response.raise_for_status.return_value = None
    session.get.return_value = response
    client = fake_client("Letter")

    request = CoverLetterRequest(company="Acme", position="Data Engineer", job_url="https://jobs.example/1")
    CoverLetterWriter(client, session=session).generate(request)

    prompt = client.last_user_message
    assert "Build pipelines with Spark." in prompt
    assert "var x" not in prompt
    assert "Menu" not in prompt


def test_cover_letter_unreachable_url_still_generates(fake_client):
    session = mock.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("offline")
    client = fake_client("Letter")

    request = CoverLetterRequest(company="Acme", position="Dev", job_url="https://jobs.example/2")
    assert CoverLetterWriter(client, session=session).generate(request) == "Letter"
    assert "See job posting: https://jobs.example/2" in client.last_user_message


# Portfolio builder

def test_portfolio_generate_falls_back_to_sample(fake_client):
    content = PortfolioBuilder(fake_client("not json")).generate()
    assert content.name == SAMPLE_PORTFOLIO["name"]
    assert content.skills == SAMPLE_PORTFOLIO["skills"]


def test_portfolio_generate_accepts_contact_as_string(fake_client):
    client = fake_client({"name": "Jo", "contact": "jo@example.com", "projects": "several"})

    content = PortfolioBuilder(client).generate()

    assert content.contact["email"] == "jo@example.com"
    assert content.projects == []


def test_portfolio_generate_from_resume_file(fake_client, tmp_path):
    resume = tmp_path / "resume.txt"
    resume.write_text("Jane Doe\nPython developer", encoding="utf-8")
    client = fake_client({"name": "Jane Doe", "title": "Python Developer", "skills": ["Python"]})

    content = PortfolioBuilder(client).from_resume_file(str(resume))

    assert content.name == "Jane Doe"
    assert "Python developer" in client.last_user_message


def test_make_subdomain():
    subdomain = PortfolioBuilder.make_subdomain("Alex  Johnson", rng=random.Random(7))
    base, suffix = subdomain.rsplit("-", 1)
    assert base == "alexjohnson"
    assert len(suffix) == 5
    assert all(c in "0123456789abcdefghijklmnopqrstuvwxyz" for c in suffix)


def test_publish_creates_then_reuses_subdomain(fake_client, local_backend):
    builder = PortfolioBuilder(fake_client(), repository=PortfolioRepository(local_backend))
    content = PortfolioContent.from_dict(SAMPLE_PORTFOLIO)

    first = builder.publish("user-1", content, PortfolioTemplate.CLASSIC)
    assert first.is_published
    assert first.template == "classic"
    assert first.url == f"https://{first.subdomain}.portfolioai.app"
    assert first.subdomain.startswith("alexjohnson-")

    content.title = "Senior Frontend Developer"
    second = builder.publish("user-1", content)
    assert second.subdomain == first.subdomain
    assert second.content["title"] == "Senior Frontend Developer"
    assert len(local_backend.select("portfolios")) == 1


def test_publish_requires_name(fake_client, local_backend):
    builder = PortfolioBuilder(fake_client(), repository=PortfolioRepository(local_backend))
    with pytest.raises(ValidationError):
        builder.publish("user-1", PortfolioContent())


def test_export_html_escapes_and_applies_template(fake_client):
    content = PortfolioContent.from_dict(SAMPLE_PORTFOLIO)
    content.name = "Alex <b>Johnson</b>"

    html = PortfolioBuilder(fake_client()).export_html(content, PortfolioTemplate.CREATIVE)

    assert '<body class="template-creative">' in html
    assert "Alex &lt;b&gt;Johnson&lt;/b&gt;" in html
    assert "<b>Johnson</b>" not in html
    assert '<span class="skill-tag">React</span>' in html
    assert "E-commerce Dashboard" in html
    assert "University of Technology" in html


# Document manager

def test_document_manager_saves_into_kind_directory(tmp_path):
    manager = DocumentManager(str(tmp_path / "out"))

    path = manager.save("cover_letter", "Acme / Data Engineer", "Dear Acme", "txt")

    assert "cover_letters" in path
    assert path.endswith(".txt")
    assert "Acme_Data_Engineer" in path
    with open(path, encoding="utf-8") as f:
        assert f.read() == "Dear Acme"


def test_document_manager_writes_json(tmp_path):
    manager = DocumentManager(str(tmp_path))
    path = manager.save("analysis", "resume", {"matchScore": 75}, "json")
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"matchScore": 75}


def test_document_manager_rejects_unknown_kind(tmp_path):
    with pytest.raises(ValueError):
        DocumentManager(str(tmp_path)).save("memo", "x", "y")
