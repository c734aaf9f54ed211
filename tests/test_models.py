"""Tests for building models from loosely shaped model replies."""

import pytest

from career_assistant.core import CVData, OptimizationResult, PortfolioContent
from career_assistant.core.models import PerformanceAnalysis, SkillGapAnalysis, _int, _str_list


def test_cv_skills_given_as_string():
    cv = CVData.from_dict({"personalInfo": {"name": "Sam"}, "skills": "Python, SQL"})
    assert cv.technical_skills == ["Python", "SQL"]
    assert cv.soft_skills == []


def test_cv_personal_info_given_as_string():
    cv = CVData.from_dict({"personalInfo": "Sam", "summary": None})
    assert cv.personal_info.name == "Sam"
    assert cv.personal_info.email == ""
    assert cv.summary == ""


def test_cv_nested_values_of_wrong_type():
    cv = CVData.from_dict({
        "personalInfo": {"name": None, "email": ["a@b.c"]},
        "experience": "Acme, 2020",
        "education": [{"institution": "MIT", "year": 2019, "gpa": None}, "BS CS"],
        "skills": {"technical": 3, "soft": ["Mentoring", None]},
        "projects": {"name": "CLI"},
    })
    assert cv.personal_info.name == ""
    assert cv.personal_info.email == ""
    assert cv.experience == []
    assert len(cv.education) == 1
    assert cv.education[0].year == "2019"
    assert cv.education[0].gpa == ""
    assert cv.technical_skills == []
    assert cv.soft_skills == ["Mentoring"]
    assert cv.projects == []


def test_portfolio_contact_given_as_string():
    content = PortfolioContent.from_dict({"name": "Jo", "contact": "jo@example.com"})
    assert content.contact == {"email": "jo@example.com", "linkedin": "", "github": ""}


def test_portfolio_contact_of_wrong_type():
    content = PortfolioContent.from_dict({"name": "Jo", "contact": ["jo@example.com"], "projects": None})
    assert content.contact == {"email": "", "linkedin": "", "github": ""}
    assert content.projects == []


def test_suggestion_null_impact_defaults_to_medium():
    result = OptimizationResult.from_dict({
        "matchScore": 70,
        "suggestions": [
            {"section": "Skills", "suggested": "Add Go", "impact": None},
            {"section": "Summary", "suggested": "Be concise", "impact": "HIGH", "current": None},
        ],
    })
    assert result.suggestions[0].impact == "medium"
    assert result.suggestions[1].impact == "high"
    assert result.suggestions[1].current == ""


def test_scalar_where_list_expected():
    analysis = PerformanceAnalysis.from_dict({"overallScore": "85%", "tips": 3, "feedback": "good"})
    assert analysis.tips == []
    assert analysis.feedback == []
    assert analysis.overall_score == 85


def test_skill_gap_analysis_tolerates_bad_shapes():
    analysis = SkillGapAnalysis.from_dict({
        "targetRole": {"name": "Data Scientist"},
        "missingSkills": [{"skill": "Statistics", "importance": None}, "SQL"],
        "learningPath": {"phase": "Foundation"},
        "recommendations": "Take a course",
    })
    assert analysis.target_role == ""
    assert len(analysis.missing_skills) == 1
    assert analysis.missing_skills[0].importance == "important"
    assert analysis.learning_path == []
    assert analysis.recommendations == ["Take a course"]


@pytest.mark.parametrize("value, expected", [
    ("85%", 85),
    (" 72 % ", 72),
    ("91.6", 92),
    (64, 64),
    ("n/a", 0),
    (None, 0),
    (float("inf"), 0),
])
def test_int_coercion(value, expected):
    assert _int(value) == expected


def test_match_score_with_percent_sign_is_clamped():
    assert OptimizationResult.from_dict({"matchScore": "120%"}).match_score == 100
    assert OptimizationResult.from_dict({"matchScore": "78%"}).match_score == 78


@pytest.mark.parametrize("value, expected", [
    ("a, b,,c", ["a", "b", "c"]),
    (["a", 2, None], ["a", "2"]),
    (3, []),
    ({"a": 1}, []),
    (None, []),
])
def test_str_list_coercion(value, expected):
    assert _str_list(value) == expected
