"""
Core data models for the career assistant.

Records persisted in the hosted backend (profiles, job alerts, portfolios)
use the backend's snake_case column names. Shapes produced by the completion
model (CVs, optimization results, interview feedback, skill gaps) keep the
camelCase keys the model is prompted to return.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional
import uuid


AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/initials/svg?seed={email}"


class QuestionType(Enum):
    """Kind of mock interview question."""
    BEHAVIORAL = "behavioral"
    TECHNICAL = "technical"
    SITUATIONAL = "situational"


class Tone(Enum):
    """Writing tone for cover letters."""
    PROFESSIONAL = "professional"
    ENTHUSIASTIC = "enthusiastic"
    CONVERSATIONAL = "conversational"
    FORMAL = "formal"


class PortfolioTemplate(Enum):
    """Visual template for exported portfolios."""
    MODERN = "modern"
    CLASSIC = "classic"
    CREATIVE = "creative"


def _parse_datetime(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        # PostgREST returns "...+00:00" or "...Z"
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return None


# Model replies are valid JSON of arbitrary shape; the helpers below coerce
# each field and fall back to the default rather than raise.

def _str_list(value) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None and not isinstance(v, (dict, list))]
    return []


def _text(value, default: str = "") -> str:
    if value is None or value == "" or isinstance(value, (dict, list)):
        return default
    return str(value)


def _mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def _records(value) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _int(value, default: int = 0) -> int:
    if isinstance(value, str):
        value = value.strip().rstrip("%")
    try:
        return int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return default


# ---------------------------------------------------------------------------
# Persisted records
# ---------------------------------------------------------------------------

@dataclass
class UserProfile:
    """A user's public profile (``profiles`` table)."""
    id: str
    email: str = ""
    name: str = ""
    title: str = ""
    summary: str = ""
    skills: list[str] = field(default_factory=list)
    avatar_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def default_for(cls, user_id: str, email: str, name: str = "") -> "UserProfile":
        """Profile used when the user has not saved one yet."""
        return cls(
            id=user_id,
            email=email,
            name=name or email.split("@")[0],
            avatar_url=AVATAR_URL_TEMPLATE.format(email=email),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        return cls(
            id=data.get("id", ""),
            email=data.get("email") or "",
            name=data.get("name") or "",
            title=data.get("title") or "",
            summary=data.get("summary") or "",
            skills=_str_list(data.get("skills")),
            avatar_url=data.get("avatar_url") or "",
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "title": self.title,
            "summary": self.summary,
            "skills": self.skills,
            "avatar_url": self.avatar_url,
        }
        if self.updated_at:
            data["updated_at"] = self.updated_at.isoformat()
        return data


@dataclass
class JobAlert:
    """Saved job search filters (``job_alerts`` table)."""
    title: str
    keywords: str
    location: str = ""
    experience_level: str = ""
    job_type: str = ""
    remote_filter: str = ""
    is_active: bool = True
    user_id: str = ""
    id: str = ""
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "JobAlert":
        return cls(
            id=data.get("id", ""),
            user_id=data.get("user_id", ""),
            title=data.get("title") or "",
            keywords=data.get("keywords") or "",
            location=data.get("location") or "",
            experience_level=data.get("experience_level") or "",
            job_type=data.get("job_type") or "",
            remote_filter=data.get("remote_filter") or "",
            is_active=bool(data.get("is_active", True)),
            created_at=_parse_datetime(data.get("created_at")),
        )

    def to_insert(self) -> dict:
        """Columns the client is allowed to set on insert."""
        return {
            "user_id": self.user_id,
            "title": self.title,
            "keywords": self.keywords,
            "location": self.location,
            "experience_level": self.experience_level,
            "job_type": self.job_type,
            "remote_filter": self.remote_filter,
            "is_active": self.is_active,
        }

    def to_dict(self) -> dict:
        data = self.to_insert()
        data["id"] = self.id
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data


@dataclass
class Portfolio:
    """A generated portfolio site (``portfolios`` table)."""
    user_id: str
    content: dict = field(default_factory=dict)
    template: str = PortfolioTemplate.MODERN.value
    subdomain: str = ""
    is_published: bool = False
    id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    PUBLIC_DOMAIN = "portfolioai.app"

    @property
    def url(self) -> str:
        if not self.subdomain:
            return ""
        return f"https://{self.subdomain}.{self.PUBLIC_DOMAIN}"

    @classmethod
    def from_dict(cls, data: dict) -> "Portfolio":
        return cls(
            id=data.get("id", ""),
            user_id=data.get("user_id", ""),
            content=data.get("content") or {},
            template=data.get("template") or PortfolioTemplate.MODERN.value,
            subdomain=data.get("subdomain") or "",
            is_published=bool(data.get("is_published", False)),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
        )

    def to_dict(self) -> dict:
        data = {
            "user_id": self.user_id,
            "content": self.content,
            "template": self.template,
            "subdomain": self.subdomain,
            "is_published": self.is_published,
        }
        if self.id:
            data["id"] = self.id
        if self.updated_at:
            data["updated_at"] = self.updated_at.isoformat()
        return data


# ---------------------------------------------------------------------------
# Form inputs and model results
# ---------------------------------------------------------------------------

@dataclass
class PortfolioProject:
    name: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)
    link: str = ""


@dataclass
class PortfolioExperience:
    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""


@dataclass
class PortfolioEducation:
    institution: str = ""
    degree: str = ""
    year: str = ""


@dataclass
class PortfolioContent:
    """Content blob rendered into a portfolio page."""
    name: str = ""
    title: str = ""
    summary: str = ""
    skills: list[str] = field(default_factory=list)
    projects: list[PortfolioProject] = field(default_factory=list)
    experience: list[PortfolioExperience] = field(default_factory=list)
    education: list[PortfolioEducation] = field(default_factory=list)
    contact: dict[str, str] = field(default_factory=lambda: {"email": "", "linkedin": "", "github": ""})

    @classmethod
    def from_dict(cls, data: dict) -> "PortfolioContent":
        contact = data.get("contact")
        if isinstance(contact, str):
            contact = {"email": contact}
        contact = _mapping(contact)
        return cls(
            name=_text(data.get("name")),
            title=_text(data.get("title")),
            summary=_text(data.get("summary")),
            skills=_str_list(data.get("skills")),
            projects=[
                PortfolioProject(
                    name=_text(p.get("name")),
                    description=_text(p.get("description")),
                    technologies=_str_list(p.get("technologies")),
                    link=_text(p.get("link")),
                )
                for p in _records(data.get("projects"))
            ],
            experience=[
                PortfolioExperience(
                    company=_text(e.get("company")),
                    role=_text(e.get("role")),
                    duration=_text(e.get("duration")),
                    description=_text(e.get("description")),
                )
                for e in _records(data.get("experience"))
            ],
            education=[
                PortfolioEducation(
                    institution=_text(e.get("institution")),
                    degree=_text(e.get("degree")),
                    year=_text(e.get("year")),
                )
                for e in _records(data.get("education"))
            ],
            contact={key: _text(contact.get(key)) for key in ("email", "linkedin", "github")},
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "summary": self.summary,
            "skills": self.skills,
            "projects": [p.__dict__.copy() for p in self.projects],
            "experience": [e.__dict__.copy() for e in self.experience],
            "education": [e.__dict__.copy() for e in self.education],
            "contact": dict(self.contact),
        }


@dataclass
class PersonalInfo:
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""


@dataclass
class CVExperience:
    company: str = ""
    position: str = ""
    duration: str = ""
    description: str = ""
    achievements: list[str] = field(default_factory=list)


@dataclass
class CVEducation:
    institution: str = ""
    degree: str = ""
    year: str = ""
    gpa: str = ""


@dataclass
class CVProject:
    name: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)


@dataclass
class CVData:
    """Everything the CV builder collects."""
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[CVExperience] = field(default_factory=list)
    education: list[CVEducation] = field(default_factory=list)
    technical_skills: list[str] = field(default_factory=list)
    soft_skills: list[str] = field(default_factory=list)
    projects: list[CVProject] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CVData":
        info = data.get("personalInfo") or data.get("personal_info")
        if isinstance(info, str):
            info = {"name": info}
        info = _mapping(info)
        skills = data.get("skills")
        if isinstance(skills, (str, list)):
            skills = {"technical": skills}
        skills = _mapping(skills)
        return cls(
            personal_info=PersonalInfo(
                name=_text(info.get("name")),
                email=_text(info.get("email")),
                phone=_text(info.get("phone")),
                location=_text(info.get("location")),
                linkedin=_text(info.get("linkedin")),
            ),
            summary=_text(data.get("summary")),
            experience=[
                CVExperience(
                    company=_text(e.get("company")),
                    position=_text(e.get("position")),
                    duration=_text(e.get("duration")),
                    description=_text(e.get("description")),
                    achievements=_str_list(e.get("achievements")),
                )
                for e in _records(data.get("experience"))
            ],
            education=[
                CVEducation(
                    institution=_text(e.get("institution")),
                    degree=_text(e.get("degree")),
                    year=_text(e.get("year")),
                    gpa=_text(e.get("gpa")),
                )
                for e in _records(data.get("education"))
            ],
            technical_skills=_str_list(skills.get("technical")),
            soft_skills=_str_list(skills.get("soft")),
            projects=[
                CVProject(
                    name=_text(p.get("name")),
                    description=_text(p.get("description")),
                    technologies=_str_list(p.get("technologies")),
                )
                for p in _records(data.get("projects"))
            ],
        )

    def to_dict(self) -> dict:
        return {
            "personalInfo": self.personal_info.__dict__.copy(),
            "summary": self.summary,
            "experience": [e.__dict__.copy() for e in self.experience],
            "education": [e.__dict__.copy() for e in self.education],
            "skills": {
                "technical": self.technical_skills,
                "soft": self.soft_skills,
            },
            "projects": [p.__dict__.copy() for p in self.projects],
        }


@dataclass
class CoverLetterRequest:
    """Inputs of the cover letter writer."""
    company: str
    position: str
    job_description: str = ""
    job_url: str = ""
    tone: Tone = Tone.PROFESSIONAL


@dataclass
class Suggestion:
    section: str = ""
    current: str = ""
    suggested: str = ""
    impact: str = "medium"


@dataclass
class Improvement:
    category: str = ""
    items: list[str] = field(default_factory=list)


@dataclass
class OptimizationResult:
    """Resume-vs-job analysis returned by the optimizer."""
    match_score: int = 0  # 0-100
    missing_keywords: list[str] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    strength_keywords: list[str] = field(default_factory=list)
    improvements: list[Improvement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "OptimizationResult":
        return cls(
            match_score=max(0, min(100, _int(data.get("matchScore")))),
            missing_keywords=_str_list(data.get("missingKeywords")),
            suggestions=[
                Suggestion(
                    section=_text(s.get("section")),
                    current=_text(s.get("current")),
                    suggested=_text(s.get("suggested")),
                    impact=_text(s.get("impact"), "medium").lower(),
                )
                for s in _records(data.get("suggestions"))
            ],
            strength_keywords=_str_list(data.get("strengthKeywords")),
            improvements=[
                Improvement(category=_text(i.get("category")), items=_str_list(i.get("items")))
                for i in _records(data.get("improvements"))
            ],
        )

    def to_dict(self) -> dict:
        return {
            "matchScore": self.match_score,
            "missingKeywords": self.missing_keywords,
            "suggestions": [s.__dict__.copy() for s in self.suggestions],
            "strengthKeywords": self.strength_keywords,
            "improvements": [i.__dict__.copy() for i in self.improvements],
        }


@dataclass
class InterviewQuestion:
    id: int
    question: str
    type: QuestionType = QuestionType.BEHAVIORAL
    expected_duration: int = 120  # seconds

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "InterviewQuestion":
        try:
            qtype = QuestionType(_text(data.get("type"), "behavioral").lower())
        except ValueError:
            qtype = QuestionType.BEHAVIORAL
        return cls(
            id=_int(data.get("id"), index + 1),
            question=_text(data.get("question")),
            type=qtype,
            expected_duration=_int(data.get("expectedDuration"), 120),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "type": self.type.value,
            "expectedDuration": self.expected_duration,
        }


@dataclass
class InterviewResponse:
    question: str
    response: str
    duration: int  # seconds

    def to_dict(self) -> dict:
        return {"question": self.question, "response": self.response, "duration": self.duration}


@dataclass
class InterviewSession:
    """State of one mock interview."""
    role: str
    questions: list[InterviewQuestion] = field(default_factory=list)
    current_question_index: int = 0
    responses: list[InterviewResponse] = field(default_factory=list)
    is_active: bool = True
    start_time: datetime = field(default_factory=datetime.now)
    question_started_at: datetime = field(default_factory=datetime.now)

    @property
    def current_question(self) -> Optional[InterviewQuestion]:
        if not self.is_active or self.current_question_index >= len(self.questions):
            return None
        return self.questions[self.current_question_index]

    @property
    def progress(self) -> float:
        if not self.questions:
            return 0.0
        return len(self.responses) / len(self.questions) * 100


@dataclass
class QuestionFeedback:
    question: str = ""
    score: int = 0
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)


@dataclass
class PerformanceAnalysis:
    """Interview feedback returned by the model."""
    overall_score: int = 0
    communication_score: int = 0
    confidence_score: int = 0
    content_score: int = 0
    feedback: list[QuestionFeedback] = field(default_factory=list)
    tips: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "PerformanceAnalysis":
        return cls(
            overall_score=_int(data.get("overallScore")),
            communication_score=_int(data.get("communicationScore")),
            confidence_score=_int(data.get("confidenceScore")),
            content_score=_int(data.get("contentScore")),
            feedback=[
                QuestionFeedback(
                    question=_text(f.get("question")),
                    score=_int(f.get("score")),
                    strengths=_str_list(f.get("strengths")),
                    improvements=_str_list(f.get("improvements")),
                )
                for f in _records(data.get("feedback"))
            ],
            tips=_str_list(data.get("tips")),
        )

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score,
            "communicationScore": self.communication_score,
            "confidenceScore": self.confidence_score,
            "contentScore": self.content_score,
            "feedback": [f.__dict__.copy() for f in self.feedback],
            "tips": self.tips,
        }


@dataclass
class MissingSkill:
    skill: str = ""
    importance: str = "important"  # critical, important, nice-to-have
    time_to_learn: str = ""
    resources: list[str] = field(default_factory=list)


@dataclass
class LearningPhase:
    phase: str = ""
    duration: str = ""
    skills: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "LearningPhase":
        return cls(
            phase=_text(data.get("phase")),
            duration=_text(data.get("duration")),
            skills=_str_list(data.get("skills")),
            projects=_str_list(data.get("projects")),
        )


@dataclass
class SkillGapAnalysis:
    current_skills: list[str] = field(default_factory=list)
    target_role: str = ""
    missing_skills: list[MissingSkill] = field(default_factory=list)
    strength_areas: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    learning_path: list[LearningPhase] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "SkillGapAnalysis":
        return cls(
            current_skills=_str_list(data.get("currentSkills")),
            target_role=_text(data.get("targetRole")),
            missing_skills=[
                MissingSkill(
                    skill=_text(m.get("skill")),
                    importance=_text(m.get("importance"), "important"),
                    time_to_learn=_text(m.get("timeToLearn")),
                    resources=_str_list(m.get("resources")),
                )
                for m in _records(data.get("missingSkills"))
            ],
            strength_areas=_str_list(data.get("strengthAreas")),
            recommendations=_str_list(data.get("recommendations")),
            learning_path=[LearningPhase.from_dict(p) for p in _records(data.get("learningPath"))],
        )

    def to_dict(self) -> dict:
        return {
            "currentSkills": self.current_skills,
            "targetRole": self.target_role,
            "missingSkills": [
                {
                    "skill": m.skill,
                    "importance": m.importance,
                    "timeToLearn": m.time_to_learn,
                    "resources": m.resources,
                }
                for m in self.missing_skills
            ],
            "strengthAreas": self.strength_areas,
            "recommendations": self.recommendations,
            "learningPath": [p.__dict__.copy() for p in self.learning_path],
        }


@dataclass
class JobListing:
    """A (sample) job search result."""
    position: str
    company: str
    location: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    company_logo: str = ""
    date: str = ""
    ago_time: str = ""
    salary: str = ""
    job_url: str = ""
    source: str = ""
    job_type: str = ""
    description: str = ""
    match_score: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "position": self.position,
            "company": self.company,
            "company_logo": self.company_logo,
            "location": self.location,
            "date": self.date,
            "ago_time": self.ago_time,
            "salary": self.salary,
            "job_url": self.job_url,
            "source": self.source,
            "job_type": self.job_type,
            "description": self.description,
            "match_score": self.match_score,
        }


@dataclass
class ChatMessage:
    content: str
    is_user: bool
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "is_user": self.is_user,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class Notification:
    """User-visible outcome of a form action."""
    title: str
    description: str = ""
    variant: str = "default"  # default, destructive

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


@dataclass
class AuthUser:
    """The signed-in user as reported by the hosted backend."""
    id: str
    email: str
    metadata: dict[str, Any] = field(default_factory=dict)
