"""
Sample payloads shown when a model reply cannot be parsed.
"""

from typing import Optional


SAMPLE_PORTFOLIO = {
    "name": "Alex Johnson",
    "title": "Frontend Developer",
    "summary": (
        "Passionate frontend developer with experience in modern web technologies. "
        "Skilled in React, TypeScript, and creating responsive user interfaces."
    ),
    "skills": ["JavaScript", "React", "TypeScript", "HTML/CSS", "Node.js", "Git"],
    "projects": [
        {
            "name": "E-commerce Dashboard",
            "description": "Built a responsive admin dashboard for an e-commerce platform using React and TypeScript.",
            "technologies": ["React", "TypeScript", "Material-UI"],
            "link": "https://github.com/alexjohnson/ecommerce-dashboard",
        }
    ],
    "experience": [
        {
            "company": "Tech Startup Inc.",
            "role": "Junior Frontend Developer",
            "duration": "2023 - Present",
            "description": "Developed user interfaces for web applications using React and modern CSS frameworks.",
        }
    ],
    "education": [
        {
            "institution": "University of Technology",
            "degree": "Bachelor of Computer Science",
            "year": "2023",
        }
    ],
    "contact": {
        "email": "alex.johnson@email.com",
        "linkedin": "linkedin.com/in/alexjohnson",
        "github": "github.com/alexjohnson",
    },
}

SAMPLE_OPTIMIZATION = {
    "matchScore": 75,
    "missingKeywords": ["React", "TypeScript", "AWS", "Agile"],
    "suggestions": [
        {
            "section": "Skills",
            "current": "JavaScript, HTML, CSS",
            "suggested": "JavaScript, React, TypeScript, HTML/CSS, AWS",
            "impact": "high",
        }
    ],
    "strengthKeywords": ["JavaScript", "Frontend", "UI/UX"],
    "improvements": [
        {
            "category": "Technical Skills",
            "items": [
                "Add React framework experience",
                "Include TypeScript proficiency",
                "Mention cloud platforms (AWS/Azure)",
            ],
        }
    ],
}

SAMPLE_INTERVIEW_QUESTIONS = [
    {
        "id": 1,
        "question": "Tell me about yourself and your background in this field.",
        "type": "behavioral",
        "expectedDuration": 120,
    },
    {
        "id": 2,
        "question": "Describe a challenging project you worked on. How did you overcome the obstacles?",
        "type": "behavioral",
        "expectedDuration": 180,
    },
    {
        "id": 3,
        "question": "What technologies are you most comfortable working with?",
        "type": "technical",
        "expectedDuration": 90,
    },
]

SAMPLE_LEARNING_PATH = [
    {
        "phase": "Foundation",
        "duration": "1-2 months",
        "skills": ["Core technologies"],
        "projects": ["Basic projects"],
    }
]

DEFAULT_ADVICE = (
    "I'd be happy to help with your career question. "
    "Could you provide more specific details about your situation?"
)


def sample_performance_analysis(responses: list[dict]) -> dict:
    """Interview feedback sample keyed to the first answered question."""
    first_question = responses[0].get("question") if responses else None
    return {
        "overallScore": 78,
        "communicationScore": 82,
        "confidenceScore": 75,
        "contentScore": 80,
        "feedback": [
            {
                "question": first_question or "Sample question",
                "score": 78,
                "strengths": ["Clear communication", "Specific examples"],
                "improvements": ["Add more quantifiable results", "Structure response better"],
            }
        ],
        "tips": [
            "Practice the STAR method for behavioral questions",
            "Include more specific metrics and achievements",
            "Work on confident body language and voice projection",
        ],
    }


def sample_skill_gap_analysis(skills: list[str], target_role: str) -> dict:
    return {
        "currentSkills": list(skills),
        "targetRole": target_role,
        "missingSkills": [
            {
                "skill": "React",
                "importance": "critical",
                "timeToLearn": "2-3 months",
                "resources": [
                    "Official React documentation",
                    "React courses on platforms like Udemy",
                    "Build practice projects",
                ],
            }
        ],
        "strengthAreas": ["Communication", "Problem-solving"],
        "recommendations": [
            "Focus on frontend frameworks",
            "Build a portfolio of projects",
            "Practice coding interviews",
        ],
        "learningPath": [
            {
                "phase": "Foundation Building",
                "duration": "1-2 months",
                "skills": ["JavaScript ES6+", "HTML/CSS", "Git"],
                "projects": ["Personal website", "To-do app", "Weather app"],
            }
        ],
    }


def template_cover_letter(company: str, position: str, name: Optional[str] = None) -> str:
    return (
        f"Dear {company} Hiring Manager,\n\n"
        f"I am writing to express my strong interest in the {position} position at {company}.\n\n"
        "Based on the job description, I believe my skills and experience align well "
        "with your requirements...\n\n"
        "Sincerely,\n"
        f"{name or '[Your Name]'}"
    )
