"""
Resume Optimizer - Scores a resume against a job description.

The match score, keywords and suggestions all come from the completion
model. When its reply is not usable JSON a sample analysis is shown.
"""

import logging

from career_assistant.ai.completion import CompletionClient, build_messages
from career_assistant.ai.fallbacks import SAMPLE_OPTIMIZATION
from career_assistant.ai.parsing import parse_json_response
from career_assistant.core.errors import ValidationError
from career_assistant.core.models import OptimizationResult
from career_assistant.core.resume_reader import ResumeReader


SYSTEM_PROMPT = (
    "You are a resume optimization expert. Analyze the resume against the job description and "
    "provide detailed feedback including match score (0-100), missing keywords, specific "
    "suggestions for improvement, and actionable recommendations. Return structured JSON data "
    "with keys: matchScore, missingKeywords, suggestions (section, current, suggested, impact), "
    "strengthKeywords, improvements (category, items)."
)


class ResumeOptimizer:
    """Analyzes resumes against job descriptions."""

    MAX_TOKENS = 3000

    def __init__(self, client: CompletionClient):
        self.client = client
        self.reader = ResumeReader()
        self.logger = logging.getLogger(self.__class__.__name__)

    def optimize(self, job_description: str, resume_text: str) -> OptimizationResult:
        """
        Analyze a resume against a job description.

        Args:
            job_description: Target job posting text
            resume_text: Resume content

        Returns:
            OptimizationResult (sample analysis if the reply can't be parsed)
        """
        if not job_description.strip() or not resume_text.strip():
            raise ValidationError("Please provide both job description and resume content.")

        messages = build_messages(
            SYSTEM_PROMPT,
            f"Job Description: {job_description}\n\n"
            f"Resume: {resume_text}\n\n"
            f"Provide optimization analysis.",
        )
        reply = self.client.complete(messages, max_tokens=self.MAX_TOKENS)
        data = parse_json_response(reply, fallback=SAMPLE_OPTIMIZATION, context="resume optimization")

        result = OptimizationResult.from_dict(data)
        self.logger.info(f"Resume match score: {result.match_score}%")
        return result

    def optimize_file(self, job_description: str, resume_path: str) -> OptimizationResult:
        """Analyze an uploaded resume file."""
        return self.optimize(job_description, self.reader.read(resume_path))
