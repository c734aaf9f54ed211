"""
Cover Letter Writer - Creates cover letters for specific job postings.

The writer sends the company, position, job description and tone to the
completion model and returns the letter text as-is. An empty reply falls
back to a short template letter.
"""

from typing import Optional
import logging
import re

from bs4 import BeautifulSoup
import requests

from career_assistant.ai.completion import CompletionClient, build_messages
from career_assistant.ai.fallbacks import template_cover_letter
from career_assistant.core.errors import ValidationError
from career_assistant.core.models import CoverLetterRequest

MAX_DESCRIPTION_CHARS = 6000


class CoverLetterWriter:
    """Writes customized cover letters with the completion model."""

    MAX_TOKENS = 2000

    def __init__(self, client: CompletionClient, session: Optional[requests.Session] = None):
        """
        Initialize the cover letter writer.

        Args:
            client: Completion client
            session: HTTP session used to fetch job postings by URL
        """
        self.client = client
        self.session = session or requests.Session()
        self.logger = logging.getLogger(self.__class__.__name__)

    def generate(self, request: CoverLetterRequest, applicant_name: Optional[str] = None) -> str:
        """
        Generate a cover letter.

        Args:
            request: Company, position, job description/URL and tone
            applicant_name: Used to sign the template letter

        Returns:
            Cover letter text
        """
        description = request.job_description.strip()
        if not description and not request.job_url:
            raise ValidationError("Please provide either a job description or job URL.")

        if not description:
            description = self.fetch_job_description(request.job_url) or f"See job posting: {request.job_url}"

        tone = request.tone.value
        messages = build_messages(
            f"You are an expert cover letter writer. Write a compelling, personalized cover letter "
            f"based on the job description and requirements. Use a {tone} tone. Make it specific "
            f"to the role and company. Include relevant skills and experiences.",
            f"Write a cover letter for:\n"
            f"Company: {request.company}\n"
            f"Position: {request.position}\n"
            f"Job Description: {description}\n"
            f"Tone: {tone}",
        )

        letter = self.client.complete(messages, max_tokens=self.MAX_TOKENS).strip()

        if not letter:
            self.logger.warning("Empty cover letter reply, using template")
            return template_cover_letter(request.company, request.position, applicant_name)

        self.logger.info(f"Generated cover letter for {request.position} at {request.company}")
        return letter

    def fetch_job_description(self, url: str) -> str:
        """
        Download a job posting and return its visible text.

        Failures are logged and yield an empty string so the user can paste
        the description instead.
        """
        headers = {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
        }
        try:
            response = self.session.get(url, headers=headers, timeout=30)
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.warning(f"Could not fetch job posting {url}: {e}")
            return ""

        soup = BeautifulSoup(response.text, "html.parser")
        for tag in soup(["script", "style", "nav", "header", "footer", "noscript"]):
            tag.decompose()

        text = soup.get_text(separator="\n")
        text = re.sub(r"\n\s*\n+", "\n\n", text).strip()
        return text[:MAX_DESCRIPTION_CHARS]
