"""
Portfolio Builder - Generates portfolio content and publishes portfolio sites.

Content comes from the completion model (from resume text, or "sample" for a
quick start), falling back to a sample portfolio when the reply is not JSON.
Publishing assigns a subdomain and stores the portfolio record for its owner;
export renders a standalone HTML page.
"""

from html import escape
from typing import Optional
import logging
import random
import re
import string

from career_assistant.ai.completion import CompletionClient, build_messages
from career_assistant.ai.fallbacks import SAMPLE_PORTFOLIO
from career_assistant.ai.parsing import parse_json_response
from career_assistant.core.errors import ValidationError
from career_assistant.core.models import Portfolio, PortfolioContent, PortfolioTemplate
from career_assistant.core.resume_reader import ResumeReader


SYSTEM_PROMPT = (
    "You are an expert portfolio builder. Generate comprehensive portfolio data based on the "
    "input. Return a JSON object with: name, title, summary, skills (array), projects (array "
    "with name, description, technologies, link), experience (array with company, role, "
    "duration, description), education (array with institution, degree, year), contact "
    "(object with email, linkedin, github)."
)

_BASE36 = string.digits + string.ascii_lowercase

# Template name -> (font, accent colour, header background)
TEMPLATE_STYLES = {
    PortfolioTemplate.MODERN: ("'Inter', 'Segoe UI', Arial, sans-serif", "#2563eb", "#f8fafc"),
    PortfolioTemplate.CLASSIC: ("Georgia, 'Times New Roman', serif", "#1f2937", "#ffffff"),
    PortfolioTemplate.CREATIVE: ("'Poppins', 'Trebuchet MS', sans-serif", "#9333ea", "#fdf4ff"),
}


class PortfolioBuilder:
    """Builds, publishes and exports portfolio sites."""

    MAX_TOKENS = 2000

    def __init__(self, client: CompletionClient, repository=None):
        """
        Initialize the portfolio builder.

        Args:
            client: Completion client
            repository: PortfolioRepository used by publish()
        """
        self.client = client
        self.repository = repository
        self.reader = ResumeReader()
        self.logger = logging.getLogger(self.__class__.__name__)

    def generate(self, resume_or_sample: str = "sample") -> PortfolioContent:
        """
        Generate portfolio content.

        Args:
            resume_or_sample: Resume text, or "sample" for a demo portfolio

        Returns:
            PortfolioContent (the sample portfolio if the reply can't be parsed)
        """
        messages = build_messages(
            SYSTEM_PROMPT,
            f"Generate a professional portfolio for: {resume_or_sample}",
        )
        reply = self.client.complete(messages, max_tokens=self.MAX_TOKENS)
        data = parse_json_response(reply, fallback=SAMPLE_PORTFOLIO, context="portfolio")
        content = PortfolioContent.from_dict(data)
        self.logger.info(f"Generated portfolio content for {content.name or 'unnamed user'}")
        return content

    def from_resume_file(self, path: str) -> PortfolioContent:
        """Generate portfolio content from an uploaded resume."""
        return self.generate(self.reader.read(path))

    @staticmethod
    def make_subdomain(name: str, rng: Optional[random.Random] = None) -> str:
        """Name with whitespace removed, lower-cased, plus a 5 character base-36 suffix."""
        rng = rng or random.SystemRandom()
        base = re.sub(r"\s+", "", name.lower())
        suffix = "".join(rng.choice(_BASE36) for _ in range(5))
        return f"{base}-{suffix}"

    def publish(
        self,
        owner_id: str,
        content: PortfolioContent,
        template: PortfolioTemplate = PortfolioTemplate.MODERN,
    ) -> Portfolio:
        """
        Publish a portfolio for its owner.

        Keeps the owner's existing subdomain if they already have one.

        Returns:
            The stored Portfolio (see Portfolio.url)
        """
        if self.repository is None:
            raise RuntimeError("PortfolioBuilder.publish requires a portfolio repository")
        if not content.name.strip():
            raise ValidationError("Please enter your name before publishing your portfolio.")

        existing = self.repository.get(owner_id)
        portfolio = existing or Portfolio(user_id=owner_id)
        portfolio.content = content.to_dict()
        portfolio.template = template.value
        if not portfolio.subdomain:
            portfolio.subdomain = self.make_subdomain(content.name)
        portfolio.is_published = True

        saved = self.repository.save(portfolio)
        self.logger.info(f"Published portfolio at {saved.url}")
        return saved

    def export_html(
        self,
        content: PortfolioContent,
        template: PortfolioTemplate = PortfolioTemplate.MODERN,
    ) -> str:
        """Render a standalone HTML page for the portfolio."""
        font, accent, header_bg = TEMPLATE_STYLES[template]

        sections = []

        if content.skills:
            tags = "".join(f'<span class="skill-tag">{escape(s)}</span>' for s in content.skills)
            sections.append(
                f'<div class="section">\n<h3>Skills</h3>\n<div class="skills">{tags}</div>\n</div>'
            )

        if content.projects:
            items = []
            for project in content.projects:
                link = ""
                if project.link:
                    href = project.link if project.link.startswith("http") else f"https://{project.link}"
                    link = f'<a href="{escape(href)}">{escape(project.link)}</a>'
                tech = ", ".join(project.technologies)
                items.append(
                    f'<div class="card"><h4>{escape(project.name)}</h4>'
                    f'<p>{escape(project.description)}</p>'
                    f'<p class="meta">{escape(tech)}</p>{link}</div>'
                )
            sections.append('<div class="section">\n<h3>Projects</h3>\n' + "\n".join(items) + "\n</div>")

        if content.experience:
            items = [
                f'<div class="card"><h4>{escape(e.role)} - {escape(e.company)}</h4>'
                f'<p class="meta">{escape(e.duration)}</p><p>{escape(e.description)}</p></div>'
                for e in content.experience
            ]
            sections.append('<div class="section">\n<h3>Experience</h3>\n' + "\n".join(items) + "\n</div>")

        if content.education:
            items = [
                f'<p><strong>{escape(e.degree)}</strong> - {escape(e.institution)} '
                f'<span class="meta">{escape(e.year)}</span></p>'
                for e in content.education
            ]
            sections.append('<div class="section">\n<h3>Education</h3>\n' + "\n".join(items) + "\n</div>")

        contact_items = [
            f"<li>{escape(label.title())}: {escape(value)}</li>"
            for label, value in content.contact.items() if value
        ]
        if contact_items:
            sections.append(
                '<div class="section">\n<h3>Contact</h3>\n<ul>' + "".join(contact_items) + "</ul>\n</div>"
            )

        body = "\n".join(sections)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(content.name)} - Portfolio</title>
    <style>
        body {{ font-family: {font}; margin: 0; padding: 20px; color: #333; }}
        .container {{ max-width: 1200px; margin: 0 auto; }}
        .header {{ text-align: center; margin-bottom: 40px; padding: 30px; background: {header_bg}; }}
        .header h2 {{ color: {accent}; }}
        .section {{ margin-bottom: 30px; }}
        .section h3 {{ border-bottom: 2px solid {accent}; padding-bottom: 4px; }}
        .skills {{ display: flex; flex-wrap: wrap; gap: 10px; }}
        .skill-tag {{ background: #e3f2fd; padding: 5px 10px; border-radius: 15px; }}
        .card {{ border: 1px solid #e5e7eb; border-radius: 8px; padding: 12px 16px; margin-bottom: 12px; }}
        .meta {{ color: #6b7280; font-size: 0.9em; }}
        a {{ color: {accent}; }}
    </style>
</head>
<body class="template-{template.value}">
    <div class="container">
        <div class="header">
            <h1>{escape(content.name)}</h1>
            <h2>{escape(content.title)}</h2>
            <p>{escape(content.summary)}</p>
        </div>
{body}
    </div>
</body>
</html>"""
