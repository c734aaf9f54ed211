"""
CV Generator - Enhances CV form data for ATS systems and renders it.

The CV builder collects personal info, experience, education, skills and
projects. Generation asks the completion model to rewrite that data with
stronger action verbs and quantified achievements; if the reply is not
valid CV JSON, the user's own data is kept unchanged.
"""

from html import escape
import json
import logging
import re

from career_assistant.ai.completion import CompletionClient, build_messages
from career_assistant.ai.parsing import parse_json_response
from career_assistant.core.models import CVData


SYSTEM_PROMPT = (
    "You are an expert CV writer. Enhance and optimize the provided CV data for ATS systems. "
    "Improve descriptions, add action verbs, quantify achievements where possible, and ensure "
    "professional formatting. Return ONLY JSON with the same structure as the input: "
    "personalInfo, summary, experience, education, skills (technical, soft), projects."
)


class CVGenerator:
    """Generates ATS-optimized CVs."""

    MAX_TOKENS = 2000

    def __init__(self, client: CompletionClient):
        """
        Initialize the CV generator.

        Args:
            client: Completion client used for enhancement
        """
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    def generate(self, cv_data: CVData) -> CVData:
        """
        Enhance CV data with the completion model.

        Args:
            cv_data: Data entered in the CV builder

        Returns:
            Enhanced CVData, or the input unchanged if the reply can't be used
        """
        original = cv_data.to_dict()
        messages = build_messages(
            SYSTEM_PROMPT,
            f"Optimize this CV data: {json.dumps(original)}",
        )
        reply = self.client.complete(messages, max_tokens=self.MAX_TOKENS)

        data = parse_json_response(reply, fallback=original, context="CV")
        enhanced = CVData.from_dict(data)

        # A reply without the person's details is not a CV
        if cv_data.personal_info.name and not enhanced.personal_info.name:
            self.logger.warning("Enhanced CV lost personal info; keeping original")
            return cv_data

        self.logger.info(f"Generated CV for {enhanced.personal_info.name}")
        return enhanced

    def render(self, cv: CVData, format: str = "markdown") -> str:
        """
        Render a CV in the requested format.

        Args:
            cv: CV to render
            format: markdown, html, or txt

        Returns:
            Rendered document
        """
        if format == "html":
            return self._render_html(cv)
        markdown = self._render_markdown(cv)
        if format == "txt":
            return self._convert_to_text(markdown)
        return markdown

    def _render_markdown(self, cv: CVData) -> str:
        info = cv.personal_info
        contact = [c for c in (info.email, info.phone, info.location, info.linkedin) if c]

        lines = [f"# {info.name}", ""]
        if contact:
            lines += [" | ".join(contact), ""]

        if cv.summary:
            lines += ["## Professional Summary", "", cv.summary, ""]

        if cv.experience:
            lines += ["## Experience", ""]
            for exp in cv.experience:
                lines.append(f"### {exp.position} - {exp.company}")
                if exp.duration:
                    lines.append(f"*{exp.duration}*")
                lines.append("")
                if exp.description:
                    lines += [exp.description, ""]
                for achievement in exp.achievements:
                    lines.append(f"- {achievement}")
                if exp.achievements:
                    lines.append("")

        if cv.education:
            lines += ["## Education", ""]
            for edu in cv.education:
                line = f"**{edu.degree}** - {edu.institution}"
                if edu.year:
                    line += f" ({edu.year})"
                if edu.gpa:
                    line += f" - GPA: {edu.gpa}"
                lines.append(line)
            lines.append("")

        if cv.technical_skills or cv.soft_skills:
            lines += ["## Skills", ""]
            if cv.technical_skills:
                lines.append(f"**Technical:** {', '.join(cv.technical_skills)}")
            if cv.soft_skills:
                lines.append(f"**Soft Skills:** {', '.join(cv.soft_skills)}")
            lines.append("")

        if cv.projects:
            lines += ["## Projects", ""]
            for project in cv.projects:
                lines.append(f"### {project.name}")
                if project.description:
                    lines.append(project.description)
                if project.technologies:
                    lines.append(f"*Technologies: {', '.join(project.technologies)}*")
                lines.append("")

        return "\n".join(lines).rstrip() + "\n"

    def _render_html(self, cv: CVData) -> str:
        info = cv.personal_info
        contact = " | ".join(escape(c) for c in (info.email, info.phone, info.location, info.linkedin) if c)

        sections = []
        if cv.summary:
            sections.append(f"<h2>Professional Summary</h2>\n<p>{escape(cv.summary)}</p>")

        if cv.experience:
            items = []
            for exp in cv.experience:
                achievements = "".join(f"<li>{escape(a)}</li>" for a in exp.achievements)
                items.append(
                    f"<div class=\"entry\"><h3>{escape(exp.position)} - {escape(exp.company)}</h3>"
                    f"<p class=\"meta\">{escape(exp.duration)}</p>"
                    f"<p>{escape(exp.description)}</p>"
                    + (f"<ul>{achievements}</ul>" if achievements else "")
                    + "</div>"
                )
            sections.append("<h2>Experience</h2>\n" + "\n".join(items))

        if cv.education:
            items = []
            for edu in cv.education:
                gpa = f" - GPA: {escape(edu.gpa)}" if edu.gpa else ""
                items.append(
                    f"<p><strong>{escape(edu.degree)}</strong> - {escape(edu.institution)} "
                    f"{escape(edu.year)}{gpa}</p>"
                )
            sections.append("<h2>Education</h2>\n" + "\n".join(items))

        if cv.technical_skills or cv.soft_skills:
            skills = cv.technical_skills + cv.soft_skills
            tags = "".join(f"<span class=\"skill\">{escape(s)}</span>" for s in skills)
            sections.append(f"<h2>Skills</h2>\n<div class=\"skills\">{tags}</div>")

        if cv.projects:
            items = []
            for project in cv.projects:
                tech = escape(", ".join(project.technologies))
                items.append(
                    f"<div class=\"entry\"><h3>{escape(project.name)}</h3>"
                    f"<p>{escape(project.description)}</p><p class=\"meta\">{tech}</p></div>"
                )
            sections.append("<h2>Projects</h2>\n" + "\n".join(items))

        body = "\n".join(sections)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>CV - {escape(info.name)}</title>
    <style>
        body {{
            font-family: 'Segoe UI', Arial, sans-serif;
            max-width: 800px;
            margin: 0 auto;
            padding: 40px;
            color: #333;
            line-height: 1.6;
        }}
        h1 {{ margin-bottom: 4px; }}
        h2 {{ border-bottom: 2px solid #2563eb; padding-bottom: 4px; color: #1e3a8a; }}
        .meta {{ color: #666; font-style: italic; margin: 0; }}
        .skills {{ display: flex; flex-wrap: wrap; gap: 8px; }}
        .skill {{ background: #e3f2fd; padding: 4px 10px; border-radius: 12px; }}
    </style>
</head>
<body>
<h1>{escape(info.name)}</h1>
<p class="meta">{contact}</p>
{body}
</body>
</html>"""

    def _convert_to_text(self, content: str) -> str:
        """Convert markdown to plain text."""
        text = re.sub(r'\*\*(.+?)\*\*', r'\1', content)
        text = re.sub(r'\*(.+?)\*', r'\1', text)
        text = re.sub(r'^#+\s*', '', text, flags=re.M)
        return text

    @staticmethod
    def load(path: str) -> CVData:
        """Load CV form data from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            return CVData.from_dict(json.load(f))

