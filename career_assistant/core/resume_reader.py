"""
Resume Reader - Extracts plain text from uploaded resume files.
Supports PDF, DOCX, and plain text resumes.
"""

from pathlib import Path
import logging
import re

import pdfplumber
from docx import Document
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".pdf", ".docx", ".txt", ".md"}

# pdfminer leaves "(cid:NN)" for glyphs it cannot map
_CID_RE = re.compile(r"\(cid:\d+\)")


class ResumeReader:
    """Reads resume documents into text for the completion prompts."""

    def read(self, file_path: str) -> str:
        """Read a resume file and return its text."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        extension = path.suffix.lower()

        if extension == ".pdf":
            text = self._read_pdf(path)
        elif extension == ".docx":
            text = self._read_docx(path)
        elif extension in [".txt", ".md"]:
            text = path.read_text(encoding="utf-8")
        else:
            raise ValueError(f"Unsupported file format: {extension}")

        return self._normalize(text)

    def _read_pdf(self, path: Path) -> str:
        """Extract PDF text with pdfplumber, retrying with PyPDF2 if nothing came out."""
        with pdfplumber.open(path) as pdf:
            text = "\n".join(page.extract_text() or "" for page in pdf.pages)

        if text.strip():
            return _CID_RE.sub("", text)

        logger.debug(f"pdfplumber found no text in {path.name}, trying PyPDF2")
        reader = PdfReader(str(path))
        return "\n".join(page.extract_text() or "" for page in reader.pages)

    def _read_docx(self, path: Path) -> str:
        doc = Document(str(path))
        return "\n".join(para.text for para in doc.paragraphs)

    def _normalize(self, text: str) -> str:
        # Collapse runs of blank lines and trailing spaces
        lines = [line.rstrip() for line in text.splitlines()]
        text = "\n".join(lines)
        return re.sub(r"\n{3,}", "\n\n", text).strip()


def read_resume(file_path: str) -> str:
    return ResumeReader().read(file_path)
