"""
Document Manager - Writes generated CVs, cover letters and portfolios to disk.
"""

from datetime import datetime
from pathlib import Path
import json
import logging
import re


class DocumentManager:
    """Saves generated documents under one output directory."""

    SUBDIRS = {
        "cv": "cvs",
        "cover_letter": "cover_letters",
        "portfolio": "portfolios",
        "analysis": "analyses",
    }

    EXTENSIONS = {
        "markdown": "md",
        "html": "html",
        "txt": "txt",
        "json": "json",
    }

    def __init__(self, output_dir: str = "./generated_documents"):
        """
        Initialize the document manager.

        Args:
            output_dir: Base directory for all generated documents
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(self.__class__.__name__)

    def save(self, kind: str, name: str, content, format: str = "markdown") -> str:
        """
        Save a generated document.

        Args:
            kind: cv, cover_letter, portfolio, or analysis
            name: Human-readable name used in the filename
            content: Document text (or a dict for json)
            format: markdown, html, txt, or json

        Returns:
            Path to the saved file
        """
        if kind not in self.SUBDIRS:
            raise ValueError(f"Unknown document kind: {kind}")
        if format not in self.EXTENSIONS:
            raise ValueError(f"Unsupported format: {format}")

        directory = self.output_dir / self.SUBDIRS[kind]
        directory.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{kind}_{self._safe_name(name)}_{timestamp}.{self.EXTENSIONS[format]}"
        filepath = directory / filename

        with open(filepath, 'w', encoding='utf-8') as f:
            if format == "json":
                json.dump(content, f, indent=2, default=str)
            else:
                f.write(content)

        self.logger.info(f"Saved {kind.replace('_', ' ')}: {filepath}")
        return str(filepath)

    @staticmethod
    def _safe_name(name: str) -> str:
        safe = re.sub(r"[^A-Za-z0-9]+", "_", name or "").strip("_")
        return safe[:60] or "untitled"
