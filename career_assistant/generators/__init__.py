"""
Document generators for CVs, cover letters and portfolios.
"""

from .cv_generator import CVGenerator
from .cover_letter_writer import CoverLetterWriter
from .portfolio_builder import PortfolioBuilder
from .document_manager import DocumentManager

__all__ = [
    "CVGenerator",
    "CoverLetterWriter",
    "PortfolioBuilder",
    "DocumentManager",
]
