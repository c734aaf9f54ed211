"""
Utility modules for the career assistant.
"""

from .config import Config

__all__ = [
    "Config",
]
