"""
Coaching tools: resume optimization, mock interviews, career advice and chat.
"""

from career_assistant.coaching.resume_optimizer import ResumeOptimizer
from career_assistant.coaching.mock_interviewer import MockInterviewer
from career_assistant.coaching.career_coach import CareerCoach
from career_assistant.coaching.chat_bot import ChatBot, GREETING

__all__ = [
    "ResumeOptimizer",
    "MockInterviewer",
    "CareerCoach",
    "ChatBot",
    "GREETING",
]
