"""
Chat Bot - A running conversation with the career coach.
"""

from typing import Optional
import logging

from career_assistant.coaching.career_coach import CareerCoach
from career_assistant.core.models import ChatMessage


GREETING = (
    "Hi! I'm your AI career coach. Ask me anything about career advice, "
    "interview preparation, or job search strategies!"
)


class ChatBot:
    """Keeps the message history of one chat with the coach."""

    def __init__(self, coach: CareerCoach, context: Optional[dict] = None):
        """
        Args:
            coach: Career coach that answers each message
            context: Extra details sent with every question, e.g. a skill gap analysis
        """
        self.coach = coach
        self.context = context
        self.messages: list[ChatMessage] = [ChatMessage(content=GREETING, is_user=False)]
        self.logger = logging.getLogger(self.__class__.__name__)

    def send(self, text: str) -> Optional[ChatMessage]:
        """
        Send a message to the coach.

        The user's message stays in the history even if the request fails;
        the error propagates to the caller.

        Returns:
            The coach's reply, or None for blank input
        """
        if not text or not text.strip():
            return None

        self.messages.append(ChatMessage(content=text.strip(), is_user=True))
        answer = self.coach.advice(text.strip(), self.context)

        reply = ChatMessage(content=answer, is_user=False)
        self.messages.append(reply)
        self.logger.debug(f"Chat now has {len(self.messages)} messages")
        return reply
