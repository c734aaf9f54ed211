"""
Mock Interviewer - Runs practice interviews and scores the answers.

An interview is a short sequence of model-generated questions for a role.
The candidate answers them in order; once the last answer is recorded the
session is closed and all answers are sent back for performance feedback.
"""

from datetime import datetime
from typing import Optional
import json
import logging

from career_assistant.ai.completion import CompletionClient, build_messages
from career_assistant.ai.fallbacks import SAMPLE_INTERVIEW_QUESTIONS, sample_performance_analysis
from career_assistant.ai.parsing import parse_json_response
from career_assistant.core.errors import ValidationError
from career_assistant.core.models import (
    InterviewQuestion,
    InterviewResponse,
    InterviewSession,
    PerformanceAnalysis,
)


class MockInterviewer:
    """Conducts mock interviews."""

    ROLES = [
        "Frontend Developer",
        "Backend Developer",
        "Full Stack Developer",
        "Data Scientist",
        "Product Manager",
        "UX Designer",
        "DevOps Engineer",
        "Machine Learning Engineer",
    ]

    QUESTION_TOKENS = 2000
    ANALYSIS_TOKENS = 3000

    def __init__(self, client: CompletionClient):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    def start(self, role: str) -> InterviewSession:
        """
        Start an interview for a role.

        Args:
            role: Position to practice for

        Returns:
            Active InterviewSession positioned on the first question
        """
        if not role or not role.strip():
            raise ValidationError("Please select a role. Choose the position you want to practice for.")

        messages = build_messages(
            f"Generate 5-7 interview questions for a {role} position. Include behavioral, "
            f"technical, and situational questions. Return as JSON array with id, question, "
            f"type, and expectedDuration fields.",
            f"Create interview questions for: {role}",
        )
        reply = self.client.complete(messages, max_tokens=self.QUESTION_TOKENS)
        data = parse_json_response(
            reply, fallback=SAMPLE_INTERVIEW_QUESTIONS, expect=list, context="interview questions"
        )

        questions = [
            InterviewQuestion.from_dict(item, index)
            for index, item in enumerate(data) if isinstance(item, dict) and item.get("question")
        ]
        if not questions:
            questions = [
                InterviewQuestion.from_dict(item, index)
                for index, item in enumerate(SAMPLE_INTERVIEW_QUESTIONS)
            ]

        now = datetime.now()
        session = InterviewSession(role=role, questions=questions, start_time=now, question_started_at=now)
        self.logger.info(f"Started {role} interview with {len(questions)} questions")
        return session

    def answer(
        self,
        session: InterviewSession,
        response: str,
        duration: Optional[int] = None,
    ) -> Optional[InterviewQuestion]:
        """
        Record the answer to the current question and move on.

        Args:
            session: Active interview session
            response: The candidate's answer
            duration: Seconds spent answering (measured if omitted)

        Returns:
            The next question, or None when the interview is complete
        """
        question = session.current_question
        if question is None:
            raise ValidationError("This interview has already finished.")

        now = datetime.now()
        if duration is None:
            duration = int((now - session.question_started_at).total_seconds())

        session.responses.append(
            InterviewResponse(question=question.question, response=response, duration=duration)
        )

        if session.current_question_index < len(session.questions) - 1:
            session.current_question_index += 1
            session.question_started_at = now
            return session.current_question

        session.is_active = False
        self.logger.info(f"{session.role} interview complete")
        return None

    def analyze(self, session: InterviewSession) -> PerformanceAnalysis:
        """
        Get performance feedback for a session's answers.

        Returns:
            PerformanceAnalysis (sample feedback if the reply can't be parsed)
        """
        if not session.responses:
            raise ValidationError("Answer at least one question before requesting feedback.")

        responses = [r.to_dict() for r in session.responses]
        messages = build_messages(
            "You are an interview coach. Analyze the interview responses and provide detailed "
            "feedback including overall score, communication score, confidence score, content "
            "score, specific feedback for each question, and improvement tips. Return structured "
            "JSON with keys: overallScore, communicationScore, confidenceScore, contentScore, "
            "feedback (question, score, strengths, improvements), tips.",
            f"Role: {session.role}\n"
            f"Responses: {json.dumps(responses)}\n\n"
            f"Provide detailed performance analysis.",
        )
        reply = self.client.complete(messages, max_tokens=self.ANALYSIS_TOKENS)
        data = parse_json_response(
            reply,
            fallback=lambda: sample_performance_analysis(responses),
            context="interview analysis",
        )

        analysis = PerformanceAnalysis.from_dict(data)
        self.logger.info(f"Interview analysis complete: overall score {analysis.overall_score}%")
        return analysis
