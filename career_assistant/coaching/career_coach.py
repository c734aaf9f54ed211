"""
Career Coach - Skill gap analysis, learning paths and free-form advice.
"""

from typing import Optional, Union
import json
import logging

from career_assistant.ai.completion import CompletionClient, build_messages
from career_assistant.ai.fallbacks import (
    DEFAULT_ADVICE,
    SAMPLE_LEARNING_PATH,
    sample_skill_gap_analysis,
)
from career_assistant.ai.parsing import parse_json_response
from career_assistant.core.errors import ValidationError
from career_assistant.core.models import LearningPhase, SkillGapAnalysis, _str_list


class CareerCoach:
    """Career counselling backed by the completion model."""

    SKILL_GAP_TOKENS = 4000

    def __init__(self, client: CompletionClient):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    def analyze_skill_gaps(
        self,
        current_role: str,
        target_role: str,
        experience: str = "",
        skills: Union[str, list[str], None] = None,
        goals: str = "",
    ) -> SkillGapAnalysis:
        """
        Compare current skills against a target role.

        Args:
            current_role: The user's current job title (optional)
            target_role: Role the user wants to move into
            experience: Years/level of experience
            skills: Skills as a list or a comma separated string (required)
            goals: Free-text career goals

        Returns:
            SkillGapAnalysis (sample analysis if the reply can't be parsed)
        """
        skill_list = _str_list(skills)
        if not (target_role or "").strip() or not skill_list:
            raise ValidationError("Please provide target role and current skills.")

        messages = build_messages(
            "You are a career counselor. Analyze the user's current skills against their target "
            "role and provide detailed skill gap analysis, learning recommendations, and a "
            "structured learning path. Return comprehensive JSON data with keys: currentSkills, "
            "targetRole, missingSkills (skill, importance, timeToLearn, resources), strengthAreas, "
            "recommendations, learningPath (phase, duration, skills, projects).",
            f"Current Role: {current_role}\n"
            f"Target Role: {target_role}\n"
            f"Experience: {experience}\n"
            f"Skills: {', '.join(skill_list)}\n"
            f"Goals: {goals}\n\n"
            f"Provide detailed skill gap analysis and learning path.",
        )
        reply = self.client.complete(messages, max_tokens=self.SKILL_GAP_TOKENS)
        data = parse_json_response(
            reply,
            fallback=lambda: sample_skill_gap_analysis(skill_list, target_role),
            context="skill gap analysis",
        )

        analysis = SkillGapAnalysis.from_dict(data)
        self.logger.info(
            f"Skill gap analysis for {target_role}: {len(analysis.missing_skills)} missing skills"
        )
        return analysis

    def advice(self, question: str, context: Optional[dict] = None) -> str:
        """
        Answer a career question.

        Args:
            question: The user's question
            context: Optional extra details, sent as JSON

        Returns:
            Advice text
        """
        content = f"Question: {question}"
        if context:
            content += f"\n\nContext: {json.dumps(context, default=str)}"

        messages = build_messages(
            "You are an experienced career coach. Provide helpful, actionable career advice. "
            "Be encouraging but realistic. Include specific steps when possible.",
            content,
        )
        reply = self.client.complete(messages)
        return reply.strip() or DEFAULT_ADVICE

    def learning_path(self, skills: Union[str, list[str]], target_role: str) -> list[LearningPhase]:
        """Build a phased learning plan from current skills to a target role."""
        skill_list = _str_list(skills)
        messages = build_messages(
            "Create a structured learning path to transition from current skills to target role. "
            "Include phases, timelines, specific skills to learn, and project suggestions. Return "
            "a JSON array of objects with phase, duration, skills and projects.",
            f"Current skills: {', '.join(skill_list)}\n"
            f"Target role: {target_role}\n\n"
            f"Create learning path.",
        )
        reply = self.client.complete(messages)
        data = parse_json_response(
            reply, fallback=SAMPLE_LEARNING_PATH, expect=list, context="learning path"
        )
        return [LearningPhase.from_dict(p) for p in data if isinstance(p, dict)]
