"""Next-Steps Workflow: propose 3-5 actionable tasks for a project."""

from typing import Any, Dict, List, Sequence
import json

import pydantic

from life_manage.agents.base import CompletionWorkflow, extract_json
from life_manage.agents.outcome import Outcome
from life_manage.errors import ExternalServiceError
from life_manage.schemas.workflow import NextStep

FALLBACK_NEXT_STEPS = [
    NextStep(
        title="Review project details",
        description="Take some time to review the project details and goals.",
    ),
    NextStep(
        title="Identify key stakeholders",
        description="Make a list of all the people involved in or affected by this project.",
    ),
    NextStep(
        title="Set project milestones",
        description="Define clear milestones to track progress on this project.",
    ),
]

SYSTEM_PROMPT = """You are an AI assistant that helps users manage their projects.
Based on the project details and related conversations, generate 3-5 actionable next steps.
Each next step should be specific, clear, and directly related to moving the project forward.
Return your response as a JSON array of objects, each with "title" and "description" fields."""

next_steps_adapter = pydantic.TypeAdapter(List[NextStep])


class NextStepsAgent(CompletionWorkflow):
    """Generate next steps from a project and its conversations."""

    name = "next_steps"

    def build_messages(
        self,
        title: str,
        category: str,
        tags: Sequence[str],
        conversations: Sequence[Dict[str, Any]],
    ) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": (
                    "Generate next steps for this project:\n\n"
                    f"Project Title: {title}\n"
                    f"Project Category: {category}\n"
                    f"Project Tags: {', '.join(tags)}\n\n"
                    f"Related Conversations: {json.dumps(list(conversations), default=str)}"
                ),
            },
        ]

    async def generate(
        self,
        title: str,
        category: str,
        tags: Sequence[str],
        conversations: Sequence[Dict[str, Any]],
        api_key: str,
    ) -> Outcome[List[NextStep]]:
        """Return the parsed steps, or the fixed three-step fallback."""
        try:
            text = await self.ask(self.build_messages(title, category, tags, conversations), api_key)
            steps = next_steps_adapter.validate_python(extract_json(text, "[", "]"))
        except ExternalServiceError as e:
            self.log_fallback(e.message, status=e.status, project=title)
            return Outcome.fallback(self._fallback(), e.message)
        except (ValueError, pydantic.ValidationError) as e:
            self.log_fallback(f"unparsable next steps: {e.__class__.__name__}", project=title)
            return Outcome.fallback(self._fallback(), "unparsable response")

        if not steps:
            self.log_fallback("no next steps returned", project=title)
            return Outcome.fallback(self._fallback(), "empty response")
        return Outcome.ok(steps[:5])

    @staticmethod
    def _fallback() -> List[NextStep]:
        return [step.model_copy() for step in FALLBACK_NEXT_STEPS]
