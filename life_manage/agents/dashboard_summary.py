"""Dashboard Summary Workflow: a short executive summary of the workload."""

from typing import Any, Dict, List, Sequence
import json

from life_manage.agents.base import CompletionWorkflow
from life_manage.agents.outcome import Outcome
from life_manage.errors import ExternalServiceError

SYSTEM_PROMPT = """You are an AI assistant that helps users manage their projects.
Based on the user's projects and tasks, generate a personalized executive summary.
The summary should include:
1. A brief overview of their current workload
2. Prioritized action items
3. A thoughtful reflection question to help them think about their work
Keep the tone professional but friendly. Limit to 3-4 paragraphs."""


def fallback_summary(project_count: int, task_count: int) -> str:
    return (
        f"Welcome to your Life Manage dashboard. You currently have {project_count} active projects "
        f"and {task_count} pending tasks.\n\n"
        "Focus on completing your highest priority tasks first, especially those related to work "
        "projects with upcoming deadlines.\n\n"
        "Take a moment to reflect: Are your current projects aligned with your long-term goals? "
        "Consider reviewing your project list and adjusting priorities accordingly."
    )


class DashboardSummaryAgent(CompletionWorkflow):
    """Summarize a user's projects and tasks."""

    name = "dashboard_summary"

    def build_messages(
        self,
        projects: Sequence[Dict[str, Any]],
        tasks: Sequence[Dict[str, Any]],
    ) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": (
                    "Generate an executive summary based on these projects and tasks:\n\n"
                    f"Projects: {json.dumps(list(projects), default=str)}\n\n"
                    f"Tasks: {json.dumps(list(tasks), default=str)}"
                ),
            },
        ]

    async def summarize(
        self,
        projects: Sequence[Dict[str, Any]],
        tasks: Sequence[Dict[str, Any]],
        api_key: str,
    ) -> Outcome[str]:
        """Return the model's text, or the templated fallback on failure."""
        try:
            text = await self.ask(self.build_messages(projects, tasks), api_key)
        except ExternalServiceError as e:
            self.log_fallback(e.message, status=e.status)
            return Outcome.fallback(fallback_summary(len(projects), len(tasks)), e.message)

        text = text.strip()
        if not text:
            self.log_fallback("empty summary")
            return Outcome.fallback(fallback_summary(len(projects), len(tasks)), "empty response")
        return Outcome.ok(text)
