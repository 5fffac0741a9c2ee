"""
Completion-assisted workflows.

Each workflow builds a prompt, calls the completion API, parses the answer
and returns an Outcome. A failed call never raises: the workflow returns a
static fallback marked as such.
"""

from .outcome import Outcome, OutcomeKind
from .categorization import CategorizationAgent, FALLBACK_CATEGORIZATION
from .dashboard_summary import DashboardSummaryAgent, fallback_summary
from .next_steps import NextStepsAgent, FALLBACK_NEXT_STEPS

__all__ = [
    "Outcome",
    "OutcomeKind",
    "CategorizationAgent",
    "FALLBACK_CATEGORIZATION",
    "DashboardSummaryAgent",
    "fallback_summary",
    "NextStepsAgent",
    "FALLBACK_NEXT_STEPS",
]
