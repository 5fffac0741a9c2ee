"""Dashboard service: workload lists plus the executive summary."""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from life_manage.agents.dashboard_summary import DashboardSummaryAgent
from life_manage.agents.outcome import Outcome
from life_manage.models.project import Project
from life_manage.models.task import Task, TaskStatus
from life_manage.services.gateway import PersistenceGateway
from life_manage.session import SessionContext

logger = logging.getLogger(__name__)

PRIORITY_TASK_LIMIT = 5
RECENT_PROJECT_LIMIT = 3


def priority_tasks(tasks: List[Task], limit: int = PRIORITY_TASK_LIMIT) -> List[Task]:
    """Open tasks: dated ones first by due date, then undated newest first."""
    open_tasks = [t for t in tasks if t.status != TaskStatus.COMPLETED.value]
    dated = sorted((t for t in open_tasks if t.due_date), key=lambda t: t.due_date)
    undated = sorted((t for t in open_tasks if not t.due_date), key=lambda t: t.created_at, reverse=True)
    return (dated + undated)[:limit]


def recent_projects(projects: List[Project], limit: int = RECENT_PROJECT_LIMIT) -> List[Project]:
    return sorted(projects, key=lambda p: p.updated_at, reverse=True)[:limit]


@dataclass
class Dashboard:
    projects: List[Project] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    summary: Optional[Outcome[str]] = None

    @property
    def counts(self):
        return {
            "projects": len(self.projects),
            "tasks": len(self.tasks),
            "open_tasks": sum(1 for t in self.tasks if t.status != TaskStatus.COMPLETED.value),
        }


class DashboardService:
    """Assemble the dashboard for one user."""

    def __init__(self, gateway: PersistenceGateway, agent: Optional[DashboardSummaryAgent] = None):
        self.gateway = gateway
        self.agent = agent or DashboardSummaryAgent()

    async def build(self, ctx: SessionContext) -> Dashboard:
        """The summary is generated only with a credential and at least one project."""
        dashboard = Dashboard(
            projects=self.gateway.projects.list(ctx.user_id),
            tasks=self.gateway.tasks.list(ctx.user_id),
        )
        if ctx.has_credential and dashboard.projects:
            dashboard.summary = await self.agent.summarize(
                [p.model_dump(mode="json") for p in dashboard.projects],
                [t.model_dump(mode="json") for t in dashboard.tasks],
                ctx.credential,
            )
        return dashboard
