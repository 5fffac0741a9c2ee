"""Next-steps service: turn generated next steps into pending tasks."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID
import logging

from life_manage.agents.next_steps import NextStepsAgent
from life_manage.agents.outcome import Outcome
from life_manage.models.task import Task, TaskStatus
from life_manage.schemas.workflow import NextStep
from life_manage.services.gateway import PersistenceGateway
from life_manage.session import SessionContext

logger = logging.getLogger(__name__)


@dataclass
class NextStepsReport:
    project_id: UUID
    outcome: Outcome[List[NextStep]]
    created: List[Task] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    project_title: str = ""

    @property
    def message(self) -> str:
        return f'Successfully generated {len(self.created)} next steps for "{self.project_title}"'


class NextStepsService:
    """Generate next steps for a project and store them as tasks."""

    def __init__(self, gateway: PersistenceGateway, agent: Optional[NextStepsAgent] = None):
        self.gateway = gateway
        self.agent = agent or NextStepsAgent()

    async def generate(self, ctx: SessionContext, project_id) -> NextStepsReport:
        """
        Run the workflow for one project, create a pending task per step
        (in order, no due date), then reload the project's task list.
        """
        api_key = ctx.require_credential()
        project = self.gateway.projects.get(project_id, ctx.user_id)
        conversations = self.gateway.conversations.list(ctx.user_id, project.id)

        outcome = await self.agent.generate(
            project.title,
            project.category,
            project.tags or [],
            [c.model_dump(mode="json") for c in conversations],
            api_key,
        )

        report = NextStepsReport(project_id=project.id, outcome=outcome, project_title=project.title)
        for step in outcome.value or []:
            report.created.append(self.gateway.tasks.create({
                "user_id": ctx.user_id,
                "project_id": project.id,
                "title": step.title,
                "description": step.description,
                "status": TaskStatus.PENDING.value,
                "due_date": None,
            }))

        report.tasks = self.gateway.tasks.list(ctx.user_id, project.id)
        logger.info(
            "Created %d next-step tasks for project %s (%s)",
            len(report.created), project.id, outcome.kind.value,
        )
        return report
