"""
Categorization service

Runs the categorization workflow over a batch of conversations, one at a
time, grouping them into projects.
"""

from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, List, Optional, Sequence, Tuple
from uuid import UUID
import logging

from sqlalchemy.exc import SQLAlchemyError

from life_manage.agents.categorization import CategorizationAgent
from life_manage.agents.outcome import Outcome
from life_manage.errors import LifeManageError, ValidationError
from life_manage.models.conversation import Conversation
from life_manage.models.project import Project, ProjectStatus
from life_manage.schemas.workflow import Categorization
from life_manage.services.gateway import PersistenceGateway
from life_manage.session import SessionContext

logger = logging.getLogger(__name__)

PROJECT_TITLE_LIMIT = 200


def derive_project_title(conversation: Conversation) -> str:
    """Conversation title fitted to a project title; blank becomes "Untitled Project"."""
    title = (conversation.title or "").strip()[:PROJECT_TITLE_LIMIT].strip()
    return title or "Untitled Project"


@dataclass
class CategorizationStep:
    """Result for one conversation of a batch."""
    index: int
    total: int
    conversation_id: UUID
    outcome: Outcome[Categorization]
    project_id: Optional[UUID] = None
    project_created: bool = False

    @property
    def progress(self) -> float:
        return (self.index + 1) / self.total if self.total else 1.0


@dataclass
class CategorizationReport:
    """Summary of a finished batch."""
    steps: List[CategorizationStep] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def processed(self) -> int:
        return sum(1 for step in self.steps if not step.outcome.is_error)

    @property
    def message(self) -> str:
        if self.error:
            return f"Categorized {self.processed} conversations before failing: {self.error}"
        return (
            f"Successfully categorized {self.processed} conversations "
            f"into {len(self.projects)} projects"
        )


class CategorizationService:
    """Batch categorization of uncategorized conversations."""

    def __init__(self, gateway: PersistenceGateway, agent: Optional[CategorizationAgent] = None):
        self.gateway = gateway
        self.agent = agent or CategorizationAgent()

    async def iter_categorize(
        self,
        ctx: SessionContext,
        conversations: Sequence[Conversation],
    ) -> AsyncIterator[CategorizationStep]:
        """
        Categorize conversations strictly in order, yielding a step per item.

        Projects created earlier in the batch are reused for the same
        (category, title) key. A persistence error yields an ERROR step for
        that item and ends the batch; earlier items stay saved.
        """
        api_key = ctx.require_credential()
        batch_projects: Dict[Tuple[str, str], Project] = {}
        total = len(conversations)

        for index, conversation in enumerate(conversations):
            outcome = await self.agent.categorize(conversation.content, api_key)
            result = outcome.value
            title = derive_project_title(conversation)
            key = (result.category, title)

            try:
                created = key not in batch_projects
                if created:
                    batch_projects[key] = self.gateway.projects.create({
                        "user_id": ctx.user_id,
                        "title": title,
                        "description": f"Automatically categorized from conversation: {conversation.title}",
                        "category": result.category,
                        "tags": result.tags,
                        "status": ProjectStatus.ACTIVE.value,
                        "priority": 0,
                    })
                project = batch_projects[key]
                self.gateway.conversations.assign_project(conversation.id, project.id, ctx.user_id)
            except LifeManageError as e:
                logger.error("Categorization stopped at conversation %s: %s", conversation.id, e.message)
                yield CategorizationStep(index, total, conversation.id, Outcome.error(e.message))
                return
            except SQLAlchemyError as e:
                self.gateway.session.rollback()
                logger.error("Categorization stopped at conversation %s", conversation.id, exc_info=True)
                yield CategorizationStep(index, total, conversation.id, Outcome.error(f"Database error: {e.__class__.__name__}"))
                return

            yield CategorizationStep(
                index=index,
                total=total,
                conversation_id=conversation.id,
                outcome=outcome,
                project_id=project.id,
                project_created=created,
            )

    async def categorize_uncategorized(self, ctx: SessionContext) -> CategorizationReport:
        """Categorize every conversation of the user that has no project yet."""
        ctx.require_credential()
        conversations = self.gateway.conversations.list_uncategorized(ctx.user_id)
        if not conversations:
            raise ValidationError("No conversations to categorize")

        report = CategorizationReport()
        seen = set()
        async for step in self.iter_categorize(ctx, conversations):
            report.steps.append(step)
            if step.outcome.is_error:
                report.error = step.outcome.reason
                break
            if step.project_created and step.project_id not in seen:
                seen.add(step.project_id)
                report.projects.append(self.gateway.projects.get(step.project_id))

        logger.info("Categorization finished for user %s: %s", ctx.user_id, report.message)
        return report
