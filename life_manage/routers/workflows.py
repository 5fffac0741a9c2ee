"""Workflow router: batch categorization, dashboard and sample data."""
from fastapi import APIRouter, Depends, status

from life_manage.agents.categorization import CategorizationAgent
from life_manage.agents.dashboard_summary import DashboardSummaryAgent
from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.routers.deps import get_completion_client, get_gateway, get_session_context
from life_manage.schemas.project import ProjectResponse
from life_manage.schemas.task import TaskResponse
from life_manage.schemas.workflow import (
    CategorizationReportResponse,
    CategorizationStepResponse,
    DashboardResponse,
)
from life_manage.services.categorization_service import CategorizationService
from life_manage.services.completion_client import CompletionClient
from life_manage.services.dashboard_service import DashboardService, priority_tasks, recent_projects
from life_manage.services.gateway import PersistenceGateway
from life_manage.services.sample_data_service import SampleDataService
from life_manage.session import SessionContext

router = APIRouter(tags=["Workflows"])


@router.post("/categorize", response_model=CategorizationReportResponse)
async def categorize_conversations(
    ctx: SessionContext = Depends(get_session_context),
    gateway: PersistenceGateway = Depends(get_gateway),
    client: CompletionClient = Depends(get_completion_client),
):
    """Group every uncategorized conversation into projects."""
    service = CategorizationService(gateway, CategorizationAgent(client))
    report = await service.categorize_uncategorized(ctx)
    steps = []
    for step in report.steps:
        result = step.outcome.value
        steps.append(CategorizationStepResponse(
            index=step.index,
            conversation_id=step.conversation_id,
            project_id=step.project_id,
            project_created=step.project_created,
            outcome=step.outcome.kind.value,
            category=result.category if result else None,
            tags=result.tags if result else [],
            progress=step.progress,
            error=step.outcome.reason if step.outcome.is_error else None,
        ))
    return CategorizationReportResponse(
        processed=report.processed,
        projects_created=len(report.projects),
        steps=steps,
        error=report.error,
        message=report.message,
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    ctx: SessionContext = Depends(get_session_context),
    gateway: PersistenceGateway = Depends(get_gateway),
    client: CompletionClient = Depends(get_completion_client),
):
    """Projects, tasks, the priority lists and the executive summary."""
    dashboard = await DashboardService(gateway, DashboardSummaryAgent(client)).build(ctx)
    summary = dashboard.summary
    return DashboardResponse(
        projects=[ProjectResponse.model_validate(p) for p in dashboard.projects],
        tasks=[TaskResponse.model_validate(t) for t in dashboard.tasks],
        priority_tasks=[TaskResponse.model_validate(t) for t in priority_tasks(dashboard.tasks)],
        recent_projects=[ProjectResponse.model_validate(p) for p in recent_projects(dashboard.projects)],
        summary=summary.value if summary else None,
        summary_outcome=summary.kind.value if summary else None,
        counts=dashboard.counts,
    )


@router.post("/sample-data", status_code=status.HTTP_201_CREATED)
async def load_sample_data(
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Seed the account with sample projects, tasks, conversations and notes."""
    counts = SampleDataService(gateway).load(current_user.user_id)
    return {"message": "Sample data loaded successfully", "counts": counts}
