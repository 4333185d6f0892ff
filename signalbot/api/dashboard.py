"""Dashboard API: full snapshot and summary stats."""

from fastapi import APIRouter, Depends

from signalbot.api.deps import get_dashboard
from signalbot.engine.dashboard import Dashboard
from signalbot.schemas.dashboard import DashboardSnapshot, DashboardSummary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/snapshot", response_model=DashboardSnapshot)
async def dashboard_snapshot(dashboard: Dashboard = Depends(get_dashboard)):
    """Everything the presentation layer renders, in one payload."""
    return dashboard.snapshot()


@router.get("/summary", response_model=DashboardSummary)
async def dashboard_summary(dashboard: Dashboard = Depends(get_dashboard)):
    """Aggregated stats across all trades ever generated."""
    return dashboard.summary()
