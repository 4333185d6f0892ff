"""Shared API dependencies."""

from fastapi import HTTPException, status

from signalbot.engine import dashboard as dashboard_module
from signalbot.engine.dashboard import Dashboard


def get_dashboard() -> Dashboard:
    """Return the running dashboard, or 503 before startup has seeded it."""
    dashboard = dashboard_module.get_dashboard()
    if dashboard is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard not initialized",
        )
    return dashboard
