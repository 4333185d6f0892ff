"""Monitored handles API."""

from fastapi import APIRouter, Depends, HTTPException

from signalbot.api.deps import get_dashboard
from signalbot.engine.dashboard import Dashboard
from signalbot.models.handle import MonitoredHandle
from signalbot.schemas.handle import HandleCreate

router = APIRouter(prefix="/api/handles", tags=["handles"])


@router.get("", response_model=list[MonitoredHandle])
async def list_handles(
    active: bool | None = None,
    dashboard: Dashboard = Depends(get_dashboard),
):
    registry = dashboard.registry
    if active is None:
        return registry.handles
    return registry.active_handles if active else registry.inactive_handles


@router.post("", response_model=MonitoredHandle, status_code=201)
async def create_handle(data: HandleCreate, dashboard: Dashboard = Depends(get_dashboard)):
    handle = dashboard.add_handle(data.handle)
    if handle is None:
        raise HTTPException(status_code=422, detail="Handle must not be empty")
    return handle


@router.post("/{handle_id}/toggle", response_model=MonitoredHandle)
async def toggle_handle(handle_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    handle = dashboard.toggle_handle(handle_id)
    if handle is None:
        raise HTTPException(status_code=404, detail="Handle not found")
    return handle
