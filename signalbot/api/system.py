"""System API: health check, scheduler status, stream control, manual tick."""

from fastapi import APIRouter, Depends

from signalbot.api.deps import get_dashboard
from signalbot.engine.dashboard import Dashboard
from signalbot.models.detection import Detection

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
async def health_check():
    return {"status": "ok"}


@router.get("/scheduler")
async def scheduler_status():
    """Current scheduler state with job details."""
    from signalbot.engine.scheduler import get_scheduler_status
    return get_scheduler_status()


@router.post("/stream/start")
async def start_stream(dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.start_stream()
    return {"state": dashboard.stream.state.value}


@router.post("/stream/stop")
async def stop_stream(dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.stop_stream()
    return {"state": dashboard.stream.state.value}


@router.post("/tick", response_model=Detection)
async def trigger_tick(dashboard: Dashboard = Depends(get_dashboard)):
    """Manually run one detection tick."""
    return dashboard.tick()
