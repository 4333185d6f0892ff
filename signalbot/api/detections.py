"""Detection feed API."""

from fastapi import APIRouter, Depends, HTTPException, Query

from signalbot.api.deps import get_dashboard
from signalbot.engine.dashboard import Dashboard
from signalbot.models.detection import Detection

router = APIRouter(prefix="/api/detections", tags=["detections"])


@router.get("", response_model=list[Detection])
async def list_detections(
    limit: int = Query(default=20, ge=1, le=100),
    dashboard: Dashboard = Depends(get_dashboard),
):
    return dashboard.stream.detections[:limit]


@router.get("/focused", response_model=Detection | None)
async def focused_detection(dashboard: Dashboard = Depends(get_dashboard)):
    return dashboard.stream.focused


@router.post("/{detection_id}/focus", response_model=Detection)
async def focus_detection(detection_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    detection = dashboard.select_detection(detection_id)
    if detection is None:
        raise HTTPException(status_code=404, detail="Detection not in history")
    return detection
