"""Pydantic schemas for dashboard snapshots."""

from pydantic import BaseModel

from signalbot.models.detection import Detection
from signalbot.models.handle import MonitoredHandle
from signalbot.models.trade import Trade
from signalbot.models.trading_settings import TradingSettings


class DashboardSnapshot(BaseModel):
    handles: list[MonitoredHandle]
    detections: list[Detection]  # newest first
    focused_detection: Detection | None
    trades: list[Trade]  # newest first
    total_pnl: float
    settings: TradingSettings
    stream_state: str


class DashboardSummary(BaseModel):
    total_handles: int
    active_handles: int
    detections: int
    total_trades: int  # all-time, not just the visible history
    total_pnl: float
    win_rate: float
    stream_running: bool
