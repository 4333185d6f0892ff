"""Domain models."""

from signalbot.models.handle import MonitoredHandle
from signalbot.models.detection import Detection
from signalbot.models.trade import Trade, TradeType
from signalbot.models.trading_settings import TradingSettings

__all__ = [
    "MonitoredHandle",
    "Detection",
    "Trade",
    "TradeType",
    "TradingSettings",
]
