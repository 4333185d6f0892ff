"""Dashboard state: the stores, the detection pipeline and its subscribers.

Inbound user intents and scheduled ticks both go through this object, and
every change is published to subscribers as a DashboardSnapshot.
"""

import logging
from typing import Callable, Optional

import numpy as np
from apscheduler.schedulers.base import BaseScheduler

from signalbot.config import settings as app_settings
from signalbot.engine.auto_trade import AutoTradeEngine
from signalbot.engine.detection_stream import DetectionStream
from signalbot.models.detection import Detection
from signalbot.models.handle import MonitoredHandle
from signalbot.models.trading_settings import TradingSettings
from signalbot.schemas.dashboard import DashboardSnapshot, DashboardSummary
from signalbot.services.handle_registry import MonitoredHandleRegistry
from signalbot.services.signal_generator import RandomSignalGenerator
from signalbot.services.trading_settings import TradingSettingsStore

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[DashboardSnapshot], object]

_dashboard_instance: Optional["Dashboard"] = None


class Dashboard:
    def __init__(
        self,
        generator: RandomSignalGenerator | None = None,
        registry: MonitoredHandleRegistry | None = None,
        settings_store: TradingSettingsStore | None = None,
        scheduler: BaseScheduler | None = None,
    ):
        self.generator = generator or RandomSignalGenerator(
            np.random.default_rng(app_settings.random_seed)
        )
        self.registry = registry if registry is not None else MonitoredHandleRegistry()
        self.settings_store = settings_store or TradingSettingsStore()
        self.trade_engine = AutoTradeEngine(self.generator, self.settings_store)
        self.stream = DetectionStream(self.generator, self.registry, scheduler=scheduler)
        self.stream.add_listener(self._on_detection)
        self._listeners: list[SnapshotListener] = []

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def seed(self):
        """Fill both histories before the first scheduled tick."""
        self.stream.seed(app_settings.seed_detections)
        self.trade_engine.seed(app_settings.seed_trades)
        self._publish()

    def _on_detection(self, detection: Detection):
        self.trade_engine.evaluate(detection)
        self._publish()

    def tick(self) -> Detection:
        """Run one stream tick outside the scheduler."""
        return self.stream.tick()

    def start_stream(self):
        self.stream.start()
        self._publish()

    def stop_stream(self):
        self.stream.stop()
        self._publish()

    # ------------------------------------------------------------------
    # Inbound intents
    # ------------------------------------------------------------------

    def add_handle(self, raw: str) -> MonitoredHandle | None:
        handle = self.registry.add_handle(raw)
        if handle is not None:
            self._publish()
        return handle

    def toggle_handle(self, handle_id: str) -> MonitoredHandle | None:
        handle = self.registry.toggle_active(handle_id)
        if handle is not None:
            self._publish()
        return handle

    def select_detection(self, detection_id: str) -> Detection | None:
        detection = self.stream.select_detection(detection_id)
        if detection is not None:
            self._publish()
        return detection

    def set_auto_trade_enabled(self, enabled: bool):
        self.settings_store.set_auto_trade_enabled(enabled)
        self._publish()

    def toggle_auto_trade(self) -> bool:
        enabled = self.settings_store.toggle_auto_trade()
        self._publish()
        return enabled

    def set_max_position_size(self, value: float):
        self.settings_store.set_max_position_size(value)
        self._publish()

    def set_confidence_threshold(self, value: int):
        self.settings_store.set_confidence_threshold(value)
        self._publish()

    def set_stop_loss(self, value: float):
        self.settings_store.set_stop_loss(value)
        self._publish()

    def set_take_profit(self, value: float):
        self.settings_store.set_take_profit(value)
        self._publish()

    def update_settings(self, **fields) -> TradingSettings:
        updated = self.settings_store.update(**fields)
        self._publish()
        return updated

    # ------------------------------------------------------------------
    # Outbound state
    # ------------------------------------------------------------------

    def snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            handles=self.registry.handles,
            detections=self.stream.detections,
            focused_detection=self.stream.focused,
            trades=self.trade_engine.trades,
            total_pnl=self.trade_engine.total_pnl,
            settings=self.settings_store.settings,
            stream_state=self.stream.state.value,
        )

    def summary(self) -> DashboardSummary:
        return DashboardSummary(
            total_handles=len(self.registry),
            active_handles=self.registry.active_count,
            detections=len(self.stream.detections),
            total_trades=self.trade_engine.trade_count,
            total_pnl=round(self.trade_engine.total_pnl, 2),
            win_rate=round(self.trade_engine.win_rate, 1),
            stream_running=self.stream.is_running,
        )

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a snapshot listener. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self):
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception(f"Snapshot listener {listener!r} failed")


def init_dashboard(scheduler: BaseScheduler | None = None, seed: bool = True) -> Dashboard:
    """Initialize and return the dashboard singleton."""
    global _dashboard_instance
    _dashboard_instance = Dashboard(scheduler=scheduler)
    if seed:
        _dashboard_instance.seed()
    return _dashboard_instance


def get_dashboard() -> Optional[Dashboard]:
    """Get the dashboard singleton, or None if not initialized."""
    return _dashboard_instance
