"""Recurring detection feed.

Each tick draws one detection, prepends it to the bounded history, updates
the focused-detection slot and hands the detection to listeners (the
auto-trade engine). Ticks are scheduled as an APScheduler interval job but
can also be driven by calling `tick()` directly.
"""

import logging
from enum import Enum
from typing import Callable

from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.interval import IntervalTrigger

from signalbot.config import settings as app_settings
from signalbot.models.detection import Detection
from signalbot.services.handle_registry import MonitoredHandleRegistry
from signalbot.services.signal_generator import RandomSignalGenerator
from signalbot.utils.constants import STREAM_JOB_ID
from signalbot.utils.history import BoundedHistory

logger = logging.getLogger(__name__)

DetectionListener = Callable[[Detection], object]


class StreamState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


class DetectionStream:
    def __init__(
        self,
        generator: RandomSignalGenerator,
        registry: MonitoredHandleRegistry,
        scheduler: BaseScheduler | None = None,
        interval_seconds: float = app_settings.tick_interval_seconds,
        history_limit: int = app_settings.detection_history_limit,
        focus_switch_probability: float = app_settings.focus_switch_probability,
    ):
        self.generator = generator
        self.registry = registry
        self.scheduler = scheduler
        self.interval_seconds = interval_seconds
        self.focus_switch_probability = focus_switch_probability
        self._history: BoundedHistory[Detection] = BoundedHistory(history_limit)
        self._focused: Detection | None = None
        self._listeners: list[DetectionListener] = []
        self._state = StreamState.IDLE

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def detections(self) -> list[Detection]:
        return self._history.to_list()

    @property
    def focused(self) -> Detection | None:
        return self._focused

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is StreamState.RUNNING

    def get(self, detection_id: str) -> Detection | None:
        for d in self._history:
            if d.id == detection_id:
                return d
        return None

    def add_listener(self, listener: DetectionListener):
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def _generate(self) -> tuple[Detection, Detection | None]:
        detection = self.generator.generate_detection(self.registry.handles)
        evicted = self._history.push(detection)
        return detection, evicted

    def _should_switch_focus(self) -> bool:
        if self._focused is None:
            return True
        return bool(self.generator.rng.random() < self.focus_switch_probability)

    def _settle_focus(self, evicted: Detection | None, newest: Detection):
        # Focus may never point at an evicted entry
        if evicted is not None and evicted is self._focused:
            logger.debug(f"Focused {evicted.ticker} evicted, refocusing on newest")
            self._focused = newest

    def tick(self) -> Detection:
        """Produce one detection and notify listeners."""
        detection, evicted = self._generate()

        if self._should_switch_focus():
            self._focused = detection
            logger.debug(f"Focus -> {detection.ticker} ({detection.id})")
        self._settle_focus(evicted, detection)

        logger.debug(
            f"Detected {detection.ticker} by {detection.handle} "
            f"conf={detection.confidence} vir={detection.virality} trend={detection.trend}"
        )

        for listener in list(self._listeners):
            listener(detection)
        return detection

    def seed(self, count: int = app_settings.seed_detections) -> list[Detection]:
        """Synchronously generate `count` detections and focus the first.

        Listeners are not notified, so seeding never trades.
        """
        seeded = []
        for _ in range(count):
            detection, evicted = self._generate()
            if not seeded:
                self._focused = detection
            self._settle_focus(evicted, detection)
            seeded.append(detection)
        logger.info(f"Seeded {len(seeded)} detections")
        return seeded

    def select_detection(self, detection_id: str) -> Detection | None:
        """Focus a detection still in history. Stale ids are a no-op."""
        detection = self.get(detection_id)
        if detection is not None:
            self._focused = detection
        return detection

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    async def _run_scheduled_tick(self):
        # Coroutine job: AsyncIOScheduler runs it on the event loop thread
        try:
            self.tick()
        except Exception as e:
            logger.error(f"Detection tick error: {e}", exc_info=True)

    def start(self):
        """Arm the interval job. No-op if already running."""
        if self.is_running:
            return
        if self.scheduler is None:
            raise RuntimeError("DetectionStream has no scheduler to start on")

        self.scheduler.add_job(
            self._run_scheduled_tick,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=STREAM_JOB_ID,
            name="Detection stream",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self._state = StreamState.RUNNING
        logger.info(f"Detection stream started every {self.interval_seconds}s")

    def stop(self):
        """Cancel the pending tick. Safe to call repeatedly."""
        if not self.is_running:
            return
        if self.scheduler is not None and self.scheduler.get_job(STREAM_JOB_ID):
            self.scheduler.remove_job(STREAM_JOB_ID)
        self._state = StreamState.IDLE
        logger.info("Detection stream stopped")

