"""Registry of monitored social handles."""

import logging

from signalbot.models.handle import MonitoredHandle
from signalbot.services.signal_generator import new_id
from signalbot.utils.constants import DEFAULT_HANDLES, PLACEHOLDER_AVATAR

logger = logging.getLogger(__name__)


def default_handles() -> list[MonitoredHandle]:
    return [
        MonitoredHandle(
            id=str(i),
            handle=handle,
            display_name=display_name,
            avatar=avatar,
            is_active=is_active,
        )
        for i, (handle, display_name, avatar, is_active) in enumerate(DEFAULT_HANDLES, start=1)
    ]


def normalize_handle(raw: str) -> str | None:
    """Return the "@"-prefixed form of `raw`, or None if it is blank."""
    text = raw.strip()
    if not text:
        return None
    return text if text.startswith("@") else f"@{text}"


class MonitoredHandleRegistry:
    """Owns the handle list. Newest additions are listed first."""

    def __init__(self, handles: list[MonitoredHandle] | None = None):
        self._handles: list[MonitoredHandle] = (
            list(handles) if handles is not None else default_handles()
        )

    @property
    def handles(self) -> list[MonitoredHandle]:
        return list(self._handles)

    @property
    def active_handles(self) -> list[MonitoredHandle]:
        return [h for h in self._handles if h.is_active]

    @property
    def inactive_handles(self) -> list[MonitoredHandle]:
        return [h for h in self._handles if not h.is_active]

    @property
    def active_count(self) -> int:
        return sum(1 for h in self._handles if h.is_active)

    def get(self, handle_id: str) -> MonitoredHandle | None:
        for h in self._handles:
            if h.id == handle_id:
                return h
        return None

    def add_handle(self, raw: str) -> MonitoredHandle | None:
        """Add a new active handle. Blank input is ignored."""
        handle = normalize_handle(raw)
        if handle is None:
            return None

        record = MonitoredHandle(
            id=new_id(),
            handle=handle,
            display_name=handle[1:],
            avatar=PLACEHOLDER_AVATAR,
            is_active=True,
        )
        self._handles.insert(0, record)
        logger.info(f"Monitoring {handle}")
        return record

    def toggle_active(self, handle_id: str) -> MonitoredHandle | None:
        """Flip is_active for a handle. Unknown ids are a no-op."""
        for i, h in enumerate(self._handles):
            if h.id == handle_id:
                updated = h.model_copy(update={"is_active": not h.is_active})
                self._handles[i] = updated
                logger.info(f"{updated.handle} {'activated' if updated.is_active else 'paused'}")
                return updated
        return None

    def __len__(self) -> int:
        return len(self._handles)
