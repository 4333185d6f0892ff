"""Process-wide store for the user's auto-trade settings."""

import logging

from signalbot.models.trading_settings import TradingSettings
from signalbot.utils.constants import CONFIDENCE_THRESHOLD_BOUNDS, MAX_POSITION_SIZE_BOUNDS

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class TradingSettingsStore:
    """Holds the single TradingSettings instance.

    Setters clamp out-of-range values instead of rejecting them; range
    errors are reported at the API edge.
    """

    def __init__(self, initial: TradingSettings | None = None):
        self._settings = initial.model_copy() if initial is not None else TradingSettings()

    @property
    def settings(self) -> TradingSettings:
        """Snapshot copy; mutating it does not touch the store."""
        return self._settings.model_copy()

    def _set(self, field: str, value):
        if getattr(self._settings, field) == value:
            return
        self._settings = self._settings.model_copy(update={field: value})
        logger.info(f"Setting {field} = {value}")

    def set_auto_trade_enabled(self, enabled: bool):
        self._set("auto_trade_enabled", bool(enabled))

    def toggle_auto_trade(self) -> bool:
        self.set_auto_trade_enabled(not self._settings.auto_trade_enabled)
        return self._settings.auto_trade_enabled

    def set_max_position_size(self, value: float):
        self._set("max_position_size", float(_clamp(value, *MAX_POSITION_SIZE_BOUNDS)))

    def set_confidence_threshold(self, value: int):
        self._set("confidence_threshold", int(_clamp(round(value), *CONFIDENCE_THRESHOLD_BOUNDS)))

    def set_stop_loss(self, value: float):
        self._set("stop_loss", float(max(0.0, value)))

    def set_take_profit(self, value: float):
        self._set("take_profit", float(max(0.0, value)))

    def update(self, **fields) -> TradingSettings:
        """Apply a partial update through the individual setters."""
        setters = {
            "auto_trade_enabled": self.set_auto_trade_enabled,
            "max_position_size": self.set_max_position_size,
            "confidence_threshold": self.set_confidence_threshold,
            "stop_loss": self.set_stop_loss,
            "take_profit": self.set_take_profit,
        }
        for key, value in fields.items():
            if key not in setters:
                raise KeyError(f"Unknown trading setting: {key}")
            if value is not None:
                setters[key](value)
        return self.settings
