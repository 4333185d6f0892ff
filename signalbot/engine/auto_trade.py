"""Auto-trade rule: turns qualifying detections into simulated trades.

Invoked once per new detection, never on its own timer. Trade generation is
a pure random draw, so there is no failed or partial trade to roll back.
"""

import logging

from signalbot.config import settings as app_settings
from signalbot.models.detection import Detection
from signalbot.models.trade import Trade
from signalbot.models.trading_settings import TradingSettings
from signalbot.services.signal_generator import RandomSignalGenerator
from signalbot.services.trading_settings import TradingSettingsStore
from signalbot.utils.history import BoundedHistory

logger = logging.getLogger(__name__)


def qualifies(detection: Detection, settings: TradingSettings) -> bool:
    """True when auto-trading is on and confidence meets the threshold."""
    return settings.auto_trade_enabled and detection.confidence >= settings.confidence_threshold


class AutoTradeEngine:
    """Owns the trade history and the realized P&L accumulator.

    `total_pnl` covers every trade ever generated, including ones already
    evicted from the visible history.
    """

    def __init__(
        self,
        generator: RandomSignalGenerator,
        settings_store: TradingSettingsStore,
        history_limit: int = app_settings.trade_history_limit,
    ):
        self.generator = generator
        self.settings_store = settings_store
        self._history: BoundedHistory[Trade] = BoundedHistory(history_limit)
        self.total_pnl = 0.0
        self.trade_count = 0
        self.winning_trades = 0

    @property
    def trades(self) -> list[Trade]:
        return self._history.to_list()

    @property
    def win_rate(self) -> float:
        """Percentage of all-time trades with positive pnl."""
        if not self.trade_count:
            return 0.0
        return self.winning_trades / self.trade_count * 100

    def _record(self, trade: Trade):
        self._history.push(trade)
        self.total_pnl += trade.pnl
        self.trade_count += 1
        if trade.pnl > 0:
            self.winning_trades += 1

    def evaluate(self, detection: Detection) -> Trade | None:
        """Execute a trade for `detection` if it qualifies."""
        if not qualifies(detection, self.settings_store.settings):
            return None

        trade = self.generator.generate_trade(detection.ticker)
        self._record(trade)
        logger.info(
            f"[auto_trade] {trade.type.value} {trade.ticker} "
            f"conf={detection.confidence} pnl={trade.pnl:+.2f} total={self.total_pnl:+.2f}"
        )
        return trade

    def seed(self, count: int = app_settings.seed_trades) -> list[Trade]:
        """Generate `count` trades on random tickers, independent of detections."""
        seeded = []
        for _ in range(count):
            trade = self.generator.generate_trade(self.generator.random_ticker())
            self._record(trade)
            seeded.append(trade)
        logger.info(f"Seeded {len(seeded)} trades, total P&L {self.total_pnl:+.2f}")
        return seeded
