"""Synthetic detection and trade generation.

Every record is a pure draw from an injected random source. Scores are
uniform and carry no signal.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Sequence

import numpy as np

from signalbot.models.detection import Detection
from signalbot.models.handle import MonitoredHandle
from signalbot.models.trade import Trade, TradeType
from signalbot.utils.constants import (
    BUY_PROBABILITY,
    CONFIDENCE_RANGE,
    MENTIONS_RANGE,
    PNL_SCALE,
    PNL_SKEW,
    POST_TEMPLATES,
    SCORE_RANGE,
    TICKER_OPTIONS,
    TRADE_AMOUNT_RANGE,
    TRADE_PRICE_FLOOR,
    TRADE_PRICE_SPAN,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex[:12]


class RandomSignalGenerator:
    """Draws detections and trades from fixed vocabularies.

    `rng` is anything with numpy Generator's `random()` and
    `integers(low, high)`; tests pass scripted sources.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock

    # ------------------------------------------------------------------
    # Draw helpers
    # ------------------------------------------------------------------

    def _pick(self, options: Sequence):
        return options[int(self.rng.integers(0, len(options)))]

    def _draw_int(self, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return int(self.rng.integers(low, high))

    def random_ticker(self) -> str:
        return self._pick(TICKER_OPTIONS)

    # ------------------------------------------------------------------
    # Record generators
    # ------------------------------------------------------------------

    def generate_detection(self, handles: Sequence[MonitoredHandle]) -> Detection:
        """Manufacture one detection authored by one of `handles`.

        Inactive handles are eligible authors too.
        """
        if not handles:
            raise ValueError("generate_detection needs at least one handle")

        ticker = self.random_ticker()
        author = self._pick(handles)
        template = self._pick(POST_TEMPLATES)

        return Detection(
            id=new_id(),
            ticker=ticker,
            handle=author.handle,
            timestamp=self.clock(),
            post_content=template.replace("{ticker}", ticker),
            confidence=self._draw_int(CONFIDENCE_RANGE),
            virality=self._draw_int(SCORE_RANGE),
            trend=self._draw_int(SCORE_RANGE),
            mentions=self._draw_int(MENTIONS_RANGE),
        )

    def generate_trade(self, ticker: str) -> Trade:
        """Manufacture one executed trade for `ticker`.

        pnl = (U - 0.4) * 500, so outcomes lean positive (mean +50) and
        range over [-200, 300). It is not derived from amount or price.
        """
        trade_type = TradeType.BUY if self.rng.random() < BUY_PROBABILITY else TradeType.SELL
        amount = float(self._draw_int(TRADE_AMOUNT_RANGE))
        price = float(self.rng.random()) * TRADE_PRICE_SPAN + TRADE_PRICE_FLOOR
        pnl = (float(self.rng.random()) - PNL_SKEW) * PNL_SCALE

        return Trade(
            id=new_id(),
            ticker=ticker,
            type=trade_type,
            amount=amount,
            price=price,
            pnl=pnl,
            timestamp=self.clock(),
        )
