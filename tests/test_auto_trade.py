"""Tests for the auto-trade rule and the realized P&L accumulator."""

import pytest

from signalbot.engine.auto_trade import AutoTradeEngine, qualifies
from signalbot.models.trading_settings import TradingSettings
from signalbot.services.trading_settings import TradingSettingsStore


@pytest.fixture
def store() -> TradingSettingsStore:
    return TradingSettingsStore(TradingSettings(auto_trade_enabled=True, confidence_threshold=75))


@pytest.fixture
def engine(generator, store) -> AutoTradeEngine:
    return AutoTradeEngine(generator, store, history_limit=10)


# ---------------------------------------------------------------------------
# 1. Qualification rule
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("enabled,threshold,confidence,expected", [
    (True, 75, 74, False),
    (True, 75, 75, True),
    (True, 75, 99, True),
    (False, 75, 99, False),
    (False, 50, 50, False),
    (True, 95, 94, False),
])
def test_qualifies(make_detection, enabled, threshold, confidence, expected):
    settings = TradingSettings(auto_trade_enabled=enabled, confidence_threshold=threshold)
    assert qualifies(make_detection(confidence=confidence), settings) is expected


# ---------------------------------------------------------------------------
# 2. Evaluation
# ---------------------------------------------------------------------------

def test_threshold_boundary(engine, make_detection):
    assert engine.evaluate(make_detection(confidence=74)) is None
    assert engine.trades == []

    trade = engine.evaluate(make_detection(confidence=75, ticker="$WIF"))
    assert trade is not None
    assert trade.ticker == "$WIF"
    assert engine.trades == [trade]
    assert engine.total_pnl == trade.pnl


def test_disabled_never_trades(engine, store, make_detection):
    store.set_auto_trade_enabled(False)
    for confidence in range(60, 100):
        assert engine.evaluate(make_detection(confidence=confidence)) is None
    assert engine.trades == []
    assert engine.total_pnl == 0.0
    assert engine.trade_count == 0


def test_settings_changes_apply_to_next_detection(engine, store, make_detection):
    store.set_confidence_threshold(90)
    assert engine.evaluate(make_detection(confidence=85)) is None
    store.set_confidence_threshold(80)
    assert engine.evaluate(make_detection(confidence=85)) is not None


def test_history_newest_first_and_bounded(engine, make_detection):
    produced = [engine.evaluate(make_detection(confidence=90)) for _ in range(25)]
    assert len(engine.trades) == 10
    assert engine.trades == list(reversed(produced))[:10]


def test_total_pnl_survives_eviction(engine, make_detection):
    produced = [engine.evaluate(make_detection(confidence=90)) for _ in range(40)]
    assert engine.total_pnl == pytest.approx(sum(t.pnl for t in produced))
    assert len(engine.trades) == 10
    assert engine.trade_count == 40


def test_win_rate_counts_all_time(engine, make_detection):
    assert engine.win_rate == 0.0
    produced = [engine.evaluate(make_detection(confidence=90)) for _ in range(30)]
    winners = sum(1 for t in produced if t.pnl > 0)
    assert engine.winning_trades == winners
    assert engine.win_rate == pytest.approx(winners / 30 * 100)


# ---------------------------------------------------------------------------
# 3. Seeding
# ---------------------------------------------------------------------------

def test_seed_initializes_accumulator(generator):
    engine = AutoTradeEngine(generator, TradingSettingsStore())
    seeded = engine.seed(5)
    assert len(seeded) == 5
    assert engine.trades == list(reversed(seeded))
    assert engine.total_pnl == pytest.approx(sum(t.pnl for t in seeded))
    assert engine.trade_count == 5


def test_seed_ignores_auto_trade_setting(generator):
    engine = AutoTradeEngine(generator, TradingSettingsStore(TradingSettings(auto_trade_enabled=False)))
    assert len(engine.seed(5)) == 5
