"""Tests for dashboard wiring, snapshots and subscribers."""

import logging
from unittest.mock import MagicMock

import numpy as np
import pytest

from signalbot.engine import dashboard as dashboard_module
from signalbot.engine.dashboard import Dashboard, get_dashboard, init_dashboard
from signalbot.services.signal_generator import RandomSignalGenerator


@pytest.fixture
def board(clock) -> Dashboard:
    b = Dashboard(
        generator=RandomSignalGenerator(np.random.default_rng(42), clock=clock),
        scheduler=MagicMock(),
    )
    b.seed()
    return b


# ---------------------------------------------------------------------------
# 1. Initial state
# ---------------------------------------------------------------------------

def test_seeded_snapshot(board):
    snap = board.snapshot()
    assert len(snap.handles) == 5
    assert len(snap.detections) == 5
    assert len(snap.trades) == 5
    assert snap.focused_detection == snap.detections[-1]
    assert snap.total_pnl == board.trade_engine.total_pnl
    assert snap.settings.auto_trade_enabled is False
    assert snap.stream_state == "idle"


def test_summary(board):
    summary = board.summary()
    assert summary.total_handles == 5
    assert summary.active_handles == 4
    assert summary.detections == 5
    assert summary.total_trades == 5
    assert summary.total_pnl == round(board.trade_engine.total_pnl, 2)
    assert 0 <= summary.win_rate <= 100
    assert summary.stream_running is False


def test_empty_registry_is_kept(clock):
    from signalbot.services.handle_registry import MonitoredHandleRegistry

    registry = MonitoredHandleRegistry(handles=[])
    b = Dashboard(generator=RandomSignalGenerator(np.random.default_rng(0), clock=clock), registry=registry)
    assert b.registry is registry


# ---------------------------------------------------------------------------
# 2. Pipeline
# ---------------------------------------------------------------------------

def test_tick_trades_only_when_enabled(board):
    board.set_confidence_threshold(50)
    board.tick()
    assert board.trade_engine.trade_count == 5

    board.set_auto_trade_enabled(True)
    d = board.tick()
    assert board.trade_engine.trade_count == 6
    assert board.trade_engine.trades[0].ticker == d.ticker


def test_stream_start_stop(board):
    board.start_stream()
    assert board.summary().stream_running is True
    board.stop_stream()
    assert board.summary().stream_running is False


# ---------------------------------------------------------------------------
# 3. Subscribers
# ---------------------------------------------------------------------------

def test_intents_publish_snapshots(board):
    listener = MagicMock()
    board.subscribe(listener)

    board.add_handle("newcomer")
    board.set_auto_trade_enabled(True)
    board.tick()

    assert listener.call_count == 3
    last = listener.call_args.args[0]
    assert last.handles[0].handle == "@newcomer"
    assert last.settings.auto_trade_enabled is True
    assert len(last.detections) == 6


def test_noop_intents_do_not_publish(board):
    listener = MagicMock()
    board.subscribe(listener)

    board.add_handle("   ")
    board.toggle_handle("missing")
    board.select_detection("missing")

    listener.assert_not_called()


def test_unsubscribe(board):
    listener = MagicMock()
    unsubscribe = board.subscribe(listener)
    board.tick()
    unsubscribe()
    unsubscribe()
    board.tick()
    assert listener.call_count == 1


def test_failing_listener_is_isolated(board, caplog):
    good = MagicMock()
    board.subscribe(MagicMock(side_effect=RuntimeError("boom")))
    board.subscribe(good)

    with caplog.at_level(logging.ERROR):
        board.tick()

    good.assert_called_once()
    assert "Snapshot listener" in caplog.text
    assert len(board.stream.detections) == 6


def test_toggle_auto_trade(board):
    listener = MagicMock()
    board.subscribe(listener)

    assert board.toggle_auto_trade() is True
    assert board.settings_store.settings.auto_trade_enabled is True
    assert board.toggle_auto_trade() is False

    assert listener.call_count == 2
    assert listener.call_args.args[0].settings.auto_trade_enabled is False


def test_update_settings(board):
    updated = board.update_settings(confidence_threshold=90, stop_loss=3.0)
    assert updated.confidence_threshold == 90
    assert updated.stop_loss == 3.0
    assert board.snapshot().settings == updated


# ---------------------------------------------------------------------------
# 4. Singleton
# ---------------------------------------------------------------------------

def test_init_dashboard_sets_singleton(monkeypatch):
    monkeypatch.setattr(dashboard_module, "_dashboard_instance", None)
    assert get_dashboard() is None

    board = init_dashboard(seed=True)

    assert get_dashboard() is board
    assert len(board.stream.detections) == 5


def test_init_dashboard_without_seed(monkeypatch):
    monkeypatch.setattr(dashboard_module, "_dashboard_instance", None)
    board = init_dashboard(seed=False)
    assert board.stream.detections == []
    assert board.stream.focused is None
