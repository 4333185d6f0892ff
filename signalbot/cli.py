"""CLI tool for running the signal pipeline.

Usage:
    python -m signalbot.cli simulate [ticks] [seed]
    python -m signalbot.cli serve [port]
"""

import sys

import numpy as np

from signalbot.engine.dashboard import Dashboard
from signalbot.services.signal_generator import RandomSignalGenerator
from signalbot.utils.logging import setup_logging


def simulate(ticks: int = 20, seed: int | None = None):
    """Run the pipeline headless with auto-trading on and print the result."""
    setup_logging()

    board = Dashboard(generator=RandomSignalGenerator(np.random.default_rng(seed)))
    board.seed()
    board.set_auto_trade_enabled(True)

    for _ in range(ticks):
        board.tick()

    summary = board.summary()
    focused = board.stream.focused

    print(f"\nTicks run: {ticks}")
    print(f"Detections held: {summary.detections}")
    print(f"Trades (all-time): {summary.total_trades}  win rate: {summary.win_rate:.1f}%")
    print(f"Total P&L: {'+' if summary.total_pnl >= 0 else ''}${summary.total_pnl:.2f}")
    if focused:
        print(f"Focused: {focused.ticker} by {focused.handle} ({focused.confidence}%)")
        print(f"  \"{focused.post_content}\"")

    print("\nRecent trades:")
    for trade in board.trade_engine.trades:
        print(
            f"  {trade.type.value:<4} {trade.ticker:<7} "
            f"${trade.amount:.2f} @ ${trade.price:.2f}  pnl {trade.pnl:+.2f}"
        )


def serve(port: int = 8000):
    import uvicorn

    uvicorn.run("signalbot.main:app", host="0.0.0.0", port=port)


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m signalbot.cli <command> [args]")
        print("Commands: simulate [ticks] [seed], serve [port]")
        sys.exit(1)

    command = sys.argv[1]
    args = sys.argv[2:]
    try:
        if command == "simulate":
            ticks = int(args[0]) if len(args) > 0 else 20
            seed = int(args[1]) if len(args) > 1 else None
            simulate(ticks, seed)
        elif command == "serve":
            serve(int(args[0]) if args else 8000)
        else:
            print(f"Unknown command: {command}")
            sys.exit(1)
    except ValueError as e:
        print(f"Invalid argument: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
