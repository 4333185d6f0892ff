"""Shared vocabularies and defaults for the simulated signal feed."""

TICKER_OPTIONS = [
    "$BTC", "$ETH", "$SOL", "$PEPE", "$WIF", "$BONK",
    "$ARB", "$OP", "$DOGE", "$AVAX", "$MATIC", "$LINK",
]

POST_TEMPLATES = [
    "Just loaded up on {ticker}. This setup is beautiful.",
    "{ticker} looking absolutely primed for a move here",
    "The {ticker} chart is speaking to me rn",
    "If you're not paying attention to {ticker}, you're ngmi",
    "{ticker} breakout imminent. NFA.",
    "Accumulating more {ticker} at these levels",
    "The {ticker} narrative is just getting started",
    "{ticker} to new ATH? 👀",
]

# (handle, display_name, avatar, is_active)
DEFAULT_HANDLES: list[tuple[str, str, str, bool]] = [
    ("@cobie", "Cobie", "🦁", True),
    ("@inversebrah", "inversebrah", "📊", True),
    ("@0xSisyphus", "Sisyphus", "🪨", True),
    ("@CryptoKaleo", "Kaleo", "🎯", False),
    ("@TheCryptoDog", "The Crypto Dog", "🐕", True),
]

PLACEHOLDER_AVATAR = "👤"

# Random draw ranges, half-open [low, high) like numpy's Generator.integers
CONFIDENCE_RANGE = (60, 100)
SCORE_RANGE = (0, 100)
MENTIONS_RANGE = (100, 5100)
TRADE_AMOUNT_RANGE = (100, 1100)
TRADE_PRICE_SPAN = 1000.0
TRADE_PRICE_FLOOR = 10.0
BUY_PROBABILITY = 0.7
PNL_SKEW = 0.4
PNL_SCALE = 500.0

# TradingSettings bounds
MAX_POSITION_SIZE_BOUNDS = (100.0, 5000.0)
CONFIDENCE_THRESHOLD_BOUNDS = (50, 95)

STREAM_JOB_ID = "detection_stream"
