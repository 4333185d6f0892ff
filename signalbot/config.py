"""Application configuration via environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Detection stream
    tick_interval_seconds: float = 3.0
    autostart_stream: bool = True
    focus_switch_probability: float = 0.3

    # Bounded histories
    detection_history_limit: int = 20
    trade_history_limit: int = 10

    # Startup seed
    seed_detections: int = 5
    seed_trades: int = 5
    random_seed: int | None = None  # None = fresh OS entropy each run

    model_config = {"env_prefix": "SB_", "env_file": ".env"}


settings = Settings()
