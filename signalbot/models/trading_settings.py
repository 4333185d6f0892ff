"""TradingSettings model: user-editable auto-trade configuration."""

from pydantic import BaseModel


class TradingSettings(BaseModel):
    auto_trade_enabled: bool = False
    max_position_size: float = 500.0
    confidence_threshold: int = 75

    # Stored for display only; no sizing or exit logic reads these
    stop_loss: float = 5.0
    take_profit: float = 15.0
