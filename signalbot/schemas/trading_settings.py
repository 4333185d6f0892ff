"""Pydantic schemas for the trading settings API."""

from pydantic import BaseModel, Field


class TradingSettingsUpdate(BaseModel):
    auto_trade_enabled: bool | None = None
    max_position_size: float | None = Field(default=None, ge=100, le=5000)
    confidence_threshold: int | None = Field(default=None, ge=50, le=95)
    stop_loss: float | None = Field(default=None, ge=0)
    take_profit: float | None = Field(default=None, ge=0)
