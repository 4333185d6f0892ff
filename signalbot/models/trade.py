"""Trade model: immutable record of every simulated execution."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class TradeType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class Trade(BaseModel):
    id: str
    ticker: str
    type: TradeType
    amount: float = Field(gt=0)
    price: float = Field(gt=0)
    pnl: float  # realized, signed; independent of amount/price
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
