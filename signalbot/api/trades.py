"""Trade history API."""

from fastapi import APIRouter, Depends, Query

from signalbot.api.deps import get_dashboard
from signalbot.engine.dashboard import Dashboard
from signalbot.models.trade import Trade

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.get("", response_model=list[Trade])
async def list_trades(
    ticker: str | None = None,
    limit: int = Query(default=10, ge=1, le=100),
    dashboard: Dashboard = Depends(get_dashboard),
):
    trades = dashboard.trade_engine.trades
    if ticker is not None:
        trades = [t for t in trades if t.ticker == ticker]
    return trades[:limit]
