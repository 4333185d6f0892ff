"""Auto-trade settings API."""

from fastapi import APIRouter, Depends

from signalbot.api.deps import get_dashboard
from signalbot.engine.dashboard import Dashboard
from signalbot.models.trading_settings import TradingSettings
from signalbot.schemas.trading_settings import TradingSettingsUpdate

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=TradingSettings)
async def get_settings(dashboard: Dashboard = Depends(get_dashboard)):
    return dashboard.settings_store.settings


@router.put("", response_model=TradingSettings)
async def update_settings(data: TradingSettingsUpdate, dashboard: Dashboard = Depends(get_dashboard)):
    return dashboard.update_settings(**data.model_dump(exclude_unset=True))


@router.post("/auto-trade/toggle", response_model=TradingSettings)
async def toggle_auto_trade(dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.toggle_auto_trade()
    return dashboard.settings_store.settings
