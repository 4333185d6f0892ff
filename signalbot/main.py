"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from signalbot.config import settings
from signalbot.utils.logging import setup_logging
from signalbot.api import dashboard, detections, handles, settings as settings_api, system, trades


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    setup_logging()
    from signalbot.engine.dashboard import init_dashboard
    from signalbot.engine.scheduler import scheduler, start_scheduler, stop_scheduler

    # Seed both histories synchronously before the first tick is armed
    board = init_dashboard(scheduler=scheduler)
    start_scheduler(board.stream)

    yield

    stop_scheduler(board.stream)


app = FastAPI(
    title="CryptoSignal Bot",
    description="Simulated social-signal detection and auto-trading dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(dashboard.router)
app.include_router(handles.router)
app.include_router(detections.router)
app.include_router(trades.router)
app.include_router(settings_api.router)
app.include_router(system.router)
