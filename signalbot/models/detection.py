"""Detection model: a synthetic ticker mention by a monitored handle."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, computed_field


class Detection(BaseModel):
    id: str
    ticker: str  # e.g. "$SOL"
    handle: str  # e.g. "@cobie"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    post_content: str
    confidence: int = Field(ge=0, le=100)
    virality: int = Field(ge=0, le=100)
    trend: int = Field(ge=0, le=100)
    mentions: int = Field(ge=0)

    model_config = {"frozen": True}

    @computed_field
    @property
    def social_volume(self) -> float:
        """Mentions scaled onto a 0-100 bar."""
        return min(self.mentions / 50, 100.0)
