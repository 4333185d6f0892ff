"""MonitoredHandle model: a tracked social account."""

from pydantic import BaseModel


class MonitoredHandle(BaseModel):
    id: str
    handle: str  # always "@"-prefixed
    display_name: str
    avatar: str
    is_active: bool = True

    model_config = {"frozen": True}
