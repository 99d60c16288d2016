from datetime import UTC, datetime

from pydantic import BaseModel, Field

# --- User ---

class User(BaseModel):
    id: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    item: str
