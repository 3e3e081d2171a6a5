from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProgressBase(BaseModel):
    name: str
    value: float = 0
    target: Optional[float] = None
    unit: str


class ProgressUpsert(ProgressBase):
    model_config = ConfigDict(extra="ignore")


class ProgressRead(ProgressBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
