from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict

class Activity(BaseModel):
    # Keep any extra upstream fields so responses pass through unchanged
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    color: str
    integration: str

class ActivitiesResponse(BaseModel):
    activities: List[Activity]

class ActivityRequest(BaseModel):
    name: str
    color: str
    integration: str

class EditActivityRequest(BaseModel):
    """Partial update. Fields left as None are not sent upstream."""
    name: Optional[str] = None
    color: Optional[str] = None

class DeleteActivityResponse(BaseModel):
    errors: List[Any] = []

class SignInResponse(BaseModel):
    token: str
