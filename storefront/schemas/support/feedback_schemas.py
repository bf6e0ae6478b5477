from pydantic import BaseModel, Field
from typing import Any, Optional, List
from datetime import datetime


class FeedbackCreate(BaseModel):
    # typed loosely so a non-string message gets INVALID_MESSAGE, not a 422
    message: Any = None
    lang: Optional[str] = None
    context: Optional[str] = Field(None, max_length=255)


class FeedbackOut(BaseModel):
    id: int
    message: str
    lang: str
    context: Optional[str]
    user_agent: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class FeedbackListData(BaseModel):
    feedback: List[FeedbackOut]
