from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class LoginRequest(BaseModel):
    password: str = ""


class SessionStatus(BaseModel):
    authenticated: bool
    expires_at: Optional[datetime] = None
