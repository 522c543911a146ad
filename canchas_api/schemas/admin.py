from pydantic import BaseModel
from typing import Optional


class AdminLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AdminToken(BaseModel):
    ok: bool = True
    token: str


class Ok(BaseModel):
    ok: bool = True
