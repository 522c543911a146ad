from fastapi import APIRouter, Depends
from typing import Optional

from canchas_api.schemas.admin import AdminLogin, AdminToken, Ok
from canchas_api.services import auth

router = APIRouter()


@router.post("/login", response_model=AdminToken)
def login(data: AdminLogin):
    token = auth.login(data.email, data.password)
    return {"ok": True, "token": token}


@router.post("/logout", response_model=Ok)
def logout(token: Optional[str] = Depends(auth.get_bearer_token)):
    auth.sessions.revoke(token)
    return {"ok": True}
