from fastapi import Body, HTTPException, Depends, Query, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel
from app.database import get_supabase_client
from typing import Optional
import logging

security = HTTPBearer(auto_error=False)

class Caller(BaseModel):
    """Who is making the request, resolved once per request"""
    user_id: Optional[str] = None
    verified: bool = False

    @property
    def is_anonymous(self) -> bool:
        return not self.user_id

def verify_supabase_token(token: str):
    """Verify Supabase JWT token"""
    try:
        user = get_supabase_client().auth.get_user(token)
        if user and user.user:
            return user.user
        return None
    except Exception as e:
        logging.error(f"Supabase token verification failed: {e}")
        return None

async def get_token_user(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)):
    """Get user from a bearer token, or None when no token was sent"""
    if not credentials:
        return None

    user = verify_supabase_token(credentials.credentials)
    if user:
        return {
            "id": user.id,
            "email": user.email,
            "metadata": user.user_metadata
        }

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials"
    )

def resolve_caller(token_user: Optional[dict], body_user_id: Optional[str] = None,
                   query_user_id: Optional[str] = None) -> Caller:
    """Pick the caller identity: verified token, then body userId, then query userId"""
    if token_user and token_user.get("id"):
        return Caller(user_id=token_user["id"], verified=True)
    for claimed in (body_user_id, query_user_id):
        if claimed and claimed.strip():
            return Caller(user_id=claimed.strip())
    return Caller()

async def get_caller(token_user: Optional[dict] = Depends(get_token_user),
                     body_user_id: Optional[str] = Body(None, embed=True, alias="userId"),
                     user_id: Optional[str] = Query(None, alias="userId")) -> Caller:
    """Caller for endpoints whose only body field is an optional userId"""
    return resolve_caller(token_user, body_user_id, user_id)
