from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from .config import (
    SESSION_SECRET,
    SESSION_ALGORITHM,
    SESSION_MAX_AGE_SECONDS,
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_SECURE,
)
from .db import get_db
from .models import AdminUser
from .storage import AdminUserRepository

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_session_token(admin_id: str, session_version: int = 0) -> str:
    expires = datetime.now(timezone.utc) + timedelta(seconds=SESSION_MAX_AGE_SECONDS)
    return jwt.encode(
        {"sub": admin_id, "ver": session_version, "exp": expires},
        SESSION_SECRET,
        algorithm=SESSION_ALGORITHM,
    )


def start_session(response: Response, admin: AdminUser) -> str:
    token = create_session_token(admin.id, admin.session_version)
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return token


def end_session(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME)


def _session_token(request: Request, creds: HTTPAuthorizationCredentials | None) -> str | None:
    if creds and creds.scheme.lower() == "bearer":
        return creds.credentials
    return request.cookies.get(SESSION_COOKIE_NAME)


async def get_optional_admin(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> AdminUser | None:
    token = _session_token(request, creds)
    if not token:
        return None

    try:
        payload = jwt.decode(token, SESSION_SECRET, algorithms=[SESSION_ALGORITHM])
    except JWTError:
        return None

    admin_id = payload.get("sub")
    if not admin_id:
        return None

    admin = await AdminUserRepository(db).get(admin_id)
    if not admin or payload.get("ver") != admin.session_version:
        return None

    request.state.user_sub = admin.username
    return admin


async def get_current_admin(admin: AdminUser | None = Depends(get_optional_admin)) -> AdminUser:
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return admin
