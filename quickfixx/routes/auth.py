import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_db
from ..models import AdminUser
from ..schemas import (
    Login,
    RegisterAdmin,
    ChangePassword,
    SessionUser,
    Message,
    CreateStaffUser,
    StaffUserOut,
)
from ..security import (
    hash_password,
    verify_password,
    start_session,
    end_session,
    get_optional_admin,
    get_current_admin,
)
from ..storage import AdminUserRepository, StaffUserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/auth/login", response_model=SessionUser, tags=["Auth"])
async def login(data: Login, response: Response, db: AsyncSession = Depends(get_db)):
    admin = await AdminUserRepository(db).get_by_username(data.username)

    if not admin or not verify_password(data.password, admin.password):
        logger.info("failed login for %r", data.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    start_session(response, admin)
    return {"user": admin}


@router.post("/auth/logout", response_model=Message, tags=["Auth"])
async def logout(
    response: Response,
    admin: AdminUser | None = Depends(get_optional_admin),
    db: AsyncSession = Depends(get_db),
):
    if admin:
        await AdminUserRepository(db).revoke_sessions(admin.id)
    end_session(response)
    return {"message": "Logged out successfully"}


@router.get("/auth/me", response_model=SessionUser, tags=["Auth"])
async def me(admin: AdminUser | None = Depends(get_optional_admin)):
    if not admin:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return {"user": admin}


@router.post("/auth/register", status_code=201, response_model=Message, tags=["Auth"])
async def register(data: RegisterAdmin, db: AsyncSession = Depends(get_db)):
    await AdminUserRepository(db).create({
        "username": data.username,
        "password": hash_password(data.password),
    })
    logger.info("admin user %r registered", data.username)
    return {"message": "Admin user created successfully"}


@router.patch("/auth/change-password", response_model=Message, tags=["Auth"])
async def change_password(
    data: ChangePassword,
    response: Response,
    admin: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not verify_password(data.current_password, admin.password):
        raise HTTPException(status_code=401, detail="Current password is incorrect")

    updated = await AdminUserRepository(db).update_password(admin.id, hash_password(data.new_password))
    if not updated:
        raise HTTPException(status_code=404, detail="Admin not found")

    # older tokens are now stale; keep the caller signed in
    start_session(response, updated)
    return {"message": "Password changed successfully"}


# ---- staff login accounts ----

@router.get("/staff-accounts", response_model=list[StaffUserOut], tags=["Staff accounts"])
async def list_staff_accounts(
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await StaffUserRepository(db).list()


@router.post("/staff-accounts", status_code=201, response_model=StaffUserOut, tags=["Staff accounts"])
async def create_staff_account(
    data: CreateStaffUser,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await StaffUserRepository(db).create({
        **data.model_dump(),
        "password": hash_password(data.password),
    })


@router.delete("/staff-accounts/{id}", status_code=204, tags=["Staff accounts"])
async def delete_staff_account(
    id: str,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await StaffUserRepository(db).delete(id):
        raise HTTPException(status_code=404, detail="Staff account not found")
    return Response(status_code=204)
