from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import DEFAULT_BRAND_NAME
from ..db import get_db
from ..models import AdminUser
from ..qr import staff_verification_url, to_png_data_url
from ..schemas import (
    UpsertContactInfo,
    ContactInfoOut,
    UpsertBranding,
    BrandingOut,
    StaffQrCode,
)
from ..security import get_current_admin
from ..storage import ContactInfoRepository, BrandingRepository

router = APIRouter()


@router.get("/contact", response_model=Optional[ContactInfoOut], tags=["Contact"])
async def get_contact(db: AsyncSession = Depends(get_db)):
    return await ContactInfoRepository(db).get()


@router.patch("/contact", response_model=ContactInfoOut, tags=["Contact"])
async def update_contact(
    data: UpsertContactInfo,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await ContactInfoRepository(db).upsert(data.model_dump())


@router.get("/branding", response_model=BrandingOut, response_model_exclude_none=True, tags=["Branding"])
async def get_branding(db: AsyncSession = Depends(get_db)):
    branding = await BrandingRepository(db).get()
    if not branding:
        return BrandingOut(brand_name=DEFAULT_BRAND_NAME, logo_url="")
    return branding


@router.patch("/branding", response_model=BrandingOut, tags=["Branding"])
async def update_branding(
    data: UpsertBranding,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await BrandingRepository(db).upsert(data.model_dump())


@router.get("/qr/staff/{employee_id}", response_model=StaffQrCode, tags=["Staff"])
async def staff_qr_code(employee_id: str, request: Request):
    url = staff_verification_url(request, employee_id)
    return StaffQrCode(qr_code=to_png_data_url(url), url=url)
