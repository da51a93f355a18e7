"""Site content managed from the back-office.

Services, packages, staff, gallery and testimonials share one shape: a
public listing (optionally active-only), a public detail view, and
admin-only create / partial update / delete.
"""
from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_db
from ..models import AdminUser
from ..schemas import (
    GALLERY_MEDIA_REQUIRED,
    has_media,
    CreateService, UpdateService, ServiceOut,
    CreatePackage, UpdatePackage, PackageOut,
    CreateStaff, UpdateStaff, StaffOut,
    CreateGallery, UpdateGallery, GalleryOut,
    CreateTestimonial, UpdateTestimonial, TestimonialOut,
)
from ..security import get_current_admin
from ..storage import (
    ActiveRepository,
    ServiceRepository,
    PackageRepository,
    StaffRepository,
    GalleryRepository,
    TestimonialRepository,
)

# (current row, pending changes) -> error message or None
MergedCheck = Callable[[object, dict], Optional[str]]


def catalog_router(
    *,
    path: str,
    repo: Type[ActiveRepository],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    not_found: str,
    tag: str,
    check_merged: MergedCheck | None = None,
) -> APIRouter:
    router = APIRouter(prefix=path, tags=[tag])

    @router.get("", response_model=List[out_schema])
    async def list_items(
        active: Optional[str] = Query(None, description="\"true\" to return only active entries"),
        db: AsyncSession = Depends(get_db),
    ):
        return await repo(db).list_filtered(active == "true")

    @router.get("/{id}", response_model=out_schema)
    async def get_item(id: str, db: AsyncSession = Depends(get_db)):
        item = await repo(db).get(id)
        if not item:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.post("", status_code=201, response_model=out_schema)
    async def create_item(
        data: create_schema,
        _: AdminUser = Depends(get_current_admin),
        db: AsyncSession = Depends(get_db),
    ):
        return await repo(db).create(data.model_dump())

    @router.patch("/{id}", response_model=out_schema)
    async def update_item(
        id: str,
        data: update_schema,
        _: AdminUser = Depends(get_current_admin),
        db: AsyncSession = Depends(get_db),
    ):
        items = repo(db)
        changes = data.changes()

        if check_merged:
            current = await items.get(id)
            if not current:
                raise HTTPException(status_code=404, detail=not_found)
            problem = check_merged(current, changes)
            if problem:
                raise HTTPException(status_code=400, detail=problem)

        item = await items.update(id, changes)
        if not item:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.delete("/{id}", status_code=204)
    async def delete_item(
        id: str,
        _: AdminUser = Depends(get_current_admin),
        db: AsyncSession = Depends(get_db),
    ):
        if not await repo(db).delete(id):
            raise HTTPException(status_code=404, detail=not_found)
        return Response(status_code=204)

    return router


def _package_prices(current, changes: dict) -> Optional[str]:
    original = changes.get("original_price", current.original_price)
    discounted = changes.get("discounted_price", current.discounted_price)
    if discounted > original:
        return "Discounted price cannot exceed original price"
    return None


def _gallery_media(current, changes: dict) -> Optional[str]:
    media = [
        changes.get(field, getattr(current, field))
        for field in ("before_image_url", "after_image_url", "video_url")
    ]
    if not has_media(*media):
        return GALLERY_MEDIA_REQUIRED
    return None


services_router = catalog_router(
    path="/services",
    repo=ServiceRepository,
    create_schema=CreateService,
    update_schema=UpdateService,
    out_schema=ServiceOut,
    not_found="Service not found",
    tag="Services",
)

packages_router = catalog_router(
    path="/packages",
    repo=PackageRepository,
    create_schema=CreatePackage,
    update_schema=UpdatePackage,
    out_schema=PackageOut,
    not_found="Package not found",
    tag="Packages",
    check_merged=_package_prices,
)

staff_router = catalog_router(
    path="/staff",
    repo=StaffRepository,
    create_schema=CreateStaff,
    update_schema=UpdateStaff,
    out_schema=StaffOut,
    not_found="Staff member not found",
    tag="Staff",
)


@staff_router.get("/employee/{employee_id}", response_model=StaffOut)
async def get_staff_by_employee_id(employee_id: str, db: AsyncSession = Depends(get_db)):
    member = await StaffRepository(db).get_by_employee_id(employee_id)
    if not member:
        raise HTTPException(status_code=404, detail="Staff member not found")
    return member


gallery_router = catalog_router(
    path="/gallery",
    repo=GalleryRepository,
    create_schema=CreateGallery,
    update_schema=UpdateGallery,
    out_schema=GalleryOut,
    not_found="Gallery item not found",
    tag="Gallery",
    check_merged=_gallery_media,
)

testimonials_router = catalog_router(
    path="/testimonials",
    repo=TestimonialRepository,
    create_schema=CreateTestimonial,
    update_schema=UpdateTestimonial,
    out_schema=TestimonialOut,
    not_found="Testimonial not found",
    tag="Testimonials",
)

routers = [
    services_router,
    packages_router,
    staff_router,
    gallery_router,
    testimonials_router,
]
