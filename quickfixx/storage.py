"""Repositories over the async session.

Every write commits on its own; a missing id is reported as ``None`` or
``False`` and never raised. Database faults (unique violations and the like)
propagate to the caller.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select, delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession

from .models import (
    SINGLETON_ID,
    AdminUser,
    StaffUser,
    Service,
    Package,
    Staff,
    Gallery,
    Testimonial,
    Booking,
    ContactInfo,
    Branding,
)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> List[ModelT]:
        res = await self.db.execute(select(self.model))
        return list(res.scalars().all())

    async def get(self, id: str) -> Optional[ModelT]:
        res = await self.db.execute(select(self.model).where(self.model.id == id))
        return res.scalar_one_or_none()

    async def create(self, data: dict) -> ModelT:
        obj = self.model(**data)
        self.db.add(obj)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return obj

    async def update(self, id: str, data: dict) -> Optional[ModelT]:
        obj = await self.get(id)
        if not obj:
            return None

        for key, value in data.items():
            setattr(obj, key, value)

        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return obj

    async def delete(self, id: str) -> bool:
        res = await self.db.execute(sa_delete(self.model).where(self.model.id == id))
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return (res.rowcount or 0) > 0


class ActiveRepository(Repository[ModelT]):
    async def list_active(self) -> List[ModelT]:
        res = await self.db.execute(select(self.model).where(self.model.is_active.is_(True)))
        return list(res.scalars().all())

    async def list_filtered(self, active_only: bool) -> List[ModelT]:
        return await self.list_active() if active_only else await self.list()


class AdminUserRepository(Repository[AdminUser]):
    model = AdminUser

    async def get_by_username(self, username: str) -> Optional[AdminUser]:
        res = await self.db.execute(select(AdminUser).where(AdminUser.username == username))
        return res.scalar_one_or_none()

    async def update_password(self, id: str, password_hash: str) -> Optional[AdminUser]:
        admin = await self.get(id)
        if not admin:
            return None
        return await self.update(id, {
            "password": password_hash,
            "session_version": admin.session_version + 1,
        })

    async def revoke_sessions(self, id: str) -> Optional[AdminUser]:
        admin = await self.get(id)
        if not admin:
            return None
        return await self.update(id, {"session_version": admin.session_version + 1})


class StaffUserRepository(Repository[StaffUser]):
    model = StaffUser

    async def get_by_username(self, username: str) -> Optional[StaffUser]:
        res = await self.db.execute(select(StaffUser).where(StaffUser.username == username))
        return res.scalar_one_or_none()


class ServiceRepository(ActiveRepository[Service]):
    model = Service


class PackageRepository(ActiveRepository[Package]):
    model = Package


class StaffRepository(ActiveRepository[Staff]):
    model = Staff

    async def get_by_employee_id(self, employee_id: str) -> Optional[Staff]:
        res = await self.db.execute(select(Staff).where(Staff.employee_id == employee_id))
        return res.scalar_one_or_none()


class GalleryRepository(ActiveRepository[Gallery]):
    model = Gallery


class TestimonialRepository(ActiveRepository[Testimonial]):
    model = Testimonial


class BookingRepository(Repository[Booking]):
    model = Booking

    async def create(self, data: dict) -> Booking:
        # status is never client-controlled on submission
        return await super().create({**data, "status": "pending"})

    async def list_by_phone(self, phone: str) -> List[Booking]:
        res = await self.db.execute(select(Booking).where(Booking.customer_phone == phone))
        return list(res.scalars().all())

    async def update_status(self, id: str, status: str) -> Optional[Booking]:
        return await self.update(id, {"status": status})


class SingletonRepository(Generic[ModelT]):
    """A table holding at most one row, keyed by ``SINGLETON_ID``."""

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> Optional[ModelT]:
        res = await self.db.execute(select(self.model).where(self.model.id == SINGLETON_ID))
        return res.scalar_one_or_none()

    async def upsert(self, data: dict) -> ModelT:
        obj: Any = await self.get()
        if obj is None:
            obj = self.model(id=SINGLETON_ID, **data)
            self.db.add(obj)
        else:
            for key, value in data.items():
                setattr(obj, key, value)

        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return obj


class ContactInfoRepository(SingletonRepository[ContactInfo]):
    model = ContactInfo


class BrandingRepository(SingletonRepository[Branding]):
    model = Branding
