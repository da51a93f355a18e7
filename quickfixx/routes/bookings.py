import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_db
from ..models import AdminUser
from ..schemas import CreateBooking, UpdateBookingStatus, BookingOut
from ..security import get_current_admin
from ..storage import BookingRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.get("", response_model=List[BookingOut])
async def list_bookings(
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await BookingRepository(db).list()


@router.post("", status_code=201, response_model=BookingOut)
async def create_booking(data: CreateBooking, db: AsyncSession = Depends(get_db)):
    booking = await BookingRepository(db).create(data.model_dump())
    logger.info("booking %s created for %s", booking.id, booking.service_type)
    return booking


@router.get("/search/phone/{phone}", response_model=List[BookingOut])
async def search_bookings_by_phone(phone: str, db: AsyncSession = Depends(get_db)):
    if not phone:
        raise HTTPException(status_code=400, detail="Phone number is required")
    return await BookingRepository(db).list_by_phone(phone)


@router.get("/{id}", response_model=BookingOut)
async def get_booking(
    id: str,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    booking = await BookingRepository(db).get(id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.patch("/{id}/status", response_model=BookingOut)
async def update_booking_status(
    id: str,
    data: UpdateBookingStatus,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not data.status:
        raise HTTPException(status_code=400, detail="Status is required")

    booking = await BookingRepository(db).update_status(id, data.status)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")

    logger.info("booking %s moved to %s", booking.id, booking.status)
    return booking


@router.delete("/{id}", status_code=204)
async def delete_booking(
    id: str,
    _: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await BookingRepository(db).delete(id):
        raise HTTPException(status_code=404, detail="Booking not found")
    return Response(status_code=204)
