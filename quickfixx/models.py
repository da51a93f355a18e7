import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON

from .db import Base

SINGLETON_ID = "1"


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(String(36), primary_key=True, default=_new_id)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
    # bumped to revoke every session token issued so far
    session_version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class StaffUser(Base):
    __tablename__ = "staff_users"

    id = Column(String(36), primary_key=True, default=_new_id)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)
    image_url = Column(String, nullable=False)
    image_urls = Column(JSON, nullable=False, default=list)
    category = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class Package(Base):
    __tablename__ = "packages"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    original_price = Column(Integer, nullable=False)
    discounted_price = Column(Integer, nullable=False)
    features = Column(JSON, nullable=False, default=list)
    is_popular = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class Staff(Base):
    __tablename__ = "staff"

    id = Column(String(36), primary_key=True, default=_new_id)
    employee_id = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    bio = Column(Text, nullable=False)
    image_url = Column(String, nullable=False)
    expertise = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class Gallery(Base):
    __tablename__ = "gallery"

    id = Column(String(36), primary_key=True, default=_new_id)
    before_image_url = Column(String, nullable=True)
    after_image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(String(36), primary_key=True, default=_new_id)
    customer_name = Column(String, nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    service_type = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=_new_id)
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False, index=True)
    customer_email = Column(String, nullable=True)
    customer_address = Column(Text, nullable=False)
    latitude = Column(String, nullable=True)
    longitude = Column(String, nullable=True)
    service_type = Column(String, nullable=False)
    preferred_date = Column(String, nullable=False)
    preferred_time = Column(String, nullable=False)
    details = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="pending")  # pending/confirmed/completed/cancelled
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(String(36), primary_key=True, default=SINGLETON_ID)
    phone = Column(String, nullable=False)
    whatsapp = Column(String, nullable=False)
    email = Column(String, nullable=False)
    facebook = Column(String, nullable=False)
    instagram = Column(String, nullable=False)
    tiktok = Column(String, nullable=True, default="")
    linkedin = Column(String, nullable=True, default="")
    twitter = Column(String, nullable=True, default="")
    youtube = Column(String, nullable=True, default="")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)


class Branding(Base):
    __tablename__ = "branding"

    id = Column(String(36), primary_key=True, default=SINGLETON_ID)
    brand_name = Column(String, nullable=False, default="Quickfixx")
    logo_url = Column(String, nullable=True, default="")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)
