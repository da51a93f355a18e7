"""Fill an empty database with demo content.

    python -m quickfixx.seed

Sections whose table already has rows are left alone, so the command is
safe to re-run.
"""
import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .db import Base, SessionLocal, engine
from .logging_config import configure as configure_logging
from .models import AdminUser, Service, Package, Staff, Gallery, Testimonial
from .security import hash_password
from .storage import (
    AdminUserRepository,
    ServiceRepository,
    PackageRepository,
    StaffRepository,
    GalleryRepository,
    TestimonialRepository,
    ContactInfoRepository,
    BrandingRepository,
)

logger = logging.getLogger(__name__)

IMAGES = "/attached_assets/generated_images"
BEFORE_CABLE = f"{IMAGES}/before_cable_management.png"
AFTER_CABLE = f"{IMAGES}/after_cable_management.png"
BEFORE_CCTV = f"{IMAGES}/before_cctv_upgrade.png"
AFTER_CCTV = f"{IMAGES}/after_cctv_upgrade.png"
STAFF_1 = f"{IMAGES}/staff_member_1.png"
STAFF_2 = f"{IMAGES}/staff_member_2.png"
STAFF_3 = f"{IMAGES}/staff_member_3.png"

SERVICES = [
    {
        "title": "CCTV Installation",
        "description": "Professional security camera installation with remote viewing setup for complete peace of mind.",
        "price": 25000,
        "image_url": BEFORE_CCTV,
        "category": "Security",
    },
    {
        "title": "Smart Home Setup",
        "description": "Transform your home with smart devices, automated lighting, and voice control systems.",
        "price": 15000,
        "image_url": STAFF_1,
        "category": "Smart Home",
    },
    {
        "title": "IT Support",
        "description": "Business IT solutions including POS setup, network configuration, and computer troubleshooting.",
        "price": 10000,
        "image_url": STAFF_2,
        "category": "IT Support",
    },
    {
        "title": "Quick Fix Service",
        "description": "Fast on-call technician for electrical fixes, fan installation, and general home assistance.",
        "price": 2500,
        "image_url": STAFF_3,
        "category": "General",
    },
]

PACKAGES = [
    {
        "name": "CCTV Starter Pack",
        "description": "Perfect for small homes or offices",
        "original_price": 20000,
        "discounted_price": 15000,
        "features": ["4 IP cameras installation", "DVR/NVR setup", "Basic cable management", "Remote viewing setup", "1 month warranty"],
    },
    {
        "name": "Home Security Full Pack",
        "description": "Complete security solution for your home",
        "original_price": 45000,
        "discounted_price": 35000,
        "features": ["8 HD cameras installation", "16-channel NVR system", "Professional cable management", "Remote viewing via mobile app", "Motion detection alerts", "3 months warranty"],
        "is_popular": True,
    },
    {
        "name": "Business Premium Pack",
        "description": "Enterprise-grade security for businesses",
        "original_price": 80000,
        "discounted_price": 65000,
        "features": ["16 professional cameras", "Network video recorder", "Cloud storage integration", "24/7 remote monitoring", "Advanced analytics", "1 year warranty", "Priority support"],
    },
]

STAFF = [
    {
        "employee_id": "QF001",
        "name": "Rakib Ahmed",
        "role": "Lead Technician",
        "bio": "Certified CCTV specialist with 8+ years of experience in security systems and smart home installations.",
        "image_url": STAFF_1,
        "expertise": ["CCTV Installation", "Network Setup", "Smart Home Integration"],
    },
    {
        "employee_id": "QF002",
        "name": "Faisal Rahman",
        "role": "IT Support Specialist",
        "bio": "IT professional specializing in POS systems, computer troubleshooting, and business network solutions.",
        "image_url": STAFF_2,
        "expertise": ["POS Systems", "Computer Repair", "Network Configuration"],
    },
    {
        "employee_id": "QF003",
        "name": "Kamal Hossain",
        "role": "General Technician",
        "bio": "Versatile technician handling electrical repairs, fan installations, and general home maintenance.",
        "image_url": STAFF_3,
        "expertise": ["Electrical Work", "Fan Installation", "General Repairs"],
    },
]

GALLERY = [
    {
        "before_image_url": BEFORE_CABLE,
        "after_image_url": AFTER_CABLE,
        "title": "Cable Management Upgrade",
        "description": "Professional cable organization for CCTV system",
    },
    {
        "before_image_url": BEFORE_CCTV,
        "after_image_url": AFTER_CCTV,
        "title": "Security System Modernization",
        "description": "Complete CCTV system upgrade with HD cameras",
    },
]

TESTIMONIALS = [
    {
        "customer_name": "Mahmud Hasan",
        "rating": 5,
        "comment": "Excellent CCTV installation service! The team was professional and completed the job quickly.",
        "service_type": "CCTV Installation",
    },
    {
        "customer_name": "Sadia Akter",
        "rating": 5,
        "comment": "Quick Fixx transformed our home with smart devices. Everything works perfectly.",
        "service_type": "Smart Home Setup",
    },
    {
        "customer_name": "Jahangir Alam",
        "rating": 4,
        "comment": "Great IT support for our business. They set up our POS system efficiently.",
        "service_type": "IT Support",
    },
]

CONTACT = {
    "phone": "+880 1700-000000",
    "whatsapp": "+8801700000000",
    "email": "info@quickfixx.com",
    "facebook": "https://facebook.com/quickfixx",
    "instagram": "https://instagram.com/quickfixx",
}

BRANDING = {"brand_name": "Quickfixx", "logo_url": ""}

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


async def _is_empty(db: AsyncSession, model) -> bool:
    res = await db.execute(select(func.count()).select_from(model))
    return res.scalar_one() == 0


async def seed(db: AsyncSession):
    if await _is_empty(db, AdminUser):
        logger.info("creating admin user")
        await AdminUserRepository(db).create({
            "username": ADMIN_USERNAME,
            "password": hash_password(ADMIN_PASSWORD),
        })

    sections = [
        (Service, ServiceRepository, SERVICES),
        (Package, PackageRepository, PACKAGES),
        (Staff, StaffRepository, STAFF),
        (Gallery, GalleryRepository, GALLERY),
        (Testimonial, TestimonialRepository, TESTIMONIALS),
    ]
    for model, repo, rows in sections:
        if not await _is_empty(db, model):
            logger.info("skipping %s, already populated", model.__tablename__)
            continue
        logger.info("creating %d %s", len(rows), model.__tablename__)
        for row in rows:
            await repo(db).create(row)

    if not await ContactInfoRepository(db).get():
        await ContactInfoRepository(db).upsert(CONTACT)
    if not await BrandingRepository(db).get():
        await BrandingRepository(db).upsert(BRANDING)


async def main():
    configure_logging()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        await seed(db)

    await engine.dispose()
    logger.info("database seed completed")


if __name__ == "__main__":
    asyncio.run(main())
