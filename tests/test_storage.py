import pytest
from sqlalchemy.exc import IntegrityError

from quickfixx import storage


def _staff(employee_id, **extra):
    return {
        "employee_id": employee_id,
        "name": "Rakib Ahmed",
        "role": "Lead Technician",
        "bio": "CCTV specialist",
        "image_url": "/img/staff1.png",
        "expertise": ["CCTV Installation"],
        **extra,
    }


def _booking(phone, **extra):
    return {
        "customer_name": "A",
        "customer_phone": phone,
        "customer_address": "X",
        "service_type": "quick-fix",
        "preferred_date": "2024-01-01",
        "preferred_time": "10:00:00",
        **extra,
    }


async def test_create_assigns_id_and_defaults(db):
    service = await storage.ServiceRepository(db).create({
        "title": "CCTV Installation",
        "description": "Cameras",
        "price": 25000,
        "image_url": "/img/cctv.png",
        "category": "Security",
    })

    assert service.id
    assert service.created_at is not None
    assert service.is_active is True
    assert service.image_urls == []


async def test_list_active_is_subset_of_list(db):
    repo = storage.TestimonialRepository(db)
    for i, active in enumerate([True, False, True]):
        await repo.create({
            "customer_name": f"Customer {i}",
            "rating": 5,
            "comment": "Great",
            "service_type": "General",
            "is_active": active,
        })

    everything = await repo.list()
    active = await repo.list_active()

    assert len(everything) == 3
    assert len(active) == 2
    assert {t.id for t in active} < {t.id for t in everything}
    assert all(t.is_active for t in active)


async def test_update_applies_only_given_fields(db):
    repo = storage.PackageRepository(db)
    pkg = await repo.create({
        "name": "Starter",
        "description": "Small homes",
        "original_price": 20000,
        "discounted_price": 15000,
        "features": ["4 cameras"],
    })

    updated = await repo.update(pkg.id, {"is_popular": True})

    assert updated.is_popular is True
    assert updated.name == "Starter"
    assert updated.discounted_price == 15000


async def test_missing_id_is_reported_not_raised(db):
    repo = storage.GalleryRepository(db)

    assert await repo.get("nope") is None
    assert await repo.update("nope", {"title": "x"}) is None
    assert await repo.delete("nope") is False


async def test_delete_removes_row(db):
    repo = storage.StaffRepository(db)
    member = await repo.create(_staff("QF010"))

    assert await repo.delete(member.id) is True
    assert await repo.get(member.id) is None
    assert await repo.delete(member.id) is False


async def test_failed_delete_commit_rolls_back(db, monkeypatch):
    repo = storage.StaffRepository(db)
    member_id = (await repo.create(_staff("QF011"))).id

    async def broken_commit():
        raise RuntimeError("connection lost")

    monkeypatch.setattr(db, "commit", broken_commit)
    with pytest.raises(RuntimeError):
        await repo.delete(member_id)
    monkeypatch.undo()

    # the pending DELETE was discarded, so the row is still there
    assert await repo.get(member_id) is not None


async def test_staff_lookup_by_employee_id_is_exact(db):
    repo = storage.StaffRepository(db)
    member = await repo.create(_staff("QF001"))

    found = await repo.get_by_employee_id("QF001")
    assert found is not None and found.id == member.id

    assert await repo.get_by_employee_id("qf001") is None
    assert await repo.get_by_employee_id("QF999") is None


async def test_duplicate_employee_id_propagates(db):
    repo = storage.StaffRepository(db)
    await repo.create(_staff("QF001"))

    with pytest.raises(IntegrityError):
        await repo.create(_staff("QF001", name="Someone Else"))

    # session is still usable after the failed write
    assert len(await repo.list()) == 1


async def test_booking_create_forces_pending(db):
    repo = storage.BookingRepository(db)
    booking = await repo.create(_booking("+8801000000000", status="completed"))

    assert booking.status == "pending"
    assert booking.id


async def test_bookings_by_phone_exact_match(db):
    repo = storage.BookingRepository(db)
    first = await repo.create(_booking("+8801000000000"))
    second = await repo.create(_booking("+8801000000000", details="second visit"))
    await repo.create(_booking("+8801999999999"))

    matches = await repo.list_by_phone("+8801000000000")

    assert {b.id for b in matches} == {first.id, second.id}
    assert await repo.list_by_phone("8801000000000") == []


async def test_booking_status_update_persists(db, session_factory):
    repo = storage.BookingRepository(db)
    booking = await repo.create(_booking("+8801000000000"))

    updated = await repo.update_status(booking.id, "confirmed")
    assert updated.status == "confirmed"

    async with session_factory() as other:
        fresh = await storage.BookingRepository(other).get(booking.id)
        assert fresh.status == "confirmed"

    assert await repo.update_status("missing", "confirmed") is None


async def test_singleton_upsert_keeps_one_row(db):
    repo = storage.BrandingRepository(db)
    assert await repo.get() is None

    first = await repo.upsert({"brand_name": "Quickfixx", "logo_url": ""})
    second = await repo.upsert({"brand_name": "Quick Fixx Pro", "logo_url": "/logo.png"})

    assert first.id == second.id == "1"
    current = await repo.get()
    assert current.brand_name == "Quick Fixx Pro"
    assert current.logo_url == "/logo.png"


async def test_admin_password_update(db, admin):
    repo = storage.AdminUserRepository(db)

    updated = await repo.update_password(admin.id, "new-hash")

    assert updated.password == "new-hash"
    assert (await repo.get_by_username("admin")).id == admin.id
    assert updated.session_version == 1


async def test_revoke_sessions_bumps_version(db, admin):
    repo = storage.AdminUserRepository(db)
    before = admin.session_version

    revoked = await repo.revoke_sessions(admin.id)

    assert revoked.session_version == before + 1
    assert await repo.revoke_sessions("missing") is None
