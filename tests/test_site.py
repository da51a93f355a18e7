import base64

CONTACT = {
    "phone": "+880 1700-000000",
    "whatsapp": "+8801700000000",
    "email": "info@quickfixx.com",
    "facebook": "https://facebook.com/quickfixx",
    "instagram": "https://instagram.com/quickfixx",
}


async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert "X-Request-Id" in r.headers


async def test_request_id_is_echoed(client):
    r = await client.get("/health", headers={"X-Request-Id": "abc-123"})
    assert r.headers["X-Request-Id"] == "abc-123"


async def test_contact_empty_then_upsert(admin_client):
    r = await admin_client.get("/api/contact")
    assert r.status_code == 200
    assert r.json() is None

    r = await admin_client.patch("/api/contact", json=CONTACT)
    assert r.status_code == 200
    assert r.json()["tiktok"] == ""
    assert r.json()["id"] == "1"

    r = await admin_client.patch("/api/contact", json={**CONTACT, "youtube": "https://youtube.com/@quickfixx"})
    assert r.status_code == 200

    r = await admin_client.get("/api/contact")
    body = r.json()
    assert body["youtube"] == "https://youtube.com/@quickfixx"
    assert body["email"] == CONTACT["email"]


async def test_contact_validation(admin_client):
    r = await admin_client.patch("/api/contact", json={**CONTACT, "email": "not-an-email"})
    assert r.status_code == 400
    assert r.json()["error"].startswith("email:")


async def test_contact_update_requires_admin(client):
    r = await client.patch("/api/contact", json=CONTACT)
    assert r.status_code == 401
    assert (await client.get("/api/contact")).json() is None


async def test_branding_defaults_and_update(admin_client):
    r = await admin_client.get("/api/branding")
    assert r.status_code == 200
    # nothing stored yet: no id or timestamp to report
    assert r.json() == {"brandName": "Quickfixx", "logoUrl": ""}

    r = await admin_client.patch("/api/branding", json={"brandName": "Quick Fixx BD", "logoUrl": "/logo.png"})
    assert r.status_code == 200

    r = await admin_client.get("/api/branding")
    assert r.json()["brandName"] == "Quick Fixx BD"
    assert r.json()["logoUrl"] == "/logo.png"


async def test_branding_requires_name(admin_client):
    r = await admin_client.patch("/api/branding", json={"brandName": ""})
    assert r.status_code == 400


async def test_staff_qr_code(client):
    r = await client.get("/api/qr/staff/QF001")
    assert r.status_code == 200
    body = r.json()
    assert body["url"] == "http://testserver/staff/QF001"

    prefix = "data:image/png;base64,"
    assert body["qrCode"].startswith(prefix)
    png = base64.b64decode(body["qrCode"][len(prefix):])
    assert png.startswith(b"\x89PNG")


async def test_qr_does_not_check_employee_exists(client):
    r = await client.get("/api/qr/staff/UNKNOWN42")
    assert r.status_code == 200
    assert r.json()["url"].endswith("/staff/UNKNOWN42")
