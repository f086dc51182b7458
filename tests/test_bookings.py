import pytest
from conftest import auth_header

from doctors_portal.modules.bookings import repository as bookings_repo
from doctors_portal.modules.bookings.models import Booking

BOOKING = {
    "appointmentDate": "2024-01-10",
    "treatment": "Cardiology",
    "slot": "10:00 AM",
    "email": "a@x.com",
    "patient": "Alice",
    "phone": "+15550100",
    "price": 99,
}


async def test_create_booking_returns_inserted_id(client, count_rows):
    resp = await client.post("/bookings", json=BOOKING)

    assert resp.status_code == 200
    body = resp.json()
    assert body["acknowledged"] is True
    assert body["insertedId"]
    assert await count_rows(Booking) == 1


async def test_second_identical_booking_is_acknowledged_false(client, count_rows):
    first = await client.post("/bookings", json=BOOKING)
    second = await client.post("/bookings", json=BOOKING)

    assert second.status_code == 200
    body = second.json()
    assert body["acknowledged"] is False
    assert "2024-01-10" in body["message"]
    assert await count_rows(Booking) == 1

    stored = await client.get(f"/bookings/{first.json()['insertedId']}")
    assert stored.json()["slot"] == "10:00 AM"


async def test_duplicate_check_ignores_slot(client):
    await client.post("/bookings", json=BOOKING)

    other_slot = await client.post("/bookings", json={**BOOKING, "slot": "11:00 AM"})

    assert other_slot.json()["acknowledged"] is False


async def test_same_patient_other_treatment_or_date_is_allowed(client, count_rows):
    await client.post("/bookings", json=BOOKING)

    r1 = await client.post("/bookings", json={**BOOKING, "treatment": "Dermatology"})
    r2 = await client.post("/bookings", json={**BOOKING, "appointmentDate": "2024-01-11"})

    assert r1.json()["acknowledged"] is True
    assert r2.json()["acknowledged"] is True
    assert await count_rows(Booking) == 3


async def test_two_patients_can_take_the_same_slot(client, count_rows):
    r1 = await client.post("/bookings", json=BOOKING)
    r2 = await client.post("/bookings", json={**BOOKING, "email": "b@x.com"})

    assert r1.json()["acknowledged"] is True
    assert r2.json()["acknowledged"] is True
    assert await count_rows(Booking) == 2


async def test_get_booking_by_id(client):
    created = await client.post("/bookings", json=BOOKING)
    booking_id = created.json()["insertedId"]

    resp = await client.get(f"/bookings/{booking_id}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["_id"] == booking_id
    assert body["appointmentDate"] == "2024-01-10"
    assert body["paid"] is False
    assert body["transactionId"] is None


async def test_get_missing_booking_is_null(client):
    resp = await client.get("/bookings/6f1c1e7e-0000-4000-8000-000000000000")

    assert resp.status_code == 200
    assert resp.json() is None


async def test_get_booking_with_malformed_id_reports_error_in_payload(client):
    resp = await client.get("/bookings/not-an-id")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is False
    assert "not-an-id" in body["error"]


async def test_my_bookings_requires_header(client):
    resp = await client.get("/bookings", params={"email": "a@x.com"})

    assert resp.status_code == 401
    assert resp.json() == {"message": "Unauthorized Access"}


async def test_my_bookings_rejects_bad_token(client):
    resp = await client.get(
        "/bookings",
        params={"email": "a@x.com"},
        headers={"Authorization": "Bearer not.a.jwt"},
    )

    assert resp.status_code == 403


async def test_my_bookings_rejects_expired_token(client):
    resp = await client.get(
        "/bookings",
        params={"email": "a@x.com"},
        headers=auth_header("a@x.com", expires_minutes=-5),
    )

    assert resp.status_code == 403


async def test_my_bookings_rejects_token_signed_with_other_secret(client):
    resp = await client.get(
        "/bookings",
        params={"email": "a@x.com"},
        headers=auth_header("a@x.com", secret="someone-else"),
    )

    assert resp.status_code == 403


async def test_my_bookings_for_other_email_is_forbidden(client):
    await client.post("/bookings", json=BOOKING)

    resp = await client.get(
        "/bookings", params={"email": "a@x.com"}, headers=auth_header("b@x.com")
    )

    assert resp.status_code == 403


async def test_my_bookings_lists_only_own(client):
    await client.post("/bookings", json=BOOKING)
    await client.post("/bookings", json={**BOOKING, "treatment": "Dermatology"})
    await client.post("/bookings", json={**BOOKING, "email": "b@x.com"})

    resp = await client.get(
        "/bookings", params={"email": "a@x.com"}, headers=auth_header("a@x.com")
    )

    assert resp.status_code == 200
    assert sorted(b["treatment"] for b in resp.json()) == ["Cardiology", "Dermatology"]
    assert {b["email"] for b in resp.json()} == {"a@x.com"}


async def test_booking_missing_fields_is_422(client):
    resp = await client.post("/bookings", json={"treatment": "Cardiology"})

    assert resp.status_code == 422


async def test_unique_constraint_raises_duplicate_error(session_factory, add_booking):
    fields = {"appointment_date": "2024-01-10", "treatment": "Cardiology", "slot": "10:00 AM", "email": "a@x.com"}
    await add_booking(**fields)

    async with session_factory() as session:
        with pytest.raises(bookings_repo.DuplicateBookingError):
            await bookings_repo.create_booking(session, **{**fields, "slot": "11:00 AM"})


async def test_constraint_race_is_acknowledged_false(client, monkeypatch, count_rows):
    async def nothing_booked(session, **kwargs):
        return []

    # both requests pass the pre-insert check
    monkeypatch.setattr(bookings_repo, "find_existing", nothing_booked)

    first = await client.post("/bookings", json=BOOKING)
    second = await client.post("/bookings", json=BOOKING)

    assert first.json()["acknowledged"] is True
    assert second.status_code == 200
    assert second.json() == {"acknowledged": False, "message": "You already have a booking on 2024-01-10"}
    assert await count_rows(Booking) == 1
