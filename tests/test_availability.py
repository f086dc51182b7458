from types import SimpleNamespace
from uuid import uuid4

import pytest
from conftest import auth_header

from doctors_portal.modules.catalog import service as catalog_svc
from doctors_portal.modules.catalog.models import AppointmentOption

SLOTS = ["08.00 AM", "09.00 AM", "10.00 AM", "11.00 AM"]


def _option(name, slots):
    return SimpleNamespace(id=uuid4(), name=name, price=99.0, slots=list(slots))


def _booking(date, treatment, slot, email="p@x.com"):
    return SimpleNamespace(appointment_date=date, treatment=treatment, slot=slot, email=email)


def test_resolve_removes_booked_slots_in_order():
    options = [_option("Cardiology", SLOTS)]
    bookings = [
        _booking("Jan 10, 2024", "Cardiology", "09.00 AM"),
        _booking("Jan 10, 2024", "Cardiology", "11.00 AM", email="q@x.com"),
    ]

    [result] = catalog_svc.resolve_availability(options, bookings, "Jan 10, 2024")

    assert result.slots == ["08.00 AM", "10.00 AM"]


def test_resolve_ignores_other_dates_and_treatments():
    options = [_option("Cardiology", SLOTS), _option("Dermatology", SLOTS)]
    bookings = [
        _booking("Jan 11, 2024", "Cardiology", "08.00 AM"),
        _booking("Jan 10, 2024", "Dermatology", "08.00 AM"),
    ]

    cardio, derma = catalog_svc.resolve_availability(options, bookings, "Jan 10, 2024")

    assert cardio.slots == SLOTS
    assert derma.slots == SLOTS[1:]


def test_resolve_compares_dates_verbatim():
    options = [_option("Cardiology", SLOTS)]
    bookings = [_booking("2024-01-10", "Cardiology", "08.00 AM")]

    [result] = catalog_svc.resolve_availability(options, bookings, "Jan 10, 2024")

    assert result.slots == SLOTS


def test_resolve_fully_booked_option_keeps_entry():
    options = [_option("Cardiology", ["08.00 AM"])]
    bookings = [_booking("d", "Cardiology", "08.00 AM")]

    [result] = catalog_svc.resolve_availability(options, bookings, "d")

    assert result.name == "Cardiology"
    assert result.slots == []


async def _seed(add_option, add_booking):
    await add_option("Cardiology", SLOTS)
    await add_option("Dermatology", ["01.00 PM", "02.00 PM"])
    await add_option("Neurology", ["09.00 AM"])
    await add_option("Empty", [])
    await add_booking(appointment_date="Jan 10, 2024", treatment="Cardiology", slot="09.00 AM", email="a@x.com")
    await add_booking(appointment_date="Jan 10, 2024", treatment="Cardiology", slot="10.00 AM", email="b@x.com")
    await add_booking(appointment_date="Jan 10, 2024", treatment="Neurology", slot="09.00 AM", email="a@x.com")
    await add_booking(appointment_date="Jan 11, 2024", treatment="Dermatology", slot="01.00 PM", email="a@x.com")
    # booking for a treatment that is not in the catalog
    await add_booking(appointment_date="Jan 10, 2024", treatment="Unknown", slot="08.00 AM", email="c@x.com")


async def test_appointment_options_endpoint(client, add_option, add_booking):
    await _seed(add_option, add_booking)

    resp = await client.get("/appointmentOptions", params={"date": "Jan 10, 2024"})

    assert resp.status_code == 200
    by_name = {o["name"]: o for o in resp.json()}
    assert by_name["Cardiology"]["slots"] == ["08.00 AM", "11.00 AM"]
    assert by_name["Dermatology"]["slots"] == ["01.00 PM", "02.00 PM"]
    assert by_name["Neurology"]["slots"] == []
    assert by_name["Empty"]["slots"] == []
    assert set(by_name["Cardiology"]) == {"_id", "name", "price", "slots"}


@pytest.mark.parametrize("date", ["Jan 10, 2024", "Jan 11, 2024", "Jan 12, 2024", None])
async def test_store_side_availability_matches_app_side(client, add_option, add_booking, date):
    await _seed(add_option, add_booking)
    params = {"date": date} if date else {}

    v1 = await client.get("/appointmentOptions", params=params)
    v2 = await client.get("/v2/appointmentOptions", params=params)

    assert v1.status_code == v2.status_code == 200
    assert v1.json() == v2.json()
    assert len(v1.json()) == 4


async def test_store_side_keeps_duplicate_labels_like_app_side(session_factory, add_option, add_booking):
    await add_option("Cardiology", ["08.00 AM", "08.00 AM", "09.00 AM"])
    await add_booking(appointment_date="d", treatment="Cardiology", slot="09.00 AM", email="a@x.com")

    async with session_factory() as session:
        app_side = await catalog_svc.list_available_options(session, "d")
        store_side = await catalog_svc.query_available_options(session, "d")

    assert [o.slots for o in app_side] == [["08.00 AM", "08.00 AM"]]
    assert app_side == store_side


async def test_specialty_lists_names_only(client, add_option):
    await add_option("Cardiology", SLOTS)
    await add_option("Dermatology", SLOTS)

    resp = await client.get("/specialty")

    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Cardiology", "Dermatology"]
    assert set(resp.json()[0]) == {"_id", "name"}


async def test_admin_adds_and_removes_catalog_entries(client, admin_headers, count_rows):
    body = {"name": "Oral Surgery", "price": 120, "slots": ["08.00 AM", "08.30 AM"]}

    created = await client.post("/appointmentOptions", json=body, headers=admin_headers)
    assert created.status_code == 200
    assert created.json()["acknowledged"] is True

    again = await client.post("/appointmentOptions", json=body, headers=admin_headers)
    assert again.json()["acknowledged"] is False
    assert await count_rows(AppointmentOption) == 1

    listed = await client.get("/appointmentOptions", params={"date": "x"})
    assert listed.json()[0]["slots"] == ["08.00 AM", "08.30 AM"]

    option_id = created.json()["insertedId"]
    deleted = await client.delete(f"/appointmentOptions/{option_id}", headers=admin_headers)
    assert deleted.json() == {"acknowledged": True, "deletedCount": 1}
    assert await count_rows(AppointmentOption) == 0


async def test_catalog_changes_need_admin(client, add_user):
    await add_user("patient@x.com")
    body = {"name": "Oral Surgery", "price": 120, "slots": []}

    no_header = await client.post("/appointmentOptions", json=body)
    not_admin = await client.post("/appointmentOptions", json=body, headers=auth_header("patient@x.com"))

    assert no_header.status_code == 401
    assert not_admin.status_code == 403


async def test_padded_date_is_matched_verbatim(client, add_option):
    await add_option("Cardiology", ["10.00 AM", "11.00 AM"])
    booked = await client.post(
        "/bookings",
        json={"appointmentDate": " 2024-01-10", "treatment": "Cardiology", "slot": "10.00 AM", "email": "a@x.com"},
    )
    assert booked.json()["acknowledged"] is True

    padded = {"date": " 2024-01-10"}
    v1 = await client.get("/appointmentOptions", params=padded)
    v2 = await client.get("/v2/appointmentOptions", params=padded)
    plain = await client.get("/appointmentOptions", params={"date": "2024-01-10"})

    assert v1.json()[0]["slots"] == ["11.00 AM"]
    assert v2.json() == v1.json()
    assert plain.json()[0]["slots"] == ["10.00 AM", "11.00 AM"]
