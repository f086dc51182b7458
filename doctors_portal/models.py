# doctors_portal/models.py
# Import every ORM model so Base.metadata knows all tables
# (used by init_db, init_db.py and the Alembic environment).
from doctors_portal.modules.bookings.models import Booking
from doctors_portal.modules.catalog.models import AppointmentOption, AppointmentSlot
from doctors_portal.modules.doctors.models import Doctor
from doctors_portal.modules.payments.models import Payment
from doctors_portal.modules.users.models import AuditLog, User

__all__ = [
    "AppointmentOption",
    "AppointmentSlot",
    "AuditLog",
    "Booking",
    "Doctor",
    "Payment",
    "User",
]
