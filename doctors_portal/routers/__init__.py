from . import health
from . import auth
from . import appointment_options
from . import bookings
from . import doctors
from . import payments
from . import users

__all__ = ["health", "auth", "appointment_options", "bookings", "doctors", "payments", "users"]
