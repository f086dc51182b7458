"""
Shared pytest fixtures.

Every test gets a fresh SQLite database (aiosqlite) and an app wired with a
fake payment gateway, driven through httpx over ASGI.
"""
from typing import AsyncGenerator, Optional

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from doctors_portal.core.config import Settings
from doctors_portal.core.errors import PaymentGatewayError
from doctors_portal.core.security import create_access_token
from doctors_portal.db.sql import build_engine, build_session_factory, init_db
from doctors_portal.main import create_app
from doctors_portal.modules.bookings.models import Booking
from doctors_portal.modules.catalog.models import AppointmentOption
from doctors_portal.modules.users.models import User


class FakeGateway:
    def __init__(self):
        self.calls = []
        self.fail_with: Optional[str] = None

    async def create_card_intent(self, *, amount: int, currency: str) -> str:
        if self.fail_with:
            raise PaymentGatewayError(self.fail_with)
        self.calls.append({"amount": amount, "currency": currency})
        return f"pi_test_{len(self.calls)}_secret_abc"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        APP_ENV="test",
        SQL_DSN=f"sqlite+aiosqlite:///{tmp_path / 'portal.db'}",
        STRIPE_SECRET_KEY="",
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest_asyncio.fixture
async def app(settings, gateway):
    application = create_app(settings, payment_gateway=gateway)

    # ASGITransport does not run the lifespan, bind the handles here
    engine = build_engine(settings)
    await init_db(engine)
    application.state.engine = engine
    application.state.session_factory = build_session_factory(engine)
    application.state.payment_gateway = gateway
    yield application
    await engine.dispose()


@pytest.fixture
def session_factory(app) -> async_sessionmaker[AsyncSession]:
    return app.state.session_factory


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ============================================================================
# DATA HELPERS
# ============================================================================


@pytest.fixture
def add_user(session_factory):
    async def _add(email: str, role: Optional[str] = None, name: Optional[str] = None) -> User:
        async with session_factory() as session:
            user = User(email=email, role=role, name=name)
            session.add(user)
            await session.commit()
            return user

    return _add


@pytest.fixture
def add_option(session_factory):
    async def _add(name: str, slots: list, price: float = 99.0) -> AppointmentOption:
        async with session_factory() as session:
            option = AppointmentOption(name=name, price=price, slots=slots)
            session.add(option)
            await session.commit()
            return option

    return _add


@pytest.fixture
def add_booking(session_factory):
    async def _add(**fields) -> Booking:
        async with session_factory() as session:
            booking = Booking(paid=False, **fields)
            session.add(booking)
            await session.commit()
            return booking

    return _add


@pytest.fixture
def count_rows(session_factory):
    async def _count(model) -> int:
        async with session_factory() as session:
            return (await session.execute(select(func.count()).select_from(model))).scalar_one()

    return _count


def auth_header(email: str, **kwargs) -> dict:
    return {"Authorization": f"Bearer {create_access_token(email=email, **kwargs)}"}


@pytest_asyncio.fixture
async def admin_headers(add_user) -> dict:
    await add_user("admin@portal.com", role="admin")
    return auth_header("admin@portal.com")
