# doctors_portal/main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doctors_portal.core.config import Settings, settings as default_settings
from doctors_portal.core.errors import register_exception_handlers
from doctors_portal.db.sql import build_engine, build_session_factory, init_db
from doctors_portal.modules.payments.gateway import PaymentGateway, StripeGateway
from doctors_portal.routers import (
    appointment_options,
    auth,
    bookings,
    doctors,
    health,
    payments,
    users,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    *,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    """
    Build the API. Store and gateway handles are acquired once in the
    lifespan and shared through ``app.state``.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Doctors Portal API (%s)...", settings.APP_ENV)
        engine = build_engine(settings)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        app.state.payment_gateway = payment_gateway or StripeGateway(settings)
        if settings.DB_CREATE_ALL:
            await init_db(engine)
            logger.info("Database initialized successfully")
        yield
        logger.info("Shutting down Doctors Portal API...")
        await engine.dispose()

    app = FastAPI(title="Doctors Portal API", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routing
    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router)
    app.include_router(doctors.router)
    app.include_router(appointment_options.router)
    app.include_router(bookings.router)
    app.include_router(users.router)
    app.include_router(payments.router)
    return app


configure_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", default_settings.PORT))
    uvicorn.run(app, host="0.0.0.0", port=port)
