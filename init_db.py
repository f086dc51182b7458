# init_db.py
import asyncio
import logging

from doctors_portal.core.config import settings
from doctors_portal.db.sql import build_engine, build_session_factory, init_db
from doctors_portal.modules.catalog import repository as catalog_repo

logger = logging.getLogger("init_db")

STANDARD_SLOTS = [
    "08.00 AM - 08.30 AM",
    "08.30 AM - 09.00 AM",
    "09.00 AM - 09.30 AM",
    "09.30 AM - 10.00 AM",
    "10.00 AM - 10.30 AM",
    "10.30 AM - 11.00 AM",
    "11.00 AM - 11.30 AM",
    "11.30 AM - 12.00 PM",
    "01.00 PM - 01.30 PM",
    "01.30 PM - 02.00 PM",
    "02.00 PM - 02.30 PM",
    "02.30 PM - 03.00 PM",
    "03.00 PM - 03.30 PM",
    "03.30 PM - 04.00 PM",
    "04.00 PM - 04.30 PM",
    "04.30 PM - 05.00 PM",
]

DEFAULT_CATALOG = [
    ("Teeth Orthodontics", 99.0),
    ("Cosmetic Dentistry", 99.0),
    ("Teeth Cleaning", 99.0),
    ("Cavity Protection", 99.0),
    ("Pediatric Dental", 99.0),
    ("Oral Surgery", 99.0),
]


async def init_models():
    engine = build_engine(settings)
    await init_db(engine, drop=True)

    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        for name, price in DEFAULT_CATALOG:
            await catalog_repo.create_option(session, name=name, price=price, slots=STANDARD_SLOTS)
        await session.commit()

    await engine.dispose()
    logger.info("Database schema recreated and %d appointment options seeded", len(DEFAULT_CATALOG))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_models())
