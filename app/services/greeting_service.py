"""Greeting lookup for the hello endpoint."""

import logging
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.greeting import GREETING_ID, HelloWorld
from app.schemas.system import HelloResponse

logger = logging.getLogger(__name__)


class GreetingService:
    """Reads and seeds the single greeting row."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        default_message: str,
    ):
        self.session_factory = session_factory
        self.default_message = default_message

    async def get_hello(self) -> HelloResponse:
        """Return the stored greeting, or the default when the row is missing."""
        async with self.session_factory() as session:
            greeting = await session.get(HelloWorld, GREETING_ID)

        return HelloResponse(
            message=greeting.message if greeting else self.default_message,
            source="database",
            timestamp=datetime.now(UTC),
        )

    async def seed(self) -> bool:
        """Insert the default greeting if absent. Returns True when inserted."""
        async with self.session_factory() as session:
            if await session.get(HelloWorld, GREETING_ID) is not None:
                return False

            session.add(HelloWorld(id=GREETING_ID, message=self.default_message))
            await session.commit()

        logger.info("Seeded hello_world greeting")
        return True
