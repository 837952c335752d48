"""Seeded greeting served by the hello endpoint."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.storage import Base

GREETING_ID = 1


class HelloWorld(Base):
    """Single-row table holding the hello message."""

    __tablename__ = "hello_world"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    message: Mapped[str] = mapped_column(String(255), nullable=False)
