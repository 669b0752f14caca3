from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all SQLAlchemy models."""


class Course(Base):
    __tablename__ = "course"

    # Course code such as "HDSE"
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free text, e.g. "2 Years"
    duration: Mapped[str] = mapped_column(String(64), nullable=False)
