from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import mapped_column, Mapped
from models import Base
from typing import Optional


class CallHistory(Base):
    """One row per call webhook received from VanillaSoft. Append-only."""
    __tablename__ = "call_history"

    # SQLite only auto-increments INTEGER primary keys
    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    contact_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    call_date_utc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    result_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    result_group: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    time_offset: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    event_date_utc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    modified_utc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    scheduled_call_username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    call_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
