from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import mapped_column, Mapped
from models import Base
from typing import Optional


class Contact(Base):
    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    # VanillaSoft contact ID; the unique index backs INSERT IGNORE
    contact_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, unique=True, index=True)

    # Name and company
    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Postal address
    address1: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Firmographics
    annual_revenue: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    number_of_employees: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # JSON-encoded list
    number_of_owners: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    primary_sic_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    primary_sic_code_description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    classification: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    hvt: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    market: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # VanillaSoft bookkeeping
    modified_utc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_utc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_owner_username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    call_flag: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    closed_flag: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
