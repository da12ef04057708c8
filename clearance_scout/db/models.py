"""SQLAlchemy database models."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how every DateTime column is stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _new_id() -> str:
    return uuid4().hex


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class User(Base):
    """Subscription-relevant slice of a user account."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    zip_code: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    subscription_plan: Mapped[str] = mapped_column(String(32), default="free", nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    scans: Mapped[list["Scan"]] = relationship("Scan", back_populates="user")


class StoreLocation(Base):
    """Physical retail outlet of a chain."""

    __tablename__ = "store_locations"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)  # e.g. "HD-0206"
    chain: Mapped[str] = mapped_column(String(32), nullable=False, index=True)  # retailer id
    store_number: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(String(64), nullable=False)
    state: Mapped[str] = mapped_column(String(2), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(5), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    store_hours: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class Scan(Base):
    """One user-initiated deal search against a retailer."""

    __tablename__ = "scans"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(String(64), ForeignKey("users.id"), nullable=False)
    retailer: Mapped[str] = mapped_column(String(32), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(5), nullable=False)
    plan: Mapped[str] = mapped_column(String(32), default="free", nullable=False)  # snapshot at creation

    # Product selection and filters
    product_selection: Mapped[str] = mapped_column(String(16), default="all", nullable=False)  # all, specific
    specific_skus: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    clearance_only: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    price_range: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    minimum_discount_percent: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    minimum_dollars_off: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    sort_by: Mapped[str] = mapped_column(String(32), default="discount-percent", nullable=False)

    # Lifecycle
    store_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)  # pending, running, completed, failed
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    started_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    result_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    clearance_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="scans")
    results: Mapped[list["ScanResult"]] = relationship(
        "ScanResult", back_populates="scan", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_scans_user_created", "user_id", "created_at"),)

    @property
    def is_terminal(self) -> bool:
        return self.status in ("completed", "failed")


class ScanResult(Base):
    """One discovered product observation tied to a scan."""

    __tablename__ = "scan_results"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    scan_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("scans.id", ondelete="CASCADE"), nullable=False, index=True
    )
    store_id: Mapped[str] = mapped_column(String(32), nullable=False)
    product_name: Mapped[str] = mapped_column(Text, nullable=False)
    sku: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    product_url: Mapped[str] = mapped_column(Text, nullable=False)
    clearance_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    was_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    save_percent: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    in_stock: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    delivery_available: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_on_clearance: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_price_suppressed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    source: Mapped[str] = mapped_column(String(8), default="mock", nullable=False)  # mock, alt, api
    observed_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    purchase_in_store: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    store_name: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)

    scan: Mapped["Scan"] = relationship("Scan", back_populates="results")


class Observation(Base):
    """Cached verification of one product at one store, independent of any scan."""

    __tablename__ = "observations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    store_id: Mapped[str] = mapped_column(String(32), nullable=False)
    product_url: Mapped[str] = mapped_column(Text, nullable=False)
    sku: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    clearance_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    was_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    save_percent: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    in_stock: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    delivery_available: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_on_clearance: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    source: Mapped[str] = mapped_column(String(8), default="alt", nullable=False)
    observed_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False, index=True)

    __table_args__ = (
        Index("ix_observations_key_observed", "store_id", "product_url", "observed_at"),
    )
