# Creator Tools Models
# Creator-owned records backing the deals CRM, invoicing, idea vault,
# calendar, analytics and media kit screens.

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, JSON, Float
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from database.models import Base, generate_uuid, enum_column


# ============================================================================
# ENUMS
# ============================================================================

class DealStatusDB(str, enum.Enum):
    NEW = "new"
    NEGOTIATING = "negotiating"
    ACTIVE = "active"
    COMPLETED = "completed"
    LOST = "lost"


class InvoiceStatusDB(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class IdeaStatusDB(str, enum.Enum):
    DRAFT = "draft"
    PLANNED = "planned"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class IdeaPriorityDB(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ============================================================================
# DEALS CRM
# ============================================================================

class Deal(Base):
    __tablename__ = "deals"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    brand = Column(String(200))  # free-text counterparty name
    value = Column(Float)
    status = Column(enum_column(DealStatusDB, "dealstatus"), nullable=False, default=DealStatusDB.NEW)
    notes = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    creator = relationship("Creator", back_populates="deals")
    invoices = relationship("Invoice", back_populates="deal")


# ============================================================================
# INVOICING
# ============================================================================

class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    deal_id = Column(String(36), ForeignKey("deals.id", ondelete="SET NULL"), nullable=True)

    invoice_number = Column(String(50), nullable=False)
    issue_date = Column(DateTime, nullable=False)
    due_date = Column(DateTime)
    status = Column(enum_column(InvoiceStatusDB, "invoicestatus"), nullable=False, default=InvoiceStatusDB.DRAFT)

    # Client details
    client_name = Column(String(200))
    client_email = Column(String(255))
    client_company = Column(String(200))
    client_address = Column(String(500))
    client_city = Column(String(100))
    client_state = Column(String(100))
    client_zip = Column(String(20))
    client_country = Column(String(100))
    client_tax_id = Column(String(50))
    payment_terms = Column(String(200))

    currency = Column(String(3), default="USD")
    subtotal = Column(Float)
    tax = Column(Float)
    total = Column(Float)
    notes = Column(Text)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    creator = relationship("Creator", back_populates="invoices")
    deal = relationship("Deal", back_populates="invoices")
    items = relationship("InvoiceItem", back_populates="invoice", cascade="all, delete-orphan")


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    invoice_id = Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False)
    description = Column(String(500), nullable=False)
    quantity = Column(Float, nullable=False, default=1)
    unit_price = Column(Float, nullable=False, default=0)
    total = Column(Float, nullable=False, default=0)

    invoice = relationship("Invoice", back_populates="items")


# ============================================================================
# IDEA VAULT
# ============================================================================

class Idea(Base):
    __tablename__ = "ideas"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    tags = Column(JSON, default=list)
    status = Column(enum_column(IdeaStatusDB, "ideastatus"), nullable=False, default=IdeaStatusDB.DRAFT)
    priority = Column(enum_column(IdeaPriorityDB, "ideapriority"), nullable=False, default=IdeaPriorityDB.MEDIUM)
    attachments = Column(JSON, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    creator = relationship("Creator", back_populates="ideas")


# ============================================================================
# CALENDAR
# ============================================================================

class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    start_at = Column(DateTime, nullable=False)
    end_at = Column(DateTime)
    location = Column(String(200))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    creator = relationship("Creator", back_populates="events")


# ============================================================================
# ANALYTICS
# ============================================================================

class AnalyticsSnapshot(Base):
    __tablename__ = "analytics_snapshots"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    platform = Column(String(50), nullable=False)
    date = Column(DateTime, server_default=func.now())
    followers = Column(Integer)
    engagement_rate = Column(Float)
    reach = Column(Integer)
    impressions = Column(Integer)

    creator = relationship("Creator", back_populates="analytics")


# ============================================================================
# MEDIA KIT
# ============================================================================

class MediaKit(Base):
    __tablename__ = "media_kits"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), unique=True, nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    creator = relationship("Creator", back_populates="media_kit")
