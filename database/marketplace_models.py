# Marketplace Models: campaigns, applications and shortlists
# Import these in addition to the account models in database/models.py

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, JSON, Float, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

# Use the same Base from existing models
from database.models import Base, generate_uuid, enum_column


# ============================================================================
# ENUMS
# ============================================================================

class CampaignStatusDB(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ApplicationStatusDB(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class CreatorResponseDB(str, enum.Enum):
    ACCEPTED = "accepted"
    DECLINED = "declined"


# ============================================================================
# CAMPAIGN
# ============================================================================

class Campaign(Base):
    """Brand-defined collaboration opportunity."""
    __tablename__ = "campaigns"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    brand_id = Column(String(36), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    budget = Column(Float, nullable=False, default=0)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    deliverables = Column(JSON, nullable=False, default=list)
    requirements = Column(JSON, default=list)
    target_audience = Column(String(500))
    preferred_categories = Column(JSON, default=list)
    min_followers = Column(Integer)
    max_followers = Column(Integer)

    status = Column(enum_column(CampaignStatusDB, "campaignstatus"), nullable=False, default=CampaignStatusDB.DRAFT)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    brand = relationship("Brand", back_populates="campaigns")
    applications = relationship("CampaignApplication", back_populates="campaign", cascade="all, delete-orphan")


# ============================================================================
# CAMPAIGN APPLICATION
# ============================================================================

class CampaignApplication(Base):
    """Association between a creator and a campaign.

    Status is driven by the brand (pending -> approved/rejected); creator_response is
    set once by the creator after approval and never cleared.
    """
    __tablename__ = "campaign_applications"
    __table_args__ = (
        UniqueConstraint("campaign_id", "creator_id", name="uq_campaign_application_pair"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    campaign_id = Column(String(36), ForeignKey("campaigns.id", ondelete="CASCADE"), nullable=False, index=True)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)

    status = Column(enum_column(ApplicationStatusDB, "applicationstatus"), nullable=False, default=ApplicationStatusDB.PENDING)
    proposed_price = Column(Float)
    message = Column(Text)
    portfolio = Column(JSON, default=list)

    creator_response = Column(enum_column(CreatorResponseDB, "creatorresponse"), nullable=True)
    responded_at = Column(DateTime)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    campaign = relationship("Campaign", back_populates="applications")
    creator = relationship("Creator", back_populates="applications")


# ============================================================================
# SHORTLIST
# ============================================================================

class Shortlist(Base):
    """Brand-private bookmark of a creator."""
    __tablename__ = "shortlists"
    __table_args__ = (
        UniqueConstraint("brand_id", "creator_id", name="uq_shortlist_brand_creator"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    brand_id = Column(String(36), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
    creator_id = Column(String(36), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False)
    notes = Column(Text)

    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    brand = relationship("Brand", back_populates="shortlists")
    creator = relationship("Creator", back_populates="shortlists")
