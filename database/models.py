# Database Models for the Inverso marketplace: accounts and profiles

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, JSON, Enum, Boolean, Float
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func
import uuid
import enum

Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


def enum_column(enum_cls, name):
    """Enum column persisted by value (lowercase strings)."""
    return Enum(enum_cls, values_callable=lambda x: [e.value for e in x], name=name)


# Enums
class UserRole(str, enum.Enum):
    CREATOR = "creator"
    BRAND = "brand"
    ADMIN = "admin"


# Models
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(enum_column(UserRole, "userrole"), nullable=False, default=UserRole.CREATOR)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    creator = relationship("Creator", back_populates="user", uselist=False, cascade="all, delete-orphan")
    brand = relationship("Brand", back_populates="user", uselist=False, cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class Creator(Base):
    """Content creator profile, one per user."""
    __tablename__ = "creators"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    username = Column(String(30), unique=True, nullable=False, index=True)
    display_name = Column(String(100), nullable=False)
    bio = Column(Text)
    avatar_url = Column(String(500))

    instagram_handle = Column(String(100))
    instagram_followers = Column(Integer)
    tiktok_handle = Column(String(100))
    tiktok_followers = Column(Integer)
    youtube_handle = Column(String(100))
    youtube_followers = Column(Integer)
    avg_engagement_rate = Column(Float)  # percent, 0-100

    base_price = Column(Float)
    age = Column(Integer)
    gender = Column(String(20))
    location = Column(String(100))
    categories = Column(JSON, default=list)  # lowercase, deduplicated

    is_verified = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="creator")
    applications = relationship("CampaignApplication", back_populates="creator", cascade="all, delete-orphan")
    shortlists = relationship("Shortlist", back_populates="creator", cascade="all, delete-orphan")
    deals = relationship("Deal", back_populates="creator", cascade="all, delete-orphan")
    invoices = relationship("Invoice", back_populates="creator", cascade="all, delete-orphan")
    ideas = relationship("Idea", back_populates="creator", cascade="all, delete-orphan")
    events = relationship("Event", back_populates="creator", cascade="all, delete-orphan")
    analytics = relationship("AnalyticsSnapshot", back_populates="creator", cascade="all, delete-orphan")
    media_kit = relationship("MediaKit", back_populates="creator", uselist=False, cascade="all, delete-orphan")

    @property
    def total_followers(self) -> int:
        return (self.instagram_followers or 0) + (self.tiktok_followers or 0) + (self.youtube_followers or 0)


class Brand(Base):
    """Company profile, one per user."""
    __tablename__ = "brands"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    company_name = Column(String(100), nullable=False)
    description = Column(Text)
    logo_url = Column(String(500))
    website = Column(String(500))
    industry = Column(String(50))
    contact_email = Column(String(255))
    contact_phone = Column(String(20))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="brand")
    campaigns = relationship("Campaign", back_populates="brand", cascade="all, delete-orphan")
    shortlists = relationship("Shortlist", back_populates="brand", cascade="all, delete-orphan")
