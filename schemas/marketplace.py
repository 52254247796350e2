# Pydantic Schemas for the Creator/Brand Marketplace
# Organized in a modular structure for maintainability

from pydantic import BaseModel, EmailStr, Field, validator
from typing import Optional, List
from datetime import datetime, timezone
from enum import Enum
from urllib.parse import urlparse

from core.categories import normalize_categories


# ============================================================================
# ENUMS
# ============================================================================

class UserTypeEnum(str, Enum):
    CREATOR = "creator"
    BRAND = "brand"
    ADMIN = "admin"


class CampaignStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class CreatorResponse(str, Enum):
    ACCEPTED = "accepted"
    DECLINED = "declined"


# ============================================================================
# SHARED VALIDATION HELPERS
# ============================================================================

def lowercase_enum_value(v):
    """Accept enum values in any case ("APPROVED", "approved")."""
    return v.lower() if isinstance(v, str) else v


def to_naive_utc(v: Optional[datetime]) -> Optional[datetime]:
    """Store datetimes as naive UTC so they compare with database values."""
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


def validate_urls(urls: Optional[List[str]]) -> Optional[List[str]]:
    if urls is None:
        return urls
    for url in urls:
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"'{url}' is not a valid URL")
    return urls


# ============================================================================
# AUTH & USER SCHEMAS
# ============================================================================

class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserTypeEnum

    @validator("role", pre=True)
    def role_case(cls, v):
        return lowercase_enum_value(v)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserRoleUpdate(BaseModel):
    role: UserTypeEnum

    @validator("role", pre=True)
    def role_case(cls, v):
        return lowercase_enum_value(v)


class UserResponse(BaseModel):
    id: str
    email: str
    role: UserTypeEnum
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    user: UserResponse
    token: str


# ============================================================================
# CREATOR SCHEMAS
# ============================================================================

class CreatorProfileCreate(BaseModel):
    """Schema for creating a creator profile."""
    username: str = Field(..., min_length=3, max_length=30)
    display_name: str = Field(..., min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    avatar_url: Optional[str] = Field(None, max_length=500)
    instagram_handle: Optional[str] = Field(None, max_length=50)
    instagram_followers: Optional[int] = Field(None, ge=0)
    tiktok_handle: Optional[str] = Field(None, max_length=50)
    tiktok_followers: Optional[int] = Field(None, ge=0)
    youtube_handle: Optional[str] = Field(None, max_length=50)
    youtube_followers: Optional[int] = Field(None, ge=0)
    avg_engagement_rate: Optional[float] = Field(None, ge=0, le=100)
    age: Optional[int] = Field(None, ge=13, le=100)
    location: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    categories: Optional[List[str]] = None
    base_price: Optional[float] = Field(None, ge=0)

    @validator("username")
    def username_alphanumeric(cls, v):
        if not v.isalnum():
            raise ValueError("Username must only contain letters and numbers")
        return v

    @validator("categories")
    def clean_categories(cls, v):
        return normalize_categories(v)


class CreatorProfileUpdate(BaseModel):
    """Schema for updating a creator profile."""
    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    avatar_url: Optional[str] = Field(None, max_length=500)
    instagram_handle: Optional[str] = Field(None, max_length=50)
    instagram_followers: Optional[int] = Field(None, ge=0)
    tiktok_handle: Optional[str] = Field(None, max_length=50)
    tiktok_followers: Optional[int] = Field(None, ge=0)
    youtube_handle: Optional[str] = Field(None, max_length=50)
    youtube_followers: Optional[int] = Field(None, ge=0)
    avg_engagement_rate: Optional[float] = Field(None, ge=0, le=100)
    age: Optional[int] = Field(None, ge=13, le=100)
    location: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    categories: Optional[List[str]] = None
    base_price: Optional[float] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @validator("categories")
    def clean_categories(cls, v):
        return normalize_categories(v) if v is not None else v


class CreatorProfileResponse(BaseModel):
    """Schema for creator profile response."""
    id: str
    user_id: str
    username: str
    display_name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    instagram_handle: Optional[str] = None
    instagram_followers: Optional[int] = None
    tiktok_handle: Optional[str] = None
    tiktok_followers: Optional[int] = None
    youtube_handle: Optional[str] = None
    youtube_followers: Optional[int] = None
    avg_engagement_rate: Optional[float] = None
    base_price: Optional[float] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    location: Optional[str] = None
    categories: List[str] = []
    is_verified: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RankedCreatorResponse(CreatorProfileResponse):
    reach_score: float


class CreatorStatsResponse(BaseModel):
    total_applications: int
    approved_applications: int
    pending_applications: int
    rejected_applications: int
    shortlist_count: int
    approval_rate: float


# ============================================================================
# BRAND SCHEMAS
# ============================================================================

class BrandProfileCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    logo_url: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=500)
    industry: Optional[str] = Field(None, max_length=50)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)

    @validator("website")
    def website_is_url(cls, v):
        if v is not None:
            validate_urls([v])
        return v


class BrandProfileUpdate(BaseModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    logo_url: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=500)
    industry: Optional[str] = Field(None, max_length=50)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)

    @validator("website")
    def website_is_url(cls, v):
        if v is not None:
            validate_urls([v])
        return v


class BrandProfileResponse(BaseModel):
    id: str
    user_id: str
    company_name: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ============================================================================
# CAMPAIGN SCHEMAS
# ============================================================================

class CampaignCreate(BaseModel):
    """Schema for creating a campaign."""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    budget: float = Field(..., ge=0)
    start_date: datetime
    end_date: datetime
    deliverables: List[str] = Field(..., min_length=1)
    requirements: Optional[List[str]] = None
    target_audience: Optional[str] = Field(None, max_length=500)
    preferred_categories: Optional[List[str]] = None
    min_followers: Optional[int] = Field(None, ge=0)
    max_followers: Optional[int] = Field(None, ge=0)

    @validator("start_date", "end_date")
    def dates_utc(cls, v):
        return to_naive_utc(v)

    @validator("end_date")
    def end_after_start(cls, v, values):
        start = values.get("start_date")
        if start is not None and v <= start:
            raise ValueError("end_date must be after start_date")
        return v

    @validator("max_followers")
    def max_not_below_min(cls, v, values):
        minimum = values.get("min_followers")
        if v is not None and minimum is not None and v < minimum:
            raise ValueError("max_followers must be greater than or equal to min_followers")
        return v

    @validator("preferred_categories")
    def clean_categories(cls, v):
        return normalize_categories(v) if v is not None else v


class CampaignUpdate(BaseModel):
    """Partial update. Cross-field rules are checked against the stored campaign."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    budget: Optional[float] = Field(None, ge=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    deliverables: Optional[List[str]] = Field(None, min_length=1)
    requirements: Optional[List[str]] = None
    target_audience: Optional[str] = Field(None, max_length=500)
    preferred_categories: Optional[List[str]] = None
    min_followers: Optional[int] = Field(None, ge=0)
    max_followers: Optional[int] = Field(None, ge=0)
    status: Optional[CampaignStatus] = None

    @validator("start_date", "end_date")
    def dates_utc(cls, v):
        return to_naive_utc(v)

    @validator("status", pre=True)
    def status_case(cls, v):
        return lowercase_enum_value(v)

    @validator("preferred_categories")
    def clean_categories(cls, v):
        return normalize_categories(v) if v is not None else v


class BrandSummary(BaseModel):
    id: str
    company_name: str
    logo_url: Optional[str] = None
    industry: Optional[str] = None

    class Config:
        from_attributes = True


class CampaignResponse(BaseModel):
    id: str
    brand_id: str
    title: str
    description: str
    budget: float
    start_date: datetime
    end_date: datetime
    deliverables: List[str] = []
    requirements: Optional[List[str]] = None
    target_audience: Optional[str] = None
    preferred_categories: Optional[List[str]] = None
    min_followers: Optional[int] = None
    max_followers: Optional[int] = None
    status: CampaignStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    brand: Optional[BrandSummary] = None

    class Config:
        from_attributes = True


class CampaignListResponse(BaseModel):
    items: List[CampaignResponse]
    page: int
    page_size: int
    total: int
    pages: int


# ============================================================================
# APPLICATION SCHEMAS
# ============================================================================

class ApplicationCreate(BaseModel):
    """Creator applying to a campaign."""
    proposed_price: Optional[float] = Field(None, ge=0)
    message: Optional[str] = Field(None, max_length=1000)
    portfolio: Optional[List[str]] = None

    @validator("portfolio")
    def portfolio_urls(cls, v):
        return validate_urls(v)


class ApplicationUpdate(BaseModel):
    """Brand-side update of an application."""
    proposed_price: Optional[float] = Field(None, ge=0)
    message: Optional[str] = Field(None, max_length=1000)
    portfolio: Optional[List[str]] = None
    status: Optional[ApplicationStatus] = None

    @validator("portfolio")
    def portfolio_urls(cls, v):
        return validate_urls(v)

    @validator("status", pre=True)
    def status_case(cls, v):
        return lowercase_enum_value(v)


class CampaignInvite(BaseModel):
    """Brand inviting a creator straight to an approved application."""
    creator_id: str
    proposed_price: Optional[float] = Field(None, ge=0)
    message: Optional[str] = Field(None, max_length=1000)
    portfolio: Optional[List[str]] = None

    @validator("portfolio")
    def portfolio_urls(cls, v):
        return validate_urls(v)


class ApplicationRespond(BaseModel):
    response: CreatorResponse

    @validator("response", pre=True)
    def response_case(cls, v):
        return lowercase_enum_value(v)


class ApplicationResponse(BaseModel):
    id: str
    campaign_id: str
    creator_id: str
    status: ApplicationStatus
    proposed_price: Optional[float] = None
    message: Optional[str] = None
    portfolio: Optional[List[str]] = None
    creator_response: Optional[CreatorResponse] = None
    responded_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ApplicationDetailResponse(ApplicationResponse):
    campaign: Optional[CampaignResponse] = None
    creator: Optional[CreatorProfileResponse] = None


class ApplicationWithCreatorResponse(ApplicationResponse):
    creator: Optional[CreatorProfileResponse] = None


class CampaignDetailResponse(CampaignResponse):
    applications: List[ApplicationWithCreatorResponse] = []


class RespondResult(ApplicationDetailResponse):
    calendar_event_id: Optional[str] = None
    calendar_warning: Optional[str] = None


# ============================================================================
# SHORTLIST SCHEMAS
# ============================================================================

class ShortlistCreate(BaseModel):
    creator_id: str
    notes: Optional[str] = Field(None, max_length=500)


class ShortlistResponse(BaseModel):
    id: str
    brand_id: str
    creator_id: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    creator: Optional[CreatorProfileResponse] = None

    class Config:
        from_attributes = True


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
