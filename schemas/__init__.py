# Schemas module for the Inverso marketplace
# Organizes all Pydantic schemas in a modular structure

from schemas.marketplace import (
    # Enums
    UserTypeEnum,
    CampaignStatus,
    ApplicationStatus,
    CreatorResponse,

    # Auth & users
    UserRegister,
    UserLogin,
    UserRoleUpdate,
    UserResponse,
    AuthResponse,

    # Creator schemas
    CreatorProfileCreate,
    CreatorProfileUpdate,
    CreatorProfileResponse,
    RankedCreatorResponse,
    CreatorStatsResponse,

    # Brand schemas
    BrandProfileCreate,
    BrandProfileUpdate,
    BrandProfileResponse,
    BrandSummary,

    # Campaign schemas
    CampaignCreate,
    CampaignUpdate,
    CampaignResponse,
    CampaignDetailResponse,
    CampaignListResponse,

    # Application schemas
    ApplicationCreate,
    ApplicationUpdate,
    CampaignInvite,
    ApplicationRespond,
    ApplicationResponse,
    ApplicationDetailResponse,
    ApplicationWithCreatorResponse,
    RespondResult,

    # Shortlist schemas
    ShortlistCreate,
    ShortlistResponse,
    SuccessResponse,
)

from schemas.creator_tools import (
    DealCreate,
    DealUpdate,
    DealResponse,
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    IdeaCreate,
    IdeaUpdate,
    IdeaResponse,
    EventCreate,
    EventUpdate,
    EventResponse,
    AnalyticsSnapshotCreate,
    AnalyticsSnapshotResponse,
    MediaKitResponse,
)

__all__ = [
    # Enums
    "UserTypeEnum",
    "CampaignStatus",
    "ApplicationStatus",
    "CreatorResponse",

    # Auth & users
    "UserRegister",
    "UserLogin",
    "UserRoleUpdate",
    "UserResponse",
    "AuthResponse",

    # Creator
    "CreatorProfileCreate",
    "CreatorProfileUpdate",
    "CreatorProfileResponse",
    "RankedCreatorResponse",
    "CreatorStatsResponse",

    # Brand
    "BrandProfileCreate",
    "BrandProfileUpdate",
    "BrandProfileResponse",
    "BrandSummary",

    # Campaign
    "CampaignCreate",
    "CampaignUpdate",
    "CampaignResponse",
    "CampaignDetailResponse",
    "CampaignListResponse",

    # Application
    "ApplicationCreate",
    "ApplicationUpdate",
    "CampaignInvite",
    "ApplicationRespond",
    "ApplicationResponse",
    "ApplicationDetailResponse",
    "ApplicationWithCreatorResponse",
    "RespondResult",

    # Shortlist
    "ShortlistCreate",
    "ShortlistResponse",
    "SuccessResponse",

    # Creator tools
    "DealCreate",
    "DealUpdate",
    "DealResponse",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceResponse",
    "IdeaCreate",
    "IdeaUpdate",
    "IdeaResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "AnalyticsSnapshotCreate",
    "AnalyticsSnapshotResponse",
    "MediaKitResponse",
]
