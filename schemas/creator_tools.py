# Pydantic Schemas for the creator workspace tools
# Deals CRM, invoicing, idea vault, calendar, analytics and media kit

from pydantic import BaseModel, Field, validator
from typing import Optional, List, Any, Dict
from datetime import datetime

from schemas.marketplace import to_naive_utc


# ============================================================================
# STATUS NORMALIZATION
# ============================================================================

DEAL_STATUS_ALIASES = {
    "paid": "completed",
    "completed": "completed",
    "pending": "active",
    "active": "active",
    "negotiating": "negotiating",
    "lost": "lost",
}

INVOICE_STATUSES = ("sent", "paid", "overdue")
IDEA_STATUSES = ("draft", "planned", "published", "archived")
IDEA_PRIORITIES = ("low", "medium", "high")


def normalize_deal_status(value) -> str:
    return DEAL_STATUS_ALIASES.get(str(value or "").strip().lower(), "new")


def normalize_invoice_status(value) -> str:
    key = str(value or "").strip().lower()
    return key if key in INVOICE_STATUSES else "draft"


def normalize_choice(value, choices) -> Optional[str]:
    """Return the lowercased value when it is one of ``choices``, else None."""
    key = str(value or "").strip().lower()
    return key if key in choices else None


def stored_value(v):
    """Stored enums come back as Enum members; responses carry their value."""
    return getattr(v, "value", v)


# ============================================================================
# DEALS
# ============================================================================

class DealCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    brand: Optional[str] = Field(None, max_length=200)
    value: Optional[float] = None
    status: str = "new"
    notes: Optional[str] = None

    @validator("status", pre=True, always=True)
    def map_status(cls, v):
        return normalize_deal_status(v)


class DealUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    brand: Optional[str] = Field(None, max_length=200)
    value: Optional[float] = None
    status: Optional[str] = None
    notes: Optional[str] = None

    @validator("status", pre=True)
    def map_status(cls, v):
        return normalize_deal_status(v) if v else None


class DealResponse(BaseModel):
    id: str
    creator_id: str
    title: str
    brand: Optional[str] = None
    value: Optional[float] = None
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @validator("status", pre=True)
    def status_value(cls, v):
        return stored_value(v)

    class Config:
        from_attributes = True


# ============================================================================
# INVOICES
# ============================================================================

class InvoiceItemCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=500)
    quantity: float = 1
    unit_price: float = 0
    total: Optional[float] = None

    @validator("total", always=True)
    def default_line_total(cls, v, values):
        if v:
            return v
        return values.get("quantity", 1) * values.get("unit_price", 0)


class InvoiceItemResponse(BaseModel):
    id: str
    description: str
    quantity: float
    unit_price: float
    total: float

    class Config:
        from_attributes = True


class InvoiceClientFields(BaseModel):
    client_name: Optional[str] = Field(None, max_length=200)
    client_email: Optional[str] = Field(None, max_length=255)
    client_company: Optional[str] = Field(None, max_length=200)
    client_address: Optional[str] = Field(None, max_length=500)
    client_city: Optional[str] = Field(None, max_length=100)
    client_state: Optional[str] = Field(None, max_length=100)
    client_zip: Optional[str] = Field(None, max_length=20)
    client_country: Optional[str] = Field(None, max_length=100)
    client_tax_id: Optional[str] = Field(None, max_length=50)
    payment_terms: Optional[str] = Field(None, max_length=200)


class InvoiceCreate(InvoiceClientFields):
    invoice_number: str = Field(..., min_length=1, max_length=50)
    issue_date: datetime
    due_date: Optional[datetime] = None
    status: str = "draft"
    currency: str = Field("USD", max_length=3)
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    notes: Optional[str] = None
    deal_id: Optional[str] = None
    items: List[InvoiceItemCreate] = []

    @validator("status", pre=True, always=True)
    def map_status(cls, v):
        return normalize_invoice_status(v)

    @validator("currency", pre=True, always=True)
    def default_currency(cls, v):
        return (v or "USD").upper()

    @validator("issue_date", "due_date")
    def dates_utc(cls, v):
        return to_naive_utc(v)


class InvoiceUpdate(InvoiceClientFields):
    status: Optional[str] = None
    currency: Optional[str] = Field(None, max_length=3)
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    notes: Optional[str] = None

    @validator("status", pre=True)
    def map_status(cls, v):
        return normalize_invoice_status(v) if v else None


class InvoiceResponse(InvoiceClientFields):
    id: str
    creator_id: str
    deal_id: Optional[str] = None
    invoice_number: str
    issue_date: datetime
    due_date: Optional[datetime] = None
    status: str
    currency: Optional[str] = None
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    notes: Optional[str] = None
    items: List[InvoiceItemResponse] = []
    created_at: Optional[datetime] = None

    @validator("status", pre=True)
    def status_value(cls, v):
        return stored_value(v)

    class Config:
        from_attributes = True


# ============================================================================
# IDEAS
# ============================================================================

class IdeaCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    tags: List[str] = []
    status: str = "draft"
    priority: str = "medium"
    attachments: List[str] = []

    @validator("status", pre=True, always=True)
    def map_status(cls, v):
        return normalize_choice(v, IDEA_STATUSES) or "draft"

    @validator("priority", pre=True, always=True)
    def map_priority(cls, v):
        return normalize_choice(v, IDEA_PRIORITIES) or "medium"


class IdeaUpdate(BaseModel):
    """Unknown status or priority values leave the stored value untouched."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    attachments: Optional[List[str]] = None

    @validator("status", pre=True)
    def map_status(cls, v):
        return normalize_choice(v, IDEA_STATUSES)

    @validator("priority", pre=True)
    def map_priority(cls, v):
        return normalize_choice(v, IDEA_PRIORITIES)


class IdeaResponse(BaseModel):
    id: str
    creator_id: str
    title: str
    description: Optional[str] = None
    tags: List[str] = []
    status: str
    priority: str
    attachments: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @validator("status", "priority", pre=True)
    def choice_value(cls, v):
        return stored_value(v)

    class Config:
        from_attributes = True


# ============================================================================
# CALENDAR EVENTS
# ============================================================================

class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    start_at: datetime
    end_at: Optional[datetime] = None
    location: Optional[str] = Field(None, max_length=200)

    @validator("start_at", "end_at")
    def dates_utc(cls, v):
        return to_naive_utc(v)

    @validator("end_at")
    def end_after_start(cls, v, values):
        start = values.get("start_at")
        if v is not None and start is not None and v < start:
            raise ValueError("end_at must not be before start_at")
        return v


class EventUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    location: Optional[str] = Field(None, max_length=200)

    @validator("start_at", "end_at")
    def dates_utc(cls, v):
        return to_naive_utc(v)


class EventResponse(BaseModel):
    id: str
    creator_id: str
    title: str
    description: Optional[str] = None
    start_at: datetime
    end_at: Optional[datetime] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ============================================================================
# ANALYTICS & MEDIA KIT
# ============================================================================

class AnalyticsSnapshotCreate(BaseModel):
    platform: str = Field(..., min_length=1, max_length=50)
    date: Optional[datetime] = None
    followers: Optional[int] = Field(None, ge=0)
    engagement_rate: Optional[float] = Field(None, ge=0)
    reach: Optional[int] = Field(None, ge=0)
    impressions: Optional[int] = Field(None, ge=0)

    @validator("date")
    def date_utc(cls, v):
        return to_naive_utc(v)


class AnalyticsSnapshotResponse(BaseModel):
    id: str
    creator_id: str
    platform: str
    date: Optional[datetime] = None
    followers: Optional[int] = None
    engagement_rate: Optional[float] = None
    reach: Optional[int] = None
    impressions: Optional[int] = None

    class Config:
        from_attributes = True


class MediaKitResponse(BaseModel):
    id: str
    creator_id: str
    data: Dict[str, Any] = {}
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
