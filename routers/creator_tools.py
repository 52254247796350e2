# Creator Tools Router
# Deals CRM, invoices, idea vault, calendar, analytics and media kit.
# Every route is scoped to /creators/{creator_id} and requires the owner or an admin.

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from database.config import get_db
from database.models import Creator
from database.creator_tools_models import (
    Deal, DealStatusDB,
    Invoice, InvoiceItem, InvoiceStatusDB,
    Idea, IdeaStatusDB, IdeaPriorityDB,
    Event, AnalyticsSnapshot, MediaKit,
)
from schemas.creator_tools import (
    DealCreate, DealUpdate, DealResponse,
    InvoiceCreate, InvoiceUpdate, InvoiceResponse,
    IdeaCreate, IdeaUpdate, IdeaResponse,
    EventCreate, EventUpdate, EventResponse,
    AnalyticsSnapshotCreate, AnalyticsSnapshotResponse,
    MediaKitResponse,
)
from auth.decorators import require_creator_owner
from core.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/creators", tags=["Creator Tools"])

ANALYTICS_LIMIT = 100


def _owned(db: Session, model, record_id: str, creator: Creator, label: str):
    """Fetch a creator-owned record; records of other creators read as missing."""
    record = db.query(model).filter(model.id == record_id).first()
    if not record or record.creator_id != creator.id:
        raise NotFoundError(f"{label} not found")
    return record


def _apply(record, changes: dict) -> None:
    for field, value in changes.items():
        if value is not None:
            setattr(record, field, value)


# ============================================================================
# DEALS
# ============================================================================

@router.get("/{creator_id}/deals")
def list_deals(creator: Creator = Depends(require_creator_owner()), db: Session = Depends(get_db)):
    deals = db.query(Deal).filter(Deal.creator_id == creator.id).order_by(Deal.updated_at.desc()).all()
    return {"items": [DealResponse.model_validate(d) for d in deals]}


@router.post("/{creator_id}/deals", response_model=DealResponse, status_code=status.HTTP_201_CREATED)
def create_deal(
    deal_data: DealCreate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    data = deal_data.model_dump()
    data["status"] = DealStatusDB(data["status"])
    deal = Deal(creator_id=creator.id, **data)
    db.add(deal)
    db.commit()
    db.refresh(deal)
    return deal


@router.put("/{creator_id}/deals/{deal_id}", response_model=DealResponse)
def update_deal(
    deal_id: str,
    deal_data: DealUpdate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    deal = _owned(db, Deal, deal_id, creator, "Deal")
    changes = deal_data.model_dump(exclude_unset=True)
    if changes.get("status"):
        changes["status"] = DealStatusDB(changes["status"])
    _apply(deal, changes)
    db.commit()
    db.refresh(deal)
    return deal


@router.delete("/{creator_id}/deals/{deal_id}")
def delete_deal(
    deal_id: str,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    db.delete(_owned(db, Deal, deal_id, creator, "Deal"))
    db.commit()
    return {"message": "Deal deleted"}


# ============================================================================
# INVOICES
# ============================================================================

@router.get("/{creator_id}/invoices")
def list_invoices(creator: Creator = Depends(require_creator_owner()), db: Session = Depends(get_db)):
    invoices = (
        db.query(Invoice)
        .filter(Invoice.creator_id == creator.id)
        .order_by(Invoice.issue_date.desc())
        .all()
    )
    return {"items": [InvoiceResponse.model_validate(i) for i in invoices]}


@router.post("/{creator_id}/invoices", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    invoice_data: InvoiceCreate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    if invoice_data.deal_id:
        _owned(db, Deal, invoice_data.deal_id, creator, "Deal")

    data = invoice_data.model_dump(exclude={"items"})
    data["status"] = InvoiceStatusDB(data["status"])
    invoice = Invoice(creator_id=creator.id, **data)
    invoice.items = [InvoiceItem(**item.model_dump()) for item in invoice_data.items]

    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    logger.info("Invoice %s created for creator %s", invoice.invoice_number, creator.id)
    return invoice


@router.put("/{creator_id}/invoices/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: str,
    invoice_data: InvoiceUpdate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    invoice = _owned(db, Invoice, invoice_id, creator, "Invoice")
    changes = invoice_data.model_dump(exclude_unset=True)
    if changes.get("status"):
        changes["status"] = InvoiceStatusDB(changes["status"])
    _apply(invoice, changes)
    db.commit()
    db.refresh(invoice)
    return invoice


@router.delete("/{creator_id}/invoices/{invoice_id}")
def delete_invoice(
    invoice_id: str,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    db.delete(_owned(db, Invoice, invoice_id, creator, "Invoice"))
    db.commit()
    return {"message": "Invoice deleted"}


# ============================================================================
# IDEAS
# ============================================================================

@router.get("/{creator_id}/ideas")
def list_ideas(creator: Creator = Depends(require_creator_owner()), db: Session = Depends(get_db)):
    ideas = db.query(Idea).filter(Idea.creator_id == creator.id).order_by(Idea.updated_at.desc()).all()
    return {"items": [IdeaResponse.model_validate(i) for i in ideas]}


@router.post("/{creator_id}/ideas", response_model=IdeaResponse, status_code=status.HTTP_201_CREATED)
def create_idea(
    idea_data: IdeaCreate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    data = idea_data.model_dump()
    data["status"] = IdeaStatusDB(data["status"])
    data["priority"] = IdeaPriorityDB(data["priority"])
    idea = Idea(creator_id=creator.id, **data)
    db.add(idea)
    db.commit()
    db.refresh(idea)
    return idea


@router.put("/{creator_id}/ideas/{idea_id}", response_model=IdeaResponse)
def update_idea(
    idea_id: str,
    idea_data: IdeaUpdate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    idea = _owned(db, Idea, idea_id, creator, "Idea")
    changes = idea_data.model_dump(exclude_unset=True)
    if changes.get("status"):
        changes["status"] = IdeaStatusDB(changes["status"])
    if changes.get("priority"):
        changes["priority"] = IdeaPriorityDB(changes["priority"])
    _apply(idea, changes)
    db.commit()
    db.refresh(idea)
    return idea


@router.delete("/{creator_id}/ideas/{idea_id}")
def delete_idea(
    idea_id: str,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    db.delete(_owned(db, Idea, idea_id, creator, "Idea"))
    db.commit()
    return {"message": "Idea deleted"}


# ============================================================================
# CALENDAR EVENTS
# ============================================================================

@router.get("/{creator_id}/events")
def list_events(creator: Creator = Depends(require_creator_owner()), db: Session = Depends(get_db)):
    events = db.query(Event).filter(Event.creator_id == creator.id).order_by(Event.start_at.asc()).all()
    return {"events": [EventResponse.model_validate(e) for e in events]}


@router.post("/{creator_id}/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    event_data: EventCreate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    event = Event(creator_id=creator.id, **event_data.model_dump())
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


@router.get("/{creator_id}/events/{event_id}", response_model=EventResponse)
def get_event(
    event_id: str,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    return _owned(db, Event, event_id, creator, "Event")


@router.put("/{creator_id}/events/{event_id}", response_model=EventResponse)
def update_event(
    event_id: str,
    event_data: EventUpdate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    event = _owned(db, Event, event_id, creator, "Event")
    changes = event_data.model_dump(exclude_unset=True)
    start = changes.get("start_at") or event.start_at
    end = changes.get("end_at") or event.end_at
    if end is not None and end < start:
        raise ValidationError("Validation error", details=["end_at: end_at must not be before start_at"])

    _apply(event, changes)
    db.commit()
    db.refresh(event)
    return event


@router.delete("/{creator_id}/events/{event_id}")
def delete_event(
    event_id: str,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    db.delete(_owned(db, Event, event_id, creator, "Event"))
    db.commit()
    return {"message": "Event deleted"}


# ============================================================================
# ANALYTICS
# ============================================================================

@router.get("/{creator_id}/analytics")
def list_analytics(
    platform: Optional[str] = None,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    """Most recent snapshots first, capped at 100."""
    query = db.query(AnalyticsSnapshot).filter(AnalyticsSnapshot.creator_id == creator.id)
    if platform:
        query = query.filter(AnalyticsSnapshot.platform == platform)
    snapshots = query.order_by(AnalyticsSnapshot.date.desc()).limit(ANALYTICS_LIMIT).all()
    return {"items": [AnalyticsSnapshotResponse.model_validate(s) for s in snapshots]}


@router.post("/{creator_id}/analytics", response_model=AnalyticsSnapshotResponse, status_code=status.HTTP_201_CREATED)
def create_analytics_snapshot(
    snapshot_data: AnalyticsSnapshotCreate,
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    data = snapshot_data.model_dump()
    if data["date"] is None:
        data.pop("date")
    snapshot = AnalyticsSnapshot(creator_id=creator.id, **data)
    db.add(snapshot)
    db.commit()
    db.refresh(snapshot)
    return snapshot


# ============================================================================
# MEDIA KIT
# ============================================================================

@router.get("/{creator_id}/mediakit")
def get_media_kit(creator: Creator = Depends(require_creator_owner()), db: Session = Depends(get_db)):
    media_kit = db.query(MediaKit).filter(MediaKit.creator_id == creator.id).first()
    return {"item": MediaKitResponse.model_validate(media_kit) if media_kit else None}


@router.put("/{creator_id}/mediakit")
def save_media_kit(
    payload: Dict[str, Any] = Body(...),
    creator: Creator = Depends(require_creator_owner()),
    db: Session = Depends(get_db),
):
    """Create or replace the media kit. Accepts {"data": {...}} or the document itself."""
    data = payload.get("data") if payload.get("data") is not None else payload
    if not isinstance(data, dict):
        raise ValidationError("Media kit data must be an object")

    media_kit = db.query(MediaKit).filter(MediaKit.creator_id == creator.id).first()
    if media_kit:
        media_kit.data = data
    else:
        media_kit = MediaKit(creator_id=creator.id, data=data)
        db.add(media_kit)

    db.commit()
    db.refresh(media_kit)
    return {"message": "Media kit saved", "item": MediaKitResponse.model_validate(media_kit)}
