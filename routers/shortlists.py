# Shortlist Router
# A brand's private list of creators it is considering

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from database.config import get_db
from database.models import User, Creator
from database.marketplace_models import Shortlist
from schemas.marketplace import ShortlistCreate, ShortlistResponse, SuccessResponse
from auth.roles import UserType
from auth.decorators import require_user_type, get_brand_profile, AuthError
from core.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shortlists", tags=["Shortlists"])


@router.get("")
def list_shortlist(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    brand = get_brand_profile(db, current_user)
    entries = (
        db.query(Shortlist)
        .options(joinedload(Shortlist.creator))
        .filter(Shortlist.brand_id == brand.id)
        .order_by(Shortlist.created_at.desc())
        .all()
    )
    return {"items": [ShortlistResponse.model_validate(e) for e in entries]}


@router.post("", response_model=ShortlistResponse, status_code=status.HTTP_201_CREATED)
def add_to_shortlist(
    entry_data: ShortlistCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    brand = get_brand_profile(db, current_user)

    if not db.query(Creator).filter(Creator.id == entry_data.creator_id).first():
        raise NotFoundError("Creator not found")

    entry = Shortlist(brand_id=brand.id, creator_id=entry_data.creator_id, notes=entry_data.notes)
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Creator is already on your shortlist")
    db.refresh(entry)

    logger.info("Brand %s shortlisted creator %s", brand.id, entry.creator_id)
    return entry


@router.delete("/{entry_id}", response_model=SuccessResponse)
def remove_from_shortlist(
    entry_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_type(UserType.BRAND)),
):
    brand = get_brand_profile(db, current_user)

    entry = db.query(Shortlist).filter(Shortlist.id == entry_id).first()
    if not entry or entry.brand_id != brand.id:
        raise AuthError("Not authorized")

    db.delete(entry)
    db.commit()
    return {"success": True}
